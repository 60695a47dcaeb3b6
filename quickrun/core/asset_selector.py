from collections.abc import Sequence
from typing import Final

from .release_types import Asset

DEFAULT_PRODUCT_TOKEN: Final[str] = "quickrun"
DEFAULT_INSTALLER_SUFFIX: Final[str] = ".exe"
_PORTABLE_TOKEN: Final[str] = "portable"


def _is_installer(name: str, suffix: str) -> bool:
    return name.endswith(suffix) and _PORTABLE_TOKEN not in name


def select_installer(
    assets: Sequence[Asset],
    product_token: str = DEFAULT_PRODUCT_TOKEN,
    suffix: str = DEFAULT_INSTALLER_SUFFIX,
) -> str | None:
    """Picks the installer download URL from a release's assets.

    Matching is case-insensitive and runs in two passes: first an asset named
    after the product, then any non-portable asset with the installer suffix.
    The first match within a pass wins, so asset order matters.

    Returns:
        The chosen asset's download URL, or None.
    """
    token = product_token.lower()
    suffix = suffix.lower()

    for asset in assets:
        name = asset.name.lower()
        if token in name and _is_installer(name, suffix):
            return asset.download_url

    for asset in assets:
        if _is_installer(asset.name.lower(), suffix):
            return asset.download_url

    return None
