import json
from typing import Any

from .errors import ParseFailureError
from .release_types import Asset, ReleaseInfo
from .semver import derive_version


def _parse_assets(value: Any) -> tuple[Asset, ...]:
    if not isinstance(value, list):
        return ()

    assets: list[Asset] = []
    for item in value:
        if not isinstance(item, dict):
            continue
        name = item.get("name")
        url = item.get("browser_download_url")
        if not (isinstance(name, str) and isinstance(url, str)):
            continue
        assets.append(Asset(name=name, download_url=url))
    return tuple(assets)


def parse_release(data: Any) -> ReleaseInfo:
    """Builds a ReleaseInfo from a decoded `releases/latest` payload.

    Args:
        data: Decoded JSON value.

    Returns:
        The parsed release.

    Raises:
        ParseFailureError: If the payload is not an object or lacks `tag_name`
            or `html_url`.
    """
    if not isinstance(data, dict):
        raise ParseFailureError("expected a JSON object")

    tag = data.get("tag_name")
    if not isinstance(tag, str):
        raise ParseFailureError("missing field `tag_name`")

    html_url = data.get("html_url")
    if not isinstance(html_url, str):
        raise ParseFailureError("missing field `html_url`")

    body = data.get("body")
    return ReleaseInfo(
        tag=tag,
        version=derive_version(tag),
        html_url=html_url,
        body=body if isinstance(body, str) else "",
        assets=_parse_assets(data.get("assets")),
    )


def parse_release_text(text: str) -> ReleaseInfo:
    """Decodes a raw JSON document and parses it with `parse_release`."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseFailureError(str(e)) from e
    return parse_release(data)
