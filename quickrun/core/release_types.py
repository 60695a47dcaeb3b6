from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Asset:
    """A downloadable release artifact.

    Attributes:
        name: Display file name (e.g. "QuickRun-Setup.exe").
        download_url: Direct download URL.
    """

    name: str
    download_url: str


@dataclass(frozen=True, slots=True)
class ReleaseInfo:
    """The latest published release.

    Attributes:
        tag: Raw tag name (e.g. "v1.5.0").
        version: Tag with the leading version marker stripped.
        body: Release notes; empty when the release has none.
        html_url: Release page URL.
        assets: Assets in the order the release host returned them.
    """

    tag: str
    version: str
    html_url: str
    body: str = ""
    assets: tuple[Asset, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class UpdateInfo:
    """User-facing result of an update check."""

    available: bool
    version: str
    current_version: str
    release_url: str
    body: str = ""
    installer_url: str | None = None
