import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Final

import msgspec
from logly import logger
from platformdirs import PlatformDirs

APP_NAME: Final[str] = "QuickRun"
_FALLBACK_VERSION: Final[str] = "1.0.0"


def read_app_version(distribution: str = "quickrun") -> str:
    """Returns the installed package version, or the built-in one if not installed."""
    try:
        return version(distribution)
    except PackageNotFoundError:
        return _FALLBACK_VERSION


APP_VERSION: Final[str] = read_app_version()

GITHUB_OWNER_REPO: Final[str] = "Swatto86/QuickRun"
GITHUB_API_HOST: Final[str] = "api.github.com"

RELEASE_FETCH_TIMEOUT_SEC: Final[int] = 15
INSTALLER_DOWNLOAD_TIMEOUT_SEC: Final[int] = 300
DEFAULT_INSTALLER_NAME: Final[str] = "quickrun-setup.exe"

_DIRS: Final[PlatformDirs] = PlatformDirs(appname=APP_NAME, appauthor=False)

SETTINGS_PATH: Final[Path] = Path(_DIRS.user_config_dir) / "settings.json"
LOG_DIR_PATH: Final[Path] = Path(_DIRS.user_log_dir)


class Settings(msgspec.Struct):
    """User preferences, loaded once at startup and saved as a whole record."""

    light_mode: bool = False
    check_updates_on_startup: bool = True


def load_settings(path: Path | None = None) -> Settings:
    """Loads settings from disk.

    Unknown keys are ignored and missing keys take their defaults. A missing or
    unreadable file yields the default record.

    Args:
        path: Settings file path. Defaults to `SETTINGS_PATH`.
    """
    settings_path = path or SETTINGS_PATH
    if not settings_path.exists():
        return Settings()

    try:
        return msgspec.json.decode(settings_path.read_bytes(), type=Settings)
    except (OSError, msgspec.DecodeError) as e:
        logger.warning(f"Ignoring unreadable settings file {settings_path}: {e}")
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Writes the whole settings record.

    The record is written to a sibling temp file and then renamed into place.

    Raises:
        OSError: If the file cannot be written.
    """
    settings_path = path or SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = settings_path.with_name(settings_path.name + ".tmp")
    tmp_path.write_bytes(msgspec.json.format(msgspec.json.encode(settings), indent=2))
    os.replace(tmp_path, settings_path)
    logger.info(f"Settings saved to {settings_path}")
