import os
import sys
from typing import Final, Protocol

from logly import logger

from quickrun.config import APP_NAME
from quickrun.core.errors import UnsupportedPlatformError

RUN_KEY_PATH: Final[str] = r"Software\Microsoft\Windows\CurrentVersion\Run"


class StartupManager(Protocol):
    """Controls whether the application starts at user login."""

    def is_enabled(self) -> bool: ...

    def set_enabled(self, enabled: bool) -> None: ...


class RegistryStartupManager:
    """Windows implementation backed by the per-user `Run` registry key."""

    def __init__(self, value_name: str = APP_NAME, executable: str | None = None):
        self._value_name = value_name
        self._executable = executable or sys.executable

    def is_enabled(self) -> bool:
        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, RUN_KEY_PATH) as key:
                winreg.QueryValueEx(key, self._value_name)
        except FileNotFoundError:
            return False
        return True

    def set_enabled(self, enabled: bool) -> None:
        import winreg

        with winreg.OpenKey(
            winreg.HKEY_CURRENT_USER, RUN_KEY_PATH, 0, winreg.KEY_WRITE
        ) as key:
            if enabled:
                winreg.SetValueEx(
                    key, self._value_name, 0, winreg.REG_SZ, self._executable
                )
                logger.info(f"Registered {self._executable} to run at login")
                return
            try:
                winreg.DeleteValue(key, self._value_name)
            except FileNotFoundError:
                pass
            logger.info("Removed run-at-login entry")


class UnsupportedStartupManager:
    """Placeholder for platforms without a run-at-login mechanism."""

    def is_enabled(self) -> bool:
        return False

    def set_enabled(self, enabled: bool) -> None:
        raise UnsupportedPlatformError("Startup settings are only supported on Windows")


def get_startup_manager() -> StartupManager:
    if os.name == "nt":
        return RegistryStartupManager()
    return UnsupportedStartupManager()
