from pathlib import Path

import msgspec
from PySide6.QtCore import QObject, Signal

from quickrun.application.command_service import CommandService
from quickrun.config import Settings, load_settings, save_settings
from quickrun.core.errors import QuickRunError
from quickrun.infra.startup import StartupManager, get_startup_manager


class LauncherController(QObject):
    """Runs typed commands and applies settings changes for the UI."""

    launched = Signal(str)  # resolved executable path
    error = Signal(str)
    settings_error = Signal(str)
    theme_changed = Signal(bool)  # light mode enabled
    startup_changed = Signal(bool)

    def __init__(
        self,
        service: CommandService | None = None,
        settings: Settings | None = None,
        settings_path: Path | None = None,
        startup: StartupManager | None = None,
        parent: QObject | None = None,
    ):
        """Initializes the controller.

        Args:
            service: Command service; a default one reading `PATH` is created
                if omitted.
            settings: Loaded settings; read from disk if omitted.
            settings_path: Where settings are saved. Defaults to the per-user
                config location.
            startup: Run-at-login capability for this platform.
            parent: Optional Qt parent object.
        """
        super().__init__(parent)
        self._service = service or CommandService()
        self._settings_path = settings_path
        self._settings = (
            settings if settings is not None else load_settings(settings_path)
        )
        self._startup = startup or get_startup_manager()

    @property
    def settings(self) -> Settings:
        return self._settings

    def submit(self, text: str) -> bool:
        """Runs the input. The UI should dismiss itself when this returns True."""
        try:
            path = self._service.run(text)
        except QuickRunError as e:
            self.error.emit(str(e))
            return False
        self.launched.emit(str(path))
        return True

    def set_light_mode(self, enabled: bool) -> bool:
        """Saves the theme choice; False means `settings_error` was emitted."""
        if not self._save(msgspec.structs.replace(self._settings, light_mode=enabled)):
            return False
        self.theme_changed.emit(enabled)
        return True

    def set_check_updates_on_startup(self, enabled: bool) -> bool:
        return self._save(
            msgspec.structs.replace(self._settings, check_updates_on_startup=enabled)
        )

    def is_startup_enabled(self) -> bool:
        try:
            return self._startup.is_enabled()
        except OSError as e:
            self.settings_error.emit(f"Failed to read startup setting: {e}")
            return False

    def set_startup_enabled(self, enabled: bool) -> bool:
        try:
            self._startup.set_enabled(enabled)
        except QuickRunError as e:
            self.settings_error.emit(str(e))
            return False
        except OSError as e:
            self.settings_error.emit(f"Failed to update startup setting: {e}")
            return False
        self.startup_changed.emit(enabled)
        return True

    def _save(self, updated: Settings) -> bool:
        try:
            save_settings(updated, self._settings_path)
        except OSError as e:
            self.settings_error.emit(f"Failed to save settings: {e}")
            return False
        self._settings = updated
        return True
