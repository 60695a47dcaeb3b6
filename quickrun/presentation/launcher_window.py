from collections.abc import Callable
from enum import Enum

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QGuiApplication, QIcon
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QLineEdit,
    QMenu,
    QMessageBox,
    QStyle,
    QSystemTrayIcon,
    QVBoxLayout,
    QWidget,
)

from quickrun.application.launcher_controller import LauncherController
from quickrun.application.update_controller import UpdateController
from quickrun.config import APP_NAME
from quickrun.core.release_types import UpdateInfo

_DARK_STYLE = "QWidget { background: #1e1e1e; color: #e0e0e0; } QLabel#error { color: #ff6b6b; }"
_LIGHT_STYLE = "QWidget { background: #fafafa; color: #202020; } QLabel#error { color: #c62828; }"


class LauncherWindow(QWidget):
    """Frameless input box: Enter runs the command, Escape hides the window."""

    def __init__(self, launcher: LauncherController) -> None:
        super().__init__(None, Qt.WindowType.FramelessWindowHint | Qt.WindowType.Tool)
        self._launcher = launcher
        self.setWindowTitle(APP_NAME)
        self.resize(500, 80)

        self.input = QLineEdit(self)
        self.input.setPlaceholderText("Type a program name or path")
        self.input.returnPressed.connect(self.on_submit)
        self.input.textChanged.connect(lambda _: self.error_label.clear())

        self.error_label = QLabel(self)
        self.error_label.setObjectName("error")

        layout = QVBoxLayout(self)
        layout.addWidget(self.input)
        layout.addWidget(self.error_label)

        launcher.error.connect(self.error_label.setText)
        launcher.theme_changed.connect(self.apply_theme)
        self.apply_theme(launcher.settings.light_mode)

    def apply_theme(self, light: bool) -> None:
        self.setStyleSheet(_LIGHT_STYLE if light else _DARK_STYLE)

    def on_submit(self) -> None:
        if self._launcher.submit(self.input.text()):
            self.hide()

    def show_centered(self) -> None:
        self.input.clear()
        self.error_label.clear()
        screen = QGuiApplication.screenAt(self.pos()) or QGuiApplication.primaryScreen()
        geometry = self.frameGeometry()
        geometry.moveCenter(screen.availableGeometry().center())
        self.move(geometry.topLeft())
        self.show()
        self.activateWindow()
        self.input.setFocus()

    def toggle(self) -> None:
        if self.isVisible():
            self.hide()
        else:
            self.show_centered()

    def keyPressEvent(self, event) -> None:
        if event.key() == Qt.Key.Key_Escape:
            self.hide()
            return
        super().keyPressEvent(event)


class UpdateJob(Enum):
    NONE = "none"
    AUTO_CHECK = "auto_check"
    MANUAL_CHECK = "manual_check"
    INSTALL = "install"


def update_error_text(job: UpdateJob, message: str) -> str | None:
    """Returns the dialog text for a failed update job, or None to stay silent.

    Startup checks fail quietly; manual checks and installs are always reported.
    """
    if job is UpdateJob.INSTALL:
        return f"Could not install the update:\n{message}"
    if job is UpdateJob.MANUAL_CHECK:
        return f"Could not check for updates:\n{message}"
    return None


def apply_toggle(action: QAction, apply: Callable[[bool], bool], checked: bool) -> bool:
    """Applies a checkable action's new state, reverting the check mark on failure."""
    if apply(checked):
        return True
    action.blockSignals(True)
    action.setChecked(not checked)
    action.blockSignals(False)
    return False


class TrayIcon(QSystemTrayIcon):
    """Tray entry with show/update/settings/quit actions."""

    def __init__(
        self,
        window: LauncherWindow,
        launcher: LauncherController,
        updates: UpdateController,
    ) -> None:
        icon = QIcon.fromTheme(
            "system-run",
            QApplication.style().standardIcon(QStyle.StandardPixmap.SP_ComputerIcon),
        )
        super().__init__(icon, window)
        self._window = window
        self._launcher = launcher
        self._updates = updates
        self._job = UpdateJob.NONE
        self.setToolTip(APP_NAME)

        menu = QMenu()
        menu.addAction("Show", window.show_centered)
        self._check_action = menu.addAction("Check for updates", self.on_check_updates)
        menu.addSeparator()

        self._add_toggle(
            menu, "Light mode", launcher.settings.light_mode, launcher.set_light_mode
        )
        self._add_toggle(
            menu,
            "Start at login",
            launcher.is_startup_enabled(),
            launcher.set_startup_enabled,
        )
        self._add_toggle(
            menu,
            "Check for updates at startup",
            launcher.settings.check_updates_on_startup,
            launcher.set_check_updates_on_startup,
        )

        menu.addSeparator()
        menu.addAction("Quit", QApplication.quit)
        self._menu = menu
        self.setContextMenu(menu)

        self.activated.connect(self.on_activated)
        launcher.settings_error.connect(self.on_settings_error)
        updates.busy_changed.connect(lambda busy: self._check_action.setEnabled(not busy))
        updates.checked.connect(self.on_update_checked)
        updates.installed.connect(self.on_update_installed)
        updates.error.connect(self.on_update_error)

    @staticmethod
    def _add_toggle(
        menu: QMenu, text: str, checked: bool, apply: Callable[[bool], bool]
    ) -> QAction:
        action = QAction(text, menu, checkable=True)
        action.setChecked(checked)
        action.toggled.connect(lambda state, a=action: apply_toggle(a, apply, state))
        menu.addAction(action)
        return action

    def on_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self._window.toggle()

    def on_settings_error(self, message: str) -> None:
        QMessageBox.warning(None, APP_NAME, message)

    def check_silently(self) -> None:
        """Startup check: only reports when an update is available."""
        self._job = UpdateJob.AUTO_CHECK
        if not self._updates.check():
            self._job = UpdateJob.NONE

    def on_check_updates(self) -> None:
        self._job = UpdateJob.MANUAL_CHECK
        if not self._updates.check():
            self._job = UpdateJob.NONE

    def on_update_checked(self, info: UpdateInfo) -> None:
        job, self._job = self._job, UpdateJob.NONE
        if not info.available:
            if job is UpdateJob.MANUAL_CHECK:
                QMessageBox.information(
                    None, APP_NAME, f"{APP_NAME} {info.current_version} is up to date."
                )
            return

        answer = QMessageBox.question(
            None,
            APP_NAME,
            f"Version {info.version} is available (you have {info.current_version}).\n\n"
            f"{info.body}\n\nInstall now?",
        )
        if answer != QMessageBox.StandardButton.Yes:
            return

        self._job = UpdateJob.INSTALL
        if not self._updates.install(info):
            self._job = UpdateJob.NONE
            QMessageBox.warning(
                None, APP_NAME, "Another update job is still running. Try again shortly."
            )

    def on_update_installed(self, how: str) -> None:
        self._job = UpdateJob.NONE
        if how == "installer":
            QApplication.quit()

    def on_update_error(self, message: str) -> None:
        job, self._job = self._job, UpdateJob.NONE
        text = update_error_text(job, message)
        if text is not None:
            QMessageBox.warning(None, APP_NAME, text)
