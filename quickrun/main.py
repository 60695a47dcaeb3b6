import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from quickrun.application.launcher_controller import LauncherController
from quickrun.application.update_controller import UpdateController
from quickrun.config import APP_NAME, APP_VERSION
from quickrun.logging import init_logger
from quickrun.presentation.launcher_window import LauncherWindow, TrayIcon


def main() -> int:
    logger = init_logger()
    logger.info(f"Starting {APP_NAME} {APP_VERSION}")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setQuitOnLastWindowClosed(False)

    launcher = LauncherController()
    updates = UpdateController()

    window = LauncherWindow(launcher)
    tray = TrayIcon(window, launcher, updates)
    tray.show()
    window.show_centered()

    if launcher.settings.check_updates_on_startup:
        QTimer.singleShot(0, tray.check_silently)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
