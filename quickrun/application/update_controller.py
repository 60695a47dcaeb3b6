import threading
from collections.abc import Callable
from typing import Any

from logly import logger
from PySide6.QtCore import QObject, QThread, Signal, SignalInstance

from quickrun.application.update_service import UpdateService
from quickrun.core.release_types import UpdateInfo
from quickrun.infra.qt_worker import TaskWorker


class UpdateController(QObject):
    """Runs update checks and installs in the background and reports via signals."""

    checked = Signal(object)  # UpdateInfo
    installed = Signal(str)  # "installer" or "browser"
    error = Signal(str)
    busy_changed = Signal(bool)

    def __init__(self, service: UpdateService | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self._service = service or UpdateService()
        self._thread: QThread | None = None
        self._worker: TaskWorker | None = None
        self._cancel_event: threading.Event | None = None
        self._retired: tuple[QThread, TaskWorker | None] | None = None

    def is_busy(self) -> bool:
        return self._thread is not None

    def check(self) -> bool:
        """Checks for a newer release in the background.

        Returns:
            False if another job is still running and nothing was started.
        """
        return self._start_job(
            "update check", self._service.check_for_update, self.checked
        )

    def install(self, info: UpdateInfo) -> bool:
        """Downloads and launches the installer (or opens the release page)."""
        if self.is_busy():
            logger.info("Update job already running")
            return False

        cancel_event = threading.Event()
        self._cancel_event = cancel_event
        return self._start_job(
            "update install",
            lambda: self._service.install_update(info, cancel_event),
            self.installed,
        )

    def cancel(self) -> None:
        """Aborts an in-flight installer download, if any."""
        if self._cancel_event is not None:
            logger.info("Cancelling update download")
            self._cancel_event.set()

    def _start_job(
        self,
        label: str,
        task: Callable[[], Any],
        on_succeeded: SignalInstance,
    ) -> bool:
        if self._thread is not None:
            logger.info("Update job already running")
            return False

        self._release_retired()

        self.busy_changed.emit(True)

        thread = QThread()
        worker = TaskWorker(task, label=label)
        worker.moveToThread(thread)
        thread.started.connect(worker.run)

        worker.succeeded.connect(on_succeeded)
        worker.failed.connect(self.error)
        worker.finished.connect(thread.quit)
        worker.finished.connect(worker.deleteLater)
        thread.finished.connect(lambda t=thread: self._on_thread_finished(t))

        self._thread = thread
        self._worker = worker
        thread.start()
        return True

    def _on_thread_finished(self, finished_thread: QThread) -> None:
        """Clears references only if the finished thread is still the active one."""
        if self._thread is finished_thread:
            self._retired = (finished_thread, self._worker)
            self._thread = None
            self._worker = None
            self._cancel_event = None
            self.busy_changed.emit(False)

    def _release_retired(self) -> None:
        """Drops the previous job's thread once it has fully exited."""
        if self._retired is None:
            return
        thread, _ = self._retired
        thread.wait()
        self._retired = None
