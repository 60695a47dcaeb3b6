from collections.abc import Callable
from typing import Any

from logly import logger
from PySide6.QtCore import QObject, Signal, Slot

from quickrun.core.errors import QuickRunError


class TaskWorker(QObject):
    """Runs a callable in a background Qt thread.

    The worker is meant to be moved to a `QThread` and started via a signal/slot.
    Exactly one of `succeeded` or `failed` is emitted, followed by `finished`.
    """

    succeeded = Signal(object)
    failed = Signal(str)
    finished = Signal()

    def __init__(self, task: Callable[[], Any], label: str = "task"):
        super().__init__()
        self._task = task
        self._label = label

    @Slot()
    def run(self):
        """Executes the configured task and reports the outcome."""
        try:
            logger.info(f"Starting background job {self._label}")
            result = self._task()
            logger.info(f"Background job {self._label} finished")
            self.succeeded.emit(result)
        except QuickRunError as e:
            logger.warning(f"Background job {self._label} failed: {e}")
            self.failed.emit(str(e))
        except Exception as e:
            logger.exception(f"Background job {self._label} crashed")
            self.failed.emit(str(e))
        finally:
            self.finished.emit()
