from quickrun.core.errors import DownloadFailureError
from quickrun.infra.qt_worker import TaskWorker


def _capture(worker: TaskWorker) -> list[tuple[str, object]]:
    captured: list[tuple[str, object]] = []
    worker.succeeded.connect(lambda result: captured.append(("succeeded", result)))
    worker.failed.connect(lambda message: captured.append(("failed", message)))
    worker.finished.connect(lambda: captured.append(("finished", None)))
    return captured


def test_run_emits_result_then_finished() -> None:
    worker = TaskWorker(lambda: {"answer": 42}, label="example")
    captured = _capture(worker)

    worker.run()

    assert captured == [("succeeded", {"answer": 42}), ("finished", None)]


def test_run_emits_user_message_for_known_errors() -> None:
    def task() -> None:
        raise DownloadFailureError("HTTP 503")

    worker = TaskWorker(task)
    captured = _capture(worker)

    worker.run()

    assert captured == [
        ("failed", "failed to download installer: HTTP 503"),
        ("finished", None),
    ]


def test_run_emits_error_payload_when_unexpected_exception_occurs() -> None:
    def task() -> None:
        raise RuntimeError("unexpected failure")

    worker = TaskWorker(task)
    captured = _capture(worker)

    worker.run()

    assert captured == [("failed", "unexpected failure"), ("finished", None)]
