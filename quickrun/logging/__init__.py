from pathlib import Path

from logly import _LoggerProxy, logger

from quickrun.config import LOG_DIR_PATH


def init_logger(log_dir: Path | None = None) -> _LoggerProxy:
    """Initialize the logger.

    Configures console output and a size-limited `app.log` file sink under the
    per-user log directory.

    """
    log_dir = log_dir or LOG_DIR_PATH
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.configure(
        level="INFO",
        color=True,
        console=True,
        auto_sink=True,
    )

    logger.add(f"{log_dir}/app.log", size_limit="10MB", retention=3)

    logger.success("logger initialized!")

    return logger
