import os
import subprocess
from typing import Final

from logly import logger
from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices

from quickrun.core.errors import LaunchFailureError, SpawnFailureError

_CREATE_NO_WINDOW: Final[int] = 0x08000000
_DETACHED_PROCESS: Final[int] = 0x00000008


def launch_detached(path: str | os.PathLike[str], *, detach_console: bool = False) -> None:
    """Starts an executable without waiting for it.

    The process is spawned directly (no shell) with its standard streams
    detached. On Windows it gets no console window. Only spawn success or
    failure is reported; the process is never monitored afterwards.

    Args:
        path: Executable to start.
        detach_console: Also pass `DETACHED_PROCESS` on Windows, for children
            that must outlive this application (installers).

    Raises:
        SpawnFailureError: If the process could not be started.
    """
    argv = [os.fspath(path)]
    kwargs: dict = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "close_fds": True,
    }

    if os.name == "nt":
        flags = _CREATE_NO_WINDOW
        if detach_console:
            flags |= _DETACHED_PROCESS
        kwargs["creationflags"] = flags
    else:
        kwargs["start_new_session"] = True

    try:
        logger.info(f"Launching {argv[0]}")
        # Never waited on; the exit status is not observed.
        subprocess.Popen(argv, **kwargs)
    except OSError as e:
        logger.warning(f"Spawn failed for {argv[0]}: {e}")
        raise SpawnFailureError(e.strerror or str(e)) from e
    except ValueError as e:
        logger.warning(f"Spawn failed for {argv[0]!r}: {e}")
        raise SpawnFailureError(str(e)) from e


def open_url(url: str) -> None:
    """Opens a URL with the platform's default handler.

    Raises:
        LaunchFailureError: If no handler accepted the URL.
    """
    logger.info(f"Opening {url} in the default handler")
    if not QDesktopServices.openUrl(QUrl(url)):
        raise LaunchFailureError(f"could not open {url}")

