import os
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from pathlib import Path
from typing import Final

from .errors import ExecutableNotFoundError

DEFAULT_PATHEXT: Final[str] = ".COM;.EXE;.BAT;.CMD"

# Directory separator, alternate separator and drive separator in Windows syntax.
_PATH_MARKERS: Final[tuple[str, ...]] = ("\\", "/", ":")


class CommandKind(Enum):
    EXPLICIT_PATH = "explicit_path"
    BARE_COMMAND = "bare_command"


def is_explicit_path(text: str) -> bool:
    """Returns True if the input contains any path-separator character.

    Examples: `C:\\Windows\\notepad.exe`, `.\\script.bat`, `tools/app.exe`.
    """
    return any(marker in text for marker in _PATH_MARKERS)


def classify(text: str) -> CommandKind:
    """Classifies user input as an explicit path or a bare command."""
    if is_explicit_path(text):
        return CommandKind.EXPLICIT_PATH
    return CommandKind.BARE_COMMAND


def _split_list(value: str | None, separator: str) -> list[str]:
    if not value:
        return []
    return [part for part in value.split(separator) if part]


def default_search_dirs(environ: Mapping[str, str] | None = None) -> list[str]:
    """Returns the `PATH` directories in their original order.

    Args:
        environ: Environment mapping. Defaults to `os.environ`.

    Returns:
        Directory strings; empty when `PATH` is unset or empty.
    """
    env = os.environ if environ is None else environ
    return _split_list(env.get("PATH"), os.pathsep)


def default_extensions(environ: Mapping[str, str] | None = None) -> list[str]:
    """Returns the `PATHEXT` extensions, or the built-in default list if unset."""
    env = os.environ if environ is None else environ
    value = env.get("PATHEXT")
    if value is None:
        value = DEFAULT_PATHEXT
    return _split_list(value, ";")


def resolve_explicit(path: str) -> Path:
    """Verifies that an explicit path references an existing regular file.

    The path is used exactly as given; no extension search is performed.

    Raises:
        ExecutableNotFoundError: If the path is not a regular file.
    """
    candidate = Path(path)
    if not candidate.is_file():
        raise ExecutableNotFoundError(path)
    return candidate


def _candidates(
    command: str, search_dirs: Sequence[str], extensions: Sequence[str]
) -> Iterable[Path]:
    has_extension = "." in command
    for directory in search_dirs:
        if has_extension:
            yield Path(directory) / command
            continue
        for ext in extensions:
            yield Path(directory) / f"{command}{ext}"


def resolve_on_search_path(
    command: str,
    search_dirs: Sequence[str] | None = None,
    extensions: Sequence[str] | None = None,
) -> Path | None:
    """Searches directories for a bare command.

    A command containing `.` is treated as already having an extension and is
    only tried by exact name. Otherwise every extension is tried in one
    directory before moving on to the next directory.

    Args:
        command: Bare command name (no path separators).
        search_dirs: Ordered directories. Defaults to `PATH`.
        extensions: Ordered suffixes. Defaults to `PATHEXT`.

    Returns:
        The first existing regular file, or None if nothing matches.
    """
    dirs = default_search_dirs() if search_dirs is None else search_dirs
    exts = default_extensions() if extensions is None else extensions

    for candidate in _candidates(command, dirs, exts):
        if candidate.is_file():
            return candidate
    return None
