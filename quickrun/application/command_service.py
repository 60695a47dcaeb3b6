from collections.abc import Callable, Sequence
from pathlib import Path

from logly import logger

from quickrun.core.errors import (
    CommandNotRecognizedError,
    EmptyInputError,
    QuickRunError,
)
from quickrun.core.path_resolver import (
    CommandKind,
    classify,
    resolve_explicit,
    resolve_on_search_path,
)
from quickrun.infra.process_launcher import launch_detached


class CommandService:
    """Resolves a single line of user input and launches it.

    Resolution and spawning are one-shot: a failure is reported and nothing is
    retried. Launched processes are not monitored after they start.
    """

    def __init__(
        self,
        search_dirs: Sequence[str] | None = None,
        extensions: Sequence[str] | None = None,
        launcher: Callable[[Path], None] = launch_detached,
    ):
        """Initializes the service.

        Args:
            search_dirs: Directories to search. None reads `PATH` on each run.
            extensions: Candidate suffixes. None reads `PATHEXT` on each run.
            launcher: Callable that starts a resolved executable.
        """
        self._search_dirs = search_dirs
        self._extensions = extensions
        self._launcher = launcher

    def resolve(self, text: str) -> Path:
        """Resolves trimmed, non-empty input to an executable path."""
        if classify(text) is CommandKind.EXPLICIT_PATH:
            return resolve_explicit(text)

        found = resolve_on_search_path(text, self._search_dirs, self._extensions)
        if found is None:
            raise CommandNotRecognizedError(text)
        return found

    def run(self, text: str) -> Path:
        """Resolves and launches user input.

        Returns:
            The path that was launched.

        Raises:
            EmptyInputError: Input is blank.
            ExecutableNotFoundError: Explicit path is not a file.
            CommandNotRecognizedError: Bare command not found on the search path.
            SpawnFailureError: The process could not be started.
        """
        command = text.strip()
        if not command:
            raise EmptyInputError()

        path = self.resolve(command)
        self._launcher(path)
        logger.info(f"Launched {command!r} as {path}")
        return path

    def run_command(self, text: str) -> str | None:
        """Runs input and returns the error message, or None on success."""
        try:
            self.run(text)
        except QuickRunError as e:
            logger.warning(str(e))
            return str(e)
        return None
