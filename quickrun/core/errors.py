class QuickRunError(Exception):
    """Base class for errors whose message is shown to the user verbatim."""


class EmptyInputError(QuickRunError):
    def __init__(self) -> None:
        super().__init__("empty input")


class ExecutableNotFoundError(QuickRunError):
    """An explicit path does not reference an existing regular file."""

    def __init__(self, path: str):
        super().__init__(f"file not found: {path}")
        self.path = path


class CommandNotRecognizedError(QuickRunError):
    """A bare command matched nothing on the search path."""

    def __init__(self, command: str):
        super().__init__(f"'{command}' is not recognized as a command or program")
        self.command = command


class SpawnFailureError(QuickRunError):
    def __init__(self, reason: str):
        super().__init__(f"failed to spawn process: {reason}")
        self.reason = reason


class NetworkFailureError(QuickRunError):
    def __init__(self, reason: str):
        super().__init__(f"failed to fetch release info: {reason}")
        self.reason = reason


class ApiError(QuickRunError):
    """The release API answered with a non-success status other than 404."""

    def __init__(self, status: int, body: str):
        super().__init__(f"release API returned error {status}: {body}")
        self.status = status
        self.body = body


class ParseFailureError(QuickRunError):
    def __init__(self, reason: str):
        super().__init__(f"failed to parse release JSON: {reason}")
        self.reason = reason


class DownloadFailureError(QuickRunError):
    def __init__(self, reason: str):
        super().__init__(f"failed to download installer: {reason}")
        self.reason = reason


class LaunchFailureError(QuickRunError):
    def __init__(self, reason: str):
        super().__init__(f"failed to launch: {reason}")
        self.reason = reason


class UnsupportedPlatformError(QuickRunError):
    """A platform-specific capability is not available on this OS."""
