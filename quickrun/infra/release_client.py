import os
import tempfile
import threading
from pathlib import Path
from typing import Final
from urllib.parse import unquote, urlparse

import requests
from logly import logger

from quickrun.config import (
    DEFAULT_INSTALLER_NAME,
    GITHUB_API_HOST,
    INSTALLER_DOWNLOAD_TIMEOUT_SEC,
    RELEASE_FETCH_TIMEOUT_SEC,
)
from quickrun.core.errors import ApiError, DownloadFailureError, NetworkFailureError
from quickrun.core.release_parser import parse_release_text
from quickrun.core.release_types import ReleaseInfo

_ACCEPT_HEADER: Final[str] = "application/vnd.github.v3+json"
_CHUNK_SIZE: Final[int] = 64 * 1024
_UNSAFE_NAME_CHARS: Final[tuple[str, ...]] = ("/", "\\", ":", "\0")


def installer_file_name(url: str, default: str = DEFAULT_INSTALLER_NAME) -> str:
    """Returns the final path segment of a download URL as a bare file name.

    Falls back to `default` when the segment is empty, is `.` or `..`, or
    decodes to something containing a path or drive separator or NUL.
    """
    segment = unquote(urlparse(url).path.rsplit("/", 1)[-1])
    if segment in ("", ".", ".."):
        return default
    if any(ch in segment for ch in _UNSAFE_NAME_CHARS):
        return default
    return segment


class ReleaseClient:
    """Talks to the GitHub releases API and downloads release assets."""

    def __init__(
        self,
        current_version: str,
        session: requests.Session | None = None,
        api_host: str = GITHUB_API_HOST,
    ):
        """Initializes the client.

        Args:
            current_version: Running application version, sent in the
                User-Agent and used for the "no releases" placeholder.
            session: Optional pre-configured session (tests pass a fake).
            api_host: Host of the releases API.
        """
        self.current_version = current_version
        self.api_host = api_host
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": f"QuickRun/{current_version}"})

    def latest_release_url(self, owner_repo: str) -> str:
        return f"https://{self.api_host}/repos/{owner_repo}/releases/latest"

    def fetch_latest(self, owner_repo: str) -> ReleaseInfo:
        """Fetches the latest release of `owner/repo`.

        A 404 means nothing has been published yet and yields a placeholder
        release at the current version with no assets.

        Raises:
            NetworkFailureError: The request could not be completed.
            ApiError: Any other non-success status.
            ParseFailureError: The response body is not a release object.
        """
        url = self.latest_release_url(owner_repo)
        logger.info(f"Checking for updates at {url}")

        try:
            response = self.session.get(
                url,
                headers={"Accept": _ACCEPT_HEADER},
                timeout=RELEASE_FETCH_TIMEOUT_SEC,
            )
        except requests.RequestException as e:
            raise NetworkFailureError(str(e)) from e

        if response.status_code == 404:
            logger.info("No releases published yet")
            return ReleaseInfo(
                tag=self.current_version,
                version=self.current_version,
                html_url=f"https://github.com/{owner_repo}/releases",
            )

        if not response.ok:
            raise ApiError(response.status_code, response.text)

        return parse_release_text(response.text)

    def download(
        self,
        url: str,
        dest_dir: Path | None = None,
        cancel_event: threading.Event | None = None,
    ) -> Path:
        """Downloads a file into `dest_dir` (the temp directory by default).

        The body is streamed into `<name>.part` and renamed on completion, so a
        failed or cancelled download never leaves a file that looks complete.

        Returns:
            Path of the downloaded file.

        Raises:
            DownloadFailureError: On any network, HTTP, I/O or cancellation
                failure.
        """
        target_dir = dest_dir or Path(tempfile.gettempdir())
        target = target_dir / installer_file_name(url)
        partial = target.with_name(target.name + ".part")
        logger.info(f"Downloading {url} to {target}")

        try:
            with self.session.get(
                url, stream=True, timeout=INSTALLER_DOWNLOAD_TIMEOUT_SEC
            ) as response:
                if not response.ok:
                    raise DownloadFailureError(f"HTTP {response.status_code}")

                written = 0
                with open(partial, "wb") as fh:
                    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                        if cancel_event is not None and cancel_event.is_set():
                            raise DownloadFailureError("cancelled")
                        if chunk:
                            fh.write(chunk)
                            written += len(chunk)

            os.replace(partial, target)
        except DownloadFailureError:
            partial.unlink(missing_ok=True)
            raise
        except (requests.RequestException, OSError, ValueError) as e:
            partial.unlink(missing_ok=True)
            raise DownloadFailureError(str(e)) from e

        logger.info(f"Download complete ({written} bytes)")
        return target
