import threading
from collections.abc import Callable
from pathlib import Path

from logly import logger

from quickrun.config import APP_VERSION, GITHUB_OWNER_REPO
from quickrun.core.asset_selector import select_installer
from quickrun.core.errors import LaunchFailureError, QuickRunError
from quickrun.core.release_types import UpdateInfo
from quickrun.core.semver import VersionOrder, compare_versions
from quickrun.infra.process_launcher import launch_detached, open_url
from quickrun.infra.release_client import ReleaseClient


def _launch_installer(path: Path) -> None:
    launch_detached(path, detach_console=True)


class UpdateService:
    """Checks GitHub releases for a newer version and installs it."""

    def __init__(
        self,
        client: ReleaseClient | None = None,
        owner_repo: str = GITHUB_OWNER_REPO,
        current_version: str = APP_VERSION,
        launcher: Callable[[Path], None] = _launch_installer,
        url_opener: Callable[[str], None] = open_url,
        download_dir: Path | None = None,
    ):
        self.current_version = current_version
        self.owner_repo = owner_repo
        self._client = client or ReleaseClient(current_version)
        self._launcher = launcher
        self._url_opener = url_opener
        self._download_dir = download_dir

    def check_for_update(self) -> UpdateInfo:
        """Fetches the latest release and compares it with the running version.

        Raises:
            QuickRunError: Network, API or parse failures from the release client.
        """
        release = self._client.fetch_latest(self.owner_repo)
        available = (
            compare_versions(release.version, self.current_version)
            is VersionOrder.GREATER
        )
        logger.info(
            f"Current version: {self.current_version}, latest version: "
            f"{release.version}, update available: {available}"
        )
        return UpdateInfo(
            available=available,
            version=release.version,
            current_version=self.current_version,
            release_url=release.html_url,
            body=release.body,
            installer_url=select_installer(release.assets),
        )

    def _download_and_launch(
        self, url: str, cancel_event: threading.Event | None
    ) -> None:
        installer = self._client.download(url, self._download_dir, cancel_event)
        self._launcher(installer)
        logger.info(f"Installer launched from {installer}")

    def install_update(
        self, info: UpdateInfo, cancel_event: threading.Event | None = None
    ) -> str:
        """Downloads and launches the installer, or opens the release page.

        The caller is expected to exit soon after an installer starts so it can
        replace the application's files.

        Returns:
            "installer" or "browser", whichever path succeeded.

        Raises:
            LaunchFailureError: Neither the installer nor the release page could
                be opened.
        """
        if info.installer_url:
            try:
                self._download_and_launch(info.installer_url, cancel_event)
                return "installer"
            except QuickRunError as e:
                logger.warning(f"{e}. Falling back to browser.")

        logger.info(f"Opening release page {info.release_url}")
        try:
            self._url_opener(info.release_url)
        except QuickRunError as e:
            raise LaunchFailureError(
                f"could not open release page {info.release_url}"
            ) from e
        return "browser"
