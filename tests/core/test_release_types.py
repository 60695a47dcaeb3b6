from dataclasses import FrozenInstanceError

import pytest

from quickrun.core.release_types import Asset, ReleaseInfo, UpdateInfo


def test_release_info_default_fields_are_empty() -> None:
    release = ReleaseInfo(tag="v1.0.0", version="1.0.0", html_url="https://example.test/r")

    assert release.body == ""
    assert release.assets == ()


def test_update_info_has_no_installer_by_default() -> None:
    info = UpdateInfo(
        available=False,
        version="1.0.0",
        current_version="1.0.0",
        release_url="https://example.test/r",
    )

    assert info.installer_url is None
    assert info.body == ""


def test_release_types_are_frozen_dataclasses() -> None:
    asset = Asset(name="a.exe", download_url="https://example.test/a.exe")

    with pytest.raises(FrozenInstanceError):
        asset.name = "changed"  # type: ignore[misc]
