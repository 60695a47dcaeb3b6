import pytest

from quickrun.core.errors import UnsupportedPlatformError
from quickrun.infra import startup
from quickrun.infra.startup import (
    RegistryStartupManager,
    UnsupportedStartupManager,
    get_startup_manager,
)


def test_unsupported_manager_reports_disabled_and_refuses_changes() -> None:
    manager = UnsupportedStartupManager()

    assert manager.is_enabled() is False
    with pytest.raises(UnsupportedPlatformError) as excinfo:
        manager.set_enabled(True)

    assert str(excinfo.value) == "Startup settings are only supported on Windows"


def test_get_startup_manager_uses_registry_on_windows(monkeypatch) -> None:
    monkeypatch.setattr(startup.os, "name", "nt", raising=False)

    assert isinstance(get_startup_manager(), RegistryStartupManager)


def test_get_startup_manager_is_unsupported_elsewhere(monkeypatch) -> None:
    monkeypatch.setattr(startup.os, "name", "posix", raising=False)

    assert isinstance(get_startup_manager(), UnsupportedStartupManager)
