from importlib.metadata import PackageNotFoundError
from pathlib import Path

from quickrun import config
from quickrun.config import Settings, load_settings, save_settings


def test_load_settings_returns_defaults_when_file_missing(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "settings.json") == Settings(
        light_mode=False, check_updates_on_startup=True
    )


def test_save_then_load_round_trips_and_leaves_no_temp_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.json"

    save_settings(Settings(light_mode=True), path)

    assert load_settings(path) == Settings(light_mode=True)
    assert sorted(p.name for p in path.parent.iterdir()) == ["settings.json"]


def test_load_settings_ignores_unknown_keys_and_fills_missing(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"light_mode": true, "legacy_flag": 1}', encoding="utf-8")

    assert load_settings(path) == Settings(light_mode=True, check_updates_on_startup=True)


def test_load_settings_falls_back_to_defaults_for_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_settings(path) == Settings()


def test_load_settings_falls_back_to_defaults_for_wrong_types(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"light_mode": "yes"}', encoding="utf-8")

    assert load_settings(path) == Settings()


def test_read_app_version_uses_package_metadata(monkeypatch) -> None:
    monkeypatch.setattr(config, "version", lambda name: "2.3.4")

    assert config.read_app_version() == "2.3.4"


def test_read_app_version_falls_back_when_not_installed(monkeypatch) -> None:
    def missing(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr(config, "version", missing)

    assert config.read_app_version() == "1.0.0"
