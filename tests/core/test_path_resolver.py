import os
from pathlib import Path

import pytest

from quickrun.core.errors import ExecutableNotFoundError
from quickrun.core.path_resolver import (
    CommandKind,
    classify,
    default_extensions,
    default_search_dirs,
    is_explicit_path,
    resolve_explicit,
    resolve_on_search_path,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


@pytest.mark.parametrize(
    "text",
    [
        r"C:\Windows\notepad.exe",
        r".\script.bat",
        "tools/app.exe",
        "C:notepad.exe",
        "\\\\server\\share\\tool.exe",
    ],
)
def test_classify_detects_explicit_paths(text: str) -> None:
    assert is_explicit_path(text)
    assert classify(text) is CommandKind.EXPLICIT_PATH


@pytest.mark.parametrize("text", ["notepad", "calc.exe", "my tool", "foo.bar.baz"])
def test_classify_detects_bare_commands(text: str) -> None:
    assert not is_explicit_path(text)
    assert classify(text) is CommandKind.BARE_COMMAND


def test_resolve_explicit_returns_path_as_given(tmp_path: Path) -> None:
    exe = _touch(tmp_path / "tool")

    assert resolve_explicit(str(exe)) == exe


def test_resolve_explicit_does_not_search_extensions(tmp_path: Path) -> None:
    _touch(tmp_path / "tool.exe")

    with pytest.raises(ExecutableNotFoundError) as excinfo:
        resolve_explicit(str(tmp_path / "tool"))

    assert str(excinfo.value) == f"file not found: {tmp_path / 'tool'}"


def test_resolve_explicit_rejects_directories(tmp_path: Path) -> None:
    with pytest.raises(ExecutableNotFoundError):
        resolve_explicit(str(tmp_path))


def test_resolve_on_search_path_exhausts_directory_before_next(tmp_path: Path) -> None:
    d1 = tmp_path / "d1"
    d2 = tmp_path / "d2"
    d1.mkdir()
    expected = _touch(d2 / "foo.BAT")

    found = resolve_on_search_path("foo", [str(d1), str(d2)], [".EXE", ".BAT"])

    assert found == expected


def test_resolve_on_search_path_prefers_earlier_directory(tmp_path: Path) -> None:
    first = _touch(tmp_path / "d1" / "foo.BAT")
    _touch(tmp_path / "d2" / "foo.EXE")

    found = resolve_on_search_path(
        "foo", [str(tmp_path / "d1"), str(tmp_path / "d2")], [".EXE", ".BAT"]
    )

    assert found == first


def test_resolve_on_search_path_prefers_earlier_extension(tmp_path: Path) -> None:
    exe = _touch(tmp_path / "foo.EXE")
    _touch(tmp_path / "foo.BAT")

    assert resolve_on_search_path("foo", [str(tmp_path)], [".EXE", ".BAT"]) == exe


def test_resolve_on_search_path_dotted_command_matches_exact_name(tmp_path: Path) -> None:
    exact = _touch(tmp_path / "d2" / "foo.bat")
    (tmp_path / "d1").mkdir()

    found = resolve_on_search_path(
        "foo.bat", [str(tmp_path / "d1"), str(tmp_path / "d2")], [".EXE"]
    )

    assert found == exact


def test_resolve_on_search_path_dotted_command_never_adds_extensions(tmp_path: Path) -> None:
    _touch(tmp_path / "foo.bat.EXE")

    assert resolve_on_search_path("foo.bat", [str(tmp_path)], [".EXE"]) is None


def test_resolve_on_search_path_skips_directories_named_like_commands(
    tmp_path: Path,
) -> None:
    (tmp_path / "foo.EXE").mkdir()

    assert resolve_on_search_path("foo", [str(tmp_path)], [".EXE"]) is None


def test_resolve_on_search_path_with_no_directories_finds_nothing() -> None:
    assert resolve_on_search_path("foo", [], [".EXE"]) is None


def test_resolve_on_search_path_reads_environment_by_default(
    monkeypatch, tmp_path: Path
) -> None:
    exe = _touch(tmp_path / "foo.CMD")
    monkeypatch.setenv("PATH", str(tmp_path))
    monkeypatch.setenv("PATHEXT", ".EXE;.CMD")

    assert resolve_on_search_path("foo") == exe


def test_default_search_dirs_preserves_order_and_drops_empty_entries() -> None:
    env = {"PATH": os.pathsep.join(["/b", "", "/a", "/b"])}

    assert default_search_dirs(env) == ["/b", "/a", "/b"]


def test_default_search_dirs_is_empty_when_unset() -> None:
    assert default_search_dirs({}) == []
    assert default_search_dirs({"PATH": ""}) == []


def test_default_extensions_splits_pathext() -> None:
    assert default_extensions({"PATHEXT": ".EXE;.PS1;"}) == [".EXE", ".PS1"]


def test_default_extensions_falls_back_when_unset() -> None:
    assert default_extensions({}) == [".COM", ".EXE", ".BAT", ".CMD"]
