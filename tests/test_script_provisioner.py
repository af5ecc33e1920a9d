"""Helper script provisioning tests."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from executor.script_provisioner import ensure_script_installed


def test_writes_executable_script_and_creates_parents(tmp_path: Path) -> None:
    target_dir = tmp_path / "a" / "b"
    path = ensure_script_installed("easyocr_lines", target_dir, "#!/bin/sh\necho hi\n")

    assert path == target_dir / "easyocr_lines"
    assert path.read_text() == "#!/bin/sh\necho hi\n"
    assert path.stat().st_mode & stat.S_IXUSR
    assert sorted(p.name for p in target_dir.iterdir()) == ["easyocr_lines"]


def test_second_call_is_pass_through(tmp_path: Path) -> None:
    first = ensure_script_installed("tool", tmp_path, "v1")
    os.utime(first, (1_000_000, 1_000_000))
    mtime = first.stat().st_mtime

    second = ensure_script_installed("tool", tmp_path, "v1")

    assert second == first
    assert first.stat().st_mtime == mtime


def test_existing_file_is_not_overwritten(tmp_path: Path) -> None:
    script = tmp_path / "tool"
    script.write_text("edited by hand")

    path = ensure_script_installed("tool", tmp_path, "default contents")

    assert path == script
    assert script.read_text() == "edited by hand"


def test_expands_user_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    path = ensure_script_installed("tool", Path("~/bin"), "x")
    assert path == tmp_path / "bin" / "tool"
    assert path.is_absolute()


def test_unwritable_directory_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(OSError):
        ensure_script_installed("tool", blocker / "bin", "x")
