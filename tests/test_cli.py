"""CLI smoke tests with process invocation faked out."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from tests.fakes import RecordingRunner
from ui.cli.cli import app
from vision import base_vision

cli = CliRunner()


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> RecordingRunner:
    runner = RecordingRunner(stdout="Receipt 42\n")
    monkeypatch.setattr(base_vision, "run_command", runner)
    return runner


def test_config_show() -> None:
    result = cli.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["backend"] == "tesseract"
    assert data["drawer"]["name"] == "ocr"


def test_ocr_prints_text(fake_runner: RecordingRunner, image_file: Path) -> None:
    result = cli.invoke(app, ["ocr", str(image_file)])
    assert result.exit_code == 0
    assert result.stdout == "Receipt 42\n"


def test_ocr_unknown_backend_exits_nonzero(fake_runner: RecordingRunner, image_file: Path) -> None:
    result = cli.invoke(app, ["ocr", str(image_file), "--backend", "cuneiform"])
    assert result.exit_code == 1
    assert "cuneiform" in result.output
    assert fake_runner.calls == []


def test_insert_writes_link_and_drawer(
    fake_runner: RecordingRunner, image_file: Path, tmp_path: Path
) -> None:
    notes = tmp_path / "notes.org"
    notes.write_text("* Receipts\n")

    result = cli.invoke(app, ["insert", str(notes), str(image_file)])

    assert result.exit_code == 0
    assert notes.read_text() == f"* Receipts\n[[file:{image_file}]]\n:ocr:\nReceipt 42\n:end:\n"


def test_annotate_existing_links(fake_runner: RecordingRunner, image_file: Path, tmp_path: Path) -> None:
    notes = tmp_path / "notes.org"
    notes.write_text("[[file:shot.png]]\n")

    result = cli.invoke(app, ["annotate", str(notes)])

    assert result.exit_code == 0
    assert "Added 1 OCR drawer(s)" in result.stdout
    assert notes.read_text() == "[[file:shot.png]]\n:ocr:\nReceipt 42\n:end:\n"


def test_install_script(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    from vision.ocr import easyocr_provider

    monkeypatch.setattr(easyocr_provider, "find_executable", lambda name: None)
    user = tmp_path / "user.yaml"
    user.write_text(f"easyocr:\n  script_dir: {tmp_path / 'bin'}\n")

    result = cli.invoke(app, ["--config", str(user), "install-script"])

    assert result.exit_code == 0
    assert result.stdout.strip() == str(tmp_path / "bin" / "easyocr_lines")
    assert (tmp_path / "bin" / "easyocr_lines").exists()


def test_insert_relative_image_from_another_directory(
    fake_runner: RecordingRunner, image_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    notes = tmp_path / "notes" / "n.org"
    notes.parent.mkdir()
    notes.write_text("* h\n")
    monkeypatch.chdir(tmp_path)

    result = cli.invoke(app, ["insert", "notes/n.org", "shot.png"])

    assert result.exit_code == 0
    resolved = image_file.resolve()
    assert notes.read_text() == f"* h\n[[file:{resolved}]]\n:ocr:\nReceipt 42\n:end:\n"
    assert fake_runner.calls[0][1] == str(resolved)


def test_insert_missing_image_fails_without_touching_document(
    fake_runner: RecordingRunner, tmp_path: Path
) -> None:
    notes = tmp_path / "notes.org"
    notes.write_text("* h\n")

    result = cli.invoke(app, ["insert", str(notes), str(tmp_path / "nope.png")])

    assert result.exit_code == 1
    assert "Image not found" in result.output
    assert notes.read_text() == "* h\n"
    assert fake_runner.calls == []


def test_backends_reports_availability(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    from vision.ocr import easyocr_provider, tesseract_provider

    monkeypatch.setattr(tesseract_provider, "find_executable", lambda name: Path("/usr/bin/tesseract"))
    monkeypatch.setattr(easyocr_provider, "find_executable", lambda name: None)
    user = tmp_path / "user.yaml"
    user.write_text(f"easyocr:\n  script_dir: {tmp_path / 'bin'}\n")

    result = cli.invoke(app, ["--config", str(user), "backends"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["* tesseract: available", "  easyocr: missing"]
