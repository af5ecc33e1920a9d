"""Image link parsing and whole-document annotation tests."""

from __future__ import annotations

from pathlib import Path

from core.settings import OCRSettings
from document.buffer import TextDocument
from document.drawer import DrawerInserter
from document.image_links import annotate_document, find_image_links, parse_image_link
from tests.fakes import RecordingRunner


def test_parse_image_link() -> None:
    assert parse_image_link("[[file:img/a.png]]") == "img/a.png"
    assert parse_image_link("  [[file:b.JPG][caption]]  ") == "b.JPG"
    assert parse_image_link("[[file:c.png::12]]") == "c.png"
    assert parse_image_link("[[file:notes.org]]") is None
    assert parse_image_link("see [[file:a.png]] inline") is None
    assert parse_image_link("[[https://example.com/a.png]]") is None


def test_annotate_document_skips_annotated_and_missing(tmp_path: Path) -> None:
    (tmp_path / "a.png").write_bytes(b"")
    (tmp_path / "b.png").write_bytes(b"")
    document = TextDocument(
        "[[file:a.png]]\n"
        "text\n"
        "[[file:b.png]]\n"
        ":ocr:\nold\n:end:\n"
        "[[file:missing.png]]\n",
        path=tmp_path / "notes.org",
    )
    runner = RecordingRunner(stdout="A")

    count = annotate_document(document, DrawerInserter(OCRSettings(), runner=runner))

    assert count == 1
    assert len(runner.calls) == 1
    assert [link.line for link in find_image_links(document)] == [0, 5, 9]
    assert document.text.startswith("[[file:a.png]]\n:ocr:\nA\n:end:\ntext\n")
