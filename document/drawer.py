"""Formatting and insertion of OCR drawers below image links."""

from __future__ import annotations

import logging
from pathlib import Path

from core.settings import DrawerSettings, OCRBackendName, OCRSettings
from document.buffer import TextDocument
from executor.command_executor import CommandRunner
from vision.ocr.ocr_engine import run_ocr

logger = logging.getLogger("od.drawer")

END_MARKER = ":end:"


def start_marker(name: str = "ocr") -> str:
    return f":{name}:"


def _escape_line(line: str, markers: set[str]) -> str:
    # org-mode convention: a leading comma protects a line that would be parsed as syntax
    if line.strip().lower() in markers:
        return "," + line
    return line


def format_drawer(text: str, name: str = "ocr") -> str:
    """Wrap recognized text in a drawer block.

    >>> format_drawer("hello\\nworld")
    ':ocr:\\nhello\\nworld\\n:end:\\n'
    >>> format_drawer("")
    ':ocr:\\n:end:\\n'
    """
    markers = {start_marker(name).lower(), END_MARKER}
    # tesseract ends every page with a form feed
    text = text.replace("\r\n", "\n").rstrip("\f")
    if text.endswith("\n"):
        text = text[:-1]
    body = ""
    if text:
        body = "\n".join(_escape_line(line, markers) for line in text.split("\n")) + "\n"
    return f"{start_marker(name)}\n{body}{END_MARKER}\n"


def find_drawer(document: TextDocument, start: int, name: str = "ocr") -> tuple[int, int] | None:
    """Return the [start, end) line range of a drawer opening at line `start`."""
    if start >= len(document) or document.line(start).strip().lower() != start_marker(name).lower():
        return None
    for index in range(start + 1, len(document)):
        if document.line(index).strip().lower() == END_MARKER:
            return start, index + 1
    return None


def resolve_image(image_path: str | Path, base_dir: Path) -> Path | None:
    """Absolute path of an existing image file, or None."""
    candidate = Path(image_path).expanduser()
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    candidate = candidate.resolve()
    return candidate if candidate.is_file() else None


class DrawerInserter:
    """Runs OCR for an image and inserts the drawer below its anchor line."""

    def __init__(
        self,
        settings: OCRSettings,
        backend: str | OCRBackendName | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.settings = settings
        self.backend = backend if backend is not None else settings.backend
        self.runner = runner

    @property
    def drawer(self) -> DrawerSettings:
        return self.settings.drawer

    def insert_annotation(
        self, document: TextDocument, anchor_line: int, image_path: str | Path
    ) -> str | None:
        """Insert an OCR drawer after `anchor_line`.

        Returns the inserted block, or None when the image does not resolve to
        an existing file (no OCR runs and the document is untouched).
        """
        resolved = resolve_image(image_path, document.directory)
        if resolved is None:
            logger.debug("no image file at %s; skipping OCR", image_path)
            return None

        logger.info("starting OCR for %s", resolved)
        text = run_ocr(self.backend, resolved, self.settings, runner=self.runner)
        block = format_drawer(text, self.drawer.name)

        position = anchor_line + 1
        if self.drawer.on_existing == "replace":
            existing = find_drawer(document, position, self.drawer.name)
            if existing is not None:
                document.delete_lines(*existing)
        document.insert_text(position, block)
        if self.drawer.fold:
            document.fold_drawers()
        logger.info("done: %d character(s) recognized in %s", len(text.strip()), resolved.name)
        return block
