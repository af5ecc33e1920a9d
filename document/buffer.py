"""Line-oriented text document standing in for the host editor buffer."""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

FoldHandler = Callable[["TextDocument"], None]

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+\Z")


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only, keeping line endings. Form feeds stay inside lines."""
    return _LINE_RE.findall(text)


class TextDocument:
    """Holds document text as lines (with their newlines) plus a fold hook.

    `mutations` and `fold_requests` count edits and fold requests so callers
    can tell whether anything happened.
    """

    def __init__(self, text: str = "", path: Path | None = None, on_fold: FoldHandler | None = None) -> None:
        self.lines: list[str] = split_lines(text)
        self.path = path
        self.on_fold = on_fold
        self.mutations = 0
        self.fold_requests = 0

    @classmethod
    def load(cls, path: Path, on_fold: FoldHandler | None = None) -> TextDocument:
        path = Path(path)
        text = path.read_text(encoding="utf-8") if path.exists() else ""
        return cls(text, path=path, on_fold=on_fold)

    def save(self, path: Path | None = None) -> Path:
        target = Path(path or self.path or "")
        if not str(target):
            raise ValueError("Document has no path to save to.")
        target.write_text(self.text, encoding="utf-8")
        self.path = target
        return target

    @property
    def text(self) -> str:
        return "".join(self.lines)

    @property
    def directory(self) -> Path:
        return self.path.parent if self.path is not None else Path.cwd()

    def __len__(self) -> int:
        return len(self.lines)

    def line(self, index: int) -> str:
        """Return a line without its trailing newline."""
        return self.lines[index].rstrip("\r\n")

    def insert_text(self, line_index: int, text: str) -> None:
        """Insert `text` so that it starts at the beginning of `line_index`."""
        if not 0 <= line_index <= len(self.lines):
            raise IndexError(f"line {line_index} out of range for {len(self.lines)} lines")
        if line_index == len(self.lines) and self.lines and not self.lines[-1].endswith("\n"):
            self.lines[-1] += "\n"
        self.lines[line_index:line_index] = split_lines(text)
        self.mutations += 1

    def delete_lines(self, start: int, end: int) -> None:
        """Delete lines in the half-open range [start, end)."""
        del self.lines[start:end]
        self.mutations += 1

    def fold_drawers(self) -> None:
        """Ask the view to collapse drawers."""
        self.fold_requests += 1
        if self.on_fold is not None:
            self.on_fold(self)
