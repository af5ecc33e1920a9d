"""Error types raised by the OCR drawer pipeline."""

from __future__ import annotations


class OCRDrawerError(Exception):
    """Base class for pipeline failures surfaced to callers."""


class ConfigurationError(OCRDrawerError, ValueError):
    """Raised for invalid settings such as an unknown backend selector."""


class OCRInvocationError(OCRDrawerError, RuntimeError):
    """Raised when an OCR engine exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip().splitlines()[-1] if stderr.strip() else "no error output"
        super().__init__(f"{command[0]} exited with status {returncode}: {detail}")
