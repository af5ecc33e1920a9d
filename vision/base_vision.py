"""Base OCR backend abstractions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from core.errors import OCRInvocationError
from executor.command_executor import CommandResult, CommandRunner, run_command


class BaseOCRBackend(ABC):
    """Common `invoke(image_path) -> text` capability over one OCR engine."""

    name: str = "base"

    def __init__(self, runner: CommandRunner | None = None, fail_on_error: bool = True) -> None:
        self.runner = runner or run_command
        self.fail_on_error = fail_on_error
        self.logger = logging.getLogger("od.ocr")

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the engine can be invoked in the current environment."""

    @abstractmethod
    def invoke(self, image_path: Path) -> str:
        """Run OCR on an image and return recognized text."""

    def _execute(self, command: list[str]) -> CommandResult:
        """Run a composed command, applying the engine-failure policy."""
        self.logger.debug("%s command: %s", self.name, command)
        result = self.runner(command)
        if not result.ok:
            if self.fail_on_error:
                raise OCRInvocationError(command, result.returncode, result.stderr)
            self.logger.warning(
                "%s exited with status %d; using its partial output", self.name, result.returncode
            )
        return result
