"""Tesseract OCR backend: recognized text is read from stdout."""

from __future__ import annotations

from pathlib import Path

from core.settings import TesseractSettings
from executor.command_executor import CommandRunner, find_executable
from vision.base_vision import BaseOCRBackend


class TesseractProvider(BaseOCRBackend):
    """Calls `tesseract <image> stdout -l <lang>` and returns stdout verbatim."""

    name = "tesseract"

    def __init__(
        self,
        settings: TesseractSettings | None = None,
        runner: CommandRunner | None = None,
        fail_on_error: bool = True,
    ) -> None:
        super().__init__(runner=runner, fail_on_error=fail_on_error)
        self.settings = settings or TesseractSettings()

    def is_available(self) -> bool:
        return find_executable(self.settings.command) is not None

    def build_command(self, image_path: Path) -> list[str]:
        return [self.settings.command, str(image_path), "stdout", "-l", self.settings.language]

    def invoke(self, image_path: Path) -> str:
        result = self._execute(self.build_command(image_path))
        return result.stdout
