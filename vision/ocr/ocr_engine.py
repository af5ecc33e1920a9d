"""Backend selection and the `run_ocr` entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from core.settings import OCRBackendName, OCRSettings
from executor.command_executor import CommandRunner
from vision.base_vision import BaseOCRBackend
from vision.ocr.easyocr_provider import EasyOCRProvider
from vision.ocr.tesseract_provider import TesseractProvider

logger = logging.getLogger("od.ocr")


def build_backend(
    selector: str | OCRBackendName,
    settings: OCRSettings,
    runner: CommandRunner | None = None,
) -> BaseOCRBackend:
    """Return the backend for `selector`; unknown selectors raise `ConfigurationError`."""
    backend = OCRBackendName.parse(selector)
    if backend is OCRBackendName.TESSERACT:
        return TesseractProvider(
            settings=settings.tesseract,
            runner=runner,
            fail_on_error=settings.fail_on_engine_error,
        )
    return EasyOCRProvider(
        settings=settings.easyocr,
        runner=runner,
        fail_on_error=settings.fail_on_engine_error,
    )


def run_ocr(
    selector: str | OCRBackendName,
    image_path: Path,
    settings: OCRSettings,
    runner: CommandRunner | None = None,
) -> str:
    """Recognize text in `image_path` with the selected backend."""
    backend = build_backend(selector, settings, runner=runner)
    logger.info("recognizing %s with %s", image_path, backend.name)
    text = backend.invoke(Path(image_path))
    return text or ""
