"""Validated runtime settings for OCR backends and drawer formatting."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from core.errors import ConfigurationError


class OCRBackendName(str, Enum):
    """Supported OCR engines."""

    TESSERACT = "tesseract"
    EASYOCR = "easyocr"

    @classmethod
    def parse(cls, value: str | OCRBackendName) -> OCRBackendName:
        """Map a selector to a backend, raising `ConfigurationError` if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Unknown OCR backend {value!r}; expected one of: {supported}."
            ) from exc


class TesseractSettings(BaseModel):
    """Synchronous stdout backend."""

    command: str = "tesseract"
    language: str = "eng"


class EasyOCRSettings(BaseModel):
    """File-output backend driven through a helper script."""

    command: str = "easyocr_lines"
    environment: str | None = None
    environment_manager: str = "conda"
    script_dir: Path = Field(default=Path("~/.local/bin"), validate_default=True)
    languages: list[str] = Field(default_factory=lambda: ["en"])

    @field_validator("script_dir", mode="after")
    @classmethod
    def _expand_script_dir(cls, value: Path) -> Path:
        return value.expanduser().absolute()

    @field_validator("environment", mode="before")
    @classmethod
    def _blank_environment(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DrawerSettings(BaseModel):
    """Annotation block formatting."""

    name: str = "ocr"
    on_existing: Literal["stack", "replace"] = "stack"
    fold: bool = True

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if not value or ":" in value or any(ch.isspace() for ch in value):
            raise ValueError("drawer name must be a single word without colons")
        return value


class OCRSettings(BaseModel):
    """Process-wide configuration read at invocation time."""

    backend: OCRBackendName = OCRBackendName.TESSERACT
    fail_on_engine_error: bool = True
    tesseract: TesseractSettings = Field(default_factory=TesseractSettings)
    easyocr: EasyOCRSettings = Field(default_factory=EasyOCRSettings)
    drawer: DrawerSettings = Field(default_factory=DrawerSettings)

    @field_validator("backend", mode="before")
    @classmethod
    def _parse_backend(cls, value: Any) -> OCRBackendName:
        return OCRBackendName.parse(value)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> OCRSettings:
        """Validate a merged config mapping into settings."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid OCR configuration: {exc}") from exc
