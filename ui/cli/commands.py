"""Typer command handlers."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from core.settings import OCRBackendName
from document.buffer import TextDocument
from document.image_links import annotate_document, insert_image_link
from vision.ocr.easyocr_provider import EasyOCRProvider
from vision.ocr.ocr_engine import build_backend, run_ocr


def _runtime(config_path: Path | None = None) -> RuntimeBundle:
    return Orchestrator(user_config=config_path).build()


def ocr(image: Path, backend: str | None = None, config_path: Path | None = None) -> None:
    """Print recognized text for one image."""
    bundle = _runtime(config_path)
    if not image.is_file():
        raise FileNotFoundError(f"Image not found: {image}")
    text = run_ocr(backend or bundle.settings.backend, image.resolve(), bundle.settings)
    typer.echo(text, nl=not text.endswith("\n"))


def insert(document_path: Path, image: Path, line: int | None, config_path: Path | None = None) -> None:
    """Insert an image link into a document and let the enabled hook annotate it."""
    bundle = _runtime(config_path)
    image = image.expanduser().resolve()
    if not image.is_file():
        raise FileNotFoundError(f"Image not found: {image}")
    document = TextDocument.load(document_path)
    position = len(document) if line is None else min(line, len(document))
    subscription = bundle.lifecycle.enable()
    try:
        insert_image_link(document, position, image, bundle.bus)
    finally:
        bundle.lifecycle.disable(subscription)
    document.save()
    typer.echo(f"Inserted {image} at line {position + 1} of {document_path}")


def annotate(document_path: Path, config_path: Path | None = None) -> None:
    """Add drawers under every image link lacking one."""
    bundle = _runtime(config_path)
    document = TextDocument.load(document_path)
    count = annotate_document(document, bundle.inserter)
    if count:
        document.save()
    typer.echo(f"Added {count} OCR drawer(s) to {document_path}")


def install_script(config_path: Path | None = None) -> None:
    """Provision the EasyOCR helper script if it is missing."""
    bundle = _runtime(config_path)
    path = EasyOCRProvider(settings=bundle.settings.easyocr).resolve_command()
    typer.echo(str(path))


def backends(config_path: Path | None = None) -> None:
    """Report which OCR engines can be invoked."""
    bundle = _runtime(config_path)
    for name in OCRBackendName:
        backend = build_backend(name, bundle.settings)
        marker = "*" if name is bundle.settings.backend else " "
        status = "available" if backend.is_available() else "missing"
        typer.echo(f"{marker} {name.value}: {status}")


def config_show(config_path: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(config_path)
    typer.echo(json.dumps(bundle.settings.model_dump(mode="json"), indent=2))
