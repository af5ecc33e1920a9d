"""CLI entrypoint for ocr-drawer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer

from core.errors import OCRDrawerError
from ui.cli import commands

app = typer.Typer(help="Insert OCR text drawers below images in org documents")
config_app = typer.Typer(help="Configuration commands")

_state: dict[str, Path | None] = {"config": None}


@app.callback()
def main_callback(
    config: Path | None = typer.Option(None, "--config", "-c", help="Extra YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _state["config"] = config


def _guarded(func: Callable[..., None], **kwargs: Any) -> None:
    try:
        func(config_path=_state["config"], **kwargs)
    except (OCRDrawerError, OSError) as exc:
        typer.secho(f"error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command("ocr")
def ocr_cmd(
    image: Path = typer.Argument(..., help="Image file"),
    backend: str | None = typer.Option(None, "--backend", "-b", help="tesseract or easyocr"),
) -> None:
    """Print recognized text for an image."""
    _guarded(commands.ocr, image=image, backend=backend)


@app.command("insert")
def insert_cmd(
    document: Path = typer.Argument(..., help="Org document"),
    image: Path = typer.Argument(..., help="Image to link"),
    line: int | None = typer.Option(None, "--line", "-l", min=0, help="0-based line; default end"),
) -> None:
    """Insert an image link followed by its OCR drawer."""
    _guarded(commands.insert, document_path=document, image=image, line=line)


@app.command("annotate")
def annotate_cmd(document: Path = typer.Argument(..., help="Org document")) -> None:
    """Add OCR drawers under existing image links."""
    _guarded(commands.annotate, document_path=document)


@app.command("install-script")
def install_script_cmd() -> None:
    """Install the EasyOCR helper script when missing."""
    _guarded(commands.install_script)


@app.command("backends")
def backends_cmd() -> None:
    """List OCR engines and whether they can be invoked."""
    _guarded(commands.backends)


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    _guarded(commands.config_show)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
