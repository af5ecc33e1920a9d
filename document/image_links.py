"""Org image links: inserting them and finding existing ones."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from core.event_bus import IMAGE_INSERTED, EventBus
from document.buffer import TextDocument
from document.drawer import DrawerInserter, find_drawer

logger = logging.getLogger("od.links")

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff", ".webp"}

_LINK_RE = re.compile(r"^\s*\[\[file:(?P<path>[^\]]+)\](?:\[[^\]]*\])?\]\s*$")


@dataclass(frozen=True)
class ImageLink:
    line: int
    path: str


def format_image_link(image_path: str | Path) -> str:
    return f"[[file:{image_path}]]"


def parse_image_link(line: str) -> str | None:
    """Return the target of a line holding only a `file:` link to an image."""
    match = _LINK_RE.match(line)
    if match is None:
        return None
    target = match.group("path").split("::", 1)[0]
    if Path(target).suffix.lower() not in IMAGE_EXTENSIONS:
        return None
    return target


def find_image_links(document: TextDocument) -> list[ImageLink]:
    links = []
    for index in range(len(document)):
        target = parse_image_link(document.line(index))
        if target is not None:
            links.append(ImageLink(line=index, path=target))
    return links


def insert_image_link(
    document: TextDocument,
    line_index: int,
    image_path: str | Path,
    bus: EventBus,
) -> int:
    """Insert an image link at `line_index` and announce it on `bus`.

    Returns the line holding the link, which is the anchor for annotations.
    """
    document.insert_text(line_index, format_image_link(image_path) + "\n")
    bus.emit(
        IMAGE_INSERTED,
        {"image_path": str(image_path), "document": document, "anchor_line": line_index},
    )
    return line_index


def annotate_document(document: TextDocument, inserter: DrawerInserter) -> int:
    """Add a drawer under every image link that lacks one.

    Links are processed bottom-up so earlier anchors stay valid. Returns the
    number of drawers inserted.
    """
    name = inserter.drawer.name
    inserted = 0
    for link in reversed(find_image_links(document)):
        if find_drawer(document, link.line + 1, name) is not None:
            continue
        if inserter.insert_annotation(document, link.line, link.path) is not None:
            inserted += 1
        else:
            logger.warning("image not found, skipped: %s", link.path)
    return inserted
