"""Configuration loading for the OCR drawer runtime."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from core.settings import OCRSettings


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path, user_config: Path | None = None) -> dict[str, Any]:
    """Merge `config/default.yaml` under `root` with an optional user file."""
    merged = load_yaml(root / "config" / "default.yaml")
    if user_config is not None:
        if not user_config.exists():
            raise FileNotFoundError(f"Config file not found: {user_config}")
        merged = merge_dicts(merged, load_yaml(user_config))
    return merged


def load_settings(root: Path, user_config: Path | None = None) -> OCRSettings:
    """Load and validate settings."""
    return OCRSettings.from_mapping(load_effective_config(root, user_config))
