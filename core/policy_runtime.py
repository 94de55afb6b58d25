"""Configuration loading and merging."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from core.settings import HandlerConfig

APP_NAME = "phpstorm-url-handler"


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


def user_config_path() -> Path:
    """Per-user override file under the XDG config directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_NAME / "config.yaml"


def load_effective_config(root: Path, user_path: Path | None = None) -> HandlerConfig:
    """Load config/default.yaml under root and apply the user override."""
    default_cfg = load_yaml(root / "config" / "default.yaml")
    user_cfg = load_yaml(user_path if user_path is not None else user_config_path())
    return HandlerConfig.model_validate(merge_dicts(default_cfg, user_cfg))
