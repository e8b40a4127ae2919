"""Loads YAML/JSON configuration files for the demo driver."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from grid_demo.src.core.contract import DEFAULT_MAX_VALUE, DEFAULT_MIN_VALUE


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_demo_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the driver configuration, or ``{}`` when no file exists."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "demo_config.yaml"
    if Path(path).exists():
        return load_config(str(path))
    return {}


def fill_range(config: Dict[str, Any]) -> tuple[int, int]:
    """Return ``(min, max)`` from the ``fill_range`` section, defaulting to the contract range."""
    section = config.get("fill_range") or {}
    return (
        int(section.get("min", DEFAULT_MIN_VALUE)),
        int(section.get("max", DEFAULT_MAX_VALUE)),
    )


__all__ = ["load_config", "load_demo_config", "fill_range"]
