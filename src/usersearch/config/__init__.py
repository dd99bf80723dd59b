"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigManager:
    """Simple YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name, with or without extension.

        An empty file yields an empty mapping.
        """
        path = self._base_path / name
        if path.suffix not in YAML_SUFFIXES:
            path = path.with_name(f"{path.name}.yaml")
        with path.open("r", encoding="utf-8") as handle:
            try:
                loaded = yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise ValueError(f"Config {path} is not valid YAML: {exc}") from exc
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config {path} must be a YAML mapping")
        return loaded


__all__ = ["ConfigManager"]
