from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class TileCheckConfig:
    min_width: float = 80.0
    min_height: float = 80.0
    spell_language: str = "en_US"
    text_line_break: str = "/"
    extension: str = ".svg"
    digest: str = "sha256"


DEFAULT_CONFIG = TileCheckConfig()


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise ConfigError(f"Unable to read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected mapping at top of YAML: {path}")
    return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {}) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Expected mapping for '{name}' section")
    return section


def load_config(path: Path) -> TileCheckConfig:
    data = _load_yaml(path)
    size = _section(data, "size")
    spelling = _section(data, "spelling")
    duplicates = _section(data, "duplicates")

    try:
        min_width = float(size.get("min_width", DEFAULT_CONFIG.min_width))
        min_height = float(size.get("min_height", DEFAULT_CONFIG.min_height))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid size threshold values: {exc}") from exc

    digest = str(duplicates.get("digest", DEFAULT_CONFIG.digest))
    if digest not in hashlib.algorithms_available:
        raise ConfigError(f"Unknown digest algorithm: {digest}")

    return TileCheckConfig(
        min_width=min_width,
        min_height=min_height,
        spell_language=str(spelling.get("language", DEFAULT_CONFIG.spell_language)),
        text_line_break=str(spelling.get("line_break", DEFAULT_CONFIG.text_line_break)),
        extension=str(duplicates.get("extension", DEFAULT_CONFIG.extension)),
        digest=digest,
    )
