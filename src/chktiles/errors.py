from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

E1000_PARSE_ERROR = "E1000_PARSE_ERROR"
E1001_CONFIG_ERROR = "E1001_CONFIG_ERROR"


@dataclass
class TileCheckError(Exception):
    code: str
    message: str
    hint: str

    def __str__(self) -> str:
        return self.message


class TileParseError(TileCheckError):
    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(
            code=E1000_PARSE_ERROR,
            message=message,
            hint="Open the tile in an editor and fix the malformed XML.",
        )
        self.path = path


class ConfigError(TileCheckError):
    def __init__(self, message: str) -> None:
        super().__init__(
            code=E1001_CONFIG_ERROR,
            message=message,
            hint="Check the YAML passed with --config.",
        )


class DimensionError(ValueError):
    """Raised when a width/height string carries no usable number."""

    def __init__(self, value: str) -> None:
        super().__init__(f"unable to convert {value!r} to a number")
        self.value = value
