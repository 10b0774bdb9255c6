from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Protocol

import typer


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    path: str
    severity: Severity
    code: str
    message: str

    def format_line(self) -> str:
        return f"{json.dumps(self.path, ensure_ascii=False)}\t{self.severity.value}\t{self.message}"


def error(path: Path | str, code: str, message: str) -> Diagnostic:
    return Diagnostic(path=str(path), severity=Severity.ERROR, code=code, message=message)


def warning(path: Path | str, code: str, message: str) -> Diagnostic:
    return Diagnostic(path=str(path), severity=Severity.WARNING, code=code, message=message)


class DiagnosticSink(Protocol):
    def emit(self, diagnostic: Diagnostic) -> None: ...


class ConsoleSink:
    """Writes one tab-separated line per diagnostic."""

    def __init__(self, echo: Callable[[str], None] = typer.echo) -> None:
        self._echo = echo

    def emit(self, diagnostic: Diagnostic) -> None:
        self._echo(diagnostic.format_line())

