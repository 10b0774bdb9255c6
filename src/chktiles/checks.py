from __future__ import annotations

from pathlib import Path

from .config import DEFAULT_CONFIG, TileCheckConfig
from .errors import DimensionError
from .metadata import TileDocument
from .report import Diagnostic, error, warning
from .spelling import Speller, misspelled_words
from .units import magnitude, unit_multiplier

E1002_DIMENSION_UNPARSEABLE = "E1002_DIMENSION_UNPARSEABLE"
E2001_KEYWORDS_MISSING = "E2001_KEYWORDS_MISSING"
E2002_WIDTH_TOO_SMALL = "E2002_WIDTH_TOO_SMALL"
E2003_HEIGHT_TOO_SMALL = "E2003_HEIGHT_TOO_SMALL"
E2004_IDENTIFIER_MISSING = "E2004_IDENTIFIER_MISSING"
E2005_KEYWORDS_MISSPELLED = "E2005_KEYWORDS_MISSPELLED"
E2006_TEXT_MISSPELLED = "E2006_TEXT_MISSPELLED"
W2101_WIDTH_UNITS = "W2101_WIDTH_UNITS"
W2102_HEIGHT_UNITS = "W2102_HEIGHT_UNITS"


def check_keywords(path: Path | str, tile: TileDocument) -> list[Diagnostic]:
    if not tile.keywords:
        return [error(path, E2001_KEYWORDS_MISSING, "keywords missing")]
    return []


def _dimension(path: Path | str, name: str, value: str) -> tuple[float, list[Diagnostic]]:
    try:
        return magnitude(value), []
    except DimensionError as exc:
        return 0.0, [error(path, E1002_DIMENSION_UNPARSEABLE, f"{name}: {exc}")]


def check_size(
    path: Path | str, tile: TileDocument, config: TileCheckConfig = DEFAULT_CONFIG
) -> list[Diagnostic]:
    # Compares the raw number against the threshold; "5mm" and "5" fail alike.
    issues: list[Diagnostic] = []
    width, width_issues = _dimension(path, "width", tile.width)
    height, height_issues = _dimension(path, "height", tile.height)
    issues.extend(width_issues)
    if width < config.min_width:
        issues.append(error(path, E2002_WIDTH_TOO_SMALL, f"width ({width:f}) is too small"))
    issues.extend(height_issues)
    if height < config.min_height:
        issues.append(error(path, E2003_HEIGHT_TOO_SMALL, f"height ({height:f}) is too small"))
    return issues


def check_units(path: Path | str, tile: TileDocument) -> list[Diagnostic]:
    issues: list[Diagnostic] = []
    if unit_multiplier(tile.width) != 1.0:
        issues.append(
            warning(path, W2101_WIDTH_UNITS, f"width units are not px, {tile.width!r}")
        )
    if unit_multiplier(tile.height) != 1.0:
        issues.append(
            warning(path, W2102_HEIGHT_UNITS, f"height units are not px, {tile.height!r}")
        )
    return issues


def check_identifier(path: Path | str, tile: TileDocument) -> list[Diagnostic]:
    if not tile.identifier:
        return [error(path, E2004_IDENTIFIER_MISSING, "identifier missing")]
    return []


def check_keyword_spelling(
    path: Path | str, tile: TileDocument, speller: Speller | None
) -> list[Diagnostic]:
    if speller is None or not tile.keywords:
        return []
    rejected = misspelled_words(speller, tile.keywords)
    if rejected:
        return [
            error(path, E2005_KEYWORDS_MISSPELLED, f"keywords misspelled: {', '.join(rejected)}")
        ]
    return []


def check_text_spelling(
    path: Path | str,
    tile: TileDocument,
    speller: Speller | None,
    config: TileCheckConfig = DEFAULT_CONFIG,
) -> list[Diagnostic]:
    if speller is None or not tile.text_runs:
        return []
    rejected = misspelled_words(speller, tile.text_runs, strip_chars=config.text_line_break)
    if rejected:
        return [error(path, E2006_TEXT_MISSPELLED, f"text misspelled: {', '.join(rejected)}")]
    return []


def run_checks(
    path: Path | str,
    tile: TileDocument,
    speller: Speller | None = None,
    config: TileCheckConfig = DEFAULT_CONFIG,
) -> list[Diagnostic]:
    """Run every tile check in report order and return their diagnostics."""
    issues: list[Diagnostic] = []
    issues.extend(check_keywords(path, tile))
    issues.extend(check_size(path, tile, config))
    issues.extend(check_units(path, tile))
    issues.extend(check_identifier(path, tile))
    issues.extend(check_keyword_spelling(path, tile, speller))
    issues.extend(check_text_spelling(path, tile, speller, config))
    return issues
