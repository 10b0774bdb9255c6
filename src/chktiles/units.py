"""Dimension strings: unit suffixes and numeric magnitude."""

from __future__ import annotations

import re

from .errors import DimensionError

PX_PER_IN = 96.0
PX_PER_MM = 0.039370787 * PX_PER_IN
PX_PER_PT = 0.0138888889 * PX_PER_IN
PX_PER_PC = 0.1666666667 * PX_PER_IN
PX_PER_FT = PX_PER_IN * 12
PX_PER_CM = 0.3937007874 * PX_PER_IN
PX_PER_M = 0.0254 * PX_PER_IN

# Order matters: "m" is a suffix of "mm" and "cm".
UNIT_MULTIPLIERS: tuple[tuple[str, float], ...] = (
    ("in", PX_PER_IN),
    ("mm", PX_PER_MM),
    ("pt", PX_PER_PT),
    ("pc", PX_PER_PC),
    ("ft", PX_PER_FT),
    ("cm", PX_PER_CM),
    ("m", PX_PER_M),
)

NON_NUMERIC_RE = re.compile(r"[^0-9.]")


def unit_multiplier(value: str) -> float:
    """Return the px-per-unit ratio for the suffix of ``value``.

    Unknown suffixes (including ``px``) and bare numbers are treated as
    pixels and return 1.0.
    """
    for suffix, multiplier in UNIT_MULTIPLIERS:
        if value.endswith(suffix):
            return multiplier
    return 1.0


def magnitude(value: str) -> float:
    """Parse the number in ``value`` after dropping everything but digits and dots.

    Signs and exponents are dropped too, so ``"-5e2"`` reads as ``52``.
    """
    stripped = NON_NUMERIC_RE.sub("", value)
    try:
        return float(stripped)
    except ValueError as exc:
        raise DimensionError(value) from exc
