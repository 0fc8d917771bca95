"""Numeric value extraction and tolerance checks for lab reports."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from labgrader.schemas import ValueRange

# Label separators in priority order: "field: 1", "field = 1", "field : 1".
_SEPARATOR_PATTERNS = (r"[:\s]+", r"[=\s]+", r"\s*:\s*")
_NUMBER_RUN = r"([0-9.]+)"
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _field_patterns(field: str) -> list[re.Pattern[str]]:
    label = re.escape(field)
    return [re.compile(f"{label}{separator}{_NUMBER_RUN}", re.IGNORECASE) for separator in _SEPARATOR_PATTERNS]


def _parse_leading_float(raw: str) -> float | None:
    """Parse the longest numeric prefix of ``raw`` ("12.5.3" -> 12.5)."""
    match = _LEADING_NUMBER.match(raw)
    if not match:
        return None
    return float(match.group(0))


def extract_number(text: str | None, field: str) -> float | None:
    """Return the number labelled ``field`` in ``text``, or None if absent."""
    if not text or not field:
        return None

    for pattern in _field_patterns(field):
        match = pattern.search(text)
        if match and match.group(1):
            return _parse_leading_float(match.group(1))
    return None


def is_within_tolerance(actual: float | None, expected: float, tolerance: float = 0) -> bool:
    if actual is None:
        return False
    return abs(actual - expected) <= tolerance


def is_in_range(value: float | None, value_range: ValueRange | Mapping[str, Any] | None) -> bool:
    """Check ``min <= value <= max``; a missing bound fails the check.

    A bound of 0 counts as a real bound.
    """
    if value is None or value_range is None:
        return False

    if isinstance(value_range, ValueRange):
        minimum, maximum = value_range.minimum, value_range.maximum
    elif isinstance(value_range, Mapping):
        minimum, maximum = value_range.get("min"), value_range.get("max")
    else:
        return False

    if minimum is None or maximum is None:
        return False
    return minimum <= value <= maximum
