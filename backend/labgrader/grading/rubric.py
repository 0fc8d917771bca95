"""Keyword and section heuristics for rubric scoring."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

DEFAULT_SECTION_MIN_LENGTH = 20


def count_keywords(text: str | None, keywords: Iterable[str] | None) -> int:
    """Count keywords present in ``text`` (case-insensitive, presence only).

    Every entry of ``keywords`` is checked, so a repeated keyword counts once
    per repetition.
    """
    if not text or not keywords:
        return 0
    lowered = text.lower()
    return sum(1 for keyword in keywords if keyword.lower() in lowered)


def missing_keywords(text: str | None, keywords: Iterable[str] | None) -> list[str]:
    if not keywords:
        return []
    lowered = (text or "").lower()
    return [keyword for keyword in keywords if keyword.lower() not in lowered]


def has_section(text: str | None, indicators: Sequence[str], min_length: int = DEFAULT_SECTION_MIN_LENGTH) -> bool:
    """Return True when an indicator is followed by at least ``min_length`` characters.

    The length is measured from the indicator's first occurrence to the end of
    the text, so a heading mentioned only at the very end does not count.
    Indicators are tried in order and the first one clearing the bar wins.
    """
    if not text:
        return False

    lowered = text.lower()
    for indicator in indicators:
        index = lowered.find(indicator.lower())
        if index != -1 and len(text) - index >= min_length:
            return True
    return False
