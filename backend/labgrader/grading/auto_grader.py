"""Rule-based plus rubric-based auto-grading of lab report text.

The rule pass extracts labelled numeric answers (``voltage: 12``) and checks
them against expected values. The rubric pass scores report structure:
required sections, vocabulary and overall length. Both passes are summed into
a single score with per-criterion feedback.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from labgrader.grading.extraction import extract_number, is_within_tolerance
from labgrader.grading.rubric import DEFAULT_SECTION_MIN_LENGTH, count_keywords, has_section, missing_keywords
from labgrader.schemas import GradeBreakdown, GradingCriteria, GradingResult

logger = logging.getLogger(__name__)

DEFAULT_PASS_TOTAL = 50
DEFAULT_POINTS_PER_KEYWORD = 2
DEFAULT_KEYWORD_MAX_POINTS = 10
DEFAULT_MIN_LENGTH_POINTS = 5
MISSING_KEYWORD_HINTS = 3
MISSING_INPUT_MAX_SCORE = 100

OVERALL_FEEDBACK_TIERS = (
    (90, "🌟 Excellent work! Your calculations are accurate and your report is comprehensive."),
    (80, "👍 Good job! Your work shows solid understanding."),
    (70, "✅ Satisfactory work. Review the feedback for areas to improve."),
    (60, "⚠️ Needs improvement. Please review your calculations and report structure."),
)
FALLBACK_FEEDBACK = "❌ Please review the assignment requirements and try again."


def utcnow() -> datetime:
    """Return timezone-aware UTC now timestamp."""
    return datetime.now(timezone.utc)


@dataclass
class _PassOutcome:
    score: float = 0.0
    feedback: list[str] = field(default_factory=list)
    details: list[str] = field(default_factory=list)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _number(value: Any, default: float | None = None) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not math.isfinite(value):
        return default
    return value


def _strings(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def _fmt(value: float) -> str:
    """Render 15.0 as "15" and 0.25 as "0.25"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _pass_total(section: Any) -> float:
    return _number(_mapping(section).get("totalPoints"), DEFAULT_PASS_TOTAL)


def _coerce_criteria(criteria: GradingCriteria | Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if isinstance(criteria, GradingCriteria):
        return criteria.model_dump(by_alias=True, exclude_none=True)
    if isinstance(criteria, Mapping):
        return criteria
    return None


def _grade_rules(submission: str, rules: Mapping[str, Any]) -> _PassOutcome:
    outcome = _PassOutcome()

    for name, rule in _mapping(rules.get("expectedValues")).items():
        rule = _mapping(rule)
        points = _number(rule.get("points"), 0)
        extracted = extract_number(submission, name)

        if extracted is None:
            outcome.feedback.append(f"✗ {name}: Not found (0/{_fmt(points)})")
            outcome.details.append(f"Could not find {name} value in your submission.")
            continue

        expected = _number(rule.get("value"))
        tolerance = _number(rule.get("tolerance"), 0)
        if expected is not None and is_within_tolerance(extracted, expected, tolerance):
            outcome.score += points
            outcome.feedback.append(f"✓ {name}: Correct ({_fmt(points)}/{_fmt(points)})")
            outcome.details.append(f"Your {name} value of {_fmt(extracted)} is correct!")
        else:
            outcome.feedback.append(f"✗ {name}: Incorrect (0/{_fmt(points)})")
            outcome.details.append(f"Your {name} value of {_fmt(extracted)} is outside the expected range.")

    return outcome


def _grade_rubric(submission: str, rubric: Mapping[str, Any]) -> _PassOutcome:
    outcome = _PassOutcome()

    for name, section in _mapping(rubric.get("sections")).items():
        section = _mapping(section)
        points = _number(section.get("points"), 0)
        # An explicit empty list means no indicator can match.
        raw_indicators = section.get("indicators")
        indicators = _strings(raw_indicators) if isinstance(raw_indicators, (list, tuple, str)) else [name]
        min_length = _number(section.get("minLength"), DEFAULT_SECTION_MIN_LENGTH)

        if has_section(submission, indicators, min_length):
            outcome.score += points
            outcome.feedback.append(f"✓ {name}: Present ({_fmt(points)}/{_fmt(points)})")
        else:
            outcome.feedback.append(f"✗ {name}: Missing (0/{_fmt(points)})")
            outcome.details.append(f"Please include a {name} section in your report.")

    keywords = rubric.get("keywords")
    if isinstance(keywords, Mapping):
        terms = _strings(keywords.get("list"))
        found = count_keywords(submission, terms)
        per_keyword = _number(keywords.get("pointsPerKeyword"), DEFAULT_POINTS_PER_KEYWORD)
        cap = _number(keywords.get("maxPoints"), DEFAULT_KEYWORD_MAX_POINTS)
        keyword_points = min(found * per_keyword, cap)

        outcome.score += keyword_points
        marker = "✓" if found else "✗"
        outcome.feedback.append(f"{marker} Keywords found: {found} (+{_fmt(keyword_points)} points)")
        if found < len(terms):
            missing = missing_keywords(submission, terms)
            if missing:
                hints = ", ".join(missing[:MISSING_KEYWORD_HINTS])
                outcome.details.append(f"Consider including these terms: {hints}")

    min_length = _number(rubric.get("minLength"))
    if min_length:
        length_points = _number(rubric.get("minLengthPoints"), DEFAULT_MIN_LENGTH_POINTS)
        if len(submission) >= min_length:
            outcome.score += length_points
            outcome.feedback.append(f"✓ Sufficient detail (+{_fmt(length_points)} points)")
        else:
            outcome.feedback.append(f"✗ Report too short (0/{_fmt(length_points)})")
            outcome.details.append(
                f"Your report should be at least {_fmt(min_length)} characters. Current: {len(submission)}"
            )

    return outcome


def compute_percentage(score: float, max_score: float) -> int:
    """Round half up like the grade book does, clamped to 0..100."""
    if max_score <= 0:
        return 0
    ratio = score / max_score * 100
    if math.isnan(ratio):
        return 0
    if math.isinf(ratio):
        return 100 if ratio > 0 else 0
    percentage = math.floor(ratio + 0.5)
    return max(0, min(100, percentage))


def overall_feedback_for(percentage: int) -> str:
    for threshold, message in OVERALL_FEEDBACK_TIERS:
        if percentage >= threshold:
            return message
    return FALLBACK_FEEDBACK


def missing_input_result(now: datetime | None = None) -> GradingResult:
    return GradingResult(
        score=0,
        max_score=MISSING_INPUT_MAX_SCORE,
        percentage=0,
        feedback=["Unable to grade: Missing submission or grading criteria"],
        auto_graded=True,
        graded_at=now or utcnow(),
    )


def auto_grade(
    submission: str | None,
    criteria: GradingCriteria | Mapping[str, Any] | None,
    *,
    legacy_max_score: bool = False,
    now: datetime | None = None,
) -> GradingResult:
    """Grade ``submission`` against ``criteria`` and return a fresh result.

    Missing or malformed configuration falls back to defaults; this never
    raises for well-typed input. With ``legacy_max_score`` the maximum score
    always includes 50 points for each of rules and rubric, whether or not
    they are configured.
    """
    config = _coerce_criteria(criteria)
    if not isinstance(submission, str) or config is None:
        logger.warning("auto-grade skipped: missing submission or grading criteria")
        return missing_input_result(now)

    breakdown = GradeBreakdown()
    feedback: list[str] = []
    details: list[str] = []
    total = 0.0
    max_score = 0.0

    rules = config.get("rules")
    if isinstance(rules, Mapping) and isinstance(rules.get("expectedValues"), Mapping):
        outcome = _grade_rules(submission, rules)
        breakdown.rule_based_score = outcome.score
        breakdown.rule_max_score = _pass_total(rules)
        feedback.extend(outcome.feedback)
        details.extend(outcome.details)
        total += outcome.score
        max_score += breakdown.rule_max_score

    rubric = config.get("rubric")
    if isinstance(rubric, Mapping):
        outcome = _grade_rubric(submission, rubric)
        breakdown.rubric_score = outcome.score
        breakdown.rubric_max_score = _pass_total(rubric)
        feedback.extend(outcome.feedback)
        details.extend(outcome.details)
        total += outcome.score
        max_score += breakdown.rubric_max_score

    if legacy_max_score:
        max_score = _pass_total(rules) + _pass_total(rubric)

    percentage = compute_percentage(total, max_score)
    result = GradingResult(
        score=total,
        max_score=max_score,
        percentage=percentage,
        breakdown=breakdown,
        feedback=feedback,
        detailed_feedback=details,
        overall_feedback=overall_feedback_for(percentage),
        auto_graded=True,
        graded_at=now or utcnow(),
    )
    logger.info(
        "auto-grade complete",
        extra={"score": total, "max_score": max_score, "percentage": percentage},
    )
    return result
