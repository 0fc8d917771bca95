"""Conversion of grading results into stored submission grade records."""

from __future__ import annotations

import logging
from datetime import datetime

from labgrader.grading.auto_grader import utcnow
from labgrader.schemas import GradeRecord, GradingResult

logger = logging.getLogger(__name__)

DEFAULT_ASSIGNMENT_MAX_SCORE = 100


def to_grade_record(result: GradingResult, assignment_max_score: int = DEFAULT_ASSIGNMENT_MAX_SCORE) -> GradeRecord:
    """Scale an auto-grade onto the assignment's max score for storage."""
    if assignment_max_score <= 0:
        raise ValueError("assignment_max_score must be positive")

    marks = round(result.percentage / 100 * assignment_max_score, 2)
    return GradeRecord(
        marks=marks,
        feedback=result.overall_feedback,
        feedback_array=[*result.feedback, *result.detailed_feedback],
        breakdown=result.breakdown.to_json_dict(),
        graded_at=result.graded_at,
        auto_graded=result.auto_graded,
    )


def apply_manual_override(
    record: GradeRecord,
    marks: float,
    feedback: str | None = None,
    graded_by: str | None = None,
    now: datetime | None = None,
) -> GradeRecord:
    """Return a teacher-graded copy of ``record``, remembering any auto score."""
    if marks < 0:
        raise ValueError("marks must not be negative")

    update: dict[str, object] = {
        "marks": marks,
        "graded_by": graded_by,
        "graded_at": now or utcnow(),
        "auto_graded": False,
    }
    if feedback is not None:
        update["feedback"] = feedback
    if record.auto_graded:
        update["was_auto_graded"] = True
        update["previous_auto_score"] = record.marks
        logger.info(
            "auto-grade overridden",
            extra={"previous_auto_score": record.marks, "marks": marks, "graded_by": graded_by},
        )
    return record.model_copy(update=update)
