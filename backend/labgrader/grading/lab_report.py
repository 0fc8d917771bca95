"""Lab report grader backed by the rule and rubric auto-grader."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from labgrader.grading.auto_grader import auto_grade
from labgrader.grading.base import GradeOutcome, Grader
from labgrader.schemas import GradingCriteria
from labgrader.settings import settings


class LabReportGrader(Grader):
    name = "lab_report"

    def __init__(self, legacy_max_score: bool | None = None) -> None:
        if legacy_max_score is None:
            legacy_max_score = settings.legacy_max_score
        self.legacy_max_score = legacy_max_score

    def grade(
        self,
        report_text: str | None,
        criteria: GradingCriteria | Mapping[str, Any] | None,
        max_marks: int,
    ) -> GradeOutcome:
        result = auto_grade(report_text, criteria, legacy_max_score=self.legacy_max_score)
        marks = round(result.percentage / 100 * max_marks, 2)

        breakdown = {
            **result.breakdown.to_json_dict(),
            "score": result.score,
            "maxScore": result.max_score,
            "percentage": result.percentage,
        }
        feedback = {
            "comments": result.feedback,
            "details": result.detailed_feedback,
            "overall": result.overall_feedback,
        }
        return GradeOutcome(marks, breakdown, feedback, model_name=self.name)
