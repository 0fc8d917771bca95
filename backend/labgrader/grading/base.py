"""Interfaces shared by lab report graders."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from labgrader.schemas import GradingCriteria

FEEDBACK_KEYS = ("comments", "details", "overall")


@dataclass
class GradeOutcome:
    """Marks for one lab report, already scaled onto the assignment's marks.

    ``breakdown`` holds the camelCase score parts (``ruleBasedScore``,
    ``rubricScore``, ``maxScore``, ``percentage``...). ``feedback`` is keyed by
    ``FEEDBACK_KEYS``: per-criterion ✓/✗ lines, hints for the student and the
    overall tier message.
    """

    marks_awarded: float
    breakdown: dict[str, Any]
    feedback: dict[str, Any]
    model_name: str


class Grader(Protocol):
    name: str

    def grade(
        self,
        report_text: str | None,
        criteria: GradingCriteria | Mapping[str, Any] | None,
        max_marks: int,
    ) -> GradeOutcome:
        """Score ``report_text`` against expected values and rubric in ``criteria``.

        A missing report or missing criteria scores zero marks rather than raising.
        """
