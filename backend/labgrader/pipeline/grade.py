"""Grader factory/dispatcher."""

from labgrader.grading.base import Grader
from labgrader.grading.lab_report import LabReportGrader

_ALIASES = {"auto": "lab_report"}


def get_grader(name: str) -> Grader:
    grader = name.strip().lower()
    grader = _ALIASES.get(grader, grader)
    if grader == "lab_report":
        return LabReportGrader()
    raise ValueError(f"Unknown grader '{name}'. Use one of: lab_report, auto")
