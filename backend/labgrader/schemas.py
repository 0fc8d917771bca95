"""Grading criteria, result and record schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes that read and dump camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ExpectedValue(CamelModel):
    value: float
    tolerance: float = Field(default=0, ge=0)
    points: float = Field(default=0, ge=0)


class RuleCriteria(CamelModel):
    total_points: int | None = None
    expected_values: dict[str, ExpectedValue] = Field(default_factory=dict)


class SectionCriterion(CamelModel):
    indicators: list[str] | None = None
    points: float = 0
    min_length: int | None = None


class KeywordCriterion(CamelModel):
    terms: list[str] = Field(default_factory=list, alias="list")
    points_per_keyword: float | None = None
    max_points: float | None = None


class RubricCriteria(CamelModel):
    total_points: int | None = None
    sections: dict[str, SectionCriterion] = Field(default_factory=dict)
    keywords: KeywordCriterion | None = None
    min_length: int | None = None
    min_length_points: float | None = None


class GradingCriteria(CamelModel):
    rules: RuleCriteria | None = None
    rubric: RubricCriteria | None = None


class ValueRange(CamelModel):
    minimum: float | None = Field(default=None, alias="min")
    maximum: float | None = Field(default=None, alias="max")


class GradeBreakdown(CamelModel):
    rule_based_score: float | None = None
    rule_max_score: float | None = None
    rubric_score: float | None = None
    rubric_max_score: float | None = None


class GradingResult(CamelModel):
    score: float
    max_score: float
    percentage: int = Field(ge=0, le=100)
    breakdown: GradeBreakdown = Field(default_factory=GradeBreakdown)
    feedback: list[str] = Field(default_factory=list)
    detailed_feedback: list[str] = Field(default_factory=list)
    overall_feedback: str = ""
    auto_graded: bool = True
    graded_at: datetime | None = None


class GradingTemplate(CamelModel):
    name: str
    description: str
    criteria: GradingCriteria


class GradeRecord(CamelModel):
    """Grade metadata stored on a submission or progress record."""

    marks: float
    feedback: str = ""
    feedback_array: list[str] = Field(default_factory=list)
    breakdown: dict[str, Any] = Field(default_factory=dict)
    graded_by: str | None = None
    graded_at: datetime | None = None
    auto_graded: bool = False
    was_auto_graded: bool = False
    previous_auto_score: float | None = None
