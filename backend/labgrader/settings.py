"""Application settings loaded from environment variables."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _is_truthy(value: str | None) -> bool:
    return bool(value and value.strip().lower() in TRUTHY_VALUES)


class Settings(BaseSettings):
    """Runtime configuration for the LabGrader engine."""

    model_config = SettingsConfigDict(env_prefix="LABGRADER_", extra="ignore")

    log_level: str = "INFO"
    default_template: str = Field(
        default="ohmsLaw",
        validation_alias=AliasChoices("LABGRADER_DEFAULT_TEMPLATE", "DEFAULT_TEMPLATE"),
    )

    # Sum 50 + 50 into maxScore even when rules or rubric are absent.
    legacy_max_score: bool = False

    assignment_max_score: int = Field(default=100, ge=1)

    @field_validator("legacy_max_score", mode="before")
    @classmethod
    def _parse_legacy_flag(cls, value: object) -> object:
        if isinstance(value, str):
            return _is_truthy(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


settings = Settings()
