from __future__ import annotations

import pytest
from pydantic import ValidationError

from labgrader.settings import Settings, _is_truthy


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "LABGRADER_DEFAULT_TEMPLATE",
        "DEFAULT_TEMPLATE",
        "LABGRADER_LEGACY_MAX_SCORE",
        "LABGRADER_LOG_LEVEL",
        "LABGRADER_ASSIGNMENT_MAX_SCORE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings()

    assert settings.default_template == "ohmsLaw"
    assert settings.legacy_max_score is False
    assert settings.assignment_max_score == 100
    assert settings.log_level == "INFO"


def test_only_engine_fields_are_configurable() -> None:
    assert set(Settings.model_fields) == {"log_level", "default_template", "legacy_max_score", "assignment_max_score"}


def test_default_template_from_unprefixed_env(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_TEMPLATE", "chemistry")

    assert Settings().default_template == "chemistry"


@pytest.mark.parametrize(("raw", "expected"), [("yes", True), ("1", True), ("off", False), ("", False)])
def test_legacy_flag_accepts_truthy_strings(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("LABGRADER_LEGACY_MAX_SCORE", raw)

    assert Settings().legacy_max_score is expected


def test_log_level_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("LABGRADER_LOG_LEVEL", " debug ")

    assert Settings().log_level == "DEBUG"


def test_assignment_max_score_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("LABGRADER_ASSIGNMENT_MAX_SCORE", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_is_truthy() -> None:
    assert _is_truthy(" TRUE ")
    assert not _is_truthy(None)
    assert not _is_truthy("maybe")
