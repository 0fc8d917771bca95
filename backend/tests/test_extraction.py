from __future__ import annotations

import pytest

from labgrader.grading.extraction import extract_number, is_in_range, is_within_tolerance
from labgrader.schemas import ValueRange


@pytest.mark.parametrize(
    ("text", "field", "expected"),
    [
        ("voltage: 12.0", "voltage", 12.0),
        ("Voltage:12", "voltage", 12.0),
        ("the voltage 11.5 was steady", "voltage", 11.5),
        ("current = 3.05 A", "current", 3.05),
        ("current=3", "current", 3.0),
        ("pH : 7.2", "ph", 7.2),
        ("PH: 6.9", "pH", 6.9),
        ("molarity: .1 M", "molarity", 0.1),
    ],
)
def test_extract_number_reads_labelled_values(text: str, field: str, expected: float) -> None:
    assert extract_number(text, field) == pytest.approx(expected)


def test_extract_number_uses_first_labelled_occurrence() -> None:
    text = "voltage: 12, later we set voltage: 9"
    assert extract_number(text, "voltage") == 12.0


def test_extract_number_parses_leading_numeric_prefix() -> None:
    assert extract_number("voltage: 12.5.3", "voltage") == 12.5


@pytest.mark.parametrize(
    "text",
    ["no numbers here", "voltage: high", "voltage: .", "current: 3", ""],
)
def test_extract_number_returns_none_when_missing_or_unparseable(text: str) -> None:
    assert extract_number(text, "voltage") is None


def test_extract_number_escapes_field_metacharacters() -> None:
    text = "I(total): 2.5 and Ix: 9"
    assert extract_number(text, "I(total)") == 2.5
    assert extract_number("a+b: 4", "a+b") == 4.0
    assert extract_number("aab: 4", "a+b") is None


def test_extract_number_is_deterministic() -> None:
    text = "Results show resistance: 4.1 ohm"
    assert extract_number(text, "resistance") == extract_number(text, "resistance") == 4.1


@pytest.mark.parametrize(
    ("expected", "tolerance"),
    [(12, 0.5), (0, 0), (3, 0.25), (-4, 2), (7.5, 0.125)],
)
def test_tolerance_boundary_is_inclusive(expected: float, tolerance: float) -> None:
    assert is_within_tolerance(expected + tolerance, expected, tolerance) is True
    assert is_within_tolerance(expected - tolerance, expected, tolerance) is True
    assert is_within_tolerance(expected + tolerance + 1e-6, expected, tolerance) is False


def test_tolerance_defaults_to_exact_match() -> None:
    assert is_within_tolerance(4.0, 4) is True
    assert is_within_tolerance(4.01, 4) is False


def test_tolerance_rejects_missing_value() -> None:
    assert is_within_tolerance(None, 12, 100) is False


def test_is_in_range_accepts_mapping_and_model() -> None:
    assert is_in_range(5, {"min": 1, "max": 10}) is True
    assert is_in_range(10, ValueRange(min=1, max=10)) is True
    assert is_in_range(10.5, {"min": 1, "max": 10}) is False


def test_is_in_range_treats_zero_as_a_real_bound() -> None:
    assert is_in_range(0, {"min": 0, "max": 1}) is True
    assert is_in_range(-0.5, {"min": 0, "max": 1}) is False
    assert is_in_range(-2, ValueRange(min=-5, max=0)) is True


@pytest.mark.parametrize(
    ("value", "value_range"),
    [
        (None, {"min": 1, "max": 2}),
        (1.5, None),
        (1.5, {"max": 2}),
        (1.5, {"min": 1}),
        (1.5, ValueRange(max=2)),
        (1.5, "1-2"),
    ],
)
def test_is_in_range_fails_without_value_or_bounds(value, value_range) -> None:
    assert is_in_range(value, value_range) is False
