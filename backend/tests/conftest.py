from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


OHMS_LAW_REPORT = (
    "Results: we measured voltage: 12.1 and current: 3.05 across the resistor, "
    "giving resistance: 4.1 ohms for the circuit.\n"
    "Observations: we noticed the current rose in a linear way as the voltage increased, "
    "so the two are proportional.\n"
    "Analysis: because V = IR holds, we conclude that Ohm's law describes this resistance well. "
    "Therefore the circuit behaves as an ideal resistor within measurement error."
)


@pytest.fixture
def ohms_law_report() -> str:
    return OHMS_LAW_REPORT


@pytest.fixture
def balanced_criteria() -> dict:
    """Criteria whose awarded points add up exactly to the pass totals."""
    return {
        "rules": {
            "totalPoints": 30,
            "expectedValues": {
                "voltage": {"value": 12, "tolerance": 0.5, "points": 15},
                "current": {"value": 3, "tolerance": 0.1, "points": 15},
            },
        },
        "rubric": {
            "totalPoints": 20,
            "sections": {
                "Results": {"indicators": ["result"], "points": 5, "minLength": 30},
                "Analysis": {"indicators": ["analysis", "conclude"], "points": 5, "minLength": 50},
            },
            "keywords": {"list": ["linear", "proportional"], "pointsPerKeyword": 2, "maxPoints": 5},
            "minLength": 100,
            "minLengthPoints": 6,
        },
    }
