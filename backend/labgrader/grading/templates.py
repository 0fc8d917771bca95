"""Built-in grading criteria presets for common lab types."""

from __future__ import annotations

from types import MappingProxyType

from labgrader.schemas import GradingCriteria, GradingTemplate


class UnknownTemplateError(KeyError):
    """Raised when a grading template key is not registered."""

    def __init__(self, key: str, known: list[str]) -> None:
        super().__init__(key)
        self.key = key
        self.known = known

    def __str__(self) -> str:
        return f"Unknown grading template '{self.key}'. Use one of: {', '.join(self.known)}"


# Engine defaults used when an assignment names a lab type without custom criteria.
_DEFAULT_CRITERIA: MappingProxyType[str, GradingCriteria] = MappingProxyType(
    {
        "ohmsLaw": GradingCriteria.model_validate(
            {
                "rules": {
                    "totalPoints": 50,
                    "expectedValues": {
                        "voltage": {"value": 12, "tolerance": 0.5, "points": 15},
                        "current": {"value": 3, "tolerance": 0.1, "points": 15},
                        "resistance": {"value": 4, "tolerance": 0.2, "points": 20},
                    },
                },
                "rubric": {
                    "totalPoints": 50,
                    "sections": {
                        "Results": {"indicators": ["result", "voltage", "current"], "points": 10, "minLength": 30},
                        "Observations": {"indicators": ["observe", "noticed", "found"], "points": 15, "minLength": 50},
                        "Analysis": {
                            "indicators": ["analysis", "because", "therefore", "conclude"],
                            "points": 15,
                            "minLength": 50,
                        },
                    },
                    "keywords": {
                        "list": ["proportional", "linear", "ohm", "resistance", "circuit"],
                        "pointsPerKeyword": 2,
                        "maxPoints": 10,
                    },
                    "minLength": 200,
                    "minLengthPoints": 5,
                },
            }
        ),
        "chemistry": GradingCriteria.model_validate(
            {
                "rules": {
                    "totalPoints": 50,
                    "expectedValues": {
                        "pH": {"value": 7.0, "tolerance": 0.5, "points": 20},
                        "molarity": {"value": 0.1, "tolerance": 0.01, "points": 15},
                        "temperature": {"value": 25, "tolerance": 2, "points": 15},
                    },
                },
                "rubric": {
                    "totalPoints": 50,
                    "sections": {
                        "Results": {"indicators": ["result", "pH", "molarity"], "points": 10, "minLength": 30},
                        "Observations": {"indicators": ["observe", "color", "change"], "points": 15, "minLength": 50},
                        "Analysis": {"indicators": ["analysis", "reaction", "conclude"], "points": 15, "minLength": 50},
                    },
                    "keywords": {
                        "list": ["acid", "base", "neutralization", "titration", "indicator"],
                        "pointsPerKeyword": 2,
                        "maxPoints": 10,
                    },
                    "minLength": 200,
                    "minLengthPoints": 5,
                },
            }
        ),
    }
)


_TEMPLATES: MappingProxyType[str, GradingTemplate] = MappingProxyType(
    {
        "ohmsLaw": GradingTemplate.model_validate(
            {
                "name": "Ohm's Law Lab",
                "description": "Auto-grades voltage, current, and resistance calculations",
                "criteria": {
                    "rules": _DEFAULT_CRITERIA["ohmsLaw"].rules.model_copy(deep=True),
                    "rubric": {
                        "totalPoints": 50,
                        "sections": {
                            "Results": {
                                "indicators": ["result", "voltage", "current", "resistance"],
                                "points": 10,
                                "minLength": 30,
                            },
                            "Observations": {
                                "indicators": ["observe", "noticed", "found", "saw"],
                                "points": 15,
                                "minLength": 50,
                            },
                            "Analysis": {
                                "indicators": ["analysis", "because", "therefore", "conclude", "conclusion"],
                                "points": 15,
                                "minLength": 50,
                            },
                        },
                        "keywords": {
                            "list": ["proportional", "linear", "ohm", "resistance", "circuit", "voltage", "current"],
                            "pointsPerKeyword": 2,
                            "maxPoints": 10,
                        },
                        "minLength": 200,
                        "minLengthPoints": 5,
                    },
                },
            }
        ),
        "chemistry": GradingTemplate.model_validate(
            {
                "name": "Chemistry Lab",
                "description": "Auto-grades pH, molarity, and chemical observations",
                "criteria": {
                    "rules": _DEFAULT_CRITERIA["chemistry"].rules.model_copy(deep=True),
                    "rubric": {
                        "totalPoints": 50,
                        "sections": {
                            "Results": {
                                "indicators": ["result", "pH", "molarity", "concentration"],
                                "points": 10,
                                "minLength": 30,
                            },
                            "Observations": {
                                "indicators": ["observe", "color", "change", "reaction"],
                                "points": 15,
                                "minLength": 50,
                            },
                            "Analysis": {
                                "indicators": ["analysis", "reaction", "conclude", "chemical"],
                                "points": 15,
                                "minLength": 50,
                            },
                        },
                        "keywords": {
                            "list": ["acid", "base", "neutralization", "titration", "indicator", "solution", "chemical"],
                            "pointsPerKeyword": 2,
                            "maxPoints": 10,
                        },
                        "minLength": 200,
                        "minLengthPoints": 5,
                    },
                },
            }
        ),
        "circuitAnalysis": GradingTemplate.model_validate(
            {
                "name": "Circuit Analysis Lab",
                "description": "Auto-grades circuit calculations and analysis",
                "criteria": {
                    "rules": {
                        "totalPoints": 50,
                        "expectedValues": {
                            "totalResistance": {"value": 10, "tolerance": 0.5, "points": 15},
                            "totalCurrent": {"value": 1.2, "tolerance": 0.1, "points": 15},
                            "powerDissipated": {"value": 14.4, "tolerance": 1, "points": 20},
                        },
                    },
                    "rubric": {
                        "totalPoints": 50,
                        "sections": {
                            "Results": {
                                "indicators": ["result", "resistance", "current", "power"],
                                "points": 10,
                                "minLength": 30,
                            },
                            "Observations": {
                                "indicators": ["observe", "series", "parallel", "circuit"],
                                "points": 15,
                                "minLength": 50,
                            },
                            "Analysis": {
                                "indicators": ["analysis", "kirchhoff", "conclude", "law"],
                                "points": 15,
                                "minLength": 50,
                            },
                        },
                        "keywords": {
                            "list": ["series", "parallel", "circuit", "resistance", "voltage", "current", "power"],
                            "pointsPerKeyword": 2,
                            "maxPoints": 10,
                        },
                        "minLength": 200,
                        "minLengthPoints": 5,
                    },
                },
            }
        ),
        "generic": GradingTemplate.model_validate(
            {
                "name": "Generic Lab Report",
                "description": "Basic auto-grading for any lab report structure",
                "criteria": {
                    "rules": {"totalPoints": 30, "expectedValues": {}},
                    "rubric": {
                        "totalPoints": 70,
                        "sections": {
                            "Introduction": {
                                "indicators": ["introduction", "objective", "purpose", "goal"],
                                "points": 15,
                                "minLength": 50,
                            },
                            "Results": {
                                "indicators": ["result", "data", "measurement", "value"],
                                "points": 20,
                                "minLength": 50,
                            },
                            "Discussion": {
                                "indicators": ["discussion", "observe", "found", "noticed"],
                                "points": 15,
                                "minLength": 50,
                            },
                            "Conclusion": {
                                "indicators": ["conclusion", "conclude", "summary", "therefore"],
                                "points": 15,
                                "minLength": 40,
                            },
                        },
                        "keywords": {
                            "list": ["experiment", "procedure", "method", "result", "conclusion", "analysis"],
                            "pointsPerKeyword": 1,
                            "maxPoints": 5,
                        },
                        "minLength": 300,
                        "minLengthPoints": 5,
                    },
                },
            }
        ),
        "custom": GradingTemplate.model_validate(
            {
                "name": "Custom Criteria",
                "description": "Define your own grading criteria",
                "criteria": {
                    "rules": {"totalPoints": 50, "expectedValues": {}},
                    "rubric": {
                        "totalPoints": 50,
                        "sections": {},
                        "keywords": {"list": [], "pointsPerKeyword": 2, "maxPoints": 10},
                        "minLength": 150,
                        "minLengthPoints": 5,
                    },
                },
            }
        ),
    }
)


def list_templates() -> list[str]:
    return list(_TEMPLATES)


def get_template(key: str) -> GradingTemplate:
    """Return a private copy of the template registered under ``key``."""
    try:
        template = _TEMPLATES[key]
    except KeyError as exc:
        raise UnknownTemplateError(key, list_templates()) from exc
    return template.model_copy(deep=True)


def list_default_criteria() -> list[str]:
    return list(_DEFAULT_CRITERIA)


def get_default_criteria(lab_type: str) -> GradingCriteria:
    """Return a private copy of the engine default criteria for ``lab_type``."""
    try:
        criteria = _DEFAULT_CRITERIA[lab_type]
    except KeyError as exc:
        raise UnknownTemplateError(lab_type, list_default_criteria()) from exc
    return criteria.model_copy(deep=True)
