"""Grade a lab report file from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from labgrader.grading.auto_grader import auto_grade
from labgrader.grading.templates import UnknownTemplateError, get_template, list_templates
from labgrader.pipeline.records import to_grade_record
from labgrader.schemas import GradingCriteria
from labgrader.settings import settings


def _load_criteria(args: argparse.Namespace) -> GradingCriteria:
    if args.criteria:
        raw = json.loads(Path(args.criteria).read_text(encoding="utf-8"))
        # Accept either bare criteria or a template-shaped {"criteria": {...}} document.
        if isinstance(raw, dict) and "criteria" in raw:
            raw = raw["criteria"]
        return GradingCriteria.model_validate(raw)
    return get_template(args.template or settings.default_template).criteria


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="labgrader", description=__doc__)
    ap.add_argument("report", help="Path to the lab report text file")
    source = ap.add_mutually_exclusive_group()
    source.add_argument("--template", help=f"Built-in template ({', '.join(list_templates())})")
    source.add_argument("--criteria", help="Path to a grading criteria JSON file")
    ap.add_argument(
        "--legacy-max-score",
        action="store_true",
        default=None,
        help="Always count 50 points each for rules and rubric in the max score",
    )
    ap.add_argument("--record", action="store_true", help="Also print the stored grade record")
    ap.add_argument("--out", help="Write the JSON output here instead of stdout")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        criteria = _load_criteria(args)
    except UnknownTemplateError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        print(f"Could not load grading criteria: {exc}", file=sys.stderr)
        return 2

    try:
        report = Path(args.report).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Could not read report: {exc}", file=sys.stderr)
        return 2

    legacy = settings.legacy_max_score if args.legacy_max_score is None else args.legacy_max_score
    result = auto_grade(report, criteria, legacy_max_score=legacy)

    payload: dict[str, Any] = result.to_json_dict()
    if args.record:
        payload = {
            "result": payload,
            "record": to_grade_record(result, settings.assignment_max_score).to_json_dict(),
        }

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.out:
        Path(args.out).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
