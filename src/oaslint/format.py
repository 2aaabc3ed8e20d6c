"""Rendering of lint problems for the terminal or for tools."""

from collections import Counter
from collections.abc import Sequence
from itertools import groupby

import orjson

from oaslint.constants import SEVERITY_ERROR, SEVERITY_WARN
from oaslint.walk import Problem


def _problem_dict(problem: Problem) -> dict:
    return {
        "ruleId": problem.rule_id,
        "severity": problem.severity,
        "message": problem.message,
        "location": {
            "source": problem.location.source.absolute_ref,
            "pointer": problem.location.pointer,
            "reportOnKey": problem.location.report_on_key,
        },
        "suggest": problem.suggest,
    }


def format_json(problems: Sequence[Problem]) -> str:
    counts = Counter(problem.severity for problem in problems)
    payload = {
        "totals": {
            "errors": counts[SEVERITY_ERROR],
            "warnings": counts[SEVERITY_WARN],
        },
        "problems": [_problem_dict(problem) for problem in problems],
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")


def format_stylish(problems: Sequence[Problem]) -> str:
    """Human-readable listing grouped by source file."""
    lines: list[str] = []

    def source_of(problem: Problem) -> str:
        return problem.location.source.absolute_ref

    for source, group in groupby(problems, key=source_of):
        lines.append(source)
        for problem in group:
            where = problem.location.pointer
            if problem.location.report_on_key:
                where += " (key)"
            lines.append(
                f"  {where}  {problem.severity:<5}  "
                f"{problem.rule_id}  {problem.message}"
            )
            if problem.suggest:
                lines.append(f"      Did you mean: {', '.join(problem.suggest)} ?")
        lines.append("")

    counts = Counter(problem.severity for problem in problems)
    if counts[SEVERITY_ERROR]:
        lines.append(
            f"Validation failed with {counts[SEVERITY_ERROR]} error(s) "
            f"and {counts[SEVERITY_WARN]} warning(s)."
        )
    elif counts[SEVERITY_WARN]:
        lines.append(
            f"Document is valid with {counts[SEVERITY_WARN]} warning(s)."
        )
    else:
        lines.append("Document is valid.")
    return "\n".join(lines)


FORMATTERS = {
    "stylish": format_stylish,
    "json": format_json,
}


def format_problems(problems: Sequence[Problem], fmt: str = "stylish") -> str:
    """Render ``problems`` with the formatter called ``fmt``.

    Raises:
        ValueError: If ``fmt`` is unknown

    """
    try:
        formatter = FORMATTERS[fmt]
    except KeyError:
        msg = f"Unknown output format '{fmt}'"
        raise ValueError(msg) from None
    return formatter(problems)
