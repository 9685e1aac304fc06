"""Renderers for validation reports.

``render_text`` produces a plain, line-oriented summary meant for people;
``render_json`` produces a stable document for CI tooling. Neither adds
terminal styling so output can be piped or diffed.
"""

from __future__ import annotations

import json

from ratiolint.domain.report import GroupReport, ValidationReport
from ratiolint.domain.value_objects import Violation


def _ratio_text(group: GroupReport) -> str:
    if group.ratio is None:
        return "-"
    return f"1:{group.ratio:g}"


def _group_line(group: GroupReport) -> str:
    status = "OK" if group.passed else "FAIL"
    return (
        f"{group.function_name}: {group.positives} positive / "
        f"{group.negatives} negative (ratio {_ratio_text(group)}; "
        f"{group.bounds.describe()}) {status}"
    )


def _violation_line(violation: Violation) -> str:
    where = ""
    if violation.case is not None:
        where = f" {violation.case.name!r} at {violation.case.location}"
    return (
        f"[{violation.kind.value}] {violation.function_name}{where}: "
        f"{violation.message}"
    )


def render_text(report: ValidationReport) -> str:
    """Render a report as human-readable text."""
    lines = [_group_line(group) for group in report.groups.values()]
    if report.violations:
        if lines:
            lines.append("")
        lines.append("Violations:")
        lines.extend(f"  {_violation_line(v)}" for v in report.violations)
        lines.append("")
    count = len(report.violations)
    noun = "violation" if count == 1 else "violations"
    lines.append(
        f"{len(report.groups)} functions checked, {count} {noun}"
        if count
        else f"{len(report.groups)} functions checked, no violations"
    )
    return "\n".join(lines)


def render_json(report: ValidationReport) -> str:
    """Render a report as an indented JSON document."""
    return json.dumps(report.to_dict(), indent=2)
