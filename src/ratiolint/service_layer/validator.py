"""Validation of test names against the naming and ratio convention.

``validate`` walks the proposed test cases once, in suite order, and collects
every problem it finds instead of stopping at the first one:

1. names must have the ``<number>_<positive|negative>`` shape;
2. names are unique within the numbering scope and within each function, and
   numbers strictly increase within the numbering scope;
3. the remaining cases are grouped by function and checked against the
   1 positive : 5 negative ratio.

The function is pure: no I/O, no shared state, nothing raised for bad names.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from ratiolint.config import ValidatorConfig
from ratiolint.domain.naming import describe_expected_shape
from ratiolint.domain.ratio import ratio_bounds
from ratiolint.domain.report import GroupReport, ValidationReport
from ratiolint.domain.value_objects import (
    NumberingScope,
    TestCase,
    Violation,
    ViolationKind,
)

logger = logging.getLogger(__name__)


def _scope_key(case: TestCase, scope: NumberingScope) -> str:
    return case.scope if scope is NumberingScope.PER_FILE else ""


def _malformed(case: TestCase, config: ValidatorConfig) -> Violation:
    shape = describe_expected_shape(config.zero_padding, config.padding_width)
    return Violation(
        kind=ViolationKind.MALFORMED_NAME,
        function_name=case.function_name,
        message=f"name {case.name!r} does not match {shape}",
        case=case,
    )


def _duplicate_of(
    case: TestCase, scope_names: set[str], names_by_function: dict[str, set[str]]
) -> Violation | None:
    if case.name in scope_names:
        where = "this scope"
    elif case.name in names_by_function[case.function_name]:
        where = f"function {case.function_name!r}"
    else:
        return None
    return Violation(
        kind=ViolationKind.DUPLICATE_NAME,
        function_name=case.function_name,
        message=f"name {case.name!r} is already used in {where}",
        case=case,
    )


def _ratio_violations(group: GroupReport) -> tuple[Violation, ...]:
    bounds = group.bounds
    positives, negatives = group.positives, group.negatives
    if bounds.allows(positives, negatives):
        return ()
    return (
        Violation(
            kind=ViolationKind.RATIO_VIOLATION,
            function_name=group.function_name,
            message=(
                f"{positives} positive / {negatives} negative in {group.total} "
                f"tests; allowed: {bounds.describe()}"
            ),
            bounds=bounds,
            positives=positives,
            negatives=negatives,
        ),
    )


def validate(
    cases: Iterable[TestCase], config: ValidatorConfig | None = None
) -> ValidationReport:
    """Validate test cases and return a report of every violation.

    Args:
        cases: Test cases in file/suite order. Build them with
            :func:`ratiolint.domain.naming.make_case` so the name is parsed
            with the same padding rules as ``config``.
        config: Validator options; defaults to ``ValidatorConfig()``.

    Returns:
        ValidationReport: Per-function groups and all violations. Name and
        ordering violations come first, in input order, followed by ratio
        violations in group order.
    """
    config = config or ValidatorConfig()
    violations: list[Violation] = []

    seen_names: dict[str, set[str]] = defaultdict(set)
    names_by_function: dict[str, set[str]] = defaultdict(set)
    highest: dict[str, int] = {}
    grouped: dict[str, list[TestCase]] = {}
    total = 0

    for case in cases:
        total += 1
        if (number := case.sequence_number) is None or case.kind is None:
            violations.append(_malformed(case, config))
            continue

        key = _scope_key(case, config.numbering_scope)
        excluded = False
        if duplicate := _duplicate_of(case, seen_names[key], names_by_function):
            violations.append(duplicate)
            excluded = True
        if key in highest and number <= highest[key]:
            violations.append(
                Violation(
                    kind=ViolationKind.NON_MONOTONIC_SEQUENCE,
                    function_name=case.function_name,
                    message=(
                        f"sequence number {number} does not increase "
                        f"(expected > {highest[key]})"
                    ),
                    case=case,
                )
            )
            excluded = True

        seen_names[key].add(case.name)
        names_by_function[case.function_name].add(case.name)
        highest[key] = max(highest.get(key, number), number)
        if not excluded:
            grouped.setdefault(case.function_name, []).append(case)

    groups: dict[str, GroupReport] = {}
    for function_name, members in grouped.items():
        group = GroupReport(
            function_name=function_name,
            cases=tuple(members),
            bounds=ratio_bounds(len(members)),
        )
        if ratio_violations := _ratio_violations(group):
            group = GroupReport(
                function_name=function_name,
                cases=group.cases,
                bounds=group.bounds,
                violations=ratio_violations,
            )
            violations.extend(ratio_violations)
        groups[function_name] = group

    logger.debug(
        "Validated %d cases in %d groups (scope=%s): %d violations",
        total,
        len(groups),
        config.numbering_scope.value,
        len(violations),
    )
    return ValidationReport(groups=groups, violations=tuple(violations))
