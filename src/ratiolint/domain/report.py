"""Validation report value objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import CaseKind, RatioBounds, TestCase, Violation, ViolationKind


@dataclass(frozen=True)
class GroupReport:
    """Counts and ratio-check outcome for one function under test."""

    function_name: str
    cases: tuple[TestCase, ...]
    bounds: RatioBounds
    violations: tuple[Violation, ...] = ()

    @property
    def total(self) -> int:
        """Number of counted cases."""
        return len(self.cases)

    @property
    def positives(self) -> int:
        """Number of positive cases."""
        return sum(1 for case in self.cases if case.kind is CaseKind.POSITIVE)

    @property
    def negatives(self) -> int:
        """Number of negative cases."""
        return sum(1 for case in self.cases if case.kind is CaseKind.NEGATIVE)

    @property
    def ratio(self) -> float | None:
        """Negatives per positive, or None when there is no positive case."""
        if not self.positives:
            return None
        return self.negatives / self.positives

    @property
    def passed(self) -> bool:
        """True when the group has no ratio violation."""
        return not self.violations

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""
        return {
            "function": self.function_name,
            "total": self.total,
            "positives": self.positives,
            "negatives": self.negatives,
            "ratio": self.ratio,
            "allowed": {
                "min_positives": self.bounds.min_positives,
                "max_positives": self.bounds.max_positives,
                "min_negatives": self.bounds.min_negatives,
            },
            "cases": [case.name for case in self.cases],
            "passed": self.passed,
        }


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of one validation pass.

    ``groups`` keeps functions in the order they were first seen and
    ``violations`` keeps problems in the order they were detected.
    """

    groups: dict[str, GroupReport] = field(default_factory=dict)
    violations: tuple[Violation, ...] = ()

    @property
    def passed(self) -> bool:
        """True when no violation was found in any group."""
        return not self.violations

    def violations_of(self, kind: ViolationKind) -> list[Violation]:
        """Return the violations of a given kind, in detection order."""
        return [v for v in self.violations if v.kind is kind]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""
        return {
            "passed": self.passed,
            "groups": [group.to_dict() for group in self.groups.values()],
            "violations": [violation.to_dict() for violation in self.violations],
        }
