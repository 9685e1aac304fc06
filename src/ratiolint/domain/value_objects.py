"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum


class CaseKind(Enum):
    """Enumeration of test case kinds."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


class NumberingScope(Enum):
    """Where sequence numbers must be unique and increasing."""

    PER_FILE = "per_file"
    PER_SUITE = "per_suite"


class ViolationKind(Enum):
    """Enumeration of the problems a validation pass can report."""

    MALFORMED_NAME = "MalformedName"
    DUPLICATE_NAME = "DuplicateName"
    NON_MONOTONIC_SEQUENCE = "NonMonotonicSequence"
    RATIO_VIOLATION = "RatioViolation"


@dataclass(frozen=True)
class TestCase:
    """A proposed test name tagged with the function it exercises.

    ``sequence_number`` and ``kind`` are ``None`` when ``name`` does not have
    the required shape.
    """

    __test__ = False  # not a pytest test class

    function_name: str
    name: str
    sequence_number: int | None = None
    kind: CaseKind | None = None
    scope: str = ""
    position: int = 0

    @property
    def well_formed(self) -> bool:
        """Whether the name parsed into a sequence number and a kind."""
        return self.sequence_number is not None and self.kind is not None

    @property
    def location(self) -> str:
        """Short description of where the case came from."""
        if self.scope:
            return f"{self.scope} #{self.position}"
        return f"#{self.position}"


@dataclass(frozen=True)
class RatioBounds:
    """Allowed positive/negative counts for a group of ``total`` cases."""

    total: int
    min_positives: int
    max_positives: int
    min_negatives: int

    def allows(self, positives: int, negatives: int) -> bool:
        """Return True if the counts satisfy every bound."""
        return (
            positives + negatives == self.total
            and self.min_positives <= positives <= self.max_positives
            and negatives >= self.min_negatives
        )

    def describe(self) -> str:
        """Render the bounds as ``positives 1..2, negatives >= 5``."""
        if self.min_positives == self.max_positives:
            positives = f"positives == {self.max_positives}"
        else:
            positives = f"positives {self.min_positives}..{self.max_positives}"
        return f"{positives}, negatives >= {self.min_negatives}"


@dataclass(frozen=True)
class Violation:
    """A single problem found during validation.

    ``case`` points at the offending test case for name and ordering
    problems; ratio problems concern a whole group and carry ``bounds`` and
    the actual counts instead.
    """

    kind: ViolationKind
    function_name: str
    message: str
    case: TestCase | None = None
    bounds: RatioBounds | None = None
    positives: int | None = None
    negatives: int | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""
        data: dict[str, object] = {
            "kind": self.kind.value,
            "function": self.function_name,
            "message": self.message,
        }
        if self.case is not None:
            data["name"] = self.case.name
            data["scope"] = self.case.scope
            data["position"] = self.case.position
        if self.bounds is not None:
            data["positives"] = self.positives
            data["negatives"] = self.negatives
            data["allowed"] = {
                "min_positives": self.bounds.min_positives,
                "max_positives": self.bounds.max_positives,
                "min_negatives": self.bounds.min_negatives,
            }
        return data
