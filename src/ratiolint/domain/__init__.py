"""Domain model for test naming and ratio checks."""

from .report import GroupReport, ValidationReport
from .value_objects import (
    CaseKind,
    NumberingScope,
    RatioBounds,
    TestCase,
    Violation,
    ViolationKind,
)

__all__ = [
    "CaseKind",
    "GroupReport",
    "NumberingScope",
    "RatioBounds",
    "TestCase",
    "ValidationReport",
    "Violation",
    "ViolationKind",
]
