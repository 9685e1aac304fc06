"""Test name parsing and formatting.

A well-formed name is a sequence number followed by the case kind, e.g.
``001_positive`` or ``17_negative``. Optionally the number must be padded
with zeros to a fixed width.
"""

from __future__ import annotations

import re

from .value_objects import CaseKind, TestCase

NAME_PATTERN = re.compile(r"^(\d+)_(positive|negative)$")


def parse_name(
    name: str, *, zero_padding: bool = False, padding_width: int = 3
) -> tuple[int, CaseKind] | None:
    """Split a test name into its sequence number and kind.

    Args:
        name: Raw test name.
        zero_padding: Require the number to be exactly ``padding_width`` digits.
        padding_width: Digit count enforced when ``zero_padding`` is set.

    Returns:
        ``(sequence_number, kind)``, or ``None`` when the name is malformed.
    """
    if not (match := NAME_PATTERN.fullmatch(name)):
        return None
    digits, kind = match.groups()
    if zero_padding and len(digits) != padding_width:
        return None
    return int(digits), CaseKind(kind)


def make_case(  # pylint: disable=too-many-arguments
    function_name: str,
    name: str,
    *,
    scope: str = "",
    position: int = 0,
    zero_padding: bool = False,
    padding_width: int = 3,
) -> TestCase:
    """Build a TestCase from a raw name and the function it belongs to.

    Malformed names still produce a TestCase, with ``sequence_number`` and
    ``kind`` left unset, so they can be reported.
    """
    parsed = parse_name(name, zero_padding=zero_padding, padding_width=padding_width)
    if parsed is None:
        return TestCase(
            function_name=function_name, name=name, scope=scope, position=position
        )
    sequence_number, kind = parsed
    return TestCase(
        function_name=function_name,
        name=name,
        sequence_number=sequence_number,
        kind=kind,
        scope=scope,
        position=position,
    )


def format_name(sequence_number: int, kind: CaseKind, width: int = 3) -> str:
    """Return the canonical name, e.g. ``format_name(7, CaseKind.NEGATIVE)`` -> ``007_negative``.

    A ``width`` of 0 disables padding.
    """
    if width:
        return f"{sequence_number:0{width}d}_{kind.value}"
    return f"{sequence_number}_{kind.value}"


def describe_expected_shape(zero_padding: bool, padding_width: int) -> str:
    """Human-readable description of the accepted name shape."""
    if zero_padding:
        return f"<{padding_width} digits>_positive|negative"
    return "<digits>_positive|negative"
