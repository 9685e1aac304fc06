"""The 1 positive : 5 negative ratio policy.

Tests for a function come in ratio blocks of six: one positive test for the
canonical success path and five negative tests for failure, boundary and
error paths. Groups whose size is not a multiple of six are checked against
ceil/floor bounds, and every group needs at least one positive test.
"""

from __future__ import annotations

from .naming import format_name
from .value_objects import CaseKind, RatioBounds

BLOCK_SIZE = 6  # pragma: no mutate
POSITIVES_PER_BLOCK = 1  # pragma: no mutate
NEGATIVES_PER_BLOCK = BLOCK_SIZE - POSITIVES_PER_BLOCK


def ratio_bounds(total: int) -> RatioBounds:
    """Compute the allowed counts for a group of ``total`` cases.

    - positives <= ceil(total / 6)
    - positives >= max(1, floor(total / 6))
    - negatives >= floor(5 * total / 6)

    Args:
        total: Number of well-formed cases in the group (must be >= 1).

    Returns:
        RatioBounds: The allowed ranges.

    Raises:
        ValueError: If ``total`` is less than 1.
    """
    if total < 1:
        raise ValueError(f"total must be >= 1, got {total}")
    max_positives = -(-total * POSITIVES_PER_BLOCK // BLOCK_SIZE)
    min_positives = max(1, total * POSITIVES_PER_BLOCK // BLOCK_SIZE)
    min_negatives = total * NEGATIVES_PER_BLOCK // BLOCK_SIZE
    return RatioBounds(
        total=total,
        min_positives=min_positives,
        max_positives=max_positives,
        min_negatives=min_negatives,
    )


def plan_names(blocks: int, start: int = 1, width: int = 3) -> list[str]:
    """Return canonical names for ``blocks`` complete ratio blocks.

    Each block is one positive name followed by five negative names, numbered
    consecutively from ``start``.

    Args:
        blocks: Number of ratio blocks to plan (>= 1).
        start: First sequence number (>= 0).
        width: Zero-padding width; 0 disables padding.

    Returns:
        list[str]: ``6 * blocks`` names, e.g. ``["001_positive", "002_negative", ...]``.

    Raises:
        ValueError: If any argument is out of range.
    """
    if blocks < 1:
        raise ValueError(f"blocks must be >= 1, got {blocks}")
    if start < 0:
        raise ValueError(f"start must be >= 0, got {start}")
    if width < 0:
        raise ValueError(f"width must be >= 0, got {width}")

    names: list[str] = []
    number = start
    for _ in range(blocks):
        kinds = [CaseKind.POSITIVE] * POSITIVES_PER_BLOCK + [
            CaseKind.NEGATIVE
        ] * NEGATIVES_PER_BLOCK
        for kind in kinds:
            names.append(format_name(number, kind, width))
            number += 1
    return names
