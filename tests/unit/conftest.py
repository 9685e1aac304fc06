"""Default marks for tests under `tests/unit/`."""

from pathlib import Path

import pytest

UNIT_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark every item collected below `tests/unit/` as `unit`."""
    for item in items:
        if UNIT_ROOT in item.path.resolve().parents and not item.get_closest_marker(
            "unit"
        ):
            item.add_marker(pytest.mark.unit)
