"""Configuration utilities for RATIOLINT.

This module centralizes the validator options and how they are read from a
``pyproject.toml`` ``[tool.ratiolint]`` table. The 1:5 ratio itself is fixed
and lives in :mod:`ratiolint.domain.ratio`.

Example:
    ```toml
    [tool.ratiolint]
    numbering_scope = "per_file"
    zero_padding = true
    padding_width = 3
    strip_prefix = "test_"
    ```
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from ratiolint.domain.errors import InvalidConfigError
from ratiolint.domain.value_objects import NumberingScope

logger = logging.getLogger(__name__)

PYPROJECT_FILENAME = "pyproject.toml"  # pragma: no mutate
TOOL_TABLE = "ratiolint"  # pragma: no mutate


@dataclass(frozen=True)
class ValidatorConfig:
    """Options recognized by the validator and the identifier readers.

    Attributes:
        numbering_scope: Whether numbering is checked per file or across the suite.
        zero_padding: Require the sequence number to have exactly ``padding_width`` digits.
        padding_width: Digit count used when ``zero_padding`` is enabled.
        strip_prefix: Prefix removed from raw names before parsing (e.g. ``test_``).
    """

    numbering_scope: NumberingScope = NumberingScope.PER_SUITE
    zero_padding: bool = False
    padding_width: int = 3
    strip_prefix: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.numbering_scope, NumberingScope):
            object.__setattr__(
                self, "numbering_scope", _coerce_scope(self.numbering_scope)
            )
        if not isinstance(self.zero_padding, bool):
            raise InvalidConfigError("zero_padding", "expected a boolean")
        if (
            isinstance(self.padding_width, bool)
            or not isinstance(self.padding_width, int)
            or self.padding_width < 1
        ):
            raise InvalidConfigError("padding_width", "expected an integer >= 1")
        if not isinstance(self.strip_prefix, str):
            raise InvalidConfigError("strip_prefix", "expected a string")

    def with_overrides(self, **overrides: Any) -> ValidatorConfig:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


def _coerce_scope(value: object) -> NumberingScope:
    try:
        return NumberingScope(value)
    except ValueError as e:
        choices = ", ".join(scope.value for scope in NumberingScope)
        raise InvalidConfigError(
            "numbering_scope", f"expected one of {choices}, got {value!r}"
        ) from e


def config_from_mapping(table: dict[str, Any]) -> ValidatorConfig:
    """Build a ValidatorConfig from a ``[tool.ratiolint]``-style mapping.

    Keys may use dashes or underscores.

    Raises:
        InvalidConfigError: On unknown keys or invalid values.
    """
    known = {f.name for f in fields(ValidatorConfig)}
    options: dict[str, Any] = {}
    for raw_key, value in table.items():
        key = raw_key.replace("-", "_")
        if key not in known:
            raise InvalidConfigError(raw_key, "unknown option")
        options[key] = value
    return ValidatorConfig(**options)


def load_pyproject_config(path: Path | None = None) -> ValidatorConfig:
    """Load validator options from a ``pyproject.toml``.

    Args:
        path: File to read. Defaults to ``./pyproject.toml``. A missing file
            or a file without a ``[tool.ratiolint]`` table yields the defaults.

    Returns:
        ValidatorConfig: Options found in the file, defaults elsewhere.

    Raises:
        InvalidConfigError: If the file is not valid TOML or the table is invalid.
    """
    path = path or Path.cwd() / PYPROJECT_FILENAME
    if not path.is_file():
        logger.debug("No config file at %s; using defaults", path)
        return ValidatorConfig()
    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError(str(path), f"not valid TOML ({e})") from e

    table = document.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        logger.debug("No [tool.%s] table in %s; using defaults", TOOL_TABLE, path)
        return ValidatorConfig()
    if not isinstance(table, dict):
        raise InvalidConfigError(f"tool.{TOOL_TABLE}", "expected a table")
    logger.debug("Loaded [tool.%s] from %s: %s", TOOL_TABLE, path, table)
    return config_from_mapping(table)
