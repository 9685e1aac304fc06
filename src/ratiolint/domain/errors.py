"""Domain-layer error definitions.

Naming and ratio problems are never raised; they are collected as
:class:`~ratiolint.domain.value_objects.Violation` values. The exceptions
below cover caller mistakes only: unusable configuration or unreadable input.
"""

# ============================================================================
#                           General errors
# ============================================================================


class RatiolintError(Exception):
    """Base class for ratiolint errors."""


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidConfigError(RatiolintError):
    """Raised when a configuration value is missing, unknown, or out of range."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Invalid configuration for '{key}': {reason}")
        self.key = key
        self.reason = reason


# ============================================================================
#                           Input errors
# ============================================================================


class InputFormatError(RatiolintError):
    """Raised when a test identifier source cannot be parsed.

    Attributes:
        line (int | None): 1-based line (or JSON item) number, when known.
        reason (str): Human-readable description of the problem.
    """

    def __init__(self, reason: str, line: int | None = None) -> None:
        location = f"line {line}: " if line is not None else ""
        super().__init__(f"Cannot read test identifiers ({location}{reason})")
        self.line = line
        self.reason = reason
