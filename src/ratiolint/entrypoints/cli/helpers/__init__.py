"""CLI helpers for RATIOLINT.

Status-line emitters with emoji/ASCII fallbacks and the logger-level option
parser.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "success", "warn"]
