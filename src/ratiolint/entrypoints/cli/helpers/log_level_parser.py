"""Helpers for parsing the ``-L/--logger-level`` option.

Values have the form NAME=LEVEL and may be repeated or packed into a single
comma/space separated string (as when read from an environment variable).
LEVEL is a standard level name (case-insensitive) or a number.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"markdown_it": logging.WARNING}

_ITEM_SPLIT = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a string or a sequence of strings into NAME=LEVEL items.

    Args:
        value: The option value from Click.

    Returns:
        list[str]: Non-empty items, in the order given.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _ITEM_SPLIT.split(chunk) if item]


def _level_from_text(text: str) -> int:
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a name->level mapping.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _level_from_text(level_text)
    return levels
