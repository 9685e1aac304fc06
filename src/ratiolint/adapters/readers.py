"""Readers that turn test identifier listings into TestCases.

Two formats are supported:

``lines``
    One identifier per line, ``[scope::]function::name``. This matches the
    node ids printed by ``pytest --collect-only -q``::

        tests/test_parser.py::TestParse::test_001_positive

    gives scope ``tests/test_parser.py``, function ``TestParse`` and, with
    ``strip_prefix="test_"``, name ``001_positive``. With more than three
    parts the middle ones are joined back with ``::`` to form the function.
    Blank lines, ``#`` comments and pytest's ``N tests collected`` summary
    are skipped.

``json``
    A JSON array of ``{"function": ..., "name": ..., "file": ...}`` objects
    (``file`` optional) or ``[function, name]`` pairs.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Literal, TypeAlias

from ratiolint.config import ValidatorConfig
from ratiolint.domain.errors import InputFormatError
from ratiolint.domain.naming import make_case
from ratiolint.domain.value_objects import TestCase

logger = logging.getLogger(__name__)

InputFormat: TypeAlias = Literal["lines", "json"]

SEPARATOR = "::"  # pragma: no mutate
_PYTEST_SUMMARY = re.compile(
    r"^(\d+ tests? collected|no tests (ran|collected))\b", re.IGNORECASE
)


def _strip(name: str, prefix: str) -> str:
    if prefix and name.startswith(prefix):
        return name[len(prefix) :]
    return name


def _case(  # pylint: disable=too-many-arguments
    function_name: str,
    name: str,
    scope: str,
    position: int,
    config: ValidatorConfig,
) -> TestCase:
    return make_case(
        function_name,
        _strip(name, config.strip_prefix),
        scope=scope,
        position=position,
        zero_padding=config.zero_padding,
        padding_width=config.padding_width,
    )


def read_lines(text: str, config: ValidatorConfig | None = None) -> list[TestCase]:
    """Parse one ``[scope::]function::name`` identifier per line.

    Args:
        text: Listing to parse.
        config: Supplies ``strip_prefix`` and the padding rules.

    Returns:
        list[TestCase]: Cases in listing order.

    Raises:
        InputFormatError: If a line has no function part or an empty part.
    """
    config = config or ValidatorConfig()
    cases: list[TestCase] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#") or _PYTEST_SUMMARY.match(line):
            continue
        parts = [part.strip() for part in line.split(SEPARATOR)]
        if len(parts) < 2:
            raise InputFormatError(
                f"expected [scope::]function::name, got {line!r}", line=line_number
            )
        if not all(parts):
            raise InputFormatError(f"empty identifier part in {line!r}", line=line_number)
        if len(parts) == 2:
            scope = ""
            function_name, name = parts
        else:
            scope, *middle, name = parts
            function_name = SEPARATOR.join(middle)
        cases.append(_case(function_name, name, scope, len(cases), config))

    logger.debug("Read %d identifiers from line listing", len(cases))
    return cases


def read_json(text: str, config: ValidatorConfig | None = None) -> list[TestCase]:
    """Parse a JSON array of identifiers.

    Raises:
        InputFormatError: If the document is not valid JSON or an item has
            the wrong shape. ``line`` holds the 1-based item number.
    """
    config = config or ValidatorConfig()
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputFormatError(f"invalid JSON: {e.msg}", line=e.lineno) from e
    if not isinstance(document, list):
        raise InputFormatError("expected a JSON array of identifiers")

    cases: list[TestCase] = []
    for item_number, item in enumerate(document, start=1):
        if isinstance(item, dict):
            function_name = item.get("function")
            name = item.get("name")
            scope = item.get("file", "")
        elif isinstance(item, list) and len(item) == 2:
            function_name, name = item
            scope = ""
        else:
            raise InputFormatError(
                "expected an object or a [function, name] pair", line=item_number
            )
        if not all(isinstance(v, str) for v in (function_name, name, scope)):
            raise InputFormatError(
                "function, name and file must be strings", line=item_number
            )
        if not function_name:
            raise InputFormatError("missing function name", line=item_number)
        cases.append(_case(function_name, name, scope, len(cases), config))

    logger.debug("Read %d identifiers from JSON", len(cases))
    return cases


def read_cases(
    text: str, input_format: InputFormat = "lines", config: ValidatorConfig | None = None
) -> list[TestCase]:
    """Parse identifiers in the given format."""
    if input_format == "json":
        return read_json(text, config)
    return read_lines(text, config)
