"""Unit tests for identifier readers."""

import json

import pytest

from ratiolint.adapters.readers import read_cases, read_json, read_lines
from ratiolint.config import ValidatorConfig
from ratiolint.domain.errors import InputFormatError
from ratiolint.domain.value_objects import CaseKind

# pylint: disable=magic-value-comparison

PYTEST_LISTING = """\
tests/test_parser.py::TestParse::test_001_positive
tests/test_parser.py::TestParse::test_002_negative

3 tests collected in 0.01s
"""


class TestReadLines:
    """Tests for the line-oriented reader."""

    @staticmethod
    def test_function_and_name():
        """Two parts are function and name, with no scope."""
        (case,) = read_lines("parse_header::001_positive")
        assert case.function_name == "parse_header"
        assert case.name == "001_positive"
        assert case.scope == ""
        assert case.kind is CaseKind.POSITIVE

    @staticmethod
    def test_pytest_node_ids_with_prefix_stripped():
        """pytest node ids give scope, function and the stripped name."""
        config = ValidatorConfig(strip_prefix="test_")
        cases = read_lines(PYTEST_LISTING, config)
        assert [(c.scope, c.function_name, c.name) for c in cases] == [
            ("tests/test_parser.py", "TestParse", "001_positive"),
            ("tests/test_parser.py", "TestParse", "002_negative"),
        ]
        assert [c.position for c in cases] == [0, 1]

    @staticmethod
    def test_prefix_left_alone_when_not_configured():
        """Without strip_prefix the raw name is kept (and is malformed)."""
        (case,) = read_lines("a.py::f::test_001_positive")
        assert case.name == "test_001_positive"
        assert not case.well_formed

    @staticmethod
    def test_nested_parts_join_into_function():
        """Middle parts are joined back into the function name."""
        (case,) = read_lines("a.py::TestOuter::TestInner::001_positive")
        assert case.scope == "a.py"
        assert case.function_name == "TestOuter::TestInner"

    @staticmethod
    def test_comments_and_blank_lines_are_skipped():
        """Comments, blank lines and pytest summaries are not identifiers."""
        text = "# header\n\nf::001_positive\n  \nno tests ran in 0.01s\n"
        assert len(read_lines(text)) == 1

    @staticmethod
    def test_zero_padding_is_applied_while_parsing():
        """Padding rules from the config are used when building cases."""
        config = ValidatorConfig(zero_padding=True)
        (case,) = read_lines("f::1_positive", config)
        assert not case.well_formed

    @staticmethod
    def test_line_without_function_raises():
        """A bare name cannot be attributed to a function."""
        with pytest.raises(InputFormatError) as excinfo:
            read_lines("f::001_positive\n002_negative\n")
        assert excinfo.value.line == 2

    @staticmethod
    def test_empty_part_raises():
        """Empty parts are rejected."""
        with pytest.raises(InputFormatError):
            read_lines("::001_positive")


class TestReadJson:
    """Tests for the JSON reader."""

    @staticmethod
    def test_objects_and_pairs():
        """Objects and [function, name] pairs are both accepted."""
        text = json.dumps(
            [
                {"function": "f", "name": "001_positive", "file": "a.py"},
                ["g", "002_negative"],
            ]
        )
        cases = read_json(text)
        assert [(c.scope, c.function_name, c.name) for c in cases] == [
            ("a.py", "f", "001_positive"),
            ("", "g", "002_negative"),
        ]

    @staticmethod
    @pytest.mark.parametrize(
        ("text", "line"),
        [
            ("{not json", 1),
            ('{"function": "f"}', None),
            ('[["f"]]', 1),
            ('[{"function": "f", "name": 1}]', 1),
            ('[{"name": "001_positive"}]', 1),
        ],
    )
    def test_bad_documents_raise(text, line):
        """Unusable JSON documents raise InputFormatError."""
        with pytest.raises(InputFormatError) as excinfo:
            read_json(text)
        assert excinfo.value.line == line


class TestReadCases:
    """Tests for format dispatch."""

    @staticmethod
    def test_dispatch():
        """read_cases picks the reader for the format."""
        assert read_cases("f::001_positive")[0].function_name == "f"
        assert read_cases('[["g", "001_positive"]]', "json")[0].function_name == "g"
