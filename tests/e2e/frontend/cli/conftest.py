"""Fixtures for end-to-end CLI tests.

Provides a test-only `log-demo` command that logs at every level on a
ratiolint logger and on a third-party logger, plus a CliRunner and an
isolated filesystem per test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from ratiolint.entrypoints.cli.main import ratiolint

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level for logging and flight-recorder tests."""
    logger = logging.getLogger("ratiolint.demo")
    logger.debug("demo debug message")
    logger.info("demo info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    third_party = logging.getLogger("some.thirdparty")
    third_party.debug("thirdparty debug message")
    third_party.info("thirdparty info message")
    logger.debug("demo final debug message")


def _unregister(group, name: str) -> None:
    """Remove a command from a group and from the help sections Cloup keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the top-level group for one test."""
    ratiolint.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(ratiolint, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
