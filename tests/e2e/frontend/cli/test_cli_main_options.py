"""End-to-end tests for the top-level `ratiolint` group options.

Logging verbosity, logger-level overrides and the flight recorder are
exercised through the test-only `log-demo` command.
"""

import re
from pathlib import Path

from ratiolint import __version__
from ratiolint.entrypoints.cli.main import ratiolint

# pylint: disable=unused-argument

LOG = "flight.log"


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def read_log(path: str = LOG) -> str:
    """Return the flight-recorder file contents."""
    return Path(path).read_text(encoding="utf-8")


def test_version(runner):
    """--version prints the package version."""
    result = runner.invoke(ratiolint, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_default_shows_warning_not_info(registered_log_demo, runner, fs):
    """Default console level is WARNING."""
    result = runner.invoke(ratiolint, ["--log-path", LOG, "log-demo"])
    assert result.exit_code == 0
    assert_in_output("demo warning message", result.output)
    assert_not_in_output("demo info message", result.output)


def test_verbose_shows_info(registered_log_demo, runner, fs):
    """-v lowers the console level to INFO."""
    result = runner.invoke(ratiolint, ["-v", "--log-path", LOG, "log-demo"])
    assert result.exit_code == 0
    assert_in_output("demo info message", result.output)
    assert_not_in_output("demo debug message", result.output)


def test_quiet_hides_warning(registered_log_demo, runner, fs):
    """-q raises the console level to ERROR."""
    result = runner.invoke(ratiolint, ["-q", "--log-path", LOG, "log-demo"])
    assert result.exit_code == 0
    assert_in_output("demo error message", result.output)
    assert_not_in_output("demo warning message", result.output)


def test_logger_level_override(registered_log_demo, runner, fs):
    """-L silences DEBUG on one logger while keeping its INFO."""
    result = runner.invoke(
        ratiolint,
        ["-vv", "-L", "some.thirdparty=INFO", "--log-path", LOG, "log-demo"],
    )
    assert result.exit_code == 0
    assert_not_in_output("thirdparty debug message", result.output)
    assert_in_output("thirdparty info message", result.output)


def test_flight_recorder_flushes_on_warning(registered_log_demo, runner, fs):
    """Buffered DEBUG records reach the file once a WARNING is logged."""
    result = runner.invoke(ratiolint, ["--log-path", LOG, "log-demo"])
    assert result.exit_code == 0
    content = read_log()
    assert_in_output("demo debug message", content)
    assert_in_output("demo critical message", content)
    # buffered after the last flush and not force-flushed
    assert_not_in_output("demo final debug message", content)


def test_force_flush_writes_tail(registered_log_demo, runner, fs):
    """--force-flush writes the remaining buffer on exit."""
    result = runner.invoke(
        ratiolint, ["--log-path", LOG, "--force-flush", "log-demo"]
    )
    assert result.exit_code == 0
    assert_in_output("demo final debug message", read_log())


def test_flight_recorder_can_be_disabled(registered_log_demo, runner, fs):
    """--no-flight-recorder writes no file."""
    result = runner.invoke(
        ratiolint, ["--log-path", LOG, "--no-flight-recorder", "log-demo"]
    )
    assert result.exit_code == 0
    assert not Path(LOG).exists()


def test_startup_diagnostics(registered_log_demo, runner, fs):
    """The startup banner and diagnostics land in the flight recorder."""
    result = runner.invoke(
        ratiolint, ["--log-path", LOG, "--force-flush", "log-demo"]
    )
    assert result.exit_code == 0
    content = read_log()
    assert_in_output(r"RATIOLINT \d+\.\d+\.\d+ - console=WARNING", content)
    assert_in_output(r"flight-recorder=ON", content)
    assert_in_output(r"Python: \d+\.\d+", content)
    assert_in_output(r"PID: \d+", content)
    assert_in_output(r"click: \d+\.\d+", content)
    assert_in_output(r"click-extra: \d+\.\d+", content)
    assert_in_output(
        r"Flight recorder: path=flight\.log, capacity=2000, flush_on_close=True",
        content,
    )
    assert_in_output(r"Per-logger overrides: {'markdown_it': 'WARNING'}", content)


def test_time_reports_execution_time(runner, fs):
    """--time prints the elapsed time once the command finishes."""
    result = runner.invoke(ratiolint, ["--time", "--no-flight-recorder", "plan", "foo"])
    assert result.exit_code == 0
    assert_in_output(r"^foo::001_positive$", result.output)
    assert_in_output(r"Execution time: \d+\.\d{3} seconds\.", result.output)


def test_no_color_is_accepted(runner, fs):
    """--no-color leaves the report free of ANSI escapes."""
    result = runner.invoke(
        ratiolint, ["--no-color", "--no-flight-recorder", "plan", "foo"]
    )
    assert result.exit_code == 0
    assert "\x1b[" not in result.output
