"""ratiolint CLI entry point.

Defines the top-level ``ratiolint`` command group (via Click-Extra), sets up
logging for every subcommand, and registers:

- ``ratiolint check``: validate test identifiers against the convention.
- ``ratiolint plan``: print canonical names for whole ratio blocks.

Notes
- ``--version``, ``--color``/``--no-color`` and ``--time`` come from Click-Extra;
  the resolved ``ctx.color`` also drives console logging.

Examples
    $ pytest --collect-only -q | ratiolint check --strip-prefix test_
    $ ratiolint plan parse_header --blocks 2
"""

import logging
from functools import partial
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from ratiolint import __version__
from ratiolint.logging import (
    DEFAULT_RECORDER_CAPACITY,
    LoggingOptions,
    log_startup,
    setup_logging,
    shutdown_logging,
    verbosity_level,
)

from .check import check as check_command
from .helpers import parse_log_level
from .plan import plan as plan_command

logger = logging.getLogger(__name__)

APP_NAME = "ratiolint"

HELP = """ratiolint command-line interface.

    Checks that unit-test names follow the NUMBER_positive / NUMBER_negative
    convention, are numbered monotonically within a file or suite, and come
    in a 1 positive : 5 negative ratio for every function under test.
    """


def default_log_path() -> Path:
    """``latest.log`` in the per-user log directory, created if needed."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"


@clickx.group(
    help=HELP,
    params=[
        clickx.ColorOption(),
        clickx.NoColorOption(),
        clickx.TimerOption(show_envvar=True),
        clickx.VersionOption(fields={"prog_name": APP_NAME, "version": __version__}),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show more console logging (repeatable: -v INFO, -vv DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show less console logging (repeatable: -q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="RATIOLINT_LOG_PATH",
    show_envvar=True,
    help="File the flight recorder writes to [default: user log dir/latest.log].",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="RATIOLINT_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer recent DEBUG records in memory and write them to --log-path "
        "when a warning or error is logged."
    ),
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_RECORDER_CAPACITY,
    hidden=True,
    envvar="RATIOLINT_FLIGHT_RECORDER_CAPACITY",
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="RATIOLINT_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight-recorder buffer on exit when nothing went wrong.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("markdown_it=WARNING",),
    envvar="RATIOLINT_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL. Repeatable; the env var "
        "takes a comma or space separated list."
    ),
)
@clickx.pass_context
def ratiolint(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """ratiolint command-line interface."""
    options = LoggingOptions(
        console_level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=(log_path or default_log_path()) if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        flush_on_close=force_flush,
        logger_levels=logger_levels,
    )
    handlers = setup_logging(options)
    log_startup(logger, options, handlers, __version__)

    ctx.call_on_close(partial(shutdown_logging, handlers))


ratiolint.add_command(check_command)
ratiolint.add_command(plan_command)
