"""``ratiolint check``: validate test identifiers.

Reads a listing of test identifiers (a file, or stdin with ``-``), validates
it, and writes the report to **stdout**. A one-line verdict goes to
**stderr** so the report can be piped.

Options are resolved in this order: command-line flag or ``RATIOLINT_*``
environment variable, then ``[tool.ratiolint]`` in ``pyproject.toml``, then
built-in defaults.

Exit status
- 0: no violations.
- 1: at least one violation.
- 2: unreadable input or invalid configuration (usage error).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import click
from click.core import ParameterSource

from ratiolint.adapters.readers import InputFormat, read_cases
from ratiolint.adapters.renderers import render_json, render_text
from ratiolint.config import load_pyproject_config
from ratiolint.domain.errors import InputFormatError, InvalidConfigError
from ratiolint.domain.value_objects import NumberingScope
from ratiolint.service_layer.validator import validate

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

VIOLATIONS_EXIT_CODE = 1


def _given(ctx: click.Context, name: str, value: object) -> object | None:
    """Return *value* only if it came from the command line or the environment."""
    source = ctx.get_parameter_source(name)
    if source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
        return value
    return None


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--input-format",
    type=click.Choice(["lines", "json"]),
    default="lines",
    show_default=True,
    help="Format of SOURCE: one [scope::]function::name per line, or a JSON array.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Format of the report written to stdout.",
)
@click.option(
    "--numbering-scope",
    type=click.Choice([scope.value for scope in NumberingScope]),
    default=None,
    envvar="RATIOLINT_NUMBERING_SCOPE",
    show_envvar=True,
    help="Check numbering within each file or across the whole suite [default: per_suite].",
)
@click.option(
    "--zero-padding/--no-zero-padding",
    default=None,
    envvar="RATIOLINT_ZERO_PADDING",
    show_envvar=True,
    help="Require sequence numbers to be zero-padded to --padding-width digits.",
)
@click.option(
    "--padding-width",
    type=click.IntRange(min=1),
    default=None,
    envvar="RATIOLINT_PADDING_WIDTH",
    show_envvar=True,
    help="Digit count required with --zero-padding [default: 3].",
)
@click.option(
    "--strip-prefix",
    default=None,
    envvar="RATIOLINT_STRIP_PREFIX",
    show_envvar=True,
    help="Prefix removed from names before checking (e.g. 'test_').",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=None,
    help="pyproject.toml to read [tool.ratiolint] from [default: ./pyproject.toml].",
)
@click.pass_context
def check(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    source: TextIO,
    input_format: InputFormat,
    output_format: str,
    numbering_scope: str | None,
    zero_padding: bool | None,
    padding_width: int | None,
    strip_prefix: str | None,
    config_path: Path | None,
) -> None:
    """Check test names and the positive/negative ratio.

    SOURCE lists test identifiers, one per line, as printed by
    `pytest --collect-only -q`. Use '-' (the default) to read stdin.
    """
    try:
        config = load_pyproject_config(config_path).with_overrides(
            numbering_scope=_given(ctx, "numbering_scope", numbering_scope),
            zero_padding=_given(ctx, "zero_padding", zero_padding),
            padding_width=_given(ctx, "padding_width", padding_width),
            strip_prefix=_given(ctx, "strip_prefix", strip_prefix),
        )
    except InvalidConfigError as e:
        raise click.UsageError(str(e), ctx=ctx) from e
    logger.info("Using %s", config)

    try:
        cases = read_cases(source.read(), input_format, config)
    except InputFormatError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    if not cases:
        warn("No test identifiers found.")

    report = validate(cases, config)

    if output_format == "json":
        click.echo(render_json(report))
    else:
        click.echo(render_text(report))

    if report.passed:
        success(f"All {len(report.groups)} functions follow the convention.")
        return

    count = len(report.violations)
    logger.info("%d violations in %d test names", count, len(cases))
    error(f"{count} violation{'s' if count != 1 else ''} found.")
    ctx.exit(VIOLATIONS_EXIT_CODE)
