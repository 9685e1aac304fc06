"""``ratiolint plan``: print canonical names for whole ratio blocks.

Each block is one positive name followed by five negative names. The output
of ``plan --format identifiers`` can be fed straight back to ``check``.
"""

import logging

import click

from ratiolint.domain.ratio import BLOCK_SIZE, plan_names

logger = logging.getLogger(__name__)


@click.command()
@click.argument("function_name", metavar="FUNCTION")
@click.option(
    "--blocks",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help=f"Number of ratio blocks ({BLOCK_SIZE} names each) to plan.",
)
@click.option(
    "--start",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="First sequence number.",
)
@click.option(
    "--width",
    type=click.IntRange(min=0),
    default=3,
    show_default=True,
    help="Zero-padding width of the sequence number (0 disables padding).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["identifiers", "names"]),
    default="identifiers",
    show_default=True,
    help="Print FUNCTION::name identifiers or bare names.",
)
def plan(function_name: str, blocks: int, start: int, width: int, output_format: str) -> None:
    """Print the test names FUNCTION needs for BLOCKS ratio blocks."""
    names = plan_names(blocks, start=start, width=width)
    logger.debug("Planned %d names for %s", len(names), function_name)
    for name in names:
        click.echo(name if output_format == "names" else f"{function_name}::{name}")
