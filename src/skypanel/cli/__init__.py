"""CLI entry point for skypanel."""

import click

from .report import report
from .body import body
from .forecast import forecast
from . import common as common
from ..logging import get_logger


logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Sun, Moon and planet positions for a local observer."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(report)
cli.add_command(body)
cli.add_command(forecast)

if __name__ == "__main__":
    cli()
