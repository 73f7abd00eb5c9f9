"""
Command-line interface utilities for skypanel.

This module provides the shared observer options and the logging
configuration used by every command.
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, Optional

import click

from ..logging import get_logger, set_log_level
from ..observer import Observer
from ..space_time.epoch import parse_date

logger = get_logger(__name__)


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags ("quiet", "debug", "verbose")
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)

    logger.debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def observer_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --lat, --lon, --tz and --date options to a command."""
    func = click.option(
        "--date",
        "-d",
        "date_str",
        default=None,
        help="Observation date (YYYY-MM-DD). Defaults to today.",
    )(func)
    func = click.option(
        "--tz",
        type=float,
        default=0.0,
        show_default=True,
        help="Timezone offset from UT in hours.",
    )(func)
    func = click.option(
        "--lon",
        type=float,
        required=True,
        help="Observer longitude in degrees, positive east.",
    )(func)
    func = click.option(
        "--lat",
        type=float,
        required=True,
        help="Observer latitude in degrees, positive north.",
    )(func)
    return func


def build_observer(lat: float, lon: float, tz: float) -> Observer:
    try:
        return Observer(lat, lon, tz)
    except ValueError as e:
        raise click.BadParameter(str(e))


def resolve_date(date_str: Optional[str]) -> date:
    """Parse the --date option, defaulting to today's date."""
    if date_str is None:
        return date.today()
    try:
        return parse_date(date_str)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--date")
