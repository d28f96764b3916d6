import logging
import os
from logging import Logger

import click
from rich.console import Console
from rich.logging import RichHandler

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("cli")


def cli_logger_config(instrument_logger: Logger, verbose: bool = False) -> Console:
    """Routes package logs through rich on stderr, leaving stdout for decoded output"""
    rich_console = Console(stderr=True)
    instrument_logger.handlers.clear()

    instrument_logger.addHandler(RichHandler(show_path=False, console=rich_console))
    instrument_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return rich_console


def group_options(*options):
    """Decorator to group multiple click options together"""

    def wrapper(function):
        for option in reversed(options):
            function = option(function)
        return function

    return wrapper


def is_proposal_id(value: str) -> bool:
    """
    Decimal strings are proposal IDs; anything else is treated as hex calldata

    >>> is_proposal_id("77049969659962393408182308518930939247285848107346513112985531885924337078488")
    True
    >>> is_proposal_id("0x8f2a0bb0")
    False
    """
    return value.strip().isdecimal()


# -------------------------------------------------------
#    CLI Secrets, Connections, and Configurations
# -------------------------------------------------------
etherscan_api_key_option = click.option(
    "--etherscan-api-key",
    "etherscan_api_key",
    default=os.environ.get("ETHERSCAN_API_KEY"),
    help="Etherscan API key used to fetch verified ABIs.  If not provided, will use the ETHERSCAN_API_KEY "
    "environment variable.  Without a key, only 4byte signatures are used",
)
proposals_file_option = click.option(
    "--proposals-file",
    "proposals_file",
    type=click.Path(dir_okay=False),
    default=os.environ.get("PROPOSALS_FILE", "data/proposals.json"),
    show_default=True,
    help="Proposal dataset used to look up calldata when a decimal proposal ID is passed",
)

# -------------------------------------------------------
#    Output Configuration Parameters
# -------------------------------------------------------
resolve_option = click.option(
    "--resolve/--no-resolve",
    "resolve",
    default=True,
    show_default=True,
    help="Look up human-readable signatures for action calldata through 4byte and Etherscan",
)
timeout_option = click.option(
    "--timeout",
    "timeout",
    type=float,
    default=10.0,
    show_default=True,
    help="Seconds to wait for each signature lookup",
)
json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print actions as JSON instead of rich panels",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
