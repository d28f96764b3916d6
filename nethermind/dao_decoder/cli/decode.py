import logging

import click

from nethermind.dao_decoder.cli.utils import (
    etherscan_api_key_option,
    group_options,
    json_option,
    proposals_file_option,
    resolve_option,
    timeout_option,
    verbose_option,
)

# isort: skip_file
# pylint: disable=too-many-arguments,import-outside-toplevel,too-many-locals

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("cli")


def _action_panel(action, index: int, config):
    from rich.panel import Panel
    from rich.table import Table
    from nethermind.dao_decoder.types import ActionType

    is_delegate = action.type == ActionType.delegate_call

    body = Table(box=None, show_header=False)
    body.add_column(style="bold cyan")
    body.add_column()
    body.add_row("Chain:", f"{config.chain_name(action.chain_id)} (ID: {action.chain_id})")
    body.add_row(
        "Action Contract Address:" if is_delegate else "Address:",
        f"[yellow][link={config.explorer_url(action.chain_id, action.address)}]{action.address}[/link]",
    )
    if action.decoded_call_data:
        body.add_row("Decoded Call Data:", action.decoded_call_data)
    else:
        body.add_row("Call Data:", action.call_data_hex)

    label = "[magenta]Action Contract Call" if is_delegate else f"[green]{action.type.value}"
    return Panel(body, title=f"[bold green]ACTION #{index + 1}[/]  {label}", title_align="left")


@click.command("decode")
@click.argument("input_data")
@group_options(
    resolve_option,
    timeout_option,
    json_option,
    etherscan_api_key_option,
    proposals_file_option,
    verbose_option,
)
def decode_command(
    input_data: str,
    resolve: bool,
    timeout: float,
    as_json: bool,
    etherscan_api_key: str | None,
    proposals_file: str,
    verbose: bool,
):
    """
    Decodes governance calldata into actions.  INPUT_DATA is hex calldata for an L1 timelock call (optionally
    wrapped in an ArbSys sendTxToL1 call), or a decimal proposal ID found in the proposal dataset.
    """
    import asyncio
    import json
    from rich.console import Console
    from rich.markup import escape
    from rich.panel import Panel
    from nethermind.dao_decoder.cli.utils import cli_logger_config, is_proposal_id
    from nethermind.dao_decoder.config import DEFAULT_CONFIG
    from nethermind.dao_decoder.decoding import GovernanceDecoder
    from nethermind.dao_decoder.exceptions import DecodingError, ProposalNotFound
    from nethermind.dao_decoder.proposals import find_proposal, load_proposals
    from nethermind.dao_decoder.resolver import default_resolver, enrich_actions

    cli_logger_config(root_logger, verbose)
    console = Console()

    decoder = GovernanceDecoder(DEFAULT_CONFIG)

    try:
        if is_proposal_id(input_data):
            proposal = find_proposal(load_proposals(proposals_file), input_data)
            if not as_json:
                console.print(f"[bold cyan]Proposal {proposal.proposal_id}[/]  {proposal.title}")
            actions = [action for calldata in proposal.calldatas for action in decoder.decode(calldata)]
        else:
            actions = decoder.decode(input_data)
    except (DecodingError, ProposalNotFound, OSError) as e:
        console.print(Panel(f"[red]{escape(str(e))}", title="[bold red]ERROR", title_align="left", border_style="red"))
        raise SystemExit(1)

    if resolve:
        actions = asyncio.run(enrich_actions(actions, default_resolver(etherscan_api_key), timeout=timeout))

    if as_json:
        click.echo(json.dumps([action.to_dict() for action in actions], indent=2))
        return

    console.print(f"[bold cyan]> DECODED ACTIONS [{len(actions)}]", highlight=False)
    for index, action in enumerate(actions):
        console.print(_action_panel(action, index, DEFAULT_CONFIG))


@click.command("list-signatures")
@click.option("--full-signatures/--names-only", default=True, show_default=True)
def list_signatures(full_signatures: bool):
    """Lists every function selector the decoder recognizes, grouped by contract"""
    from rich.console import Console
    from nethermind.dao_decoder.decoding.abis import KNOWN_REGISTRIES

    console = Console()
    for registry in KNOWN_REGISTRIES:
        console.print(registry.signature_table(full_signatures=full_signatures))
