import click

from nethermind.dao_decoder.cli.decode import decode_command, list_signatures


@click.group()
def dao_decoder_cli():
    """Command Line Interface for decoding Arbitrum DAO governance proposals"""


# Adding Commands
dao_decoder_cli.add_command(decode_command, name="decode")
dao_decoder_cli.add_command(list_signatures, name="list-signatures")
