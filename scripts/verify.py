#!/usr/bin/python3
import sys

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from game_deployment.options import record_option
from game_deployment.record import read_record
from game_deployment.utils import verify_contract


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@record_option
def cli(network, record_filepath):
    """Retry block explorer verification for a recorded deployment."""
    record = read_record(record_filepath)
    active_network = networks.provider.network
    if record.network != active_network.name:
        raise click.BadOptionUsage(
            option_name="--record",
            message=(
                f"Record {record_filepath} is for network '{record.network}', "
                f"but connected to '{active_network.name}'"
            ),
        )

    print(f"🔍 Verifying {record.contract_address} on {record.network}...")
    try:
        explorer = active_network.explorer
    except Exception as error:
        print(f"❌ Contract verification failed: Block explorer unavailable: {error}")
        sys.exit(1)
    result = verify_contract(record.contract_address, explorer)
    if result.is_failure:
        print(f"❌ Contract verification failed: {result.error}")
        sys.exit(1)
    print("✅ Contract verified successfully!")


if __name__ == "__main__":
    cli()
