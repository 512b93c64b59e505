#!/usr/bin/python3
import click

from game_deployment.options import record_option
from game_deployment.record import read_record


@click.command(name="show-deployment")
@record_option
def cli(record_filepath):
    """Display a deployment record."""
    record = read_record(record_filepath)
    click.secho(f"\n{record.network}", fg="green")
    click.secho(f"    Contract:    {record.contract_address}", fg="cyan")
    click.secho(f"    Deployer:    {record.deployer}", fg="cyan")
    click.secho(f"    Block:       {record.block_number}", fg="yellow")
    click.secho(f"    Transaction: {record.transaction_hash}", fg="yellow")
    click.secho(f"    Deployed at: {record.timestamp}", fg="yellow")


if __name__ == "__main__":
    cli()
