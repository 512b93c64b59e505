#!/usr/bin/python3
import sys

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from game_deployment.deployer import main
from game_deployment.options import (
    account_alias_option,
    artifact_option,
    autosign_option,
    confirmations_option,
    output_dir_option,
    params_option,
    verify_option,
)


@click.command(cls=ConnectedProviderCommand)
@account_alias_option
@network_option(required=True)
@params_option
@confirmations_option
@verify_option
@output_dir_option
@artifact_option
@autosign_option
def cli(
    account_alias,
    network,
    params_filepath,
    confirmations,
    verify,
    output_dir,
    artifact_path,
    autosign,
):
    """
    ape run deploy --network ethereum:core_testnet2:node --account deployer
    """
    exit_code = main(
        network=networks.provider.network,
        params_filepath=params_filepath,
        account_alias=account_alias,
        confirmations=confirmations,
        verify=verify,
        output_dir=output_dir,
        artifact_path=artifact_path,
        autosign=autosign,
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
