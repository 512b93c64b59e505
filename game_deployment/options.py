from pathlib import Path

import click

from game_deployment.constants import DEFAULT_PARAMS_FILEPATH
from game_deployment.types import MinInt

params_option = click.option(
    "--params",
    "-p",
    "params_filepath",
    help="Deployment parameters YAML file",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=DEFAULT_PARAMS_FILEPATH,
    show_default=True,
)

confirmations_option = click.option(
    "--confirmations",
    "-c",
    help="Blocks to wait for on top of the deployment block before verifying",
    type=MinInt(0),
    required=False,
)

verify_option = click.option(
    "--verify/--no-verify",
    help="Force or skip block explorer verification; defaults to the network's setting",
    default=None,
)

output_dir_option = click.option(
    "--output-dir",
    "-o",
    help="Directory the deployment record is written to",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
)

artifact_option = click.option(
    "--artifact",
    "artifact_path",
    help="Compiled contract artifact JSON (abi and bytecode) to deploy instead of the project's",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=False,
)

autosign_option = click.option(
    "--auto",
    "autosign",
    help="Automatically sign transactions and skip confirmation prompts.",
    is_flag=True,
)

record_option = click.option(
    "--record",
    "-r",
    "record_filepath",
    help="Deployment record JSON file",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=True,
)

account_alias_option = click.option(
    "--account",
    "account_alias",
    help="Alias of the ape account that signs the deployment; prompts when omitted",
    type=click.STRING,
    required=False,
)
