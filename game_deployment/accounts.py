import os

from ape_accounts import KeyfileAccount, import_account_from_private_key

from game_deployment.constants import (
    DEPLOYER_ACCOUNT_ALIAS,
    DEPLOYER_PASSPHRASE_ENVVAR,
    DEPLOYER_PRIVATE_KEY_ENVVAR,
)


def import_deployer_account(alias: str = DEPLOYER_ACCOUNT_ALIAS) -> KeyfileAccount:
    """Imports the deployer's private key from the environment into ape's keyfile accounts."""
    try:
        passphrase = os.environ[DEPLOYER_PASSPHRASE_ENVVAR]
        private_key = os.environ[DEPLOYER_PRIVATE_KEY_ENVVAR]
    except KeyError:
        raise EnvironmentError(
            "There are missing environment variables. "
            f"Please set {DEPLOYER_PASSPHRASE_ENVVAR} and {DEPLOYER_PRIVATE_KEY_ENVVAR}."
        )
    return import_account_from_private_key(alias, passphrase, private_key)
