import pytest

from game_deployment import accounts
from game_deployment.constants import (
    DEPLOYER_ACCOUNT_ALIAS,
    DEPLOYER_PASSPHRASE_ENVVAR,
    DEPLOYER_PRIVATE_KEY_ENVVAR,
)
from tests.fakes import DEPLOYER_ADDRESS

PRIVATE_KEY = "0x" + "11" * 32


def test_import_deployer_account(monkeypatch):
    imported = []

    def _import(alias, passphrase, private_key):
        imported.append((alias, passphrase, private_key))
        return DEPLOYER_ADDRESS

    monkeypatch.setattr(accounts, "import_account_from_private_key", _import)
    monkeypatch.setenv(DEPLOYER_PASSPHRASE_ENVVAR, "correct horse")
    monkeypatch.setenv(DEPLOYER_PRIVATE_KEY_ENVVAR, PRIVATE_KEY)

    assert accounts.import_deployer_account() == DEPLOYER_ADDRESS
    assert imported == [(DEPLOYER_ACCOUNT_ALIAS, "correct horse", PRIVATE_KEY)]


def test_import_requires_both_variables(monkeypatch):
    monkeypatch.setenv(DEPLOYER_PASSPHRASE_ENVVAR, "correct horse")
    monkeypatch.delenv(DEPLOYER_PRIVATE_KEY_ENVVAR, raising=False)

    with pytest.raises(EnvironmentError, match=DEPLOYER_PRIVATE_KEY_ENVVAR):
        accounts.import_deployer_account()
