from types import SimpleNamespace

import pytest

from game_deployment import deployer as deployer_module
from game_deployment.constants import CORE_TESTNET2, DEFAULT_PARAMS_FILEPATH
from game_deployment.deployer import main
from tests.fakes import CONTRACT_ADDRESS, FakeExplorer, FakeNetwork, fake_container


@pytest.fixture
def loaded_aliases(monkeypatch, account):
    aliases = []

    def _load(alias):
        aliases.append(alias)
        if alias != "deployer":
            raise IndexError(f"No account with alias '{alias}'.")
        return account

    monkeypatch.setattr(deployer_module, "accounts", SimpleNamespace(load=_load))
    return aliases


def test_unverified_network_never_touches_explorer(loaded_aliases, tmp_path, capsys):
    network = FakeNetwork("sepolia", explorer_error=ConnectionError("api.etherscan.io unreachable"))

    exit_code = main(
        network=network,
        params_filepath=DEFAULT_PARAMS_FILEPATH,
        account_alias="deployer",
        container=fake_container(),
        output_dir=tmp_path,
        autosign=True,
    )

    assert exit_code == 0
    assert loaded_aliases == ["deployer"]
    assert network.explorer_lookups == 0
    assert (tmp_path / "deployment-sepolia.json").exists()
    assert f"Contract address: {CONTRACT_ADDRESS}" in capsys.readouterr().out


def test_verification_network_uses_network_explorer(loaded_aliases, tmp_path):
    explorer = FakeExplorer()
    network = FakeNetwork(CORE_TESTNET2, explorer=explorer)

    exit_code = main(
        network=network,
        params_filepath=DEFAULT_PARAMS_FILEPATH,
        account_alias="deployer",
        container=fake_container(),
        output_dir=tmp_path,
        autosign=True,
        confirmations=0,
    )

    assert exit_code == 0
    assert explorer.published == [CONTRACT_ADDRESS]


def test_invalid_parameters_fail_through_handler(loaded_aliases, tmp_path, capsys):
    params = tmp_path / "params.yml"
    params.write_text("contract:\n  name: Project\n  constructor:\n    prizePool: 100\n")

    exit_code = main(
        network=FakeNetwork("sepolia"),
        params_filepath=params,
        account_alias="deployer",
        container=fake_container(),
        output_dir=tmp_path,
        autosign=True,
    )

    assert exit_code == 1
    assert "❌ Deployment failed: Constructor parameters length mismatch" in capsys.readouterr().err
    assert not (tmp_path / "deployment-sepolia.json").exists()


def test_unknown_account_fails_through_handler(loaded_aliases, account, tmp_path, capsys):
    exit_code = main(
        network=FakeNetwork("sepolia"),
        params_filepath=DEFAULT_PARAMS_FILEPATH,
        account_alias="nobody",
        container=fake_container(),
        output_dir=tmp_path,
        autosign=True,
    )

    assert exit_code == 1
    assert account.deployments == []
    assert "❌ Deployment failed: No account with alias 'nobody'." in capsys.readouterr().err
