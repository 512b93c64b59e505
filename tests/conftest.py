import pytest

from game_deployment.config import DeploymentConfig
from game_deployment.constants import CORE_TESTNET2
from tests.fakes import FakeAccount, FakeExplorer, fake_container


@pytest.fixture
def account():
    return FakeAccount()


@pytest.fixture
def explorer():
    return FakeExplorer()


@pytest.fixture
def container():
    return fake_container()


@pytest.fixture
def make_config(tmp_path):
    def _make_config(network_name=CORE_TESTNET2, **kwargs):
        kwargs.setdefault("output_dir", tmp_path)
        kwargs.setdefault("autosign", True)
        return DeploymentConfig(network_name=network_name, **kwargs).validate()

    return _make_config
