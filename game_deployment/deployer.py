import sys
import typing
from pathlib import Path
from typing import Any, Callable, List, Optional

from ape import accounts
from ape.api import AccountAPI, ExplorerAPI, NetworkAPI, ReceiptAPI
from ape.cli.choices import select_account
from ape.contracts import ContractContainer, ContractInstance
from ape_accounts import KeyfileAccount
from eth_abi import is_encodable

from game_deployment.config import DeploymentConfig, DeploymentConfigError
from game_deployment.confirm import _confirm_resolution
from game_deployment.constants import BANNER_WIDTH, NEXT_STEPS
from game_deployment.record import record_filepath, record_from_deployment, write_record
from game_deployment.results import VerificationResult
from game_deployment.utils import (
    check_etherscan_plugin,
    format_balance,
    get_contract_container,
    verify_contract,
)


def _validate_constructor_abi_inputs(
    contract_name: str,
    abi_inputs: List[Any],
    resolved_parameters: typing.OrderedDict,
) -> None:
    """Validates the constructor parameters against the constructor ABI."""
    if len(resolved_parameters) != len(abi_inputs):
        raise DeploymentConfigError(
            f"Constructor parameters length mismatch - "
            f"{contract_name} ABI requires {len(abi_inputs)}, Got {len(resolved_parameters)}."
        )

    codex = enumerate(zip(abi_inputs, resolved_parameters.items()), start=0)
    for position, (abi_input, resolved_input) in codex:
        name, value = resolved_input
        if abi_input.name != name:
            raise DeploymentConfigError(
                f"{contract_name} constructor parameter '{name}' at position {position} does not "
                f"match the expected ABI name '{abi_input.name}'."
            )
        if not is_encodable(abi_input.type, value):
            raise DeploymentConfigError(
                f"Constructor param name '{name}' at position {position} has a value '{value}' "
                f"whose type does not match expected ABI type '{abi_input.type}'"
            )


def _await_confirmations(receipt: ReceiptAPI, confirmations: int) -> ReceiptAPI:
    """Blocks until the given number of blocks are mined on top of the receipt's block."""
    receipt.required_confirmations = confirmations
    return receipt.await_confirmations()


class Deployer:
    """
    Represents an ape account plus the parameters of a single contract deployment,
    plus annotated execution of the deployment sequence.
    """

    def __init__(
        self,
        config: DeploymentConfig,
        account: Optional[AccountAPI] = None,
        container: Optional[ContractContainer] = None,
        explorer: Optional[ExplorerAPI] = None,
        network: Optional[NetworkAPI] = None,
    ):
        self.config = config
        self._account = account if account is not None else select_account()
        if config.autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        if isinstance(self._account, KeyfileAccount):
            self._account.set_autosign(config.autosign)

        self.container = container or get_contract_container(
            config.contract_name, artifact_path=config.artifact_path
        )
        self.explorer = explorer
        self.network = network

        _validate_constructor_abi_inputs(
            contract_name=self.contract_name,
            abi_inputs=self.container.constructor.abi.inputs,
            resolved_parameters=self.constructor_params(),
        )

    @property
    def contract_name(self) -> str:
        return self.container.contract_type.name

    def get_account(self) -> AccountAPI:
        """Returns the deployer account."""
        return self._account

    def get_explorer(self) -> Optional[ExplorerAPI]:
        """
        Returns the block explorer for the active network.
        The lookup may reach out to the explorer's API, so it only happens when verifying.
        """
        if self.explorer is None and self.network is not None:
            self.explorer = self.network.explorer
        return self.explorer

    def constructor_params(self) -> typing.OrderedDict[str, Any]:
        return self.config.resolve_constructor_params(self._account.address)

    def deploy(self) -> ContractInstance:
        resolved_params = self.constructor_params()
        if not self.config.autosign:
            _confirm_resolution(resolved_params, self.contract_name, self.config.network_name)

        # verification runs on its own after the confirmation wait
        return self._account.deploy(self.container, *resolved_params.values(), publish=False)

    def verify(self, instance: ContractInstance) -> VerificationResult:
        """Best-effort explorer verification; only eligible networks are attempted."""
        if not self.config.should_verify:
            return VerificationResult.skipped(instance.address)

        print("\n⏳ Waiting for block confirmations...")
        _await_confirmations(instance.receipt, self.config.confirmations)

        print(f"🔍 Verifying contract on {self.config.network_name}...")
        try:
            explorer = self.get_explorer()
        except Exception as error:
            result = VerificationResult.failed(
                instance.address, f"Block explorer unavailable: {_describe(error)}"
            )
        else:
            result = verify_contract(instance.address, explorer)
        if result.is_success:
            print("✅ Contract verified successfully!")
        else:
            print(f"❌ Contract verification failed: {result.error}")
        return result

    def finalize(self, instance: ContractInstance) -> Path:
        """Writes the deployment record for the active network."""
        record = record_from_deployment(
            instance=instance,
            network_name=self.config.network_name,
            deployer=self._account.address,
        )
        filepath = record_filepath(self.config.network_name, self.config.output_dir)
        write_record(record, filepath)
        print(f"📄 Deployment info saved to {filepath.name}")
        return filepath

    def run(self) -> str:
        print(f"🚀 Starting deployment of {self.config.title}...")
        print("📝 Deploying contracts with account:", self._account.address)
        print("💰 Account balance:", self._account.balance)

        print(f"⏳ Deploying {self.contract_name} contract...")
        instance = self.deploy()
        print(f"✅ {self.contract_name} contract deployed!")
        print("📍 Contract address:", instance.address)

        self._print_summary(instance)
        self.verify(instance)
        self.finalize(instance)
        self._print_next_steps()
        return instance.address

    def _print_summary(self, instance: ContractInstance) -> None:
        balance = format_balance(self._account.balance)
        print(
            "\n" + "=" * BANNER_WIDTH,
            f"🎮 {self.config.title.upper()} DEPLOYMENT SUMMARY",
            "=" * BANNER_WIDTH,
            f"📍 Contract Address: {instance.address}",
            f"🌐 Network: {self.config.network_name}",
            f"👤 Deployer: {self._account.address}",
            f"💰 Deployer Balance: {balance} {self.config.currency_symbol}",
            "=" * BANNER_WIDTH,
            sep="\n",
        )

    @staticmethod
    def _print_next_steps() -> None:
        print("\n🎯 NEXT STEPS:")
        for number, step in enumerate(NEXT_STEPS, start=1):
            print(f"{number}. {step}")


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__


def _get_account(alias: Optional[str]) -> AccountAPI:
    if alias is None:
        return select_account()
    return accounts.load(alias)


def execute(build: Callable[[], Deployer]) -> int:
    """
    Builds and runs a deployment, returning the process exit code.
    Every failure, including invalid parameters, ends up here.
    """
    try:
        deployer = build()
        address = deployer.run()
    except Exception as error:
        print(f"❌ Deployment failed: {_describe(error)}", file=sys.stderr)
        return 1

    print("\n🎉 Deployment completed successfully!")
    print(f"Contract address: {address}")
    return 0


def main(
    network: NetworkAPI,
    params_filepath: Path,
    account_alias: Optional[str] = None,
    container: Optional[ContractContainer] = None,
    **overrides,
) -> int:
    """Deploys to the given network with parameters from file plus command line overrides."""

    def build() -> Deployer:
        config = DeploymentConfig.from_yaml(
            params_filepath, network_name=network.name, **overrides
        )
        if config.should_verify:
            check_etherscan_plugin(network.ecosystem.name, network.name)
        return Deployer(
            config=config,
            account=_get_account(account_alias),
            container=container,
            network=network,
        )

    return execute(build)
