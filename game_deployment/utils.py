import json
import os
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from ape import project
from ape.api import ExplorerAPI
from ape.contracts import ContractContainer
from ethpm_types import ContractType
from web3 import Web3

from game_deployment.networks import is_local_network
from game_deployment.results import VerificationResult


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r", encoding="utf-8") as file:
        return json.load(file)


def format_balance(balance: int) -> str:
    """Formats a wei balance in whole native-token units, always with a fractional part."""
    ether = Decimal(Web3.from_wei(balance, "ether")).normalize()
    text = format(ether, "f")
    if "." not in text:
        text = f"{text}.0"
    return text


def check_etherscan_plugin(ecosystem_name: str, network_name: Optional[str] = None) -> bool:
    """
    Checks that the ape-etherscan plugin is installed and that
    the appropriate API key environment variable is set.
    Problems are reported as warnings, never raised.
    """
    if is_local_network(network_name):
        # unnecessary for local deployment
        return True
    try:
        from ape_etherscan.utils import API_KEY_ENV_KEY_MAP
    except ImportError:
        print("WARNING: ape-etherscan plugin is not installed; verification will fail.")
        return False
    explorer_envvar = API_KEY_ENV_KEY_MAP.get(ecosystem_name)
    if not explorer_envvar:
        # custom explorers are configured in ape-config.yaml
        return True
    if not os.environ.get(explorer_envvar):
        print(f"WARNING: {explorer_envvar} is not set; verification will likely fail.")
        return False
    return True


def verify_contract(address: str, explorer: Optional[ExplorerAPI]) -> VerificationResult:
    """Publishes a deployed contract to the block explorer, capturing any failure."""
    if explorer is None:
        return VerificationResult.failed(address, "No block explorer configured for this network")
    try:
        explorer.publish_contract(address)
    except Exception as error:
        return VerificationResult.failed(address, str(error))
    return VerificationResult.succeeded(address)


def _get_dependency_contract_container(contract: str) -> ContractContainer:
    for dependency_name, dependency_versions in project.dependencies.items():
        if len(dependency_versions) > 1:
            raise ValueError(f"Ambiguous {dependency_name} dependency for {contract}")
        try:
            dependency_api = list(dependency_versions.values())[0]
            contract_container = getattr(dependency_api, contract)
            return contract_container
        except AttributeError:
            continue
    raise ValueError(f"No contract found with name '{contract}'.")


def contract_container_from_artifact(contract: str, artifact_path: Path) -> ContractContainer:
    """
    Builds a contract container from a compiled artifact file.
    Hardhat-style artifacts (``abi`` plus ``bytecode`` and ``deployedBytecode``) are supported.
    """
    artifact: Dict[str, Any] = _load_json(artifact_path)
    if "abi" not in artifact or "bytecode" not in artifact:
        raise ValueError(f"Artifact {artifact_path} must contain 'abi' and 'bytecode'.")

    contract_type_data = {
        "contractName": artifact.get("contractName", contract),
        "abi": artifact["abi"],
        "deploymentBytecode": {"bytecode": artifact["bytecode"]},
    }
    if artifact.get("deployedBytecode"):
        contract_type_data["runtimeBytecode"] = {"bytecode": artifact["deployedBytecode"]}

    contract_type = ContractType.model_validate(contract_type_data)
    return ContractContainer(contract_type)


def get_contract_container(
    contract: str, artifact_path: Optional[Path] = None
) -> ContractContainer:
    if artifact_path is not None:
        return contract_container_from_artifact(contract, artifact_path)

    try:
        contract_container = getattr(project, contract)
    except AttributeError:
        # not in root project; check dependencies
        contract_container = _get_dependency_contract_container(contract)

    return contract_container
