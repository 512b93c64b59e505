import typing
from collections import OrderedDict
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional, Sequence

from game_deployment.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    PROJECT_CONTRACT_NAME,
    PROJECT_TITLE,
    VERIFICATION_CONFIRMATIONS,
    VERIFICATION_NETWORKS,
)
from game_deployment.utils import _load_yaml

VARIABLE_PREFIX = "$"
DEPLOYER_VARIABLE = "deployer"


class DeploymentConfigError(ValueError):
    pass


def is_variable(param: Any) -> bool:
    return isinstance(param, str) and param.startswith(VARIABLE_PREFIX)


def _validate_param(name: str, param: Any) -> None:
    if isinstance(param, list):
        for item in param:
            _validate_param(name, item)
        return
    if not is_variable(param):
        return
    variable = param.strip(VARIABLE_PREFIX)
    if variable != DEPLOYER_VARIABLE:
        raise DeploymentConfigError(f"Variable {param} for '{name}' is not resolvable")


def _resolve_param(value: Any, deployer_address: str) -> Any:
    if isinstance(value, list):
        return [_resolve_param(v, deployer_address) for v in value]
    if is_variable(value):
        return deployer_address
    return value


class DeploymentConfig(NamedTuple):
    """Everything a single deployment run needs, resolved up front."""

    network_name: str
    contract_name: str = PROJECT_CONTRACT_NAME
    title: str = PROJECT_TITLE
    constructor_params: Mapping[str, Any] = MappingProxyType({})
    verification_networks: Sequence[str] = tuple(VERIFICATION_NETWORKS)
    confirmations: int = VERIFICATION_CONFIRMATIONS
    verify: Optional[bool] = None
    output_dir: Path = Path(".")
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    autosign: bool = False
    artifact_path: Optional[Path] = None

    @property
    def should_verify(self) -> bool:
        """Explicit override wins; otherwise only listed networks are verified."""
        if self.verify is not None:
            return self.verify
        return self.network_name in self.verification_networks

    def resolve_constructor_params(self, deployer_address: str) -> typing.OrderedDict[str, Any]:
        resolved = OrderedDict()
        for name, value in self.constructor_params.items():
            resolved[name] = _resolve_param(value, deployer_address)
        return resolved

    def validate(self) -> "DeploymentConfig":
        if not self.network_name:
            raise DeploymentConfigError("network name is not set.")
        if not isinstance(self.contract_name, str) or not self.contract_name:
            raise DeploymentConfigError("contract name is not set in params file.")
        if not isinstance(self.confirmations, int) or self.confirmations < 0:
            raise DeploymentConfigError(
                f"confirmations must be a non-negative integer, got {self.confirmations!r}."
            )
        for name, value in self.constructor_params.items():
            _validate_param(name, value)
        return self

    @classmethod
    def from_dict(cls, config: typing.Dict, network_name: str, **overrides) -> "DeploymentConfig":
        deployment = config.get("deployment") or dict()
        contract = config.get("contract") or dict()
        verification = config.get("verification") or dict()

        constructor = contract.get("constructor") or dict()
        if not isinstance(constructor, dict):
            raise DeploymentConfigError("Malformed constructor parameters YAML.")

        networks = verification.get("networks", VERIFICATION_NETWORKS)
        if not isinstance(networks, list):
            raise DeploymentConfigError("verification networks must be a list.")

        values = dict(
            network_name=network_name,
            contract_name=contract.get("name", PROJECT_CONTRACT_NAME),
            title=deployment.get("name", PROJECT_TITLE),
            constructor_params=OrderedDict(constructor),
            verification_networks=list(networks),
            confirmations=verification.get("confirmations", VERIFICATION_CONFIRMATIONS),
            currency_symbol=deployment.get("currency", DEFAULT_CURRENCY_SYMBOL),
        )
        # unset CLI options arrive as None and must not clobber the file
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values).validate()

    @classmethod
    def from_yaml(cls, filepath: Path, network_name: str, **overrides) -> "DeploymentConfig":
        config = _load_yaml(filepath) or dict()
        if not isinstance(config, dict):
            raise DeploymentConfigError(f"Malformed parameters file at {filepath}.")
        return cls.from_dict(config, network_name=network_name, **overrides)
