from collections import OrderedDict

from ape.utils import ZERO_ADDRESS


class DeploymentAborted(Exception):
    """Raised when the operator declines to continue the deployment."""


def _ask(question: str) -> None:
    answer = input(f"{question} Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        raise DeploymentAborted("Deployment aborted by operator.")


def _confirm_deployment(contract_name: str, network_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    _ask(f"Deploy {contract_name} to {network_name}")


def _confirm_zero_address() -> None:
    _ask("Zero Address detected for deployment parameter; Continue?")


def _confirm_resolution(
    resolved_params: OrderedDict, contract_name: str, network_name: str
) -> None:
    """Asks the user to confirm the resolved constructor parameters for a single contract."""
    if len(resolved_params) == 0:
        print(f"\n(i) No constructor parameters for {contract_name}")
        _confirm_deployment(contract_name, network_name)
        return

    print(f"\nConstructor parameters for {contract_name}")
    contains_zero_address = False
    for name, resolved_value in resolved_params.items():
        print(f"\t{name}={resolved_value}")
        if not contains_zero_address:
            contains_zero_address = resolved_value == ZERO_ADDRESS
    _confirm_deployment(contract_name, network_name)
    if contains_zero_address:
        _confirm_zero_address()
