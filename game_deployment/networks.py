from typing import Optional

from ape import networks

from game_deployment.constants import LOCAL_NETWORKS


def get_network_name() -> str:
    """Returns the name of the network the active provider is connected to."""
    return networks.provider.network.name


def is_local_network(network_name: Optional[str] = None) -> bool:
    """Returns True for development chains where verification never applies."""
    network_name = network_name or get_network_name()
    return network_name in LOCAL_NETWORKS
