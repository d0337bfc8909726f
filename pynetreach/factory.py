from typing import Dict, Literal, Type

from pynetreach.BFSNetwork import BFSNetwork
from pynetreach.DisjointSetNetwork import DisjointSetNetwork
from pynetreach.Network import Network

ENGINES: Dict[str, Type[Network]] = {
    "bfs": BFSNetwork,
    "disjoint_set": DisjointSetNetwork,
}


def create_network(
    number_of_nodes: int,
    engine: Literal["bfs", "disjoint_set"] = "disjoint_set",
) -> Network:
    """Create a network backed by the named reachability engine.

    Parameters
    ----------
    number_of_nodes : int
        The number of nodes, labelled ``1..number_of_nodes``.
    engine : {"bfs", "disjoint_set"}, optional
        Which engine answers queries. Default is "disjoint_set".

    Returns
    -------
    Network
        A fresh network with no edges.

    """
    try:
        cls = ENGINES[engine]
    except KeyError:
        raise ValueError(
            f"engine must be one of {sorted(ENGINES)}, got {engine!r}"
        ) from None
    return cls(number_of_nodes)
