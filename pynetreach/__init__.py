from pynetreach.Network import Network, NodeNotFoundError
from pynetreach.DisjointSet import DisjointSet
from pynetreach.BFSNetwork import BFSNetwork
from pynetreach.DisjointSetNetwork import DisjointSetNetwork
from pynetreach.factory import ENGINES, create_network

__all__ = [
    "Network",
    "NodeNotFoundError",
    "DisjointSet",
    "BFSNetwork",
    "DisjointSetNetwork",
    "ENGINES",
    "create_network",
]
