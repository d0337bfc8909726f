import logging

from pynetreach.DisjointSet import DisjointSet
from pynetreach.Network import Network


class DisjointSetNetwork(Network):
    """Network deciding reachability by comparing disjoint-set representatives.

    Both connecting and querying run in amortized near-constant time.
    """

    def __init__(self, number_of_nodes: int):
        """Create a disjoint-set backed network.

        Parameters
        ----------
        number_of_nodes : int
            The number of nodes, labelled ``1..number_of_nodes``.

        """
        super().__init__(number_of_nodes)
        self.disjoint_set = DisjointSet(self.number_of_nodes)
        logging.debug(
            "Created disjoint-set network with %d nodes", self.number_of_nodes
        )

    @property
    def num_components(self) -> int:
        """The number of connected components currently in the network."""
        return self.disjoint_set.num_components

    # labels are 1-based, the disjoint set is 0-based
    def _do_connect(self, src: int, dest: int) -> None:
        """Merge the sets holding both nodes."""
        self.disjoint_set.union(src - 1, dest - 1)

    def _do_query(self, src: int, dest: int) -> bool:
        """Compare the representatives of both nodes."""
        return self.disjoint_set.is_connected(src - 1, dest - 1)
