import logging
from collections import deque
from typing import Dict, List

import numpy as np

from pynetreach.Network import Network


class BFSNetwork(Network):
    """Network deciding reachability with a breadth-first search per query.

    Connecting is O(1); querying is O(N) time and space in the worst case.
    """

    def __init__(self, number_of_nodes: int):
        """Create a BFS-backed network.

        Parameters
        ----------
        number_of_nodes : int
            The number of nodes, labelled ``1..number_of_nodes``.

        """
        super().__init__(number_of_nodes)

        # index 0 is unused so labels index directly; dict keys act as an
        # insertion-ordered set of neighbours
        self.adjacency: List[Dict[int, None]] = [
            {} for _ in range(self.number_of_nodes + 1)
        ]
        logging.debug("Created BFS network with %d nodes", self.number_of_nodes)

    def neighbors(self, node: int) -> List[int]:
        """Return the direct neighbours of a node in insertion order."""
        node = self._verify_node_is_present(node)
        return list(self.adjacency[node])

    @property
    def num_components(self) -> int:
        """The number of connected components, counted with one full traversal.

        Returns
        -------
        int
            The number of components. O(N + E) per call.

        """
        visited = np.zeros(self.number_of_nodes + 1, dtype=bool)
        components = 0
        for start in self.nodes:
            if visited[start]:
                continue
            components += 1
            visited[start] = True
            queue = deque([start])
            while queue:
                current = queue.popleft()
                for neighbor in self.adjacency[current]:
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        queue.append(neighbor)
        return components

    def _do_connect(self, src: int, dest: int) -> None:
        """Record ``dest`` and ``src`` as neighbours of one another.

        Parameters
        ----------
        src : int
            The source node, already validated.
        dest : int
            The destination node, already validated.

        """
        self.adjacency[src][dest] = None
        self.adjacency[dest][src] = None

    def _do_query(self, src: int, dest: int) -> bool:
        """Search breadth-first from ``src``, stopping as soon as ``dest`` is seen.

        Parameters
        ----------
        src : int
            The source node, already validated.
        dest : int
            The destination node, already validated.

        Returns
        -------
        bool
            True if ``dest`` is reachable from ``src``.

        """
        if src == dest:
            return True

        visited = np.zeros(self.number_of_nodes + 1, dtype=bool)
        queue = deque([src])
        visited[src] = True

        while queue:
            current = queue.popleft()
            for neighbor in self.adjacency[current]:
                if neighbor == dest:
                    return True
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        return False
