"""
Network module
==============

A *network* is a fixed set of integer-labelled nodes ``1..N`` that can be
joined by undirected edges.  Two questions can be asked of it: connect a pair
of nodes, and decide whether one node is reachable from another through any
path of edges.

This module provides:

* the :class:`NodeNotFoundError` raised for labels outside ``[1, N]``; and
* the abstract :class:`Network` base class, which owns the node count and
  validates every label before handing the call to an engine.

Concrete engines only implement ``_do_connect`` and ``_do_query`` and can rely
on receiving labels that are already known to be in range.  See
:class:`~pynetreach.BFSNetwork` and :class:`~pynetreach.DisjointSetNetwork`.
"""

import numbers
from abc import ABC, abstractmethod
from typing import Iterable, List


class NodeNotFoundError(ValueError):
    """Raised when a node label lies outside the ``[1, N]`` range of a network."""

    def __init__(self, node: int, number_of_nodes: int):
        self.node = node
        self.number_of_nodes = number_of_nodes
        super().__init__(f"Node {node} not found in network [1, {number_of_nodes}]")


def _as_label(value, what: str) -> int:
    # bool is an Integral but never a meaningful label or count
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return int(value)


class Network(ABC):
    """Abstract base for networks answering reachability between nodes ``1..N``."""

    def __init__(self, number_of_nodes: int):
        """Create a network with a fixed number of nodes.

        Parameters
        ----------
        number_of_nodes : int
            The number of nodes.  Labels range over ``[1, number_of_nodes]``,
            or nothing at all when it is 0.

        Raises
        ------
        ValueError
            If ``number_of_nodes`` is negative.
        TypeError
            If ``number_of_nodes`` is not an integer.

        """
        number_of_nodes = _as_label(number_of_nodes, "number_of_nodes")
        if number_of_nodes < 0:
            raise ValueError(
                "The number of nodes in a network must be a non-negative number"
            )
        self.number_of_nodes = number_of_nodes

    @property
    def nodes(self) -> range:
        """The valid node labels, in ascending order."""
        return range(1, self.number_of_nodes + 1)

    def connect(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` with an undirected edge.

        Connecting nodes that are already reachable from one another succeeds
        silently.

        Parameters
        ----------
        src : int
            The source node.
        dest : int
            The destination node.

        Raises
        ------
        NodeNotFoundError
            If either node lies outside ``[1, number_of_nodes]``.

        """
        src, dest = self._verify_nodes_are_present(src, dest)
        self._do_connect(src, dest)

    def query(self, src: int, dest: int) -> bool:
        """Check whether a path of edges leads from ``src`` to ``dest``.

        A node is always reachable from itself.

        Parameters
        ----------
        src : int
            The source node.
        dest : int
            The destination node.

        Returns
        -------
        bool
            True if the two nodes are connected, False otherwise.

        Raises
        ------
        NodeNotFoundError
            If either node lies outside ``[1, number_of_nodes]``.

        """
        src, dest = self._verify_nodes_are_present(src, dest)
        return self._do_query(src, dest)

    def connect_all(self, nodes: Iterable[int]) -> None:
        """Connect every given node into a single component.

        All labels are validated before any edge is added.

        Parameters
        ----------
        nodes : Iterable[int]
            Node labels to join together.

        """
        labels = self._verify_all_present(nodes)
        for src, dest in zip(labels, labels[1:]):
            self._do_connect(src, dest)

    def all_connected(self, nodes: Iterable[int]) -> bool:
        """Check whether every given node is reachable from every other.

        Parameters
        ----------
        nodes : Iterable[int]
            Node labels to test.

        Returns
        -------
        bool
            True if the nodes share one component.  An empty input is
            trivially connected.

        """
        labels = self._verify_all_present(nodes)
        if not labels:
            return True
        first = labels[0]
        return all(self._do_query(first, other) for other in labels[1:])

    @abstractmethod
    def _do_connect(self, src: int, dest: int) -> None:
        """Engine-specific connect; labels are already validated."""

    @abstractmethod
    def _do_query(self, src: int, dest: int) -> bool:
        """Engine-specific query; labels are already validated."""

    def _verify_node_is_present(self, node) -> int:
        node = _as_label(node, "node")
        if node < 1 or node > self.number_of_nodes:
            raise NodeNotFoundError(node, self.number_of_nodes)
        return node

    def _verify_nodes_are_present(self, src, dest):
        return self._verify_node_is_present(src), self._verify_node_is_present(dest)

    def _verify_all_present(self, nodes: Iterable[int]) -> List[int]:
        return [self._verify_node_is_present(node) for node in nodes]

    def __len__(self) -> int:
        return self.number_of_nodes

    def __repr__(self) -> str:
        return f"{type(self).__name__}(number_of_nodes={self.number_of_nodes})"
