"""
Graph contract shared by every graph representation.

This module provides the abstract Graph class. A representation supplies node
and edge insertion, payload lookup, neighbor enumeration and edge counting;
the contract derives predicate lookups, iteration and both Dijkstra searches
from those primitives. Handles are issued in insertion order starting at 0,
and are only meaningful to the graph instance that issued them.

Graphs are built once through add_node/add_edge and may then be searched any
number of times. Searches never mutate the graph.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from ..graph_paths import DijkstraFinder, SearchResult
from ..types import CostFunc, NodeHandle, NodePredicate


class Graph[D](ABC):
    """
    Abstract directed graph whose nodes carry payloads of type ``D``.

    Subclasses implement the storage-specific primitives. The predicate lookups
    and the shortest-path searches are implemented here once, on top of those
    primitives, so every representation returns the same answers for the same
    graph (up to neighbor order, which decides between equal-cost paths).
    """

    @abstractmethod
    def add_node(self, data: D) -> NodeHandle:
        """
        Add a new node holding ``data``.

        Always succeeds. The returned handle's index equals the number of nodes
        in the graph before the call.
        """

    @abstractmethod
    def add_edge(self, source: NodeHandle, target: NodeHandle) -> None:
        """
        Add a directed edge from ``source`` to ``target``.

        Duplicate edges are kept. Add the reverse edge explicitly for
        undirected graphs.

        Raises:
            NodeNotFoundError: If either handle does not refer to a node
        """

    @abstractmethod
    def get_data(self, node: NodeHandle) -> Optional[D]:
        """Return the payload of ``node``, or None if the handle is not valid."""

    @abstractmethod
    def get_data_mut(self, node: NodeHandle) -> Optional[D]:
        """
        Return the stored payload object of ``node`` for in-place mutation.

        Returns None if the handle is not valid. Immutable payloads are
        replaced with set_data instead.
        """

    @abstractmethod
    def set_data(self, node: NodeHandle, data: D) -> bool:
        """Replace the payload of ``node``. Returns False if the handle is not valid."""

    @abstractmethod
    def get_neighbors(self, node: NodeHandle) -> List[NodeHandle]:
        """Return the targets of the outgoing edges of ``node`` (empty if not valid)."""

    @property
    @abstractmethod
    def edge_count(self) -> int:
        """Total number of edges in the graph."""

    @property
    @abstractmethod
    def node_count(self) -> int:
        """Total number of nodes in the graph."""

    def __len__(self) -> int:
        return self.node_count

    def __iter__(self) -> Iterator[NodeHandle]:
        """Iterate over node handles in insertion order."""
        return self.nodes()

    def nodes(self) -> Iterator[NodeHandle]:
        """Iterate over node handles in insertion order."""
        for index in range(self.node_count):
            yield NodeHandle(index)

    def has_node(self, node: NodeHandle) -> bool:
        """Check if ``node`` refers to a node of this graph."""
        return isinstance(node, NodeHandle) and 0 <= node.index < self.node_count

    def find(self, predicate: NodePredicate) -> Optional[NodeHandle]:
        """Return the first node, in insertion order, whose payload satisfies ``predicate``."""
        for node in self.nodes():
            if predicate(self.get_data(node)):
                return node
        return None

    def find_nodes(self, predicate: NodePredicate) -> List[NodeHandle]:
        """Return every node, in insertion order, whose payload satisfies ``predicate``."""
        return [node for node in self.nodes() if predicate(self.get_data(node))]

    def dijkstra(self, start: NodeHandle, target: NodeHandle, cost_fn: CostFunc) -> List[NodeHandle]:
        """
        Find the cheapest path from ``start`` to ``target``.

        Entering a node costs ``cost_fn(payload)``; the start node is free.

        Args:
            start: Node the path starts from
            target: Node the path ends at
            cost_fn: Non-negative cost of entering a node, given its payload

        Returns:
            List[NodeHandle]: Handles from start to target inclusive; ``[start]``
            when start equals target; empty if target is unreachable

        Example:
            >>> graph.dijkstra(start, target, lambda cost: cost)
            [NodeHandle(0), NodeHandle(2), NodeHandle(3), NodeHandle(4)]
        """
        return self.shortest_path(start, target, cost_fn).path

    def dijkstra_search(
        self,
        frontier_fn: NodePredicate,
        target_fn: NodePredicate,
        cost_fn: CostFunc,
    ) -> List[NodeHandle]:
        """
        Find the cheapest path from any frontier node to any target node.

        Every node whose payload satisfies ``frontier_fn`` is a source at cost 0.
        The search stops at the first node popped from the queue whose payload
        satisfies ``target_fn``.

        Returns:
            List[NodeHandle]: Handles from a frontier node to the target; empty
            if the frontier is empty or no target is reachable
        """
        return self.shortest_path_from(frontier_fn, target_fn, cost_fn).path

    def shortest_path(
        self, start: NodeHandle, target: NodeHandle, cost_fn: CostFunc, **kwargs
    ) -> SearchResult:
        """Same search as dijkstra, returning the path with its total cost and metrics."""
        return DijkstraFinder(self, **kwargs).find_path(start, target, cost_fn)

    def shortest_path_from(
        self,
        frontier_fn: NodePredicate,
        target_fn: NodePredicate,
        cost_fn: CostFunc,
        **kwargs,
    ) -> SearchResult:
        """Same search as dijkstra_search, returning the path with its total cost and metrics."""
        return DijkstraFinder(self, **kwargs).find_path_from_frontier(frontier_fn, target_fn, cost_fn)
