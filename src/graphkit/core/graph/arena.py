"""
Arena-backed adjacency list graph.

Nodes and edges live in two flat, append-only arenas and refer to each other
by index instead of by object reference. Every node stores the index of its
most recently added outgoing edge, and every edge stores the index of the
edge that was added before it from the same source. Together these form one
intrusive singly-linked list per node:

    node.first_outgoing_edge -> edge 7 -> edge 4 -> edge 1 -> None

Adding an edge prepends to that list in O(1), so neighbors come back in
reverse insertion order. That order is part of the graph's behaviour: when
several paths have the same cost, it decides which one Dijkstra returns.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..exceptions import EdgeNotFoundError, NodeNotFoundError
from ..types import EdgeHandle, NodeHandle
from .base import Graph


@dataclass
class NodeRecord[T]:
    """Arena entry for a node."""

    data: T
    index: NodeHandle
    first_outgoing_edge: Optional[EdgeHandle] = None


@dataclass
class EdgeRecord:
    """Arena entry for a directed edge."""

    target: NodeHandle
    next_outgoing_edge: Optional[EdgeHandle] = None


class Arena[T]:
    """
    Flat append-only storage addressed by integer index.

    Items are never removed or reordered, so an index stays valid for the
    lifetime of the arena. Lookups outside ``[0, len)`` return None instead of
    wrapping around like negative list indices do.
    """

    def __init__(self):
        self._items: List[T] = []

    def append(self, item: T) -> int:
        """Store ``item`` and return its index."""
        self._items.append(item)
        return len(self._items) - 1

    def get(self, index: int) -> Optional[T]:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def __contains__(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


class ArenaGraph[D](Graph[D]):
    """
    Directed graph stored as node and edge arenas with intrusive edge lists.

    Attributes:
        _nodes (Arena[NodeRecord]): Node payloads and edge list heads
        _edges (Arena[EdgeRecord]): Edge targets and list links
    """

    def __init__(self):
        self._nodes: Arena[NodeRecord[D]] = Arena()
        self._edges: Arena[EdgeRecord] = Arena()

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def add_node(self, data: D) -> NodeHandle:
        handle = NodeHandle(len(self._nodes))
        self._nodes.append(NodeRecord(data=data, index=handle))
        return handle

    def add_edge(self, source: NodeHandle, target: NodeHandle) -> None:
        if not self.has_node(target):
            raise NodeNotFoundError(f"Target node {target} not found in the graph")

        source_node = self._node(source)
        if source_node is None:
            raise NodeNotFoundError(f"Source node {source} not found in the graph")

        edge = EdgeHandle(
            self._edges.append(
                EdgeRecord(target=target, next_outgoing_edge=source_node.first_outgoing_edge)
            )
        )
        source_node.first_outgoing_edge = edge

    def get_data(self, node: NodeHandle) -> Optional[D]:
        record = self._node(node)
        return record.data if record is not None else None

    def get_data_mut(self, node: NodeHandle) -> Optional[D]:
        return self.get_data(node)

    def set_data(self, node: NodeHandle, data: D) -> bool:
        record = self._node(node)
        if record is None:
            return False
        record.data = data
        return True

    def get_neighbors(self, node: NodeHandle) -> List[NodeHandle]:
        if not self.has_node(node):
            return []
        return list(self.successors(node))

    def get_edge(self, edge: EdgeHandle) -> Optional[EdgeRecord]:
        """Return the arena record of ``edge``, or None if the handle is not valid."""
        if not isinstance(edge, EdgeHandle):
            return None
        return self._edges.get(edge.index)

    def successors(self, source: NodeHandle) -> Iterator[NodeHandle]:
        """
        Walk the outgoing edge list of ``source``, most recent edge first.

        Raises:
            NodeNotFoundError: If ``source`` does not refer to a node
            EdgeNotFoundError: If the edge list links to a missing edge
        """
        record = self._node(source)
        if record is None:
            raise NodeNotFoundError(f"Source node {source} not found in the graph")

        current = record.first_outgoing_edge
        while current is not None:
            edge = self._edges.get(current.index)
            if edge is None:
                raise EdgeNotFoundError(f"Edge {current} not found in the graph")
            yield edge.target
            current = edge.next_outgoing_edge

    def find(self, predicate) -> Optional[NodeHandle]:
        for record in self._nodes:
            if predicate(record.data):
                return record.index
        return None

    def find_nodes(self, predicate) -> List[NodeHandle]:
        return [record.index for record in self._nodes if predicate(record.data)]

    def _node(self, node: NodeHandle) -> Optional[NodeRecord[D]]:
        if not isinstance(node, NodeHandle):
            return None
        return self._nodes.get(node.index)
