"""
Shared-ownership graph representation.

Each node owns a list of shared, mutable neighbor cells. Adding an edge does
not store the target's handle: it stores a fresh clone of the whole target
node (a deep copy of its payload, the same index, and a shallow copy of its
own neighbor list) in a new cell appended to the source's list.

The clone is taken when the edge is added. Changing a node's payload later is
therefore not seen through cells cloned before the change, and edges added to
the target later are not seen through them either. Mutating a cell is seen by
every holder of that same cell. ArenaGraph and SharedGraph are therefore not
interchangeable for code that mutates payloads after wiring edges.

Searches are unaffected by the divergence: neighbor handles come from the
cells, payloads always come from the graph's own nodes.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import List, Optional

from ..exceptions import NodeNotFoundError
from ..types import NodeHandle
from .base import Graph


@dataclass(eq=False)
class SharedNode[D]:
    """
    Node cell holding a payload and its cloned neighbors.

    Attributes:
        data (D): Node payload
        index (NodeHandle): Handle of the node this cell was cloned from
        neighbors (List[SharedNode]): Neighbor cells, insertion order
    """

    data: D
    index: NodeHandle
    neighbors: List["SharedNode[D]"] = field(default_factory=list)

    def clone(self) -> "SharedNode[D]":
        """Copy the payload and the neighbor list; neighbor cells stay shared."""
        return SharedNode(data=deepcopy(self.data), index=self.index, neighbors=list(self.neighbors))


class SharedGraph[D](Graph[D]):
    """
    Directed graph where every node holds cloned, shared neighbor cells.

    Memory grows with every edge because each edge carries a copy of its
    target. Neighbors are returned in insertion order.
    """

    def __init__(self):
        self._nodes: List[SharedNode[D]] = []

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(node.neighbors) for node in self._nodes)

    def add_node(self, data: D) -> NodeHandle:
        handle = NodeHandle(len(self._nodes))
        self._nodes.append(SharedNode(data=data, index=handle))
        return handle

    def add_edge(self, source: NodeHandle, target: NodeHandle) -> None:
        target_node = self._node(target)
        if target_node is None:
            raise NodeNotFoundError(f"Target node {target} not found in the graph")

        source_node = self._node(source)
        if source_node is None:
            raise NodeNotFoundError(f"Source node {source} not found in the graph")

        source_node.neighbors.append(target_node.clone())

    def get_data(self, node: NodeHandle) -> Optional[D]:
        shared = self._node(node)
        return shared.data if shared is not None else None

    def get_data_mut(self, node: NodeHandle) -> Optional[D]:
        return self.get_data(node)

    def set_data(self, node: NodeHandle, data: D) -> bool:
        shared = self._node(node)
        if shared is None:
            return False
        shared.data = data
        return True

    def get_neighbors(self, node: NodeHandle) -> List[NodeHandle]:
        shared = self._node(node)
        if shared is None:
            return []
        return [neighbor.index for neighbor in shared.neighbors]

    def neighbor_nodes(self, node: NodeHandle) -> List[SharedNode[D]]:
        """
        Return the neighbor cells of ``node`` themselves.

        The cells hold the payloads as they were when each edge was added.

        Raises:
            NodeNotFoundError: If ``node`` does not refer to a node
        """
        shared = self._node(node)
        if shared is None:
            raise NodeNotFoundError(f"Node {node} not found in the graph")
        return list(shared.neighbors)

    def _node(self, node: NodeHandle) -> Optional[SharedNode[D]]:
        if not self.has_node(node):
            return None
        return self._nodes[node.index]
