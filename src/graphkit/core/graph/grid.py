"""
Grid adapter over the arena graph.

A grid lays one node per cell on a rectangular lattice and connects every cell
to the cells directly above, right of, below and left of it, where those
exist. There is no wraparound and there are no diagonal edges. Row and column
lookups are kept next to the underlying ArenaGraph, which does all the work.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from ..types import NodeHandle
from .arena import ArenaGraph
from .base import Graph

logger = logging.getLogger(__name__)

# (row offset, column offset) for up, right, down, left
LATTICE_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class Grid[D](Graph[D]):
    """
    Rectangular lattice of nodes backed by an ArenaGraph.

    Neighbors of a cell come back as up, right, down, left (skipping the ones
    outside the lattice). Extra edges can still be added by hand; they are not
    restricted to lattice neighbors.

    Attributes:
        node_indices (Optional[List[List[NodeHandle]]]): Handles by row and
            column, or None for a grid that was not built from data
    """

    def __init__(self):
        self._graph: ArenaGraph[D] = ArenaGraph()
        self.node_indices: Optional[List[List[NodeHandle]]] = None

    @classmethod
    def from_data(cls, rows: Sequence[Sequence[D]]) -> "Grid[D]":
        """
        Build a grid from row-major cell payloads.

        Args:
            rows: Rows of payloads; all rows must have the same, non-zero length

        Raises:
            ValueError: If the rows are empty or ragged
        """
        grid = cls()
        if not rows:
            grid.node_indices = []
            return grid

        width = len(rows[0])
        if width == 0 or any(len(row) != width for row in rows):
            raise ValueError("grid rows must be non-empty and of equal length")

        grid.node_indices = [[grid._graph.add_node(value) for value in row] for row in rows]

        height = len(rows)
        for row in range(height):
            for col in range(width):
                current = grid.node_indices[row][col]
                # Edge lists are LIFO, so add in reverse to read back up, right, down, left
                for row_offset, col_offset in reversed(LATTICE_OFFSETS):
                    other_row, other_col = row + row_offset, col + col_offset
                    if 0 <= other_row < height and 0 <= other_col < width:
                        grid._graph.add_edge(current, grid.node_indices[other_row][other_col])

        logger.debug(
            f"Built {height}x{width} grid with {grid.node_count} nodes "
            f"and {grid.edge_count} edges"
        )
        return grid

    @property
    def height(self) -> int:
        return len(self.node_indices) if self.node_indices else 0

    @property
    def width(self) -> int:
        return len(self.node_indices[0]) if self.node_indices else 0

    @property
    def node_count(self) -> int:
        return self._graph.node_count

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    def add_node(self, data: D) -> NodeHandle:
        return self._graph.add_node(data)

    def add_edge(self, source: NodeHandle, target: NodeHandle) -> None:
        # TODO: reject edges between cells that are not lattice neighbors
        self._graph.add_edge(source, target)

    def get_data(self, node: NodeHandle) -> Optional[D]:
        return self._graph.get_data(node)

    def get_data_mut(self, node: NodeHandle) -> Optional[D]:
        return self._graph.get_data_mut(node)

    def set_data(self, node: NodeHandle, data: D) -> bool:
        return self._graph.set_data(node, data)

    def get_neighbors(self, node: NodeHandle) -> List[NodeHandle]:
        return self._graph.get_neighbors(node)

    def find(self, predicate) -> Optional[NodeHandle]:
        return self._graph.find(predicate)

    def find_nodes(self, predicate) -> List[NodeHandle]:
        return self._graph.find_nodes(predicate)

    def successors(self, source: NodeHandle) -> Iterator[NodeHandle]:
        return self._graph.successors(source)

    def first_index(self) -> Optional[NodeHandle]:
        """Return the handle of the top-left cell, if there is one."""
        if not self.node_indices or not self.node_indices[0]:
            return None
        return self.node_indices[0][0]

    def last_index(self) -> Optional[NodeHandle]:
        """Return the handle of the bottom-right cell, if there is one."""
        if not self.node_indices or not self.node_indices[-1]:
            return None
        return self.node_indices[-1][-1]

    def handle_at(self, row: int, col: int) -> Optional[NodeHandle]:
        """Return the handle of the cell at ``(row, col)``, or None outside the lattice."""
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.node_indices[row][col]
        return None

    def position_of(self, node: NodeHandle) -> Optional[Tuple[int, int]]:
        """Return the ``(row, col)`` of a lattice cell, or None for other nodes."""
        if not self.has_node(node) or self.width == 0:
            return None
        row, col = divmod(node.index, self.width)
        if row >= self.height:
            return None
        return row, col

    def render(self) -> str:
        """Render the payloads row by row, or ``EMPTY`` for a grid without lattice."""
        return self.render_path([])

    def render_path(self, path: Sequence[NodeHandle], marker: str = "*") -> str:
        """Render the grid with every cell on ``path`` replaced by ``marker``."""
        if not self.node_indices:
            return "EMPTY"

        on_path = set(path)
        lines = []
        for row in self.node_indices:
            lines.append(
                "".join(marker if node in on_path else str(self.get_data(node)) for node in row)
            )
        return "\n".join(lines)
