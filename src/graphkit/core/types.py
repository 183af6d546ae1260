"""
Core type definitions.

This module provides the handle types graphs hand out for their nodes and
edges, together with the callable aliases used by the search engine.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable


@dataclass(frozen=True, order=True, slots=True)
class NodeHandle:
    """
    Opaque reference to a node of one graph instance.

    A handle is a plain index into the graph's node arena. It is cheap to copy,
    hashable and ordered, and it is only meaningful to the graph that issued it.

    Attributes:
        index (int): Position of the node in insertion order
    """

    index: int

    def __repr__(self) -> str:
        return f"NodeHandle({self.index})"


@dataclass(frozen=True, order=True, slots=True)
class EdgeHandle:
    """Opaque reference to an edge of one graph instance."""

    index: int

    def __repr__(self) -> str:
        return f"EdgeHandle({self.index})"


# Type alias for cost functions: payload of the node being entered -> cost
CostFunc = Callable[[Any], Real]

# Type alias for payload predicates used by find/find_nodes and frontier searches
NodePredicate = Callable[[Any], bool]
