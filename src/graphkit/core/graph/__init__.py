"""
Graph representations for the graphkit system.

This module provides:
- Graph: the contract every representation implements, including Dijkstra
- ArenaGraph: index-arena adjacency list with intrusive edge lists
- SharedGraph: node graph holding cloned, shared neighbor cells
- Grid: rectangular lattice built on ArenaGraph
"""

from .arena import Arena, ArenaGraph, EdgeRecord, NodeRecord
from .base import Graph
from .grid import Grid
from .shared import SharedGraph, SharedNode

__all__ = [
    "Arena",
    "ArenaGraph",
    "EdgeRecord",
    "Graph",
    "Grid",
    "NodeRecord",
    "SharedGraph",
    "SharedNode",
]
