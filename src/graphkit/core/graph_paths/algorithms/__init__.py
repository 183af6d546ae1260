"""Path finding algorithm implementations."""

from .dijkstra import DijkstraFinder, NegativeCostError

__all__ = ["DijkstraFinder", "NegativeCostError"]
