"""
Custom exceptions for the graph toolkit.

This module defines the hierarchy of exceptions raised by graph construction
and search. Structural mistakes made while building a graph (such as an edge
pointing at a node that does not exist) are reported through these classes.
A search that finds no path is not an error and never raises.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when an operation on a graph cannot be carried
    out, such as a search whose cost function produces unusable values.

    Examples:
        * Negative traversal costs
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    This exception is raised when a search engine or graph helper is created
    with option values that cannot be honoured.

    Examples:
        * Non-positive memory limits
        * Options of the wrong type
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a node handle does not refer to a node of the graph.

    Adding an edge whose source or target handle is out of range is a
    programming error in the caller's graph construction, so it always
    raises this exception rather than being silently ignored.

    Examples:
        * Edge insertion towards a node that was never added
        * Walking the successors of a foreign handle
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when an edge handle does not refer to an edge of the graph.

    Examples:
        * Broken intrusive edge list
    """
