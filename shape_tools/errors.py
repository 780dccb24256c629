"""Exceptions raised by shape-tools."""


class ShapeToolsError(Exception):
    """Base class for all shape-tools errors."""


class InvalidArgumentError(ShapeToolsError, ValueError):
    """Raised when an operation receives a missing or empty polygon input."""


class GraphTraversalError(ShapeToolsError, RuntimeError):
    """Raised when the boundary tracer cannot continue or fails to close.

    Either a node has no outgoing edge, or the walk exceeded its step limit.
    """
