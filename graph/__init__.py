"""Graph model for include relationships."""

from .model import FileNode, IncludeEdge, IncludeGraph

__all__ = ["FileNode", "IncludeEdge", "IncludeGraph"]
