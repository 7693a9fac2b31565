"""Graph data model for storing file inclusion relationships."""

import os
from typing import Dict, List, NamedTuple, Tuple


class IncludeEdge(NamedTuple):
    """An outgoing edge: the included node and the line that included it."""

    child: "FileNode"
    line_number: int


class FileNode:
    """
    A single source or header file in the include graph.

    The node is identified by its path string, which is the resolved path
    of the file, or the raw include text when it could not be resolved.
    An unresolved node never exists, whatever its raw text names relative
    to the working directory.
    """

    def __init__(self, path: str, resolved: bool = True):
        self.path = path
        self.resolved = resolved
        self._edges: List[IncludeEdge] = []

    @property
    def exists(self) -> bool:
        """Whether the node was resolved and its path is a regular file."""
        return self.resolved and os.path.isfile(self.path)

    @property
    def edges(self) -> List[IncludeEdge]:
        """Return the outgoing edges in the order they were recorded."""
        return list(self._edges)

    @property
    def children(self) -> List["FileNode"]:
        return [edge.child for edge in self._edges]

    @property
    def has_children(self) -> bool:
        return bool(self._edges)

    def has_edge_to(self, path: str) -> bool:
        """Check if an edge to a node with this path was already recorded."""
        return any(edge.child.path == path for edge in self._edges)

    def add_edge(self, child: "FileNode", line_number: int) -> bool:
        """
        Record that this file includes `child` at `line_number`.

        Only the first include of a given path is kept; later duplicates
        are ignored.

        Returns:
            True if the edge was added, False if it was a duplicate.
        """
        if self.has_edge_to(child.path):
            return False
        self._edges.append(IncludeEdge(child, line_number))
        return True

    def __repr__(self) -> str:
        return f"FileNode({self.path!r}, edges={len(self._edges)})"


class IncludeGraph:
    """
    Registry of file nodes keyed by path.

    Holds at most one node per path string. Nodes reference each other
    through their edges, so the graph may contain cycles and shared
    children.
    """

    def __init__(self):
        self._nodes: Dict[str, FileNode] = {}

    @property
    def nodes(self) -> List[FileNode]:
        """Return all nodes in creation order."""
        return list(self._nodes.values())

    def get_or_create(self, path: str, resolved: bool = True) -> Tuple[FileNode, bool]:
        """
        Look up the node for `path`, creating and registering it if needed.

        `resolved` only applies to a newly created node; an existing node
        keeps the state it was created with.

        Returns:
            Tuple of (node, created).
        """
        node = self._nodes.get(path)
        if node is not None:
            return node, False
        node = FileNode(path, resolved)
        self._nodes[path] = node
        return node, True

    def get_unresolved(self) -> List[FileNode]:
        """Get nodes whose path does not name an existing file."""
        return [node for node in self._nodes.values() if not node.exists]

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, path: str) -> bool:
        """Check if a node with this path is in the graph."""
        return path in self._nodes

    def __repr__(self) -> str:
        edge_count = sum(len(node.edges) for node in self._nodes.values())
        return f"IncludeGraph(nodes={len(self._nodes)}, edges={edge_count})"
