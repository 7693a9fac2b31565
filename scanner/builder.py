"""Graph builder that orchestrates include extraction and resolution."""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from graph.model import FileNode, IncludeGraph
from .parser import iter_file_includes
from .resolver import SearchPaths

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Builds a deduplicated include graph on demand.

    Every file is scanned at most once. A node is registered before its
    file is scanned, so an include cycle that leads back to it finds the
    existing node instead of scanning it again.
    """

    def __init__(
        self,
        search_paths: SearchPaths,
        graph: Optional[IncludeGraph] = None,
    ):
        self.search_paths = search_paths
        self.graph = graph if graph is not None else IncludeGraph()

    def build_or_get(self, path: str) -> FileNode:
        """
        Return the node for `path`, scanning it and everything it includes
        the first time the path is seen.

        Args:
            path: Resolved file path (or fallback raw include text).

        Returns:
            The single FileNode registered for `path`.
        """
        node, created = self.graph.get_or_create(path)
        if not created:
            return node

        # Explicit work stack instead of recursion: include chains can be
        # deeper than the interpreter's recursion limit.
        pending: List[FileNode] = [node]
        while pending:
            current = pending.pop()
            # Reversed so children are scanned in the order they were included.
            pending.extend(reversed(self._scan(current)))

        return node

    def _scan(self, node: FileNode) -> List[FileNode]:
        """
        Record the edges of `node` and return the children it created.

        Missing files stay childless.
        """
        created_children: List[FileNode] = []
        if not node.exists:
            logger.debug("Unresolved file %s", node.path)
            return created_children

        for raw_path, line_number in iter_file_includes(node.path):
            resolved, found = self.search_paths.resolve(raw_path)
            child, created = self.graph.get_or_create(resolved, found)
            if created:
                created_children.append(child)
            node.add_edge(child, line_number)

        return created_children


def build_graph(
    roots: Iterable[str],
    search_paths: Union[SearchPaths, Iterable[str]],
) -> Tuple[IncludeGraph, List[FileNode]]:
    """
    Build the include graph reachable from a set of root files.

    Args:
        roots: Root file paths, in the order they should be printed.
        search_paths: Search directories, in resolution order.

    Returns:
        The populated IncludeGraph and the root nodes in input order.
    """
    if not isinstance(search_paths, SearchPaths):
        search_paths = SearchPaths(search_paths)

    builder = GraphBuilder(search_paths)
    root_nodes = [builder.build_or_get(root) for root in roots]

    logger.debug("Built %r from %d root files", builder.graph, len(root_nodes))
    return builder.graph, root_nodes
