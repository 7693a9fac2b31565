"""Indented text tree exporter for include graphs."""

import sys
from typing import Iterable, Iterator, List, Optional, Set, TextIO, Tuple

from graph.model import FileNode, IncludeEdge


INDENT_MARKER = "| "
SEE_ABOVE = " (see above)"
UNRESOLVED = " (unresolved)"


def iter_forest_lines(
    roots: Iterable[FileNode],
    indent: str = INDENT_MARKER,
) -> Iterator[str]:
    """
    Render one tree per root as lines of text.

    Each root is printed at depth 0 and its includes below it, one level
    deeper per include step. A single visited set is shared by every tree
    in the forest: a file that was already expanded somewhere above is
    printed once more with a "(see above)" marker instead of being
    expanded again. Files without includes are always printed in full,
    since repeating them costs only one line.

    Args:
        roots: Root nodes, in output order.
        indent: Marker repeated once per depth level.

    Yields:
        Output lines without trailing newlines.
    """
    visited: Set[str] = set()

    for root in roots:
        visited.add(root.path)
        yield root.path

        # Stack of (depth, remaining edges) replaces recursion so deep
        # include chains render without hitting the recursion limit.
        stack: List[Tuple[int, Iterator[IncludeEdge]]] = [(1, iter(root.edges))]
        while stack:
            depth, edges = stack[-1]
            edge = next(edges, None)
            if edge is None:
                stack.pop()
                continue

            child = edge.child
            prefix = indent * depth
            label = f"[{edge.line_number}]: {child.path}"

            if child.path in visited and child.has_children:
                yield f"{prefix}{label}{SEE_ABOVE}"
                continue

            visited.add(child.path)
            if not child.exists:
                yield f"{prefix}{label}{UNRESOLVED}"
                continue

            yield f"{prefix}{label}"
            stack.append((depth + 1, iter(child.edges)))


def to_tree(
    roots: Iterable[FileNode],
    indent: str = INDENT_MARKER,
) -> str:
    """
    Convert the include forest to an indented text tree.

    Returns:
        The rendered lines joined with newlines.
    """
    return "\n".join(iter_forest_lines(roots, indent=indent))


def print_forest(
    roots: Iterable[FileNode],
    indent: str = INDENT_MARKER,
    file: Optional[TextIO] = None,
) -> None:
    """Print the include forest line by line (to stdout by default)."""
    if file is None:
        file = sys.stdout
    for line in iter_forest_lines(roots, indent=indent):
        print(line, file=file)
