"""Scanner module for file discovery, include extraction and graph building."""

from .discovery import iter_files, find_root_files
from .parser import match_include, extract_includes, iter_file_includes
from .resolver import SearchPaths
from .builder import GraphBuilder, build_graph

__all__ = [
    "iter_files",
    "find_root_files",
    "match_include",
    "extract_includes",
    "iter_file_includes",
    "SearchPaths",
    "GraphBuilder",
    "build_graph",
]
