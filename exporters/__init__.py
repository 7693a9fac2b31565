"""Exporters for converting include graphs to text output."""

from .tree_exporter import iter_forest_lines, print_forest, to_tree

__all__ = ["iter_forest_lines", "print_forest", "to_tree"]
