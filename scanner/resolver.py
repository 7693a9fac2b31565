"""Path resolution utilities for mapping include strings to actual files."""

import logging
import os
from typing import Iterable, Iterator, List, Tuple

logger = logging.getLogger(__name__)


def normalize_separators(path: str) -> str:
    """Convert both '/' and '\\' separators to the platform separator."""
    return path.replace("/", os.sep).replace("\\", os.sep)


class SearchPaths:
    """
    Ordered set of include directories.

    Directories are consulted in the order they were added, so the first
    registered directory wins when the same relative include exists in
    several of them.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: List[str] = []
        for path in paths:
            self.add(path)

    def add(self, path: str) -> bool:
        """
        Register a search directory.

        Args:
            path: Directory path. It is stored in absolute, normalized form;
                  relative paths are taken from the current working directory.

        Returns:
            True if the directory was added, False if the path is empty,
            is not an existing directory, or is already registered.
        """
        if not path:
            return False

        path = os.path.abspath(path)
        if not os.path.isdir(path):
            return False

        if path in self._paths:
            return False

        self._paths.append(path)
        return True

    def resolve(self, raw_path: str) -> Tuple[str, bool]:
        """
        Resolve an include string to an existing file.

        Args:
            raw_path: The path text taken from an include directive.

        Returns:
            Tuple of (resolved_path, found). An absolute path resolves to
            itself whether or not it exists. A relative path that matches
            no search directory resolves to the original raw string.
        """
        if not raw_path:
            return raw_path, False

        normalized = normalize_separators(raw_path)

        if os.path.isabs(normalized):
            return normalized, os.path.isfile(normalized)

        for directory in self._paths:
            candidate = os.path.normpath(os.path.join(directory, normalized))
            if os.path.isfile(candidate):
                return candidate, True

        logger.debug("Could not resolve include '%s'", raw_path)
        return raw_path, False

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: str) -> bool:
        return bool(path) and os.path.abspath(path) in self._paths

    def __repr__(self) -> str:
        return f"SearchPaths({self._paths!r})"
