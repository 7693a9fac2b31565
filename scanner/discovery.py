"""File discovery utilities for finding root source files."""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set


DEFAULT_EXTENSIONS = (".cpp", ".h")
DEFAULT_EXCLUDE_DIRS = {
    ".git", ".hg", ".svn",
    "build", "cmake-build-debug", "cmake-build-release",
    "node_modules", "__pycache__",
    ".idea", ".vscode",
}


def normalize_extension(ext: str) -> str:
    """Return a lower-case extension with a leading dot."""
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def iter_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    recursive: bool = False,
    exclude_dirs: Optional[Set[str]] = None,
) -> Iterator[Path]:
    """
    Iterate over root source files in a directory.

    Files are grouped by extension in the order the extensions are given,
    and sorted by path within each group, so with the defaults every
    `.cpp` file comes before every `.h` file.

    Args:
        root: Directory to scan.
        extensions: File extensions to include (e.g., ['.cpp', '.h']).
        recursive: If True, also scan sub-directories.
        exclude_dirs: Directory names to skip when recursing.
                     If None, uses DEFAULT_EXCLUDE_DIRS.

    Yields:
        Absolute Path objects for matching files.
    """
    if exclude_dirs is None:
        exclude_dirs = DEFAULT_EXCLUDE_DIRS

    root = root.resolve()
    files = list(_walk(root, recursive, exclude_dirs))

    seen: Set[Path] = set()
    for ext in (normalize_extension(e) for e in extensions):
        for path in sorted(f for f in files if f.suffix.lower() == ext):
            if path not in seen:
                seen.add(path)
                yield path


def _walk(current: Path, recursive: bool, exclude_dirs: Set[str]) -> Iterator[Path]:
    try:
        entries = sorted(current.iterdir())
    except PermissionError:
        return

    for entry in entries:
        if entry.is_dir():
            if recursive and entry.name not in exclude_dirs:
                yield from _walk(entry, recursive, exclude_dirs)
        elif entry.is_file():
            yield entry


def find_root_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    recursive: bool = False,
) -> List[str]:
    """Return root file paths as strings, ready to be used as node identities."""
    return [str(path) for path in iter_files(root, extensions, recursive)]
