"""Extraction of #include directives from C/C++ source files."""

import io
import logging
import re
from typing import Iterable, Iterator, Optional, Tuple, Union

logger = logging.getLogger(__name__)


# The delimited path may not contain quotes or angle brackets. The pattern is
# unanchored and searched anywhere in the line, so directives inside comments
# still match.
INCLUDE_PATTERN = re.compile(r'#include\s+["<]([^"<>]+?)[">]')


def match_include(line: str) -> Optional[str]:
    """
    Return the included path named on a single line, if any.

    Both `#include "a.h"` and `#include <a.h>` yield `a.h`.

    Args:
        line: One line of source text.

    Returns:
        The path between the delimiters, or None if the line has no
        include directive.
    """
    match = INCLUDE_PATTERN.search(line)
    if match is None:
        return None
    return match.group(1)


def extract_includes(
    content: Union[str, Iterable[str]],
) -> Iterator[Tuple[str, int]]:
    """
    Lazily extract include directives from source text.

    Args:
        content: Whole file content, or an iterable of lines.

    Yields:
        (raw_include_path, line_number) tuples, line numbers starting at 1.
    """
    # StringIO splits on "\n" only, the same way iterating a file does.
    lines = io.StringIO(content) if isinstance(content, str) else content
    for line_number, line in enumerate(lines, start=1):
        raw_path = match_include(line)
        if raw_path is not None:
            yield raw_path, line_number


def iter_file_includes(file_path: str) -> Iterator[Tuple[str, int]]:
    """
    Extract include directives from a file on disk.

    A file that cannot be opened produces no includes.

    Args:
        file_path: Path to the file to scan.

    Yields:
        (raw_include_path, line_number) tuples.
    """
    try:
        handle = open(file_path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("Could not read %s: %s", file_path, e)
        return

    with handle:
        try:
            yield from extract_includes(handle)
        except OSError as e:
            logger.debug("Stopped reading %s: %s", file_path, e)
