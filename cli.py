#!/usr/bin/env python3
"""
Include Tree CLI

A tool for scanning a directory of C/C++ files for #include directives and
printing the resulting inclusion graph as an indented tree per file.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from exporters import print_forest
from scanner.builder import build_graph
from scanner.config import ConfigError, ScanConfig, env_search_paths, load_config
from scanner.discovery import find_root_files, normalize_extension
from scanner.resolver import SearchPaths

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="include-tree",
        description="Print the #include graph of the C/C++ files in a directory.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  include-tree                       # Scan *.cpp and *.h in the current directory
  include-tree src -Iinclude -I../lib  # Extra include directories, in order
  include-tree . --ext .c .h         # Scan C sources instead
  include-tree . --no-env            # Ignore the INCLUDE environment variable
  include-tree . --config tree.yaml  # Read settings from a YAML file
  include-tree . -o tree.txt         # Write the tree to a file
        """,
    )

    # Positional arguments
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory whose files are printed as roots (default: current directory)",
    )

    # Resolution options
    parser.add_argument(
        "-I",
        dest="include_dirs",
        action="append",
        default=[],
        metavar="PATH",
        help="Add an include search directory (repeatable, searched in order)",
    )

    parser.add_argument(
        "--env-var",
        default=None,
        help="Environment variable listing default include directories (default: INCLUDE)",
    )

    parser.add_argument(
        "--no-env",
        action="store_true",
        help="Do not read include directories from the environment",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML configuration file",
    )

    # Scanning options
    parser.add_argument(
        "--ext",
        nargs="+",
        default=None,
        help="Root file extensions (default: .cpp .h)",
    )

    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Also use files in sub-directories as roots",
    )

    # Output options
    parser.add_argument(
        "--indent",
        default=None,
        help="Marker repeated once per tree level (default: '| ')",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def merge_config(parsed: argparse.Namespace, config: ScanConfig) -> ScanConfig:
    """Apply command line overrides on top of a loaded configuration."""
    if parsed.ext:
        config.extensions = [normalize_extension(ext) for ext in parsed.ext if ext]
    if parsed.env_var:
        config.env_var = parsed.env_var
    if parsed.no_env:
        config.use_env = False
    if parsed.recursive:
        config.recursive = True
    if parsed.indent is not None:
        config.indent = parsed.indent
    return config


def collect_search_paths(
    directory: Path,
    config: ScanConfig,
    include_dirs: List[str],
    environ: Optional[Mapping[str, str]] = None,
) -> SearchPaths:
    """
    Assemble the search directories in resolution order: the scanned
    directory, configuration file entries, the environment variable, then
    -I flags. Invalid entries are reported and skipped.
    """
    candidates = [str(directory)]
    candidates.extend(config.search_paths)
    if config.use_env:
        candidates.extend(env_search_paths(config.env_var, environ))
    candidates.extend(include_dirs)

    search_paths = SearchPaths()
    for path in candidates:
        if path in search_paths:
            continue
        if not search_paths.add(path):
            logger.warning("Couldn't add include directory '%s'", path)
    return search_paths


def main(args=None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    parsed, unknown = parser.parse_known_args(args)

    configure_logging(parsed.verbose)

    if unknown:
        print(f"Unknown argument: {unknown[0]}", file=sys.stderr)
        return 1

    directory = Path(parsed.directory).resolve()
    if not directory.is_dir():
        print(f"Error: '{parsed.directory}' is not a directory", file=sys.stderr)
        return 1

    # Load configuration
    try:
        config = load_config(Path(parsed.config)) if parsed.config else ScanConfig()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    config = merge_config(parsed, config)

    search_paths = collect_search_paths(
        directory,
        config,
        parsed.include_dirs,
        environ=os.environ if environ is None else environ,
    )
    logger.debug("Search paths: %s", ", ".join(search_paths))

    # Find the root files
    print("Finding source files...", file=sys.stderr)
    roots = find_root_files(directory, config.extensions, config.recursive)
    print(f"{len(roots)} files found.", file=sys.stderr)

    graph, root_nodes = build_graph(roots, search_paths)
    logger.debug("Unresolved includes: %d", len(graph.get_unresolved()))

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            with output_path.open("w", encoding="utf-8") as handle:
                print_forest(root_nodes, indent=config.indent, file=handle)
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print_forest(root_nodes, indent=config.indent)

    return 0


if __name__ == "__main__":
    sys.exit(main())
