#!/usr/bin/env python3
"""
dog: Dump the text files of a project as one delimited block

Common usage:
  dog .                      # print every text file under the current directory
  dog -c -i '*.py:*.toml' .  # copy only Python and TOML files to the clipboard
  dog -t src/                # save the dump to a timestamped scratch file
  dog --list-files .         # show which files would be included

Environment variables:
  DOG_EXCLUDE_PATHS   Colon-separated directory names to skip entirely
                      (default: cmake-build-debug:cmake-build-release:.idea:.git)
  DOG_MAX_FILE_SIZE   Skip files larger than this many bytes (default: 1048576)
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dog.output import copy_to_clipboard, retrieval_hints, write_stdout, write_tmp_file
from dog.selection import (
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_MAX_FILE_SIZE,
    ConfigError,
    DogError,
    SelectionConfig,
    SelectionResult,
    select,
)

log = logging.getLogger(__name__)

EXCLUDE_ENV = "DOG_EXCLUDE_PATHS"
MAX_SIZE_ENV = "DOG_MAX_FILE_SIZE"


@dataclass
class Options:
    """Command-line options for the dog tool."""

    directory: str
    clipboard: bool
    tmp: bool
    include: list[str]
    exclude: str | None
    max_file_size: str | None
    respect_gitignore: bool
    list_files: bool
    verbose: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> Options:
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="dog",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to search (default: %(default)s)",
    )
    parser.add_argument(
        "-c",
        "--clipboard",
        action="store_true",
        help="Copy output to the clipboard instead of printing it",
    )
    parser.add_argument(
        "-t",
        "--tmp",
        action="store_true",
        help="Save output to a temporary directory with a timestamped filename",
    )
    parser.add_argument(
        "-i",
        "--include",
        action="append",
        default=[],
        metavar="PATTERNS",
        help="Colon-separated glob patterns; only files whose full path matches one "
        "are included (e.g. '*.sh:*/CMakeLists.txt'). Can be repeated",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        default=None,
        metavar="NAMES",
        help=f"Colon-separated directory names to skip (overrides ${EXCLUDE_ENV})",
    )
    parser.add_argument(
        "--max-file-size",
        default=None,
        dest="max_file_size",
        metavar="BYTES",
        help=f"Skip files larger than this size in bytes (overrides ${MAX_SIZE_ENV})",
    )
    parser.add_argument(
        "--respect-gitignore",
        action="store_true",
        dest="respect_gitignore",
        help="Also skip files and directories ignored by .gitignore files",
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print the selected file paths without their contents",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose debug logging")
    parser.add_argument(
        "-V", "--version", action="store_true", help="Show version information and exit"
    )
    opts = parser.parse_args(args)

    return Options(
        directory=opts.directory,
        clipboard=opts.clipboard,
        tmp=opts.tmp,
        include=opts.include,
        exclude=opts.exclude,
        max_file_size=opts.max_file_size,
        respect_gitignore=opts.respect_gitignore,
        list_files=opts.list_files,
        verbose=opts.verbose,
        version=opts.version,
    )


def split_colon_list(value: str) -> list[str]:
    """Split a colon-separated list, dropping empty entries."""
    return [part for part in value.split(":") if part]


def parse_max_file_size(value: str, source: str) -> int:
    try:
        size = int(value.strip())
    except ValueError:
        raise ConfigError(f"{source} must be a whole number of bytes, got '{value}'") from None
    if size < 0:
        raise ConfigError(f"{source} must not be negative, got {size}")
    return size


def build_config(options: Options, environ: Mapping[str, str]) -> SelectionConfig:
    """
    Combine flags, environment and defaults into one `SelectionConfig`.
    Explicit flags win over environment variables, which win over defaults.
    """
    if options.exclude is not None:
        exclude_dirs = split_colon_list(options.exclude)
    elif environ.get(EXCLUDE_ENV):
        exclude_dirs = split_colon_list(environ[EXCLUDE_ENV])
    else:
        exclude_dirs = list(DEFAULT_EXCLUDE_DIRS)

    if options.max_file_size is not None:
        max_file_size = parse_max_file_size(options.max_file_size, "--max-file-size")
    elif environ.get(MAX_SIZE_ENV):
        max_file_size = parse_max_file_size(environ[MAX_SIZE_ENV], MAX_SIZE_ENV)
    else:
        max_file_size = DEFAULT_MAX_FILE_SIZE

    include: list[str] = []
    for value in options.include:
        include.extend(split_colon_list(value))

    return SelectionConfig(
        root=Path(options.directory),
        exclude_dirs=frozenset(exclude_dirs),
        include=tuple(include),
        max_file_size=max_file_size,
        respect_gitignore=options.respect_gitignore,
        root_label=options.directory,
    )


def _log_config(config: SelectionConfig, options: Options, environ: Mapping[str, str]) -> None:
    log.debug("%s = '%s'", EXCLUDE_ENV, environ.get(EXCLUDE_ENV, ""))
    log.debug("Effective exclude dirs = '%s'", " ".join(sorted(config.exclude_dirs)))
    log.debug("Max file size = %d", config.max_file_size)
    log.debug("Copy to clipboard? = %s", options.clipboard)
    log.debug("Save to temp file? = %s", options.tmp)
    log.debug("Target directory = '%s'", config.root)
    log.debug("Use include patterns? = %s", bool(config.include))
    if config.include:
        log.debug("Include patterns: '%s'", " ".join(config.include))


def _print_summary(result: SelectionResult) -> None:
    rule = "-" * 41
    print(rule, file=sys.stderr)
    print("Processed files:", file=sys.stderr)
    for path in result.files:
        print(path, file=sys.stderr)
    print(rule, file=sys.stderr)
    print(f"Approx. word count: {result.word_count}", file=sys.stderr)
    print(f"Approx. size: {result.byte_count} bytes", file=sys.stderr)
    skipped = result.skipped()
    if skipped:
        print(f"Skipped files: {len(skipped)}", file=sys.stderr)


def _version() -> str:
    try:
        return importlib.metadata.version("dog-dump")
    except importlib.metadata.PackageNotFoundError:
        return "unknown (package not installed)"


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the dog CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options = _parse_args(args)

    if options.version:
        print(f"dog version: {_version()}")
        return 0

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG] %(message)s", stream=sys.stderr)

    try:
        config = build_config(options, os.environ)
        _log_config(config, options, os.environ)
        result = select(config)

        if options.list_files:
            for path in result.files:
                print(path)
            return 0

        _print_summary(result)

        if options.clipboard:
            copy_to_clipboard(result.text)
            print("All content copied to clipboard.", file=sys.stderr)

        if options.tmp:
            out_path = write_tmp_file(result.text)
            print(f"All content saved to file {out_path}", file=sys.stderr)
            print("", file=sys.stderr)
            print(retrieval_hints(out_path), file=sys.stderr)

        if not options.clipboard and not options.tmp:
            write_stdout(result.text)
    except DogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        # Catch other unexpected failures.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
