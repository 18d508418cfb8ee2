"""
Default exclusions and limits for file selection.

Exclusions are plain directory basenames, compared exactly (no globbing).
"""

from __future__ import annotations

# Build output and tool metadata that should almost never be dumped.
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    "cmake-build-debug",
    "cmake-build-release",
    ".idea",
    ".git",
)

DEFAULT_MAX_FILE_SIZE: int = 1_048_576  # 1 MiB

# How much of a file the textual probe reads.
PROBE_BYTES: int = 8192
