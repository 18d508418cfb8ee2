"""
Self-contained file selection engine: walks a tree, prunes excluded directories,
admits files by include pattern, size and content, and renders them as one
delimited text block.

No imports from `dog` outside this package.

Usage::

    from dog.selection import SelectionConfig, select

    result = select(SelectionConfig(root=Path("."), include=("*.py",)))
    print(result.text)
"""

from dog.selection.defaults import DEFAULT_EXCLUDE_DIRS, DEFAULT_MAX_FILE_SIZE
from dog.selection.engine import SelectionEngine, select
from dog.selection.errors import ConfigError, DogError, InvalidRootError, OutputError
from dog.selection.patterns import matches
from dog.selection.policy import FilterPolicy
from dog.selection.types import (
    AdmissionDecision,
    Candidate,
    EventKind,
    SelectionConfig,
    SelectionEvent,
    SelectionResult,
)
from dog.selection.walker import walk

__all__ = [
    "DEFAULT_EXCLUDE_DIRS",
    "DEFAULT_MAX_FILE_SIZE",
    "AdmissionDecision",
    "Candidate",
    "ConfigError",
    "DogError",
    "EventKind",
    "FilterPolicy",
    "InvalidRootError",
    "OutputError",
    "SelectionConfig",
    "SelectionEngine",
    "SelectionEvent",
    "SelectionResult",
    "matches",
    "select",
    "walk",
]
