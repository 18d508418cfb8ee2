"""Configuration, decision and result types for file selection."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from pathlib import Path

from dog.selection.defaults import DEFAULT_EXCLUDE_DIRS, DEFAULT_MAX_FILE_SIZE
from dog.selection.probe import encode_text, is_textual


@dataclass(frozen=True)
class SelectionConfig:
    """
    Everything one selection run needs, built once per invocation.

    `exclude_dirs` are directory basenames pruned at any depth (exact match).
    `include` is an ordered tuple of globs matched against the full path; an empty
    tuple admits every file that is not under an excluded directory.
    `respect_gitignore` additionally honors `.gitignore` files and is off by default.
    `root_label` is the root as the user typed it (e.g. `./src`); include patterns see
    it verbatim, as `find` output would. Empty means `str(root)`.
    """

    root: Path = Path(".")
    exclude_dirs: frozenset[str] = frozenset(DEFAULT_EXCLUDE_DIRS)
    include: tuple[str, ...] = ()
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    respect_gitignore: bool = False
    root_label: str = ""


class AdmissionDecision(Enum):
    ADMITTED = "admitted"
    SKIPPED_EXCLUDED_DIR = "excluded directory"
    SKIPPED_NO_PATTERN_MATCH = "no include pattern matched"
    SKIPPED_GITIGNORED = "ignored by .gitignore"
    SKIPPED_TOO_LARGE = "too large"
    SKIPPED_UNREADABLE = "unreadable"
    SKIPPED_BINARY = "binary or non-text"

    @property
    def admitted(self) -> bool:
        return self is AdmissionDecision.ADMITTED


@dataclass
class Candidate:
    """
    A regular file found during traversal, pending an admission decision.

    File metadata is read lazily and at most once per candidate, so the cheap
    gates never pay for the expensive ones.
    """

    path: Path
    relative_path: Path
    match_path: str = ""
    """The string include patterns see: the root as given joined with the relative path."""

    def __post_init__(self) -> None:
        if not self.match_path:
            self.match_path = str(self.path)

    @cached_property
    def size_bytes(self) -> int:
        """Size from `stat`, or 0 if the file can't be stat'ed."""
        try:
            return self.path.stat().st_size
        except OSError:
            return 0

    @cached_property
    def is_readable(self) -> bool:
        return os.access(self.path, os.R_OK)

    @cached_property
    def is_textual(self) -> bool:
        return is_textual(self.path)


@dataclass(frozen=True)
class RenderedFile:
    path: Path
    header: str
    content: str
    footer: str
    read_failed: bool = False

    @property
    def block(self) -> str:
        return f"{self.header}{self.content}\n{self.footer}"


class EventKind(Enum):
    PRUNED_DIR = "pruned-dir"
    UNREADABLE_DIR = "unreadable-dir"
    ADMITTED = "admitted"
    SKIPPED = "skipped"
    RENDER_FAILED = "render-failed"


@dataclass(frozen=True)
class SelectionEvent:
    """An observation from a selection run. Observers must not change the run."""

    kind: EventKind
    path: Path
    decision: AdmissionDecision | None = None
    detail: str = ""

    def describe(self) -> str:
        if self.kind is EventKind.PRUNED_DIR:
            return f"Pruning excluded directory: {self.path}"
        if self.kind is EventKind.UNREADABLE_DIR:
            return f"Skipping unreadable directory: {self.path} ({self.detail})"
        if self.kind is EventKind.ADMITTED:
            return f"Admitting file: {self.path}"
        if self.kind is EventKind.RENDER_FAILED:
            return f"Could not read file, rendering it empty: {self.path} ({self.detail})"
        reason = self.decision.value if self.decision else "skipped"
        suffix = f" ({self.detail})" if self.detail else ""
        return f"Skipping {reason} file: {self.path}{suffix}"


Observer = Callable[[SelectionEvent], None]


@dataclass
class SelectionResult:
    """
    Output of one selection run.

    `files` holds admitted paths in discovery order. `decisions` holds every
    traversed candidate with its terminal decision, also in discovery order.
    """

    files: list[Path]
    text: str
    word_count: int
    decisions: list[tuple[Path, AdmissionDecision]] = field(default_factory=list)
    rendered: list[RenderedFile] = field(default_factory=list)
    pruned_dirs: list[Path] = field(default_factory=list)
    unreadable_dirs: list[Path] = field(default_factory=list)

    @property
    def byte_count(self) -> int:
        """Size of `text` as it is written out, in the locale encoding."""
        return len(encode_text(self.text))

    def skipped(self) -> list[tuple[Path, AdmissionDecision]]:
        return [(path, decision) for path, decision in self.decisions if not decision.admitted]
