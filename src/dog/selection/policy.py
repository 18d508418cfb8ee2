"""
FilterPolicy: decides which directories to prune and which files to admit.
"""

from __future__ import annotations

from pathlib import Path

from dog.selection.gitignore import GitignoreChain
from dog.selection.patterns import compile_patterns
from dog.selection.types import AdmissionDecision, Candidate, SelectionConfig


class FilterPolicy:
    """
    Combines directory exclusions, include patterns, the size limit, readability
    and the textual probe into one decision per file.

    File gates run cheapest first and each is final:

    1. include patterns (if any) against the full path
    2. `.gitignore` (only with `respect_gitignore`)
    3. size limit (an unstat-able file counts as size 0)
    4. readability
    5. textual probe
    """

    def __init__(self, config: SelectionConfig) -> None:
        self._config: SelectionConfig = config
        self._exclude_dirs: frozenset[str] = frozenset(config.exclude_dirs)
        self._include = compile_patterns(config.include) if config.include else None
        self._gitignore: GitignoreChain | None = (
            GitignoreChain(config.root) if config.respect_gitignore else None
        )

    def should_prune(self, basename: str, relative_path: Path | None = None) -> bool:
        """True if a directory should be skipped along with everything under it."""
        if basename in self._exclude_dirs:
            return True
        if self._gitignore is not None and relative_path is not None:
            return self._gitignore.is_ignored(relative_path, is_dir=True)
        return False

    def decide(self, candidate: Candidate) -> AdmissionDecision:
        if self._include is not None and not self._include(candidate.match_path):
            return AdmissionDecision.SKIPPED_NO_PATTERN_MATCH
        if self._gitignore is not None and self._gitignore.is_ignored(candidate.relative_path):
            return AdmissionDecision.SKIPPED_GITIGNORED
        if candidate.size_bytes > self._config.max_file_size:
            return AdmissionDecision.SKIPPED_TOO_LARGE
        if not candidate.is_readable:
            return AdmissionDecision.SKIPPED_UNREADABLE
        if not candidate.is_textual:
            return AdmissionDecision.SKIPPED_BINARY
        return AdmissionDecision.ADMITTED
