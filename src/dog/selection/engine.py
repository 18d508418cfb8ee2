"""
SelectionEngine: traversal, admission and rendering in one pass.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dog.selection.errors import InvalidRootError
from dog.selection.policy import FilterPolicy
from dog.selection.render import render
from dog.selection.types import (
    AdmissionDecision,
    Candidate,
    EventKind,
    Observer,
    SelectionConfig,
    SelectionEvent,
    SelectionResult,
)
from dog.selection.walker import walk

log = logging.getLogger(__name__)


def log_event(event: SelectionEvent) -> None:
    """Default observer: report each event on the debug log."""
    log.debug("%s", event.describe())


def validate_root(root: Path) -> None:
    if not root.exists():
        raise InvalidRootError(f"Root directory '{root}' does not exist")
    if not root.is_dir():
        raise InvalidRootError(f"Root path '{root}' is not a directory")


class SelectionEngine:
    """
    Runs one selection for a config. Recoverable problems (unreadable
    directories or files, files vanishing before they're read) end up as
    decisions and events; only a bad root raises.
    """

    def __init__(self, config: SelectionConfig, observer: Observer | None = None) -> None:
        self.config: SelectionConfig = config
        self._observer: Observer = observer or log_event

    def select(self) -> SelectionResult:
        root = self.config.root
        validate_root(root)

        policy = FilterPolicy(self.config)
        pruned: list[Path] = []
        unreadable: list[Path] = []

        def observe(event: SelectionEvent) -> None:
            if event.kind is EventKind.PRUNED_DIR:
                pruned.append(event.path)
            elif event.kind is EventKind.UNREADABLE_DIR:
                unreadable.append(event.path)
            self._observer(event)

        admitted: list[Candidate] = []
        decisions: list[tuple[Path, AdmissionDecision]] = []
        for candidate in walk(root, policy, observe, self.config.root_label or None):
            decision = policy.decide(candidate)
            decisions.append((candidate.path, decision))
            if decision.admitted:
                admitted.append(candidate)
                observe(SelectionEvent(EventKind.ADMITTED, candidate.path, decision))
            else:
                detail = (
                    f"size: {candidate.size_bytes} bytes"
                    if decision is AdmissionDecision.SKIPPED_TOO_LARGE
                    else ""
                )
                observe(SelectionEvent(EventKind.SKIPPED, candidate.path, decision, detail))

        output = render(admitted, observe)
        return SelectionResult(
            files=[c.path for c in admitted],
            text=output.text,
            word_count=output.word_count,
            decisions=decisions,
            rendered=output.files,
            pruned_dirs=pruned,
            unreadable_dirs=unreadable,
        )


def select(config: SelectionConfig, observer: Observer | None = None) -> SelectionResult:
    """Select, filter and render the files under `config.root`."""
    return SelectionEngine(config, observer).select()
