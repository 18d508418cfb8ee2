"""
TreeWalker: depth-first, pre-order traversal with directory pruning.

Entries are visited sorted by basename, files and directories interleaved, so the
order is the same on every platform. Pruned directories are never opened.
Symlinks are neither yielded nor followed.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from dog.selection.errors import InvalidRootError
from dog.selection.policy import FilterPolicy
from dog.selection.types import Candidate, EventKind, Observer, SelectionEvent


def _list_dir(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def _entry_kind(entry: os.DirEntry[str]) -> str | None:
    """'dir', 'file', or `None` for symlinks and anything else."""
    try:
        if entry.is_symlink():
            return None
        if entry.is_dir(follow_symlinks=False):
            return "dir"
        if entry.is_file(follow_symlinks=False):
            return "file"
    except OSError:
        return None
    return None


def walk(
    root: Path,
    policy: FilterPolicy,
    observer: Observer | None = None,
    root_label: str | None = None,
) -> Iterator[Candidate]:
    """
    Lazily yield every regular file under `root` that isn't inside a pruned
    directory. The root itself is never pruned; failing to list it raises
    `InvalidRootError`. Other unlistable directories are reported and skipped.

    Include patterns match against `root_label` (default `str(root)`) joined with
    the relative path.
    """
    label = root_label or str(root)
    try:
        root_entries = _list_dir(root)
    except OSError as e:
        raise InvalidRootError(f"Could not read root directory '{root}': {e}") from e

    # Each frame is a directory's path relative to root and its remaining entries.
    stack: list[tuple[Path, Iterator[os.DirEntry[str]]]] = [(Path(), iter(root_entries))]
    while stack:
        rel_dir, entries = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        kind = _entry_kind(entry)
        rel_path = rel_dir / entry.name
        path = root / rel_path

        if kind == "dir":
            if policy.should_prune(entry.name, rel_path):
                if observer:
                    observer(SelectionEvent(EventKind.PRUNED_DIR, path))
                continue
            try:
                children = _list_dir(path)
            except OSError as e:
                if observer:
                    observer(SelectionEvent(EventKind.UNREADABLE_DIR, path, detail=str(e)))
                continue
            stack.append((rel_path, iter(children)))
        elif kind == "file":
            yield Candidate(
                path=path,
                relative_path=rel_path,
                # `find`-style: a root of "." gives "./sub/b.md", not "sub/b.md".
                match_path=os.path.join(label, *rel_path.parts),
            )
