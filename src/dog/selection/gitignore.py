"""Optional `.gitignore` support using pathspec."""

from __future__ import annotations

from pathlib import Path

import pathspec


def _read_ignore_file(path: Path) -> list[str] | None:
    """Read non-blank, non-comment lines, or `None` if missing or unreadable."""
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None
    return [line for line in lines if line.strip() and not line.strip().startswith("#")]


def load_gitignore(directory: Path) -> pathspec.PathSpec | None:
    """
    Read `.gitignore` in the given directory and return a compiled `PathSpec`,
    or `None` if the file doesn't exist or is empty.
    """
    lines = _read_ignore_file(directory / ".gitignore")
    if not lines:
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


class GitignoreChain:
    """
    The `.gitignore` files in effect for each directory of one walk, from the walk
    root down. Each spec is matched against paths relative to its own directory.
    Built per run and discarded with it.
    """

    def __init__(self, root: Path) -> None:
        self._root = root
        self._specs: dict[Path, pathspec.PathSpec | None] = {}

    def _spec(self, rel_dir: Path) -> pathspec.PathSpec | None:
        if rel_dir not in self._specs:
            self._specs[rel_dir] = load_gitignore(self._root / rel_dir)
        return self._specs[rel_dir]

    def is_ignored(self, relative_path: Path, is_dir: bool = False) -> bool:
        """True if any `.gitignore` between the root and `relative_path` ignores it."""
        parents = [Path(*relative_path.parts[:i]) for i in range(len(relative_path.parts))]
        for rel_dir in parents:
            spec = self._spec(rel_dir)
            if spec is None:
                continue
            rel = relative_path.relative_to(rel_dir).as_posix()
            if is_dir:
                rel += "/"
            if spec.match_file(rel):
                return True
        return False
