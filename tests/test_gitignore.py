"""Tests for optional .gitignore handling."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from dog.selection.gitignore import (
    GitignoreChain,
    _read_ignore_file,  # pyright: ignore[reportPrivateUsage]
    load_gitignore,
)


def test_load_gitignore_missing(tmp_path: Path):
    assert load_gitignore(tmp_path) is None


def test_load_gitignore_only_comments(tmp_path: Path):
    (tmp_path / ".gitignore").write_text("# nothing\n\n")
    assert load_gitignore(tmp_path) is None


def test_read_ignore_file_non_utf8(tmp_path: Path):
    ignore_file = tmp_path / ".gitignore"
    ignore_file.write_bytes(b"\x80\x81\x82\xff\xfe")
    assert _read_ignore_file(ignore_file) is None


def test_read_ignore_file_unreadable(tmp_path: Path):
    if os.getuid() == 0:
        # Root can read any file regardless of permissions; test the OSError
        # path via a missing file instead.
        assert _read_ignore_file(tmp_path / "nonexistent_ignore") is None
        return
    ignore_file = tmp_path / ".gitignore"
    ignore_file.write_text("*.log\n")
    ignore_file.chmod(0o000)
    try:
        assert _read_ignore_file(ignore_file) is None
    finally:
        ignore_file.chmod(stat.S_IRUSR | stat.S_IWUSR)


def test_chain_root_patterns(tmp_path: Path):
    (tmp_path / ".gitignore").write_text("*.log\nbuild/\n")
    chain = GitignoreChain(tmp_path)
    assert chain.is_ignored(Path("debug.log"))
    assert chain.is_ignored(Path("sub/deep/debug.log"))
    assert chain.is_ignored(Path("build"), is_dir=True)
    assert not chain.is_ignored(Path("build"))
    assert not chain.is_ignored(Path("main.c"))


def test_chain_nested_gitignore_applies_to_subtree(tmp_path: Path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / ".gitignore").write_text("generated/\n")
    chain = GitignoreChain(tmp_path)
    assert chain.is_ignored(Path("sub/generated"), is_dir=True)
    assert not chain.is_ignored(Path("generated"), is_dir=True)


def test_chain_combines_parent_rules(tmp_path: Path):
    (tmp_path / ".gitignore").write_text("*.log\n")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / ".gitignore").write_text("*.tmp\n")
    chain = GitignoreChain(tmp_path)
    assert chain.is_ignored(Path("sub/a.log"))
    assert chain.is_ignored(Path("sub/a.tmp"))
    assert not chain.is_ignored(Path("a.tmp"))


def test_chain_anchored_pattern_is_relative_to_its_directory(tmp_path: Path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / ".gitignore").write_text("/only_here.txt\n")
    chain = GitignoreChain(tmp_path)
    assert chain.is_ignored(Path("sub/only_here.txt"))
    assert not chain.is_ignored(Path("sub/inner/only_here.txt"))
