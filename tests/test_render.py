"""Tests for rendering admitted files."""

from __future__ import annotations

from pathlib import Path

import pytest

from dog.selection import probe
from dog.selection.render import RULE, file_footer, file_header, render, word_count
from dog.selection.types import Candidate, EventKind, SelectionEvent


@pytest.fixture(autouse=True)
def utf8_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(probe, "text_encoding", lambda: "utf-8")


def test_render_block_format(tmp_path: Path):
    f = tmp_path / "a.txt"
    f.write_text("line1\nline2\n")
    out = render([f])
    assert out.text == (
        f"{RULE}\n"
        f"  START OF FILE: {f}\n"
        f"{RULE}\n"
        "line1\n"
        "line2\n"
        f"{RULE}\n"
        f"  END OF FILE: {f}\n"
        f"{RULE}\n"
    )
    assert RULE == "-----------------------------------------"


def test_render_word_count_covers_whole_text(tmp_path: Path):
    f = tmp_path / "a.txt"
    f.write_text("line1\nline2\n")
    out = render([f])
    # Two rules per delimiter, "START OF FILE: <path>" and "END OF FILE: <path>".
    assert out.word_count == len(out.text.split())
    assert out.word_count == 14


def test_render_preserves_order_and_duplicates(tmp_path: Path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("alpha\n")
    b.write_text("beta\n")
    out = render([b, a, b])
    starts = [line for line in out.text.splitlines() if "START OF FILE" in line]
    assert starts == [f"  START OF FILE: {b}", f"  START OF FILE: {a}", f"  START OF FILE: {b}"]
    assert [r.path for r in out.files] == [b, a, b]


def test_render_accepts_candidates(tmp_path: Path):
    f = tmp_path / "a.txt"
    f.write_text("alpha\n")
    out = render([Candidate(path=f, relative_path=Path("a.txt"))])
    assert "alpha" in out.text


def test_render_missing_file_is_empty_and_reported(tmp_path: Path):
    ok = tmp_path / "ok.txt"
    ok.write_text("fine\n")
    gone = tmp_path / "gone.txt"
    events: list[SelectionEvent] = []

    out = render([gone, ok], events.append)

    assert out.files[0].read_failed
    assert out.files[0].content == ""
    assert not out.files[1].read_failed
    assert out.text == file_header(gone) + "\n" + file_footer(gone) + out.files[1].block
    assert "fine" in out.text
    assert [e.kind for e in events] == [EventKind.RENDER_FAILED]
    assert events[0].path == gone


def test_render_empty_list():
    out = render([])
    assert out.text == ""
    assert out.word_count == 0


def test_render_keeps_undecodable_bytes(tmp_path: Path):
    f = tmp_path / "odd.txt"
    f.write_bytes(b"ok \xff done\n")
    out = render([f])
    assert "ok \udcff done" in out.text
    assert probe.encode_text(out.files[0].content) == b"ok \xff done"


def test_word_count():
    assert word_count("") == 0
    assert word_count("  one\ttwo\n\nthree  ") == 3
