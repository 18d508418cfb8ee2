"""
Renderer: concatenates admitted files into one delimited block of text.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from dog.selection import probe
from dog.selection.types import Candidate, EventKind, Observer, RenderedFile, SelectionEvent

RULE = "-" * 41


def file_header(path: Path) -> str:
    return f"{RULE}\n  START OF FILE: {path}\n{RULE}\n"


def file_footer(path: Path) -> str:
    return f"{RULE}\n  END OF FILE: {path}\n{RULE}\n"


def word_count(text: str) -> int:
    """Number of whitespace-delimited tokens, like `wc -w`."""
    return len(text.split())


@dataclass
class RenderOutput:
    text: str
    word_count: int
    files: list[RenderedFile]


def render_file(path: Path, observer: Observer | None = None) -> RenderedFile:
    """
    Render one file. A file that can't be read is rendered with empty content and
    reported, never raised, so one bad file can't sink the whole dump.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        if observer:
            observer(SelectionEvent(EventKind.RENDER_FAILED, path, detail=str(e)))
        return RenderedFile(path, file_header(path), "", file_footer(path), read_failed=True)
    # Trailing newlines are dropped so the footer follows the last line directly.
    content = probe.decode_text(raw).rstrip("\n")
    return RenderedFile(path, file_header(path), content, file_footer(path))


def render(candidates: Iterable[Candidate | Path], observer: Observer | None = None) -> RenderOutput:
    """
    Render files in the order given. Nothing is reordered or deduplicated: a path
    listed twice is rendered twice.
    """
    rendered: list[RenderedFile] = []
    for item in candidates:
        path = item.path if isinstance(item, Candidate) else item
        rendered.append(render_file(path, observer))
    text = "".join(f.block for f in rendered)
    return RenderOutput(text=text, word_count=word_count(text), files=rendered)
