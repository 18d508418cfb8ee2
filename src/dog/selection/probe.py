"""
Best-effort text/binary classification of files.

A file counts as text when a bounded prefix is non-empty, has no NUL byte and
decodes cleanly under the locale's preferred encoding. Anything ambiguous is
classified as not text, so the dump stays clean at the cost of completeness.
"""

from __future__ import annotations

import codecs
import locale
from pathlib import Path

from dog.selection.defaults import PROBE_BYTES


def text_encoding() -> str:
    """The encoding files are probed and rendered with."""
    return locale.getpreferredencoding(False) or "utf-8"


def decode_text(raw: bytes) -> str:
    """
    Decode file content without losing bytes: anything invalid survives as a lone
    surrogate and `encode_text` turns it back into the original byte.
    """
    return raw.decode(text_encoding(), errors="surrogateescape")


def encode_text(text: str) -> bytes:
    return text.encode(text_encoding(), errors="surrogateescape")


def looks_textual(prefix: bytes, complete: bool, encoding: str | None = None) -> bool:
    """
    Classify a file prefix. `complete` says whether `prefix` is the whole file;
    if not, a multi-byte sequence cut off at the end is not counted as an error.
    """
    if not prefix or b"\0" in prefix:
        return False
    try:
        decoder = codecs.getincrementaldecoder(encoding or text_encoding())()
        decoder.decode(prefix, final=complete)
    except (UnicodeDecodeError, LookupError):
        return False
    return True


def is_textual(path: Path, probe_bytes: int = PROBE_BYTES) -> bool:
    try:
        with path.open("rb") as f:
            prefix = f.read(probe_bytes + 1)
    except OSError:
        return False
    complete = len(prefix) <= probe_bytes
    return looks_textual(prefix[:probe_bytes], complete)
