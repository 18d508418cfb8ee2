"""
Delivery of rendered text: clipboard, a timestamped scratch file, or stdout.

These only deliver; the selection is always computed before any of them runs.
"""

from __future__ import annotations

import socket
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from typing import TextIO

import pyperclip
from strif import atomic_output_file

from dog.selection.errors import OutputError
from dog.selection import probe


def copy_to_clipboard(text: str) -> None:
    """Copy `text` to the system clipboard, or raise `OutputError` if there is none."""
    try:
        # The clipboard takes text, so bytes that aren't valid text become U+FFFD.
        pyperclip.copy(probe.encode_text(text).decode(probe.text_encoding(), errors="replace"))
    except pyperclip.PyperclipException as e:
        raise OutputError(f"No suitable clipboard mechanism found: {e}") from e


def tmp_output_name(now: datetime | None = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"dog_output_{stamp}.txt"


def write_tmp_file(text: str, now: datetime | None = None, tmp_root: Path | None = None) -> Path:
    """Write `text` to a new scratch directory under a timestamped name and return its path."""
    try:
        tmp_dir = Path(tempfile.mkdtemp(prefix="dog", dir=tmp_root))
        out_path = tmp_dir / tmp_output_name(now)
        with atomic_output_file(out_path, make_parents=True) as temp_path:
            Path(temp_path).write_bytes(probe.encode_text(text))
    except OSError as e:
        raise OutputError(f"Could not write temporary output file: {e}") from e
    return out_path


def retrieval_hints(path: Path) -> str:
    """How to pull a saved dump from this machine over ssh."""
    host = socket.gethostname()
    return (
        "To get the output from a remote machine over ssh please run:\n"
        f"ssh {host} cat {path} | pbcopy   # from MacOS\n"
        f"ssh {host} cat {path} | clip     # from Windows\n"
    )


def write_stdout(text: str, stream: TextIO | None = None) -> None:
    """
    Write to a text stream. Streams with a byte buffer get the encoded bytes
    directly, so file content passes through unchanged.
    """
    out = stream or sys.stdout
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(text)
        out.flush()
        return
    out.flush()
    buffer.write(probe.encode_text(text))
    buffer.flush()
