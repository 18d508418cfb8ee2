"""Packaging entrypoint tests."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


def _pyproject() -> dict[str, object]:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    return tomllib.loads(pyproject.read_text(encoding="utf-8"))


def test_dog_entrypoint() -> None:
    """The dog script should point to the CLI entrypoint."""
    scripts = _pyproject()["project"]["scripts"]  # pyright: ignore
    assert scripts["dog"] == "dog.cli:main"


def test_runtime_dependencies_declared() -> None:
    deps = " ".join(_pyproject()["project"]["dependencies"])  # pyright: ignore
    for name in ["pathspec", "pyperclip", "strif"]:
        assert name in deps
