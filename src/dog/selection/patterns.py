"""
Shell-style glob matching against full path strings.

Supported syntax: `*` (any run of characters, including `/`), `?` (any single
character), `[...]` character classes with ranges and `!` or `^` negation, and
`\\` to escape the next character. Matching is case-sensitive and always covers
the whole string. Patterns never fail to compile: an unterminated `[` is just a
literal bracket.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cache


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Star:
    pass


@dataclass(frozen=True)
class AnyChar:
    pass


@dataclass(frozen=True)
class CharClass:
    members: tuple[str, ...]
    """Single characters, or two-character `lo + hi` strings for ranges."""
    negated: bool = False


Token = Literal | Star | AnyChar | CharClass


def _parse_class(pattern: str, start: int) -> tuple[CharClass, int] | None:
    """
    Parse a character class whose `[` is at `start - 1`. Returns the class and the
    index just past its closing `]`, or `None` if the class is never closed.
    """
    i = start
    n = len(pattern)
    negated = False
    if i < n and pattern[i] in "!^":
        negated = True
        i += 1
    members: list[str] = []
    first = True
    while i < n:
        c = pattern[i]
        if c == "]" and not first:
            return CharClass(tuple(members), negated), i + 1
        first = False
        if c == "\\" and i + 1 < n:
            i += 1
            c = pattern[i]
        if i + 2 < n and pattern[i + 1] == "-" and pattern[i + 2] != "]":
            hi = pattern[i + 2]
            if hi == "\\" and i + 3 < n:
                hi = pattern[i + 3]
                i += 1
            # Reversed ranges match nothing.
            if c <= hi:
                members.append(c + hi)
            i += 3
            continue
        members.append(c)
        i += 1
    return None


def tokenize(pattern: str) -> list[Token]:
    """Split a glob into literal runs, wildcards and character classes."""
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(Literal("".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            flush()
            # Consecutive stars are equivalent to one.
            if not tokens or not isinstance(tokens[-1], Star):
                tokens.append(Star())
            i += 1
        elif c == "?":
            flush()
            tokens.append(AnyChar())
            i += 1
        elif c == "[":
            parsed = _parse_class(pattern, i + 1)
            if parsed is None:
                literal.append(c)
                i += 1
            else:
                flush()
                tokens.append(parsed[0])
                i = parsed[1]
        elif c == "\\" and i + 1 < n:
            literal.append(pattern[i + 1])
            i += 2
        else:
            literal.append(c)
            i += 1
    flush()
    return tokens


def _class_regex(token: CharClass) -> str:
    parts = []
    for member in token.members:
        if len(member) == 2:
            parts.append(f"{re.escape(member[0])}-{re.escape(member[1])}")
        else:
            parts.append(re.escape(member))
    if not parts:
        return "." if token.negated else "(?!)"
    body = "".join(parts)
    return f"[^{body}]" if token.negated else f"[{body}]"


def to_regex(tokens: Iterable[Token]) -> str:
    out: list[str] = []
    for token in tokens:
        if isinstance(token, Literal):
            out.append(re.escape(token.text))
        elif isinstance(token, Star):
            out.append(".*")
        elif isinstance(token, AnyChar):
            out.append(".")
        else:
            out.append(_class_regex(token))
    return "".join(out)


@dataclass(frozen=True)
class GlobPattern:
    pattern: str
    regex: re.Pattern[str]

    def matches(self, candidate: str) -> bool:
        return self.regex.fullmatch(candidate) is not None


@cache
def compile_pattern(pattern: str) -> GlobPattern:
    return GlobPattern(pattern, re.compile(to_regex(tokenize(pattern)), re.DOTALL))


def matches(pattern: str, candidate: str) -> bool:
    """True if the glob `pattern` matches the whole of `candidate`."""
    return compile_pattern(pattern).matches(candidate)


def compile_patterns(patterns: Iterable[str]) -> Callable[[str], bool]:
    """A predicate that is true when any of `patterns` matches."""
    compiled = [compile_pattern(p) for p in patterns]
    return lambda candidate: any(p.matches(candidate) for p in compiled)
