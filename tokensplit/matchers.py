"""Delimiter matchers.

A matcher locates the next delimiter occurrence in a string from a given
offset. The tokenizer only ever talks to the ``Matcher`` protocol, so a
literal substring, a character class and a regular expression are
interchangeable.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

from tokensplit.models import Match

MatchFunc = Callable[[str, int], Match | tuple[int, int] | None]


@runtime_checkable
class Matcher(Protocol):
    """Finds the next delimiter at or after ``start``.

    Implementations return a ``Match`` with
    ``start <= match.start <= match.end <= len(text)``, or ``None`` when
    there is no further delimiter.
    """

    def find(self, text: str, start: int) -> Match | None: ...


class LiteralMatcher:
    """Match a fixed delimiter substring.

    Parameters
    ----------
    delimiter : str
        The non-empty substring to split on.

    Examples
    --------
    >>> LiteralMatcher(",").find("a,b", 0)
    Match(start=1, end=2)
    """

    def __init__(self, delimiter: str) -> None:
        if not delimiter:
            msg = "Literal delimiter must be a non-empty string"
            raise ValueError(msg)
        self.delimiter = delimiter

    def find(self, text: str, start: int) -> Match | None:
        index = text.find(self.delimiter, start)
        if index < 0:
            return None
        return Match(index, index + len(self.delimiter))

    def __repr__(self) -> str:
        return f"LiteralMatcher({self.delimiter!r})"


class CharClassMatcher:
    """Match any single character from a set.

    Parameters
    ----------
    chars : Iterable[str]
        The delimiter characters, e.g. ``{"-", " "}`` or ``"-: "``.
    greedy : bool
        If True, a run of consecutive class characters is one delimiter.

    Examples
    --------
    >>> CharClassMatcher({"-", " "}).find("2013-04", 0)
    Match(start=4, end=5)
    """

    def __init__(self, chars: Iterable[str], *, greedy: bool = False) -> None:
        charset = frozenset(chars)
        if not charset:
            msg = "Character class must contain at least one character"
            raise ValueError(msg)
        bad = sorted(c for c in charset if len(c) != 1)
        if bad:
            msg = f"Character class members must be single characters, got: {bad}"
            raise ValueError(msg)
        self.chars = charset
        self.greedy = greedy

    def find(self, text: str, start: int) -> Match | None:
        i = start
        n = len(text)
        while i < n and text[i] not in self.chars:
            i += 1
        if i == n:
            return None

        end = i + 1
        if self.greedy:
            while end < n and text[end] in self.chars:
                end += 1
        return Match(i, end)

    def __repr__(self) -> str:
        return f"CharClassMatcher({''.join(sorted(self.chars))!r}, greedy={self.greedy})"


class PatternMatcher:
    """Match a regular expression.

    An empty match sitting exactly at the search offset is skipped and the
    search resumes one character later, so a pattern that can match the
    empty string still moves forward.

    Parameters
    ----------
    pattern : str | re.Pattern[str]
        The delimiter pattern.
    flags : int
        ``re`` flags, only used when ``pattern`` is a string.

    Examples
    --------
    >>> PatternMatcher(r"\\s+").find("a   b", 0)
    Match(start=1, end=4)
    """

    def __init__(self, pattern: str | re.Pattern[str], flags: int = 0) -> None:
        if isinstance(pattern, re.Pattern):
            self.pattern = pattern
        else:
            self.pattern = re.compile(pattern, flags)

    def find(self, text: str, start: int) -> Match | None:
        m = self.pattern.search(text, start)
        if m is not None and m.start() == m.end() == start:
            if start >= len(text):
                return None
            m = self.pattern.search(text, start + 1)
        if m is None:
            return None
        return Match(m.start(), m.end())

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern.pattern!r})"


class FunctionMatcher:
    """Adapt a plain callable into a matcher.

    Parameters
    ----------
    func : MatchFunc
        Called as ``func(text, start)``; returns a ``Match``, a
        ``(start, end)`` pair, or None.
    """

    def __init__(self, func: MatchFunc) -> None:
        self.func = func

    def find(self, text: str, start: int) -> Match | None:
        result = self.func(text, start)
        if isinstance(result, tuple) and len(result) == 2:
            return Match(*result)
        return result  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"FunctionMatcher({self.func!r})"


# Runs of whitespace count as a single delimiter
WHITESPACE = PatternMatcher(r"\s+")

Delimiter = Matcher | str | re.Pattern[str] | set[str] | frozenset[str] | MatchFunc


def as_matcher(delimiter: Delimiter) -> Matcher:
    """Coerce a delimiter specification into a matcher.

    Parameters
    ----------
    delimiter : Delimiter
        A ``Matcher``; a ``str`` (literal delimiter); a compiled
        ``re.Pattern``; a set of single characters; or a callable accepted
        by ``FunctionMatcher``.

    Returns
    -------
    Matcher
        The matcher to tokenize with.

    Raises
    ------
    TypeError
        If the delimiter is none of the supported kinds.

    Examples
    --------
    >>> as_matcher(",")
    LiteralMatcher(',')
    >>> as_matcher({"-", " "})
    CharClassMatcher(' -', greedy=False)
    """
    # str has a find() method of its own, so it must be checked first
    if isinstance(delimiter, str):
        return LiteralMatcher(delimiter)
    if isinstance(delimiter, re.Pattern):
        return PatternMatcher(delimiter)
    if isinstance(delimiter, (set, frozenset)):
        return CharClassMatcher(delimiter)
    if isinstance(delimiter, Matcher):
        return delimiter
    if callable(delimiter):
        return FunctionMatcher(delimiter)
    msg = f"Unsupported delimiter type: {type(delimiter).__name__}"
    raise TypeError(msg)
