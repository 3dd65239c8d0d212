"""Limit-controlled delimiter tokenizer.

This module splits a string on the delimiters found by a matcher. The split
limit picks one of three modes: the default mode splits on every match and
drops trailing empty tokens, ``-1`` keeps every token, and a positive ``n``
stops after ``n - 1`` splits and leaves the rest of the input in the last
token.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from tokensplit.errors import InvalidMatcherResult
from tokensplit.matchers import Delimiter, Matcher, as_matcher
from tokensplit.models import Match, SplitLimit, Token, resolve_limit

log = logging.getLogger(__name__)


def _check_match(result: object, cursor: int, length: int) -> Match:
    """Validate a matcher result against the current cursor."""
    if not isinstance(result, Match):
        raise InvalidMatcherResult(cursor, result, "expected a Match or None")
    for offset in (result.start, result.end):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise InvalidMatcherResult(cursor, result, "offsets must be integers")
    if result.start < cursor:
        raise InvalidMatcherResult(cursor, result, "match starts before the cursor")
    if result.end < result.start:
        raise InvalidMatcherResult(cursor, result, "match ends before it starts")
    if result.end > length:
        raise InvalidMatcherResult(cursor, result, "match ends past the input")
    # Zero-width at the cursor is rejected under every limit, bounded included
    if result.start == result.end == cursor:
        raise InvalidMatcherResult(cursor, result, "empty match at the cursor makes no progress")
    return result


def _split(text: str, matcher: Matcher, mode: SplitLimit) -> list[Token]:
    tokens: list[Token] = []
    cursor = 0
    n = len(text)
    max_tokens = mode.max_tokens

    while True:
        # Last token allowed by the limit takes the remainder verbatim
        if max_tokens is not None and len(tokens) == max_tokens - 1:
            log.debug("Split limit %d reached at offset %d", max_tokens, cursor)
            tokens.append(Token(text=text[cursor:], start=cursor, end=n))
            break

        result = matcher.find(text, cursor)
        if result is None:
            tokens.append(Token(text=text[cursor:], start=cursor, end=n))
            break

        match = _check_match(result, cursor, n)
        tokens.append(Token(text=text[cursor : match.start], start=cursor, end=match.start))
        cursor = match.end

    if mode.trims_trailing:
        kept = len(tokens)
        while kept and tokens[kept - 1].is_empty:
            kept -= 1
        if kept < len(tokens):
            log.debug("Trimmed %d trailing empty token(s)", len(tokens) - kept)
            del tokens[kept:]

    return tokens


def tokenize_spans(
    text: str,
    delimiter: Delimiter,
    limit: int | SplitLimit | None = None,
) -> list[Token]:
    """Split text on a delimiter, keeping each token's span.

    Parameters
    ----------
    text : str
        The input string. It is never modified.
    delimiter : Delimiter
        A matcher, or anything ``as_matcher`` accepts.
    limit : int | SplitLimit | None
        ``None`` to split on every match and drop trailing empty tokens,
        ``-1`` to keep every token, or ``n >= 1`` to emit at most ``n``
        tokens.

    Returns
    -------
    list[Token]
        Tokens in input order, with start (inclusive) and end (exclusive)
        offsets.

    Raises
    ------
    InvalidLimit
        If the limit is outside the supported values. Raised before the
        input is scanned.
    InvalidMatcherResult
        If the matcher returns a result that is not a valid forward match.

    Examples
    --------
    >>> [(t.text, t.start, t.end) for t in tokenize_spans("a,,b", ",")]
    [('a', 0, 1), ('', 2, 2), ('b', 3, 4)]
    """
    mode = resolve_limit(limit)
    matcher = as_matcher(delimiter)
    tokens = _split(text, matcher, mode)
    log.debug("Split %d chars into %d token(s) with %r (%r)", len(text), len(tokens), matcher, mode)
    return tokens


def tokenize(
    text: str,
    delimiter: Delimiter,
    limit: int | SplitLimit | None = None,
) -> list[str]:
    """Split text on a delimiter.

    Same as ``tokenize_spans`` but returns only the token strings.

    Examples
    --------
    >>> tokenize("a,b,c,", ",")
    ['a', 'b', 'c']
    >>> tokenize("a,b,c,", ",", -1)
    ['a', 'b', 'c', '']
    >>> tokenize("2013-04-05 14:39", {"-", " "}, 2)
    ['2013', '04-05 14:39']
    """
    return [token.text for token in tokenize_spans(text, delimiter, limit)]


@dataclass(frozen=True)
class Splitter:
    """A delimiter and limit bound once for splitting many strings.

    The delimiter is coerced and the limit validated at construction, so a
    bad configuration fails before any text is scanned.

    Parameters
    ----------
    delimiter : Delimiter
        A matcher, or anything ``as_matcher`` accepts.
    limit : int | SplitLimit | None
        Same values as for ``tokenize``.

    Examples
    --------
    >>> fields = Splitter(",", limit=-1)
    >>> fields.split_lines(["a,b", "c,"])
    [['a', 'b'], ['c', '']]
    """

    delimiter: Delimiter
    limit: int | SplitLimit | None = None
    matcher: Matcher = field(init=False, repr=False, compare=False)
    mode: SplitLimit = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Hashed on its fields, so a set delimiter is stored frozen
        if isinstance(self.delimiter, set):
            object.__setattr__(self, "delimiter", frozenset(self.delimiter))
        object.__setattr__(self, "mode", resolve_limit(self.limit))
        object.__setattr__(self, "matcher", as_matcher(self.delimiter))

    def split_spans(self, text: str) -> list[Token]:
        """Split one string, keeping spans."""
        return _split(text, self.matcher, self.mode)

    def split(self, text: str) -> list[str]:
        """Split one string."""
        return [token.text for token in _split(text, self.matcher, self.mode)]

    def split_lines(self, lines: Iterable[str]) -> list[list[str]]:
        """Split each line independently.

        Line terminators are not stripped.
        """
        return [self.split(line) for line in lines]
