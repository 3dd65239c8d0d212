"""Data models for delimiter tokenization.

This module defines the match and token spans produced while splitting,
and the three split-limit modes that decide how many tokens are emitted
and whether trailing empty tokens are trimmed.
"""

from __future__ import annotations

from dataclasses import dataclass

from tokensplit.errors import InvalidLimit

# Caller-facing value selecting the keep-everything mode
UNBOUNDED_LIMIT = -1


@dataclass(frozen=True)
class Match:
    """Span of one delimiter occurrence.

    Parameters
    ----------
    start : int
        Inclusive start offset of the delimiter.
    end : int
        Exclusive end offset of the delimiter.

    Examples
    --------
    >>> Match(start=1, end=2).length
    1
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of characters covered by the delimiter."""
        return self.end - self.start


@dataclass(frozen=True)
class Token:
    """A token with its span in the input.

    Parameters
    ----------
    text : str
        The token text, equal to ``input[start:end]``. May be empty.
    start : int
        Inclusive start offset (0-indexed).
    end : int
        Exclusive end offset.

    Examples
    --------
    >>> token = Token(text="b", start=2, end=3)
    >>> token.start, token.end
    (2, 3)
    """

    text: str
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        """Whether the token has no text."""
        return self.start == self.end


@dataclass(frozen=True)
class Default:
    """Split on every match, then drop trailing empty tokens."""

    @property
    def max_tokens(self) -> int | None:
        return None

    @property
    def trims_trailing(self) -> bool:
        return True


@dataclass(frozen=True)
class Unbounded:
    """Split on every match and keep every token, empty or not."""

    @property
    def max_tokens(self) -> int | None:
        return None

    @property
    def trims_trailing(self) -> bool:
        return False


@dataclass(frozen=True)
class Bounded:
    """Emit at most ``n`` tokens; the last one absorbs the rest of the input.

    Parameters
    ----------
    n : int
        Maximum number of tokens, at least 1.

    Raises
    ------
    InvalidLimit
        If ``n`` is not an integer >= 1.
    """

    n: int

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 1:
            raise InvalidLimit(self.n)

    @property
    def max_tokens(self) -> int | None:
        return self.n

    @property
    def trims_trailing(self) -> bool:
        return False


SplitLimit = Default | Unbounded | Bounded


def resolve_limit(limit: int | SplitLimit | None) -> SplitLimit:
    """Convert a caller-supplied limit into a split mode.

    Parameters
    ----------
    limit : int | SplitLimit | None
        ``None`` for the default mode, ``-1`` to keep all empty tokens,
        a positive integer to bound the token count, or a mode instance.

    Returns
    -------
    SplitLimit
        The matching ``Default``, ``Unbounded`` or ``Bounded`` mode.

    Raises
    ------
    InvalidLimit
        For ``0``, negatives other than ``-1``, booleans and non-integers.

    Examples
    --------
    >>> resolve_limit(None)
    Default()
    >>> resolve_limit(-1)
    Unbounded()
    >>> resolve_limit(3)
    Bounded(n=3)
    """
    if limit is None:
        return Default()
    if isinstance(limit, (Default, Unbounded, Bounded)):
        return limit
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidLimit(limit)
    if limit == UNBOUNDED_LIMIT:
        return Unbounded()
    return Bounded(limit)
