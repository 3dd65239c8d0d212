"""Exceptions raised by the tokenizer.

Every error is a contract violation reported synchronously to the caller.
There is nothing transient to retry: a bad limit or a broken matcher will
fail the same way on every call.
"""

from __future__ import annotations

from typing import Any


class TokenizerError(Exception):
    """Base class for tokenizer contract violations."""


class InvalidLimit(TokenizerError, ValueError):
    """A split limit outside ``None``, ``-1`` or a positive integer.

    Parameters
    ----------
    limit : Any
        The rejected value.
    """

    def __init__(self, limit: Any) -> None:
        self.limit = limit
        msg = f"Invalid split limit: {limit!r} (expected None, -1 or an integer >= 1)"
        super().__init__(msg)


class InvalidMatcherResult(TokenizerError, RuntimeError):
    """A matcher returned a match that breaks forward progress.

    Parameters
    ----------
    cursor : int
        Offset the matcher was queried from.
    result : Any
        The offending value returned by the matcher.
    reason : str
        Which part of the matcher contract was violated.
    """

    def __init__(self, cursor: int, result: Any, reason: str) -> None:
        self.cursor = cursor
        self.result = result
        msg = f"Matcher returned {result!r} when searching from {cursor}: {reason}"
        super().__init__(msg)
