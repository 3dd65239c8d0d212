"""Delimiter-driven string tokenizer with limit-controlled splitting.

This library splits strings on delimiters located by a pluggable matcher
(literal substring, character class, regular expression or any callable)
and supports three split modes selected by the ``limit`` argument.

Examples
--------
>>> from tokensplit import tokenize, WHITESPACE

>>> # Default mode drops trailing empty tokens
>>> tokenize("a,b,c,", ",")
['a', 'b', 'c']

>>> # -1 keeps every token
>>> tokenize("a,b,c,", ",", -1)
['a', 'b', 'c', '']

>>> # A positive limit caps the token count
>>> tokenize("2013-04-05 14:39", {"-", " "}, 2)
['2013', '04-05 14:39']

>>> tokenize("field1    field2 field3   ", WHITESPACE)
['field1', 'field2', 'field3']
"""

from tokensplit.errors import InvalidLimit, InvalidMatcherResult, TokenizerError
from tokensplit.matchers import (
    WHITESPACE,
    CharClassMatcher,
    FunctionMatcher,
    LiteralMatcher,
    Matcher,
    PatternMatcher,
    as_matcher,
)
from tokensplit.models import (
    UNBOUNDED_LIMIT,
    Bounded,
    Default,
    Match,
    SplitLimit,
    Token,
    Unbounded,
    resolve_limit,
)
from tokensplit.tokenizer import Splitter, tokenize, tokenize_spans

__version__ = "0.1.0"

__all__ = [
    "UNBOUNDED_LIMIT",
    "WHITESPACE",
    "Bounded",
    "CharClassMatcher",
    "Default",
    "FunctionMatcher",
    "InvalidLimit",
    "InvalidMatcherResult",
    "LiteralMatcher",
    "Match",
    "Matcher",
    "PatternMatcher",
    "SplitLimit",
    "Splitter",
    "Token",
    "TokenizerError",
    "Unbounded",
    "as_matcher",
    "resolve_limit",
    "tokenize",
    "tokenize_spans",
]
