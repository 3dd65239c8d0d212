"""Tests for delimiter matchers."""

import re

import pytest

from tokensplit.matchers import (
    WHITESPACE,
    CharClassMatcher,
    FunctionMatcher,
    LiteralMatcher,
    Matcher,
    PatternMatcher,
    as_matcher,
)
from tokensplit.models import Match


class TestLiteralMatcher:
    """Fixed substring delimiters."""

    def test_single_char(self) -> None:
        """Test a one-character delimiter."""
        assert LiteralMatcher(",").find("a,b", 0) == Match(1, 2)

    def test_multi_char(self) -> None:
        """Test a multi-character delimiter."""
        assert LiteralMatcher("::").find("a::b", 0) == Match(1, 3)

    def test_search_from_offset(self) -> None:
        """Matches before the offset are ignored."""
        assert LiteralMatcher(",").find("a,b,c", 2) == Match(3, 4)

    def test_not_found(self) -> None:
        """No occurrence returns None."""
        assert LiteralMatcher(",").find("abc", 0) is None

    def test_at_end(self) -> None:
        """Searching from the end returns None."""
        assert LiteralMatcher(",").find("a,", 2) is None

    def test_empty_delimiter(self) -> None:
        """An empty literal is rejected."""
        with pytest.raises(ValueError, match="non-empty"):
            LiteralMatcher("")


class TestCharClassMatcher:
    """Single-character class delimiters."""

    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            (0, Match(4, 5)),
            (5, Match(7, 8)),
            (8, Match(10, 11)),
            (11, None),
        ],
    )
    def test_date_separators(self, start: int, expected: Match | None) -> None:
        """Test finding dash and space separators."""
        matcher = CharClassMatcher({"-", " "})
        assert matcher.find("2013-04-05 14:39", start) == expected

    def test_string_of_chars(self) -> None:
        """A string is treated as its set of characters."""
        assert CharClassMatcher("-:").find("14:39", 0) == Match(2, 3)

    def test_non_greedy_matches_one(self) -> None:
        """Without greedy each character is its own delimiter."""
        assert CharClassMatcher(" ").find("a   b", 0) == Match(1, 2)

    def test_greedy_matches_run(self) -> None:
        """With greedy a run is one delimiter."""
        assert CharClassMatcher(" \t", greedy=True).find("a \t b", 0) == Match(1, 4)

    def test_empty_class(self) -> None:
        """An empty class is rejected."""
        with pytest.raises(ValueError, match="at least one"):
            CharClassMatcher(set())

    def test_multi_char_member(self) -> None:
        """Members must be single characters."""
        with pytest.raises(ValueError, match="single characters"):
            CharClassMatcher({"-", "::"})


class TestPatternMatcher:
    """Regular expression delimiters."""

    def test_whitespace_run(self) -> None:
        """Test the module whitespace matcher."""
        assert WHITESPACE.find("field1    field2", 0) == Match(6, 10)

    def test_compiled_pattern(self) -> None:
        """A compiled pattern is used as-is."""
        pattern = re.compile(r"\s*;\s*")
        assert PatternMatcher(pattern).pattern is pattern

    def test_flags(self) -> None:
        """Flags apply to string patterns."""
        matcher = PatternMatcher("and", re.IGNORECASE)
        assert matcher.find("salt AND pepper", 0) == Match(5, 8)

    def test_empty_match_at_start_skipped(self) -> None:
        """An empty match at the offset moves one character forward."""
        assert PatternMatcher("x*").find("abc", 0) == Match(1, 1)

    def test_non_empty_match_at_start(self) -> None:
        """A non-empty match at the offset is returned."""
        assert PatternMatcher("x*").find("xxa", 0) == Match(0, 2)

    def test_empty_match_at_end(self) -> None:
        """No further match once the offset reaches the end."""
        assert PatternMatcher("x*").find("abc", 3) is None


class TestFunctionMatcher:
    """Callable adapters."""

    def test_tuple_result(self) -> None:
        """A (start, end) pair becomes a Match."""
        matcher = FunctionMatcher(lambda text, start: (1, 2))
        assert matcher.find("a,b", 0) == Match(1, 2)

    def test_match_result(self) -> None:
        """A Match passes through."""
        matcher = FunctionMatcher(lambda text, start: Match(1, 2))
        assert matcher.find("a,b", 0) == Match(1, 2)

    def test_none_result(self) -> None:
        """None passes through."""
        matcher = FunctionMatcher(lambda text, start: None)
        assert matcher.find("abc", 0) is None


class TestAsMatcher:
    """Delimiter coercion."""

    def test_str(self) -> None:
        """Strings become literal matchers."""
        matcher = as_matcher(",")
        assert isinstance(matcher, LiteralMatcher)
        assert matcher.delimiter == ","

    def test_pattern(self) -> None:
        """Compiled patterns become pattern matchers."""
        assert isinstance(as_matcher(re.compile(",")), PatternMatcher)

    @pytest.mark.parametrize("chars", [{"-", " "}, frozenset("-:")])
    def test_sets(self, chars: set[str]) -> None:
        """Sets become character class matchers."""
        assert isinstance(as_matcher(chars), CharClassMatcher)

    def test_matcher_passthrough(self) -> None:
        """Matchers are returned unchanged."""
        assert as_matcher(WHITESPACE) is WHITESPACE

    def test_custom_matcher(self) -> None:
        """Any object with find() satisfies the protocol."""

        class Pipe:
            def find(self, text: str, start: int) -> Match | None:
                index = text.find("|", start)
                return None if index < 0 else Match(index, index + 1)

        pipe = Pipe()
        assert isinstance(pipe, Matcher)
        assert as_matcher(pipe) is pipe

    def test_callable(self) -> None:
        """Plain callables are wrapped."""
        assert isinstance(as_matcher(lambda text, start: None), FunctionMatcher)

    def test_unsupported(self) -> None:
        """Other types are rejected."""
        with pytest.raises(TypeError, match="Unsupported delimiter type: int"):
            as_matcher(3)  # type: ignore[arg-type]
