"""Tests for range literal parsing."""

import math
import sys
from collections.abc import Iterable

import pytest

from rangexpr import (
    MalformedRangeLiteral,
    Range,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
)
from rangexpr.literal import LiteralParts, parse


def test_parse_bounded():
    """Test splitting a bounded literal."""
    assert parse("2..5") == LiteralParts(start=2, end=5, inclusive=False)
    assert parse("2..=5") == LiteralParts(start=2, end=5, inclusive=True)


def test_parse_missing_bounds():
    """Test that missing bounds become infinities."""
    assert parse("2..") == LiteralParts(start=2, end=math.inf, inclusive=False)
    assert parse("..5") == LiteralParts(start=-math.inf, end=5, inclusive=False)
    assert parse("..=5") == LiteralParts(start=-math.inf, end=5, inclusive=True)
    assert parse("..") == LiteralParts(start=-math.inf, end=math.inf, inclusive=False)


def test_parse_negative_bounds():
    """Test that bounds may carry a minus sign."""
    assert parse("-3..-1") == LiteralParts(start=-3, end=-1, inclusive=False)


def test_parse_strips_whitespace():
    """Test that surrounding whitespace is ignored."""
    assert parse("  1..3\n") == LiteralParts(start=1, end=3, inclusive=False)


def test_from_pattern_picks_variant():
    """Test that the returned type matches the literal's shape."""
    assert type(Range.from_pattern("2..5")) is Range
    assert type(Range.from_pattern("2..=5")) is RangeInclusive
    assert type(Range.from_pattern("2..")) is RangeFrom
    assert type(Range.from_pattern("..5")) is RangeTo
    assert type(Range.from_pattern("..=5")) is RangeToInclusive
    assert type(Range.from_pattern("..")) is RangeFull


def test_from_pattern_bounds():
    """Test that parsed ranges have the expected bounds."""
    assert Range.from_pattern("2..5") == Range(2, 5)
    assert Range.from_pattern("2..=5") == RangeInclusive(2, 5)
    assert Range.from_pattern("2..=5").get_bounds() == (2, 6)
    assert Range.from_pattern("3..") == RangeFrom(3)
    assert Range.from_pattern("..=4").contains(4)


def test_from_pattern_iteration():
    """Test that only bounded literals are iterable."""
    assert list(Range.from_pattern("1..=3")) == [1, 2, 3]

    with pytest.raises(TypeError):
        iter(Range.from_pattern("1.."))


def test_open_inclusive_literal():
    """Test that `a..=` with no end reads as `a..` and is not iterable."""
    r = Range.from_pattern("5..=")

    assert type(r) is RangeFrom
    assert r == RangeFrom(5)
    assert str(r) == "5.."
    assert not isinstance(r, Iterable)
    assert r.contains(10**9)


@pytest.mark.parametrize(
    "text",
    ["1..2", "1..=2", "0..=0", "3..", "..4", "..=4", "..", "..=", "-5..-2"],
)
def test_str_round_trip(text: str):
    """Test that the canonical form of a parsed literal is the literal."""
    assert str(Range.from_pattern(text)) == text


@pytest.mark.parametrize(
    "text",
    ["", "1", "1.2", "a..b", "1...2", "1..2..3", "1 .. 2", "..==2", "1..2x", "x1..2"],
)
def test_malformed_literal_raises(text: str):
    """Test that text outside the grammar is rejected."""
    with pytest.raises(MalformedRangeLiteral):
        Range.from_pattern(text)


def test_non_string_literal_raises():
    """Test that non-string input is rejected as malformed."""
    with pytest.raises(MalformedRangeLiteral) as exc_info:
        Range.from_pattern(12)  # type: ignore[arg-type]

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.text == 12


def test_non_ascii_digits_are_rejected():
    """Test that only ASCII digits are accepted as bounds."""
    with pytest.raises(MalformedRangeLiteral):
        Range.from_pattern("١..٣")

    with pytest.raises(MalformedRangeLiteral):
        parse("..=٣")


def test_overlong_bound_raises_malformed():
    """Test that a bound too long to convert is reported as malformed."""
    limit = sys.get_int_max_str_digits()
    if limit == 0:
        pytest.skip("int string conversion is unlimited")

    text = "1" * (limit + 1) + ".."
    with pytest.raises(MalformedRangeLiteral):
        Range.from_pattern(text)
