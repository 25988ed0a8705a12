"""Tests for the leftpad padding functions."""
import pytest

from leftpad import leftpad, leftpad_with, pad_lines
from leftpad.core import padding
from leftpad.config import MAX_PAD_WIDTH
from leftpad.core.exceptions import (InvalidPadCharError, InvalidWidthError,
                                     LeftPadError)

SAMPLES = ["", "a", "1", "abc", "hello", "blubb", "héllo wörld", "日本語", "🦀🦀"]


@pytest.mark.parametrize("s, width, expected", [
    ("1", 5, "    1"),
    ("hello", 3, "hello"),
    ("", 3, "   "),
    ("abc", 0, "abc"),
    ("blubb", 7, "  blubb"),
    ("blubb", 5, "blubb"),
    ("blubb", 3, "blubb"),
])
def test_leftpad_concrete_cases(s, width, expected):
    assert leftpad(s, width) == expected


@pytest.mark.parametrize("s, width, pad_char, expected", [
    ("1", 5, "0", "00001"),
    ("blubb", 7, ".", "..blubb"),
    ("blubb", 7, " ", "  blubb"),
    ("", 2, "🦀", "🦀🦀"),
    ("x", 3, "\t", "\t\tx"),
])
def test_leftpad_with_concrete_cases(s, width, pad_char, expected):
    assert leftpad_with(s, width, pad_char) == expected


@pytest.mark.parametrize("s", SAMPLES)
def test_short_width_returns_input_object(s):
    for width in range(len(s) + 1):
        assert leftpad(s, width) is s


@pytest.mark.parametrize("s", SAMPLES)
@pytest.mark.parametrize("extra", [1, 2, 17])
def test_padded_result_has_width_and_fill_prefix(s, extra):
    width = len(s) + extra
    result = leftpad_with(s, width, "*")

    assert len(result) == width
    assert result.endswith(s)
    assert result[:extra] == "*" * extra


@pytest.mark.parametrize("s", SAMPLES)
@pytest.mark.parametrize("width", [0, 1, 4, 12])
def test_leftpad_matches_space_fill(s, width):
    assert leftpad(s, width) == leftpad_with(s, width, " ")


@pytest.mark.parametrize("s", SAMPLES)
@pytest.mark.parametrize("width", [0, 3, 9])
def test_padding_is_idempotent(s, width):
    once = leftpad(s, width)
    assert leftpad(once, width) == once


def test_width_counts_code_points_not_bytes():
    result = leftpad("é", 3)

    assert result == "  é"
    assert len(result) == 3
    assert len(result.encode("utf-8")) == 4


@pytest.mark.parametrize("width", [-1, -100])
def test_negative_width_is_rejected(width):
    with pytest.raises(InvalidWidthError) as exc_info:
        leftpad("abc", width)

    assert exc_info.value.width == width
    assert f"(Width: {width})" in str(exc_info.value)


@pytest.mark.parametrize("width", [1.5, "5", None, True])
def test_non_integer_width_is_rejected(width):
    with pytest.raises(InvalidWidthError):
        leftpad("abc", width)


def test_width_above_limit_is_rejected():
    with pytest.raises(InvalidWidthError):
        leftpad("abc", MAX_PAD_WIDTH + 1)


def test_width_limit_only_applies_when_padding(monkeypatch):
    monkeypatch.setattr(padding, "MAX_PAD_WIDTH", 5)
    long_text = "abcdefgh"

    assert leftpad(long_text, 6) is long_text
    with pytest.raises(InvalidWidthError):
        leftpad("ab", 6)


def test_width_errors_are_value_errors():
    with pytest.raises(ValueError):
        leftpad("abc", -1)


@pytest.mark.parametrize("pad_char", ["", "ab", "00", None, 0])
def test_invalid_pad_char_is_rejected(pad_char):
    with pytest.raises(InvalidPadCharError) as exc_info:
        leftpad_with("abc", 5, pad_char)

    assert isinstance(exc_info.value, LeftPadError)
    assert isinstance(exc_info.value, ValueError)


def test_pad_char_checked_even_without_padding():
    with pytest.raises(InvalidPadCharError):
        leftpad_with("hello", 3, "ab")


@pytest.mark.parametrize("s", [None, 5, b"abc", ["a"]])
def test_non_string_input_raises_type_error(s):
    with pytest.raises(TypeError):
        leftpad(s, 5)


def test_pad_lines_strips_terminators():
    lines = ["1\n", "22\r\n", "333"]

    assert list(pad_lines(lines, 4, "0")) == ["0001", "0022", "0333"]


def test_pad_lines_removes_only_one_terminator():
    assert list(pad_lines(["a\r\r\n", "b\n\n", "c\r"], 4, ".")) == ["..a\r", "..b\n", "..c\r"]


def test_pad_lines_defaults_to_space():
    assert list(pad_lines(["a\n"], 3)) == ["  a"]


def test_pad_lines_validates_before_iterating():
    with pytest.raises(InvalidWidthError):
        pad_lines([], -1)
