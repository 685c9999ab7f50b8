"""Unit tests for fixed raw-text character classes."""

from __future__ import annotations

import pytest

from rawtext.charclass import is_end_of_line, is_space, is_tight_joiner


@pytest.mark.parametrize("char", [" ", "\t"])
def test_is_space_accepts_space_and_tab(char: str) -> None:
    """Only space and tab are in-line spaces."""

    assert is_space(char)
    assert not is_end_of_line(char)


@pytest.mark.parametrize("char", ["\n", "\r"])
def test_is_end_of_line_accepts_newline_and_carriage_return(char: str) -> None:
    """Line feed and carriage return both end a line."""

    assert is_end_of_line(char)
    assert not is_space(char)


@pytest.mark.parametrize("char", ["\u00a0", "\u2003", "\v", "\f", "\u2028", "a"])
def test_other_characters_are_not_whitespace(char: str) -> None:
    """Unicode and form-control whitespace is ordinary text here."""

    assert not is_space(char)
    assert not is_end_of_line(char)


def test_tight_joiners_are_angle_brackets_only() -> None:
    """`<` and `>` join across line breaks; the empty sentinel does not."""

    assert is_tight_joiner("<")
    assert is_tight_joiner(">")
    assert not is_tight_joiner("/")
    assert not is_tight_joiner(None)
