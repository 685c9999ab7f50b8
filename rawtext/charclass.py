"""Fixed character classes used by raw-text normalization."""

from __future__ import annotations


_SPACE_CHARS = frozenset({" ", "\t"})
_END_OF_LINE_CHARS = frozenset({"\n", "\r"})
_TIGHT_JOINER_CHARS = frozenset({"<", ">"})


def is_space(char: str | None) -> bool:
    """Return whether `char` is an in-line space (space or tab)."""

    return char in _SPACE_CHARS


def is_end_of_line(char: str | None) -> bool:
    """Return whether `char` terminates a line (`\\n` or `\\r`)."""

    return char in _END_OF_LINE_CHARS


def is_tight_joiner(char: str | None) -> bool:
    """Return whether `char` joins across a line break without a space."""

    return char in _TIGHT_JOINER_CHARS
