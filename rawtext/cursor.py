"""Decoding reader over raw template text with one level of undo.

Responsibilities:
- Decode UTF-8 source bytes one codepoint at a time.
- Remember the two most recent read positions so the latest read can be undone.
- Copy the verbatim source bytes of the latest codepoint into an output buffer.

Malformed input never fails: any invalid or truncated sequence decodes to
U+FFFD with a width of one byte, so every byte string is readable.
"""

from __future__ import annotations


REPLACEMENT_CHAR = "\ufffd"


def _sequence_length(lead: int) -> int:
    """Return the UTF-8 sequence length announced by a lead byte, or 0 if invalid."""

    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_codepoint(data: bytes, offset: int) -> tuple[str, int]:
    """Decode one codepoint at `offset` and return it with its byte width.

    Args:
        data: UTF-8 encoded source, possibly malformed.
        offset: Byte offset of the codepoint to decode; must be inside `data`.

    Returns:
        The decoded character and the number of bytes it occupies. Invalid
        sequences yield `REPLACEMENT_CHAR` with width 1.
    """

    length = _sequence_length(data[offset])
    if length == 0:
        return REPLACEMENT_CHAR, 1
    if length == 1:
        return chr(data[offset]), 1
    try:
        return data[offset : offset + length].decode("utf-8"), length
    except UnicodeDecodeError:
        return REPLACEMENT_CHAR, 1


class RawTextCursor:
    """Forward-only codepoint reader supporting a single `undo` of the latest read."""

    def __init__(self, source: bytes) -> None:
        """Initialize the cursor at the start of `source`."""

        self._source = source
        self._pos = 0
        self._last_pos = 0
        self._last_pos2 = 0

    @property
    def position(self) -> int:
        """Byte offset of the next codepoint to read."""

        return self._pos

    def at_end(self) -> bool:
        """Return whether all source bytes have been read."""

        return self._pos >= len(self._source)

    def advance(self) -> str:
        """Read and return the next codepoint.

        Raises:
            IndexError: If the cursor is already at the end of the source.
        """

        if self.at_end():
            raise IndexError("cannot advance past the end of raw text")
        char, width = decode_codepoint(self._source, self._pos)
        self._last_pos2 = self._last_pos
        self._last_pos = self._pos
        self._pos += width
        return char

    def undo(self) -> None:
        """Rewind the most recent `advance`; only one level is supported."""

        self._pos = self._last_pos
        self._last_pos = self._last_pos2
        self._last_pos2 = 0

    def emit(self, buffer: bytearray) -> None:
        """Append the source bytes of the most recently read codepoint to `buffer`."""

        buffer += self._source[self._last_pos : self._pos]
