"""Raw-text normalization for literal template segments.

Responsibilities:
- Strip `//` line comments.
- Collapse every whitespace run to nothing or a single space, depending on
  line breaks, neighbouring tight joiners (`<`, `>`), and the trim flags.
- Copy all other characters verbatim, including malformed input bytes.

Key public functions:
- `normalize`: normalize text or bytes into output bytes.
- `normalize_text`: same rules for callers working with `str`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .charclass import is_end_of_line, is_space, is_tight_joiner
from .cursor import RawTextCursor


@dataclass(slots=True)
class RunState:
    """Mutable scalars for one normalization call.

    Attributes:
        trimming: Whether a whitespace run is pending resolution.
        seen_newline: Whether the pending run contains an end-of-line character.
        char_before_trim: Last character emitted before the pending run, or
            `None` when the run is leading.
        last_char: Last non-whitespace character emitted, or `None`.
    """

    trimming: bool = False
    seen_newline: bool = False
    char_before_trim: str | None = None
    last_char: str | None = None

    def begin_run(self, char: str) -> None:
        """Start a whitespace run triggered by `char`."""

        self.trimming = True
        self.seen_newline = is_end_of_line(char)
        self.char_before_trim = self.last_char

    def end_run(self) -> None:
        """Mark the pending run as resolved."""

        self.trimming = False
        self.seen_newline = False

    @property
    def at_prefix(self) -> bool:
        """Whether the pending run precedes every emitted character."""

        return self.char_before_trim is None


def _keeps_inner_space(state: RunState, next_char: str, trim_prefix: bool) -> bool:
    """Return whether a run closed by `next_char` resolves to one space."""

    if not state.seen_newline:
        return True
    if trim_prefix and state.at_prefix:
        return False
    return not (is_tight_joiner(state.char_before_trim) and is_tight_joiner(next_char))


def _keeps_trailing_space(state: RunState, trim_prefix: bool, trim_suffix: bool) -> bool:
    """Return whether a run reaching end of input resolves to one space."""

    if not state.seen_newline:
        return True
    return not (trim_suffix or (trim_prefix and state.at_prefix))


def _read_past_comment(cursor: RawTextCursor) -> str | None:
    """Consume a `//` comment if one starts after the `/` just read.

    Returns:
        `"/"` when no comment starts here (the probe is undone), the
        end-of-line character that terminated the comment, or `None` when
        the comment runs to the end of input.
    """

    if cursor.at_end():
        return "/"
    if cursor.advance() != "/":
        cursor.undo()
        return "/"
    while not cursor.at_end():
        char = cursor.advance()
        if is_end_of_line(char):
            return char
    return None


def _as_source_bytes(text: str | bytes | bytearray | memoryview) -> bytes:
    """Return UTF-8 source bytes for `text`, keeping lone surrogates verbatim."""

    if isinstance(text, str):
        return text.encode("utf-8", "surrogatepass")
    return bytes(text)


def normalize(
    text: str | bytes | bytearray | memoryview,
    trim_prefix: bool = False,
    trim_suffix: bool = False,
) -> bytes:
    """Normalize one raw-text span into its rendered form.

    Args:
        text: Literal template text, as `str` or UTF-8 bytes (may be malformed).
        trim_prefix: Drop a leading whitespace run that contains a line break.
        trim_suffix: Drop a trailing whitespace run that contains a line break.

    Returns:
        The normalized text as UTF-8 bytes. Never raises for any input.
    """

    source = _as_source_bytes(text)
    cursor = RawTextCursor(source)
    state = RunState()
    result = bytearray()

    while not cursor.at_end():
        char = cursor.advance()

        if char == "/":
            after_comment = _read_past_comment(cursor)
            if after_comment is None:
                # A comment reaching end of input drops any pending run.
                return bytes(result)
            char = after_comment

        if state.trimming:
            if is_space(char):
                continue
            if is_end_of_line(char):
                state.seen_newline = True
                continue
            if _keeps_inner_space(state, char, trim_prefix):
                result += b" "
            state.end_run()

        if is_space(char) or is_end_of_line(char):
            state.begin_run(char)
            continue

        cursor.emit(result)
        state.last_char = char

    if state.trimming and _keeps_trailing_space(state, trim_prefix, trim_suffix):
        result += b" "
    return bytes(result)


def normalize_text(text: str, trim_prefix: bool = False, trim_suffix: bool = False) -> str:
    """Normalize `text` and return the result as `str`."""

    return normalize(text, trim_prefix, trim_suffix).decode("utf-8", "surrogatepass")
