"""Unit tests for CLI stage errors."""

from __future__ import annotations

import errno
from pathlib import Path

from rawtext.errors import RawTextStageError


def test_from_os_error_uses_strerror_and_keeps_path() -> None:
    """Filesystem failures should render the OS reason and remember the path."""

    path = Path("templates/missing.soy")
    exc = FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))

    error = RawTextStageError.from_os_error(
        "read", "read input", path, exc, "Verify the input file exists and is readable."
    )

    assert error.stage == "read"
    assert error.path == path
    assert error.detail == (
        "Failed to read input `templates/missing.soy`: No such file or directory."
    )
    assert error.hint == "Verify the input file exists and is readable."
    assert str(error) == error.detail


def test_from_os_error_falls_back_to_message_without_strerror() -> None:
    """Errors without an errno reason should still produce a readable detail."""

    error = RawTextStageError.from_os_error(
        "write", "write output", Path("out.txt"), OSError("disk quota exceeded"), "Free space."
    )

    assert error.detail == "Failed to write output `out.txt`: disk quota exceeded."


def test_stage_error_without_path_or_hint() -> None:
    """Flag resolution errors carry neither a path nor necessarily a hint."""

    error = RawTextStageError(stage="config", detail="Bad flag.")

    assert error.path is None
    assert error.hint is None
