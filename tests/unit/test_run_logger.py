"""Unit tests for deterministic phase logging."""

from __future__ import annotations

import io

from rawtext.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Phase lines should carry sorted, shell-safe context tokens."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("read")
    run_logger.log_stage_complete("read", path="my file.soy", bytes=12)
    run_logger.log_stage_failure("write", "PermissionError")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=read event=start",
        "[phase] level=INFO stage=read event=complete bytes=12 path=my_file.soy",
        "[phase] level=ERROR stage=write event=failure error_type=PermissionError",
    ]


def test_run_logger_disabled_writes_nothing() -> None:
    """A disabled logger should stay silent."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink, enabled=False)

    run_logger.log_stage_start("normalize")
    run_logger.log_stage_complete("normalize", bytes=3)

    assert sink.getvalue() == ""
