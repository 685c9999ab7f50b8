"""Stage-scoped failures raised by the rawtext CLI.

Normalization itself never fails; these cover reading configs and inputs,
resolving trim flags, and writing output.
"""

from __future__ import annotations

from pathlib import Path


class RawTextStageError(RuntimeError):
    """A CLI stage failure with an optional path and remediation hint.

    Attributes:
        stage: Stage name shown to the user (`config`, `read`, `write`).
        detail: One-sentence description of what went wrong.
        hint: Optional next step for the user.
        path: File the stage was working on, when there is one.
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
        self.path = path

    @classmethod
    def from_os_error(
        cls, stage: str, action: str, path: Path, exc: OSError, hint: str
    ) -> RawTextStageError:
        """Build an error for a failed filesystem `action` ("read", "write") on `path`."""

        reason = exc.strerror or str(exc)
        return cls(
            stage=stage,
            detail=f"Failed to {action} `{path}`: {reason}.",
            hint=hint,
            path=path,
        )
