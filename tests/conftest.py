"""Shared pytest fixtures for the rawtext test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_rawtext_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `RAWTEXT_*` variables from leaking into config resolution."""

    monkeypatch.delenv("RAWTEXT_TRIM_PREFIX", raising=False)
    monkeypatch.delenv("RAWTEXT_TRIM_SUFFIX", raising=False)
