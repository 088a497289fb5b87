"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all PODGEN__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("PODGEN__"):
            monkeypatch.delenv(key)
