"""Shared test fixtures for Interaktor."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from interaktor import Interaktor
from interaktor.config import settings


@pytest.fixture
def calls() -> list[str]:
    """Provide an event log that hooks and bodies append to."""
    return []


@pytest.fixture
def make_interaktor() -> Callable[..., type[Interaktor]]:
    """Factory fixture: build a fresh Interaktor subclass.

    Keyword arguments become class attributes, so methods used as hooks
    (and ``perform``) can be passed in directly.
    """

    def _factory(name: str = "SampleInteraktor", **namespace: Any) -> type[Interaktor]:
        return type(name, (Interaktor,), dict(namespace))

    return _factory


@pytest.fixture
def recording_interaktor(
    make_interaktor: Callable[..., type[Interaktor]], calls: list[str]
) -> type[Interaktor]:
    """An interaktor whose ``perform`` logs ``"core"`` to ``calls``."""

    def perform(self: Interaktor) -> None:
        calls.append("core")

    return make_interaktor("RecordingInteraktor", perform=perform)


@pytest.fixture
def trace_hooks(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable per-hook debug tracing for the duration of a test."""
    monkeypatch.setattr(settings, "trace_hooks", True)
