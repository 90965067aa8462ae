"""Pytest configuration and fixtures.

Provides environment isolation, config reset, logging configuration and a
small call-recording spy. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

from fallible import reset_config

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Spy:
    """Callable test double that records every invocation.

    Returns ``result`` when set, otherwise echoes its first argument (or
    ``None`` for zero-argument calls). Use it to assert whether and how many
    times a combinator invoked the closure it was given.
    """

    result: Any = None
    returns_result: bool = False
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.returns_result:
            return self.result
        return args[0] if args else None

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def spy() -> Spy:
    """Return a fresh echoing spy."""
    return Spy()


@pytest.fixture
def spy_returning():
    """Return a factory for spies with a fixed return value."""

    def _make(result: Any) -> Spy:
        return Spy(result=result, returns_result=True)

    return _make


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(
        "fallible.config.load_dotenv", lambda *_args, **_kwargs: False
    )


@pytest.fixture(autouse=True)
def isolate_fallible_env(request, monkeypatch):
    """Clear FALLIBLE_* env vars so diagnostics render with defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_config():
    """Forget any config installed by a previous test."""
    reset_config()
    yield
    reset_config()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_library_logging():
    """Keep library debug records out of normal test output."""
    logging.getLogger("fallible").setLevel(logging.INFO)
