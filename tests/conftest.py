"""
Shared pytest fixtures and configuration for seqid tests.

This module provides:
- A controllable clock for deterministic generator tests
- Settings-cache and environment isolation
- structlog reset between tests

Usage:
    Fixtures are auto-discovered by pytest.

    def test_something(fixed_clock):
        fixed_clock.now = 1_700_000_123.5
        ...
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Ensure seqid package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seqid.core.settings import clear_settings_cache  # noqa: E402


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if test_path.parts and test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.cli)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Strip SEQID_* variables, run from an empty directory and reset caches.

    Keeps a developer's shell environment or a stray ``.env`` from leaking
    into settings, and undoes any ``configure_logging`` call made by a test.
    """
    for key in list(os.environ):
        if key.startswith("SEQID_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    structlog.reset_defaults()
    yield
    clear_settings_cache()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


# =============================================================================
# Clock Fixtures
# =============================================================================


class FixedClock:
    """Callable clock returning a settable POSIX time."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2023-11-14T22:13:20Z (1_700_000_000)."""
    return FixedClock()
