"""
Pytest configuration and shared fixtures.
"""

import os
from pathlib import Path

import pytest

from deprecatable import StringIOAlerter, get_options, reset_state, set_alerter

# ============================================================================
# Global State Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Reset the registry, options and alerter around every test.

    The final report is turned off so the exit hook stays quiet when the
    test session ends.
    """
    for key in list(os.environ):
        if key.startswith("DEPRECATABLE_"):
            monkeypatch.delenv(key)
    reset_state()
    get_options().has_final_report = False
    yield
    reset_state()
    get_options().has_final_report = False


@pytest.fixture
def alerter():
    """Install a StringIOAlerter as the process-wide alerter."""
    string_alerter = StringIOAlerter()
    set_alerter(string_alerter)
    return string_alerter


class RecordingAlerter:
    """Alerter that remembers what it was asked to report."""

    def __init__(self):
        self.alerts = []
        self.reports = []

    def alert(self, deprecated_method, call_site):
        self.alerts.append((deprecated_method, call_site.key))

    def final_report(self, registry=None):
        self.reports.append(registry)


@pytest.fixture
def recording_alerter():
    """Provide a RecordingAlerter (not installed globally)."""
    return RecordingAlerter()


# ============================================================================
# Source File Fixtures
# ============================================================================


@pytest.fixture
def make_source_file(tmp_path):
    """Factory fixture writing a file of numbered "# Context line N" lines."""

    def _make(line_count=60, name="source.py"):
        path = tmp_path / name
        path.write_text(
            "".join(f"# Context line {n}\n" for n in range(1, line_count + 1))
        )
        return path

    return _make


@pytest.fixture
def examples_dir():
    """Return path to the example scripts."""
    return Path(__file__).parent.parent / "examples"
