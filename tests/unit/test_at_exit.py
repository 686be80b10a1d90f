"""Unit tests for the final report hook."""

import pytest

from deprecatable import at_exit, get_options, get_registry, set_alerter


@pytest.mark.unit
class TestRunFinalReport:
    """Tests for run_final_report."""

    def test_reports_when_enabled(self, recording_alerter):
        """Test the alerter receives the global registry."""
        set_alerter(recording_alerter)
        get_options().has_final_report = True

        at_exit.run_final_report()

        assert recording_alerter.reports == [get_registry()]

    def test_silent_when_disabled(self, recording_alerter):
        """Test nothing is reported when the option is off."""
        set_alerter(recording_alerter)
        get_options().has_final_report = False

        at_exit.run_final_report()

        assert recording_alerter.reports == []

    def test_environment_forces_report(self, monkeypatch, recording_alerter):
        """Test DEPRECATABLE_HAS_AT_EXIT_REPORT=true wins over the setting."""
        set_alerter(recording_alerter)
        get_options().has_final_report = False
        monkeypatch.setenv("DEPRECATABLE_HAS_AT_EXIT_REPORT", "true")

        at_exit.run_final_report()

        assert len(recording_alerter.reports) == 1

    def test_reports_with_empty_registry(self, alerter):
        """Test an empty registry still prints the header."""
        get_options().has_final_report = True

        at_exit.run_final_report()

        assert "Deprecatable 'at_exit' Report" in alerter.getvalue()


@pytest.mark.unit
class TestInstallAtExitHook:
    """Tests for install_at_exit_hook."""

    def test_registers_once(self, monkeypatch):
        """Test repeated installs register a single hook."""
        registered = []
        monkeypatch.setattr(at_exit, "_installed", False)
        monkeypatch.setattr(at_exit.atexit, "register", registered.append)

        assert at_exit.install_at_exit_hook() is True
        assert at_exit.install_at_exit_hook() is False
        assert registered == [at_exit.run_final_report]
