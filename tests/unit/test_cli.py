"""Unit tests for the command-line interface."""

import textwrap

import pytest
import yaml

from deprecatable import get_options
from deprecatable.cli import apply_options, build_parser, main

SCRIPT = textwrap.dedent(
    """
    import sys

    from deprecatable import deprecate


    class Legacy:
        def old(self):
            return "old"


    deprecate(Legacy, "old", message="Use new()")
    for _ in range(3):
        Legacy().old()
    print("args:", " ".join(sys.argv[1:]))
    """
)


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "legacy_script.py"
    path.write_text(SCRIPT)
    return path


@pytest.mark.unit
class TestBuildParser:
    """Tests for argument parsing."""

    def test_run_arguments(self):
        """Test the run subcommand collects script arguments."""
        args = build_parser().parse_args(
            ["run", "--alert-frequency", "always", "app.py", "--flag", "x"]
        )

        assert args.command == "run"
        assert args.alert_frequency == "always"
        assert args.script == "app.py"
        assert args.script_args == ["--flag", "x"]
        assert args.no_final_report is False

    def test_command_is_required(self):
        """Test running without a subcommand exits."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


@pytest.mark.unit
class TestApplyOptions:
    """Tests for apply_options."""

    def test_applies_arguments(self):
        """Test command line values reach the options."""
        args = build_parser().parse_args(
            [
                "run",
                "--alert-frequency",
                "3",
                "--context-padding",
                "4",
                "--no-final-report",
                "app.py",
            ]
        )
        options = apply_options(args, get_options())

        assert options.alert_frequency == 3
        assert options.caller_context_padding == 4
        assert options.has_final_report is False

    def test_arguments_override_config_file(self, tmp_path):
        """Test explicit arguments are applied after the file."""
        config = tmp_path / "options.yaml"
        config.write_text("alert_frequency: never\ncaller_context_padding: 5\n")
        args = build_parser().parse_args(
            ["run", "--config", str(config), "--alert-frequency", "once", "a.py"]
        )
        options = apply_options(args, get_options())

        assert options.alert_frequency == 1
        assert options.caller_context_padding == 5


@pytest.mark.unit
class TestMain:
    """Tests for the main entry point."""

    def test_options_command(self, capsys):
        """Test the effective options are printed as YAML."""
        assert main(["options"]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert data == {
            "deprecatable": {
                "caller_context_padding": 2,
                "alert_frequency": 1,
                "has_final_report": False,
            }
        }

    def test_options_command_shows_environment(self, monkeypatch, capsys):
        """Test environment overrides are visible."""
        monkeypatch.setenv("DEPRECATABLE_ALERT_FREQUENCY", "always")

        assert main(["options"]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert data["deprecatable"]["alert_frequency"] == "always"

    def test_options_command_with_config(self, tmp_path, capsys):
        """Test a config file is loaded."""
        config = tmp_path / "options.yaml"
        config.write_text("deprecatable:\n  caller_context_padding: 7\n")

        assert main(["options", "--config", str(config)]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert data["deprecatable"]["caller_context_padding"] == 7

    def test_invalid_environment_is_reported(self, monkeypatch, capsys):
        """Test option errors give exit code 2."""
        monkeypatch.setenv("DEPRECATABLE_ALERT_FREQUENCY", "sometimes")

        assert main(["options"]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_missing_config_is_reported(self, tmp_path, capsys):
        """Test a missing config file gives exit code 2."""
        assert main(["options", "--config", str(tmp_path / "nope.yaml")]) == 2
        assert "nope.yaml" in capsys.readouterr().err

    def test_run_script(self, script, capsys):
        """Test a script runs with its own arguments and raises alerts."""
        assert main(["run", str(script), "one", "two"]) == 0

        captured = capsys.readouterr()
        assert "args: one two" in captured.out
        assert captured.err.count("Deprecated method:") == 1
        assert "developer message : Use new()" in captured.err

    def test_run_script_with_frequency(self, script, capsys):
        """Test --alert-frequency applies to the script."""
        assert main(["run", "--alert-frequency", "always", str(script)]) == 0

        assert capsys.readouterr().err.count("Deprecated method:") == 3
