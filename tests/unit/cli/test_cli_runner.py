"""Tests for the tailwindcov CLI runner and commands."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from tailwindcov.cli import main
from tailwindcov.cli.exit_codes import (
    EXIT_COVERAGE_BELOW_THRESHOLD,
    EXIT_INVALID_USAGE,
    EXIT_MISSING_DEPENDENCY,
    EXIT_PROGRAM_ERROR,
    EXIT_RETRIEVAL_FAILURE,
    EXIT_SUCCESS,
)
from tailwindcov.cli.runner import CLIRunner, get_version
from tailwindcov.core.errors import MissingDependencyError, RetrievalError

SCRIPT = "var mode = 'a';\nvar label = mode === 'a' ? 'first' : 'second';\n"


@pytest.fixture
def workdir(tmp_path: Path, isolated_home: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory used as the current directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def script(workdir: Path) -> Path:
    path = workdir / "app.js"
    path.write_text(SCRIPT)
    return path


class TestGetVersion:
    """Tests for get_version function."""

    def test_get_version_from_metadata(self) -> None:
        with patch("tailwindcov.cli.runner.version", return_value="1.2.3"):
            assert get_version() == "1.2.3"

    def test_get_version_fallback(self) -> None:
        from importlib.metadata import PackageNotFoundError

        from tailwindcov import __version__

        with patch("tailwindcov.cli.runner.version", side_effect=PackageNotFoundError("not found")):
            assert get_version() == __version__


class TestCLIRunner:
    """Tests for CLIRunner dispatch."""

    def test_run_help(self, capsys) -> None:
        assert CLIRunner().run(["--help"]) == EXIT_SUCCESS
        assert "usage:" in capsys.readouterr().out.lower()

    def test_run_version(self, capsys) -> None:
        assert CLIRunner().run(["--version"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip()

    def test_run_no_command(self, capsys, workdir: Path) -> None:
        assert CLIRunner().run([]) == EXIT_SUCCESS
        assert "usage:" in capsys.readouterr().out.lower()

    def test_invalid_probe_name_is_usage_error(self, script: Path) -> None:
        assert CLIRunner().run(["run", str(script), "--probe-name", "not valid"]) == EXIT_INVALID_USAGE

    def test_unexpected_error_is_program_error(self, script: Path) -> None:
        runner = CLIRunner()

        with patch.object(runner.run_cmd, "execute", side_effect=ValueError("kaput")):
            assert runner.run(["run", str(script)]) == EXIT_PROGRAM_ERROR

    def test_main_entry_point(self, capsys) -> None:
        assert main(["--version"]) == EXIT_SUCCESS


class TestRunCommand:
    """Tests for 'tailwindcov run'."""

    def test_text_report(self, script: Path, capsys) -> None:
        assert main(["run", str(script)]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "2 | var label = mode === 'a' ? [+'first'+] : [-'second'-];+]" in out
        assert "Units executed: 2/3 (66.7%)" in out

    def test_json_report_to_file(self, script: Path, workdir: Path) -> None:
        report = workdir / "coverage.json"

        assert main(["run", str(script), "--format", "json", "-o", str(report)]) == EXIT_SUCCESS

        data = json.loads(report.read_text())
        assert data["summary"]["executed_units"] == 2

    def test_format_from_project_config(self, script: Path, workdir: Path, capsys) -> None:
        (workdir / ".tailwindcov.yml").write_text("output:\n  format: summary\n")

        assert main(["run", str(script)]) == EXIT_SUCCESS
        assert "Total units: 3" in capsys.readouterr().out

    def test_below_threshold(self, script: Path) -> None:
        assert main(["run", str(script), "--fail-under", "90"]) == EXIT_COVERAGE_BELOW_THRESHOLD

    def test_meets_threshold(self, script: Path) -> None:
        assert main(["run", str(script), "--fail-under", "60"]) == EXIT_SUCCESS

    def test_throwing_script_still_reports(self, workdir: Path, capsys) -> None:
        path = workdir / "boom.js"
        path.write_text("var a = 1;\nif (a) { throw new Error('boom'); }\n")

        assert main(["run", str(path), "--format", "summary"]) == EXIT_PROGRAM_ERROR
        assert "Executed units: 2" in capsys.readouterr().out

    def test_missing_file(self, workdir: Path) -> None:
        assert main(["run", str(workdir / "missing.js")]) == EXIT_INVALID_USAGE

    def test_syntax_error(self, workdir: Path) -> None:
        path = workdir / "bad.js"
        path.write_text("function (")

        assert main(["run", str(path)]) == EXIT_PROGRAM_ERROR

    def test_unknown_sandbox(self, script: Path) -> None:
        assert main(["run", str(script), "--sandbox", "nope"]) == EXIT_INVALID_USAGE

    def test_missing_parser(self, script: Path) -> None:
        with patch(
            "tailwindcov.cli.commands.run.instrument_source",
            side_effect=MissingDependencyError("esprima must be installed"),
        ):
            assert main(["run", str(script)]) == EXIT_MISSING_DEPENDENCY


class TestFetchCommand:
    """Tests for 'tailwindcov fetch'."""

    def test_fetches_and_runs(self, workdir: Path, capsys) -> None:
        with patch("tailwindcov.cli.commands.fetch.fetch_source", return_value=SCRIPT) as mock_fetch:
            code = main(["fetch", "https://example.com/app.js", "--timeout", "5"])

        assert code == EXIT_SUCCESS
        mock_fetch.assert_called_once_with("https://example.com/app.js", timeout=5.0)
        assert "Units executed: 2/3" in capsys.readouterr().out

    def test_retrieval_failure(self, workdir: Path) -> None:
        with patch(
            "tailwindcov.cli.commands.fetch.fetch_source",
            side_effect=RetrievalError("HTTP 404", "https://example.com/app.js", 404),
        ):
            assert main(["fetch", "https://example.com/app.js"]) == EXIT_RETRIEVAL_FAILURE


class TestInstrumentCommand:
    """Tests for 'tailwindcov instrument'."""

    def test_prints_instrumented_script(self, script: Path, capsys) -> None:
        assert main(["instrument", str(script), "--probe-name", "T"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out.startswith("T(0);var mode = 'a';")
        assert "? T(1) || 'first' : T(2) || 'second'" in out

    def test_writes_output_file(self, script: Path, workdir: Path) -> None:
        target = workdir / "app.instrumented.js"

        assert main(["instrument", str(script), "-o", str(target)]) == EXIT_SUCCESS
        assert target.read_text().startswith("__tailwindcov_track__(0);")

    def test_missing_file(self, workdir: Path) -> None:
        assert main(["instrument", str(workdir / "missing.js")]) == EXIT_INVALID_USAGE


class TestStatusCommand:
    """Tests for 'tailwindcov status'."""

    def test_shows_plugins_and_config(self, workdir: Path, isolated_home: Path, capsys) -> None:
        assert main(["status"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "tailwindcov version:" in out
        assert f"Home directory: {isolated_home}" in out
        assert "quickjs: available" in out
        assert "  text" in out
        assert "Configuration (defaults):" in out
        assert "probe_name: __tailwindcov_track__" in out
