"""Tests for CLI commands."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from csc._version import get_version
from csc.cli import app
from csc.cli.repl import evaluate_line, run_repl
from csc.core.expression_lang import State
from csc.core.manifest import LOG_LEVEL_ENV


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from an empty directory with no csc.toml."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    return tmp_path


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "CSC version" in result.output
        assert "Python:" in result.output
        location = next(line for line in result.output.splitlines() if "Location:" in line)
        assert location.rstrip().endswith("csc")

    def test_version_matches_pyproject(self) -> None:
        pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with pyproject.open("rb") as f:
            declared = tomllib.load(f)["project"]["version"]
        assert get_version() == declared


class TestOneShot:
    """csc EXPR evaluates once and exits."""

    def test_single_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1 + 2"])
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_arguments_are_joined(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["a", "=", "2", "*", "3"])
        assert result.exit_code == 0
        assert result.output.strip() == "6"

    def test_leading_negative_number(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["-2", "+", "3"])
        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_fractional_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1 / 8"])
        assert result.output.strip() == "0.125"

    def test_non_finite_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["0 / 0"])
        assert result.exit_code == 0
        assert result.output.strip() == "NaN"

    def test_tree(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--tree", "1 - 2 - 3"])
        assert result.exit_code == 0
        assert "((1 - 2) - 3)" in result.output
        assert "-4" in result.output

    def test_tree_of_long_chain(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--tree", " + ".join(["1"] * 3000)])
        assert result.exit_code == 0
        assert result.output.rstrip().endswith("3000")
        assert "1 + 1)" in result.output

    def test_evaluation_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["x + 1"])
        assert result.exit_code == 1
        assert "Variable not found: x" in result.output

    def test_invalid_token_shows_location(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1 + $"])
        assert result.exit_code == 1
        assert "Invalid token" in result.output
        assert "^^^" in result.output


class TestConfigOption:
    def test_invalid_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        path = isolated_cwd / "bad.toml"
        path.write_text("[repl\n")
        result = cli_runner.invoke(app, ["--config", str(path), "1"])
        assert result.exit_code == 2
        assert "Invalid TOML" in result.output

    def test_missing_config_path(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["--config", str(isolated_cwd / "nope.toml"), "1"])
        assert result.exit_code != 0

    def test_prompt_and_banner_from_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "csc.toml").write_text('[repl]\nprompt = "calc> "\nbanner = false\n')
        result = cli_runner.invoke(app, [], input="2 ^ 3\n")
        assert result.exit_code == 0
        assert "calc> 8" in result.output
        assert "██" not in result.output


class TestRepl:
    """With no expression, csc reads lines until end of input."""

    def test_session_keeps_variables(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [], input="a = 2\na * 3\n")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "> 2" in lines
        assert "> 6" in lines
        assert "CTRL-D" in result.output

    def test_errors_do_not_end_session(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [], input="oops(1)\n1 + 1\n")
        assert result.exit_code == 0
        assert "Invalid function call: (oops(1))" in result.output
        assert "> 2" in result.output

    def test_blank_lines_skipped(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [], input="\n   \n7\n")
        assert result.exit_code == 0
        assert "Expected" not in result.output
        assert "> 7" in result.output

    def test_banner(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [], input="")
        assert "██" in result.output

    def test_run_repl_returns_state(self, monkeypatch: pytest.MonkeyPatch) -> None:
        lines = iter(["x = 4", "x += 1"])

        def fake_input(prompt: str = "", **kwargs: object) -> str:
            try:
                return next(lines)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("csc.cli.repl.console.input", fake_input)
        state = run_repl(banner=False)
        assert state.variables == {"x": 5.0}

    def test_ctrl_c_ends_session(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def interrupt(prompt: str = "", **kwargs: object) -> str:
            raise KeyboardInterrupt

        monkeypatch.setattr("csc.cli.repl.console.input", interrupt)
        state = run_repl(State(), banner=False)
        assert state.variables == {}


class TestEvaluateLine:
    def test_success(self, state: State) -> None:
        assert evaluate_line("y = 1", state) is True
        assert state.variables["y"] == 1.0

    def test_failure(self, state: State) -> None:
        assert evaluate_line("PI = 1", state) is False
