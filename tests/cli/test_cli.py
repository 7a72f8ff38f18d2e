# tests/cli/test_cli.py
"""
Tests for the gaeenv command line entry point.

Covers flag parsing, exit codes and the stdout/stderr split:
exports go to stdout, diagnostics and the event log go to stderr.
"""

import pytest
from typer.testing import CliRunner

from gaeenv import __version__
from gaeenv.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(write_tree):
    return write_tree(
        {
            "app.yaml": {"variables": {"A": "1"}, "includes": ["child.yaml"]},
            "child.yaml": {"variables": {"A": "2", "B": "3"}},
            "broken.yaml": {"variables": {"R": "1"}, "includes": ["child.yaml", "missing.yaml"]},
        }
    )


class TestExports:
    def test_default_config_path(self, runner, project, monkeypatch):
        monkeypatch.chdir(project)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert result.stdout == 'export A="1"\nexport B="3"\n'

    def test_config_option(self, runner, project):
        result = runner.invoke(app, ["--config", str(project / "app.yaml")])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ['export A="1"', 'export B="3"']

    def test_short_config_option(self, runner, project):
        result = runner.invoke(app, ["-c", str(project / "child.yaml")])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ['export A="2"', 'export B="3"']

    def test_config_from_environment(self, runner, project):
        result = runner.invoke(app, [], env={"GAEENV_CONFIG": str(project / "child.yaml")})

        assert result.exit_code == 0
        assert 'export A="2"' in result.stdout


class TestErrors:
    def test_failure_aborts_without_output(self, runner, project):
        result = runner.invoke(app, ["-c", str(project / "broken.yaml")])

        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Erro em resolve" in result.stderr
        assert "missing.yaml" in result.stderr

    def test_silent_hides_diagnostics(self, runner, project):
        result = runner.invoke(app, ["-c", str(project / "broken.yaml"), "--silent"])

        assert result.exit_code == 1
        assert result.stdout == ""
        assert result.stderr == ""

    def test_force_continues(self, runner, project):
        result = runner.invoke(app, ["-c", str(project / "broken.yaml"), "-f"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ['export A="2"', 'export B="3"', 'export R="1"']
        assert "missing.yaml" in result.stderr

    def test_force_and_silent(self, runner, project):
        result = runner.invoke(app, ["-c", str(project / "broken.yaml"), "-f", "-s"])

        assert result.exit_code == 0
        assert 'export R="1"' in result.stdout
        assert result.stderr == ""

    def test_force_from_environment(self, runner, project):
        result = runner.invoke(
            app,
            ["-c", str(project / "broken.yaml")],
            env={"GAEENV_FORCE": "true", "GAEENV_SILENT": "true"},
        )

        assert result.exit_code == 0
        assert 'export R="1"' in result.stdout

    def test_missing_root(self, runner, tmp_path):
        result = runner.invoke(app, ["-c", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert result.stdout == ""
        assert "nope.yaml" in result.stderr


def test_verbose_prints_event_log(runner, project):
    result = runner.invoke(app, ["-c", str(project / "app.yaml"), "--verbose"])

    assert result.exit_code == 0
    assert "file.loaded" in result.stderr
    assert "variables.merged" in result.stderr
    assert "file.loaded" not in result.stdout


def test_version(runner):
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == f"gaeenv {__version__}"
