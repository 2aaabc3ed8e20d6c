"""Tests for the CLI runner."""

import sys
from pathlib import Path

import orjson
import pytest

from oaslint import main as main_module
from oaslint.cli.runner import EXIT_OK, EXIT_PROBLEMS, EXIT_USAGE, CLIRunner

VALID = """\
swagger: '2.0'
info:
  title: Users
  version: '1.0'
  contact: {name: Team}
  license: {name: MIT}
paths:
  /users:
    get:
      operationId: listUsers
      summary: List users
      responses:
        '200':
          description: OK
"""


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory (no implicit oaslint.conf)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write(tmp_path: Path):
    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


class TestRun:
    def test_version(self, capsys):
        assert CLIRunner().run(["--version"]) == EXIT_OK
        assert capsys.readouterr().out.strip()

    def test_no_command_prints_help(self, capsys):
        assert CLIRunner().run([]) == EXIT_USAGE
        assert "usage: oaslint" in capsys.readouterr().out


class TestLint:
    def test_valid_document(self, write, capsys):
        path = write("api.yaml", VALID)

        assert CLIRunner().run(["lint", path]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "Document is valid."

    def test_errors_exit_with_problems(self, write, capsys):
        path = write("api.yaml", VALID.replace("title: Users", "titel: Users"))

        assert CLIRunner().run(["lint", path]) == EXIT_PROBLEMS
        out = capsys.readouterr().out
        assert "Property `titel` is not expected here" in out
        assert "Did you mean: title ?" in out

    def test_warnings_only_exit_ok(self, write):
        path = write("api.yaml", VALID.replace("  license: {name: MIT}\n", ""))

        assert CLIRunner().run(["lint", path]) == EXIT_OK

    def test_json_output(self, write, capsys):
        path = write("api.yaml", VALID.replace("title: Users", "title: 7"))

        CLIRunner().run(["lint", path, "--format", "json"])

        payload = orjson.loads(capsys.readouterr().out)
        assert payload["totals"]["errors"] == 1
        assert payload["problems"][0]["location"]["pointer"] == "#/info/title"

    def test_max_problems(self, write, capsys):
        path = write(
            "api.yaml",
            VALID.replace("title: Users", "titel: Users"),
        )

        code = CLIRunner().run(
            ["lint", path, "--format", "json", "--max-problems", "1"]
        )

        payload = orjson.loads(capsys.readouterr().out)
        assert len(payload["problems"]) == 1
        assert code == EXIT_PROBLEMS

    def test_config_option(self, write):
        config = write("custom.conf", "[rules]\nstruct = off\n")
        path = write("api.yaml", VALID.replace("title: Users", "titel: Users"))

        assert CLIRunner().run(["lint", path, "--config", config]) == EXIT_OK

    def test_config_in_working_directory(self, write):
        write("oaslint.conf", "[rules]\nstruct = warn\n")
        path = write("api.yaml", VALID.replace("title: Users", "titel: Users"))

        assert CLIRunner().run(["lint", path]) == EXIT_OK

    def test_invalid_config(self, write):
        config = write("custom.conf", "[rules]\nstruct = loud\n")
        path = write("api.yaml", VALID)

        assert CLIRunner().run(["lint", path, "--config", config]) == EXIT_USAGE

    def test_unreadable_document(self, tmp_path):
        missing = str(tmp_path / "missing.yaml")

        assert CLIRunner().run(["lint", missing]) == EXIT_PROBLEMS

    def test_unsupported_version(self, write, capsys):
        path = write("api.yaml", "openapi: 3.1.0\n")

        assert CLIRunner().run(["lint", path]) == EXIT_PROBLEMS
        assert capsys.readouterr().out == ""

    def test_one_bad_document_does_not_hide_others(self, write, capsys):
        bad = write("bad.yaml", "openapi: 3.1.0\n")
        good = write("good.yaml", VALID.replace("title: Users", "titel: Users"))

        assert CLIRunner().run(["lint", bad, good]) == EXIT_PROBLEMS
        assert "titel" in capsys.readouterr().out

    def test_recursive_alias_is_reported(self, write, capsys, caplog):
        looped = write(
            "looped.yaml",
            VALID.replace("info:\n", "info: &info\n").replace(
                "  license: {name: MIT}\n",
                "  license: {name: MIT}\n  x-self: *info\n",
            ),
        )
        good = write("good.yaml", VALID.replace("title: Users", "titel: Users"))

        assert CLIRunner().run(["lint", looped, good]) == EXIT_PROBLEMS
        assert "titel" in capsys.readouterr().out
        assert "Recursive YAML aliases" in caplog.text


def test_main_exits_with_runner_code(monkeypatch, write):
    path = write("api.yaml", VALID)
    monkeypatch.setattr(sys, "argv", ["oaslint", "lint", path])

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == EXIT_OK
