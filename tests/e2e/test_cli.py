"""End-to-end tests for the lexenv CLI."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from lexenv.cli.main import app

runner = CliRunner()


class TestCliHelp:
    """Test CLI help and basic commands."""

    def test_main_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "lexical environment" in result.output.lower()

    def test_demos_lists_scenarios(self):
        result = runner.invoke(app, ["demos"])
        assert result.exit_code == 0
        assert "shadowing" in result.output
        assert "counter" in result.output

    def test_config(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "max_scope_depth" in result.output


class TestRunCommand:
    """Test the run command."""

    def test_run_counter(self):
        result = runner.invoke(app, ["run", "counter"])
        assert result.exit_code == 0
        assert "counter = 3" in result.output

    def test_run_shadowing_with_chain(self):
        result = runner.invoke(app, ["run", "shadowing", "--show-chain"])
        assert result.exit_code == 0
        assert "Outer scope value of x: 20" in result.output
        assert "Environment Chain" in result.output

    def test_run_unknown_demo(self):
        result = runner.invoke(app, ["run", "does-not-exist"])
        assert result.exit_code == 1

    def test_verbose_flag(self):
        result = runner.invoke(app, ["--verbose", "run", "greeter"])
        assert result.exit_code == 0
        assert "Hello, GoLang" in result.output


class TestExportAndValidate:
    """Test exporting snapshots and validating them."""

    def test_export_then_validate(self, tmp_path: Path):
        output = tmp_path / "greeter.json"
        result = runner.invoke(app, ["export", "greeter", "-o", str(output)])
        assert result.exit_code == 0
        assert output.exists()

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["current_id"] in data["scopes"]

        result = runner.invoke(app, ["validate", str(output)])
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_export_unknown_demo(self, tmp_path: Path):
        output = tmp_path / "missing.json"
        result = runner.invoke(app, ["export", "nope", "-o", str(output)])
        assert result.exit_code == 1
        assert not output.exists()

    def test_validate_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(bad)])
        assert result.exit_code == 1

    def test_validate_dangling_parent(self, tmp_path: Path):
        snapshot_file = tmp_path / "dangling.json"
        snapshot_file.write_text(
            json.dumps(
                {
                    "current_id": "b",
                    "scopes": {
                        "b": {"id": "b", "kind": "BLOCK", "depth": 1, "parent_id": "gone"}
                    },
                }
            ),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["validate", str(snapshot_file)])
        assert result.exit_code == 1

    def test_validate_missing_file(self):
        result = runner.invoke(app, ["validate", "/nonexistent/snapshot.json"])
        assert result.exit_code != 0

    def test_validate_non_utf8_file(self, tmp_path: Path):
        snapshot_file = tmp_path / "latin1.json"
        snapshot_file.write_bytes(b'{"current_id": "\xff"}')
        result = runner.invoke(app, ["validate", str(snapshot_file)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_export_into_missing_directory(self, tmp_path: Path):
        output = tmp_path / "missing_dir" / "out.json"
        result = runner.invoke(app, ["export", "greeter", "-o", str(output)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert not output.exists()
