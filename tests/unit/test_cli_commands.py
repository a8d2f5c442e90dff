"""Unit tests for the CLI: command registration, describe and invoke."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from interaktor.cli.app import app

runner = CliRunner()

GREET = "sample_interaktors:Greet"


class TestCliApp:
    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "describe" in result.output
        assert "invoke" in result.output

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code in (0, 2)
        assert "usage" in result.output.lower()


class TestDescribe:
    def test_describe_lists_attributes_and_plan(self):
        result = runner.invoke(app, ["describe", GREET])
        assert result.exit_code == 0, result.output
        assert "salutation" in result.output
        assert "'Hello'" in result.output
        assert "greeting" in result.output
        assert "_normalize" in result.output
        assert "perform" in result.output
        assert "ensure" in result.output

    def test_describe_rejects_malformed_target(self):
        result = runner.invoke(app, ["describe", "no_colon_here"])
        assert result.exit_code == 2

    def test_describe_rejects_unknown_module(self):
        result = runner.invoke(app, ["describe", "does_not_exist_mod:Thing"])
        assert result.exit_code == 2

    def test_describe_rejects_non_interaktor(self):
        result = runner.invoke(app, ["describe", "sample_interaktors:NotAnInteraktor"])
        assert result.exit_code == 2


class TestInvoke:
    def test_invoke_success(self):
        result = runner.invoke(app, ["invoke", GREET, "--input", json.dumps({"name": " Ada "})])
        assert result.exit_code == 0, result.output
        assert "Hello, Ada!" in result.output
        assert "success" in result.output

    def test_invoke_failure_exits_1(self):
        result = runner.invoke(app, ["invoke", GREET, "-i", json.dumps({"name": "nobody"})])
        assert result.exit_code == 1
        assert "cannot greet nobody" in result.output

    def test_invoke_strict_failure_exits_1(self):
        result = runner.invoke(
            app, ["invoke", GREET, "--strict", "-i", json.dumps({"name": "nobody"})]
        )
        assert result.exit_code == 1
        assert "Failure raised" in result.output

    def test_invoke_failure_of_foreign_context_exits_1(self):
        result = runner.invoke(app, ["invoke", "sample_interaktors:Relay"])
        assert result.exit_code == 1, result.output
        assert "Failure raised" in result.output
        assert "<unknown interaktor>" in result.output
        assert "downstream refused" in result.output

    def test_invoke_missing_attribute_exits_2(self):
        result = runner.invoke(app, ["invoke", GREET])
        assert result.exit_code == 2
        assert "missing required attributes" in result.output

    def test_invoke_non_object_input_exits_2(self):
        result = runner.invoke(app, ["invoke", GREET, "-i", "[1, 2]"])
        assert result.exit_code == 2

    def test_invoke_invalid_json(self):
        result = runner.invoke(app, ["invoke", GREET, "-i", "{not json"])
        assert result.exit_code == 2
