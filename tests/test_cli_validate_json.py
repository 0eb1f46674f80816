import json

from typer.testing import CliRunner

from label_commands.cli import app

runner = CliRunner()


def test_cli_validate_json_success():
    r = runner.invoke(app, ["validate", "examples/commands.json", "--format", "json"])
    assert r.exit_code == 0
    payload = json.loads(r.stdout)
    assert payload["command"] == "validate"
    assert payload["kind"] == "commands"
    assert payload["ok"] is True
    assert payload["error_count"] == 0
    assert payload["errors"] == []
    assert payload["summary"]["without_project_count"] == 2


def test_cli_validate_json_failure_contains_codes():
    r = runner.invoke(
        app,
        ["validate", "examples/invalid-labels.json", "--kind", "labels", "--format", "json"],
    )
    assert r.exit_code == 2
    payload = json.loads(r.stdout)
    assert payload["ok"] is False
    assert payload["summary"] is None
    paths = {e["path"] for e in payload["errors"]}
    assert paths == {"[1].label", "[2].projects"}


def test_cli_validate_json_load_error():
    r = runner.invoke(app, ["validate", "examples/not-json.json", "--format", "json"])
    assert r.exit_code == 1
    payload = json.loads(r.stdout)
    assert payload["errors"][0]["code"] == "E_JSON_PARSE"
    assert payload["errors"][0]["source"] == "load"
