from __future__ import annotations

import json
from typing import Any

import typer

from label_commands.core.dedupe.dedupe_commands import dedupe_commands
from label_commands.core.errors import (
    CommandError,
    CommandLoadError,
    CommandValidationError,
    CommandWriteError,
)
from label_commands.core.expand.expand_labels import expand_labels
from label_commands.core.io.load_records import load_records
from label_commands.core.io.write_records import write_records
from label_commands.core.lookup.lookup_projects import projects_for_label, summarize_commands
from label_commands.core.validate.validate_records import (
    validate_command_records,
    validate_label_mappings,
)

DEFAULT_LABELS_PATH = "labels.json"
DEFAULT_COMMANDS_PATH = "out/commands.json"
DEFAULT_DEDUPED_PATH = "out/commands-deduped.json"

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _callback() -> None:
    """Label command file tools."""
    return


@app.command("expand")
def expand(
    input: str = typer.Option(
        DEFAULT_LABELS_PATH, "--input", "-i", help="Labels file (.json/.yaml/.yml)"
    ),
    out: str = typer.Option(DEFAULT_COMMANDS_PATH, "--out", "-o", help="Commands file to write"),
) -> None:
    """Flatten label -> projects mappings into addToProject commands."""
    commands = _expand_or_exit(input)
    _write_or_exit(out, commands)
    typer.echo(f"OK: wrote {len(commands)} commands to {out}")


@app.command("dedupe")
def dedupe(
    input: str = typer.Option(DEFAULT_COMMANDS_PATH, "--input", "-i", help="Commands file to read"),
    out: str = typer.Option(DEFAULT_DEDUPED_PATH, "--out", "-o", help="Deduped commands file to write"),
) -> None:
    """Drop repeated (name, url) addToProject commands, keeping the first."""
    records = _load_or_exit(input)
    unique = _dedupe_or_exit(records, input)
    _write_or_exit(out, unique)


@app.command("build")
def build(
    input: str = typer.Option(
        DEFAULT_LABELS_PATH, "--input", "-i", help="Labels file (.json/.yaml/.yml)"
    ),
    commands_out: str = typer.Option(
        DEFAULT_COMMANDS_PATH, "--commands-out", help="Intermediate commands file to write"
    ),
    out: str = typer.Option(DEFAULT_DEDUPED_PATH, "--out", "-o", help="Deduped commands file to write"),
) -> None:
    """Run expand then dedupe, writing both files."""
    commands = _expand_or_exit(input)
    unique = _dedupe_or_exit(commands, commands_out)

    _write_or_exit(commands_out, commands)
    typer.echo(f"OK: wrote {len(commands)} commands to {commands_out}")
    _write_or_exit(out, unique)
    typer.echo(f"OK: wrote {len(unique)} commands to {out} (dropped={len(commands) - len(unique)})")


@app.command("lookup")
def lookup(
    label: str = typer.Argument(..., help="Label name to look up"),
    input: str = typer.Option(DEFAULT_DEDUPED_PATH, "--input", "-i", help="Commands file to read"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """List the project urls a label is added to."""
    _check_format_or_exit(format)

    records = _load_or_exit(input)
    urls = projects_for_label(records, label)

    if format == "json":
        payload = {"label": label, "count": len(urls), "projects": urls}
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    for url in urls:
        typer.echo(url)


@app.command("validate")
def validate(
    path: str = typer.Argument(..., help="Path to a labels or commands file"),
    kind: str = typer.Option("commands", "--kind", help="Document kind: labels|commands"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Check a labels or commands file for malformed records."""
    _check_format_or_exit(format)
    if kind not in ("labels", "commands"):
        err = CommandValidationError(
            code="E_VALIDATE_UNKNOWN_KIND",
            message=f"unknown kind: {kind} (choose one of: labels, commands)",
            file=None,
            path="kind",
        )
        _print_errors([err])
        raise typer.Exit(code=2)

    def _emit_json(
        ok: bool,
        *,
        exit_code: int,
        errors: list[CommandError],
        summary: dict | None,
    ) -> None:
        payload = {
            "tool": "label-commands",
            "command": "validate",
            "kind": kind,
            "ok": ok,
            "error_count": len(errors),
            "errors": [e.to_item() for e in errors],
            "summary": summary,
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=exit_code)

    try:
        data = load_records(path)
    except CommandLoadError as e:
        if format == "json":
            _emit_json(False, exit_code=1, errors=[e], summary=None)
        _print_errors([e])
        raise typer.Exit(code=1)

    if kind == "labels":
        errors = validate_label_mappings(data, file=path, strict=True)
    else:
        errors = validate_command_records(data, file=path)

    if errors:
        if format == "json":
            _emit_json(False, exit_code=2, errors=list(errors), summary=None)
        _print_errors(list(errors))
        raise typer.Exit(code=2)

    commands = expand_labels(data, file=path) if kind == "labels" else data
    summary = summarize_commands(commands)

    if format == "json":
        _emit_json(True, exit_code=0, errors=[], summary=summary)

    typer.echo(
        f"OK: {kind} file is valid "
        f"(commands={summary['command_count']}, labels={summary['label_count']}, "
        f"projects={summary['project_count']})"
    )


def _check_format_or_exit(format: str) -> None:
    if format in ("text", "json"):
        return
    err = CommandValidationError(
        code="E_UNKNOWN_FORMAT",
        message=f"unknown format: {format} (choose one of: text, json)",
        file=None,
        path="format",
    )
    _print_errors([err])
    raise typer.Exit(code=2)


def _load_or_exit(path: str) -> list[Any]:
    try:
        return load_records(path)
    except CommandLoadError as e:
        _print_errors([e])
        raise typer.Exit(code=1)


def _expand_or_exit(path: str) -> list[dict[str, Any]]:
    data = _load_or_exit(path)

    errors = validate_label_mappings(data, file=path)
    if errors:
        _print_errors(list(errors))
        raise typer.Exit(code=2)

    return expand_labels(data, file=path)


def _dedupe_or_exit(records: list[Any], path: str) -> list[Any]:
    try:
        return dedupe_commands(records, file=path)
    except CommandValidationError as e:
        _print_errors([e])
        raise typer.Exit(code=2)


def _write_or_exit(path: str, records: list[Any]) -> None:
    try:
        write_records(path, records)
    except CommandWriteError as e:
        _print_errors([e])
        raise typer.Exit(code=1)


def _print_errors(errors: list[CommandError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="label-commands")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
