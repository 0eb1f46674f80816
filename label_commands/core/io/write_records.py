from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from label_commands.core.errors import CommandWriteError


def dump_records_json(records: list[Any]) -> str:
    """Pretty-print records with a 2-space indent and no trailing newline."""
    return json.dumps(records, indent=2, ensure_ascii=False)


def write_records(path: str, records: list[Any]) -> None:
    """Write records as pretty JSON, replacing the target in one step.

    On any failure the previous file (if any) is left as it was.
    """

    p = Path(path)

    try:
        text = dump_records_json(records)
    except (TypeError, ValueError) as e:
        raise CommandWriteError(code="E_SERIALIZE", message=str(e), file=str(p)) from e

    try:
        if str(p.parent) not in (".", ""):
            p.parent.mkdir(parents=True, exist_ok=True)
        _replace_text(p, text)
    except OSError as e:
        raise CommandWriteError(code="E_FILE_WRITE", message=str(e), file=str(p)) from e


def _replace_text(p: Path, text: str) -> None:
    # Temp file lives beside the target so os.replace stays on one filesystem.
    fd, tmp = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=str(p.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, p)
    except OSError:
        Path(tmp).unlink(missing_ok=True)
        raise
