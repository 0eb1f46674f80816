from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from label_commands.core.errors import CommandLoadError


def load_records(path: str) -> list[Any]:
    """Load a JSON/YAML file whose top-level value is an array of records.

    Does not check individual records; callers own shape checking.
    """

    p = Path(path)
    if not p.exists():
        raise CommandLoadError(
            code="E_FILE_NOT_FOUND",
            message="file does not exist",
            file=str(p),
        )

    suffix = p.suffix.lower()
    try:
        raw_text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CommandLoadError(code="E_FILE_READ", message=str(e), file=str(p)) from e

    try:
        if suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(raw_text)
        elif suffix == ".json":
            data = json.loads(raw_text)
        else:
            raise CommandLoadError(
                code="E_UNSUPPORTED_FORMAT",
                message="supported formats are .json and .yaml/.yml",
                file=str(p),
            )
    except CommandLoadError:
        raise
    except (ValueError, yaml.YAMLError) as e:
        code = "E_YAML_PARSE" if suffix in {".yaml", ".yml"} else "E_JSON_PARSE"
        raise CommandLoadError(code=code, message=str(e), file=str(p)) from e

    if not isinstance(data, list):
        raise CommandLoadError(
            code="E_INVALID_TOP_LEVEL",
            message="top-level document must be an array",
            file=str(p),
        )

    return data
