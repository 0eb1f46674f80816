from __future__ import annotations

import json
from typing import Any, Optional

from label_commands.core.errors import CommandValidationError


def has_project_target(record: dict[str, Any]) -> bool:
    """True when addToProject is truthy in the JavaScript sense.

    Missing, null, false, "", 0 and NaN all mean "no target"; any object or array,
    even an empty one, is a target.
    """

    target = record.get("addToProject")
    if target is None or target is False or target == "":
        return False
    if isinstance(target, (int, float)) and not isinstance(target, bool):
        return target == target and target != 0
    return True


def _key_value(v: Any) -> Any:
    # 1 and 1.0 are the same JSON number.
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v


def dedupe_key(record: dict[str, Any]) -> str:
    """Canonical (name, url) key.

    Values are compared exactly, including type, so "1" and 1 differ while 1 and
    1.0 match. A missing name or url keys as null, which means incomplete records
    can collapse together.
    """

    target = record.get("addToProject")
    url = target.get("url") if isinstance(target, dict) else None
    name = _key_value(record.get("name"))
    return json.dumps([name, _key_value(url)], sort_keys=True, ensure_ascii=False)


def dedupe_commands(records: list[Any], *, file: Optional[str] = None) -> list[Any]:
    """Drop repeated addToProject commands, keeping the first occurrence.

    Two records are duplicates iff both carry addToProject and share name and
    addToProject.url; type and action are not compared. Records without
    addToProject always pass through untouched. Order is preserved and the
    result is a fixed point: dedupe_commands(dedupe_commands(x)) == dedupe_commands(x).
    """

    seen: set[str] = set()
    out: list[Any] = []

    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise CommandValidationError(
                code="E_INVALID_RECORD",
                message="command must be an object",
                file=file,
                path=f"[{i}]",
            )

        if not has_project_target(record):
            out.append(record)
            continue

        key = dedupe_key(record)
        if key in seen:
            continue
        seen.add(key)
        out.append(record)

    return out
