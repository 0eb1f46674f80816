from __future__ import annotations

from typing import Any

from label_commands.core.dedupe.dedupe_commands import has_project_target


def projects_for_label(records: list[Any], label: str) -> list[str]:
    """Project urls a label should be added to, unique, in first-seen order."""

    out: list[str] = []
    seen: set[str] = set()
    for record in records:
        if not isinstance(record, dict) or record.get("name") != label:
            continue
        if not has_project_target(record):
            continue
        target = record["addToProject"]
        url = target.get("url") if isinstance(target, dict) else None
        if not isinstance(url, str) or url in seen:
            continue
        seen.add(url)
        out.append(url)
    return out


def summarize_commands(records: list[Any]) -> dict[str, int]:
    names: set[str] = set()
    urls: set[str] = set()
    without_project = 0

    for record in records:
        if not isinstance(record, dict):
            continue
        name = record.get("name")
        if isinstance(name, str):
            names.add(name)
        if not has_project_target(record):
            without_project += 1
            continue
        target = record["addToProject"]
        url = target.get("url") if isinstance(target, dict) else None
        if isinstance(url, str):
            urls.add(url)

    return {
        "command_count": len(records),
        "label_count": len(names),
        "project_count": len(urls),
        "without_project_count": without_project,
    }
