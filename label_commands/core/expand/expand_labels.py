from __future__ import annotations

from typing import Any, Optional

from label_commands.core.model import CommandRecord, LabelMapping
from label_commands.core.validate.validate_records import validate_label_mappings


def parse_label_mappings(data: Any, *, file: Optional[str] = None) -> list[LabelMapping]:
    """Turn a raw labels document into LabelMapping values.

    Fails fast on the first malformed mapping rather than emitting commands with
    missing names or urls.
    """

    errors = validate_label_mappings(data, file=file)
    if errors:
        raise errors[0]
    return [LabelMapping(label=raw["label"], projects=list(raw["projects"])) for raw in data]


def expand_mappings(mappings: list[LabelMapping]) -> list[CommandRecord]:
    return [CommandRecord(name=m.label, url=project) for m in mappings for project in m.projects]


def expand_labels(data: Any, *, file: Optional[str] = None) -> list[dict[str, Any]]:
    """Return the addToProject command records for a raw labels document.

    One record per (label, project) pair, in input order. No filtering, no de-dup.
    Raises CommandValidationError on malformed input.
    """

    mappings = parse_label_mappings(data, file=file)
    return [cmd.to_dict() for cmd in expand_mappings(mappings)]
