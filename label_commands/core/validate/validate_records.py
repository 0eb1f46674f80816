from __future__ import annotations

from typing import Any, Optional

from label_commands.core.errors import CommandValidationError


def _is_str(v: Any) -> bool:
    return isinstance(v, str)


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and bool(v.strip())


def validate_label_mappings(
    data: Any, *, file: Optional[str] = None, strict: bool = False
) -> list[CommandValidationError]:
    """Check a labels document: an array of {label, projects} objects.

    Returns errors sorted by record index; an empty list means the document is expandable.
    Any string is a valid label or url for expansion. strict=True also rejects empty or
    whitespace-only strings, which is what the validate command uses.
    """

    is_valid_str = _is_non_empty_str if strict else _is_str
    qualifier = "a non-empty string" if strict else "a string"

    if not isinstance(data, list):
        return [
            CommandValidationError(
                code="E_INVALID_TYPE",
                message="labels document must be an array",
                file=file,
                path="(root)",
            )
        ]

    errors: list[CommandValidationError] = []
    for i, raw in enumerate(data):
        rec_path = f"[{i}]"
        if not isinstance(raw, dict):
            errors.append(
                CommandValidationError(
                    code="E_INVALID_TYPE",
                    message="label mapping must be an object",
                    file=file,
                    path=rec_path,
                )
            )
            continue

        if not is_valid_str(raw.get("label")):
            errors.append(
                CommandValidationError(
                    code="E_REQUIRED_FIELD",
                    message=f"label is required and must be {qualifier}",
                    file=file,
                    path=f"{rec_path}.label",
                )
            )

        projects = raw.get("projects")
        if not isinstance(projects, list):
            errors.append(
                CommandValidationError(
                    code="E_REQUIRED_FIELD",
                    message="projects is required and must be an array",
                    file=file,
                    path=f"{rec_path}.projects",
                )
            )
            continue

        for j, url in enumerate(projects):
            if not is_valid_str(url):
                errors.append(
                    CommandValidationError(
                        code="E_INVALID_TYPE",
                        message=f"project url must be {qualifier}",
                        file=file,
                        path=f"{rec_path}.projects[{j}]",
                    )
                )

    return _sorted(errors)


def validate_command_records(
    data: Any, *, file: Optional[str] = None
) -> list[CommandValidationError]:
    """Check a commands document.

    Stricter than what dedupe needs: dedupe tolerates any object, this is opt-in.
    """

    if not isinstance(data, list):
        return [
            CommandValidationError(
                code="E_INVALID_TYPE",
                message="commands document must be an array",
                file=file,
                path="(root)",
            )
        ]

    errors: list[CommandValidationError] = []
    for i, raw in enumerate(data):
        rec_path = f"[{i}]"
        if not isinstance(raw, dict):
            errors.append(
                CommandValidationError(
                    code="E_INVALID_TYPE",
                    message="command must be an object",
                    file=file,
                    path=rec_path,
                )
            )
            continue

        for field in ("type", "name", "action"):
            if not _is_non_empty_str(raw.get(field)):
                errors.append(
                    CommandValidationError(
                        code="E_REQUIRED_FIELD",
                        message=f"{field} is required and must be a non-empty string",
                        file=file,
                        path=f"{rec_path}.{field}",
                    )
                )

        if "addToProject" not in raw:
            continue
        target = raw["addToProject"]
        if not isinstance(target, dict):
            errors.append(
                CommandValidationError(
                    code="E_INVALID_TYPE",
                    message="addToProject must be an object",
                    file=file,
                    path=f"{rec_path}.addToProject",
                )
            )
            continue
        if not _is_non_empty_str(target.get("url")):
            errors.append(
                CommandValidationError(
                    code="E_REQUIRED_FIELD",
                    message="addToProject.url is required and must be a non-empty string",
                    file=file,
                    path=f"{rec_path}.addToProject.url",
                )
            )

    return _sorted(errors)


def _index_of(path: Optional[str]) -> int:
    # "[12].name" -> 12; "(root)" sorts first.
    if not path or not path.startswith("["):
        return -1
    return int(path[1 : path.index("]")])


def _sorted(errors: list[CommandValidationError]) -> list[CommandValidationError]:
    return sorted(errors, key=lambda e: (_index_of(e.path), e.path or "", e.code))
