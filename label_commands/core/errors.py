"""Error envelopes for label command files.

Every failure carries a stable code, the file it came from and a record path
such as ``[3].addToProject.url``. The CLI maps the class to an exit status:
load and write errors exit 1, validation errors exit 2.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CommandError(Exception):
    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    source = "command"

    def __str__(self) -> str:
        loc = ":".join(p for p in (self.file, self.path) if p) or "<commands>"
        return f"{loc}: {self.code}: {self.message}"

    def to_item(self) -> dict[str, Any]:
        """JSON-ready form used by ``--format json`` payloads."""
        return {
            "code": self.code,
            "message": self.message,
            "file": self.file,
            "path": self.path,
            "severity": "error",
            "source": self.source,
        }


class CommandLoadError(CommandError):
    """Input missing, unreadable, unparseable or not an array."""

    source = "load"


class CommandWriteError(CommandError):
    """Output could not be serialized or written."""

    source = "write"


class CommandValidationError(CommandError):
    """A record is malformed for the operation that read it."""

    source = "validate"
