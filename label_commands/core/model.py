from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional


CommandType = Literal["label"]
CommandAction = Literal["addToProject"]


@dataclass(frozen=True)
class LabelMapping:
    label: str
    projects: list[str]


@dataclass(frozen=True)
class CommandRecord:
    name: str
    url: Optional[str] = None
    type: CommandType = "label"
    action: CommandAction = "addToProject"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type, "name": self.name, "action": self.action}
        if self.url is not None:
            out["addToProject"] = {"url": self.url}
        return out
