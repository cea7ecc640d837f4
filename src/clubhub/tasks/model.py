from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..common.validators import require_non_empty


@dataclass(frozen=True)
class Task:
    """Domain entity: a to-do item.

    Two tasks are the "same task" when their titles match, even if deadline or
    completion differ; collections reject duplicates by that weaker check.
    """

    title: str
    deadline: Optional[datetime] = None
    done: bool = False

    def __post_init__(self):
        object.__setattr__(self, "title", require_non_empty(self.title, "Title"))

    def is_same_task(self, other: "Task") -> bool:
        return other is not None and other.title == self.title

    def mark_done(self) -> "Task":
        return replace(self, done=True)
