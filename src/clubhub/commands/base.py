from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..addressbook.manager import ModelManager


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    data: Optional[Any] = None


class Command(ABC):
    """Command Pattern: one user action executed against the model.

    ``undoable`` commands get a history entry from the runner; read-only
    commands and undo/redo themselves do not.
    """

    undoable: bool = True

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult:
        raise NotImplementedError
