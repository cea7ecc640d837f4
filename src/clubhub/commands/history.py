from __future__ import annotations

from dataclasses import dataclass

from ..addressbook.manager import ModelManager
from ..core.exceptions import CommandError
from .base import Command, CommandResult


@dataclass(frozen=True)
class UndoCommand(Command):
    undoable = False

    def execute(self, model: ModelManager) -> CommandResult:
        if not model.undo():
            raise CommandError("No more commands to undo!")
        return CommandResult("Undo success!")


@dataclass(frozen=True)
class RedoCommand(Command):
    undoable = False

    def execute(self, model: ModelManager) -> CommandResult:
        if not model.redo():
            raise CommandError("No more commands to redo!")
        return CommandResult("Redo success!")
