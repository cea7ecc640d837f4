from __future__ import annotations

import logging
from typing import Optional

from ..addressbook.manager import ModelManager
from ..core.exceptions import DomainError
from .base import Command, CommandResult

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs commands so each undoable command is one atomic history step.

    The state before an undoable command is committed first. If the command
    fails, for any reason, the model goes back to that state even when the
    command had already changed part of it. If it succeeds without changing
    anything, the history entry is dropped. Either way redo history that
    existed before the command is kept.
    """

    def __init__(self, model: ModelManager, *, log: Optional[logging.Logger] = None):
        self._model = model
        self._log = log or logger

    @property
    def model(self) -> ModelManager:
        return self._model

    def run(self, command: Command) -> CommandResult:
        self._log.info("Executing %s", type(command).__name__)
        if not command.undoable:
            return command.execute(self._model)

        self._model.commit()
        try:
            result = command.execute(self._model)
        except DomainError as e:
            self._log.info("%s failed: %s", type(command).__name__, e)
            self._model.revert_to_last_commit()
            raise
        except Exception:
            self._log.exception("%s crashed; restoring previous state", type(command).__name__)
            self._model.revert_to_last_commit()
            raise

        if not self._model.has_uncommitted_changes():
            self._model.rollback_last_commit()
        return result
