from __future__ import annotations

from typing import Optional

from .address_book import AddressBook


class VersionedAddressBook(AddressBook):
    """AddressBook with undo/redo history kept as whole-dataset snapshots.

    ``commit()`` records the current state *before* a command mutates it, so the
    top of the undo stack is always the state an ``undo()`` goes back to.
    Callers own the protocol: commit before an undoable command, then either
    keep the entry, drop it with ``rollback_last_commit()`` or restore it with
    ``revert_to_last_commit()``.
    """

    def __init__(self, initial: Optional[AddressBook] = None):
        super().__init__()
        if initial is not None:
            self.reset_data(initial)
        self._undo_stack: list[AddressBook] = []
        self._redo_stack: list[AddressBook] = []
        # Redo history cleared by the latest commit, kept until that commit is
        # either dropped (rollback/revert) or superseded by undo/redo.
        self._redo_before_commit: Optional[list[AddressBook]] = None

    def commit(self) -> None:
        self._undo_stack.append(self.copy())
        self._redo_before_commit = self._redo_stack
        self._redo_stack = []

    def undo(self) -> bool:
        if not self._undo_stack:
            return False
        self._redo_before_commit = None
        self._redo_stack.append(self.copy())
        self.reset_data(self._undo_stack.pop())
        return True

    def redo(self) -> bool:
        if not self._redo_stack:
            return False
        self._redo_before_commit = None
        self._undo_stack.append(self.copy())
        self.reset_data(self._redo_stack.pop())
        return True

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def rollback_last_commit(self) -> None:
        """Forget the most recent commit; the current state is kept as is.

        Redo history cleared by that commit comes back only if nothing has
        changed since, otherwise it would redo onto a different branch.
        """

        if self._undo_stack:
            dropped = self._undo_stack.pop()
            if self == dropped:
                self._restore_redo()
            else:
                self._redo_before_commit = None

    def revert_to_last_commit(self) -> None:
        """Restore the most recent commit and forget it (no redo entry).

        Redo history cleared by that commit comes back.
        """

        if self._undo_stack:
            self.reset_data(self._undo_stack.pop())
            self._restore_redo()

    def _restore_redo(self) -> None:
        if self._redo_before_commit is not None:
            self._redo_stack = self._redo_before_commit
            self._redo_before_commit = None

    def has_uncommitted_changes(self) -> bool:
        if not self._undo_stack:
            return False
        return self != self._undo_stack[-1]

    @property
    def undo_count(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_count(self) -> int:
        return len(self._redo_stack)

    def snapshot(self) -> AddressBook:
        """Plain copy of the current state, without history."""

        return self.copy()
