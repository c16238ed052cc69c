from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from commandstacker.core.command import CommandLike
from commandstacker.core.stacker import CommandStacker, CommandStackerOptions

logger = logging.getLogger(__name__)


class HistoryController(QObject):
    """
    Wraps a CommandStacker and reports history changes through Qt signals,
    so that Undo/Redo actions can be enabled or disabled.
    """
    history_changed = Signal()
    can_undo_changed = Signal(bool)
    can_redo_changed = Signal(bool)

    def __init__(self, options: Optional[CommandStackerOptions] = None, stacker: Optional[CommandStacker] = None):
        super().__init__()
        if options is not None and stacker is not None:
            raise ValueError("Pass either options or an existing stacker, not both")
        self._stacker = stacker if stacker is not None else CommandStacker(options)
        self._can_undo = self._stacker.can_undo
        self._can_redo = self._stacker.can_redo

    @property
    def stacker(self) -> CommandStacker:
        return self._stacker

    @property
    def can_undo(self) -> bool:
        return self._stacker.can_undo

    @property
    def can_redo(self) -> bool:
        return self._stacker.can_redo

    def add(self, command: CommandLike) -> CommandLike:
        result = self._stacker.add(command)
        self._notify()
        return result

    def run(self, command: CommandLike) -> CommandLike:
        result = self._stacker.run(command)
        self._notify()
        return result

    def undo(self) -> Optional[CommandLike]:
        if not self._stacker.can_undo:
            return None
        try:
            return self._stacker.undo()
        finally:
            # A failing undo callback still removes the command.
            self._notify()

    def redo(self) -> Optional[CommandLike]:
        if not self._stacker.can_redo:
            return None
        try:
            return self._stacker.redo()
        finally:
            self._notify()

    def clear(self):
        if not (self._stacker.can_undo or self._stacker.can_redo):
            return
        self._stacker.clear()
        self._notify()

    def _notify(self):
        can_undo = self._stacker.can_undo
        can_redo = self._stacker.can_redo
        if can_undo != self._can_undo:
            self._can_undo = can_undo
            self.can_undo_changed.emit(can_undo)
        if can_redo != self._can_redo:
            self._can_redo = can_redo
            self.can_redo_changed.emit(can_redo)
        logger.debug(
            "History changed: %d undoable, %d redoable",
            len(self._stacker.undo_stack),
            len(self._stacker.redo_stack),
        )
        self.history_changed.emit()
