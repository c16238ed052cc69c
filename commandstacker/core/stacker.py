from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from commandstacker.core.command import CommandLike

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100

T = TypeVar("T", bound=CommandLike)


@dataclass
class CommandStackerOptions:
    capacity: Optional[int] = None


def resolve_capacity(capacity: Optional[int]) -> int:
    """Return ``capacity`` if it is a positive integer, else the default."""

    if not capacity or capacity < 0:
        return DEFAULT_CAPACITY
    return int(capacity)


class CommandStacker(Generic[T]):
    """
    Stacks commands to manage undo and redo.

    ``undo_stack`` holds applied commands with the newest at the end,
    ``redo_stack`` holds undone commands with the most recently undone at the
    end. Both are plain lists and may be inspected freely.
    """

    def __init__(self, options: Optional[CommandStackerOptions] = None):
        if options is None:
            options = CommandStackerOptions()
        self.undo_stack: list[T] = []
        self.redo_stack: list[T] = []
        self.capacity = resolve_capacity(options.capacity)

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def add(self, command: T) -> T:
        """
        Adds an already applied command to the undo stack.
        The command is not run. The redo stack is cleared.
        """
        self.undo_stack.append(command)
        self.redo_stack.clear()

        if len(self.undo_stack) > self.capacity:
            # Overflow drops the entry just before the newest one.
            evicted = self.undo_stack.pop(len(self.undo_stack) - 2)
            logger.debug("Capacity %d exceeded, evicted %r", self.capacity, evicted)

        return command

    def run(self, command: T) -> T:
        """
        Runs a command and adds it to the undo stack.
        If ``command.run()`` raises, the stacks are left untouched.
        """
        command.run()
        logger.debug("Ran %r", command)
        return self.add(command)

    def undo(self) -> Optional[T]:
        """
        Undoes the last command, if any.
        """
        if not self.undo_stack:
            return None
        command = self.undo_stack.pop()
        command.undo()
        self.redo_stack.append(command)
        logger.debug("Undid %r", command)
        return command

    def redo(self) -> Optional[T]:
        """
        Redoes the last undone command, if any.
        The capacity is not enforced here.
        """
        if not self.redo_stack:
            return None
        command = self.redo_stack.pop()
        command.run()
        self.undo_stack.append(command)
        logger.debug("Redid %r", command)
        return command

    def clear(self):
        self.undo_stack.clear()
        self.redo_stack.clear()
