"""Bounded undo/redo command history."""

from commandstacker.core.command import Command, CommandLike, CompositeCommand, FunctionCommand
from commandstacker.core.stacker import DEFAULT_CAPACITY, CommandStacker, CommandStackerOptions

__all__ = [
    "Command",
    "CommandLike",
    "CommandStacker",
    "CommandStackerOptions",
    "CompositeCommand",
    "DEFAULT_CAPACITY",
    "FunctionCommand",
]
