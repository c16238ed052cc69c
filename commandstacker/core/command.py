from abc import ABC, abstractmethod
from typing import Callable, Iterable, Protocol, runtime_checkable


@runtime_checkable
class CommandLike(Protocol):
    """Anything with a ``run`` and an ``undo`` method can be stacked."""

    def run(self) -> None:
        ...

    def undo(self) -> None:
        ...


class Command(ABC):
    """
    Abstract base class for commands.
    """

    @abstractmethod
    def run(self):
        """
        Performs the forward action. May be called again on redo.
        """
        raise NotImplementedError

    @abstractmethod
    def undo(self):
        """
        Reverses the most recent run of this command.
        """
        raise NotImplementedError


RESERVED_FIELDS = frozenset({"run", "undo", "run_func", "undo_func"})


class FunctionCommand(Command):
    """A command built from a pair of callables."""
    def __init__(self, run_func: Callable[[], None], undo_func: Callable[[], None], name: str = "", **fields):
        reserved = RESERVED_FIELDS.intersection(fields)
        if reserved:
            raise ValueError(f"Reserved field names: {', '.join(sorted(reserved))}")
        self.run_func = run_func
        self.undo_func = undo_func
        self.name = name
        for key, value in fields.items():
            setattr(self, key, value)

    def run(self):
        self.run_func()

    def undo(self):
        self.undo_func()

    def __str__(self):
        return self.name or super().__str__()


class CompositeCommand(Command):
    """A command that is composed of other commands."""
    def __init__(self, commands: Iterable[CommandLike], name: str = "Composite"):
        self.commands = list(commands)
        self.name = name

    def run(self):
        for command in self.commands:
            command.run()

    def undo(self):
        for command in reversed(self.commands):
            command.undo()

    def __str__(self):
        return self.name
