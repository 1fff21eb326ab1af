"""Base command classes for every action that touches the world."""

from abc import ABC, abstractmethod

class BaseCommand(ABC):
    """Base class for all commands.

    ``execute`` performs one discrete game event and returns the feedback
    text for the player.
    """

    def __init__(self, name: str):
        """Initialize a command."""
        self.name = name
        self.description = ""

    @abstractmethod
    def execute(self) -> str:
        """Execute the command."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"

class UndoableCommand(BaseCommand):
    """A command that can reverse the state changes it made."""

    @abstractmethod
    def undo(self) -> str:
        """Restore the state this command changed."""
        pass

def is_undoable(command: BaseCommand) -> bool:
    """Check whether a command supports undo."""
    return isinstance(command, UndoableCommand)
