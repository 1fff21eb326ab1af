"""Invoker that runs commands and keeps the history used for undo."""

from typing import List

from .base_command import BaseCommand, is_undoable
from ..utils.logger import get_logger

NOTHING_TO_UNDO = "Nothing to undo."

class CommandInvoker:
    """Executes commands and undoes the most recent one."""

    def __init__(self):
        """Initialize the invoker with an empty history."""
        self.history: List[BaseCommand] = []
        self.logger = get_logger()

    def execute_command(self, command: BaseCommand) -> str:
        """Execute a command and record it.

        Every attempted command is recorded, including ones that failed
        softly. If ``execute`` raises, nothing is recorded.
        """
        result = command.execute()
        self.history.append(command)
        self.logger.debug(f"Executed {command.name} (history: {len(self.history)})")
        return result

    def undo_last_command(self) -> str:
        """Undo the most recent command, if there is one."""
        if not self.history:
            return NOTHING_TO_UNDO

        command = self.history.pop()
        if not is_undoable(command):
            self.logger.debug(f"Dropped non-undoable {command.name} from history")
            return f"The last action ({command.name}) cannot be undone."

        self.logger.debug(f"Undoing {command.name}")
        return command.undo()

    def clear_history(self) -> str:
        """Discard the whole history."""
        self.history = []
        return "Command history cleared."

    def get_history_size(self) -> int:
        """Get the number of recorded commands."""
        return len(self.history)

    def get_history(self) -> List[str]:
        """Get the names of recorded commands, oldest first."""
        return [command.name for command in self.history]
