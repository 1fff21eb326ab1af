"""Composite command that runs an ordered group of commands as one unit."""

from typing import List, Optional

from .base_command import BaseCommand, UndoableCommand, is_undoable

class MacroCommand(UndoableCommand):
    """Runs its members in order and undoes them in reverse order.

    Members report their own soft failures in their feedback text. An
    exception raised by a member is not caught here, so it aborts the
    rest of the sequence.
    """

    def __init__(self, commands: Optional[List[BaseCommand]] = None, name: str = "macro",
                 start_message: str = "Starting mission...",
                 finish_message: str = "Mission started successfully!"):
        super().__init__(name)
        self.description = "Run a group of commands together"
        self.commands: List[BaseCommand] = list(commands or [])
        self.start_message = start_message
        self.finish_message = finish_message

    def execute(self) -> str:
        lines = [self.start_message]
        for command in self.commands:
            lines.append(command.execute())
        lines.append(self.finish_message)
        return "\n".join(lines)

    def undo(self) -> str:
        lines = ["Reverting mission changes..."]
        for command in reversed(self.commands):
            if is_undoable(command):
                lines.append(command.undo())
        lines.append("Changes reverted!")
        return "\n".join(lines)

    def add_command(self, command: BaseCommand):
        """Append a member command."""
        self.commands.append(command)

    def remove_command(self, command: BaseCommand):
        """Remove a member command if present."""
        if command in self.commands:
            self.commands.remove(command)

    def __len__(self):
        return len(self.commands)
