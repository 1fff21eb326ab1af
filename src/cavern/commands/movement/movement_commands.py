"""Movement commands for navigating the cave."""

from ..base_command import BaseCommand, UndoableCommand
from ...core.event_system import PLAYER_MOVED
from ...shared.types.game_types import Direction
from ...utils.logger import get_logger

logger = get_logger()

class MoveCommand(UndoableCommand):
    """Command for moving one tile in a direction."""

    def __init__(self, world: 'GameWorld', direction):
        """Initialize the move command.

        The player's position is captured now; undo returns the player to it.
        """
        self.direction = Direction(direction)
        super().__init__(self.direction.value)
        self.description = f"Move {self.direction.value}"
        self.world = world
        self.previous_position = world.player.position

    def execute(self) -> str:
        """Execute the move command."""
        player = self.world.player
        new_pos = player.position.step(self.direction)

        if not self.world.is_in_bounds(new_pos):
            return "You can't go that way - there's a wall!"

        enemy = self.world.get_enemy_at(new_pos)
        if enemy:
            return f"You can't pass - {enemy.name} blocks the way!"

        player.position = new_pos
        self.world.mark_visited(new_pos)
        self.world.publish(PLAYER_MOVED, {'position': new_pos, 'direction': self.direction})
        logger.player_action(player.name, f"moved {self.direction.value}", f"now at {new_pos.key}")
        return f"You head {self.direction.value}..."

    def undo(self) -> str:
        """Put the player back where they stood before this move.

        Explored tiles stay explored.
        """
        self.world.player.position = self.previous_position
        return "You retrace your steps."

class LookAroundCommand(BaseCommand):
    """Command for examining the current tile."""

    def __init__(self, world: 'GameWorld'):
        super().__init__("look")
        self.description = "Look at your surroundings"
        self.world = world

    def execute(self) -> str:
        """Execute the look command."""
        return self.world.describe_current_location()
