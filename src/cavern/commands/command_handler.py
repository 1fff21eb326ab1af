"""Builds the world command that matches a resolved action kind."""

from typing import Optional

from .base_command import BaseCommand
from .movement.movement_commands import MoveCommand, LookAroundCommand
from .combat.combat_commands import AttackCommand
from .inventory.item_commands import PickupItemCommand, ShowInventoryCommand
from .info.info_commands import ShowMapCommand, ShowStatsCommand
from ..shared.types.game_types import ActionKind, MOVEMENT_KINDS

HELP_TEXT = """AVAILABLE COMMANDS:

  Movement:
     n, north, sever      - Go north
     s, south, jih        - Go south
     e, east, vychod      - Go east
     w, west, zapad       - Go west

  Actions:
     attack, utok         - Attack the enemy here
     pickup, seber        - Pick up the item here
     look, rozhliz        - Look around

  Information:
     map, mapa            - Show the map
     inventory, inv       - Show your inventory
     stats                - Show your statistics

  Other:
     undo, zpet           - Undo your last action
     help, napoveda       - Show this help
     quit, konec          - Quit the game"""

class CommandHandler:
    """Creates commands bound to the session's world."""

    def __init__(self, world: 'GameWorld'):
        self.world = world
        self._factories = {
            ActionKind.ATTACK: AttackCommand,
            ActionKind.PICKUP: PickupItemCommand,
            ActionKind.LOOK: LookAroundCommand,
            ActionKind.MAP: ShowMapCommand,
            ActionKind.INVENTORY: ShowInventoryCommand,
            ActionKind.STATS: ShowStatsCommand,
        }

    def create_command(self, kind: ActionKind) -> Optional[BaseCommand]:
        """Build the command for an action kind.

        Returns None for loop-level kinds (undo, help, quit), which are
        not world commands.
        """
        if kind in MOVEMENT_KINDS:
            return MoveCommand(self.world, MOVEMENT_KINDS[kind])
        factory = self._factories.get(kind)
        if factory is None:
            return None
        return factory(self.world)

    def get_help(self) -> str:
        return HELP_TEXT
