"""Common type definitions used throughout the game."""

from enum import Enum
from typing import Tuple
from dataclasses import dataclass

class Direction(Enum):
    """Cardinal directions the player can walk."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit (dx, dy) step for this direction. North decreases y."""
        return DIRECTION_OFFSETS[self]

DIRECTION_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

class ActionKind(Enum):
    """Closed set of things the player can ask for at the prompt."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    ATTACK = "attack"
    PICKUP = "pickup"
    LOOK = "look"
    MAP = "map"
    INVENTORY = "inventory"
    STATS = "stats"
    UNDO = "undo"
    HELP = "help"
    QUIT = "quit"

MOVEMENT_KINDS = {
    ActionKind.NORTH: Direction.NORTH,
    ActionKind.SOUTH: Direction.SOUTH,
    ActionKind.EAST: Direction.EAST,
    ActionKind.WEST: Direction.WEST,
}

class GameStatus(Enum):
    """Session state observed by the game loop."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS

@dataclass(frozen=True)
class Position:
    """A tile on the square cave grid."""
    x: int
    y: int

    @property
    def key(self) -> str:
        """Canonical identity used for set and dict membership."""
        return position_key(self)

    def step(self, direction: Direction) -> 'Position':
        """Return the neighbouring position in a direction."""
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)

def position_key(pos: Position) -> str:
    """Encode a position as 'x,y'."""
    return f"{pos.x},{pos.y}"

@dataclass(frozen=True)
class HUDConfig:
    """Which HUD widgets the HUD manager should show."""
    show_health: bool = True
    show_mana: bool = True
    show_minimap: bool = True
