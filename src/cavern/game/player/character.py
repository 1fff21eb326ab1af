"""Character class representing the player's avatar in the cave."""

from typing import List

from ...shared.types.game_types import Position
from ...shared.constants.game_constants import (
    STARTING_NAME, STARTING_HEALTH, STARTING_MAX_HEALTH,
    STARTING_DAMAGE, STARTING_GOLD
)

class Player:
    """Represents the single adventurer exploring the world."""

    def __init__(self, name: str = STARTING_NAME, position: Position = None,
                 health: int = STARTING_HEALTH, max_health: int = STARTING_MAX_HEALTH,
                 damage: int = STARTING_DAMAGE, gold: int = STARTING_GOLD):
        """Initialize a player."""
        if max_health <= 0:
            raise ValueError("max_health must be positive")
        self.name = name
        self.max_health = max_health
        self.health = max(0, min(health, max_health))
        self.damage = damage
        self.position = position if position is not None else Position(0, 0)
        self.inventory: List['Item'] = []
        self.gold = max(0, gold)

    def take_damage(self, amount: int):
        """Apply damage to the player, never dropping below zero."""
        self.health = max(0, self.health - amount)

    def heal(self, amount: int):
        """Heal the player up to max health."""
        self.health = min(self.max_health, self.health + amount)

    def add_gold(self, amount: int):
        """Give gold to the player."""
        self.gold += amount

    def add_item(self, item: 'Item'):
        """Append an item to the inventory."""
        self.inventory.append(item)

    def has_item(self, name: str) -> bool:
        """Check if an item with this name has been collected."""
        return any(item.name.lower() == name.lower() for item in self.inventory)

    def is_alive(self) -> bool:
        """Check if the player is alive."""
        return self.health > 0

    def __repr__(self):
        return f"Player({self.name!r}, hp={self.health}/{self.max_health}, pos=({self.position.x},{self.position.y}))"
