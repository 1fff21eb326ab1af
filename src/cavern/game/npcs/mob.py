"""Enemy class for the hostile creatures guarding the cave."""

from ...shared.types.game_types import Position

class Enemy:
    """Represents a hostile creature that can fight the player.

    A defeated enemy stays in the world with ``alive`` cleared; it no
    longer blocks its tile and cannot be attacked again.
    """

    def __init__(self, name: str, health: int, damage: int, position: Position):
        """Initialize an enemy."""
        self.name = name
        self.health = health
        self.damage = damage
        self.position = position
        self.alive = True

    def take_damage(self, amount: int) -> bool:
        """Take damage and return True if the enemy is defeated.

        Health is allowed to go below zero; the defeat is recorded on
        ``alive`` and is permanent.
        """
        self.health -= amount
        if self.health <= 0:
            self.alive = False
        return not self.alive

    def is_alive(self) -> bool:
        """Check if the enemy is still standing."""
        return self.alive

    def __repr__(self):
        state = "alive" if self.alive else "defeated"
        return f"Enemy({self.name!r}, hp={self.health}, {state})"
