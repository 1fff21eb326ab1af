"""Combat-related commands for fighting."""

from ..base_command import BaseCommand
from ...core.event_system import ENEMY_DEFEATED, PLAYER_DAMAGED, PLAYER_DIED
from ...utils.logger import get_logger

logger = get_logger()

class AttackCommand(BaseCommand):
    """Command for attacking the enemy on the player's tile.

    Combat cannot be undone, so this is a plain command.
    """

    def __init__(self, world: 'GameWorld'):
        super().__init__("attack")
        self.description = "Attack the enemy in front of you"
        self.world = world

    def execute(self) -> str:
        """Execute the attack command."""
        player = self.world.player
        enemy = self.world.get_enemy_at(player.position)

        if not enemy:
            return "There is nobody here to attack!"

        lines = [f"You attack the {enemy.name}!",
                 f"You deal {player.damage} damage!"]

        if enemy.take_damage(player.damage):
            gold = self.world.roll_gold_reward()
            player.add_gold(gold)
            logger.combat_action(player.name, enemy.name, "defeated", f"{gold} gold")
            self.world.publish(ENEMY_DEFEATED, {'enemy': enemy, 'gold': gold})
            lines.append(f"You defeated the {enemy.name}!")
            lines.append(f"You gain {gold} gold!")
            return "\n".join(lines)

        lines.append(f"The {enemy.name} has {enemy.health} HP left.")

        # Counter-attack
        player.take_damage(enemy.damage)
        logger.combat_action(enemy.name, player.name, "hit", f"{enemy.damage} damage")
        self.world.publish(PLAYER_DAMAGED, {'enemy': enemy, 'damage': enemy.damage})
        lines.append(f"The {enemy.name} strikes back!")
        lines.append(f"You take {enemy.damage} damage!")

        if not player.is_alive():
            logger.player_action(player.name, "was slain", f"by {enemy.name}")
            self.world.publish(PLAYER_DIED, {'enemy': enemy})
            lines.append("You have been defeated!")
        else:
            lines.append(f"You have {player.health} HP left.")

        return "\n".join(lines)
