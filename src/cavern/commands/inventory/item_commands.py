"""Item and inventory commands."""

from ..base_command import BaseCommand
from ...core.event_system import ITEM_COLLECTED
from ...game.items.item import ItemType
from ...utils.logger import get_logger

logger = get_logger()

class PickupItemCommand(BaseCommand):
    """Command for picking up the item on the player's tile.

    Picking up applies the item at once: potions heal, weapons raise
    damage and treasure adds gold.
    """

    def __init__(self, world: 'GameWorld'):
        super().__init__("pickup")
        self.description = "Pick up an item"
        self.world = world

    def execute(self) -> str:
        """Execute the pickup command."""
        player = self.world.player
        item = self.world.get_item_at(player.position)

        if not item:
            return "There is nothing here to pick up!"

        player.add_item(item)
        self.world.remove_item_at(player.position)
        lines = [f"You picked up: {item.name}"]

        rules = self.world.rules
        if item.item_type == ItemType.POTION:
            player.heal(rules.potion_heal)
            lines.append(f"You restore {rules.potion_heal} HP! (Current: {player.health})")
        elif item.item_type == ItemType.WEAPON:
            player.damage += rules.weapon_bonus
            lines.append(f"Your attack rises to {player.damage}!")
        elif item.item_type == ItemType.TREASURE:
            player.add_gold(rules.treasure_gold)
            lines.append(f"You gain {rules.treasure_gold} gold!")

        logger.player_action(player.name, "picked up", item.name)
        self.world.publish(ITEM_COLLECTED, {'item': item, 'position': player.position})
        return "\n".join(lines)

class ShowInventoryCommand(BaseCommand):
    """Command for viewing inventory."""

    def __init__(self, world: 'GameWorld'):
        super().__init__("inventory")
        self.description = "View your inventory"
        self.world = world

    def execute(self) -> str:
        """Execute the inventory command."""
        inventory = self.world.player.inventory
        lines = ["INVENTORY:"]
        if not inventory:
            lines.append("   Your inventory is empty.")
        else:
            for index, item in enumerate(inventory, 1):
                lines.append(f"   {index}. {item.name} - {item.description}")
        return "\n".join(lines)
