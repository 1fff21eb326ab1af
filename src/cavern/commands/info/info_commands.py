"""Read-only commands that report on the world."""

from ..base_command import BaseCommand

class ShowMapCommand(BaseCommand):
    """Command for drawing the cave map."""

    def __init__(self, world: 'GameWorld'):
        super().__init__("map")
        self.description = "Show the map"
        self.world = world

    def execute(self) -> str:
        return self.world.render_map()

class ShowStatsCommand(BaseCommand):
    """Command for showing player statistics."""

    def __init__(self, world: 'GameWorld'):
        super().__init__("stats")
        self.description = "Show your statistics"
        self.world = world

    def execute(self) -> str:
        player = self.world.player
        defeated = len(self.world.enemies) - len(self.world.living_enemies())
        return "\n".join([
            "PLAYER STATISTICS:",
            f"   Name: {player.name}",
            f"   Health: {player.health}/{player.max_health}",
            f"   Damage: {player.damage}",
            f"   Gold: {player.gold}",
            f"   Items: {len(player.inventory)}",
            f"   Enemies defeated: {defeated}/{len(self.world.enemies)}",
        ])
