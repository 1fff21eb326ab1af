"""Manages the cave world: the player, enemies, items and explored tiles."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..player.character import Player
from ..npcs.mob import Enemy
from ..items.item import Item
from ...core.event_system import EventSystem
from ...shared.types.game_types import GameStatus, Position, position_key
from ...shared.constants import game_constants as constants
from ...utils.logger import get_logger
from ...utils.random_utils import RandomUtils

# Map glyphs, in priority order
PLAYER_GLYPH = '@'
ENEMY_GLYPH = 'E'
ITEM_GLYPH = '$'
VISITED_GLYPH = '.'
UNKNOWN_GLYPH = '?'


@dataclass
class GameRules:
    """Tunable amounts used by the pickup and combat actions."""
    potion_heal: int = constants.POTION_HEAL_AMOUNT
    weapon_bonus: int = constants.WEAPON_DAMAGE_BONUS
    treasure_gold: int = constants.TREASURE_GOLD_AMOUNT
    gold_reward: Tuple[int, int] = (constants.GOLD_REWARD_MIN, constants.GOLD_REWARD_MAX)


class GameWorld:
    """Owns all mutable game state for one session.

    Actions receive the world at construction time and mutate it through
    the query and mutation methods below.
    """

    def __init__(self, player: Player, enemies: Iterable[Enemy] = (),
                 items: Optional[Dict[Position, Item]] = None,
                 map_size: int = constants.DEFAULT_MAP_SIZE,
                 room_descriptions: Optional[List[str]] = None,
                 rules: Optional[GameRules] = None,
                 rng=None, events: Optional[EventSystem] = None):
        """Initialize the world.

        Args:
            player: The adventurer; must start inside the map
            enemies: Enemies seeded for the whole session
            items: Items keyed by the tile they lie on
            map_size: Side length of the square map
            room_descriptions: Flavor lines for empty tiles
            rules: Effect and reward amounts
            rng: Source of gold rewards (anything with ``randint``)
            events: Event system that actions publish to
        """
        if map_size <= 0:
            raise ValueError("map_size must be positive")

        self.logger = get_logger()
        self.map_size = map_size
        self.player = player
        self.enemies: List[Enemy] = list(enemies)
        self.items: Dict[str, Item] = {}
        self.room_descriptions = list(room_descriptions or constants.ROOM_DESCRIPTIONS)
        self.rules = rules or GameRules()
        self.rng = rng if rng is not None else RandomUtils.make_rng()
        self.events = events if events is not None else EventSystem()

        if not self.is_in_bounds(player.position):
            raise ValueError(f"Player start {player.position} is outside the map")

        occupied = set()
        for enemy in self.enemies:
            if not self.is_in_bounds(enemy.position):
                raise ValueError(f"Enemy {enemy.name} is outside the map")
            if enemy.alive:
                if enemy.position.key in occupied:
                    raise ValueError(f"Two living enemies share tile {enemy.position.key}")
                occupied.add(enemy.position.key)

        for pos, item in (items or {}).items():
            if not self.is_in_bounds(pos):
                raise ValueError(f"Item {item.name} is outside the map")
            self.items[self.position_key(pos)] = item

        self.visited_rooms = {self.position_key(player.position)}

    @classmethod
    def create_default(cls, rng=None, events: Optional[EventSystem] = None) -> 'GameWorld':
        """Build the fixed starting layout from the built-in constants."""
        return cls._build({}, {}, rng, events)

    @classmethod
    def from_config(cls, config_manager, rng=None, events: Optional[EventSystem] = None) -> 'GameWorld':
        """Build the starting layout from the ``world`` and ``rules`` config sections."""
        return cls._build(config_manager.get_section('world'),
                          config_manager.get_section('rules'), rng, events)

    @classmethod
    def _build(cls, world_cfg: dict, rules_cfg: dict, rng, events) -> 'GameWorld':
        player_cfg = world_cfg.get('player') or {}
        start = player_cfg.get('position', constants.STARTING_POSITION)
        max_health = player_cfg.get('max_health', constants.STARTING_MAX_HEALTH)
        player = Player(
            name=player_cfg.get('name', constants.STARTING_NAME),
            position=Position(*start),
            health=player_cfg.get('health', max_health),
            max_health=max_health,
            damage=player_cfg.get('damage', constants.STARTING_DAMAGE),
            gold=player_cfg.get('gold', constants.STARTING_GOLD)
        )

        enemies = [
            Enemy(e['name'], e['health'], e['damage'], Position(*e['position']))
            for e in (world_cfg.get('enemies') or constants.DEFAULT_ENEMIES)
        ]

        items = {}
        for entry in (world_cfg.get('items') or constants.DEFAULT_ITEMS):
            pos = Position(*entry['position'])
            if pos in items:
                raise ValueError(f"Two items share tile {pos.key}")
            items[pos] = Item.from_dict(entry)

        reward = rules_cfg.get('gold_reward', (constants.GOLD_REWARD_MIN, constants.GOLD_REWARD_MAX))
        rules = GameRules(
            potion_heal=rules_cfg.get('potion_heal', constants.POTION_HEAL_AMOUNT),
            weapon_bonus=rules_cfg.get('weapon_bonus', constants.WEAPON_DAMAGE_BONUS),
            treasure_gold=rules_cfg.get('treasure_gold', constants.TREASURE_GOLD_AMOUNT),
            gold_reward=(int(reward[0]), int(reward[1]))
        )

        return cls(
            player,
            enemies,
            items,
            map_size=world_cfg.get('map_size', constants.DEFAULT_MAP_SIZE),
            room_descriptions=world_cfg.get('room_descriptions'),
            rules=rules,
            rng=rng,
            events=events
        )

    @staticmethod
    def position_key(pos: Position) -> str:
        """Canonical key for a position."""
        return position_key(pos)

    # Queries and mutations

    def get_enemy_at(self, pos: Position) -> Optional[Enemy]:
        """Get the first living enemy standing on a tile."""
        for enemy in self.enemies:
            if enemy.alive and enemy.position == pos:
                return enemy
        return None

    def get_item_at(self, pos: Position) -> Optional[Item]:
        """Get the item lying on a tile."""
        return self.items.get(self.position_key(pos))

    def remove_item_at(self, pos: Position):
        """Remove the item on a tile. Does nothing if there is none."""
        self.items.pop(self.position_key(pos), None)

    def is_in_bounds(self, pos: Position) -> bool:
        """Check that a position lies on the map."""
        return 0 <= pos.x < self.map_size and 0 <= pos.y < self.map_size

    def mark_visited(self, pos: Position):
        """Record a tile as explored. Explored tiles are never forgotten."""
        self.visited_rooms.add(self.position_key(pos))

    def is_visited(self, pos: Position) -> bool:
        return self.position_key(pos) in self.visited_rooms

    def living_enemies(self) -> List[Enemy]:
        return [enemy for enemy in self.enemies if enemy.alive]

    def all_enemies_defeated(self) -> bool:
        return all(not enemy.alive for enemy in self.enemies)

    def all_items_collected(self) -> bool:
        return not self.items

    def get_status(self) -> GameStatus:
        """Work out whether the session is won, lost or still running."""
        if not self.player.is_alive():
            return GameStatus.LOST
        if self.all_enemies_defeated() and self.all_items_collected():
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    def roll_gold_reward(self) -> int:
        """Draw the gold reward for defeating an enemy."""
        return RandomUtils.roll_range(self.rng, self.rules.gold_reward)

    def publish(self, event_type: str, data=None):
        """Publish a world event."""
        self.events.publish(event_type, data)

    # Rendering

    def describe_current_location(self) -> str:
        """Describe the player's tile.

        A living enemy is reported before an item; an empty tile gets a
        flavor line picked from its coordinates.
        """
        pos = self.player.position
        lines = [f"You are at [{pos.x}, {pos.y}]."]

        enemy = self.get_enemy_at(pos)
        item = self.get_item_at(pos)
        if enemy:
            lines.append(f"Before you stands: {enemy.name} (HP: {enemy.health})")
        elif item:
            lines.append(f"You see here: {item.name} - {item.description}")
        else:
            index = (pos.x + pos.y * self.map_size) % len(self.room_descriptions)
            lines.append(self.room_descriptions[index])

        return "\n".join(lines)

    def tile_glyph(self, pos: Position) -> str:
        """Glyph for one tile: player > enemy > item > visited > unknown."""
        if pos == self.player.position:
            return PLAYER_GLYPH
        if self.get_enemy_at(pos):
            return ENEMY_GLYPH
        if self.position_key(pos) in self.items:
            return ITEM_GLYPH
        if self.is_visited(pos):
            return VISITED_GLYPH
        return UNKNOWN_GLYPH

    def map_rows(self) -> List[str]:
        """One string per row y, one glyph per column x."""
        return [
            "".join(self.tile_glyph(Position(x, y)) for x in range(self.map_size))
            for y in range(self.map_size)
        ]

    def render_map(self) -> str:
        """Render the map grid with its legend."""
        lines = ["CAVE MAP:", ""]
        lines.extend(" " + "  ".join(row) for row in self.map_rows())
        lines.append("")
        lines.append(f"Legend: {PLAYER_GLYPH}=You {ENEMY_GLYPH}=Enemy {ITEM_GLYPH}=Item "
                     f"{VISITED_GLYPH}=Visited {UNKNOWN_GLYPH}=Unknown")
        return "\n".join(lines)

    def render_status(self, width: int = constants.STATUS_BAR_WIDTH) -> str:
        """Render the one-glance status bar shown before each prompt."""
        p = self.player
        names = ", ".join(item.name for item in p.inventory) if p.inventory else "empty"
        return "\n".join([
            "=" * width,
            f"HP: {p.health}/{p.max_health}  |  DMG: {p.damage}  |  Gold: {p.gold}",
            f"Inventory ({len(p.inventory)}): {names}",
            f"Enemies remaining: {len(self.living_enemies())}",
            "=" * width,
        ])
