"""Unit tests for the world commands."""

import unittest
import sys
import os
from unittest.mock import Mock

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from cavern.commands.base_command import is_undoable
from cavern.commands.movement.movement_commands import MoveCommand, LookAroundCommand
from cavern.commands.combat.combat_commands import AttackCommand
from cavern.commands.inventory.item_commands import PickupItemCommand, ShowInventoryCommand
from cavern.commands.info.info_commands import ShowMapCommand, ShowStatsCommand
from cavern.core.event_system import ENEMY_DEFEATED, ITEM_COLLECTED, PLAYER_DIED
from cavern.game.world.world_manager import GameWorld
from cavern.game.player.character import Player
from cavern.game.npcs.mob import Enemy
from cavern.game.items.item import Item, ItemType
from cavern.shared.types.game_types import Direction, GameStatus, Position

class TestMoveCommand(unittest.TestCase):
    """Test cases for MoveCommand."""

    def setUp(self):
        """Set up test fixtures."""
        self.world = GameWorld.create_default()

    def test_successful_move(self):
        result = MoveCommand(self.world, Direction.NORTH).execute()
        self.assertIn("north", result)
        self.assertEqual(self.world.player.position, Position(2, 1))
        self.assertTrue(self.world.is_visited(Position(2, 1)))

    def test_accepts_direction_name(self):
        MoveCommand(self.world, "east").execute()
        self.assertEqual(self.world.player.position, Position(3, 2))

    def test_unknown_direction_rejected(self):
        with self.assertRaises(ValueError):
            MoveCommand(self.world, "up")

    def test_blocked_by_wall_in_every_direction(self):
        corners = {
            Direction.NORTH: Position(2, 0),
            Direction.SOUTH: Position(2, 4),
            Direction.EAST: Position(4, 2),
            Direction.WEST: Position(0, 2),
        }
        for direction, start in corners.items():
            with self.subTest(direction=direction):
                self.world.player.position = start
                visited_before = set(self.world.visited_rooms)
                result = MoveCommand(self.world, direction).execute()
                self.assertIn("wall", result)
                self.assertEqual(self.world.player.position, start)
                self.assertEqual(self.world.visited_rooms, visited_before)

    def test_blocked_by_living_enemy(self):
        self.world.player.position = Position(1, 2)
        visited_before = set(self.world.visited_rooms)
        result = MoveCommand(self.world, Direction.NORTH).execute()
        self.assertIn("Goblin", result)
        self.assertEqual(self.world.player.position, Position(1, 2))
        self.assertEqual(self.world.visited_rooms, visited_before)

    def test_defeated_enemy_does_not_block(self):
        self.world.player.position = Position(1, 2)
        self.world.enemies[0].alive = False
        MoveCommand(self.world, Direction.NORTH).execute()
        self.assertEqual(self.world.player.position, Position(1, 1))

    def test_undo_restores_position_but_keeps_visited(self):
        command = MoveCommand(self.world, Direction.SOUTH)
        command.execute()
        self.assertEqual(self.world.player.position, Position(2, 3))
        command.undo()
        self.assertEqual(self.world.player.position, Position(2, 2))
        self.assertTrue(self.world.is_visited(Position(2, 3)))

    def test_undo_after_blocked_move_is_noop(self):
        self.world.player.position = Position(2, 0)
        command = MoveCommand(self.world, Direction.NORTH)
        command.execute()
        command.undo()
        self.assertEqual(self.world.player.position, Position(2, 0))

    def test_is_undoable(self):
        self.assertTrue(is_undoable(MoveCommand(self.world, Direction.NORTH)))

class TestAttackCommand(unittest.TestCase):
    """Test cases for AttackCommand."""

    def setUp(self):
        """Set up test fixtures."""
        self.rng = Mock()
        self.rng.randint.return_value = 25
        self.world = GameWorld.create_default(rng=self.rng)
        self.goblin = self.world.enemies[0]

    def test_no_target(self):
        result = AttackCommand(self.world).execute()
        self.assertIn("nobody", result)
        self.assertEqual(self.world.player.health, 100)
        self.assertEqual(self.world.player.gold, 0)
        self.assertEqual([e.health for e in self.world.enemies], [30, 50, 80])

    def test_enemy_survives_and_counter_attacks(self):
        self.world.player.position = Position(1, 1)
        result = AttackCommand(self.world).execute()
        self.assertEqual(self.goblin.health, 15)
        self.assertTrue(self.goblin.alive)
        self.assertEqual(self.world.player.health, 92)
        self.assertIn("strikes back", result)
        self.assertEqual(self.world.player.gold, 0)

    def test_defeat_awards_gold(self):
        self.world.player.position = Position(1, 1)
        defeated = []
        self.world.events.subscribe(ENEMY_DEFEATED, defeated.append)

        AttackCommand(self.world).execute()
        result = AttackCommand(self.world).execute()

        self.assertFalse(self.goblin.alive)
        self.assertEqual(self.world.player.gold, 25)
        self.rng.randint.assert_called_once_with(10, 39)
        self.assertIn("defeated the Goblin", result)
        # No counter-attack on the killing blow
        self.assertEqual(self.world.player.health, 92)
        self.assertEqual(len(defeated), 1)

    def test_defeated_enemy_cannot_be_attacked(self):
        self.world.player.position = Position(1, 1)
        self.goblin.health = 5
        AttackCommand(self.world).execute()
        gold = self.world.player.gold
        result = AttackCommand(self.world).execute()
        self.assertIn("nobody", result)
        self.assertEqual(self.world.player.gold, gold)

    def test_real_reward_stays_in_range(self):
        world = GameWorld.create_default()
        world.player.position = Position(1, 1)
        world.enemies[0].health = 1
        AttackCommand(world).execute()
        self.assertGreaterEqual(world.player.gold, 10)
        self.assertLessEqual(world.player.gold, 39)

    def test_counter_attack_can_kill_player(self):
        self.world.player.position = Position(1, 1)
        self.world.player.health = 5
        died = []
        self.world.events.subscribe(PLAYER_DIED, died.append)

        result = AttackCommand(self.world).execute()

        self.assertEqual(self.world.player.health, 0)
        self.assertFalse(self.world.player.is_alive())
        self.assertEqual(self.world.get_status(), GameStatus.LOST)
        self.assertIn("defeated", result)
        self.assertEqual(len(died), 1)

    def test_attack_is_not_undoable(self):
        self.assertFalse(is_undoable(AttackCommand(self.world)))

class TestPickupItemCommand(unittest.TestCase):
    """Test cases for PickupItemCommand."""

    def setUp(self):
        """Set up test fixtures."""
        self.world = GameWorld.create_default()
        self.player = self.world.player

    def test_nothing_to_pick_up(self):
        result = PickupItemCommand(self.world).execute()
        self.assertIn("nothing here", result)
        self.assertEqual(self.player.inventory, [])

    def test_potion_heals_capped(self):
        self.player.position = Position(1, 3)
        self.player.health = 70
        PickupItemCommand(self.world).execute()
        self.assertEqual(self.player.health, 100)
        self.assertEqual(len(self.player.inventory), 1)
        self.assertIsNone(self.world.get_item_at(Position(1, 3)))

    def test_potion_heals_fixed_amount(self):
        self.player.position = Position(2, 0)
        self.player.health = 30
        PickupItemCommand(self.world).execute()
        self.assertEqual(self.player.health, 80)

    def test_weapon_raises_damage(self):
        self.player.position = Position(0, 0)
        result = PickupItemCommand(self.world).execute()
        self.assertEqual(self.player.damage, 25)
        self.assertIn("25", result)
        self.assertEqual(self.player.inventory[0].item_type, ItemType.WEAPON)

    def test_treasure_adds_gold(self):
        self.player.position = Position(3, 4)
        collected = []
        self.world.events.subscribe(ITEM_COLLECTED, collected.append)
        PickupItemCommand(self.world).execute()
        self.assertEqual(self.player.gold, 100)
        self.assertEqual(collected[0]['item'].name, "Golden Hoard")

    def test_item_cannot_be_collected_twice(self):
        self.player.position = Position(3, 4)
        PickupItemCommand(self.world).execute()
        PickupItemCommand(self.world).execute()
        self.assertEqual(self.player.gold, 100)
        self.assertEqual(len(self.player.inventory), 1)

    def test_pickup_is_not_undoable(self):
        self.assertFalse(is_undoable(PickupItemCommand(self.world)))

class TestReadOnlyCommands(unittest.TestCase):
    """Test cases for look, map, inventory and stats."""

    def setUp(self):
        """Set up test fixtures."""
        self.world = GameWorld(
            Player("Tester", Position(0, 0)),
            [Enemy("Rat", 5, 1, Position(1, 0)), Enemy("Bat", 5, 1, Position(0, 1))],
            {Position(1, 1): Item("Gem", "Shiny", ItemType.TREASURE)},
            map_size=2
        )

    def test_read_only_commands_do_not_mutate(self):
        for command_class in (LookAroundCommand, ShowMapCommand, ShowInventoryCommand, ShowStatsCommand):
            with self.subTest(command=command_class.__name__):
                command = command_class(self.world)
                command.execute()
                self.assertFalse(is_undoable(command))
        self.assertEqual(self.world.player.position, Position(0, 0))
        self.assertEqual(len(self.world.items), 1)
        self.assertEqual(self.world.visited_rooms, {"0,0"})

    def test_inventory_listing(self):
        self.assertIn("empty", ShowInventoryCommand(self.world).execute())
        self.world.player.add_item(Item("Gem", "Shiny", ItemType.TREASURE))
        self.assertIn("1. Gem - Shiny", ShowInventoryCommand(self.world).execute())

    def test_stats(self):
        self.world.enemies[0].alive = False
        stats = ShowStatsCommand(self.world).execute()
        self.assertIn("Health: 100/100", stats)
        self.assertIn("Enemies defeated: 1/2", stats)

    def test_map(self):
        rendered = ShowMapCommand(self.world).execute()
        self.assertIn("@  E", rendered)
        self.assertIn("E  $", rendered)

if __name__ == '__main__':
    unittest.main()
