"""Unit tests for configuration loading and world setup from config."""

import unittest
import sys
import os
import random
import tempfile

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

import yaml

from cavern.config.config_manager import ConfigManager
from cavern.core.game_engine import GameEngine
from cavern.game.world.world_manager import GameWorld
from cavern.shared.types.game_types import Position

SETTINGS = """
world:
  map_size: 3
  player: {name: "Tess", damage: 7, position: [0, 0]}
  enemies:
    - {name: "Slime", health: 5, damage: 1, position: [2, 2]}
  items:
    - {name: "Dagger", description: "+3 damage", type: weapon, position: [1, 0]}
rules:
  weapon_bonus: 3
  gold_reward: [1, 2]
display:
  colors: false
"""

class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_dir = self.temp_dir.name

    def tearDown(self):
        self.temp_dir.cleanup()

    def write_settings(self, text):
        with open(os.path.join(self.config_dir, "game_settings.yaml"), "w", encoding="utf-8") as f:
            f.write(text)

    def test_missing_file_gives_empty_settings(self):
        config = ConfigManager(self.config_dir)
        self.assertEqual(config.game_settings, {})
        self.assertEqual(config.get_setting('world', 'map_size', default=5), 5)

    def test_nested_lookup(self):
        self.write_settings(SETTINGS)
        config = ConfigManager(self.config_dir)
        self.assertEqual(config.get_setting('world', 'map_size'), 3)
        self.assertEqual(config.get_setting('rules', 'gold_reward'), [1, 2])
        self.assertIsNone(config.get_setting('rules', 'missing'))
        self.assertEqual(config.get_setting('world', 'map_size', 'deeper', default="x"), "x")

    def test_malformed_file_raises(self):
        self.write_settings("world: [unclosed")
        with self.assertRaises(yaml.YAMLError):
            ConfigManager(self.config_dir)

    def test_reload(self):
        config = ConfigManager(self.config_dir)
        self.write_settings(SETTINGS)
        config.reload_config()
        self.assertEqual(config.get_setting('world', 'map_size'), 3)

    def test_world_from_config(self):
        self.write_settings(SETTINGS)
        config = ConfigManager(self.config_dir)
        world = GameWorld.from_config(config, rng=random.Random(1))

        self.assertEqual(world.map_size, 3)
        self.assertEqual(world.player.name, "Tess")
        self.assertEqual(world.player.damage, 7)
        self.assertEqual(world.player.position, Position(0, 0))
        self.assertEqual([e.name for e in world.enemies], ["Slime"])
        self.assertEqual(world.get_item_at(Position(1, 0)).name, "Dagger")
        self.assertEqual(world.rules.weapon_bonus, 3)
        self.assertEqual(world.rules.gold_reward, (1, 2))
        # Untouched rules keep their defaults
        self.assertEqual(world.rules.potion_heal, 50)

    def test_engine_reads_display_setting(self):
        self.write_settings(SETTINGS)
        config = ConfigManager(self.config_dir)
        engine = GameEngine(GameWorld.from_config(config), config_manager=config)
        self.assertFalse(engine.use_color)

    def test_shipped_settings_match_defaults(self):
        project_config = os.path.join(os.path.dirname(__file__), '..', '..', 'config')
        config = ConfigManager(project_config)
        configured = GameWorld.from_config(config)
        default = GameWorld.create_default()
        self.assertEqual(configured.map_rows(), default.map_rows())
        self.assertEqual(configured.rules, default.rules)

if __name__ == '__main__':
    unittest.main()
