"""Command-line entry point for Cavern Quest."""

import argparse
import sys

import yaml

from .config.config_manager import ConfigManager
from .core.game_engine import GameEngine
from .core.mission_console import MissionConsole
from .game.mission.mission_factory import MissionFactory
from .game.world.world_manager import GameWorld
from .utils.logger import configure_logging, get_logger
from .utils.random_utils import RandomUtils


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Cavern Quest - a turn-based text adventure')
    parser.add_argument('--mode', choices=['adventure', 'mission'], default='adventure',
                        help='Play the cave adventure or open the mission console')
    parser.add_argument('--config-dir', type=str, default=None,
                        help='Directory holding game_settings.yaml')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for gold rewards (unseeded by default)')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable ANSI colors')
    return parser


def setup_logging(config_manager: ConfigManager):
    """Setup logging based on configuration."""
    configure_logging(
        config_manager.get_setting('logging', 'level', default='WARNING'),
        config_manager.get_setting('logging', 'file')
    )
    get_logger().info("Logging initialized")


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config_manager = ConfigManager(args.config_dir)
    except yaml.YAMLError as e:
        print(f"Error parsing configuration file: {e}")
        return 1

    setup_logging(config_manager)

    if args.mode == 'mission':
        MissionConsole(MissionFactory(config_manager)).run()
        return 0

    world = GameWorld.from_config(config_manager, rng=RandomUtils.make_rng(args.seed))
    engine = GameEngine(world, config_manager=config_manager,
                        use_color=False if args.no_color else None)
    engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
