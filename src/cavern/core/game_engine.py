"""Game engine that drives one adventure session from the prompt."""

from typing import Callable, Optional

from .event_system import ENEMY_DEFEATED, ITEM_COLLECTED, PLAYER_DIED
from ..commands.command_handler import CommandHandler
from ..commands.command_invoker import CommandInvoker
from ..shared.types.game_types import ActionKind, GameStatus
from ..shared.constants.game_constants import STATUS_BAR_WIDTH
from ..utils.logger import get_logger
from ..utils.parser import CommandParser
from ..utils.colors import (
    announcement, damage_to_player, death_message, error_message, item_found, success_message
)

HEADER = """+-------------------------------------------------------+
|                 ADVENTURE IN THE CAVE                 |
|                Command Pattern RPG Game               |
+-------------------------------------------------------+"""

INTRO = """You wake up in a dark cave. Your task is to explore the
whole cave, defeat every enemy and find every treasure!

TIP: Type 'help' to list all commands."""

UNKNOWN_COMMAND = "Unknown command! Type 'help' for the list of commands."
GAME_OVER = "The game is over. No further actions are accepted."
GOODBYE = "Thanks for playing! Goodbye!"
PROMPT = "What will you do? "


class GameEngine:
    """Reads player input, runs commands and watches for the end of the game."""

    def __init__(self, world: 'GameWorld', invoker: Optional[CommandInvoker] = None,
                 config_manager=None, use_color: Optional[bool] = None,
                 parser: Optional[CommandParser] = None):
        """Initialize the game engine."""
        self.logger = get_logger()
        self.world = world
        self.invoker = invoker or CommandInvoker()
        self.parser = parser or CommandParser()
        self.command_handler = CommandHandler(world)
        if use_color is None:
            use_color = bool(config_manager.get_setting('display', 'colors', default=True)) \
                if config_manager else False
        self.use_color = use_color
        self.status = world.get_status()
        self.quit_requested = False

        self._setup_connections()

    def _setup_connections(self):
        """Subscribe to world events."""
        for event_type, handler in self._event_handlers():
            self.world.events.subscribe(event_type, handler)

    def _teardown_connections(self):
        """Unsubscribe from world events once the session is over."""
        for event_type, handler in self._event_handlers():
            self.world.events.unsubscribe(event_type, handler)

    def _event_handlers(self):
        return [
            (ENEMY_DEFEATED, self._on_enemy_defeated),
            (ITEM_COLLECTED, self._on_item_collected),
            (PLAYER_DIED, self._on_player_died),
        ]

    def _on_enemy_defeated(self, data):
        remaining = len(self.world.living_enemies())
        self.logger.info(f"{data['enemy'].name} defeated, {remaining} enemies remain")

    def _on_item_collected(self, data):
        self.logger.info(f"{data['item'].name} collected, {len(self.world.items)} items remain")

    def _on_player_died(self, data):
        self.logger.info(f"Player slain by {data['enemy'].name}")

    @property
    def is_running(self) -> bool:
        """True while the loop should keep prompting."""
        return not self.status.is_terminal and not self.quit_requested

    def process_input(self, input_text: str) -> str:
        """Handle one line of input and return the text to show."""
        if self.status.is_terminal:
            return error_message(GAME_OVER, self.use_color)

        if not input_text.strip():
            return ""

        kind = self.parser.parse_input(input_text)
        if kind is None:
            return error_message(UNKNOWN_COMMAND, self.use_color)

        if kind is ActionKind.QUIT:
            self.quit_requested = True
            self.logger.info("Player quit")
            return success_message(GOODBYE, self.use_color)
        if kind is ActionKind.HELP:
            return self.command_handler.get_help()
        if kind is ActionKind.UNDO:
            result = self.invoker.undo_last_command()
        else:
            health_before = self.world.player.health
            command = self.command_handler.create_command(kind)
            result = self.invoker.execute_command(command)
            if self.world.player.health < health_before:
                result = damage_to_player(result, self.use_color)

        return self._check_end(result)

    def _check_end(self, result: str) -> str:
        """Re-evaluate the game status after an action and append any ending."""
        self.status = self.world.get_status()
        if self.status is GameStatus.WON:
            self.logger.info(f"Game won after {self.invoker.get_history_size()} actions")
            return f"{result}\n\n{self.victory_text()}"
        if self.status is GameStatus.LOST:
            self.logger.info("Game lost")
            return f"{result}\n\n{death_message('You have fallen. The game is over.', self.use_color)}"
        return result

    def victory_text(self) -> str:
        player = self.world.player
        return announcement("\n".join([
            "=" * STATUS_BAR_WIDTH,
            "CONGRATULATIONS!",
            "You have completed the game!",
            f"Total gold: {player.gold}",
            f"Remaining health: {player.health}/{player.max_health}",
            "=" * STATUS_BAR_WIDTH,
        ]), self.use_color)

    def run(self, input_func: Callable[[str], str] = input,
            output_func: Callable[[str], None] = print) -> GameStatus:
        """Run the prompt loop until the game ends or the player quits."""
        output_func(HEADER)
        output_func(INTRO)
        output_func(self.world.describe_current_location())

        while self.is_running:
            output_func(item_found(self.world.render_status(), self.use_color))
            try:
                line = input_func(PROMPT)
            except (EOFError, KeyboardInterrupt):
                output_func(success_message(GOODBYE, self.use_color))
                break

            response = self.process_input(line)
            if response:
                output_func(response)

        self._teardown_connections()
        return self.status
