"""Menu console for assembling and running mission commands."""

from typing import Callable, List

from ..commands.command_invoker import CommandInvoker
from ..commands.mission.mission_commands import MissionError
from ..game.mission.mission_factory import MissionFactory
from ..shared.types.game_types import HUDConfig
from ..shared.constants import game_constants as constants
from ..utils.logger import get_logger

MENU = """+-------------------------------------------------------+
|                       MAIN MENU                       |
+-------------------------------------------------------+
|  1  Start the complete mission                        |
|  2  Load map                                          |
|  3  Initialize characters                             |
|  4  Check inventory                                   |
|  5  Play sound effects                                |
|  6  Set up HUD                                        |
|  7  Show command history                              |
|  8  Undo last command                                 |
|  9  Clear history                                     |
|  0  Exit                                              |
+-------------------------------------------------------+"""


def parse_int(text: str, default: int) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return default


def parse_float(text: str, default: float) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        return default
    return value or default


def parse_ids(text: str) -> List[int]:
    """Parse comma separated ids, skipping anything that is not a number."""
    ids = []
    for part in text.split(","):
        try:
            ids.append(int(part.strip()))
        except ValueError:
            continue
    return ids


def is_yes(text: str) -> bool:
    return text.strip().lower() in ("y", "yes", "a", "ano")


class MissionConsole:
    """Numbered menu that feeds mission commands to an invoker."""

    def __init__(self, factory: MissionFactory = None, invoker: CommandInvoker = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.factory = factory or MissionFactory()
        self.invoker = invoker or CommandInvoker()
        self.input = input_func
        self.output = output_func
        self.logger = get_logger()
        self.running = False

        self.actions = {
            "1": self.start_complete_mission,
            "2": self.load_map,
            "3": self.initialize_characters,
            "4": self.check_inventory,
            "5": self.play_sound_effects,
            "6": self.setup_hud,
            "7": self.show_history,
            "8": self.undo_last,
            "9": self.clear_history,
            "0": self.stop,
        }

    def ask(self, prompt: str) -> str:
        return self.input(prompt).strip()

    def run_command(self, command):
        """Run a command through the invoker, reporting mission failures."""
        try:
            self.output(self.invoker.execute_command(command))
        except MissionError as e:
            self.logger.error(f"Mission command {command.name} failed: {e}")
            self.output(f"Error: {e}")

    def start_complete_mission(self):
        map_name = self.ask("Map name (e.g. Forest Temple): ") or self.factory.map_name
        difficulty = parse_int(self.ask("Difficulty (1-10): "), self.factory.difficulty)
        player_id = self.ask("Player ID (e.g. player_123): ") or self.factory.player_id
        self.run_command(self.factory.create_start_mission_command(map_name, difficulty, player_id))

    def load_map(self):
        map_name = self.ask("Map name: ") or self.factory.map_name
        difficulty = parse_int(self.ask("Difficulty (1-10): "), self.factory.difficulty)
        self.run_command(self.factory.create_load_map_command(map_name, difficulty))

    def initialize_characters(self):
        ids = parse_ids(self.ask("Character IDs (comma separated, e.g. 1,2,3): "))
        if not ids:
            ids = list(self.factory.character_ids)
            self.output(f"No valid ID given, using default {ids}")
        self.run_command(self.factory.create_init_characters_command(ids))

    def check_inventory(self):
        player_id = self.ask("Player ID: ") or self.factory.player_id
        self.run_command(self.factory.create_check_inventory_command(player_id))

    def play_sound_effects(self):
        track = self.ask("Sound name (e.g. epic-battle.mp3): ") or constants.DEFAULT_SOUND_FILE
        volume = parse_float(self.ask(f"Volume (0.0 - 1.0, default {self.factory.volume}): "),
                             self.factory.volume)
        self.run_command(self.factory.create_play_sound_command(track, volume))

    def setup_hud(self):
        config = HUDConfig(
            show_health=is_yes(self.ask("Show health? (y/n): ")),
            show_mana=is_yes(self.ask("Show mana? (y/n): ")),
            show_minimap=is_yes(self.ask("Show minimap? (y/n): "))
        )
        self.run_command(self.factory.create_setup_hud_command(config))

    def show_history(self):
        history = self.invoker.get_history()
        lines = [f"Commands in history: {len(history)}"]
        lines.extend(f"  {index}. {name}" for index, name in enumerate(history, 1))
        self.output("\n".join(lines))

    def undo_last(self):
        self.output(self.invoker.undo_last_command())

    def clear_history(self):
        if is_yes(self.ask("Really clear the command history? (y/n): ")):
            self.output(self.invoker.clear_history())
        else:
            self.output("Action cancelled.")

    def stop(self):
        self.running = False
        self.output("Goodbye!")

    def handle_choice(self, choice: str) -> bool:
        """Run one menu choice. Returns False for an unknown choice."""
        action = self.actions.get(choice.strip())
        if action is None:
            self.output("Invalid choice, please pick 0-9.")
            return False
        action()
        return True

    def run(self):
        """Show the menu until the user exits."""
        self.running = True
        while self.running:
            self.output(MENU)
            try:
                choice = self.ask("Choose an option: ")
            except (EOFError, KeyboardInterrupt):
                self.stop()
                break
            self.handle_choice(choice)
