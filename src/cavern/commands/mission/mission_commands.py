"""Commands wrapping the mission subsystems.

Undoing these only reports what was reverted; the subsystems keep no
state worth restoring.
"""

import asyncio
from typing import List

from ..base_command import UndoableCommand
from ...shared.types.game_types import HUDConfig
from ...shared.constants.game_constants import DEFAULT_VOLUME


class MissionError(Exception):
    """Base error for mission setup failures."""


class CharacterInitializationError(MissionError):
    """Raised when the character manager reports a failed initialization."""


class LoadMapCommand(UndoableCommand):
    """Command for loading a mission map."""

    def __init__(self, map_loader: 'MapLoader', map_name: str, difficulty: int):
        super().__init__("load_map")
        self.description = "Load a mission map"
        self.map_loader = map_loader
        self.map_name = map_name
        self.difficulty = difficulty

    def execute(self) -> str:
        return self.map_loader.load_game_map(self.map_name, self.difficulty)

    def undo(self) -> str:
        return f'Map "{self.map_name}" unloaded'


class InitializeCharactersCommand(UndoableCommand):
    """Command for initializing mission characters.

    A failed initialization raises instead of reporting softly, which
    aborts any macro this command is part of.
    """

    def __init__(self, character_manager: 'CharacterManager', character_ids: List[int]):
        super().__init__("init_characters")
        self.description = "Initialize characters"
        self.character_manager = character_manager
        self.character_ids = list(character_ids)

    def execute(self) -> str:
        if not self.character_manager.initialize_characters(*self.character_ids):
            raise CharacterInitializationError(
                f"Character initialization failed for {self.character_ids}")
        return "Characters initialized: " + ", ".join(str(cid) for cid in self.character_ids)

    def undo(self) -> str:
        return "Characters reset"


class CheckInventoryCommand(UndoableCommand):
    """Command for running the inventory check.

    The check is a coroutine; it runs to completion before execute returns.
    """

    def __init__(self, inventory_checker: 'InventoryChecker', player_id: str):
        super().__init__("check_inventory")
        self.description = "Check a player's inventory"
        self.inventory_checker = inventory_checker
        self.player_id = player_id

    def execute(self) -> str:
        asyncio.run(self.inventory_checker.check_player_inventory(self.player_id))
        return f"Inventory checked for player: {self.player_id}"

    def undo(self) -> str:
        return "Inventory closed"


class PlaySoundCommand(UndoableCommand):
    """Command for playing a soundtrack."""

    def __init__(self, sound_effects: 'SoundEffects', track_name: str, volume: float = DEFAULT_VOLUME):
        super().__init__("play_sound")
        self.description = "Play a soundtrack"
        self.sound_effects = sound_effects
        self.track_name = track_name
        self.volume = volume

    def execute(self) -> str:
        return self.sound_effects.play_soundtrack(self.track_name, self.volume)

    def undo(self) -> str:
        return f'Sound "{self.track_name}" stopped'


class SetupHUDCommand(UndoableCommand):
    """Command for configuring the HUD."""

    def __init__(self, hud_manager: 'HUDManager', config: HUDConfig):
        super().__init__("setup_hud")
        self.description = "Configure the HUD"
        self.hud_manager = hud_manager
        self.config = config

    def execute(self) -> str:
        return self.hud_manager.setup_hud(self.config)

    def undo(self) -> str:
        return "HUD hidden"
