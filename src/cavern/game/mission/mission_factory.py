"""Factory that wires mission commands to their subsystems."""

from typing import List, Optional

from .subsystems import MapLoader, CharacterManager, InventoryChecker, SoundEffects, HUDManager
from ...commands.macro_command import MacroCommand
from ...commands.mission.mission_commands import (
    LoadMapCommand, InitializeCharactersCommand, CheckInventoryCommand,
    PlaySoundCommand, SetupHUDCommand
)
from ...shared.types.game_types import HUDConfig
from ...shared.constants import game_constants as constants


class MissionFactory:
    """Builds mission commands, each bound to this factory's subsystems."""

    def __init__(self, config_manager=None):
        """Initialize the factory.

        Args:
            config_manager: Optional ConfigManager supplying the ``mission`` section
        """
        self.map_loader = MapLoader()
        self.character_manager = CharacterManager()
        self.inventory_checker = InventoryChecker()
        self.sound_effects = SoundEffects()
        self.hud_manager = HUDManager()

        settings = config_manager.get_section('mission') if config_manager else {}
        self.map_name: str = settings.get('map_name', constants.DEFAULT_MISSION_MAP)
        self.difficulty: int = settings.get('difficulty', constants.DEFAULT_DIFFICULTY)
        self.player_id: str = settings.get('player_id', constants.DEFAULT_PLAYER_ID)
        self.character_ids: List[int] = list(settings.get('character_ids', constants.DEFAULT_CHARACTER_IDS))
        self.soundtrack: str = settings.get('soundtrack', constants.DEFAULT_SOUNDTRACK)
        self.volume: float = settings.get('volume', constants.DEFAULT_VOLUME)
        hud = settings.get('hud') or {}
        self.hud_config = HUDConfig(
            show_health=hud.get('show_health', True),
            show_mana=hud.get('show_mana', True),
            show_minimap=hud.get('show_minimap', True)
        )

    def create_start_mission_command(self, map_name: str, difficulty: int, player_id: str) -> MacroCommand:
        """Build the full mission start sequence."""
        commands = [
            LoadMapCommand(self.map_loader, map_name, difficulty),
            InitializeCharactersCommand(self.character_manager, self.character_ids),
            CheckInventoryCommand(self.inventory_checker, player_id),
            PlaySoundCommand(self.sound_effects, self.soundtrack, self.volume),
            SetupHUDCommand(self.hud_manager, self.hud_config),
        ]
        return MacroCommand(commands, name="start_mission")

    def create_load_map_command(self, map_name: str, difficulty: int) -> LoadMapCommand:
        return LoadMapCommand(self.map_loader, map_name, difficulty)

    def create_init_characters_command(self, character_ids: List[int]) -> InitializeCharactersCommand:
        return InitializeCharactersCommand(self.character_manager, character_ids)

    def create_check_inventory_command(self, player_id: str) -> CheckInventoryCommand:
        return CheckInventoryCommand(self.inventory_checker, player_id)

    def create_play_sound_command(self, track_name: str, volume: Optional[float] = None) -> PlaySoundCommand:
        return PlaySoundCommand(self.sound_effects, track_name,
                                self.volume if volume is None else volume)

    def create_setup_hud_command(self, config: HUDConfig) -> SetupHUDCommand:
        return SetupHUDCommand(self.hud_manager, config)
