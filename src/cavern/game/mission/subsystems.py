"""Mission subsystems the mission commands call into.

They only confirm what they were asked to do; the game state lives in
the world, not here.
"""

from typing import Optional

from ...shared.types.game_types import HUDConfig
from ...shared.constants.game_constants import DEFAULT_VOLUME
from ...utils.logger import get_logger

logger = get_logger()


class MapLoader:
    """Loads mission maps."""

    def load_game_map(self, map_name: str, difficulty: int) -> str:
        logger.mission_action("map", "load", f"{map_name} difficulty={difficulty}")
        return f"Map loaded: {map_name} (difficulty: {difficulty})"


class CharacterManager:
    """Initializes mission characters."""

    def initialize_characters(self, *character_ids: int) -> bool:
        """Initialize characters by id.

        Returns False if any id is not a positive integer.
        """
        if any(not isinstance(cid, int) or cid <= 0 for cid in character_ids):
            logger.warning(f"Refusing to initialize characters {list(character_ids)}")
            return False
        logger.mission_action("characters", "initialize", ", ".join(str(cid) for cid in character_ids))
        return True


class InventoryChecker:
    """Checks a player's inventory in the background."""

    async def check_player_inventory(self, player_id: str) -> None:
        logger.mission_action("inventory", "check", player_id)


class SoundEffects:
    """Plays soundtracks and effects."""

    def __init__(self):
        self.current_track: Optional[str] = None

    def play_soundtrack(self, track_name: str, volume: float = DEFAULT_VOLUME) -> str:
        self.current_track = track_name
        logger.mission_action("sound", "play", f"{track_name} volume={volume}")
        return f"Sound effects started: {track_name} (volume: {volume})"


class HUDManager:
    """Configures the heads-up display."""

    def __init__(self):
        self.config: Optional[HUDConfig] = None

    def setup_hud(self, config: HUDConfig) -> str:
        self.config = config
        logger.mission_action("hud", "setup", repr(config))
        return (f"HUD configured: health={config.show_health}, "
                f"mana={config.show_mana}, minimap={config.show_minimap}")
