"""Configuration manager for loading game settings from YAML files."""

import yaml
from typing import Any, Dict
from pathlib import Path

from ..shared.constants.game_constants import CONFIG_DIR, SETTINGS_FILE


class ConfigManager:
    """Manages loading and lookup of configuration data."""

    def __init__(self, config_dir: str = None):
        """Initialize the config manager.

        Args:
            config_dir: Path to configuration directory. If None, uses default.
        """
        if config_dir is None:
            # Default to config directory relative to project root
            project_root = Path(__file__).parent.parent.parent.parent
            config_dir = project_root / CONFIG_DIR

        self.config_dir = Path(config_dir)
        self.game_settings: Dict[str, Any] = {}

        self._load_game_settings()

    @classmethod
    def from_dict(cls, settings: Dict[str, Any]) -> 'ConfigManager':
        """Build a manager around in-memory settings instead of a file."""
        manager = cls.__new__(cls)
        manager.config_dir = None
        manager.game_settings = dict(settings or {})
        return manager

    @property
    def settings_file(self) -> Path:
        return self.config_dir / SETTINGS_FILE

    def _load_game_settings(self):
        """Load game settings from game_settings.yaml."""
        settings_file = self.settings_file
        if settings_file.exists():
            with open(settings_file, 'r', encoding='utf-8') as f:
                self.game_settings = yaml.safe_load(f) or {}
        else:
            # Use defaults if file doesn't exist
            self.game_settings = {}

    def reload_config(self):
        """Re-read the settings file."""
        if self.config_dir is not None:
            self._load_game_settings()

    def get_setting(self, *path, default=None):
        """Get a setting value by walking nested keys.

        Args:
            *path: Path components (e.g., 'rules', 'gold_reward')
            default: Default value if setting not found

        Returns:
            The setting value or default
        """
        value = self.game_settings
        for key in path:
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
            if value is None:
                return default
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get a whole top-level section, or an empty dict."""
        value = self.game_settings.get(section)
        return value if isinstance(value, dict) else {}
