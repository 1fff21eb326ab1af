"""Game constants and default configuration values.

These are fallbacks only. config/game_settings.yaml overrides any of them.
"""

# World
DEFAULT_MAP_SIZE = 5
ROOM_DESCRIPTIONS = [
    "A dark chamber with damp walls.",
    "A corridor lit by flickering torches.",
    "A vast hall with a ceiling lost in shadow.",
    "A narrow passage hung with cobwebs.",
    "A stone vault echoing with dripping water.",
]

# Player
STARTING_NAME = "Hero"
STARTING_HEALTH = 100
STARTING_MAX_HEALTH = 100
STARTING_DAMAGE = 15
STARTING_GOLD = 0
STARTING_POSITION = (2, 2)

# Starting layout: three enemies of increasing difficulty, four items
DEFAULT_ENEMIES = [
    {'name': "Goblin", 'health': 30, 'damage': 8, 'position': (1, 1)},
    {'name': "Orc", 'health': 50, 'damage': 12, 'position': (4, 1)},
    {'name': "Troll", 'health': 80, 'damage': 20, 'position': (4, 4)},
]
DEFAULT_ITEMS = [
    {'name': "Healing Potion", 'description': "Restores 50 HP", 'type': "potion", 'position': (1, 3)},
    {'name': "Warrior's Sword", 'description': "+10 damage", 'type': "weapon", 'position': (0, 0)},
    {'name': "Golden Hoard", 'description': "100 gold pieces", 'type': "treasure", 'position': (3, 4)},
    {'name': "Healing Potion", 'description': "Restores 50 HP", 'type': "potion", 'position': (2, 0)},
]

# Item effects applied on pickup
POTION_HEAL_AMOUNT = 50
WEAPON_DAMAGE_BONUS = 10
TREASURE_GOLD_AMOUNT = 100

# Combat, inclusive range
GOLD_REWARD_MIN = 10
GOLD_REWARD_MAX = 39

# Mission defaults
DEFAULT_MISSION_MAP = "Default Map"
DEFAULT_DIFFICULTY = 5
DEFAULT_PLAYER_ID = "player_default"
DEFAULT_CHARACTER_IDS = [1, 2, 3]
DEFAULT_SOUNDTRACK = "epic-battle.mp3"
DEFAULT_SOUND_FILE = "default-sound.mp3"
DEFAULT_VOLUME = 0.8

# Text Formatting
STATUS_BAR_WIDTH = 55

# Directories
CONFIG_DIR = "config"
SETTINGS_FILE = "game_settings.yaml"
