"""Text parsing utilities for command interpretation."""

from typing import Dict, Optional

from ..shared.types.game_types import ActionKind

# English and Czech (without diacritics) words for every action
DEFAULT_VOCABULARY: Dict[str, ActionKind] = {
    # Movement
    "north": ActionKind.NORTH, "n": ActionKind.NORTH, "sever": ActionKind.NORTH,
    "south": ActionKind.SOUTH, "s": ActionKind.SOUTH, "jih": ActionKind.SOUTH,
    "east": ActionKind.EAST, "e": ActionKind.EAST, "vychod": ActionKind.EAST,
    "west": ActionKind.WEST, "w": ActionKind.WEST, "zapad": ActionKind.WEST,

    # Actions
    "attack": ActionKind.ATTACK, "utok": ActionKind.ATTACK,
    "pickup": ActionKind.PICKUP, "seber": ActionKind.PICKUP,
    "look": ActionKind.LOOK, "rozhliz": ActionKind.LOOK,

    # Information
    "map": ActionKind.MAP, "mapa": ActionKind.MAP,
    "inventory": ActionKind.INVENTORY, "inv": ActionKind.INVENTORY,
    "inventar": ActionKind.INVENTORY,
    "stats": ActionKind.STATS,

    # Other
    "undo": ActionKind.UNDO, "zpet": ActionKind.UNDO,
    "help": ActionKind.HELP, "napoveda": ActionKind.HELP,
    "quit": ActionKind.QUIT, "konec": ActionKind.QUIT,
}

class CommandParser:
    """Maps a line of player input to an action kind."""

    def __init__(self, vocabulary: Optional[Dict[str, ActionKind]] = None):
        """Initialize the command parser."""
        self.vocabulary = dict(vocabulary or DEFAULT_VOCABULARY)

    def parse_input(self, input_text: str) -> Optional[ActionKind]:
        """Resolve input to an action kind, or None if it is not a known word."""
        word = input_text.strip().lower()
        if not word:
            return None
        return self.vocabulary.get(word)

    def add_alias(self, word: str, kind: ActionKind):
        """Register an extra word for an action."""
        self.vocabulary[word.lower()] = kind

    def words_for(self, kind: ActionKind):
        """All words that resolve to an action kind, in vocabulary order."""
        return [word for word, k in self.vocabulary.items() if k is kind]
