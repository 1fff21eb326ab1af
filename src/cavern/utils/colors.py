"""ANSI color utility for terminal output.

Color strategy for the game console:
- Red: Damage to player, defeat
- Magenta: Errors and refused input
- Cyan: Items, gold, status bar
- Yellow: Announcements, victory
- Green: Success messages
"""


class Colors:
    """ANSI color codes for terminal output."""

    RESET = '\033[0m'

    # Normal colors
    RED = '\033[0;31m'
    GREEN = '\033[0;32m'
    YELLOW = '\033[0;33m'
    MAGENTA = '\033[0;35m'
    CYAN = '\033[0;36m'

    # Bold colors
    BOLD_RED = '\033[1;31m'
    BOLD_GREEN = '\033[1;32m'
    BOLD_YELLOW = '\033[1;33m'
    BOLD_MAGENTA = '\033[1;35m'
    BOLD_CYAN = '\033[1;36m'
    BOLD_WHITE = '\033[1;37m'

    # Blinking (for critical messages)
    BLINK_RED = '\033[1;5;31m'


def colorize(text: str, color_code: str, enabled: bool = True) -> str:
    """Apply ANSI color code to text and reset at the end.

    Args:
        text: The text to colorize
        color_code: The ANSI color code (e.g., Colors.BOLD_RED)
        enabled: When False the text is returned untouched

    Returns:
        Colored text with reset code at the end
    """
    if not enabled:
        return text
    return f"{color_code}{text}{Colors.RESET}"


# Semantic color functions based on message type

def damage_to_player(text: str, enabled: bool = True) -> str:
    """Color for damage taken by player (bold red)."""
    return colorize(text, Colors.BOLD_RED, enabled)


def item_found(text: str, enabled: bool = True) -> str:
    """Color for finding items or loot (bold cyan)."""
    return colorize(text, Colors.BOLD_CYAN, enabled)


def announcement(text: str, enabled: bool = True) -> str:
    """Color for announcements and special events (bold yellow)."""
    return colorize(text, Colors.BOLD_YELLOW, enabled)


def error_message(text: str, enabled: bool = True) -> str:
    """Color for errors and restrictions (normal magenta)."""
    return colorize(text, Colors.MAGENTA, enabled)


def death_message(text: str, enabled: bool = True) -> str:
    """Color for death messages (blinking red)."""
    return colorize(text, Colors.BLINK_RED, enabled)


def success_message(text: str, enabled: bool = True) -> str:
    """Color for success messages (bold green)."""
    return colorize(text, Colors.BOLD_GREEN, enabled)
