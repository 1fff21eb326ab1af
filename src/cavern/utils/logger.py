"""Logging utilities for the cavern game."""

import logging
import os
import sys
from typing import Optional

# Handlers are attached the first time a logger with a given name is built.
_log_settings = {'level': logging.WARNING, 'file': None}

def configure_logging(level: str = "WARNING", log_file: Optional[str] = None,
                      name: str = "cavern"):
    """Set the console level and optional log file for the game logger.

    Applies to handlers already attached as well as to loggers created
    afterwards.

    Args:
        level: Level name for the console handler, e.g. 'INFO'
        log_file: Path of a debug log file, or None for console only
        name: Logger name to reconfigure
    """
    _log_settings['level'] = getattr(logging, str(level).upper(), logging.WARNING)
    _log_settings['file'] = log_file

    existing = logging.getLogger(name)
    if not existing.handlers:
        return
    has_file = False
    for handler in existing.handlers:
        if isinstance(handler, logging.FileHandler):
            has_file = True
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(_log_settings['level'])
    if log_file and not has_file:
        GameLogger(name)._add_file_handler(log_file, existing.handlers[0].formatter)


class GameLogger:
    """Custom logger for the game.

    Console output goes to stderr so it never interleaves with the game
    text printed on stdout.
    """

    def __init__(self, name: str = "cavern", level: int = logging.DEBUG):
        """Initialize the logger."""
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            self._setup_handlers()

    def _setup_handlers(self):
        """Set up log handlers."""
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(_log_settings['level'])
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if _log_settings['file']:
            self._add_file_handler(_log_settings['file'], formatter)

    def _add_file_handler(self, log_file: str, formatter: logging.Formatter):
        """Attach a debug-level file handler, creating its directory."""
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

    def debug(self, message: str, *args, **kwargs):
        """Log debug message."""
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        """Log info message."""
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        """Log warning message."""
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        """Log error message."""
        self.logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs):
        """Log critical message."""
        self.logger.critical(message, *args, **kwargs)

    def player_action(self, player_name: str, action: str, details: str = ""):
        """Log player action."""
        message = f"PLAYER[{player_name}] {action}"
        if details:
            message += f" - {details}"
        self.info(message)

    def combat_action(self, attacker: str, target: str, action: str, result: str = ""):
        """Log combat action."""
        message = f"COMBAT: {attacker} {action} {target}"
        if result:
            message += f" - {result}"
        self.info(message)

    def mission_action(self, subsystem: str, action: str, details: str = ""):
        """Log a call into one of the mission subsystems."""
        message = f"MISSION[{subsystem}] {action}"
        if details:
            message += f" - {details}"
        self.info(message)

def get_logger(name: str = "cavern") -> GameLogger:
    """Get a logger instance."""
    return GameLogger(name)
