"""Event system for game-wide event handling."""

from typing import Callable, Dict, List

# Event names published by the world actions
PLAYER_MOVED = 'player_moved'
PLAYER_DAMAGED = 'player_damaged'
PLAYER_DIED = 'player_died'
ENEMY_DEFEATED = 'enemy_defeated'
ITEM_COLLECTED = 'item_collected'

class EventSystem:
    """Manages game events and event handlers."""

    def __init__(self):
        """Initialize the event system."""
        self.handlers: Dict[str, List[Callable]] = {}

    def subscribe(self, event_type: str, handler: Callable):
        """Subscribe a handler to an event type."""
        if event_type not in self.handlers:
            self.handlers[event_type] = []
        self.handlers[event_type].append(handler)

    def publish(self, event_type: str, data=None):
        """Publish an event to all subscribers."""
        if event_type in self.handlers:
            for handler in list(self.handlers[event_type]):
                handler(data)

    def unsubscribe(self, event_type: str, handler: Callable):
        """Unsubscribe a handler from an event type."""
        if event_type in self.handlers and handler in self.handlers[event_type]:
            self.handlers[event_type].remove(handler)
