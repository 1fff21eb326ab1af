"""Item class for the loot scattered through the cave."""

from enum import Enum
from typing import Dict, Any

class ItemType(Enum):
    """Types of items in the game. The type selects the pickup effect."""
    WEAPON = "weapon"
    POTION = "potion"
    TREASURE = "treasure"

class Item:
    """An item lying on a tile, consumed the moment it is picked up."""

    def __init__(self, name: str, description: str, item_type: ItemType):
        """Initialize an item."""
        self.name = name
        self.description = description
        self.item_type = ItemType(item_type)

    def to_dict(self) -> Dict[str, Any]:
        """Convert item to dictionary."""
        return {
            'name': self.name,
            'description': self.description,
            'type': self.item_type.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        """Create item from dictionary data such as a config entry."""
        return cls(data['name'], data.get('description', ''), ItemType(data['type']))

    def __repr__(self):
        return f"Item({self.name!r}, {self.item_type.value})"
