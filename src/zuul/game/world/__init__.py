"""World model - rooms, items, actors, and world loading."""

from .actor import Actor
from .item import Item, calculate_total_weight
from .loader import (
    RoomValidationError,
    World,
    WorldLoadError,
    build_world,
    get_reverse_direction,
    load_world,
    validate_exits,
)
from .room import MoveResult, Room

__all__ = [
    "Room",
    "MoveResult",
    "Item",
    "calculate_total_weight",
    "Actor",
    "World",
    "load_world",
    "build_world",
    "validate_exits",
    "get_reverse_direction",
    "WorldLoadError",
    "RoomValidationError",
]
