"""
World loader module for Zuul.

Handles loading and validating world data (rooms, items, actors) from a
YAML file and wiring the rooms into a graph.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

from zuul.config import get_settings

from .actor import Actor
from .item import Item
from .room import Room

logger = structlog.get_logger(__name__)


class WorldLoadError(Exception):
    """Raised when there's an error loading world data."""

    pass


class RoomValidationError(Exception):
    """Raised when room validation fails."""

    pass


@dataclass
class World:
    """
    A loaded game world.

    Attributes:
        rooms: Rooms keyed by their YAML id
        items: Item templates keyed by their YAML id
    """

    rooms: dict[str, Room] = field(default_factory=dict)
    items: dict[str, Item] = field(default_factory=dict)

    def get_room(self, room_id: str) -> Room | None:
        """Get a room by its ID, or None if not found."""
        return self.rooms.get(room_id)

    def get_room_id(self, room: Room) -> str | None:
        """Get the ID a room was loaded under, or None for foreign rooms."""
        for room_id, candidate in self.rooms.items():
            if candidate is room:
                return room_id
        return None


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """
    Load a YAML file containing a world definition.

    Args:
        file_path: Path to the YAML file

    Returns:
        The parsed YAML document

    Raises:
        WorldLoadError: If the file cannot be loaded or parsed
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise WorldLoadError(f"YAML parsing error in {file_path}: {e}") from e
    except FileNotFoundError as e:
        raise WorldLoadError(f"File not found: {file_path}") from e
    except OSError as e:
        raise WorldLoadError(f"Error loading {file_path}: {e}") from e

    if not data:
        raise WorldLoadError(f"Empty YAML file: {file_path}")

    if not isinstance(data, dict) or "rooms" not in data:
        raise WorldLoadError(f"Missing 'rooms' key in {file_path}")

    if not isinstance(data["rooms"], list):
        raise WorldLoadError(f"'rooms' must be a list in {file_path}")

    if not isinstance(data.get("items", []), list):
        raise WorldLoadError(f"'items' must be a list in {file_path}")

    return data


def validate_item_data(item_data: dict[str, Any], file_path: Path) -> None:
    """
    Validate that an item dictionary has all required fields.

    Args:
        item_data: Dictionary containing item data
        file_path: Path to the source file (for error messages)

    Raises:
        RoomValidationError: If required fields are missing
    """
    if not isinstance(item_data, dict):
        raise RoomValidationError(f"Item entry in {file_path} must be a mapping, got: {item_data!r}")

    for required in ("id", "name"):
        if required not in item_data:
            item_id = item_data.get("id", "unknown")
            raise RoomValidationError(
                f"Item '{item_id}' in {file_path} missing required field: {required}"
            )

    if not isinstance(item_data["id"], str):
        raise RoomValidationError(f"Item id {item_data['id']!r} in {file_path} must be a string")


def validate_room_data(room_data: dict[str, Any], file_path: Path) -> None:
    """
    Validate that a room dictionary has all required fields.

    Args:
        room_data: Dictionary containing room data
        file_path: Path to the source file (for error messages)

    Raises:
        RoomValidationError: If required fields are missing or have the wrong shape
    """
    if not isinstance(room_data, dict):
        raise RoomValidationError(f"Room entry in {file_path} must be a mapping, got: {room_data!r}")

    required_fields = ["id", "description"]

    for required in required_fields:
        if required not in room_data:
            room_id = room_data.get("id", "unknown")
            raise RoomValidationError(
                f"Room '{room_id}' in {file_path} missing required field: {required}"
            )

    if not isinstance(room_data["id"], str):
        raise RoomValidationError(f"Room id {room_data['id']!r} in {file_path} must be a string")

    if not isinstance(room_data["description"], str):
        raise RoomValidationError(
            f"Room '{room_data['id']}' in {file_path} has invalid description (must be a string)"
        )

    if "exits" in room_data and not isinstance(room_data["exits"], dict):
        raise RoomValidationError(
            f"Room '{room_data['id']}' in {file_path} has invalid exits (must be a dict)"
        )

    for list_field in ("items", "actors", "trapdoor_destinations"):
        if list_field in room_data and not isinstance(room_data[list_field], list):
            raise RoomValidationError(
                f"Room '{room_data['id']}' in {file_path} has invalid {list_field} (must be a list)"
            )

    room_id = room_data["id"]

    for direction, target_id in room_data.get("exits", {}).items():
        if not isinstance(direction, str) or not isinstance(target_id, str):
            raise RoomValidationError(
                f"Room '{room_id}' in {file_path} has invalid exit {direction!r}: {target_id!r} "
                f"(direction and target must be strings)"
            )

    for list_field in ("items", "trapdoor_destinations"):
        for entry in room_data.get(list_field, []):
            if not isinstance(entry, str):
                raise RoomValidationError(
                    f"Room '{room_id}' in {file_path} has invalid {list_field} entry {entry!r} "
                    f"(must be a string id)"
                )

    for actor_data in room_data.get("actors", []):
        if not isinstance(actor_data, dict):
            raise RoomValidationError(
                f"Room '{room_id}' in {file_path} has invalid actor {actor_data!r} (must be a dict)"
            )

    key_id = room_data.get("required_key")
    if key_id is not None and not isinstance(key_id, str):
        raise RoomValidationError(
            f"Room '{room_id}' in {file_path} has invalid required_key {key_id!r} (must be a string id)"
        )


def create_item_from_data(item_data: dict[str, Any]) -> Item:
    """
    Create an Item template from dictionary data.

    Raises:
        RoomValidationError: If Pydantic validation fails
    """
    fields = {key: value for key, value in item_data.items() if key != "id"}
    try:
        return Item(**fields)
    except Exception as e:
        raise RoomValidationError(f"Failed to create item '{item_data.get('id', 'unknown')}': {e}")


def create_actor_from_data(actor_data: dict[str, Any], room_id: str) -> Actor:
    """
    Create an Actor from dictionary data.

    Raises:
        RoomValidationError: If Pydantic validation fails
    """
    try:
        return Actor(**actor_data)
    except Exception as e:
        raise RoomValidationError(f"Failed to create actor in room '{room_id}': {e}")


def _resolve_room(world: World, room_id: str, target_id: str, what: str) -> Room:
    target = world.rooms.get(target_id)
    if target is None:
        raise RoomValidationError(f"Room '{room_id}' has {what} to non-existent room '{target_id}'")
    return target


def _resolve_item(world: World, room_id: str, item_id: str, what: str) -> Item:
    template = world.items.get(item_id)
    if template is None:
        raise RoomValidationError(f"Room '{room_id}' has {what} referencing non-existent item '{item_id}'")
    return template


def build_world(data: dict[str, Any], file_path: Path) -> World:
    """
    Build a World from a parsed YAML document.

    Rooms and item templates are created first, then exits, trapdoor
    destinations, items, actors and required keys are wired up, so rooms
    may reference each other in any order (including cycles).

    Args:
        data: Parsed YAML document with "rooms" and optional "items"
        file_path: Path to the source file (for error messages)

    Returns:
        World holding every room and item template

    Raises:
        RoomValidationError: If any room, item or reference is invalid
    """
    world = World()

    for item_data in data.get("items", []):
        validate_item_data(item_data, file_path)
        if item_data["id"] in world.items:
            raise RoomValidationError(f"Duplicate item ID '{item_data['id']}' found in {file_path}")
        world.items[item_data["id"]] = create_item_from_data(item_data)

    for room_data in data["rooms"]:
        validate_room_data(room_data, file_path)
        room_id = room_data["id"]

        if room_id in world.rooms:
            raise RoomValidationError(f"Duplicate room ID '{room_id}' found in {file_path}")

        world.rooms[room_id] = Room(
            room_data["description"],
            is_trapdoor=bool(room_data.get("trapdoor", False)),
        )

    for room_data in data["rooms"]:
        room_id = room_data["id"]
        room = world.rooms[room_id]

        for direction, target_id in room_data.get("exits", {}).items():
            room.set_exit(direction, _resolve_room(world, room_id, target_id, f"exit '{direction}'"))

        for target_id in room_data.get("trapdoor_destinations", []):
            room.add_trapdoor_destination(
                _resolve_room(world, room_id, target_id, "trapdoor destination")
            )

        # Each placement gets its own copy so rooms never share an item object
        for item_id in room_data.get("items", []):
            room.add_item(_resolve_item(world, room_id, item_id, "item").model_copy())

        for actor_data in room_data.get("actors", []):
            room.set_actor(create_actor_from_data(actor_data, room_id))

        key_id = room_data.get("required_key")
        if key_id is not None:
            room.set_required_key(_resolve_item(world, room_id, key_id, "required key"))

    return world


def validate_exits(world: World) -> list[str]:
    """
    Check that room exits are bidirectional.

    Args:
        world: Loaded world

    Returns:
        List of warning messages (non-critical issues)
    """
    warnings: list[str] = []

    for room_id, room in world.rooms.items():
        for direction in room.get_exit_directions():
            target = room.get_exit(direction)
            target_id = world.get_room_id(target)
            reverse_direction = get_reverse_direction(direction)

            if reverse_direction is None or target is None:
                continue

            back = target.get_exit(reverse_direction)
            if back is None:
                warnings.append(
                    f"Non-bidirectional exit: '{room_id}' -> '{direction}' -> '{target_id}', "
                    f"but '{target_id}' has no '{reverse_direction}' exit back"
                )
            elif back is not room:
                warnings.append(
                    f"Mismatched bidirectional exit: '{room_id}' -> '{direction}' -> '{target_id}', "
                    f"but '{target_id}' '{reverse_direction}' points to '{world.get_room_id(back)}'"
                )

    return warnings


def get_reverse_direction(direction: str) -> str | None:
    """
    Get the reverse of a direction.

    Args:
        direction: The original direction (e.g., "north")

    Returns:
        The reverse direction (e.g., "south"), or None if not found
    """
    reverse_map = {
        "north": "south",
        "south": "north",
        "east": "west",
        "west": "east",
        "northeast": "southwest",
        "northwest": "southeast",
        "southeast": "northwest",
        "southwest": "northeast",
        "up": "down",
        "down": "up",
        "in": "out",
        "out": "in",
    }
    return reverse_map.get(direction.lower())


def load_world(file_path: Path | None = None) -> World:
    """
    Load the world from a YAML file and validate it.

    This is the main entry point for building the game world.

    Args:
        file_path: Path to the world file. If None, uses the configured world_file.

    Returns:
        The loaded World

    Raises:
        WorldLoadError: If loading fails
        RoomValidationError: If validation fails
    """
    if file_path is None:
        file_path = get_settings().world_file

    world = build_world(load_yaml_file(file_path), file_path)

    for warning in validate_exits(world):
        logger.warning("exit_validation_warning", detail=warning)

    logger.info(
        "world_loaded",
        path=str(file_path),
        total_rooms=len(world.rooms),
        total_items=len(world.items),
    )

    return world
