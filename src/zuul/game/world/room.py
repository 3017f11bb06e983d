"""
Room module for the Zuul world model.

Defines the Room class representing one location in the game world. Rooms
hold direct references to their neighbours, so the world is a directed
graph that may contain cycles.
"""

from enum import Enum

import structlog

from .actor import Actor
from .item import Item

logger = structlog.get_logger(__name__)

# Control characters and the ASCII space; other Unicode whitespace is not blank
BLANK_CHARACTERS = "".join(chr(code) for code in range(0x21))


class MoveResult(Enum):
    """Outcome of moving an actor between rooms."""

    MOVED = "moved"
    ACTOR_NOT_FOUND = "actor_not_found"
    INVALID_DESTINATION = "invalid_destination"


class Room:
    """
    Represents a room (location) in the game world.

    A room is connected to other rooms via exits. For each existing exit the
    room stores a reference to the neighbouring room. Exits, actors and
    trapdoor destinations keep insertion order, so descriptions are stable.

    Attributes:
        description: Short description, something like "in a kitchen"
    """

    def __init__(self, description: str, is_trapdoor: bool = False) -> None:
        """
        Create a room with no exits, items or actors.

        Args:
            description: The room's description (e.g., "in the lecture theatre")
            is_trapdoor: True if this room redirects occupants elsewhere
        """
        self.description: str = description
        self._is_trapdoor = is_trapdoor
        self._exits: dict[str, Room] = {}
        self._items: list[Item] = []
        self._actors: dict[str, Actor] = {}
        self._trapdoor_destinations: list[Room] = []
        self._required_key: Item | None = None

    @property
    def is_trapdoor(self) -> bool:
        """Check if this room is a trapdoor."""
        return self._is_trapdoor

    # Exits

    def get_exit(self, direction: str) -> "Room | None":
        """
        Get the room reached by going in the given direction.

        Args:
            direction: The exit's direction (e.g., "north")

        Returns:
            The neighbouring room, or None if there is no such exit
        """
        return self._exits.get(direction)

    def set_exit(self, direction: str, neighbor: "Room | None") -> None:
        """
        Define an exit from this room, replacing any exit in that direction.

        Args:
            direction: The direction of the exit
            neighbor: The room to which the exit leads
        """
        self._exits[direction] = neighbor

    def get_exit_directions(self) -> list[str]:
        """Get exit directions in the order they were defined."""
        return list(self._exits)

    def get_exit_string(self) -> str:
        """
        Return a string describing the room's exits, for example "Exits: north west".

        Returns:
            Details of the room's exits
        """
        return "Exits:" + "".join(f" {direction}" for direction in self._exits)

    # Trapdoor

    def add_trapdoor_destination(self, room: "Room | None") -> None:
        """
        Add a room that the trapdoor may send an occupant to.

        Args:
            room: Candidate destination (duplicates are kept)
        """
        self._trapdoor_destinations.append(room)

    def get_trapdoor_destinations(self) -> list["Room"]:
        """Get candidate trapdoor destinations in insertion order."""
        return list(self._trapdoor_destinations)

    # Items

    def add_item(self, item: Item) -> None:
        """
        Add an item to the room.

        Args:
            item: Item that is added to the room
        """
        self._items.append(item)

    def remove_item(self, item: Item) -> None:
        """
        Remove an item from the room. Does nothing if the item is not here.

        Items are matched by identity, not by value.

        Args:
            item: Item that is removed from the room
        """
        for index, candidate in enumerate(self._items):
            if candidate is item:
                del self._items[index]
                return

    def get_items(self) -> list[Item]:
        """Get a copy of the items in the room."""
        return list(self._items)

    def find_item_by_name(self, name: str) -> Item | None:
        """
        Find the first item in the room with exactly the given name.

        Args:
            name: Item name to look for (case-sensitive)

        Returns:
            The first matching item, or None if no item matches
        """
        for item in self._items:
            if item.name == name:
                return item
        return None

    # Descriptions

    def get_short_description(self) -> str:
        """Get the short description given at construction."""
        return self.description

    def set_description(self, description: str) -> None:
        """Replace the short description."""
        self.description = description

    def get_long_description(self) -> str:
        """
        Format the full room description for display to the player.

        The text looks like::

            You are in the kitchen.
            There are apples laying around.
            A(n) Goblin is in the room. It looks hungry.
            Exits: north west

        Returns:
            Long description with items, actors and exits
        """
        parts = [f"You are {self.description}.\n"]

        for item in self._items:
            if item.is_plural:
                parts.append(f"There are {item.name} laying around.")
            else:
                parts.append(f"There is a(n) {item.name} laying around.")

            if item.description.strip(BLANK_CHARACTERS):
                parts.append(f" {item.description}.\n")
            else:
                parts.append("\n")

        for actor in self._actors.values():
            parts.append(f"A(n) {actor.name} is in the room. ")
            if actor.description is not None:
                parts.append(f"{actor.description}\n")
            else:
                parts.append("\n")

        parts.append(self.get_exit_string())

        return "".join(parts)

    # Required key

    def get_required_key(self) -> Item | None:
        """Get the item needed to enter this room, if any."""
        return self._required_key

    def set_required_key(self, key: Item | None) -> None:
        """
        Set the item needed to enter this room.

        Args:
            key: Item that is required to enter, or None to unlock
        """
        self._required_key = key

    # Actors

    def set_actor(self, actor: Actor) -> None:
        """
        Put an actor in this room, replacing any actor with the same name.

        Args:
            actor: Actor to add
        """
        self._actors[actor.name] = actor

    def get_actor(self, name: str) -> Actor | None:
        """
        Search for an actor in the room.

        Args:
            name: The actor's name

        Returns:
            The actor, or None if not found
        """
        return self._actors.get(name)

    def get_actors(self) -> list[Actor]:
        """Get a snapshot of the actors in the room."""
        return list(self._actors.values())

    def remove_actor(self, name: str) -> None:
        """
        Remove an actor from the room. Cannot be undone.

        Args:
            name: The actor's name
        """
        self._actors.pop(name, None)

    def move_actor(self, actor_name: str, destination: "Room | None") -> MoveResult:
        """
        Move an actor from this room to another room.

        Failures are logged and reported through the result; the rooms are
        left untouched and nothing is raised.

        Args:
            actor_name: The name of the actor to move
            destination: The room to move to (may be this room)

        Returns:
            MoveResult describing what happened
        """
        actor = self._actors.get(actor_name)

        if actor is None:
            logger.warning(
                "actor_move_failed",
                actor=actor_name,
                reason=MoveResult.ACTOR_NOT_FOUND.value,
            )
            return MoveResult.ACTOR_NOT_FOUND

        if not isinstance(destination, Room):
            logger.warning(
                "actor_move_failed",
                actor=actor_name,
                reason=MoveResult.INVALID_DESTINATION.value,
            )
            return MoveResult.INVALID_DESTINATION

        del self._actors[actor_name]
        destination.set_actor(actor)

        logger.debug(
            "actor_moved",
            actor=actor_name,
            from_room=self.description,
            to_room=destination.description,
        )
        return MoveResult.MOVED

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        """String representation of Room."""
        return f"<Room(description='{self.description}', trapdoor={self._is_trapdoor})>"
