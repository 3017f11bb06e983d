"""Player state for Zuul.

The player carries an inventory bounded by a maximum weight and a coin
pouch bounded only by count. Moving between rooms also lives here, since
that is where a room's required key and trapdoor flag come into play:
- a room with a required key can only be entered while carrying an item
  with the same name as the key
- entering a trapdoor room with destinations sends the player to one of
  them at random, skipping any the player has no key for
"""

import random
from enum import Enum

import structlog

from zuul.config import get_settings
from zuul.game.world import Item, Room, calculate_total_weight

logger = structlog.get_logger(__name__)


class TravelResult(Enum):
    """Outcome of trying to walk through an exit."""

    MOVED = "moved"
    TRAPDOOR = "trapdoor"
    NO_EXIT = "no_exit"
    LOCKED = "locked"
    NO_ROOM = "no_room"


class Player:
    """
    The player: location, inventory and coin pouch.

    Attributes:
        name: Player name, used in log context only
        max_weight: Maximum total inventory weight
        current_room: Room the player is in, or None before placement
    """

    def __init__(
        self,
        name: str = "player",
        max_weight: float | None = None,
        current_room: Room | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if max_weight is None:
            max_weight = get_settings().max_carry_weight
        if max_weight <= 0:
            raise ValueError(f"max_weight must be > 0, got {max_weight}")

        self.name = name
        self.max_weight = max_weight
        self.current_room = current_room
        self._previous_room: Room | None = None
        self._inventory: list[Item] = []
        self._coins = 0
        self._rng = rng or random.Random()

    # Inventory

    def get_inventory(self) -> list[Item]:
        """Get a copy of the items the player carries."""
        return list(self._inventory)

    def get_inventory_weight(self) -> float:
        """Get the total weight of the inventory."""
        return calculate_total_weight(self._inventory)

    def can_carry(self, item: Item) -> bool:
        """Check if the item fits within the weight limit."""
        return self.get_inventory_weight() + item.total_weight <= self.max_weight

    def add_item(self, item: Item) -> bool:
        """
        Put an item in the inventory.

        Args:
            item: Item to carry

        Returns:
            True if added, False if it would exceed max_weight
        """
        if not self.can_carry(item):
            logger.debug(
                "item_too_heavy",
                player=self.name,
                item=item.name,
                carried=self.get_inventory_weight(),
                max_weight=self.max_weight,
            )
            return False

        self._inventory.append(item)
        return True

    def remove_item(self, item: Item) -> bool:
        """Remove an item (by identity) from the inventory. Returns False if absent."""
        for index, candidate in enumerate(self._inventory):
            if candidate is item:
                del self._inventory[index]
                return True
        return False

    def find_item_by_name(self, name: str) -> Item | None:
        """Find the first carried item with exactly the given name."""
        for item in self._inventory:
            if item.name == name:
                return item
        return None

    def has_item_named(self, name: str) -> bool:
        """Check if the player carries an item with the given name."""
        return self.find_item_by_name(name) is not None

    def take(self, item_name: str) -> Item | None:
        """
        Pick up an item from the current room.

        Args:
            item_name: Name of the item in the room

        Returns:
            The item taken, or None if it isn't here or is too heavy
        """
        if self.current_room is None:
            return None

        item = self.current_room.find_item_by_name(item_name)
        if item is None or not self.add_item(item):
            return None

        self.current_room.remove_item(item)
        logger.debug("item_taken", player=self.name, item=item.name)
        return item

    def drop(self, item_name: str) -> Item | None:
        """
        Drop a carried item into the current room.

        Args:
            item_name: Name of the carried item

        Returns:
            The item dropped, or None if not carried or there is no room
        """
        if self.current_room is None:
            return None

        item = self.find_item_by_name(item_name)
        if item is None:
            return None

        self.remove_item(item)
        self.current_room.add_item(item)
        logger.debug("item_dropped", player=self.name, item=item.name)
        return item

    # Coin pouch

    @property
    def coins(self) -> int:
        """Number of coins in the pouch."""
        return self._coins

    def add_coins(self, amount: int) -> None:
        """
        Add coins to the pouch.

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount of coins: {amount}")
        self._coins += amount
        logger.debug("coins_added", player=self.name, amount=amount, new_total=self._coins)

    def spend_coins(self, amount: int) -> bool:
        """
        Take coins out of the pouch.

        Args:
            amount: Number of coins to spend

        Returns:
            True if the player had enough coins, False otherwise (pouch unchanged)

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Cannot spend a negative amount of coins: {amount}")
        if amount > self._coins:
            logger.debug(
                "coin_spend_failed", player=self.name, amount=amount, current=self._coins
            )
            return False

        self._coins -= amount
        logger.debug("coins_spent", player=self.name, amount=amount, new_total=self._coins)
        return True

    # Movement

    def can_enter(self, room: Room) -> bool:
        """Check if the player holds the key a room requires (if any)."""
        key = room.get_required_key()
        return key is None or self.has_item_named(key.name)

    def go(self, direction: str) -> TravelResult:
        """
        Walk through an exit of the current room.

        Args:
            direction: Exit direction (e.g., "north")

        Returns:
            TravelResult describing where the player ended up
        """
        if self.current_room is None:
            return TravelResult.NO_ROOM

        destination = self.current_room.get_exit(direction)
        if destination is None:
            return TravelResult.NO_EXIT

        if not self.can_enter(destination):
            logger.info(
                "room_locked",
                player=self.name,
                direction=direction,
                required_key=destination.get_required_key().name,
            )
            return TravelResult.LOCKED

        result = TravelResult.MOVED
        # Locked destinations are never picked
        trapdoor_destinations = [
            room
            for room in destination.get_trapdoor_destinations()
            if room is not None and self.can_enter(room)
        ]
        if destination.is_trapdoor and trapdoor_destinations:
            destination = self._rng.choice(trapdoor_destinations)
            result = TravelResult.TRAPDOOR

        self._move_to(destination)
        logger.debug(
            "player_moved",
            player=self.name,
            direction=direction,
            room=destination.description,
            trapdoor=result is TravelResult.TRAPDOOR,
        )
        return result

    def back(self) -> bool:
        """
        Return to the previously visited room.

        Returns:
            True if the player moved, False if there is nowhere to go back to
        """
        if self._previous_room is None:
            return False
        self._move_to(self._previous_room)
        return True

    def _move_to(self, room: Room) -> None:
        self._previous_room = self.current_room
        self.current_room = room

    def __repr__(self) -> str:
        """String representation of Player."""
        room = self.current_room.description if self.current_room else None
        return f"<Player(name='{self.name}', room='{room}', coins={self._coins})>"
