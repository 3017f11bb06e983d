"""Item module for the Zuul world model.

Defines the Item record for objects that can lie in rooms or be carried.
"""

from pydantic import BaseModel, Field


class Item(BaseModel):
    """
    A named, described, weighted, countable object.

    Items compare equal by value (pydantic semantics), but rooms and
    inventories track them by identity: two distinct apples with the same
    fields are still two separate items.

    Attributes:
        name: Display name, also used for lookup (e.g., "apples", "sword")
        count: How many of the thing this item stands for (1 is singular)
        weight: Weight of a single unit
        description: Optional prose shown after the item in room descriptions
    """

    name: str = Field(..., description="Item name used for lookup and display")
    count: int = Field(default=1, ge=0, description="Number of units this item represents")
    weight: float = Field(default=0.0, ge=0.0, description="Weight of a single unit")
    description: str = Field(default="", description="Item description, may be blank")

    @property
    def total_weight(self) -> float:
        """Calculate total weight including count."""
        return self.weight * self.count

    @property
    def is_plural(self) -> bool:
        """Check if the item should be described with plural wording."""
        return self.count != 1

    def __repr__(self) -> str:
        """String representation of Item."""
        return f"<Item(name='{self.name}', count={self.count}, weight={self.weight})>"


def calculate_total_weight(items: list[Item]) -> float:
    """
    Calculate total weight of a list of items.

    Args:
        items: List of Item objects

    Returns:
        Total weight of all items
    """
    return sum(item.total_weight for item in items)
