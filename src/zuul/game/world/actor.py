"""Actor (NPC) record for the Zuul world model."""

from pydantic import BaseModel, Field


class Actor(BaseModel):
    """
    A non-player character occupying a room.

    Attributes:
        name: Display name, unique per room (used as the room's actor key)
        description: Optional text shown after the actor in room descriptions
    """

    name: str = Field(..., description="Actor name, used as key within a room")
    description: str | None = Field(default=None, description="Optional actor description")

    def __repr__(self) -> str:
        """String representation of Actor."""
        return f"<Actor(name='{self.name}')>"
