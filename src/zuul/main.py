"""Main entry point for Zuul."""

import sys

import structlog
from pydantic import ValidationError

from zuul.config import get_settings
from zuul.game.player import Player
from zuul.game.world import RoomValidationError, WorldLoadError, load_world
from zuul.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def main() -> None:
    """
    Load the world and show the player where they start.

    Raises:
        WorldLoadError: If the world file cannot be read
        RoomValidationError: If the world data is invalid or the starting room is missing
    """
    settings = get_settings()
    world = load_world(settings.world_file)

    start = world.get_room(settings.starting_room_id)
    if start is None:
        raise RoomValidationError(f"Starting room '{settings.starting_room_id}' does not exist")

    player = Player(current_room=start)
    logger.info("player_placed", room=settings.starting_room_id)

    print(player.current_room.get_long_description())


def run() -> None:
    """
    Synchronous entry point used by the console script.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("invalid_settings", error=str(e))
        sys.exit(1)

    configure_logging(settings.log_level, settings.log_format)

    try:
        main()
    except (WorldLoadError, RoomValidationError) as e:
        logger.error("world_load_failed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()
