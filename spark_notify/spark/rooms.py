from __future__ import annotations

import logging

from ..config import DeliveryConfig
from .client import SparkClient
from .errors import MissingDestination, NoMatchingRoom

logger = logging.getLogger(__name__)


def resolve_room(config: DeliveryConfig, client: SparkClient) -> str:
    """Return the room id to post to.

    A configured room id is used as-is. Otherwise the room listing is searched
    for a title equal to the configured room name; the first match in listing
    order wins.
    """
    if config.room_id:
        return config.room_id
    if not config.room_name:
        raise MissingDestination()

    # Rooms without an id cannot be posted to.
    matches = [
        room
        for room in client.list_rooms()
        if room.title == config.room_name and room.id
    ]
    if not matches:
        raise NoMatchingRoom(config.room_name)
    if len(matches) > 1:
        logger.warning(
            "%d rooms are titled '%s'; using the first (%s)",
            len(matches),
            config.room_name,
            matches[0].id,
        )

    logger.info("Resolved room '%s' to %s", config.room_name, matches[0].id)
    return matches[0].id
