import dataclasses
import logging
from typing import Sequence, Tuple

from pym3u.dto.channel import Channel
from pym3u.services.categories import ALL_CATEGORY_ID, normalize_category

logger = logging.getLogger(__name__)


def filter_channels(
    channels: Sequence[Channel], category_id: str = ALL_CATEGORY_ID, query: str = ""
) -> Tuple[Channel, ...]:
    """Narrow a channel list by category id and a free-text query.

    The query matches case-insensitively against name, description and
    category; an empty query matches everything.
    """
    needle: str = query.strip().lower()
    result = []
    for channel in channels:
        if (
            category_id != ALL_CATEGORY_ID
            and normalize_category(channel.category) != category_id
        ):
            continue
        if needle and not any(
            needle in value.lower()
            for value in (channel.name, channel.description, channel.category)
        ):
            continue
        result.append(channel)
    return tuple(result)


def toggle_favorite(
    channels: Sequence[Channel], channel_id: str
) -> Tuple[Channel, ...]:
    """Return a copy of ``channels`` with one channel's favorite flag flipped."""
    toggled = tuple(
        (
            dataclasses.replace(channel, is_favorite=not channel.is_favorite)
            if channel.id == channel_id
            else channel
        )
        for channel in channels
    )
    if not any(channel.id == channel_id for channel in channels):
        logger.debug(f"toggle_favorite: no channel with id '{channel_id}'")
    return toggled
