import logging
from typing import Dict, List, Sequence, Tuple

from pym3u.dto.category import Category
from pym3u.dto.channel import Channel

logger = logging.getLogger(__name__)

ALL_CATEGORY_ID = "all"
ALL_CATEGORY_NAME = "All Channels"
DEFAULT_ICON = "Tv"

# First match wins, so order matters.
ICON_BY_KEYWORD: Tuple[Tuple[str, str], ...] = (
    ("news", "Newspaper"),
    ("sports", "Trophy"),
    ("entertainment", "Star"),
    ("movies", "Film"),
    ("music", "Music"),
    ("kids", "Baby"),
)


def normalize_category(label: str) -> str:
    return label.lower()


def category_icon(category_id: str) -> str:
    for keyword, icon in ICON_BY_KEYWORD:
        if keyword in category_id:
            return icon
    return DEFAULT_ICON


def category_display_name(category_id: str) -> str:
    return category_id[:1].upper() + category_id[1:]


def aggregate_categories(channels: Sequence[Channel]) -> Tuple[Category, ...]:
    """Build the category index: the "all" aggregate, then one entry per
    normalized category in the order it was first seen."""
    counts: Dict[str, int] = {}
    for channel in channels:
        key: str = normalize_category(channel.category)
        counts[key] = counts.get(key, 0) + 1

    categories: List[Category] = [
        Category(
            id=ALL_CATEGORY_ID,
            name=ALL_CATEGORY_NAME,
            icon=DEFAULT_ICON,
            count=len(channels),
        )
    ]
    for category_id, count in counts.items():
        categories.append(
            Category(
                id=category_id,
                name=category_display_name(category_id),
                icon=category_icon(category_id),
                count=count,
            )
        )

    logger.debug(f"Aggregated {len(counts)} categories over {len(channels)} channels")
    return tuple(categories)
