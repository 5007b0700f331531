import dataclasses
from typing import Tuple

from pym3u.dto.channel import Channel
from pym3u.dto.directive import DirectiveAttributes

DEFAULT_CATEGORY = "General"
UNKNOWN = "Unknown"

_PEXELS = "https://images.pexels.com/photos/{id}/pexels-photo-{id}.jpeg?auto=compress&cs=tinysrgb&w=100&h=100&dpr=2"

DEFAULT_LOGO = _PEXELS.format(id=1591447)

# First match wins, so order matters.
LOGO_BY_KEYWORD: Tuple[Tuple[str, str], ...] = (
    ("news", _PEXELS.format(id=518543)),
    ("sports", _PEXELS.format(id=274422)),
    ("entertainment", _PEXELS.format(id=1624496)),
    ("movies", _PEXELS.format(id=7991579)),
    ("music", _PEXELS.format(id=1763075)),
    ("kids", _PEXELS.format(id=1148998)),
)


def default_logo(category: str) -> str:
    lowered: str = category.lower()
    for keyword, logo in LOGO_BY_KEYWORD:
        if keyword in lowered:
            return logo
    return DEFAULT_LOGO


@dataclasses.dataclass(frozen=True)
class ChannelDraft:
    """A channel whose directive has been read but whose stream URL has not."""

    id: str
    name: str
    category: str
    logo: str
    is_hd: bool
    attributes: DirectiveAttributes

    def finalize(self, stream_url: str) -> Channel:
        if not stream_url:
            raise ValueError(f"Channel {self.id} requires a stream URL")
        return Channel(
            id=self.id,
            name=self.name,
            description=self.name,
            category=self.category,
            stream_url=stream_url,
            logo=self.logo,
            language=UNKNOWN,
            country=UNKNOWN,
            is_hd=self.is_hd,
            is_favorite=False,
            group_title=self.attributes.group_title,
            tvg_id=self.attributes.tvg_id,
            tvg_name=self.attributes.tvg_name,
            tvg_logo=self.attributes.tvg_logo,
            radio_station=self.attributes.radio,
        )


def build_draft(attributes: DirectiveAttributes, index: int) -> ChannelDraft:
    """Apply the channel defaults to a parsed directive.

    ``index`` is the 0-based directive counter of the current parse; the
    channel id uses it as is, the fallback name uses its 1-based form.
    """
    category: str = attributes.group_title or DEFAULT_CATEGORY
    return ChannelDraft(
        id=f"channel_{index}",
        name=attributes.title or f"Channel {index + 1}",
        category=category,
        logo=attributes.tvg_logo or default_logo(category),
        is_hd="hd" in attributes.title.lower(),
        attributes=attributes,
    )
