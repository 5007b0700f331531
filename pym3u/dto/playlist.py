import dataclasses
from typing import Optional, Tuple

from pym3u.dto.category import Category
from pym3u.dto.channel import Channel


@dataclasses.dataclass(frozen=True)
class PlaylistMetadata:
    total_channels: int
    categories: Tuple[str, ...]
    title: Optional[str] = None
    description: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class Playlist:
    channels: Tuple[Channel, ...]
    metadata: PlaylistMetadata


@dataclasses.dataclass(frozen=True)
class Catalog:
    playlist: Playlist
    categories: Tuple[Category, ...]

    @property
    def channels(self) -> Tuple[Channel, ...]:
        return self.playlist.channels
