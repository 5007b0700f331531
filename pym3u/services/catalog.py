import logging
import os
from typing import Optional, Tuple, Union

from pym3u.dao.playlist_source.base import BasePlaylistSource
from pym3u.dao.playlist_source.local import LocalPlaylistSource
from pym3u.dao.playlist_source.remote import DEFAULT_TIMEOUT, RemotePlaylistSource
from pym3u.dto.category import Category
from pym3u.dto.playlist import Catalog, Playlist
from pym3u.parsing.playlist import parse_playlist
from pym3u.services.categories import aggregate_categories

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(
        self, timeout: float = DEFAULT_TIMEOUT, user_agent: Optional[str] = None
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent

    async def load_from_url(self, url: str) -> Catalog:
        return await self.load(
            RemotePlaylistSource(url, timeout=self.timeout, user_agent=self.user_agent)
        )

    async def load_from_file(self, path: Union[str, os.PathLike]) -> Catalog:
        return await self.load(LocalPlaylistSource(path))

    async def load(self, source: BasePlaylistSource) -> Catalog:
        text: str = await source.load()
        return self.build(text)

    def build(self, text: str) -> Catalog:
        playlist: Playlist = parse_playlist(text)
        categories: Tuple[Category, ...] = aggregate_categories(playlist.channels)
        logger.info(
            f"Built catalog with {playlist.metadata.total_channels} channels "
            f"in {len(categories) - 1} categories"
        )
        return Catalog(playlist=playlist, categories=categories)
