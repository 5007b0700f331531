import asyncio
import logging
import os
from pathlib import Path
from typing import Union

from pym3u.dao.playlist_source.base import (
    BasePlaylistSource,
    ensure_playlist_extension,
)
from pym3u.errors import ReadError

logger = logging.getLogger(__name__)


class LocalPlaylistSource(BasePlaylistSource):
    def __init__(self, path: Union[str, os.PathLike], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    async def load(self) -> str:
        ensure_playlist_extension(self.path.name)
        try:
            text: str = await asyncio.to_thread(
                self.path.read_text, encoding=self.encoding
            )
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read playlist file {self.path}: {e}")
            raise ReadError(str(self.path)) from e
        logger.info(f"Read {len(text)} characters from {self.path}")
        return text
