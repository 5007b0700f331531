import asyncio
import logging
from typing import Dict, Optional

import requests

from pym3u.dao.playlist_source.base import BasePlaylistSource
from pym3u.errors import RetrievalError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class RemotePlaylistSource(BasePlaylistSource):
    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: Optional[str] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.user_agent = user_agent

    async def load(self) -> str:
        return await asyncio.to_thread(self._fetch)

    def _fetch(self) -> str:
        headers: Dict[str, str] = {}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        try:
            logger.debug(f"Requesting playlist from {self.url}")
            response = requests.get(self.url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"HTTP error while retrieving playlist: {e}")
            raise RetrievalError(self.url, str(e)) from e

        if not response.ok:
            status: str = response.reason or str(response.status_code)
            logger.error(f"Playlist request to {self.url} failed: {status}")
            raise RetrievalError(self.url, status)

        # M3U8 is UTF-8 by definition; requests falls back to latin-1 for text/*.
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"

        text: str = response.text
        logger.info(f"Retrieved {len(text)} characters from {self.url}")
        return text
