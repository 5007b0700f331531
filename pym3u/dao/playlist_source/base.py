from abc import ABC, abstractmethod
from typing import Tuple

from pym3u.errors import FormatError

PLAYLIST_EXTENSIONS: Tuple[str, ...] = (".m3u", ".m3u8")


def ensure_playlist_extension(filename: str) -> None:
    if not filename.lower().endswith(PLAYLIST_EXTENSIONS):
        raise FormatError(filename)


class BasePlaylistSource(ABC):
    @abstractmethod
    async def load(self) -> str:
        pass
