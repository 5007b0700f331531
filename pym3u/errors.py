class PlaylistError(Exception):
    """Base class for failures surfaced while loading a playlist."""


class RetrievalError(PlaylistError):
    def __init__(self, url: str, status: str) -> None:
        super().__init__(f"Failed to fetch M3U: {status}")
        self.url = url
        self.status = status


class ReadError(PlaylistError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to read file: {path}")
        self.path = path


class FormatError(PlaylistError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"Please select a valid M3U or M3U8 file: {filename}")
        self.filename = filename
