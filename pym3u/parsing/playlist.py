import logging
from typing import Dict, List, Optional, Tuple

from pym3u.dto.channel import Channel
from pym3u.dto.playlist import Playlist, PlaylistMetadata
from pym3u.enum.parser_state import ParserState
from pym3u.parsing.channel_builder import ChannelDraft, build_draft
from pym3u.parsing.directive import is_directive, parse_directive

logger = logging.getLogger(__name__)

LOCATOR_SCHEMES: Tuple[str, ...] = ("http", "rtmp", "rtsp")


def is_locator(line: str) -> bool:
    return line.startswith(LOCATOR_SCHEMES)


class PlaylistParser:
    """Single-pass EXTINF/URL state machine.

    Each call to :meth:`parse` starts from a clean state, but an instance
    must not be shared between concurrent callers; use
    :func:`parse_playlist` for a fresh parser per call.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.state: ParserState = ParserState.IDLE
        self.draft: Optional[ChannelDraft] = None
        self.channels: List[Channel] = []
        self._directive_count: int = 0

    def feed(self, line: str) -> Optional[Channel]:
        """Process one line, returning the channel it completed, if any."""
        line = line.strip()
        if not line:
            return None

        if is_directive(line):
            if self.draft is not None:
                logger.debug(
                    f"Discarding {self.draft.id} ('{self.draft.name}'): "
                    "no stream URL before next directive"
                )
            self.draft = build_draft(parse_directive(line), self._directive_count)
            self._directive_count += 1
            self.state = ParserState.AWAITING_LOCATOR
            return None

        if self.state is ParserState.AWAITING_LOCATOR and is_locator(line):
            channel: Channel = self.draft.finalize(line)
            self.channels.append(channel)
            self.draft = None
            self.state = ParserState.IDLE
            return channel

        return None

    def finish(self) -> Playlist:
        if self.draft is not None:
            logger.debug(f"Discarding {self.draft.id}: input ended before stream URL")
            self.draft = None
        self.state = ParserState.IDLE

        labels: Dict[str, None] = {}
        for channel in self.channels:
            labels.setdefault(channel.category, None)

        channels: Tuple[Channel, ...] = tuple(self.channels)
        return Playlist(
            channels=channels,
            metadata=PlaylistMetadata(
                total_channels=len(channels),
                categories=tuple(labels),
            ),
        )

    def parse(self, text: str) -> Playlist:
        self.reset()
        for line in text.split("\n"):
            self.feed(line)
        playlist: Playlist = self.finish()
        logger.debug(
            f"Parsed {playlist.metadata.total_channels} channels "
            f"from {self._directive_count} directives"
        )
        return playlist


def parse_playlist(text: str) -> Playlist:
    return PlaylistParser().parse(text)
