import dataclasses
from typing import Optional


@dataclasses.dataclass(frozen=True)
class Channel:
    id: str
    name: str
    description: str
    category: str
    stream_url: str
    logo: str
    language: str = "Unknown"
    country: str = "Unknown"
    is_hd: bool = False
    is_favorite: bool = False
    group_title: Optional[str] = None
    tvg_id: Optional[str] = None
    tvg_name: Optional[str] = None
    tvg_logo: Optional[str] = None
    radio_station: bool = False
