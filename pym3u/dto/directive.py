import dataclasses
from typing import Optional


@dataclasses.dataclass(frozen=True)
class DirectiveAttributes:
    title: str = ""
    tvg_id: Optional[str] = None
    tvg_name: Optional[str] = None
    tvg_logo: Optional[str] = None
    group_title: Optional[str] = None
    radio: bool = False
