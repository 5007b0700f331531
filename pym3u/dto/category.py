import dataclasses


@dataclasses.dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str
    count: int
