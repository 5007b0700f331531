import enum


class ParserState(enum.Enum):
    IDLE = "idle"
    AWAITING_LOCATOR = "awaiting_locator"
