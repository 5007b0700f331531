import logging
import re
from typing import Dict, Optional

from pym3u.dto.directive import DirectiveAttributes

logger = logging.getLogger(__name__)

DIRECTIVE_PREFIX = "#EXTINF:"

_ATTRIBUTE_PATTERN = re.compile(r'([\w-]+)="([^"]*)"')

# Attribute key (lower-cased) -> DirectiveAttributes field.
_RECOGNIZED_KEYS: Dict[str, str] = {
    "tvg-id": "tvg_id",
    "tvg-name": "tvg_name",
    "tvg-logo": "tvg_logo",
    "group-title": "group_title",
    "radio": "radio",
}


def is_directive(line: str) -> bool:
    return line.startswith(DIRECTIVE_PREFIX)


def extract_title(line: str) -> str:
    """Return the text after the last comma, or "" when the line has none."""
    comma = line.rfind(",")
    if comma == -1:
        return ""
    return line[comma + 1 :].strip()


def parse_directive(line: str) -> DirectiveAttributes:
    values: Dict[str, str] = {}
    for match in _ATTRIBUTE_PATTERN.finditer(line):
        key: str = match.group(1).lower()
        field: Optional[str] = _RECOGNIZED_KEYS.get(key)
        if field is None:
            logger.debug(f"Ignoring unrecognized attribute '{key}'")
            continue
        values[field] = match.group(2)

    radio: str = values.pop("radio", "")
    return DirectiveAttributes(
        title=extract_title(line),
        radio=radio.lower() == "true",
        **values,
    )
