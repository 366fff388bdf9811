import re
from types import MappingProxyType

# Entities that browsers convert before a msgid reaches the translation lookup
BROWSER_CONVERTED_HTML_ENTITIES = MappingProxyType(
    {
        "hellip": "…",
        "cent": "¢",
        "pound": "£",
        "euro": "€",
        "laquo": "«",
        "raquo": "»",
        "rsaquo": "›",
        "lsaquo": "‹",
        "copy": "©",
        "reg": "®",
        "trade": "™",
        "sect": "§",
        "deg": "°",
        "plusmn": "±",
        "para": "¶",
        "middot": "·",
        "ndash": "–",
        "mdash": "—",
        "lsquo": "‘",
        "rsquo": "’",
        "sbquo": "‚",
        "ldquo": "“",
        "rdquo": "”",
        "bdquo": "„",
        "dagger": "†",
        "Dagger": "‡",
        "bull": "•",
        "prime": "′",
        "Prime": "″",
        "asymp": "≈",
        "ne": "≠",
        "le": "≤",
        "ge": "≥",
        "sup2": "²",
        "sup3": "³",
        "frac12": "½",
        "frac14": "¼",
        "frac13": "⅓",
        "frac34": "¾",
    }
)

_ENTITY_PATTERNS = tuple(
    (re.compile("&" + re.escape(name) + ";?"), char)
    for name, char in BROWSER_CONVERTED_HTML_ENTITIES.items()
)


def normalize_entities(msgid: str) -> str:
    """Replace named HTML entities (with or without the trailing ``;``) by their characters."""
    for pattern, char in _ENTITY_PATTERNS:
        msgid = pattern.sub(char, msgid)
    return msgid
