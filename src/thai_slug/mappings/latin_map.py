"""Latin accent folding and URL character tables."""

from collections.abc import Mapping
from types import MappingProxyType

# Accented Latin letters folded before the generic ASCII fallback
ACCENT_MAP: Mapping[str, str] = MappingProxyType(
    {
        # Latin-1 Supplement
        "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a", "æ": "ae",
        "ç": "c", "è": "e", "é": "e", "ê": "e", "ë": "e", "ì": "i", "í": "i",
        "î": "i", "ï": "i", "ð": "d", "ñ": "n", "ò": "o", "ó": "o", "ô": "o",
        "õ": "o", "ö": "o", "ø": "o", "ù": "u", "ú": "u", "û": "u", "ü": "u",
        "ý": "y", "þ": "th", "ÿ": "y",
        # Latin Extended-A
        "ă": "a", "ą": "a", "ć": "c", "č": "c", "ď": "d", "đ": "d", "ě": "e",
        "ę": "e", "ğ": "g", "į": "i", "ı": "i", "ł": "l", "ń": "n",
        "ň": "n", "ő": "o", "œ": "oe", "ř": "r", "ś": "s", "š": "s", "ť": "t",
        "ű": "u", "ů": "u", "ź": "z", "ž": "z",
        # Macrons
        "ā": "a", "ē": "e", "ī": "i", "ō": "o", "ū": "u",
    }
)

# Characters replaced by the active separator
SEPARATOR_CHARS: frozenset[str] = frozenset("@#?&=+%<>{}|\\^`[](),;:!.$")

# Characters removed without inserting a separator
REMOVED_CHARS: frozenset[str] = frozenset("'\"")
