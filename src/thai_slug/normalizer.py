"""Thai-aware Unicode normalization."""

import re

from thai_slug.classifier import is_combining_mark, is_tone_mark
from thai_slug.mappings.thai_map import (
    ARCHAIC_MAP,
    DIGIT_MAP,
    MAI_HAN_AKAT,
    MO_MA,
    SARA_AM,
)

try:
    import unicodedata
except ImportError:  # pragma: no cover - stripped-down interpreters
    unicodedata = None  # type: ignore[assignment]

_WHITESPACE_RE = re.compile(r"\s+")

_ARCHAIC_TABLE = str.maketrans(dict(ARCHAIC_MAP))
_DIGIT_TABLE = str.maketrans(dict(DIGIT_MAP))


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


class Normalizer:
    """Normalizes Thai text ahead of transliteration.

    Steps, in order:
    1. Trim and collapse whitespace
    2. Unicode canonical composition (NFC), when ``unicodedata`` is available
    3. Fold archaic letters (ฃ -> ข, ฅ -> ค, ๅ -> ั)
    4. Keep only the last tone mark of every consecutive run
    5. Recompose Sara Am from Mai Han-akat + Mo Ma
    6. Convert Thai digits to ASCII digits
    7. Trim and collapse whitespace again

    Keeping the *last* tone mark of a run is an arbitrary, deterministic
    choice; it is not phonetically motivated.
    """

    def __init__(self, use_nfc: bool = True) -> None:
        """Initialize normalizer.

        Args:
            use_nfc: Apply NFC composition when the facility is available
        """
        self._use_nfc = use_nfc and self.nfc_available

    @property
    def nfc_available(self) -> bool:
        """Whether Unicode canonical composition can be applied."""
        return unicodedata is not None

    def normalize(self, text: str) -> str:
        """Normalize Thai text. Never raises for string input."""
        if not text:
            return ""

        text = _collapse_whitespace(text)
        if not text:
            return ""

        if self._use_nfc:
            text = unicodedata.normalize("NFC", text)

        text = text.translate(_ARCHAIC_TABLE)
        text = self._dedupe_tone_marks(text)
        text = text.replace(MAI_HAN_AKAT + MO_MA, SARA_AM)
        text = text.translate(_DIGIT_TABLE)

        return _collapse_whitespace(text)

    def is_valid_thai_sequence(self, text: str) -> bool:
        """Weak sanity check: a string must not start with a combining mark.

        This only detects an orphaned mark at the very start; it is not a
        grammar of Thai syllables.
        """
        if not text:
            return True
        return not is_combining_mark(text[0])

    @staticmethod
    def _dedupe_tone_marks(text: str) -> str:
        """Drop every tone mark immediately followed by another tone mark."""
        result = []
        for i, char in enumerate(text):
            if is_tone_mark(char) and i + 1 < len(text) and is_tone_mark(text[i + 1]):
                continue
            result.append(char)
        return "".join(result)


_default_normalizer = Normalizer()


def normalize(text: str) -> str:
    """Normalize text with the default :class:`Normalizer`."""
    return _default_normalizer.normalize(text)


def is_valid_thai_sequence(text: str) -> bool:
    """Check text with the default :class:`Normalizer`."""
    return _default_normalizer.is_valid_thai_sequence(text)
