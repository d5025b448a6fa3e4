"""Character mapping tables for normalization, transliteration and URL safety."""

from thai_slug.mappings.latin_map import ACCENT_MAP, REMOVED_CHARS, SEPARATOR_CHARS
from thai_slug.mappings.thai_map import (
    ARCHAIC_MAP,
    COMBINING_MARKS,
    COMBINING_VOWELS,
    CONSONANT_MAP,
    DEFAULT_CUSTOM_MAP,
    DIACRITICS,
    DIGIT_MAP,
    PHONETIC_VOWEL_MAP,
    ROYAL_STRICT_MAP,
    ROYAL_VOWEL_MAP,
    TONE_MARKS,
)

__all__ = [
    "ACCENT_MAP",
    "ARCHAIC_MAP",
    "COMBINING_MARKS",
    "COMBINING_VOWELS",
    "CONSONANT_MAP",
    "DEFAULT_CUSTOM_MAP",
    "DIACRITICS",
    "DIGIT_MAP",
    "PHONETIC_VOWEL_MAP",
    "REMOVED_CHARS",
    "ROYAL_STRICT_MAP",
    "ROYAL_VOWEL_MAP",
    "SEPARATOR_CHARS",
    "TONE_MARKS",
]
