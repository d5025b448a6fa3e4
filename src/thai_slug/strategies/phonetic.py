"""Pronunciation-based transliteration strategy."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from thai_slug.mappings.thai_map import (
    CONSONANT_MAP,
    DIGIT_MAP,
    PHONETIC_VOWEL_MAP,
    TONE_MARKS,
)
from thai_slug.strategies.base import TableStrategy


class PhoneticStrategy(TableStrategy):
    """Phonetic transliteration (ก -> k, ข -> kh, จ -> ch, ...).

    Prioritizes readability over official romanization. Tone marks are
    dropped unless ``preserve_tone_marks`` is set; Thai digits become ASCII
    digits unless ``preserve_digits`` is cleared, in which case they are
    dropped.
    """

    DEFAULT_OPTIONS: ClassVar[Mapping[str, Any]] = MappingProxyType(
        {
            "preserve_tone_marks": False,
            "preserve_digits": True,
        }
    )

    @property
    def name(self) -> str:
        return "phonetic"

    def _build_tables(self) -> tuple[Mapping[str, str], ...]:
        if self.options["preserve_digits"]:
            digits: Mapping[str, str] = DIGIT_MAP
        else:
            digits = dict.fromkeys(DIGIT_MAP, "")

        vowels: Mapping[str, str] = PHONETIC_VOWEL_MAP
        if self.options["preserve_tone_marks"]:
            vowels = {k: v for k, v in PHONETIC_VOWEL_MAP.items() if k not in TONE_MARKS}

        return digits, CONSONANT_MAP, vowels
