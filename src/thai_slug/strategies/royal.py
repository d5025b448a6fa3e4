"""Royal Thai General System (RTGS) transliteration strategy."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from thai_slug.mappings.thai_map import (
    CONSONANT_MAP,
    DIGIT_MAP,
    MAI_TAIKHU,
    ROYAL_STRICT_MAP,
    ROYAL_VOWEL_MAP,
    THANTHAKHAT,
)
from thai_slug.strategies.base import TableStrategy


class RoyalStrategy(TableStrategy):
    """Royal Institute of Thailand romanization.

    Shares the consonant table with the phonetic strategy and extends the
    vowel table with Mai Taikhu. Opting in to ``strict_royal`` also romanizes
    the vowel letters ฤ and ฦ and drops Paiyannoi; ``preserve_diacritics`` keeps
    Thanthakhat and Mai Taikhu instead of dropping them.
    """

    DEFAULT_OPTIONS: ClassVar[Mapping[str, Any]] = MappingProxyType(
        {
            "strict_royal": False,
            "preserve_diacritics": False,
        }
    )

    @property
    def name(self) -> str:
        return "royal"

    def _build_tables(self) -> tuple[Mapping[str, str], ...]:
        vowels: Mapping[str, str] = ROYAL_VOWEL_MAP
        if self.options["preserve_diacritics"]:
            vowels = {
                k: v for k, v in ROYAL_VOWEL_MAP.items() if k not in (THANTHAKHAT, MAI_TAIKHU)
            }

        tables: tuple[Mapping[str, str], ...] = (DIGIT_MAP, CONSONANT_MAP, vowels)
        if self.options["strict_royal"]:
            tables += (ROYAL_STRICT_MAP,)
        return tables
