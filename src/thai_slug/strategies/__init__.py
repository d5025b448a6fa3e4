"""Thai to Latin transliteration strategies."""

from thai_slug.strategies.base import TableStrategy, TransliterationStrategy
from thai_slug.strategies.custom import CustomStrategy
from thai_slug.strategies.phonetic import PhoneticStrategy
from thai_slug.strategies.royal import RoyalStrategy

__all__ = [
    "CustomStrategy",
    "PhoneticStrategy",
    "RoyalStrategy",
    "TableStrategy",
    "TransliterationStrategy",
]
