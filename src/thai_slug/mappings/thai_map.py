"""Thai character tables for normalization and transliteration."""
# ruff: noqa: RUF001

from collections.abc import Mapping
from types import MappingProxyType

# Classification sets (disjoint)
COMBINING_VOWELS: frozenset[str] = frozenset(
    (
        "ั",  # Mai Han-akat
        "ิ",  # Sara I
        "ี",  # Sara II
        "ึ",  # Sara UE
        "ื",  # Sara UEE
        "ุ",  # Sara U
        "ู",  # Sara UU
        "ฺ",  # Phinthu
    )
)

TONE_MARKS: frozenset[str] = frozenset(
    (
        "่",  # Mai Ek
        "้",  # Mai Tho
        "๊",  # Mai Tri
        "๋",  # Mai Chattawa
    )
)

DIACRITICS: frozenset[str] = frozenset(
    (
        "์",  # Thanthakhat
        "ํ",  # Nikhahit
        "๎",  # Yamakkan
    )
)

COMBINING_MARKS: frozenset[str] = COMBINING_VOWELS | TONE_MARKS | DIACRITICS

MAI_HAN_AKAT = "ั"
MO_MA = "ม"
SARA_AM = "ำ"
MAI_TAIKHU = "็"
THANTHAKHAT = "์"

# Archaic and deprecated letters folded to their modern form
ARCHAIC_MAP: Mapping[str, str] = MappingProxyType(
    {
        "ๅ": "ั",  # Lakkhangyao (deprecated)
        "ฃ": "ข",  # Kho Khuat
        "ฅ": "ค",  # Kho Khon
    }
)

DIGIT_MAP: Mapping[str, str] = MappingProxyType(
    {
        "๐": "0", "๑": "1", "๒": "2", "๓": "3", "๔": "4",
        "๕": "5", "๖": "6", "๗": "7", "๘": "8", "๙": "9",
    }
)

# Consonants (shared by phonetic and royal romanization)
CONSONANT_MAP: Mapping[str, str] = MappingProxyType(
    {
        "ก": "k", "ข": "kh", "ฃ": "kh", "ค": "kh", "ฅ": "kh", "ฆ": "kh",
        "ง": "ng", "จ": "ch", "ฉ": "ch", "ช": "ch", "ซ": "s", "ฌ": "ch",
        "ญ": "y", "ฎ": "d", "ฏ": "t", "ฐ": "th", "ฑ": "th", "ฒ": "th",
        "ณ": "n", "ด": "d", "ต": "t", "ถ": "th", "ท": "th", "ธ": "th",
        "น": "n", "บ": "b", "ป": "p", "ผ": "ph", "ฝ": "f", "พ": "ph",
        "ฟ": "f", "ภ": "ph", "ม": "m", "ย": "y", "ร": "r", "ล": "l",
        "ว": "w", "ศ": "s", "ษ": "s", "ส": "s", "ห": "h", "ฬ": "l",
        "อ": "", "ฮ": "h",
    }
)

# Vowels, tone marks and signs, pronunciation based
PHONETIC_VOWEL_MAP: Mapping[str, str] = MappingProxyType(
    {
        "ะ": "a", "า": "a", "ิ": "i", "ี": "i", "ึ": "ue", "ื": "ue",
        "ุ": "u", "ู": "u", "เ": "e", "แ": "ae", "โ": "o", "ใ": "ai",
        "ไ": "ai", "ำ": "am", "ๅ": "", "ๆ": "", "่": "", "้": "",
        "๊": "", "๋": "", "์": "", "ั": "a",
    }
)

# Royal Institute (RTGS) vowels: phonetic set plus Mai Taikhu
ROYAL_VOWEL_MAP: Mapping[str, str] = MappingProxyType(
    {
        **PHONETIC_VOWEL_MAP,
        "็": "",
    }
)

# Vowel letters romanized only under strict RTGS
ROYAL_STRICT_MAP: Mapping[str, str] = MappingProxyType(
    {
        "ฤ": "rue",
        "ฦ": "lue",
        "ฯ": "",  # Paiyannoi
    }
)

# Single table used by the custom strategy when no mapping is supplied
DEFAULT_CUSTOM_MAP: Mapping[str, str] = MappingProxyType(
    {
        **CONSONANT_MAP,
        **PHONETIC_VOWEL_MAP,
        **DIGIT_MAP,
    }
)
