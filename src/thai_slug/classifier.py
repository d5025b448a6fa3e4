"""Classification of Thai combining code points."""

from typing import Any

from thai_slug.mappings.thai_map import COMBINING_MARKS, TONE_MARKS


def is_tone_mark(char: Any) -> bool:
    """Return True if ``char`` is one of the four Thai tone marks.

    Total over all inputs: empty strings, multi-character strings and
    non-string values are simply not tone marks.
    """
    return isinstance(char, str) and char in TONE_MARKS


def is_combining_mark(char: Any) -> bool:
    """Return True if ``char`` is a Thai combining vowel, tone mark or diacritic."""
    return isinstance(char, str) and char in COMBINING_MARKS


# Public names used by the orchestration layer
classify_tone_mark = is_tone_mark
classify_combining_mark = is_combining_mark
