"""Tests for Thai character classification."""

import pytest

from thai_slug.classifier import (
    classify_combining_mark,
    classify_tone_mark,
    is_combining_mark,
    is_tone_mark,
)

TONE_MARKS = ["่", "้", "๊", "๋"]
COMBINING_VOWELS = ["ั", "ิ", "ี", "ึ", "ื", "ุ", "ู", "ฺ"]
DIACRITICS = ["์", "ํ", "๎"]


class TestIsToneMark:
    """Tests for is_tone_mark."""

    @pytest.mark.parametrize("char", TONE_MARKS)
    def test_tone_marks(self, char: str) -> None:
        assert is_tone_mark(char) is True

    @pytest.mark.parametrize("char", COMBINING_VOWELS + DIACRITICS + ["ก", "a", " ", "ำ"])
    def test_other_characters(self, char: str) -> None:
        assert is_tone_mark(char) is False

    @pytest.mark.parametrize("value", ["", "่้", "ก่", None, 0x0E48])
    def test_total_over_odd_input(self, value: object) -> None:
        """Empty, multi-character and non-string input is never a tone mark."""
        assert is_tone_mark(value) is False


class TestIsCombiningMark:
    """Tests for is_combining_mark."""

    @pytest.mark.parametrize("char", TONE_MARKS + COMBINING_VOWELS + DIACRITICS)
    def test_combining_marks(self, char: str) -> None:
        assert is_combining_mark(char) is True

    @pytest.mark.parametrize("char", ["ก", "ำ", "า", "เ", "็", "๑", "a", "\u0301"])
    def test_non_combining(self, char: str) -> None:
        """Spacing vowels, Mai Taikhu, digits and non-Thai marks are excluded."""
        assert is_combining_mark(char) is False

    def test_empty_and_multi_char(self) -> None:
        assert is_combining_mark("") is False
        assert is_combining_mark("ั่") is False

    def test_public_aliases(self) -> None:
        assert classify_tone_mark is is_tone_mark
        assert classify_combining_mark is is_combining_mark
