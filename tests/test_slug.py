"""Tests for slug generation."""

import re

import pytest

from thai_slug import slugify
from thai_slug.core.exceptions import ConfigurationError
from thai_slug.slug import SlugBuilder, ThaiSlug
from thai_slug.transliterator import Strategy, StrategyFactory
from thai_slug.url_safe import SlugConfig


class TestSlugify:
    """Tests for the slugify entry point."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("สวัสดีโลก", "swasdiolk"),
            ("สวัสดี โลก", "swasdi-olk"),
            ("ภาษาไทย", "phasaaithy"),
            ("ข่าวด่วน", "khawdwn"),
            ("ปี ๒๕๖๗", "pi-2567"),
            ("Hello สวัสดี World", "hello-swasdi-world"),
            ("ราคา $99.99 (ลดราคา!)", "rakha-99-99-ldrakha"),
            ("ฃวัสดี", "khwasdi"),
        ],
    )
    def test_basic(self, text: str, expected: str) -> None:
        assert slugify(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty(self, text: str) -> None:
        assert slugify(text) == ""

    def test_separator(self) -> None:
        assert slugify("สวัสดี โลก", separator="_") == "swasdi_olk"
        assert slugify("สวัสดี โลก", separator="") == "swasdiolk"

    def test_max_length(self) -> None:
        assert slugify("กรุงเทพมหานคร", max_length=10) == "krungethph"
        assert slugify("สวัสดี โลก", max_length=7) == "swasdi"

    def test_repeated_tone_marks(self) -> None:
        assert slugify("ก่้") == "k"

    def test_royal_strategy(self) -> None:
        assert slugify("ก็", strategy="royal") == "k"
        strict = {"strict_royal": True}
        assert slugify("ฤดู", strategy=Strategy.ROYAL, strategy_options=strict) == "ruedu"

    def test_untransliterated_letters_lowercased(self) -> None:
        """Test that letters left to the ASCII fallback still come out lowercase."""
        for strategy in (Strategy.PHONETIC, Strategy.ROYAL):
            slug = slugify("ฤดู", strategy=strategy)
            assert slug == slug.lower()
            assert slug.endswith("du")

    def test_custom_strategy(self) -> None:
        options = {"custom_mapping": {"ส": "s", "ว": "v", "ั": "a", "ด": "d", "ี": "ee"}}
        assert slugify("สวัสดี", strategy="custom", strategy_options=options) == "svasdee"

    def test_digits_normalized_before_strategy(self) -> None:
        """Thai digits are already ASCII when the strategy sees them."""
        result = slugify("ปี ๒๕๖๗", strategy_options={"preserve_digits": False})
        assert result == "pi-2567"

    def test_unknown_strategy_option(self) -> None:
        with pytest.raises(ConfigurationError):
            slugify("สวัสดี", strategy_options={"preserve_tone_mark": True})

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ConfigurationError):
            slugify("สวัสดี", strategy="klingon")

    def test_unknown_setting(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            slugify("สวัสดี", seperator="_")
        assert exc_info.value.suggestion == 'Did you mean "separator"?'

    def test_invalid_max_length(self) -> None:
        with pytest.raises(ConfigurationError):
            slugify("สวัสดี", max_length=0)

    def test_output_is_url_safe(self, thai_texts: list[str], mixed_texts: list[str]) -> None:
        for text in thai_texts + mixed_texts:
            result = slugify(text, max_length=30)

            assert re.fullmatch(r"[a-z0-9\-_]*", result), result
            assert len(result) <= 30
            assert not result.startswith("-")
            assert not result.endswith("-")

    def test_deterministic(self, thai_texts: list[str]) -> None:
        for text in thai_texts:
            assert slugify(text) == slugify(text)


class TestSlugBuilder:
    """Tests for SlugBuilder."""

    def test_fluent_build(self) -> None:
        slug = SlugBuilder().text("สวัสดี โลก").separator("_").build()
        assert slug == "swasdi_olk"

    def test_setters_return_builder(self) -> None:
        builder = SlugBuilder()
        assert builder.text("ก") is builder
        assert builder.strategy(Strategy.ROYAL) is builder
        assert builder.strategy_options({}) is builder
        assert builder.max_length(10) is builder
        assert builder.separator("-") is builder
        assert builder.lowercase() is builder
        assert builder.remove_duplicates() is builder
        assert builder.trim_separators() is builder

    def test_empty_text(self) -> None:
        assert SlugBuilder().build() == ""

    def test_keep_case(self) -> None:
        assert SlugBuilder("Hello สวัสดี").lowercase(False).build() == "Hello-swasdi"

    def test_config(self) -> None:
        builder = SlugBuilder().separator("_").max_length(20).trim_separators(False)

        assert builder.config() == SlugConfig(
            separator="_", max_length=20, lowercase=True, trim_separators=False
        )

    def test_strategy_resets_options(self) -> None:
        builder = SlugBuilder("กข", strategy=Strategy.CUSTOM)
        builder.strategy_options({"custom_mapping": {"ก": "g", "ข": "x"}})
        assert builder.build() == "gx"

        builder.strategy(Strategy.CUSTOM)
        assert builder.build() == "kkh"

    def test_strategy_options_merge(self) -> None:
        builder = SlugBuilder(
            "กข", strategy="custom", strategy_options={"fallback_to_phonetic": True}
        )
        builder.strategy_options({"custom_mapping": {"ก": "g", "ข": "x"}})
        assert builder.build() == "gx"

    def test_options_checked_against_strategy(self) -> None:
        builder = SlugBuilder("ก", strategy="royal", strategy_options={"preserve_digits": False})
        with pytest.raises(ConfigurationError):
            builder.build()

    @pytest.mark.parametrize("max_length", [0, -5])
    def test_max_length_out_of_range(self, max_length: int) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            SlugBuilder().max_length(max_length)
        assert exc_info.value.context["min"] == 1

    @pytest.mark.parametrize("max_length", ["10", 2.5, True])
    def test_max_length_wrong_type(self, max_length: object) -> None:
        with pytest.raises(ConfigurationError):
            SlugBuilder(max_length=max_length)  # type: ignore[arg-type]

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ConfigurationError):
            SlugBuilder().strategy("klingon")

    def test_private_factory(self, factory: StrategyFactory) -> None:
        builder = SlugBuilder("สวัสดี", strategy="royal", factory=factory)

        assert builder.build() == "swasdi"
        assert builder.build() == "swasdi"
        assert factory.cache_stats() == {"cached_strategies": 1, "hits": 1, "misses": 1}

    def test_from_dict(self) -> None:
        builder = SlugBuilder.from_dict(
            {"text": "สวัสดี โลก", "separator": ".", "strategy": "royal"}
        )
        assert builder.build() == "swasdi.olk"

    def test_from_dict_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            SlugBuilder.from_dict({"text": "ก", "colour": "red"})
        assert exc_info.value.context["option"] == "colour"

    def test_make(self) -> None:
        assert SlugBuilder.make("สวัสดีโลก") == "swasdiolk"
        assert SlugBuilder.make("ก็", Strategy.ROYAL) == "k"


class TestThaiSlug:
    """Tests for the settings-aware generator."""

    def test_defaults(self) -> None:
        generator = ThaiSlug()

        assert generator.default_strategy is Strategy.PHONETIC
        assert generator.generate("สวัสดี โลก") == "swasdi-olk"

    def test_explicit_default_strategy(self) -> None:
        assert ThaiSlug("royal").generate("ก็") == "k"

    def test_per_call_options(self) -> None:
        generator = ThaiSlug()
        assert generator.generate("สวัสดี โลก", separator="_", strategy="royal") == "swasdi_olk"

    def test_separator_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("THAI_SLUG_SEPARATOR", "_")
        assert slugify("สวัสดี โลก") == "swasdi_olk"

    def test_strategy_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("THAI_SLUG_DEFAULT_STRATEGY", "royal")
        assert ThaiSlug().default_strategy is Strategy.ROYAL

    def test_max_length_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("THAI_SLUG_MAX_LENGTH", "6")
        assert slugify("สวัสดี โลก") == "swasdi"

    def test_invalid_strategy_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("THAI_SLUG_DEFAULT_STRATEGY", "klingon")
        with pytest.raises(ConfigurationError):
            ThaiSlug()

    def test_builder_seeded(self) -> None:
        builder = ThaiSlug().builder("สวัสดี", max_length=3)
        assert builder.config().max_length == 3
        assert builder.build() == "swa"

    def test_static_make(self) -> None:
        assert ThaiSlug.make("สวัสดีโลก") == "swasdiolk"
