"""Slug generation: normalize, transliterate, make URL-safe."""

import logging
from collections.abc import Mapping
from typing import Any

from thai_slug.core.config import get_settings
from thai_slug.core.exceptions import ConfigurationError
from thai_slug.normalizer import Normalizer
from thai_slug.transliterator import Strategy, StrategyFactory, get_strategy, resolve_strategy
from thai_slug.url_safe import SlugConfig, UrlSafeMaker

logger = logging.getLogger(__name__)

_BUILDER_KEYS = frozenset(
    (
        "text",
        "strategy",
        "strategy_options",
        "max_length",
        "separator",
        "lowercase",
        "remove_duplicates",
        "trim_separators",
    )
)


class SlugBuilder:
    """Fluent builder for a single slug.

    Example:
        >>> SlugBuilder().text("สวัสดี โลก").separator("_").build()
        'swasdi_olk'
    """

    def __init__(
        self,
        text: str = "",
        strategy: Strategy | str = Strategy.PHONETIC,
        strategy_options: Mapping[str, Any] | None = None,
        max_length: int | None = None,
        separator: str = "-",
        lowercase: bool = True,
        remove_duplicates: bool = True,
        trim_separators: bool = True,
        normalizer: Normalizer | None = None,
        factory: StrategyFactory | None = None,
        url_safe_maker: UrlSafeMaker | None = None,
    ) -> None:
        self._text = text
        self._strategy = resolve_strategy(strategy)
        self._strategy_options = dict(strategy_options or {})
        self._max_length: int | None = None
        self.max_length(max_length)
        self._separator = separator
        self._lowercase = lowercase
        self._remove_duplicates = remove_duplicates
        self._trim_separators = trim_separators
        self._normalizer = normalizer or Normalizer()
        self._factory = factory
        self._url_safe_maker = url_safe_maker or UrlSafeMaker()

    def text(self, text: str) -> "SlugBuilder":
        self._text = text
        return self

    def strategy(self, strategy: Strategy | str) -> "SlugBuilder":
        """Switch strategy; resets strategy options to its defaults."""
        self._strategy = resolve_strategy(strategy)
        self._strategy_options = self._strategy.default_options()
        return self

    def strategy_options(self, options: Mapping[str, Any]) -> "SlugBuilder":
        self._strategy_options = {**self._strategy_options, **options}
        return self

    def max_length(self, max_length: int | None) -> "SlugBuilder":
        """Set the maximum slug length.

        Raises:
            ConfigurationError: If ``max_length`` is not a positive integer
        """
        if max_length is not None:
            if isinstance(max_length, bool) or not isinstance(max_length, int):
                raise ConfigurationError.invalid_value("max_length", max_length, "int")
            if max_length < 1:
                raise ConfigurationError.out_of_range("max_length", max_length, 1)
        self._max_length = max_length
        return self

    def separator(self, separator: str) -> "SlugBuilder":
        self._separator = separator
        return self

    def lowercase(self, lowercase: bool = True) -> "SlugBuilder":
        self._lowercase = lowercase
        return self

    def remove_duplicates(self, remove: bool = True) -> "SlugBuilder":
        self._remove_duplicates = remove
        return self

    def trim_separators(self, trim: bool = True) -> "SlugBuilder":
        self._trim_separators = trim
        return self

    def config(self) -> SlugConfig:
        """Return the URL-safety configuration this builder would use."""
        return SlugConfig(
            separator=self._separator,
            max_length=self._max_length,
            lowercase=self._lowercase,
            remove_duplicates=self._remove_duplicates,
            trim_separators=self._trim_separators,
        )

    def build(self) -> str:
        """Run the pipeline and return the slug."""
        if not self._text:
            return ""

        if self._factory is not None:
            strategy = self._factory.create(self._strategy, self._strategy_options)
        else:
            strategy = get_strategy(self._strategy, self._strategy_options)

        normalized = self._normalizer.normalize(self._text)
        transliterated = strategy.transliterate(normalized)
        slug = self._url_safe_maker.make_safe(transliterated, self.config())

        logger.debug(
            "slug_generated strategy=%s input_length=%d slug_length=%d",
            strategy.name,
            len(self._text),
            len(slug),
        )
        return slug

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "SlugBuilder":
        """Create a builder from a configuration mapping.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        for key in config:
            if key not in _BUILDER_KEYS:
                raise ConfigurationError.unknown_option(key, _BUILDER_KEYS)
        return cls(**config)

    @classmethod
    def make(cls, text: str, strategy: Strategy | str = Strategy.PHONETIC) -> str:
        """Build a slug with default settings."""
        return cls(text=text, strategy=strategy).build()


class ThaiSlug:
    """Slug generator with defaults taken from :class:`Settings`."""

    def __init__(self, default_strategy: Strategy | str | None = None) -> None:
        """Initialize generator.

        Args:
            default_strategy: Strategy used when a call names none
                (defaults to ``Settings.default_strategy``)
        """
        settings = get_settings()
        self._settings = settings
        self._default_strategy = resolve_strategy(
            default_strategy if default_strategy is not None else settings.default_strategy
        )

    @property
    def default_strategy(self) -> Strategy:
        return self._default_strategy

    def builder(self, text: str = "", **options: Any) -> SlugBuilder:
        """Create a builder seeded with this generator's defaults."""
        config: dict[str, Any] = {
            "text": text,
            "strategy": self._default_strategy,
            "max_length": self._settings.max_length,
            "separator": self._settings.separator,
            "lowercase": self._settings.lowercase,
        }
        config.update(options)
        return SlugBuilder.from_dict(config)

    def generate(self, text: str, **options: Any) -> str:
        """Generate a slug.

        Args:
            text: Thai (or mixed) input text
            **options: Any ``SlugBuilder`` setting, e.g. ``separator="_"``
        """
        return self.builder(text, **options).build()

    @staticmethod
    def make(text: str, strategy: Strategy | str = Strategy.PHONETIC) -> str:
        return SlugBuilder.make(text, strategy)


def slugify(text: str, **options: Any) -> str:
    """Generate a slug from Thai text.

    >>> slugify("สวัสดีโลก")
    'swasdiolk'
    """
    return ThaiSlug().generate(text, **options)
