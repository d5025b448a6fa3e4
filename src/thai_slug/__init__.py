"""Thai text to URL-safe slug conversion.

Pipeline: :func:`normalize` -> :func:`transliterate` -> :func:`make_url_safe`,
composed by :func:`slugify`, :class:`ThaiSlug` and :class:`SlugBuilder`.
"""

from thai_slug.classifier import (
    classify_combining_mark,
    classify_tone_mark,
    is_combining_mark,
    is_tone_mark,
)
from thai_slug.core.exceptions import ConfigurationError, ThaiSlugException
from thai_slug.normalizer import Normalizer, is_valid_thai_sequence, normalize
from thai_slug.slug import SlugBuilder, ThaiSlug, slugify
from thai_slug.strategies import (
    CustomStrategy,
    PhoneticStrategy,
    RoyalStrategy,
    TransliterationStrategy,
)
from thai_slug.transliterator import (
    Strategy,
    StrategyFactory,
    Transliterator,
    get_strategy,
    transliterate,
)
from thai_slug.url_safe import SlugConfig, UrlSafeMaker, make_url_safe

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CustomStrategy",
    "Normalizer",
    "PhoneticStrategy",
    "RoyalStrategy",
    "SlugBuilder",
    "SlugConfig",
    "Strategy",
    "StrategyFactory",
    "ThaiSlug",
    "ThaiSlugException",
    "TransliterationStrategy",
    "Transliterator",
    "UrlSafeMaker",
    "classify_combining_mark",
    "classify_tone_mark",
    "get_strategy",
    "is_combining_mark",
    "is_tone_mark",
    "is_valid_thai_sequence",
    "make_url_safe",
    "normalize",
    "slugify",
    "transliterate",
]
