"""URL sanitization for transliterated text."""

import dataclasses
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from text_unidecode import unidecode

from thai_slug.core.exceptions import ConfigurationError
from thai_slug.mappings.latin_map import ACCENT_MAP, REMOVED_CHARS, SEPARATOR_CHARS

_WHITESPACE_RE = re.compile(r"\s+")
_ACCENT_TABLE = str.maketrans(dict(ACCENT_MAP))

# Word boundaries earlier than this share of max_length are not used
WORD_BOUNDARY_RATIO = 0.4


@dataclass(frozen=True, slots=True)
class SlugConfig:
    """URL-safety settings for a single call.

    Attributes:
        separator: Replacement for whitespace and unsafe characters
        max_length: Maximum result length, None for unbounded
        lowercase: Case-fold the text first
        remove_duplicates: Collapse runs of the separator
        trim_separators: Strip the separator from both ends
    """

    separator: str = "-"
    max_length: int | None = None
    lowercase: bool = True
    remove_duplicates: bool = True
    trim_separators: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str):
            raise ConfigurationError.invalid_value("separator", self.separator, "str")
        if self.max_length is not None:
            if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
                raise ConfigurationError.invalid_value("max_length", self.max_length, "int")
            if self.max_length < 1:
                raise ConfigurationError.out_of_range("max_length", self.max_length, 1)


@lru_cache(maxsize=32)
def _disallowed_pattern(separator: str) -> re.Pattern[str]:
    allowed = "a-zA-Z0-9\\-_" + "".join(re.escape(c) for c in sorted(set(separator)))
    return re.compile(f"[^{allowed}]")


@lru_cache(maxsize=32)
def _separator_patterns(separator: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Return (separator runs, leading/trailing separators) for a non-empty separator."""
    sep = re.escape(separator)
    return (
        re.compile(f"(?:{sep}){{2,}}"),
        re.compile(f"^(?:{sep})+|(?:{sep})+$"),
    )


def _ascii_fold_char(char: str) -> str:
    folded = unidecode(char)
    if folded == "[?]":
        return ""
    return "".join(c for c in folded if c.isascii())


def _rstrip_separator(text: str, separator: str) -> str:
    while separator and text.endswith(separator):
        text = text[: -len(separator)]
    return text


class UrlSafeMaker:
    """Turns transliterated text into a URL-safe slug.

    Steps, in order: trim, lowercase, accent folding with an ASCII
    fallback, whitespace to separator, unsafe punctuation to separator,
    removal of anything else outside ``[A-Za-z0-9_-]`` and the separator,
    separator collapsing and trimming, then word-boundary aware
    truncation.
    """

    def make_safe(self, text: str, config: SlugConfig | None = None) -> str:
        """Sanitize ``text`` for use in a URL path segment."""
        config = config or SlugConfig()
        separator = config.separator

        text = text.strip()
        if not text:
            return ""

        if config.lowercase:
            text = text.lower()

        text = self._transliterate_latin(text)
        if config.lowercase:
            # The ASCII fallback emits capitals for some scripts (ฤ -> R)
            text = text.lower()
        text = _WHITESPACE_RE.sub(separator, text)
        text = self._sanitize(text, separator)

        if separator:
            runs, ends = _separator_patterns(separator)
            if config.remove_duplicates:
                text = runs.sub(separator, text)
            if config.trim_separators:
                text = ends.sub("", text)

        if config.max_length is not None and len(text) > config.max_length:
            text = self.truncate(text, config.max_length, separator)

        return text

    @staticmethod
    def truncate(text: str, max_length: int, separator: str) -> str:
        """Cut ``text`` to ``max_length`` preferring a word boundary.

        The result is never longer than ``max_length`` and never ends with
        the separator or with a fragment of a multi-character separator.
        """
        if len(text) <= max_length:
            return text

        truncated = text[:max_length]
        if not separator:
            return truncated
        if not truncated.endswith(separator):
            # A cut through a multi-character separator drops its fragment
            for size in range(min(len(separator) - 1, max_length), 0, -1):
                start = max_length - size
                if text.startswith(separator, start):
                    return _rstrip_separator(truncated[:start], separator)
            return truncated

        last_separator = truncated.rfind(separator)
        if last_separator >= max_length * WORD_BOUNDARY_RATIO:
            return _rstrip_separator(truncated[:last_separator], separator)

        return _rstrip_separator(truncated, separator)

    @staticmethod
    def _transliterate_latin(text: str) -> str:
        text = text.translate(_ACCENT_TABLE)
        if text.isascii():
            return text
        return "".join(c if c.isascii() else _ascii_fold_char(c) for c in text)

    @staticmethod
    def _sanitize(text: str, separator: str) -> str:
        chars = []
        for char in text:
            if char in SEPARATOR_CHARS:
                chars.append(separator)
            elif char not in REMOVED_CHARS:
                chars.append(char)
        text = "".join(chars)

        return _disallowed_pattern(separator).sub("", text)


_default_maker = UrlSafeMaker()


def make_url_safe(text: str, config: SlugConfig | None = None, **overrides: Any) -> str:
    """Sanitize text with the default :class:`UrlSafeMaker`.

    Args:
        text: Transliterated text
        config: Base configuration (defaults to ``SlugConfig()``)
        **overrides: Individual ``SlugConfig`` fields to override

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    if config is None:
        config = SlugConfig(**overrides)
    elif overrides:
        config = dataclasses.replace(config, **overrides)
    return _default_maker.make_safe(text, config)
