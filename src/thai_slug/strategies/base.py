"""Base class for transliteration strategies."""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from thai_slug.core.exceptions import ConfigurationError

_WHITESPACE_RE = re.compile(r"\s+")


class TransliterationStrategy(ABC):
    """Abstract base class for Thai to Latin transliteration strategies.

    Subclasses declare their option allow-list through ``DEFAULT_OPTIONS``
    and implement ``_transliterate``. Options are merged over the defaults
    and validated once at construction; afterwards the instance is
    immutable and safe to share between threads.
    """

    DEFAULT_OPTIONS: ClassVar[Mapping[str, Any]] = MappingProxyType({})

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Initialize strategy.

        Args:
            options: Strategy options, merged over ``DEFAULT_OPTIONS``
            **kwargs: Options given as keyword arguments (override ``options``)

        Raises:
            ConfigurationError: If an option key is not in the allow-list
                or an option value is malformed
        """
        merged = {**self.DEFAULT_OPTIONS, **(options or {}), **kwargs}
        self.validate_options(merged)
        self._options: Mapping[str, Any] = MappingProxyType(merged)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the strategy name."""
        ...

    def get_name(self) -> str:
        return self.name

    @property
    def options(self) -> Mapping[str, Any]:
        """Read-only view of the effective options."""
        return self._options

    @classmethod
    def valid_option_keys(cls) -> frozenset[str]:
        return frozenset(cls.DEFAULT_OPTIONS)

    def validate_options(self, options: Mapping[str, Any]) -> bool:
        """Check option keys against the allow-list.

        Returns:
            True when every key is allowed

        Raises:
            ConfigurationError: On the first unknown key
        """
        valid = self.valid_option_keys()
        for key in options:
            if key not in valid:
                raise ConfigurationError.unknown_option(key, valid, strategy=self.name)
        return True

    def transliterate(self, text: str) -> str:
        """Transliterate Thai text to Latin characters."""
        if not text:
            return ""
        return _WHITESPACE_RE.sub(" ", self._transliterate(text)).strip()

    @abstractmethod
    def _transliterate(self, text: str) -> str:
        """Apply the strategy's tables; whitespace is cleaned up by the caller."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._options)!r})"


class TableStrategy(TransliterationStrategy):
    """Strategy applying digit, consonant and vowel tables in that order.

    Each table is a total single-code-point replacement over the whole
    text; code points missing from every table pass through unchanged.
    """

    @abstractmethod
    def _build_tables(self) -> tuple[Mapping[str, str], ...]:
        """Return the replacement tables in application order."""
        ...

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self._tables = tuple(str.maketrans(dict(table)) for table in self._build_tables())

    def _transliterate(self, text: str) -> str:
        for table in self._tables:
            text = text.translate(table)
        return text
