"""User-defined transliteration strategy."""

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from thai_slug.core.exceptions import ConfigurationError
from thai_slug.mappings.thai_map import DEFAULT_CUSTOM_MAP
from thai_slug.strategies.base import TransliterationStrategy


def _compile_mapping(mapping: Mapping[str, str]) -> Callable[[str], str]:
    """Build a single-pass replacer for ``mapping``.

    Single code point keys use ``str.translate``. Longer keys are matched
    longest first, so ``{"กร": "kr", "ก": "k"}`` turns "กร" into "kr".
    """
    if all(len(key) == 1 for key in mapping):
        table = str.maketrans(dict(mapping))
        return lambda text: text.translate(table)

    keys = sorted(mapping, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return lambda text: pattern.sub(lambda m: mapping[m.group(0)], text)


class CustomStrategy(TransliterationStrategy):
    """Transliteration driven by a caller-supplied table.

    A non-empty ``custom_mapping`` is used exclusively: text it does not
    cover passes through unchanged. Without a mapping the built-in
    phonetic-equivalent table is used, unless ``fallback_to_phonetic`` is
    cleared, in which case only whitespace is cleaned up.
    """

    DEFAULT_OPTIONS: ClassVar[Mapping[str, Any]] = MappingProxyType(
        {
            "custom_mapping": MappingProxyType({}),
            "fallback_to_phonetic": True,
        }
    )

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)

        mapping: Mapping[str, str] = self.options["custom_mapping"]
        if mapping:
            # Copy so later changes to the caller's dict cannot leak in
            self._mapping: Mapping[str, str] | None = MappingProxyType(dict(mapping))
        elif self.options["fallback_to_phonetic"]:
            self._mapping = DEFAULT_CUSTOM_MAP
        else:
            self._mapping = None

        self._replace = _compile_mapping(self._mapping) if self._mapping else None

    @property
    def name(self) -> str:
        return "custom"

    @property
    def mapping(self) -> Mapping[str, str] | None:
        """The table in effect, or None when text passes through untouched."""
        return self._mapping

    def validate_options(self, options: Mapping[str, Any]) -> bool:
        super().validate_options(options)

        mapping = options.get("custom_mapping")
        if not isinstance(mapping, Mapping):
            raise ConfigurationError.invalid_value(
                "custom_mapping", mapping, "mapping of str to str"
            )
        for key, value in mapping.items():
            if not isinstance(key, str) or not key or not isinstance(value, str):
                raise ConfigurationError.invalid_value(
                    f"custom_mapping[{key!r}]", value, "non-empty str key mapped to str"
                )
        return True

    def _transliterate(self, text: str) -> str:
        if self._replace is None:
            return text
        return self._replace(text)
