"""Strategy selection, caching and the transliteration entry point."""

import json
import logging
import threading
from collections.abc import Mapping
from enum import Enum
from typing import Any

from thai_slug.core.exceptions import ConfigurationError
from thai_slug.strategies.base import TransliterationStrategy
from thai_slug.strategies.custom import CustomStrategy
from thai_slug.strategies.phonetic import PhoneticStrategy
from thai_slug.strategies.royal import RoyalStrategy

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Built-in transliteration strategies."""

    PHONETIC = "phonetic"  # Pronunciation based
    ROYAL = "royal"  # Royal Institute (RTGS)
    CUSTOM = "custom"  # Caller-supplied table

    @property
    def strategy_class(self) -> type[TransliterationStrategy]:
        match self:
            case Strategy.PHONETIC:
                return PhoneticStrategy
            case Strategy.ROYAL:
                return RoyalStrategy
            case Strategy.CUSTOM:
                return CustomStrategy

    def default_options(self) -> dict[str, Any]:
        """Return a fresh copy of this strategy's default options."""
        return dict(self.strategy_class.DEFAULT_OPTIONS)

    def create_instance(self, options: Mapping[str, Any] | None = None) -> TransliterationStrategy:
        """Construct a new strategy instance."""
        return self.strategy_class(options)

    @classmethod
    def from_string(cls, value: "str | Strategy", default: "Strategy | None" = None) -> "Strategy":
        """Resolve a strategy leniently, falling back to ``default`` (PHONETIC)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return default or cls.PHONETIC


def resolve_strategy(
    strategy: Strategy | str, available: list[str] | None = None
) -> Strategy:
    """Resolve a built-in strategy strictly.

    Raises:
        ConfigurationError: If ``strategy`` names no built-in strategy
    """
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(strategy)
    except ValueError:
        names = available if available is not None else [s.value for s in Strategy]
        raise ConfigurationError.unknown_strategy(str(strategy), names) from None


def _cache_key(name: str, options: Mapping[str, Any]) -> str:
    """Canonical, order-independent key for a strategy and its options."""
    return name + ":" + json.dumps(options, sort_keys=True, default=_jsonable, ensure_ascii=False)


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    return repr(value)


class StrategyFactory:
    """Creates and caches strategy instances.

    Instances are cached per strategy name and canonical options, which is
    safe because strategies are immutable. The cache and the registry of
    user strategy classes are guarded by a lock, so a single factory may be
    shared between threads.
    """

    def __init__(
        self,
        global_defaults: Mapping[str, Any] | None = None,
        custom_strategies: Mapping[str, type[TransliterationStrategy]] | None = None,
    ) -> None:
        """Initialize factory.

        Args:
            global_defaults: Options applied over strategy defaults, for strategies
                that accept them
            custom_strategies: User strategy classes keyed by name
        """
        self._global_defaults = dict(global_defaults or {})
        self._custom: dict[str, type[TransliterationStrategy]] = {}
        self._cache: dict[str, TransliterationStrategy] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

        for name, strategy_class in (custom_strategies or {}).items():
            self.register(name, strategy_class)

    def create(
        self,
        strategy: Strategy | str,
        options: Mapping[str, Any] | None = None,
    ) -> TransliterationStrategy:
        """Return a (possibly cached) built-in strategy instance.

        Raises:
            ConfigurationError: Unknown strategy name or invalid options
        """
        resolved = self.resolve(strategy)
        valid = resolved.strategy_class.valid_option_keys()
        shared = {k: v for k, v in self._global_defaults.items() if k in valid}
        merged = {**resolved.default_options(), **shared, **(options or {})}
        try:
            key = _cache_key(resolved.value, merged)
        except TypeError:
            # Unsortable keys; the constructor reports the real problem
            return resolved.create_instance(merged)

        with self._lock:
            instance = self._cache.get(key)
            if instance is not None:
                self._hits += 1
                logger.debug("strategy_cache_hit strategy=%s", resolved.value)
                return instance

            instance = resolved.create_instance(merged)
            self._cache[key] = instance
            self._misses += 1

        logger.debug("strategy_created strategy=%s options=%s", resolved.value, sorted(merged))
        return instance

    def register(self, name: str, strategy_class: type[TransliterationStrategy]) -> None:
        """Register a user strategy class under ``name``.

        Raises:
            ConfigurationError: If the class is not a TransliterationStrategy
        """
        is_strategy = isinstance(strategy_class, type) and issubclass(
            strategy_class, TransliterationStrategy
        )
        if not is_strategy:
            raise ConfigurationError(
                f"Strategy class must subclass TransliterationStrategy: {strategy_class!r}",
                context={"strategy_name": name, "class": strategy_class},
            )
        with self._lock:
            self._custom[name] = strategy_class

    def create_custom(
        self, name: str, options: Mapping[str, Any] | None = None
    ) -> TransliterationStrategy:
        """Construct a registered user strategy (not cached)."""
        with self._lock:
            strategy_class = self._custom.get(name)
        if strategy_class is None:
            raise ConfigurationError(
                f"Custom strategy not registered: {name}",
                context={"strategy_name": name, "available_strategies": sorted(self._custom)},
            )
        return strategy_class(options)

    def available_strategies(self) -> list[str]:
        """Return built-in strategy names followed by registered ones."""
        with self._lock:
            registered = list(self._custom)
        return [s.value for s in Strategy] + registered

    def has_strategy(self, name: str) -> bool:
        return name in self.available_strategies()

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def cache_stats(self) -> dict[str, int]:
        """Return cache size and hit/miss counters."""
        with self._lock:
            return {
                "cached_strategies": len(self._cache),
                "hits": self._hits,
                "misses": self._misses,
            }

    def resolve(self, strategy: Strategy | str) -> Strategy:
        """Resolve a strategy name strictly.

        Raises:
            ConfigurationError: If the name is not a built-in strategy
        """
        return resolve_strategy(strategy, self.available_strategies())


class Transliterator:
    """Transliterates text with a default strategy and options."""

    def __init__(
        self,
        default_strategy: Strategy | str = Strategy.PHONETIC,
        default_options: Mapping[str, Any] | None = None,
        factory: StrategyFactory | None = None,
    ) -> None:
        """Initialize transliterator.

        Args:
            default_strategy: Strategy used when a call names none
            default_options: Options merged beneath per-call options
            factory: Strategy factory (a private one by default)
        """
        self._factory = factory or StrategyFactory()
        self._default_strategy = self._factory.resolve(default_strategy)
        self._default_options = dict(default_options or {})

    @property
    def default_strategy(self) -> Strategy:
        return self._default_strategy

    def transliterate(
        self,
        text: str,
        strategy: Strategy | str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Transliterate ``text``.

        Raises:
            ConfigurationError: Unknown strategy name or invalid options
        """
        resolved = self._default_strategy if strategy is None else strategy
        merged = {**self._default_options, **(options or {})}
        instance = self._factory.create(resolved, merged)
        if not text:
            return ""
        return instance.transliterate(text)


_default_factory = StrategyFactory()


def get_strategy(
    strategy: Strategy | str = Strategy.PHONETIC,
    options: Mapping[str, Any] | None = None,
) -> TransliterationStrategy:
    """Return a strategy instance from the shared process-wide factory."""
    return _default_factory.create(strategy, options)


def transliterate(
    text: str,
    strategy: Strategy | str = Strategy.PHONETIC,
    options: Mapping[str, Any] | None = None,
) -> str:
    """Transliterate ``text`` with the given strategy and options.

    Raises:
        ConfigurationError: If ``options`` contains a key outside the
            strategy's allow-list, or the strategy name is unknown
    """
    return get_strategy(strategy, options).transliterate(text)
