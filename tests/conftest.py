"""Pytest fixtures for thai-slug tests."""

import logging
from collections.abc import Generator

import pytest

from thai_slug.core.config import get_settings
from thai_slug.normalizer import Normalizer
from thai_slug.transliterator import StrategyFactory
from thai_slug.url_safe import UrlSafeMaker


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from THAI_SLUG_* variables and the settings cache."""
    for name in (
        "THAI_SLUG_DEFAULT_STRATEGY",
        "THAI_SLUG_SEPARATOR",
        "THAI_SLUG_MAX_LENGTH",
        "THAI_SLUG_LOWERCASE",
        "THAI_SLUG_LOG_LEVEL",
        "THAI_SLUG_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """setup_logging() replaces the root logger handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def thai_texts() -> list[str]:
    """Thai sample texts."""
    return [
        "สวัสดีโลก",
        "สวัสดี โลก",
        "ภาษาไทย",
        "กรุงเทพมหานคร",
        "ข่าวด่วน",
        "การ์ตูน",
        "ปี ๒๕๖๗",
    ]


@pytest.fixture
def mixed_texts() -> list[str]:
    """Mixed-script and edge-case samples."""
    return [
        "",
        "   ",
        "Hello สวัสดี World",
        "ราคา $99.99 (ลดราคา!)",
        "café résumé",
        "่่ก",
        "ก่้๊",
        "a" * 300,
        "this is a very long text that should be truncated",
    ]


@pytest.fixture
def normalizer() -> Normalizer:
    return Normalizer()


@pytest.fixture
def url_safe_maker() -> UrlSafeMaker:
    return UrlSafeMaker()


@pytest.fixture
def factory() -> StrategyFactory:
    """A private strategy factory with an empty cache."""
    return StrategyFactory()
