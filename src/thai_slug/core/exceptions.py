"""Custom exception hierarchy for thai-slug.

Transformation functions never raise for string input; every exception
defined here is raised at a construction boundary (strategy creation,
slug configuration) and carries the offending value for diagnostics.
"""

from collections.abc import Iterable
from difflib import get_close_matches
from typing import Any


class ThaiSlugException(Exception):  # noqa: N818
    """Base exception for thai-slug.

    All custom exceptions in thai-slug inherit from this class so callers
    can catch everything the library raises with a single except clause.
    """

    def __init__(self, message: str = "", context: dict[str, Any] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            context: Extra diagnostic values (offending key, allowed values...).
        """
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = dict(context or {})


class ConfigurationError(ThaiSlugException):
    """Configuration is invalid.

    Raised when strategy options contain an unrecognized key, when an
    option value has the wrong shape, or when a slug setting such as the
    maximum length is out of range.
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        context: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            context: Extra diagnostic values.
            suggestion: Optional hint such as a close valid option name.
        """
        super().__init__(message, context)
        self.suggestion = suggestion

    @classmethod
    def unknown_option(
        cls,
        option: str,
        valid_options: Iterable[str],
        strategy: str | None = None,
    ) -> "ConfigurationError":
        """Build the error for an option key outside a strategy's allow-list."""
        valid = sorted(valid_options)
        target = f" for strategy '{strategy}'" if strategy else ""
        message = f"Unknown option '{option}'{target}. Valid options are: {', '.join(valid)}"

        matches = get_close_matches(str(option), valid, n=1, cutoff=0.6)
        suggestion = f'Did you mean "{matches[0]}"?' if matches else None

        return cls(
            message,
            context={"option": option, "valid_options": valid, "strategy": strategy},
            suggestion=suggestion,
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, expected: str) -> "ConfigurationError":
        """Build the error for a value of the wrong type or shape."""
        actual = type(value).__name__
        return cls(
            f"Invalid value for '{field}': expected {expected}, got {actual}",
            context={"field": field, "value": value, "expected": expected, "actual": actual},
        )

    @classmethod
    def out_of_range(cls, field: str, value: Any, minimum: int) -> "ConfigurationError":
        """Build the error for a numeric value below its minimum."""
        return cls(
            f"Value {value!r} for '{field}' is out of range (min: {minimum})",
            context={"field": field, "value": value, "min": minimum},
        )

    @classmethod
    def unknown_strategy(cls, name: str, available: Iterable[str]) -> "ConfigurationError":
        """Build the error for a strategy name nobody registered."""
        names = list(available)
        return cls(
            f"Invalid strategy '{name}'. Available strategies: {', '.join(names)}",
            context={"strategy": name, "available_strategies": names},
        )
