"""Exceptions raised by the type guessing engine.

Every error is raised synchronously at the offending call and never leaves a
guesser partially updated. Recovery (re-ingesting as text, skipping the row)
is up to the caller.
"""

from __future__ import annotations

from typing import Any


class TypeGuessError(Exception):
    """Base class for all type guessing errors."""


class UnsupportedTypeError(TypeGuessError):
    """No decider is registered for a scalar's Python type."""

    def __init__(self, value_type: type | str):
        self.value_type = value_type
        name = value_type if isinstance(value_type, str) else value_type.__name__
        super().__init__(f"No type decider exists for type: {name}")


class InvalidDeciderConfigurationError(TypeGuessError):
    """A decider was registered without any supported types."""

    def __init__(self, decider_name: str):
        self.decider_name = decider_name
        super().__init__(f"Decider {decider_name} was not given any supported scalar types")


class IncompatibleTypesError(TypeGuessError):
    """Two types share no compatibility group and String fallback was not allowed."""

    def __init__(self, first: Any, second: Any):
        self.first = first
        self.second = second
        super().__init__(
            f"Could not combine types '{first}' and '{second}': they share no "
            "compatibility group and falling back to STRING was not allowed"
        )


class ParseFailureError(TypeGuessError, ValueError):
    """A string could not be parsed by the decider of the current guess."""

    def __init__(self, value: str, type_tag: Any, reason: str | None = None):
        self.value = value
        self.type_tag = type_tag
        message = f"Could not parse '{value}' as {getattr(type_tag, 'value', type_tag)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MixedTypingError(TypeGuessError):
    """Strings and hard typed values (or incompatible hard typed values) were mixed.

    A guesser must be fed either strings or already-typed scalars, never both.
    """

    def __init__(self, message: str, value: Any = None, previous: Any = None):
        self.value = value
        self.previous = previous
        super().__init__(message)


_AFTER_STRING = (
    "Guesser instances must be used with either strings OR hard typed objects, "
    "not mixed with untyped objects."
)


class IntegerAfterStringError(MixedTypingError):
    """A hard typed int arrived after string values."""

    def __init__(self, value: Any):
        super().__init__(
            f"Cannot process hard typed int value after processing string values. {_AFTER_STRING}",
            value=value,
            previous=str,
        )


class DecimalAfterStringError(MixedTypingError):
    """A hard typed Decimal or float arrived after string values."""

    def __init__(self, value: Any):
        super().__init__(
            f"Cannot process hard typed decimal value after processing string values. {_AFTER_STRING}",
            value=value,
            previous=str,
        )


class BooleanAfterStringError(MixedTypingError):
    """A hard typed bool arrived after string values."""

    def __init__(self, value: Any):
        super().__init__(
            f"Cannot process hard typed bool value after processing string values. {_AFTER_STRING}",
            value=value,
            previous=str,
        )


class ScalarAfterStringError(MixedTypingError):
    """Any other hard typed value arrived after string values."""

    def __init__(self, value: Any):
        super().__init__(
            f"Cannot process hard typed {type(value).__name__} value after processing "
            f"string values. {_AFTER_STRING}",
            value=value,
            previous=str,
        )


class StringAfterScalarError(MixedTypingError):
    """A string arrived after hard typed values."""

    def __init__(self, value: Any, previous: Any):
        super().__init__(
            f"Cannot process string values after processing hard typed objects "
            f"(previously locked to {previous}). {_AFTER_STRING}",
            value=value,
            previous=previous,
        )


class ScalarFamilyConflictError(MixedTypingError):
    """A hard typed value of a non-mergeable family followed another family."""

    def __init__(self, value: Any, previous: Any):
        super().__init__(
            f"We were adjusting to compensate for object '{value}' which is of type "
            f"'{type(value).__name__}', we were previously passed a '{previous}' type",
            value=value,
            previous=previous,
        )
