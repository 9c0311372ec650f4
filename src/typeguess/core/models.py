"""Core data models used across all modules.

This module defines the fundamental data structures that form the
contract between modules: the type tags a guess can produce, the
compatibility groups that govern widening, and the immutable result
returned by a guesser.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from typeguess.sizing import Size

# Generic type for Result
T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        return self.value  # type: ignore[return-value]

    def map(self, fn: Callable[[T], Any]) -> Result[Any]:
        """Transform the value if successful."""
        if self.success:
            return Result.ok(fn(self.value), self.warnings)  # type: ignore[arg-type]
        return self  # type: ignore


# === Enums ===


class TypeTag(str, Enum):
    """Storage primitive types a guess can resolve to."""

    BOOLEAN = "BOOLEAN"
    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    DATETIME = "DATETIME"
    DURATION = "DURATION"
    STRING = "STRING"


class CompatibilityGroup(str, Enum):
    """Families of types that may widen into one another."""

    NUMERICAL = "numerical"
    TEMPORAL = "temporal"
    BOOLEAN = "boolean"
    TEXTUAL = "textual"  # STRING only, accepts everything


class InputRegime(str, Enum):
    """Which kind of input a guesser has been locked to."""

    UNSET = "unset"
    STRING = "string"
    HARD_TYPED = "hard_typed"


class GuessState(str, Enum):
    """Lifecycle of a guesser's estimate."""

    EMPTY = "empty"
    LOCKED = "locked"
    FALLEN_TO_STRING = "fallen_to_string"


# === Results ===


class DatabaseTypeRequest(BaseModel):
    """Destination column type and size able to hold every value seen.

    Produced by reading ``Guesser.guess``; never mutated by callers.
    """

    model_config = ConfigDict(frozen=True)

    type: TypeTag = TypeTag.STRING
    size: Size = Field(default_factory=Size)
    unicode: bool = False

    @property
    def width(self) -> int | None:
        """Character width relevant to the type, or None where storage is fixed."""
        if self.type is TypeTag.STRING:
            return self.size.string_length
        if self.type in (TypeTag.INTEGER, TypeTag.DECIMAL):
            return self.size.numeric_string_length() or None
        return None

    @classmethod
    def max(
        cls,
        first: DatabaseTypeRequest,
        second: DatabaseTypeRequest,
        allow_string_fallback: bool = True,
    ) -> DatabaseTypeRequest:
        """Smallest request able to hold everything both requests can hold.

        Raises:
            IncompatibleTypesError: if the types cannot widen into each other
                and ``allow_string_fallback`` is False.
        """
        from typeguess.merge import combine_requests

        return combine_requests(first, second, allow_string_fallback=allow_string_fallback)

    def __str__(self) -> str:
        if self.type is TypeTag.STRING:
            text = f"STRING({self.size.string_length})"
        elif self.type is TypeTag.DECIMAL:
            text = f"DECIMAL({self.size.precision},{self.size.scale})"
        elif self.type is TypeTag.INTEGER:
            text = f"INTEGER({self.size.integer_digits})"
        else:
            text = self.type.value
        return f"{text} unicode" if self.unicode else text


# Most specific first; STRING accepts everything and is always last.
PREFERENCE_ORDER: tuple[TypeTag, ...] = (
    TypeTag.BOOLEAN,
    TypeTag.INTEGER,
    TypeTag.DECIMAL,
    TypeTag.DATETIME,
    TypeTag.DURATION,
    TypeTag.STRING,
)
