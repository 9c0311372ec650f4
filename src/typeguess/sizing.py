"""Size tracking for inferred column types.

A Size records the widest value seen so far: digits before and after the
decimal point and the longest text rendering. Every operation returns a Size
at least as large as its inputs in each field, so accretion is monotonic and
independent of the order in which values arrive.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Size:
    """Width metadata needed to persist a column without loss."""

    integer_digits: int = 0
    fractional_digits: int = 0
    string_length: int = 0

    def __post_init__(self) -> None:
        if self.integer_digits < 0 or self.fractional_digits < 0 or self.string_length < 0:
            raise ValueError(f"Size fields must be non-negative, got {self!r}")

    @property
    def precision(self) -> int:
        """Total significant digits (SQL decimal precision)."""
        return self.integer_digits + self.fractional_digits

    @property
    def scale(self) -> int:
        """Digits after the decimal point (SQL decimal scale)."""
        return self.fractional_digits

    @property
    def is_empty(self) -> bool:
        """True when no numeric digits have been recorded."""
        return self.integer_digits == 0 and self.fractional_digits == 0

    def grow_numeric(self, integer_digits: int, fractional_digits: int = 0) -> Size:
        """Return a Size covering at least the given digit counts."""
        if integer_digits <= self.integer_digits and fractional_digits <= self.fractional_digits:
            return self
        return Size(
            max(self.integer_digits, integer_digits),
            max(self.fractional_digits, fractional_digits),
            self.string_length,
        )

    def grow_length(self, length: int) -> Size:
        """Return a Size whose string length covers ``length``."""
        if length <= self.string_length:
            return self
        return Size(self.integer_digits, self.fractional_digits, length)

    def combine(self, other: Size) -> Size:
        """Component-wise maximum of two sizes."""
        if other is self:
            return self
        return self.grow_numeric(other.integer_digits, other.fractional_digits).grow_length(
            other.string_length
        )

    def numeric_string_length(self) -> int:
        """Characters needed to write the widest number, excluding any sign."""
        if self.is_empty:
            return 0
        length = self.integer_digits + self.fractional_digits
        if self.fractional_digits > 0:
            length += 1  # decimal point
        return length


EMPTY_SIZE = Size()
