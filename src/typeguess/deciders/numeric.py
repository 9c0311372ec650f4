"""Integer and decimal deciders.

Both live in the NUMERICAL compatibility group: a column of integers that
later sees "2.5" widens to DECIMAL, keeping the integer digit count.
"""

from __future__ import annotations

import math
import re
from bisect import bisect_right
from decimal import Decimal, InvalidOperation
from typing import Any

from typeguess.core.models import CompatibilityGroup, TypeTag
from typeguess.deciders.base import Decider, DeciderOptions
from typeguess.sizing import Size

# Signed 64-bit range, the widest integer column type
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1
INTEGER_MAX_DIGITS = 19

# Widest fixed point value a DECIMAL column can hold (digits either side of the point)
MAX_DECIMAL_PRECISION = 28

_POWERS_OF_TEN = tuple(10**i for i in range(1, INTEGER_MAX_DIGITS + 1))


def integer_digit_count(value: int) -> int:
    """Decimal digits of a 64-bit integer's magnitude, counted without formatting it."""
    return bisect_right(_POWERS_OF_TEN, abs(value)) + 1


def in_integer_range(value: int) -> bool:
    return INTEGER_MIN <= value <= INTEGER_MAX


def _integer_part_pattern(group_separator: str) -> str:
    if not group_separator:
        return r"\d+"
    sep = re.escape(group_separator)
    return rf"(?:\d{{1,3}}(?:{sep}\d{{3}})+|\d+)"


def decimal_digits(value: Decimal) -> tuple[int, int]:
    """Digits before and after the decimal point as the value is written.

    Trailing fractional zeros count ("2.50" has two fractional digits),
    leading integer zeros do not ("0.5" has none before the point).
    """
    _, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int):
        raise InvalidOperation(f"{value} is not a finite number")
    if exponent >= 0:
        significant = len(digits) + exponent if any(digits) else 0
        return (max(significant, 1), 0)
    fractional = -exponent
    # Decimal never keeps leading zeros, so whatever precedes the point is significant
    return (max(len(digits) - fractional, 0), fractional)


class IntegerDecider(Decider):
    """Whole numbers, optionally signed and with culture group separators.

    Strings claimed by an explicit date rule are rejected so the date/time
    decider can take them. Values outside the signed 64-bit range are left to
    the decimal decider.
    """

    type_tag = TypeTag.INTEGER
    compatibility_group = CompatibilityGroup.NUMERICAL
    scalar_types = (int,)

    def __init__(self, options: DeciderOptions | None = None):
        super().__init__(options)
        self._group_separator = self.culture.group_separator
        self._pattern = re.compile(rf"[+-]?{_integer_part_pattern(self._group_separator)}")

    def _clean(self, candidate: str) -> str:
        if self._group_separator:
            return candidate.replace(self._group_separator, "")
        return candidate

    def _accept(self, candidate: str, size: Size) -> Size | None:
        if not self._pattern.fullmatch(candidate):
            return None
        if self.options.explicit_date(candidate) is not None:
            return None
        cleaned = self._clean(candidate)
        digits = len(cleaned.lstrip("+-").lstrip("0")) or 1
        if digits > INTEGER_MAX_DIGITS:
            return None
        if digits == INTEGER_MAX_DIGITS and not in_integer_range(int(cleaned)):
            return None
        return size.grow_numeric(digits, 0)

    def _parse(self, candidate: str) -> int:
        if not self._pattern.fullmatch(candidate):
            raise ValueError(f"'{candidate}' is not a whole number")
        return int(self._clean(candidate))

    def accepts_scalar(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and in_integer_range(value)

    def size_of_scalar(self, value: Any, size: Size) -> Size:
        digits = integer_digit_count(value)
        return size.grow_numeric(digits, 0).grow_length(digits + (value < 0))

    def string_length_for(self, size: Size) -> int:
        return max(size.string_length, size.numeric_string_length())


class DecimalDecider(Decider):
    """Fixed point numbers with culture decimal and group separators.

    Scientific notation is accepted and sized as its positional expansion.
    Accepts every string the integer decider accepts; strings claimed by an
    explicit date rule are rejected by both.
    """

    type_tag = TypeTag.DECIMAL
    compatibility_group = CompatibilityGroup.NUMERICAL
    scalar_types = (Decimal, float)
    widens_from = frozenset({TypeTag.INTEGER})

    def __init__(self, options: DeciderOptions | None = None):
        super().__init__(options)
        culture = self.culture
        self._group_separator = culture.group_separator
        self._decimal_separator = culture.decimal_separator
        integer_part = _integer_part_pattern(self._group_separator)
        point = re.escape(self._decimal_separator)
        self._pattern = re.compile(
            rf"[+-]?(?:{integer_part}(?:{point}\d*)?|{point}\d+)(?:[eE][+-]?\d+)?"
        )

    def _to_decimal(self, candidate: str) -> Decimal:
        if not self._pattern.fullmatch(candidate):
            raise ValueError(f"'{candidate}' is not a decimal number")
        normalized = candidate
        if self._group_separator:
            normalized = normalized.replace(self._group_separator, "")
        if self._decimal_separator != ".":
            normalized = normalized.replace(self._decimal_separator, ".")
        return Decimal(normalized)

    def looks_numeric(self, candidate: str) -> bool:
        """True if ``candidate`` is written as a number, however wide."""
        return self._pattern.fullmatch(candidate.strip()) is not None

    def _accept(self, candidate: str, size: Size) -> Size | None:
        if self.options.explicit_date(candidate) is not None:
            return None
        try:
            value = self._to_decimal(candidate)
            before, after = decimal_digits(value)
        except (ValueError, InvalidOperation):
            return None
        # "12E45" is a code, not a 47 digit number
        if before + after > MAX_DECIMAL_PRECISION:
            return None
        return size.grow_numeric(before, after)

    def _parse(self, candidate: str) -> Decimal:
        try:
            return self._to_decimal(candidate)
        except InvalidOperation as e:
            raise ValueError(str(e)) from e

    def accepts_scalar(self, value: Any) -> bool:
        if isinstance(value, float):
            return math.isfinite(value)
        if isinstance(value, int) and not isinstance(value, bool):
            # Integers too wide for INTEGER
            return not in_integer_range(value)
        return isinstance(value, Decimal) and value.is_finite()

    def size_of_scalar(self, value: Any, size: Size) -> Size:
        if isinstance(value, float):
            as_decimal = Decimal(repr(value))
        elif isinstance(value, int):
            as_decimal = Decimal(value)
        else:
            as_decimal = value
        before, after = decimal_digits(as_decimal)
        return size.grow_numeric(before, after).grow_length(len(str(value)))

    def string_length_for(self, size: Size) -> int:
        return max(size.string_length, size.numeric_string_length())
