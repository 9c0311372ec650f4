"""Date/time and duration deciders.

Dates are recognised from ISO-8601 first and then by trying every
combination of day/month/year formats for the culture's date order, each
optionally followed by a time. A value that could also be a decimal ("1.1")
or a bare duration ("12:30") is never taken as a date.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta
from functools import lru_cache
from typing import Any, Literal

from typeguess.core.models import CompatibilityGroup, TypeTag
from typeguess.culture import CultureConfig
from typeguess.deciders.base import Decider, DeciderOptions
from typeguess.deciders.numeric import DecimalDecider
from typeguess.sizing import Size

# Minimum characters needed to hold a date/time once a column falls back to text
MINIMUM_DATE_STRING_LENGTH = 27

YEAR_FORMATS = ("%Y", "%y")
MONTH_FORMATS = ("%m", "%b", "%B")
DAY_FORMATS = ("%d",)
DATE_SEPARATORS = ("\\", "/", "-", ".")
TIME_FORMATS = (
    "%H:%M",
    "%H:%M:%S",
    "%H:%M:%S.%f",
    "%I:%M %p",
    "%I:%M:%S %p",
    "%I:%M:%S.%f %p",
)

_MAX_DATE_LENGTH = 48
_HAS_DIGIT = re.compile(r"\d")


@lru_cache(maxsize=2)
def date_formats(day_first: bool) -> tuple[str, ...]:
    """All date-only formats for a day/month order; year-first is always included."""
    formats: list[str] = []
    for separator in DATE_SEPARATORS:
        for year in YEAR_FORMATS:
            for month in MONTH_FORMATS:
                for day in DAY_FORMATS:
                    first = (day, month, year) if day_first else (month, day, year)
                    formats.append(separator.join(first))
                    formats.append(separator.join((year, month, day)))
    return tuple(dict.fromkeys(formats))


def _try_formats(candidate: str, formats: Iterable[str]) -> datetime | None:
    for fmt in formats:
        try:
            return datetime.strptime(candidate, fmt)
        except ValueError:
            continue
    return None


def parse_datetime(candidate: str, day_first: bool) -> datetime | None:
    """Parse a date, time, or date followed by time; None if nothing matches."""
    if len(candidate) > _MAX_DATE_LENGTH or not _HAS_DIGIT.search(candidate):
        return None

    if len(candidate) >= 10 and candidate[4] == "-":
        try:
            return datetime.fromisoformat(candidate)
        except ValueError:
            pass

    parsed = _try_formats(candidate, TIME_FORMATS)
    if parsed is not None:
        return parsed

    if " " not in candidate:
        return _try_formats(candidate, date_formats(day_first))

    # "28/2/1993 5:36:27 AM" is a date token followed by a time
    date_part, _, time_part = candidate.partition(" ")
    day = _try_formats(date_part, date_formats(day_first))
    if day is None:
        return None
    clock = _try_formats(time_part.strip(), TIME_FORMATS)
    if clock is None:
        return None
    return day.replace(
        hour=clock.hour, minute=clock.minute, second=clock.second, microsecond=clock.microsecond
    )


def guess_date_order(samples: Iterable[str], culture: CultureConfig) -> Literal["MDY", "DMY"]:
    """Pick day-first or month-first from sample values.

    Keeps the culture's order when guessing is disabled, when there are no
    samples, or when both orders parse equally many samples.
    """
    if not culture.allow_date_order_guessing:
        return culture.date_order

    day_first = month_first = 0
    for sample in samples:
        if not sample or not sample.strip():
            continue
        value = sample.strip()
        if parse_datetime(value, day_first=True) is not None:
            day_first += 1
        if parse_datetime(value, day_first=False) is not None:
            month_first += 1

    if day_first > month_first:
        return "DMY"
    if month_first > day_first:
        return "MDY"
    return culture.date_order


class DurationDecider(Decider):
    """Elapsed time such as ``12:30``, ``1.02:03:04.5`` or ``2 days, 3:04:05``."""

    type_tag = TypeTag.DURATION
    compatibility_group = CompatibilityGroup.TEMPORAL
    scalar_types = (timedelta, time)

    _clock = re.compile(
        r"(?P<sign>[+-])?(?:(?P<days>\d+)\.)?(?P<hours>\d{1,2}):(?P<minutes>[0-5]\d)"
        r"(?::(?P<seconds>[0-5]\d)(?:\.(?P<fraction>\d{1,7}))?)?"
    )
    _python = re.compile(
        r"(?P<days>-?\d+) days?, (?P<hours>\d{1,2}):(?P<minutes>[0-5]\d):(?P<seconds>[0-5]\d)"
        r"(?:\.(?P<fraction>\d{1,6}))?"
    )

    def _to_timedelta(self, candidate: str) -> timedelta | None:
        match = self._clock.fullmatch(candidate) or self._python.fullmatch(candidate)
        if match is None:
            return None
        parts = match.groupdict()
        hours = int(parts["hours"])
        if hours > 23:
            return None
        fraction = parts.get("fraction") or ""
        value = timedelta(
            hours=hours,
            minutes=int(parts["minutes"]),
            seconds=int(parts["seconds"] or 0),
            microseconds=int(fraction[:6].ljust(6, "0")) if fraction else 0,
        )
        days = int(parts["days"] or 0)
        if parts.get("sign") == "-":
            return -(value + timedelta(days=days))
        return value + timedelta(days=days)

    def _accept(self, candidate: str, size: Size) -> Size | None:
        if self._to_timedelta(candidate) is None:
            return None
        return size

    def _parse(self, candidate: str) -> timedelta:
        value = self._to_timedelta(candidate)
        if value is None:
            raise ValueError(f"'{candidate}' is not a duration")
        return value


class DateTimeDecider(Decider):
    """Dates and date/times in the culture's day/month order.

    Explicit date rules are consulted first and win over every other check.
    """

    type_tag = TypeTag.DATETIME
    compatibility_group = CompatibilityGroup.TEMPORAL
    scalar_types = (datetime, date)

    def __init__(self, options: DeciderOptions | None = None):
        super().__init__(options)
        self._decimal_checker = DecimalDecider(self.options)
        self._duration_checker = DurationDecider(self.options)
        self._day_first = self.culture.day_first

    def _accept(self, candidate: str, size: Size) -> Size | None:
        if self.options.explicit_date(candidate) is not None:
            return size
        # 1.1 is a number, not the first of January
        if self._decimal_checker.looks_numeric(candidate):
            return None
        # Bare times belong to the duration decider
        if self._duration_checker.is_acceptable(candidate, size) is not None:
            return None
        if parse_datetime(candidate, self._day_first) is None:
            return None
        return size

    def _parse(self, candidate: str) -> datetime:
        explicit = self.options.explicit_date(candidate)
        if explicit is not None:
            return explicit
        parsed = parse_datetime(candidate, self._day_first)
        if parsed is None:
            raise ValueError(f"Could not parse '{candidate}' to a valid date/time")
        return parsed

    def size_of_scalar(self, value: Any, size: Size) -> Size:
        return size.grow_length(len(value.isoformat()))

    def string_length_for(self, size: Size) -> int:
        return max(size.string_length, MINIMUM_DATE_STRING_LENGTH)
