"""Explicit date rules.

Some strings look like integers but are really dates (``20240115``), or the
caller knows the exact date formats a source uses. An explicit date rule
claims such strings for the date/time decider before the integer decider can
accept them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class ExplicitDateRule(Protocol):
    """Predicate deciding whether a string is definitely a date."""

    def match(self, candidate: str) -> datetime | None:
        """Return the parsed date when ``candidate`` is an explicit date, else None."""
        ...


@dataclass(frozen=True)
class FormatListRule:
    """Strings matching one of the given ``strptime`` formats are dates."""

    formats: tuple[str, ...]

    def match(self, candidate: str) -> datetime | None:
        for fmt in self.formats:
            try:
                return datetime.strptime(candidate, fmt)
            except ValueError:
                continue
        return None


@dataclass(frozen=True)
class CompactDateRule:
    """Eight digit ``yyyymmdd`` strings forming a real calendar date are dates."""

    min_year: int = 1900
    max_year: int = 2100

    _pattern = re.compile(r"\d{8}")

    def match(self, candidate: str) -> datetime | None:
        if not self._pattern.fullmatch(candidate):
            return None
        if not self.min_year <= int(candidate[:4]) <= self.max_year:
            return None
        try:
            return datetime.strptime(candidate, "%Y%m%d")
        except ValueError:
            return None


def match_explicit_date(candidate: str, rules: tuple[ExplicitDateRule, ...]) -> datetime | None:
    """First date produced by any rule, or None."""
    for rule in rules:
        result = rule.match(candidate)
        if result is not None:
            return result
    return None
