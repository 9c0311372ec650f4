"""Boolean decider."""

from __future__ import annotations

from typing import Any

from typeguess.core.models import CompatibilityGroup, TypeTag
from typeguess.deciders.base import Decider
from typeguess.sizing import Size

# Longest text rendering of a boolean ("False")
BOOLEAN_STRING_LENGTH = 5


class BooleanDecider(Decider):
    """Recognises true/false literals of the culture.

    Single letters (Y/N, T/F, J/N) only count when ``char_can_be_boolean`` is
    set. Numeric tokens such as "1" or "0" are left to the integer decider.
    """

    type_tag = TypeTag.BOOLEAN
    compatibility_group = CompatibilityGroup.BOOLEAN
    scalar_types = (bool,)

    def _lookup(self, candidate: str) -> bool | None:
        lowered = candidate.lower()
        culture = self.culture
        if len(lowered) == 1:
            if not self.options.char_can_be_boolean:
                return None
            if lowered in culture.true_chars:
                return True
            if lowered in culture.false_chars:
                return False
            return None
        if lowered in culture.true_literals:
            return True
        if lowered in culture.false_literals:
            return False
        return None

    def _accept(self, candidate: str, size: Size) -> Size | None:
        if self._lookup(candidate) is None:
            return None
        return size

    def _parse(self, candidate: str) -> bool:
        value = self._lookup(candidate)
        if value is None:
            raise ValueError("Invalid bool")
        return value

    def size_of_scalar(self, value: Any, size: Size) -> Size:
        return size.grow_length(BOOLEAN_STRING_LENGTH if not value else 4)

    def string_length_for(self, size: Size) -> int:
        return max(size.string_length, BOOLEAN_STRING_LENGTH)
