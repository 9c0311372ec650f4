"""Decider framework.

A decider is bound to one storage type. It answers whether a string can be
stored as that type (growing the size needed to store it at the same time),
parses accepted strings, and recognises already-typed Python scalars.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from typeguess.core.exceptions import InvalidDeciderConfigurationError, ParseFailureError
from typeguess.core.models import PREFERENCE_ORDER, CompatibilityGroup, TypeTag
from typeguess.culture import INVARIANT, CultureConfig
from typeguess.deciders.explicit_dates import ExplicitDateRule, match_explicit_date
from typeguess.sizing import Size


@dataclass(frozen=True)
class DeciderOptions:
    """Snapshot of everything that changes what a decider accepts.

    Hashable, so registries built from equal options can be shared.
    """

    culture: CultureConfig = INVARIANT
    char_can_be_boolean: bool = False
    explicit_date_rules: tuple[ExplicitDateRule, ...] = ()

    def explicit_date(self, candidate: str):
        """Parsed date if ``candidate`` is claimed by an explicit date rule."""
        if not self.explicit_date_rules:
            return None
        return match_explicit_date(candidate, self.explicit_date_rules)


class Decider(ABC):
    """Base class for all per-type deciders.

    Subclasses set the class attributes and implement ``_accept`` and
    ``_parse``. Instances are immutable and safe to share between guessers.
    """

    type_tag: ClassVar[TypeTag]
    compatibility_group: ClassVar[CompatibilityGroup]
    scalar_types: ClassVar[tuple[type, ...]] = ()
    # Tags whose accepted values this decider can also store without loss
    widens_from: ClassVar[frozenset[TypeTag]] = frozenset()

    def __init__(self, options: DeciderOptions | None = None):
        if not self.scalar_types:
            raise InvalidDeciderConfigurationError(type(self).__name__)
        self.options = options or DeciderOptions()
        self.culture = self.options.culture

    @property
    def preference(self) -> int:
        """Position in the preference order (lower is more specific)."""
        return PREFERENCE_ORDER.index(self.type_tag)

    def is_acceptable(self, candidate: str, size: Size) -> Size | None:
        """Test ``candidate`` and grow ``size`` to cover it in one step.

        Returns:
            The grown size when accepted, None when rejected.
        """
        stripped = candidate.strip()
        if not stripped:
            return None
        return self._accept(stripped, size)

    def parse(self, candidate: str) -> Any:
        """Parse a string this decider has accepted.

        Raises:
            ParseFailureError: if the string cannot be parsed as this type
        """
        try:
            return self._parse(candidate.strip())
        except (ValueError, ArithmeticError, OverflowError) as e:
            raise ParseFailureError(candidate, self.type_tag, str(e)) from e

    def accepts_scalar(self, value: Any) -> bool:
        """True if ``value`` is already one of this decider's scalar types."""
        return isinstance(value, self.scalar_types)

    def size_of_scalar(self, value: Any, size: Size) -> Size:
        """Grow ``size`` to cover an already-typed value."""
        return size.grow_length(len(str(value)))

    def string_length_for(self, size: Size) -> int:
        """Characters needed to write every value covered by ``size`` as text."""
        return size.string_length

    @abstractmethod
    def _accept(self, candidate: str, size: Size) -> Size | None:
        """Acceptance test on a whitespace-stripped, non-empty string."""

    @abstractmethod
    def _parse(self, candidate: str) -> Any:
        """Parse a whitespace-stripped string."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(culture={self.culture.name!r})"
