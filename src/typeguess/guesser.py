"""Incremental column type guessing.

A ``Guesser`` watches the values of one column (or any other stream) and keeps
the narrowest type able to store all of them, plus the size needed to store
them. For example, seeing "2001-01-01" first makes the guess DATETIME, but a
later "n/a" turns it into STRING(27) since the dates must still fit as text.

Feed a guesser either strings or already-typed scalars, never both; passing
hard typed values (int, Decimal, bool, ...) skips string classification.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from typeguess.core.exceptions import (
    BooleanAfterStringError,
    DecimalAfterStringError,
    IntegerAfterStringError,
    MixedTypingError,
    ParseFailureError,
    ScalarAfterStringError,
    ScalarFamilyConflictError,
    StringAfterScalarError,
)
from typeguess.core.logging import get_logger
from typeguess.core.models import (
    DatabaseTypeRequest,
    GuessState,
    InputRegime,
    Result,
    TypeTag,
)
from typeguess.deciders.base import Decider
from typeguess.deciders.registry import DeciderRegistry, get_registry
from typeguess.deciders.temporal import guess_date_order
from typeguess.merge import is_mergeable, merge
from typeguess.settings import GuessSettings
from typeguess.sizing import EMPTY_SIZE, Size

logger = get_logger(__name__)

_TEXT_COLUMN_TYPES = frozenset({TypeTag.STRING, "STRING", "string", "str", "object", str, object})


def _is_null(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return isinstance(value, float) and math.isnan(value)


class Guesser:
    """Calculates a ``DatabaseTypeRequest`` covering every value seen so far.

    Not safe for concurrent mutation: use one instance per column and thread,
    or borrow instances from a ``GuesserPool``.
    """

    def __init__(
        self,
        settings: GuessSettings | None = None,
        request: DatabaseTypeRequest | None = None,
    ):
        """Create a guesser.

        Args:
            settings: Options controlling classification (defaults from app settings)
            request: Optional starting type and size, e.g. an existing column's type
        """
        self._settings = settings or GuessSettings()
        self._registry: DeciderRegistry | None = None
        self._registry_revision = -1
        self.reset()
        if request is not None:
            registry = self._current_registry()
            self._estimate = registry.by_tag(request.type)
            self._size = request.size
            self._unicode = request.unicode

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def reset(self, settings: GuessSettings | None = None) -> None:
        """Return to the empty state: no estimate, zero size, no input regime.

        Passing ``settings`` also replaces the settings used from now on.
        """
        if settings is not None:
            self._settings = settings
            self._registry = None
        self._estimate: Decider | None = None
        self._size: Size = EMPTY_SIZE
        self._regime = InputRegime.UNSET
        self._family: TypeTag | None = None
        self._unicode = False
        self._value_count = 0
        self._null_count = 0

    @property
    def settings(self) -> GuessSettings:
        """Settings used for subsequent values."""
        return self._settings

    @property
    def guess(self) -> DatabaseTypeRequest:
        """Current best type and size; STRING with zero size before any value."""
        tag = self._estimate.type_tag if self._estimate is not None else TypeTag.STRING
        return DatabaseTypeRequest(type=tag, size=self._size, unicode=self._unicode)

    @property
    def state(self) -> GuessState:
        if self._estimate is None:
            return GuessState.EMPTY
        if self._estimate.type_tag is TypeTag.STRING:
            return GuessState.FALLEN_TO_STRING
        return GuessState.LOCKED

    @property
    def regime(self) -> InputRegime:
        return self._regime

    @property
    def locked_family(self) -> TypeTag | None:
        """Widest non-string scalar type seen in the hard typed regime.

        Survives a fall back to STRING under the "string" conflict policy.
        """
        return self._family

    @property
    def is_primed_with_bonafide_type(self) -> bool:
        """True once a hard typed value has been accepted."""
        return self._regime is InputRegime.HARD_TYPED

    @property
    def value_count(self) -> int:
        return self._value_count

    @property
    def null_count(self) -> int:
        return self._null_count

    def _current_registry(self) -> DeciderRegistry:
        if self._registry is None or self._registry_revision != self._settings.revision:
            self._registry = get_registry(self._settings.decider_options())
            self._registry_revision = self._settings.revision
        return self._registry

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def adjust_to_compensate_for_value(self, value: Any) -> None:
        """Widen the guess so that ``value`` can be stored.

        None, blank strings and NaN never change the guess.

        Raises:
            MixedTypingError: if strings and hard typed values are mixed, or
                unrelated hard typed values are mixed under the "error" policy
            UnsupportedTypeError: if no decider handles the value's type
        """
        if _is_null(value):
            self._null_count += 1
            return
        if isinstance(value, str):
            self._adjust_for_string(value)
        else:
            self._adjust_for_scalar(value)

    def adjust_to_compensate_for_values(self, values: Iterable[Any]) -> None:
        """Run ``adjust_to_compensate_for_value`` on every item, in order."""
        for value in values:
            self.adjust_to_compensate_for_value(value)

    def _adjust_for_string(self, value: str) -> None:
        if self._regime is InputRegime.HARD_TYPED:
            raise StringAfterScalarError(value, self._family)

        registry = self._current_registry()
        length, non_ascii = self._measure(value)

        if self._estimate is not None and self._estimate.type_tag is TypeTag.STRING:
            decider, size = self._estimate, self._size.grow_length(length)
        else:
            accepted, size = registry.first_accepting(value, self._size)
            decider, size = merge(self._estimate, accepted, size.grow_length(length), registry.string)

        self._commit(decider, size, InputRegime.STRING)
        self._unicode = self._unicode or non_ascii

    def _adjust_for_scalar(self, value: Any) -> None:
        if self._regime is InputRegime.STRING:
            raise self._scalar_after_string(value)

        registry = self._current_registry()
        incoming = registry.for_scalar(value)
        size = incoming.size_of_scalar(value, self._size)

        current = self._estimate
        if (
            self._regime is InputRegime.HARD_TYPED
            and current is not None
            and current.type_tag is not TypeTag.STRING
            and not is_mergeable(current, incoming)
            and self._settings.hard_typed_conflict == "error"
        ):
            raise ScalarFamilyConflictError(value, current.type_tag.value)

        decider, size = merge(current, incoming, size, registry.string)
        if decider.type_tag is not TypeTag.STRING:
            self._family = decider.type_tag
        self._commit(decider, size, InputRegime.HARD_TYPED)

    @staticmethod
    def _scalar_after_string(value: Any) -> MixedTypingError:
        if isinstance(value, bool):
            return BooleanAfterStringError(value)
        if isinstance(value, int):
            return IntegerAfterStringError(value)
        if isinstance(value, (Decimal, float)):
            return DecimalAfterStringError(value)
        return ScalarAfterStringError(value)

    def _measure(self, value: str) -> tuple[int, bool]:
        if value.isascii():
            return len(value), False
        extra = self._settings.extra_length_per_non_ascii_character
        if not extra:
            return len(value), True
        non_ascii = sum(1 for c in value if not c.isascii())
        return len(value) + non_ascii * extra, True

    def _commit(self, decider: Decider, size: Size, regime: InputRegime) -> None:
        previous = self._estimate
        if previous is not decider:
            if previous is None:
                logger.debug("estimate_adopted", type=decider.type_tag.value)
            elif decider.type_tag is TypeTag.STRING:
                logger.debug(
                    "fallback_to_string",
                    from_type=previous.type_tag.value,
                    string_length=size.string_length,
                )
            else:
                logger.debug(
                    "estimate_widened",
                    from_type=previous.type_tag.value,
                    to_type=decider.type_tag.value,
                )
        self._estimate = decider
        self._size = size
        self._regime = regime
        self._value_count += 1

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, candidate: str) -> Any:
        """Parse ``candidate`` into a value of the current guess's type.

        Succeeds for every string this guesser has accepted.

        Raises:
            ParseFailureError: if the current type cannot parse ``candidate``
        """
        registry = self._current_registry()
        tag = self._estimate.type_tag if self._estimate is not None else TypeTag.STRING
        decider = registry.by_tag(tag)
        if tag is TypeTag.STRING:
            return decider.parse(candidate)
        if decider.is_acceptable(candidate, EMPTY_SIZE) is None:
            raise ParseFailureError(candidate, tag, "value is not acceptable as this type")
        return decider.parse(candidate)

    def try_parse(self, candidate: str) -> Result[Any]:
        """Like ``parse`` but reports failure as a ``Result``."""
        try:
            return Result.ok(self.parse(candidate))
        except ParseFailureError as e:
            return Result.fail(str(e))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def guess_date_format(self, samples: Iterable[str]) -> None:
        """Switch the culture's day/month order to whichever parses more samples."""
        culture = self._settings.culture
        order = guess_date_order(samples, culture)
        if order != culture.date_order:
            logger.debug("date_order_guessed", culture=culture.name, date_order=order)
            self._settings.culture = culture.with_date_order(order)

    def should_downgrade_column_type(self, column_type: Any) -> bool:
        """True if a text column could use the narrower type guessed from its values.

        Columns that already have a non-text type are never downgraded.
        """
        try:
            is_text = column_type in _TEXT_COLUMN_TYPES
        except TypeError:
            is_text = False
        if not is_text:
            return False
        return self._estimate is not None and self._estimate.type_tag is not TypeTag.STRING

    def __repr__(self) -> str:
        return f"Guesser(guess={self.guess}, values={self._value_count}, nulls={self._null_count})"
