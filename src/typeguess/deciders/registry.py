"""Decider registry.

Holds one decider per type tag, ordered by preference. Registries are
immutable after construction and cached per ``DeciderOptions`` so every
guesser configured the same way shares the same read-only deciders.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import Any

from typeguess.core.exceptions import InvalidDeciderConfigurationError, UnsupportedTypeError
from typeguess.core.logging import get_logger
from typeguess.core.models import TypeTag
from typeguess.deciders.base import Decider, DeciderOptions
from typeguess.deciders.boolean import BooleanDecider
from typeguess.deciders.numeric import DecimalDecider, IntegerDecider
from typeguess.deciders.text import StringDecider
from typeguess.deciders.temporal import DateTimeDecider, DurationDecider
from typeguess.sizing import Size

logger = get_logger(__name__)

DEFAULT_DECIDERS: tuple[type[Decider], ...] = (
    BooleanDecider,
    IntegerDecider,
    DecimalDecider,
    DateTimeDecider,
    DurationDecider,
    StringDecider,
)


class DeciderRegistry:
    """Ordered, read-only set of deciders for one configuration."""

    def __init__(
        self,
        options: DeciderOptions | None = None,
        decider_classes: Sequence[type[Decider]] = DEFAULT_DECIDERS,
    ):
        self.options = options or DeciderOptions()
        deciders = sorted((cls(self.options) for cls in decider_classes), key=lambda d: d.preference)
        if not deciders or deciders[-1].type_tag is not TypeTag.STRING:
            raise InvalidDeciderConfigurationError("StringDecider (required as the final fallback)")

        self._ordered: tuple[Decider, ...] = tuple(deciders)
        self._by_tag: dict[TypeTag, Decider] = {d.type_tag: d for d in deciders}
        self._by_scalar_type: dict[type, Decider] = {}
        for decider in deciders:
            if decider.type_tag is TypeTag.STRING:
                continue
            for scalar_type in decider.scalar_types:
                self._by_scalar_type.setdefault(scalar_type, decider)

    @property
    def ordered(self) -> tuple[Decider, ...]:
        """Deciders from most specific to the string fallback."""
        return self._ordered

    @property
    def string(self) -> Decider:
        """The universal fallback decider."""
        return self._ordered[-1]

    def is_supported(self, tag: TypeTag) -> bool:
        """True if a decider is registered for ``tag``."""
        return tag in self._by_tag

    def by_tag(self, tag: TypeTag) -> Decider:
        """Decider for a type tag.

        Raises:
            UnsupportedTypeError: if no decider is registered for the tag
        """
        try:
            return self._by_tag[tag]
        except KeyError:
            raise UnsupportedTypeError(str(tag)) from None

    def for_scalar(self, value: Any) -> Decider:
        """Decider whose scalar types include ``value``'s type.

        Raises:
            UnsupportedTypeError: if no decider accepts the value
        """
        decider = self._by_scalar_type.get(type(value))
        if decider is not None and decider.accepts_scalar(value):
            return decider
        for decider in self._ordered[:-1]:
            if decider.accepts_scalar(value):
                return decider
        raise UnsupportedTypeError(type(value))

    def first_accepting(self, candidate: str, size: Size) -> tuple[Decider, Size]:
        """First decider in preference order accepting ``candidate``, with the grown size."""
        for decider in self._ordered:
            grown = decider.is_acceptable(candidate, size)
            if grown is not None:
                return decider, grown
        # The string fallback rejects only blank text
        return self.string, size


@lru_cache(maxsize=64)
def _cached_registry(options: DeciderOptions) -> DeciderRegistry:
    logger.debug("decider_registry_created", culture=options.culture.name)
    return DeciderRegistry(options)


def get_registry(options: DeciderOptions | None = None) -> DeciderRegistry:
    """Shared registry for ``options``; unhashable custom rules get a private one."""
    options = options or DeciderOptions()
    try:
        return _cached_registry(options)
    except TypeError:
        return DeciderRegistry(options)
