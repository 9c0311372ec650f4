"""Compatibility / preference merge engine.

Runs once per accepted value. The running estimate only ever moves up the
lattice: within a compatibility group it widens to the later decider in
preference order when that decider can store the earlier one's values, and
any other disagreement falls back, permanently, to STRING.

DATETIME and DURATION share the TEMPORAL group, but neither can hold the
other's values, so mixing them falls back to STRING.
"""

from __future__ import annotations

from typeguess.core.exceptions import IncompatibleTypesError
from typeguess.core.models import DatabaseTypeRequest, TypeTag
from typeguess.deciders.base import Decider
from typeguess.deciders.registry import get_registry
from typeguess.sizing import Size


def can_widen(narrow: Decider, wide: Decider) -> bool:
    """True if ``wide`` can store every value ``narrow`` accepts."""
    return (
        narrow.compatibility_group is wide.compatibility_group
        and narrow.type_tag in wide.widens_from
    )


def is_mergeable(first: Decider, second: Decider) -> bool:
    """True if the two deciders meet below STRING."""
    return (
        first.type_tag is second.type_tag
        or can_widen(first, second)
        or can_widen(second, first)
    )


def fallback_size(size: Size, *deciders: Decider) -> Size:
    """Size once a column becomes text: long enough for every decider's rendering."""
    length = size.string_length
    for decider in deciders:
        length = max(length, decider.string_length_for(size))
    return size.grow_length(length)


def merge(
    current: Decider | None,
    incoming: Decider,
    size: Size,
    string_decider: Decider,
) -> tuple[Decider, Size]:
    """Combine the running estimate with the decider that accepted a new value.

    Args:
        current: Estimate before the value (None when nothing was seen yet)
        incoming: Decider that accepted the value
        size: Accreted size, already grown to cover the value
        string_decider: The STRING fallback

    Returns:
        The new estimate and size
    """
    if current is None or current.type_tag is incoming.type_tag:
        return incoming, size
    if current.type_tag is TypeTag.STRING:
        return current, fallback_size(size, incoming)
    # Integer digits stay integer digits once the column is DECIMAL
    if can_widen(current, incoming):
        return incoming, size
    if can_widen(incoming, current):
        return current, size
    return string_decider, fallback_size(size, current, incoming)


def combine_requests(
    first: DatabaseTypeRequest,
    second: DatabaseTypeRequest,
    allow_string_fallback: bool = True,
) -> DatabaseTypeRequest:
    """Smallest request able to hold the values behind both requests.

    Raises:
        IncompatibleTypesError: if both are concrete types that cannot widen into
            one another and ``allow_string_fallback`` is False
    """
    registry = get_registry()
    first_decider = registry.by_tag(first.type)
    second_decider = registry.by_tag(second.type)
    size = first.size.combine(second.size)
    unicode = first.unicode or second.unicode

    if (
        not allow_string_fallback
        and TypeTag.STRING not in (first.type, second.type)
        and not is_mergeable(first_decider, second_decider)
    ):
        raise IncompatibleTypesError(first.type.value, second.type.value)

    decider, size = merge(first_decider, second_decider, size, registry.string)
    return DatabaseTypeRequest(type=decider.type_tag, size=size, unicode=unicode)
