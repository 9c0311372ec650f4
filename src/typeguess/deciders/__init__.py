"""Per-type deciders and the registry that orders them."""

from typeguess.deciders.base import Decider, DeciderOptions
from typeguess.deciders.boolean import BooleanDecider
from typeguess.deciders.explicit_dates import (
    CompactDateRule,
    ExplicitDateRule,
    FormatListRule,
    match_explicit_date,
)
from typeguess.deciders.numeric import DecimalDecider, IntegerDecider
from typeguess.deciders.registry import DEFAULT_DECIDERS, DeciderRegistry, get_registry
from typeguess.deciders.text import StringDecider
from typeguess.deciders.temporal import (
    MINIMUM_DATE_STRING_LENGTH,
    DateTimeDecider,
    DurationDecider,
    guess_date_order,
    parse_datetime,
)

__all__ = [
    "DEFAULT_DECIDERS",
    "MINIMUM_DATE_STRING_LENGTH",
    "BooleanDecider",
    "CompactDateRule",
    "DateTimeDecider",
    "DecimalDecider",
    "Decider",
    "DeciderOptions",
    "DeciderRegistry",
    "DurationDecider",
    "ExplicitDateRule",
    "FormatListRule",
    "IntegerDecider",
    "StringDecider",
    "get_registry",
    "guess_date_order",
    "match_explicit_date",
    "parse_datetime",
]
