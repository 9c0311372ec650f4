"""typeguess - incremental column type inference.

Feeds values one at a time to a guesser and reads back the narrowest storage
type, with the digits and length needed to hold every value seen.

Example:
    from typeguess import Guesser

    guesser = Guesser()
    guesser.adjust_to_compensate_for_values(["1", "2.5", "3"])
    guesser.guess  # DECIMAL(2,1)
"""

__version__ = "0.1.0"

from typeguess.core.exceptions import (
    IncompatibleTypesError,
    MixedTypingError,
    ParseFailureError,
    TypeGuessError,
    UnsupportedTypeError,
)
from typeguess.core.models import DatabaseTypeRequest, Result, TypeTag
from typeguess.culture import CultureConfig, get_culture
from typeguess.guesser import Guesser
from typeguess.pool import GuesserPool, default_pool
from typeguess.settings import GuessSettings
from typeguess.sizing import Size

__all__ = [
    "CultureConfig",
    "DatabaseTypeRequest",
    "GuessSettings",
    "Guesser",
    "GuesserPool",
    "IncompatibleTypesError",
    "MixedTypingError",
    "ParseFailureError",
    "Result",
    "Size",
    "TypeGuessError",
    "TypeTag",
    "UnsupportedTypeError",
    "__version__",
    "default_pool",
    "get_culture",
]
