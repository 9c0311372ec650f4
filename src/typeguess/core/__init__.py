"""Core configuration, logging, models and exceptions."""

from typeguess.core.config import Settings, get_settings
from typeguess.core.exceptions import (
    BooleanAfterStringError,
    DecimalAfterStringError,
    IncompatibleTypesError,
    IntegerAfterStringError,
    InvalidDeciderConfigurationError,
    MixedTypingError,
    ParseFailureError,
    ScalarAfterStringError,
    ScalarFamilyConflictError,
    StringAfterScalarError,
    TypeGuessError,
    UnsupportedTypeError,
)
from typeguess.core.models import (
    CompatibilityGroup,
    DatabaseTypeRequest,
    GuessState,
    InputRegime,
    Result,
    TypeTag,
)

__all__ = [
    "BooleanAfterStringError",
    "CompatibilityGroup",
    "DatabaseTypeRequest",
    "DecimalAfterStringError",
    "GuessState",
    "IncompatibleTypesError",
    "InputRegime",
    "IntegerAfterStringError",
    "InvalidDeciderConfigurationError",
    "MixedTypingError",
    "ParseFailureError",
    "Result",
    "ScalarAfterStringError",
    "ScalarFamilyConflictError",
    "Settings",
    "StringAfterScalarError",
    "TypeGuessError",
    "TypeTag",
    "UnsupportedTypeError",
    "get_settings",
]
