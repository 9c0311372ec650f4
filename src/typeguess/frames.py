"""pandas convenience layer.

Guesses a column type for each column of a DataFrame. Text columns (object,
string and categorical dtypes) are fed to the guesser as strings; typed
columns are fed as hard typed Python scalars.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from typeguess.core.logging import get_logger, log_context
from typeguess.core.models import DatabaseTypeRequest
from typeguess.guesser import Guesser
from typeguess.pool import default_pool
from typeguess.settings import GuessSettings

logger = get_logger(__name__)


def _is_missing(value: Any) -> bool:
    """None, NaN, NaT and pd.NA count as missing."""
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Containers make pd.isna return an array
        return False


def is_text_dtype(dtype: Any) -> bool:
    """True for dtypes whose values should be guessed from their text."""
    return (
        pd.api.types.is_object_dtype(dtype)
        or pd.api.types.is_string_dtype(dtype)
        or isinstance(dtype, pd.CategoricalDtype)
    )


def series_values(series: pd.Series) -> list[Any]:
    """Values of ``series`` ready for a guesser: strings or Python scalars, None when missing."""
    if is_text_dtype(series.dtype):
        return [None if _is_missing(v) else str(v) for v in series.tolist()]
    # tolist() turns numpy scalars into Python ones
    return [None if _is_missing(v) else v for v in series.tolist()]


def guess_series(series: pd.Series, settings: GuessSettings | None = None) -> DatabaseTypeRequest:
    """Guess the storage type of one Series."""
    guesser = Guesser(settings)
    guesser.adjust_to_compensate_for_values(series_values(series))
    return guesser.guess


def guess_frame(
    df: pd.DataFrame, settings: GuessSettings | None = None
) -> dict[str, DatabaseTypeRequest]:
    """Guess the storage type of every column of ``df``.

    Args:
        df: Frame to inspect
        settings: Settings shared by every column (defaults from app settings)

    Returns:
        Column name to guessed type, in column order
    """
    results: dict[str, DatabaseTypeRequest] = {}
    pool = default_pool()
    for name in df.columns:
        column = str(name)
        with log_context(column=column), pool.borrow() as guesser:
            if settings is not None:
                guesser.reset(settings)
            guesser.adjust_to_compensate_for_values(series_values(df[name]))
            results[column] = guesser.guess
            logger.debug(
                "column_guessed",
                type=results[column].type.value,
                values=guesser.value_count,
                nulls=guesser.null_count,
            )
    return results


def should_downgrade_column(series: pd.Series, guesser: Guesser) -> bool:
    """True if ``series`` is stored as text but ``guesser`` found a narrower type."""
    if not is_text_dtype(series.dtype):
        return False
    return guesser.should_downgrade_column_type("object")
