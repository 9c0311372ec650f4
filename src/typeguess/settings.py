"""Per-guesser settings.

``GuessSettings`` controls decisions where the choice is ambiguous, such as
whether "Y"/"N" are booleans or which day/month order dates use. Settings may
be changed between values; changes affect subsequent acceptance tests only.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from typeguess.core.config import get_settings
from typeguess.culture import CultureConfig, get_culture
from typeguess.deciders.base import DeciderOptions
from typeguess.deciders.explicit_dates import CompactDateRule, FormatListRule


class GuessSettings(BaseModel):
    """Options controlling how a guesser classifies values."""

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    culture: CultureConfig = Field(
        default_factory=lambda: get_culture(None),
        description="Culture preset or name (decimal separator, date order, boolean words)",
    )
    char_can_be_boolean: bool = Field(
        default_factory=lambda: get_settings().char_can_be_boolean,
        description="Single letters such as Y/N or T/F count as booleans",
    )
    explicit_date_formats: tuple[str, ...] | None = Field(
        default=None,
        description="strptime formats; strings matching one are always dates",
    )
    compact_dates: bool = Field(
        default=False,
        description="Eight digit yyyymmdd strings are dates rather than integers",
    )
    explicit_date_rule: Any = Field(
        default=None,
        description="Custom object with match(candidate) -> datetime | None",
    )
    extra_length_per_non_ascii_character: int = Field(
        default_factory=lambda: get_settings().extra_length_per_non_ascii_character,
        ge=0,
        description="Extra width per non-ASCII character when measuring strings",
    )
    hard_typed_conflict: Literal["error", "string"] = Field(
        default="error",
        description="What to do when hard typed values of unrelated types are mixed",
    )

    _revision: int = PrivateAttr(default=0)

    @field_validator("culture", mode="before")
    @classmethod
    def _resolve_culture(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return get_culture(value)
        return value

    @field_validator("explicit_date_formats", mode="before")
    @classmethod
    def _formats_as_tuple(cls, value: Any) -> Any:
        if isinstance(value, list):
            return tuple(value)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if not name.startswith("_"):
            self._revision += 1

    @property
    def revision(self) -> int:
        """Incremented on every change; lets guessers notice stale deciders."""
        return self._revision

    def decider_options(self) -> DeciderOptions:
        """Hashable snapshot of the settings that affect deciders."""
        rules: list[Any] = []
        if self.explicit_date_rule is not None:
            rules.append(self.explicit_date_rule)
        if self.explicit_date_formats:
            rules.append(FormatListRule(tuple(self.explicit_date_formats)))
        if self.compact_dates:
            rules.append(CompactDateRule())
        return DeciderOptions(
            culture=self.culture,
            char_can_be_boolean=self.char_can_be_boolean,
            explicit_date_rules=tuple(rules),
        )
