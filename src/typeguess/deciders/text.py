"""Universal string fallback decider."""

from __future__ import annotations

from typing import Any

from typeguess.core.models import CompatibilityGroup, TypeTag
from typeguess.deciders.base import Decider
from typeguess.sizing import Size


class StringDecider(Decider):
    """Accepts every non-blank string; parsing returns the text unchanged."""

    type_tag = TypeTag.STRING
    compatibility_group = CompatibilityGroup.TEXTUAL
    scalar_types = (str,)

    def _accept(self, candidate: str, size: Size) -> Size | None:
        return size

    def _parse(self, candidate: str) -> str:
        return candidate

    def parse(self, candidate: str) -> Any:
        return candidate
