"""Culture configuration loader.

A culture decides which characters separate decimals and digit groups, which
order day and month appear in, and which words count as booleans. It is passed
explicitly to every decider; nothing reads process-wide locale state.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict

_DEFAULT_CULTURES_PATH = Path(__file__).with_name("cultures.yaml")


class CultureConfig(BaseModel):
    """Number, date and boolean conventions for one culture."""

    model_config = ConfigDict(frozen=True)

    name: str = "invariant"
    decimal_separator: str = "."
    group_separator: str = ","
    date_order: Literal["MDY", "DMY"] = "MDY"
    true_literals: tuple[str, ...] = ("true", "yes", "ja", ".t.")
    false_literals: tuple[str, ...] = ("false", "no", "nein", ".f.")
    true_chars: tuple[str, ...] = ("t", "y", "j")
    false_chars: tuple[str, ...] = ("f", "n")
    allow_date_order_guessing: bool = True

    @property
    def day_first(self) -> bool:
        """True when dates are written day before month."""
        return self.date_order == "DMY"

    def with_date_order(self, date_order: Literal["MDY", "DMY"]) -> CultureConfig:
        """Return a copy using a different day/month order."""
        return self.model_copy(update={"date_order": date_order})


INVARIANT = CultureConfig()


class CultureCatalog:
    """Culture presets loaded from configuration."""

    def __init__(self, config_dict: dict):
        self._config = config_dict
        self._cultures: dict[str, CultureConfig] = {}
        self._load_cultures()

    def _load_cultures(self) -> None:
        for culture_dict in self._config.get("cultures", []):
            data = {key: value for key, value in culture_dict.items() if value is not None}
            for key in ("true_literals", "false_literals", "true_chars", "false_chars"):
                if key in data:
                    data[key] = tuple(str(v).lower() for v in data[key])
            culture = CultureConfig(**data)
            self._cultures[culture.name.lower()] = culture

    def names(self) -> list[str]:
        """Names of all known cultures."""
        return [c.name for c in self._cultures.values()]

    def get(self, name: str) -> CultureConfig:
        """Look up a culture by (case-insensitive) name.

        Raises:
            KeyError: if no culture with that name is configured
        """
        try:
            return self._cultures[name.lower()]
        except KeyError:
            raise KeyError(
                f"Unknown culture '{name}'. Known cultures: {', '.join(self.names())}"
            ) from None


def load_cultures(config_path: Path | None = None) -> CultureCatalog:
    """Load culture presets from YAML.

    Args:
        config_path: Optional path to a presets file. If None, uses the bundled presets.

    Returns:
        CultureCatalog instance
    """
    if config_path is None:
        return _default_catalog()

    with open(config_path) as f:
        config_dict = yaml.safe_load(f) or {}
    return CultureCatalog(config_dict)


@lru_cache(maxsize=1)
def _default_catalog() -> CultureCatalog:
    with open(_DEFAULT_CULTURES_PATH) as f:
        return CultureCatalog(yaml.safe_load(f) or {})


def get_culture(name: str | CultureConfig | None = None) -> CultureConfig:
    """Resolve a culture by name, passing CultureConfig instances through.

    None resolves to the configured default culture.
    """
    if isinstance(name, CultureConfig):
        return name
    if name is None:
        from typeguess.core.config import get_settings

        name = get_settings().default_culture
    return load_cultures().get(name)


