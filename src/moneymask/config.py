"""Formatting configuration for masked money fields."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional

from .errors import ConfigurationError


ENV_PREFIX = "MONEYMASK_"


class CursorBehavior(str, Enum):
    END = "end"
    UNLOCKED = "unlocked"


@dataclass(frozen=True)
class FormatConfig:
    """Separators, symbols and precision used to mask a value."""

    decimal_separator: str = ","
    thousand_separator: str = "."
    left_symbol: str = ""
    right_symbol: str = ""
    precision: int = 2
    cursor_behavior: CursorBehavior = CursorBehavior.END

    def __post_init__(self) -> None:
        if any(ch in "0123456789" for ch in self.right_symbol):
            raise ConfigurationError("right_symbol", "must not contain digits")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ConfigurationError("precision", f"expected int, got {self.precision!r}")
        if self.precision < 0:
            raise ConfigurationError("precision", "must be non-negative")
        try:
            behavior = (
                self.cursor_behavior
                if isinstance(self.cursor_behavior, CursorBehavior)
                else CursorBehavior(str(self.cursor_behavior).lower())
            )
        except ValueError:
            raise ConfigurationError(
                "cursor_behavior", f"unknown behavior {self.cursor_behavior!r}"
            ) from None
        object.__setattr__(self, "cursor_behavior", behavior)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, **overrides) -> "FormatConfig":
        """
        Build a config from ``<prefix><FIELD>`` environment variables.

        Keyword overrides take precedence over the environment; unset
        variables fall back to the dataclass defaults.
        """
        values: dict[str, object] = {}
        for f in fields(cls):
            raw: Optional[str] = os.getenv(f"{prefix}{f.name.upper()}")
            if raw is None:
                continue
            if f.name == "precision":
                try:
                    values[f.name] = int(raw)
                except ValueError:
                    raise ConfigurationError("precision", f"not an integer: {raw!r}") from None
            else:
                values[f.name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
