"""Construction and formatting options for lookup tables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TableConfig:
    """Container for user-controlled table options."""

    validate_axes: bool = True
    validate_finite: bool = True
    log_fallbacks: bool = True
    precision: int = 2
    separator: str = "\t"

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError("precision must be an integer")
        if self.precision < 0:
            raise ValueError("precision must be >= 0")
        if not isinstance(self.separator, str) or self.separator == "":
            raise ValueError("separator cannot be empty")
