"""Bilinear lookup-table interpolation.

The table maps a raw primary reading taken at some secondary condition back to
the primary reference value it corresponds to.  A lookup first slices the grid
along the secondary axis at the query condition, producing a synthetic row, and
then inverts that row against the primary reference axis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import operator
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import TableConfig

logger = logging.getLogger(__name__)

Bracket = Tuple[int, int]


def lerp(x0: float, y0: float, x1: float, y1: float, x: float) -> float:
    """Linear interpolation through ``(x0, y0)`` and ``(x1, y1)`` evaluated at ``x``."""
    return float(y0) + (float(y1) - float(y0)) * (float(x) - float(x0)) / (float(x1) - float(x0))


def find_bracket(seq: Sequence[float], value: float) -> Optional[Bracket]:
    """Return the first ``(i, i + 1)`` with ``seq[i] <= value < seq[i + 1]``.

    The scan runs left to right, so an exact hit on ``seq[i]`` belongs to the
    pair starting at ``i``.  ``None`` means the value cannot be bracketed.
    """
    for i in range(len(seq) - 1):
        if seq[i] <= value < seq[i + 1]:
            return i, i + 1
    return None


def _readonly(values, name: str, ndim: int) -> np.ndarray:
    try:
        arr = np.array(values, dtype=np.float64, copy=True)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a rectangular array of real numbers") from exc
    if arr.ndim != ndim:
        raise ValueError(f"{name} must be {ndim}-dimensional, got {arr.ndim} dimensions")
    arr.setflags(write=False)
    return arr


def _length(value, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def is_strictly_increasing(arr: np.ndarray) -> bool:
    return bool(np.all(np.diff(arr) > 0.0))


@dataclass(frozen=True, eq=False)
class InterpolationTable:
    """Immutable grid with primary (column) and secondary (row) reference axes."""

    grid: np.ndarray
    primary_axis: np.ndarray
    secondary_axis: np.ndarray
    primary_len: int
    secondary_len: int
    config: TableConfig = field(default_factory=TableConfig)

    def __post_init__(self) -> None:
        # Frozen dataclass: replace the caller's inputs with private read-only copies.
        object.__setattr__(self, "grid", _readonly(self.grid, "grid", 2))
        object.__setattr__(self, "primary_axis", _readonly(self.primary_axis, "primary_axis", 1))
        object.__setattr__(self, "secondary_axis", _readonly(self.secondary_axis, "secondary_axis", 1))
        object.__setattr__(self, "primary_len", _length(self.primary_len, "primary_len"))
        object.__setattr__(self, "secondary_len", _length(self.secondary_len, "secondary_len"))

        if self.primary_len != self.primary_axis.size:
            raise ValueError(
                f"primary_len ({self.primary_len}) does not match primary_axis length ({self.primary_axis.size})"
            )
        if self.secondary_len != self.secondary_axis.size:
            raise ValueError(
                f"secondary_len ({self.secondary_len}) does not match secondary_axis length ({self.secondary_axis.size})"
            )
        if self.grid.shape != (self.secondary_len, self.primary_len):
            raise ValueError(
                f"grid shape {self.grid.shape} must be (secondary_len, primary_len) = "
                f"({self.secondary_len}, {self.primary_len})"
            )
        if self.config.validate_finite:
            for name in ("grid", "primary_axis", "secondary_axis"):
                if not np.all(np.isfinite(getattr(self, name))):
                    raise ValueError(f"{name} values must be finite")
        if self.config.validate_axes:
            if not is_strictly_increasing(self.primary_axis):
                raise ValueError("primary_axis must be strictly increasing")
            if not is_strictly_increasing(self.secondary_axis):
                raise ValueError("secondary_axis must be strictly increasing")

    @classmethod
    def from_sequences(
        cls,
        grid: Sequence[Sequence[float]],
        primary_axis: Sequence[float],
        secondary_axis: Sequence[float],
        config: TableConfig | None = None,
    ) -> "InterpolationTable":
        """Build a table, taking the axis lengths from the axes themselves."""
        return cls(
            grid=grid,
            primary_axis=primary_axis,
            secondary_axis=secondary_axis,
            primary_len=len(primary_axis),
            secondary_len=len(secondary_axis),
            config=config if config is not None else TableConfig(),
        )

    @property
    def rows(self) -> int:
        return self.secondary_len

    @property
    def cols(self) -> int:
        return self.primary_len

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def row(self, index: int) -> np.ndarray:
        """Read-only view of grid row ``index``; negative indices are rejected."""
        if not 0 <= index < self.rows:
            raise IndexError("Row index out of range")
        return self.grid[index]

    def __getitem__(self, index: int) -> np.ndarray:
        return self.row(index)

    def synthetic_row(self, secondary_input: float) -> Optional[np.ndarray]:
        """Grid sliced along the secondary axis at ``secondary_input``.

        Returns ``None`` when the input falls outside ``[secondary_axis[0], secondary_axis[-1])``.
        """
        bracket = find_bracket(self.secondary_axis, secondary_input)
        if bracket is None:
            return None
        lo, hi = bracket
        s0 = float(self.secondary_axis[lo])
        s1 = float(self.secondary_axis[hi])
        out = np.array(
            [lerp(s0, self.grid[lo, j], s1, self.grid[hi, j], secondary_input) for j in range(self.cols)],
            dtype=np.float64,
        )
        out.setflags(write=False)
        return out

    def lookup(self, primary_input: float, secondary_input: float) -> float:
        """Standardized primary value for a reading taken at ``secondary_input``.

        Inputs that cannot be bracketed on either stage are passed through
        unchanged.
        """
        row = self.synthetic_row(secondary_input)
        if row is None:
            self._fallback("secondary", secondary_input)
            return float(primary_input)

        bracket = find_bracket(row, primary_input)
        if bracket is None:
            self._fallback("primary", primary_input)
            return float(primary_input)

        # The synthetic row is the independent variable here; the primary
        # reference axis is what gets solved for.
        lo, hi = bracket
        return lerp(row[lo], self.primary_axis[lo], row[hi], self.primary_axis[hi], primary_input)

    def lookup_many(self, primary_inputs, secondary_inputs) -> np.ndarray:
        p, s = np.broadcast_arrays(
            np.asarray(primary_inputs, dtype=np.float64),
            np.asarray(secondary_inputs, dtype=np.float64),
        )
        out = np.empty(p.shape, dtype=np.float64)
        for idx in np.ndindex(p.shape):
            out[idx] = self.lookup(float(p[idx]), float(s[idx]))
        return out

    def _fallback(self, stage: str, value: float) -> None:
        if self.config.log_fallbacks and logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{stage} input {value!r} outside table range; returning primary input unchanged")
