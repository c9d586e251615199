"""Human-readable renderings of lookup tables."""

from __future__ import annotations

from .interpolation import InterpolationTable


def format_table(table: InterpolationTable, *, precision: int | None = None, separator: str | None = None) -> str:
    """One line per secondary point: the secondary value followed by its grid row.

    Every field is fixed-point formatted and followed by the separator.
    """
    digits = table.config.precision if precision is None else int(precision)
    sep = table.config.separator if separator is None else separator
    if digits < 0:
        raise ValueError("precision must be >= 0")

    lines = []
    for i, secondary in enumerate(table.secondary_axis):
        fields = [f"{float(secondary):.{digits}f}"]
        fields.extend(f"{float(v):.{digits}f}" for v in table.row(i))
        lines.append("".join(f + sep for f in fields) + "\n")
    return "".join(lines)


def table_to_frame(table: InterpolationTable):
    """DataFrame indexed by the secondary axis with primary-axis columns."""
    try:
        import pandas as pd
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("table_to_frame requires pandas installed") from exc

    frame = pd.DataFrame(
        table.grid.copy(),
        index=pd.Index(table.secondary_axis.copy(), name="secondary"),
        columns=pd.Index(table.primary_axis.copy(), name="primary"),
    )
    return frame
