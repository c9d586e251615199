"""Two-dimensional lookup-table interpolation for measurement compensation."""

from .config import TableConfig
from .interpolation import InterpolationTable, find_bracket, lerp
from .formatting import format_table, table_to_frame
from .diagnostics import diagnostics_from_table
from .tables import load_ph_buffer_table

__all__ = [
    "TableConfig",
    "InterpolationTable",
    "find_bracket",
    "lerp",
    "format_table",
    "table_to_frame",
    "diagnostics_from_table",
    "load_ph_buffer_table",
]
