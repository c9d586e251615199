"""Reference pH buffer table.

Buffer pH at 0-55 degC in 5 degC steps for seven standard buffers; the column
references are the nominal buffer values at 25 degC.
"""

from __future__ import annotations

from .config import TableConfig
from .interpolation import InterpolationTable

PH_BUFFER_TEMPERATURES = (0.0, 5.0, 10.0, 15.0, 20.0, 25.0, 30.0, 35.0, 40.0, 45.0, 50.0, 55.0)

PH_BUFFER_REFERENCE = (1.68, 4.01, 6.86, 7.00, 9.18, 10.01, 12.46)

REFERENCE_TEMPERATURE = 25.0

PH_BUFFER_VALUES = (
    (1.67, 4.01, 6.98, 7.12, 9.46, 10.32, 13.47),  # 0 degC
    (1.67, 4.01, 6.95, 7.09, 9.39, 10.25, 13.25),  # 5 degC
    (1.67, 4.00, 6.92, 7.06, 9.32, 10.18, 13.03),  # 10 degC
    (1.67, 4.00, 6.90, 7.04, 9.27, 10.12, 12.83),  # 15 degC
    (1.68, 4.00, 6.88, 7.02, 9.22, 10.06, 12.64),  # 20 degC
    (1.68, 4.01, 6.86, 7.00, 9.18, 10.01, 12.46),  # 25 degC
    (1.69, 4.01, 6.85, 6.98, 9.14, 9.97, 12.29),  # 30 degC
    (1.69, 4.02, 6.84, 6.98, 9.10, 9.93, 12.14),  # 35 degC
    (1.70, 4.03, 6.84, 6.97, 9.07, 9.89, 11.99),  # 40 degC
    (1.70, 4.04, 6.83, 6.97, 9.04, 9.86, 11.86),  # 45 degC
    (1.71, 4.06, 6.83, 6.97, 9.01, 9.83, 11.73),  # 50 degC
    (1.72, 4.08, 6.83, 6.97, 8.99, 9.81, 11.61),  # 55 degC
)


def load_ph_buffer_table(config: TableConfig | None = None) -> InterpolationTable:
    """pH-vs-temperature compensation table standardized to ``REFERENCE_TEMPERATURE``."""
    return InterpolationTable(
        grid=PH_BUFFER_VALUES,
        primary_axis=PH_BUFFER_REFERENCE,
        secondary_axis=PH_BUFFER_TEMPERATURES,
        primary_len=len(PH_BUFFER_REFERENCE),
        secondary_len=len(PH_BUFFER_TEMPERATURES),
        config=config if config is not None else TableConfig(),
    )
