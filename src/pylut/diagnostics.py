"""Diagnostic checks for lookup tables."""

from __future__ import annotations

import numpy as np

from .interpolation import InterpolationTable, is_strictly_increasing


def diagnostics_from_table(table: InterpolationTable) -> dict:
    grid = table.grid
    checks = {
        "primary_increasing": is_strictly_increasing(table.primary_axis),
        "secondary_increasing": is_strictly_increasing(table.secondary_axis),
        # Stage-two brackets are unique only when every row increases.
        "rows_increasing": bool(all(is_strictly_increasing(grid[i]) for i in range(table.rows))),
        "all_finite": bool(
            np.all(np.isfinite(grid))
            and np.all(np.isfinite(table.primary_axis))
            and np.all(np.isfinite(table.secondary_axis))
        ),
    }
    return {
        "rows": int(table.rows),
        "cols": int(table.cols),
        "primary_min": float(np.min(table.primary_axis)) if table.cols else float("nan"),
        "primary_max": float(np.max(table.primary_axis)) if table.cols else float("nan"),
        "secondary_min": float(np.min(table.secondary_axis)) if table.rows else float("nan"),
        "secondary_max": float(np.max(table.secondary_axis)) if table.rows else float("nan"),
        "grid_min": float(np.min(grid)) if grid.size else float("nan"),
        "grid_max": float(np.max(grid)) if grid.size else float("nan"),
        "checks": checks,
        "all_checks_pass": bool(all(checks.values())),
    }
