"""Example driver: standardize pH readings against the buffer table."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from .config import TableConfig
from .formatting import format_table
from .tables import load_ph_buffer_table

logger = logging.getLogger(__name__)

EXAMPLE_QUERIES = (
    (7.01, 37.0),
    (7.50, 37.0),
    (8.00, 37.0),
    (8.50, 37.0),
    (9.00, 37.0),
    (10.01, 0.01),
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pylut",
        description="Temperature-compensate pH readings with the reference buffer table.",
    )
    ap.add_argument("--primary", type=float, nargs="+", help="Measured pH value(s); defaults to the example readings")
    ap.add_argument("--secondary", type=float, default=None, help="Temperature in degC at which the readings were taken")
    ap.add_argument("--precision", type=int, default=2, help="Digits printed after the decimal point")
    ap.add_argument("--dump", action="store_true", help="Print the reference table after the results")
    ap.add_argument("--json", action="store_true", help="Emit results as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def _queries(args: argparse.Namespace) -> list[tuple[float, float]]:
    if args.primary is None:
        if args.secondary is not None:
            return [(p, float(args.secondary)) for p, _ in EXAMPLE_QUERIES]
        return list(EXAMPLE_QUERIES)
    if args.secondary is None:
        raise SystemExit("--secondary is required when --primary is given")
    return [(float(p), float(args.secondary)) for p in args.primary]


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.precision < 0:
        raise SystemExit("--precision must be >= 0")

    table = load_ph_buffer_table(TableConfig(precision=args.precision))
    queries = _queries(args)
    logger.debug(f"Running {len(queries)} lookups against a {table.rows}x{table.cols} table")

    results = [(p, s, table.lookup(p, s)) for p, s in queries]
    if args.json:
        payload = [{"primary": p, "secondary": s, "standardized": v} for p, s, v in results]
        print(json.dumps(payload, indent=2))
    else:
        for _, _, value in results:
            print(f"pH: {value:.{args.precision}f}")

    if args.dump:
        print(format_table(table), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
