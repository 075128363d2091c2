"""
Command line summarizer for knot JSON files.

Usage:
    python -m knottheory trefoil.json figure_eight.json --max-crossings 12

Prints one JSON object per knot with its invariants. An invariant that
cannot be computed for a knot is reported as null; a file that cannot
be read is skipped and the exit status becomes 1.
"""

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, List, Optional

from .alexander import estimate_alexander
from .bracket import DEFAULT_MAX_CROSSINGS, BracketEngine
from .codec import dtcode, read_knot_json
from .exceptions import KnotTheoryError
from .invariants import braid_index_estimate, crossing_number, seifert_circles, writhe
from .knot import Knot
from .logging_config import setup_logging
from .polynomial import format_polynomial

logger = logging.getLogger(__name__)


def _attempt(knot: Knot, label: str, func: Callable[[], Any]) -> Any:
    try:
        return func()
    except KnotTheoryError as e:
        logger.warning(f"{knot.name}: {label} unavailable ({e})")
        return None


def summarize_knot(knot: Knot, max_crossings: int = DEFAULT_MAX_CROSSINGS,
                   exact_alexander: bool = False) -> Dict[str, Any]:
    """Compute every invariant available for a knot."""
    engine = BracketEngine(max_crossings=max_crossings)

    summary: Dict[str, Any] = {
        "name": knot.name,
        "crossing_number": crossing_number(knot),
        "writhe": _attempt(knot, "writhe", lambda: writhe(knot)),
        "dt": _attempt(knot, "DT code", lambda: list(dtcode(knot).code)),
        "seifert_circles": None,
        "braid_index_estimate": None,
        "jones": None,
        "alexander": None,
    }

    if knot.pd is not None:
        pd = knot.pd
        summary["seifert_circles"] = seifert_circles(pd)
        summary["braid_index_estimate"] = braid_index_estimate(pd)
        jones = _attempt(knot, "Jones polynomial", lambda: engine.jones(pd))
        if jones is not None:
            summary["jones"] = format_polynomial(jones, "t", quarter=True)
        alexander = _attempt(knot, "Alexander polynomial",
                             lambda: estimate_alexander(pd, exact=exact_alexander))
        if alexander is not None:
            summary["alexander"] = format_polynomial(alexander, "t")

    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knottheory",
        description="Compute invariants of knots stored as JSON files.",
    )
    parser.add_argument("paths", nargs="+", help="knot JSON files")
    parser.add_argument("--max-crossings", type=int, default=DEFAULT_MAX_CROSSINGS,
                        help="largest diagram accepted by the bracket state sum")
    parser.add_argument("--exact-alexander", action="store_true",
                        help="expand the Seifert matrix determinant symbolically")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    failed = 0
    for path in args.paths:
        try:
            knot = read_knot_json(path)
        except (OSError, KnotTheoryError) as e:
            logger.error(f"Could not read {path}: {e}")
            failed += 1
            continue
        summary = summarize_knot(knot, args.max_crossings, args.exact_alexander)
        print(json.dumps(summary))

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
