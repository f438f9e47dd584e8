#!/usr/bin/env python3
"""
Look up a list of cases one after another and write the results as JSON.

The input CSV needs ``case_type``, ``case_number`` and ``year`` columns.

Usage:
    python scripts/fetch_cases.py cases.csv --output results.json

Cases are fetched sequentially with a BATCH_DELAY pause between requests and
checked against MIN_YEAR and MAX_YEAR. Pass ``--live`` to query the court
portal instead of generating simulated data.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path

from court_lookup.config import Settings, get_settings
from court_lookup.providers import CaseQuery, run_batch

REQUIRED_COLUMNS = ("case_type", "case_number", "year")


def read_cases(path: Path) -> list[CaseQuery]:
    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        missing = [col for col in REQUIRED_COLUMNS if col not in (reader.fieldnames or [])]
        if missing:
            raise SystemExit(f"{path} is missing columns: {', '.join(missing)}")
        return [
            CaseQuery(
                case_type=(row.get("case_type") or "").strip(),
                case_number=(row.get("case_number") or "").strip(),
                year=(row.get("year") or "").strip(),
            )
            for row in reader
        ]


def parse_args(argv: list[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(description="Fetch case details for every row of a CSV file.")
    parser.add_argument("input", type=Path, help="CSV with case_type, case_number and year columns.")
    parser.add_argument("--output", type=Path, default=Path("results.json"), help="Where to write JSON results.")
    parser.add_argument(
        "--delay", type=float, default=settings.batch_delay, help="Pause between consecutive lookups (seconds)."
    )
    parser.add_argument(
        "--live",
        action="store_true",
        default=settings.case_provider == "live",
        help="Query the court portal instead of simulated data.",
    )
    parser.add_argument(
        "--state", default=settings.court_state, help="Portal to use with --live (delhi, maharashtra, karnataka)."
    )
    parser.add_argument(
        "--timeout", type=float, default=settings.request_timeout, help="Request timeout for --live (seconds)."
    )
    parser.add_argument(
        "--log-level", default=settings.log_level.upper(), choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = parse_args(argv, settings)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s %(levelname)s %(message)s")

    settings = settings.model_copy(
        update={
            "case_provider": "live" if args.live else "simulated",
            "court_state": args.state,
            "request_timeout": args.timeout,
            "batch_delay": args.delay,
        }
    )
    results = run_batch(settings, read_cases(args.input))
    args.output.write_text(
        json.dumps([result.to_dict() for result in results], ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    failed = sum(1 for result in results if not result.success)
    logging.info("Finished. %d cases fetched, %d failed. Results in %s", len(results), failed, args.output)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
