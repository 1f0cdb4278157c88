"""Command-line interface for degree statistics.

Provides subcommands: `summary` and `tables`. Each command is implemented as
a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from uh_degrees.config import get_settings
from uh_degrees.errors import DegreeDataError
from uh_degrees.logging_config import configure_logging
from uh_degrees.ingest.load_dataset import load_dataset
from uh_degrees.aggregate.degrees import (
    doctoral_degree_programs,
    list_campus_degrees,
    list_campuses,
    max_degrees,
    percentage_hawaiian,
    total_degrees,
    total_degrees_by_year,
)
from uh_degrees.aggregate.tables import (
    records_to_ddf,
    degrees_by_year_table,
    degrees_by_campus_table,
    degrees_by_campus_year_table,
    hawaiian_share_by_campus_table,
)

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _data_path(args: argparse.Namespace) -> Path:
    """Return the dataset path from `--data`, falling back to settings."""
    if args.data is not None:
        return Path(args.data)
    return get_settings().data_path


def _json_number(value: float | int | None) -> Any:
    """Map non-finite floats to strings so the summary stays valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def build_summary(records: list[dict[str, Any]], year: Any = None) -> dict[str, Any]:
    """Compute the summary document printed by `summary`.

    Args:
        records: Validated degree records.
        year: Optional fiscal year for a single-year total.

    Returns:
        Dict of statistic name to value.
    """
    summary: dict[str, Any] = {
        "records": len(records),
        "total_degrees": total_degrees(records),
        "percentage_hawaiian": _json_number(percentage_hawaiian(records)),
        "campuses": list_campuses(records),
        "campus_degrees": {str(k): v for k, v in list_campus_degrees(records).items()},
        "max_degrees": max_degrees(records),
        "doctoral_degree_programs": doctoral_degree_programs(records),
    }
    if year is not None:
        summary["year"] = year
        summary["total_degrees_by_year"] = total_degrees_by_year(records, year)
    return summary


# --------------------------------------------------
# SUMMARY
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace) -> None:
    """Print headline statistics for the dataset as JSON.

    Args:
        args: argparse namespace with `data`, `year`, `year_as_str`.
    """
    records = load_dataset(_data_path(args))

    year: Any = args.year
    if year is not None and args.year_as_str:
        year = str(year)

    print(json.dumps(build_summary(records, year), indent=2))


# --------------------------------------------------
# TABLES
# --------------------------------------------------
def cmd_tables(args: argparse.Namespace) -> None:
    """Write per-year and per-campus report tables as CSV files.

    Args:
        args: argparse namespace with `data` and `out`.
    """
    records = load_dataset(_data_path(args))
    out_dir = Path(args.out) if args.out is not None else get_settings().output_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    if not records:
        raise RuntimeError("Dataset is empty. Nothing to tabulate.")

    ddf = records_to_ddf(records)

    tables = {
        "degrees_by_year": degrees_by_year_table(ddf),
        "degrees_by_campus": degrees_by_campus_table(ddf),
        "degrees_by_campus_year": degrees_by_campus_year_table(ddf),
        "hawaiian_share_by_campus": hawaiian_share_by_campus_table(ddf),
    }
    for name, table in tables.items():
        pdf = table.compute()
        path = out_dir / f"{name}.csv"
        pdf.to_csv(path, index=False)
        log.info("Wrote %s: %d rows", path, len(pdf))

    log.info("Tables successfully generated.")


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="uh-degrees")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_summary = sub.add_parser("summary")
    p_summary.add_argument("--data", default=None)
    p_summary.add_argument("--year", type=int, default=None)
    p_summary.add_argument("--year-as-str", action="store_true")

    p_tables = sub.add_parser("tables")
    p_tables.add_argument("--data", default=None)
    p_tables.add_argument("--out", default=None)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    s = get_settings()
    # stdout carries command output (summary JSON); logs go to stderr
    configure_logging(s.log_path, s.log_level, stream=sys.stderr)

    args = build_parser().parse_args(argv)

    try:
        if args.cmd == "summary":
            cmd_summary(args)
        elif args.cmd == "tables":
            cmd_tables(args)
        else:
            return 2
    except DegreeDataError as exc:
        log.error("Dataset rejected: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
