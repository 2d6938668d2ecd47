"""Add an EDSS column to a CSV export of functional system scores."""
from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TextIO

from ..adapters.records import RecordParseError, calculate_from_record_with, resolve_naming
from ..content import UnknownNamingError, available_namings
from ..core.config import get_settings
from ..core.logging import setup_logging
from ..schemas.edss import RecordMapping

logger = logging.getLogger(__name__)


def score_rows(
    rows: Iterable[dict],
    mapping: RecordMapping,
    column: str,
) -> List[dict]:
    """Return copies of *rows* with *column* set to the EDSS (empty when incomplete)."""

    scored: List[dict] = []
    incomplete = 0
    for line, row in enumerate(rows, start=2):
        if None in row:
            raise SystemExit(f"Row {line}: more cells than header columns")
        try:
            result = calculate_from_record_with(row, mapping)
        except RecordParseError as exc:
            raise SystemExit(f"Row {line}: {exc}") from exc
        if result is None:
            incomplete += 1
        scored.append({**row, column: result or ""})
    logger.info("Scored %s rows (%s incomplete)", len(scored), incomplete)
    return scored


def write_rows(rows: Sequence[dict], fieldnames: Sequence[str], out: TextIO) -> None:
    writer = csv.DictWriter(out, fieldnames=list(fieldnames), lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Calculate EDSS for each row of a CSV export")
    parser.add_argument("input", help="CSV file with one examination per row")
    parser.add_argument("--output", "-o", help="Destination CSV (default: stdout)")
    parser.add_argument(
        "--naming",
        default=settings.field_naming,
        help=f"Field naming ({', '.join(available_namings())} or legacy)",
    )
    parser.add_argument("--suffix", default=settings.field_suffix, help="Suffix appended to every field name")
    parser.add_argument("--column", default=settings.output_column, help="Name of the EDSS output column")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(get_settings().log_level)

    source = Path(args.input).expanduser()
    if not source.exists():
        raise SystemExit(f"File {source} not found")
    try:
        naming = resolve_naming(args.naming)
    except UnknownNamingError as exc:
        raise SystemExit(f"Unknown field naming: {args.naming}") from exc
    mapping = RecordMapping(naming=naming, suffix=args.suffix)

    with source.open("r", encoding="utf-8-sig", newline="") as fh:
        reader = csv.DictReader(fh)
        fieldnames = list(reader.fieldnames or [])
        rows = score_rows(reader, mapping, args.column)
    if args.column not in fieldnames:
        fieldnames.append(args.column)

    if args.output:
        with Path(args.output).expanduser().open("w", encoding="utf-8", newline="") as out:
            write_rows(rows, fieldnames, out)
        logger.info("EDSS written to %s", args.output)
    else:
        write_rows(rows, fieldnames, sys.stdout)


if __name__ == "__main__":
    main()
