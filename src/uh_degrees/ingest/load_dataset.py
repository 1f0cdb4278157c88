"""Read UH degree datasets from disk and validate them.

`read_dataset` understands JSON (an array of objects, or an object holding a
`records` array) and CSV. `validate_records` is the single deserialization
boundary: it applies the same presence-then-numeric checks as
`total_degrees`, so downstream aggregation sees only well-formed records.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import pandas as pd
from pydantic import ValidationError

from uh_degrees.aggregate.degrees import AWARDS, has_awards
from uh_degrees.errors import MissingFieldError, NonNumericFieldError
from uh_degrees.models import DegreeRecord

log = logging.getLogger(__name__)


def _read_json(path: Path) -> list[dict[str, Any]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("records")
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON array of records or an object with 'records'")
    return [dict(row) for row in payload]


def _read_csv(path: Path) -> list[dict[str, Any]]:
    """Read a CSV file; empty cells become missing keys rather than NaN."""
    pdf = pd.read_csv(path)
    pdf = pdf.astype(object).where(pdf.notna(), None)

    rows: list[dict[str, Any]] = []
    for rec in pdf.to_dict(orient="records"):
        rows.append({k: v for k, v in rec.items() if v is not None})
    return rows


def read_dataset(path: Path) -> list[dict[str, Any]]:
    """Read raw records from a `.json` or `.csv` file.

    Args:
        path: Dataset file.

    Returns:
        List of record dicts, unvalidated.

    Raises:
        ValueError: for unsupported suffixes or malformed JSON layouts.
    """
    suffix = path.suffix.lower()
    if suffix == ".json":
        rows = _read_json(path)
    elif suffix == ".csv":
        rows = _read_csv(path)
    else:
        raise ValueError(f"Unsupported dataset format: {path.suffix!r} (use .json or .csv)")

    log.info("Read %d records from %s", len(rows), path)
    return rows


def validate_records(rows: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Validate raw rows against `DegreeRecord`.

    Every row is checked for `AWARDS` before any row is validated, mirroring
    `total_degrees`.

    Args:
        rows: Raw record dicts.

    Returns:
        Validated records keyed by the dataset's field names, with `AWARDS`
        coerced to a number.

    Raises:
        MissingFieldError: if any row lacks `AWARDS`.
        NonNumericFieldError: if a row's `AWARDS` is not numeric.
        pydantic.ValidationError: for other schema violations.
    """
    rows = list(rows)
    missing = [i for i, r in enumerate(rows) if not has_awards(r)]
    if missing:
        log.error("%d records without %s (first at index %d)", len(missing), AWARDS, missing[0])
        raise MissingFieldError(AWARDS)

    good: list[dict[str, Any]] = []
    for idx, rec in enumerate(rows):
        try:
            m = DegreeRecord.model_validate(rec)
        except ValidationError as exc:
            if any(err["loc"][:1] in ((AWARDS,), ("awards",)) for err in exc.errors()):
                log.error("Record %d has non-numeric %s: %r", idx, AWARDS, rec.get(AWARDS))
                raise NonNumericFieldError(AWARDS, rec.get(AWARDS)) from exc
            raise
        good.append(m.to_record())

    log.info("Validated %d records", len(good))
    return good


def load_dataset(path: Path) -> list[dict[str, Any]]:
    """Read and validate a dataset file in one step."""
    return validate_records(read_dataset(path))
