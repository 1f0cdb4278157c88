"""Degree aggregation functions.

Functions in this module compute statistics over a dataset of UH degree
award records. A dataset is any ordered sequence of mappings keyed by the
upper-case field names of the source data (`AWARDS`, `CAMPUS`,
`FISCAL_YEAR`, ...). Nothing here mutates its input or keeps state between
calls.

Every summation goes through `total_degrees`, which checks that each record
carries an `AWARDS` field before adding anything up:
- missing `AWARDS` anywhere in the input -> `MissingFieldError`
- a non-numeric `AWARDS` value -> `NonNumericFieldError`
"""
from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Callable, Hashable, Iterable, Mapping, Sequence

from uh_degrees.errors import MissingFieldError, NonNumericFieldError

log = logging.getLogger(__name__)

Record = Mapping[str, Any]
Number = int | float

AWARDS = "AWARDS"
HAWAIIAN_LEGACY = "HAWAIIAN_LEGACY"
FISCAL_YEAR = "FISCAL_YEAR"
CAMPUS = "CAMPUS"
OUTCOME = "OUTCOME"
CIP_DESC = "CIP_DESC"

HAWAIIAN = "HAWAIIAN"
DOCTORAL_DEGREES = "Doctoral Degrees"


# =========================================================
# VALIDATED SUM
# =========================================================

def coerce_awards(value: Any, field: str = AWARDS) -> Number:
    """Return `value` as an int or float, or raise `NonNumericFieldError`.

    Real numbers pass through unchanged. Strings are parsed as an int first,
    then as a float. Booleans, ``None``, blank or unparseable strings,
    non-finite values and Python-only literal forms with digit separators
    (``"1_000"``) are rejected.
    """
    if isinstance(value, bool):
        raise NonNumericFieldError(field, value)

    if isinstance(value, numbers.Real):
        number: Number = value  # type: ignore[assignment]
    elif isinstance(value, str):
        text = value.strip()
        if "_" in text:
            raise NonNumericFieldError(field, value)
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise NonNumericFieldError(field, value) from None
    else:
        raise NonNumericFieldError(field, value)

    if not math.isfinite(number):
        raise NonNumericFieldError(field, value)
    return number


def has_awards(record: Record) -> bool:
    """Return True if the record has an `AWARDS` key (whatever its value)."""
    return AWARDS in record


def add_degrees(total: Number, record: Record) -> Number:
    """Fold step: add the record's awards to the running total."""
    return total + coerce_awards(record[AWARDS])


def total_degrees(data: Iterable[Record]) -> Number:
    """Return the total number of degrees in the dataset.

    The whole dataset is checked for the `AWARDS` field before any value is
    summed, so no partial total is ever computed for malformed input.

    Args:
        data: Sequence of degree records.

    Returns:
        Sum of `AWARDS` across all records (0 for an empty dataset).

    Raises:
        MissingFieldError: if any record lacks `AWARDS`.
        NonNumericFieldError: if any `AWARDS` value is not numeric.
    """
    records = list(data)
    if not all(has_awards(r) for r in records):
        raise MissingFieldError(AWARDS)

    total: Number = 0
    for record in records:
        total = add_degrees(total, record)
    return total


# =========================================================
# SELECTION + GROUPING
# =========================================================

def filter_records(data: Iterable[Record], predicate: Callable[[Record], bool]) -> list[Record]:
    """Return the records for which `predicate` is true, in input order."""
    return [r for r in data if predicate(r)]


def group_by(
    items: Iterable[Record],
    key: str | Callable[[Record], Hashable],
) -> dict[Hashable, list[Record]]:
    """Group records by a field name or key function.

    Groups appear in order of first appearance. When `key` is a field name,
    records without that field are grouped under ``None``.
    """
    key_fn = key if callable(key) else (lambda r: r.get(key))
    groups: dict[Hashable, list[Record]] = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(item)
    return groups


def pluck(data: Iterable[Record], field: str) -> list[Any]:
    """Return each record's value for `field` (``None`` when absent)."""
    return [r.get(field) for r in data]


def unique(values: Iterable[Any]) -> list[Any]:
    """Return distinct values in first-appearance order."""
    seen: dict[Any, None] = {}
    for v in values:
        seen.setdefault(v, None)
    return list(seen)


def _sum_groups(groups: Mapping[Hashable, Sequence[Record]]) -> dict[Hashable, Number]:
    return {k: total_degrees(v) for k, v in groups.items()}


# =========================================================
# HAWAIIAN LEGACY
# =========================================================

def is_hawaiian_legacy(record: Record) -> bool:
    """Return True if the record concerns students of Hawaiian ancestry."""
    return record.get(HAWAIIAN_LEGACY) == HAWAIIAN


def hawaiian_legacy(data: Iterable[Record]) -> list[Record]:
    """Return the records concerning students of Hawaiian ancestry."""
    return filter_records(data, is_hawaiian_legacy)


def total_hawaiian_legacy(data: Iterable[Record]) -> Number:
    """Return the number of degrees awarded to students of Hawaiian ancestry."""
    return total_degrees(hawaiian_legacy(data))


def percentage_hawaiian(data: Sequence[Record]) -> float:
    """Return the percentage of degrees awarded to students of Hawaiian ancestry.

    A zero grand total is not an error: the result follows floating-point
    division, ``nan`` for 0/0 and a signed ``inf`` otherwise.
    """
    records = list(data)
    total = total_degrees(records)
    hawaiian = total_hawaiian_legacy(records)

    if total == 0:
        log.debug("percentage_hawaiian: total degrees is zero (hawaiian=%s)", hawaiian)
        if hawaiian == 0:
            return math.nan
        return math.copysign(math.inf, hawaiian)

    return 100.0 * hawaiian / total


# =========================================================
# YEARS
# =========================================================

def filter_year(year: Any) -> Callable[[Record], bool]:
    """Return a predicate matching records whose `FISCAL_YEAR` is `year`.

    Matching is type-sensitive: ``2015`` never matches ``"2015"``.
    """
    kind = _year_kind(year)

    def _matches(record: Record) -> bool:
        value = record.get(FISCAL_YEAR)
        return _year_kind(value) is kind and value == year

    return _matches


def _year_kind(value: Any) -> type:
    # numbers of any width compare as one kind; strings, bools etc. stand alone
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return numbers.Real
    return type(value)


def find_year(data: Iterable[Record], year: Any) -> list[Record]:
    """Return the records from the given fiscal year."""
    return filter_records(data, filter_year(year))


def total_degrees_by_year(data: Iterable[Record], year: Any) -> Number:
    """Return the degrees awarded in `year` (0 when the year is absent)."""
    return total_degrees(find_year(data, year))


def _year_group_key(value: Any) -> Hashable:
    # True == 1 as a dict key; keep boolean years in groups of their own
    if isinstance(value, bool):
        return (bool, value)
    return value


def group_by_year(data: Iterable[Record]) -> dict[Hashable, list[Record]]:
    """Group the dataset by `FISCAL_YEAR`.

    Groups follow the matching rule of `filter_year`: strings and numbers
    never share a group, and a boolean year is keyed as ``(bool, value)``.
    """
    return group_by(data, lambda r: _year_group_key(r.get(FISCAL_YEAR)))


def degrees_by_year(data: Iterable[Record]) -> dict[Hashable, Number]:
    """Return a mapping of fiscal year to degrees awarded that year."""
    return _sum_groups(group_by_year(data))


def max_degrees(data: Iterable[Record]) -> Number | None:
    """Return the largest number of degrees awarded in a single year.

    Returns ``None`` for an empty dataset.
    """
    per_year = degrees_by_year(data)
    if not per_year:
        return None
    return max(per_year.values())


# =========================================================
# CAMPUSES
# =========================================================

def list_campuses(data: Iterable[Record]) -> list[Any]:
    """Return the distinct campuses in the dataset, first appearance first."""
    return unique(pluck(data, CAMPUS))


def group_by_campus(data: Iterable[Record]) -> dict[Hashable, list[Record]]:
    """Group the dataset by `CAMPUS`."""
    return group_by(data, CAMPUS)


def list_campus_degrees(data: Iterable[Record]) -> dict[Hashable, Number]:
    """Return a mapping of campus to total degrees awarded there."""
    return _sum_groups(group_by_campus(data))


# =========================================================
# DOCTORAL PROGRAMS
# =========================================================

def is_doctoral(record: Record) -> bool:
    """Return True if the record concerns a doctoral degree."""
    return record.get(OUTCOME) == DOCTORAL_DEGREES


def doctoral_list(data: Iterable[Record]) -> list[Record]:
    """Return the records concerning doctoral degrees."""
    return filter_records(data, is_doctoral)


def doctoral_degree_programs(data: Iterable[Record]) -> list[Any]:
    """Return the distinct programs (`CIP_DESC`) that award doctoral degrees."""
    return unique(pluck(doctoral_list(data), CIP_DESC))
