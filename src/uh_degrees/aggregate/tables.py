"""Tabular degree reports.

Frame versions of the groupings in `degrees`, used to write report tables.
Inputs are Dask DataFrames built from validated records (numeric `AWARDS`);
outputs are small Dask DataFrames that callers `.compute()` to pandas.

Expectations:
- Input columns: `AWARDS`, `CAMPUS`, `FISCAL_YEAR`, `HAWAIIAN_LEGACY`
- Outputs: column layouts documented on each function docstring.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping
from typing import cast, Any as TypingAny

import pandas as pd
import dask.dataframe as dd

from uh_degrees.aggregate.degrees import AWARDS, CAMPUS, FISCAL_YEAR, HAWAIIAN, HAWAIIAN_LEGACY


def records_to_ddf(records: Iterable[Mapping[str, Any]], npartitions: int = 1) -> Any:
    """Build a Dask DataFrame from validated records.

    Args:
        records: Validated degree records.
        npartitions: Number of Dask partitions.

    Returns:
        Dask DataFrame with one row per record and `AWARDS` as float.
        `CAMPUS` and `FISCAL_YEAR` are always present (all-missing when no
        record carries them), so the grouped tables yield no rows instead
        of failing.
    """
    pdf = pd.DataFrame(list(records))
    for col in (CAMPUS, FISCAL_YEAR):
        if col not in pdf.columns:
            pdf[col] = None
    if AWARDS in pdf.columns:
        pdf[AWARDS] = pd.to_numeric(pdf[AWARDS]).astype(float)
    dd_mod = cast(TypingAny, dd)
    return dd_mod.from_pandas(pdf, npartitions=max(1, npartitions))


def degrees_by_year_table(ddf: Any) -> Any:
    """Return total degrees per fiscal year.

    Args:
        ddf: Dask DataFrame with `FISCAL_YEAR` and `AWARDS` columns.

    Returns:
        Dask DataFrame with columns: `FISCAL_YEAR`, `total_degrees`.
    """
    return (
        ddf.groupby(FISCAL_YEAR)[AWARDS]
        .sum()
        .reset_index()
        .rename(columns={AWARDS: "total_degrees"})
    )


def degrees_by_campus_table(ddf: Any) -> Any:
    """Return total degrees per campus.

    Returns:
        Dask DataFrame with columns: `CAMPUS`, `total_degrees`.
    """
    return (
        ddf.groupby(CAMPUS)[AWARDS]
        .sum()
        .reset_index()
        .rename(columns={AWARDS: "total_degrees"})
    )


def degrees_by_campus_year_table(ddf: Any) -> Any:
    """Return total degrees per campus and fiscal year.

    Returns:
        Dask DataFrame with columns: `CAMPUS`, `FISCAL_YEAR`, `total_degrees`.
    """
    return (
        ddf.groupby([CAMPUS, FISCAL_YEAR])[AWARDS]
        .sum()
        .reset_index()
        .rename(columns={AWARDS: "total_degrees"})
    )


def hawaiian_share_by_campus_table(ddf: Any) -> Any:
    """Compute each campus's share of degrees awarded to Hawaiian-legacy students.

    Args:
        ddf: Dask DataFrame with `CAMPUS`, `AWARDS` and optionally
            `HAWAIIAN_LEGACY` columns.

    Returns:
        Dask DataFrame with columns: `CAMPUS`, `total_degrees`,
        `hawaiian_degrees`, `pct_hawaiian`. `pct_hawaiian` is NaN for campuses
        with zero total degrees.
    """
    if HAWAIIAN_LEGACY in ddf.columns:
        is_hawaiian = ddf[HAWAIIAN_LEGACY] == HAWAIIAN
        x = ddf.assign(hawaiian_awards=ddf[AWARDS].where(is_hawaiian, 0.0))
    else:
        x = ddf.assign(hawaiian_awards=0.0)

    out = (
        x.groupby(CAMPUS)[[AWARDS, "hawaiian_awards"]]
        .sum()
        .reset_index()
        .rename(columns={AWARDS: "total_degrees", "hawaiian_awards": "hawaiian_degrees"})
    )
    total = out["total_degrees"].where(out["total_degrees"] != 0)
    return out.assign(pct_hawaiian=100.0 * out["hawaiian_degrees"] / total)
