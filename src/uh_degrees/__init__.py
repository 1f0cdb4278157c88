"""uh_degrees package.

Aggregate statistics over University of Hawaii degree-award records: totals,
Hawaiian-legacy percentages, per-year and per-campus groupings, yearly maxima
and doctoral program listings.

Architecture:
- Records are plain mappings keyed by the dataset's upper-case field names
- Pydantic models validate records once at the ingestion boundary
- The aggregation core is a set of pure functions; pandas/Dask power the
  tabular reports
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
