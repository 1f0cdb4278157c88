"""Degree aggregation helpers.

`degrees` holds the pure-function core (validated sums, filters, groupings
and the statistics built on them); `tables` holds pandas/Dask versions of
the groupings used for tabular reports.
"""
