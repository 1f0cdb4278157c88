"""Errors raised by the validated-sum path.

Both errors are data-quality problems: the aggregate is never produced and
the caller is expected to fix the dataset upstream.
"""

from __future__ import annotations

from typing import Any


class DegreeDataError(ValueError):
    """Base class for dataset problems detected while summing awards."""


class MissingFieldError(DegreeDataError):
    """A record lacks a field required for summation."""

    def __init__(self, field: str = "AWARDS") -> None:
        self.field = field
        super().__init__(f"No {field} field.")


class NonNumericFieldError(DegreeDataError):
    """A record's field value failed numeric coercion."""

    def __init__(self, field: str = "AWARDS", value: Any = None) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Non-Numeric {field}.")
