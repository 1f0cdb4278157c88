"""Pydantic models used for record validation.

`DegreeRecord` is the typed form of one dataset row. Field aliases keep the
upper-case names used by the source data so validated records can be handed
straight back to the aggregation functions.
"""

from __future__ import annotations

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

from uh_degrees.aggregate.degrees import coerce_awards

class DegreeRecord(BaseModel):
    """Schema for a single degree-award record.

    Attributes:
        awards: Number of degrees awarded (coerced from numeric strings).
        hawaiian_legacy: Hawaiian-ancestry marker, ``"HAWAIIAN"`` when set.
        fiscal_year: Fiscal year, kept in its incoming type (str or int).
        campus: Campus name.
        outcome: Degree outcome, e.g. ``"Doctoral Degrees"``.
        cip_desc: CIP program description.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    awards: int | float = Field(..., alias="AWARDS")
    hawaiian_legacy: str | None = Field(None, alias="HAWAIIAN_LEGACY")
    fiscal_year: str | int | None = Field(None, alias="FISCAL_YEAR")
    campus: str | None = Field(None, alias="CAMPUS")
    outcome: str | None = Field(None, alias="OUTCOME")
    cip_desc: str | None = Field(None, alias="CIP_DESC")

    @field_validator("awards", mode="before")
    @classmethod
    def _coerce_awards(cls, value: Any) -> int | float:
        return coerce_awards(value)

    def to_record(self) -> dict[str, Any]:
        """Return the record keyed by the dataset's upper-case field names.

        Optional fields that were absent on input stay absent.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)
