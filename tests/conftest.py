from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def uh_records() -> list[dict[str, Any]]:
    return [
        {"CAMPUS": "Manoa", "FISCAL_YEAR": 2012, "AWARDS": 120, "HAWAIIAN_LEGACY": "NOT HAWAIIAN",
         "OUTCOME": "Doctoral Degrees", "CIP_DESC": "Physics"},
        {"CAMPUS": "Hilo", "FISCAL_YEAR": 2012, "AWARDS": 80, "HAWAIIAN_LEGACY": "NOT HAWAIIAN",
         "OUTCOME": "Bachelor's Degrees", "CIP_DESC": "Marine Science"},
        {"CAMPUS": "Manoa", "FISCAL_YEAR": 2013, "AWARDS": 203, "HAWAIIAN_LEGACY": "HAWAIIAN",
         "OUTCOME": "Doctoral Degrees", "CIP_DESC": "Hawaiian Studies"},
        {"CAMPUS": "Kapiolani", "FISCAL_YEAR": 2013, "AWARDS": 50, "HAWAIIAN_LEGACY": "HAWAIIAN",
         "OUTCOME": "Associate Degrees", "CIP_DESC": "Culinary Arts"},
        {"CAMPUS": "Manoa", "FISCAL_YEAR": 2014, "AWARDS": 40, "HAWAIIAN_LEGACY": "NOT HAWAIIAN",
         "OUTCOME": "Doctoral Degrees", "CIP_DESC": "Physics"},
    ]
