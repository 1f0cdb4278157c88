from __future__ import annotations

import math

import pytest

from uh_degrees.aggregate.degrees import (
    degrees_by_year,
    doctoral_degree_programs,
    filter_records,
    group_by,
    hawaiian_legacy,
    is_doctoral,
    list_campus_degrees,
    list_campuses,
    max_degrees,
    percentage_hawaiian,
    total_degrees,
    total_degrees_by_year,
    total_hawaiian_legacy,
    unique,
)
from uh_degrees.errors import MissingFieldError


def test_group_by_field_and_callable(uh_records) -> None:
    by_campus = group_by(uh_records, "CAMPUS")
    assert list(by_campus) == ["Manoa", "Hilo", "Kapiolani"]
    assert len(by_campus["Manoa"]) == 3

    by_parity = group_by(uh_records, lambda r: r["AWARDS"] % 2)
    assert sum(len(v) for v in by_parity.values()) == len(uh_records)


def test_group_by_missing_field_goes_to_none() -> None:
    assert group_by([{"CAMPUS": "Hilo"}, {}], "CAMPUS") == {"Hilo": [{"CAMPUS": "Hilo"}], None: [{}]}


def test_filter_and_unique_preserve_order() -> None:
    assert filter_records([{"a": 3}, {"a": 1}, {"a": 2}], lambda r: r["a"] > 1) == [{"a": 3}, {"a": 2}]
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_percentage_hawaiian(uh_records) -> None:
    expected = 100 * total_degrees(hawaiian_legacy(uh_records)) / total_degrees(uh_records)
    assert percentage_hawaiian(uh_records) == pytest.approx(expected)
    assert total_hawaiian_legacy(uh_records) == 253


def test_hawaiian_match_is_exact() -> None:
    data = [{"AWARDS": 1, "HAWAIIAN_LEGACY": "hawaiian"}, {"AWARDS": 1, "HAWAIIAN_LEGACY": "HAWAIIAN "}]
    assert hawaiian_legacy(data) == []
    assert percentage_hawaiian(data) == 0.0


def test_percentage_hawaiian_zero_total_is_nan() -> None:
    assert math.isnan(percentage_hawaiian([]))
    assert math.isnan(percentage_hawaiian([{"AWARDS": 0, "HAWAIIAN_LEGACY": "HAWAIIAN"}]))


def test_percentage_hawaiian_zero_total_nonzero_share_is_inf() -> None:
    data = [{"AWARDS": 5, "HAWAIIAN_LEGACY": "HAWAIIAN"}, {"AWARDS": -5}]
    assert percentage_hawaiian(data) == math.inf


def test_total_degrees_by_year_is_type_sensitive(uh_records) -> None:
    assert total_degrees_by_year(uh_records, 2012) == 200
    assert total_degrees_by_year(uh_records, "2012") == 0
    assert total_degrees_by_year(uh_records, 1999) == 0
    assert total_degrees_by_year([{"FISCAL_YEAR": "2012", "AWARDS": 4}], "2012") == 4


def test_list_campuses_distinct(uh_records) -> None:
    campuses = list_campuses(uh_records)
    assert campuses == ["Manoa", "Hilo", "Kapiolani"]
    assert len(campuses) == len(set(campuses))


def test_campus_degrees_partition_total(uh_records) -> None:
    per_campus = list_campus_degrees(uh_records)
    assert per_campus == {"Manoa": 363, "Hilo": 80, "Kapiolani": 50}
    assert sum(per_campus.values()) == total_degrees(uh_records)
    assert set(per_campus) == set(list_campuses(uh_records))


def test_campus_degrees_validates_each_group() -> None:
    with pytest.raises(MissingFieldError):
        list_campus_degrees([{"CAMPUS": "Hilo", "AWARDS": 1}, {"CAMPUS": "Hilo"}])


def test_max_degrees_bounds_every_year(uh_records) -> None:
    best = max_degrees(uh_records)
    years = degrees_by_year(uh_records)
    assert years == {2012: 200, 2013: 253, 2014: 40}
    assert all(best >= total_degrees_by_year(uh_records, y) for y in years)
    assert best in years.values()


def test_max_degrees_empty_is_none() -> None:
    assert max_degrees([]) is None


def test_doctoral_degree_programs(uh_records) -> None:
    assert is_doctoral(uh_records[0])
    assert not is_doctoral({"OUTCOME": "doctoral degrees"})
    assert doctoral_degree_programs(uh_records) == ["Physics", "Hawaiian Studies"]


def test_doctoral_degree_programs_no_validation() -> None:
    # listing does not sum, so missing AWARDS is fine here
    assert doctoral_degree_programs([{"OUTCOME": "Doctoral Degrees"}]) == [None]


def test_boolean_year_kept_apart_from_numeric_year() -> None:
    data = [{"FISCAL_YEAR": True, "AWARDS": 7}, {"FISCAL_YEAR": 1, "AWARDS": 2}]
    per_year = degrees_by_year(data)
    assert per_year == {(bool, True): 7, 1: 2}
    assert total_degrees_by_year(data, 1) == 2
    assert total_degrees_by_year(data, True) == 7
    assert max_degrees(data) == 7


def test_max_degrees_with_string_and_numeric_years() -> None:
    data = [
        {"FISCAL_YEAR": 2012, "AWARDS": 10},
        {"FISCAL_YEAR": "2012", "AWARDS": 25},
        {"FISCAL_YEAR": 2012, "AWARDS": 5},
        {"FISCAL_YEAR": "2013", "AWARDS": 1},
    ]
    best = max_degrees(data)
    assert degrees_by_year(data) == {2012: 15, "2012": 25, "2013": 1}
    for year in (2012, "2012", "2013"):
        assert best >= total_degrees_by_year(data, year)
    assert best == total_degrees_by_year(data, "2012")
