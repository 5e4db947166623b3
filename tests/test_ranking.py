"""Threshold filtering, ranking and truncation of deduplicated listings."""
import pytest

from estate_report.core.config import CITY, PRICE_DIFF, PROVINCE
from estate_report.processing.ranking import distinct_values, select_top, to_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        (1500, 1500.0),
        ("1500", 1500.0),
        (" 12.5 ", 12.5),
        ("1,500", 1.0),
        ("1500만원", 1500.0),
        ("+3.5e2x", 350.0),
        (".5", 0.5),
        ("inf", 0.0),
        ("Infinity", 0.0),
        ("1e999", 0.0),
        (10 ** 400, 0.0),
        (float("inf"), 0.0),
        (None, 0.0),
        ("", 0.0),
        ("n/a", 0.0),
        ("nan", 0.0),
        (True, 0.0),
        (-20, -20.0),
    ],
)
def test_to_number_parses_or_defaults_to_zero(raw, expected):
    assert to_number(raw) == expected


def test_select_top_threshold_includes_and_excludes(listing):
    included = listing(**{PRICE_DIFF: "1500"})
    below = listing(**{PRICE_DIFF: "999"})
    missing = listing()
    del missing[PRICE_DIFF]

    selection = select_top([included, below, missing], PRICE_DIFF, 1000, PRICE_DIFF, 100)

    assert selection.records == [included]
    assert selection.matched_count == 1


def test_select_top_includes_value_equal_to_threshold(listing):
    selection = select_top([listing(**{PRICE_DIFF: 1000})], PRICE_DIFF, 1000, PRICE_DIFF, 100)

    assert selection.matched_count == 1


def test_select_top_sorts_descending_and_keeps_ties_stable(listing):
    records = [
        listing(**{PRICE_DIFF: 1200, "tag": "a"}),
        listing(**{PRICE_DIFF: 5000, "tag": "b"}),
        listing(**{PRICE_DIFF: 1200, "tag": "c"}),
        listing(**{PRICE_DIFF: "3000", "tag": "d"}),
    ]

    selection = select_top(records, PRICE_DIFF, 1000, PRICE_DIFF, 100)

    assert [record["tag"] for record in selection.records] == ["b", "d", "a", "c"]
    values = [to_number(record[PRICE_DIFF]) for record in selection.records]
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_select_top_truncates_but_reports_match_count(listing):
    records = [listing(**{PRICE_DIFF: 1000 + index}) for index in range(150)]

    selection = select_top(records, PRICE_DIFF, 1000, PRICE_DIFF, 100)

    assert selection.shown_count == 100
    assert selection.matched_count == 150
    assert selection.records[0][PRICE_DIFF] == 1149


def test_select_top_collects_region_options_before_truncation(listing):
    records = [
        listing(**{PRICE_DIFF: 9000, PROVINCE: "서울특별시", CITY: "강남구"}),
        listing(**{PRICE_DIFF: 1100, PROVINCE: "경기도", CITY: "성남시"}),
        listing(**{PRICE_DIFF: 1050, PROVINCE: None, CITY: ""}),
        listing(**{PRICE_DIFF: 10, PROVINCE: "부산광역시", CITY: "해운대구"}),
    ]

    selection = select_top(records, PRICE_DIFF, 1000, PRICE_DIFF, 1)

    assert selection.shown_count == 1
    assert selection.provinces == ["경기도", "서울특별시"]
    assert selection.cities == ["강남구", "성남시"]


def test_distinct_values_skips_blanks_and_sorts(listing):
    records = [listing(**{CITY: "b"}), listing(**{CITY: "a"}), listing(**{CITY: None}), listing(**{CITY: "b"})]

    assert distinct_values(records, CITY) == ["a", "b"]


def test_select_top_with_empty_input():
    selection = select_top([], PRICE_DIFF, 1000, PRICE_DIFF, 100)

    assert selection.records == []
    assert selection.matched_count == 0
    assert selection.provinces == []


def test_select_top_rejects_negative_limit(listing):
    with pytest.raises(ValueError, match="limit"):
        select_top([listing()], PRICE_DIFF, 1000, PRICE_DIFF, -1)
