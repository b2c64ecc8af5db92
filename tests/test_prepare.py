"""Tests for request validation, sorting/filtering and highlight colors."""

from __future__ import annotations

import warnings

import pandas as pd
import pytest
from hypothesis import given
from hypothesis import strategies as st

from neatcharts.exceptions import ColumnNotFoundError, ConfigurationError, HighlightNotice
from neatcharts.prepare import ChartRequest, highlight_colors, pre_process_data
from neatcharts.theme import COLORS

NEUTRAL = COLORS["neutral"]


def _prepare(data, x="company", y="revenue", facet=None, **options) -> pd.DataFrame:
    return pre_process_data(data, ChartRequest.create(x, y, facet, **options))


# --- validation ---------------------------------------------------------------


@pytest.mark.parametrize("options", [{"limit": 2}, {"threshold": 5}])
def test_limit_and_threshold_need_sort(options) -> None:
    with pytest.raises(ConfigurationError, match="sorting required"):
        ChartRequest.create("company", "revenue", sort=False, **options)


def test_limit_and_threshold_are_mutually_exclusive() -> None:
    with pytest.raises(ConfigurationError, match="mutually exclusive"):
        ChartRequest.create("company", "revenue", limit=2, threshold=5)


@pytest.mark.parametrize("limit", [0, -1, 2.5, True])
def test_limit_must_be_positive_integer(limit) -> None:
    with pytest.raises(ConfigurationError, match="positive integer"):
        ChartRequest.create("company", "revenue", limit=limit)


def test_color_count_must_match_highlight_count() -> None:
    with pytest.raises(ConfigurationError, match="3 highlight colors for 2"):
        ChartRequest.create(
            "company",
            "revenue",
            highlight=["A", "B"],
            highlight_color=["red", "blue", "green"],
        )


def test_scalar_highlight_and_single_color_are_normalized() -> None:
    request = ChartRequest.create(
        "company", "revenue", highlight="B", highlight_color=["red"]
    )
    assert request.highlight == ("B",)
    assert request.highlight_color == "red"


def test_rgb_tuple_is_one_color() -> None:
    request = ChartRequest.create(
        "company", "revenue", highlight=["A", "B"], highlight_color=(1.0, 0.0, 0.0)
    )
    assert request.highlight_color == (1.0, 0.0, 0.0)


def test_empty_highlight_means_no_highlight(revenue) -> None:
    prepared = _prepare(revenue, highlight=[])
    assert "display_color" not in prepared.columns


def test_missing_column(revenue) -> None:
    with pytest.raises(ColumnNotFoundError) as excinfo:
        _prepare(revenue, y="profit")
    assert isinstance(excinfo.value, KeyError)
    assert "profit" in str(excinfo.value)


def test_y_must_be_numeric(revenue) -> None:
    with pytest.raises(ConfigurationError, match="must be numeric"):
        _prepare(revenue, x="revenue", y="company")


# --- sorting and filtering ----------------------------------------------------


def test_limit_keeps_top_rows(revenue) -> None:
    prepared = _prepare(revenue, limit=2)
    assert prepared["company"].tolist() == ["B", "C"]
    assert prepared["revenue"].tolist() == [30, 20]
    assert prepared.index.tolist() == [0, 1]


def test_limit_larger_than_table(revenue) -> None:
    assert len(_prepare(revenue, limit=10)) == 3


def test_threshold_is_strict(revenue) -> None:
    prepared = _prepare(revenue, threshold=20)
    assert prepared["company"].tolist() == ["B"]


def test_sort_is_stable() -> None:
    data = pd.DataFrame({"company": ["A", "B", "C"], "revenue": [5, 5, 9]})
    assert _prepare(data)["company"].tolist() == ["C", "A", "B"]


def test_unsorted_keeps_row_order(revenue) -> None:
    assert _prepare(revenue, sort=False)["company"].tolist() == ["A", "B", "C"]


def test_input_table_is_untouched(revenue) -> None:
    before = revenue.copy()
    _prepare(revenue, limit=1, highlight="A")
    pd.testing.assert_frame_equal(revenue, before)


def test_accepts_mapping_of_columns() -> None:
    prepared = _prepare({"company": ["A", "B"], "revenue": [1, 2]})
    assert prepared["company"].tolist() == ["B", "A"]


def test_facet_groups_are_limited_independently(revenue_by_year) -> None:
    prepared = _prepare(revenue_by_year, facet="year", limit=2)
    assert prepared["year"].tolist() == [2018, 2018, 2019, 2019]
    assert prepared["company"].tolist() == ["B", "C", "A", "D"]
    assert prepared["display_label"].tolist() == [
        "B___2018",
        "C___2018",
        "A___2019",
        "D___2019",
    ]


def test_facet_threshold(revenue_by_year) -> None:
    prepared = _prepare(revenue_by_year, facet="year", threshold=30)
    assert prepared["company"].tolist() == ["B", "A", "D"]


def test_unsorted_facet_has_no_display_label(revenue_by_year) -> None:
    prepared = _prepare(revenue_by_year, facet="year", sort=False)
    assert "display_label" not in prepared.columns


rows = st.lists(
    st.tuples(st.sampled_from("ABCDEFGH"), st.integers(-100, 100)),
    min_size=1,
    max_size=30,
)


@given(rows, st.integers(1, 40))
def test_limit_property(data, limit) -> None:
    table = pd.DataFrame(data, columns=["company", "revenue"])
    prepared = _prepare(table, limit=limit)
    values = prepared["revenue"].tolist()
    assert len(values) == min(limit, len(data))
    assert values == sorted(values, reverse=True)


@given(rows, st.integers(-100, 100))
def test_threshold_property(data, threshold) -> None:
    table = pd.DataFrame(data, columns=["company", "revenue"])
    prepared = _prepare(table, threshold=threshold)
    assert all(value > threshold for value in prepared["revenue"])
    assert len(prepared) == sum(value > threshold for _, value in data)


# --- highlight colors ---------------------------------------------------------


def test_single_highlight(revenue) -> None:
    prepared = _prepare(revenue, sort=False, highlight="B", highlight_color="red")
    assert prepared["display_color"].tolist() == [NEUTRAL, "red", NEUTRAL]


def test_one_color_for_many_values(revenue) -> None:
    prepared = _prepare(
        revenue, sort=False, highlight=["A", "C"], highlight_color="red"
    )
    assert prepared["display_color"].tolist() == ["red", NEUTRAL, "red"]


def test_colors_follow_request_order(revenue) -> None:
    prepared = _prepare(
        revenue,
        sort=False,
        highlight=["C", "A"],
        highlight_color=["red", "blue"],
    )
    assert prepared["display_color"].tolist() == ["blue", NEUTRAL, "red"]


def test_unmatched_highlight_warns_and_continues(revenue) -> None:
    with pytest.warns(HighlightNotice, match=r"1 of 2 .*not found: \['Z'\]"):
        prepared = _prepare(
            revenue,
            sort=False,
            highlight=["B", "Z"],
            highlight_color=["red", "blue"],
        )
    assert len(prepared) == 3
    assert prepared["display_color"].tolist() == [NEUTRAL, "red", NEUTRAL]


def test_duplicate_highlight_warns(revenue) -> None:
    with pytest.warns(HighlightNotice, match="duplicate"):
        _prepare(revenue, highlight=["B", "B"])


def test_highlight_removed_by_limit_warns(revenue) -> None:
    with pytest.warns(HighlightNotice, match="not found"):
        _prepare(revenue, limit=1, highlight="A")


def test_matched_highlight_is_silent(revenue) -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        _prepare(revenue, highlight=["A", "B"])


def test_highlight_colors_custom_neutral() -> None:
    values = pd.Series(["x", "y"], index=[5, 7])
    colors = highlight_colors(values, ("y",), "red", neutral_color="white")
    assert colors.tolist() == ["white", "red"]
    assert colors.index.tolist() == [5, 7]


def test_highlight_notice_points_at_the_caller(revenue) -> None:
    request = ChartRequest.create("company", "revenue", highlight="Z")
    with pytest.warns(HighlightNotice) as record:
        pre_process_data(revenue, request)
    assert record[0].filename == __file__
