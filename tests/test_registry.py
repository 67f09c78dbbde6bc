"""
Tests for the tool registry: schemas, argument models and query building.

Most of these are pure (no HTTP).  The handler tests at the end go through
the FakeFred transport.
"""

import pytest

from fred_core.errors import InvalidArgumentsError
from fred_core.models import SearchArguments, SeriesArguments
from fred_core.registry import (
    SEARCH_SCHEMA,
    SERIES_SCHEMA,
    build_registry,
    build_search_query,
    build_series_query,
    format_number,
)


# ============================================================================
# Schemas (compatibility surface)
# ============================================================================

def test_search_schema_properties():
    assert list(SEARCH_SCHEMA["properties"]) == [
        "searchText", "limit", "orderBy", "sortOrder",
        "filterVariable", "filterValue", "tagNames", "excludeTagNames",
    ]
    assert len(SEARCH_SCHEMA["properties"]["orderBy"]["enum"]) == 12
    assert SEARCH_SCHEMA["properties"]["sortOrder"]["enum"] == ["asc", "desc"]
    assert SEARCH_SCHEMA["properties"]["tagNames"]["items"] == {"type": "string"}


def test_series_schema_properties():
    props = SERIES_SCHEMA["properties"]
    assert list(props) == [
        "seriesId", "startDate", "endDate", "sortOrder", "limit", "offset",
        "frequency", "aggregationMethod", "outputType", "vintageDates",
    ]
    assert props["frequency"]["enum"] == ["d", "w", "bw", "m", "q", "sa", "a"]
    assert props["aggregationMethod"]["enum"] == ["avg", "sum", "eop"]
    assert props["outputType"]["enum"] == [1, 2, 3, 4]


def test_registry_is_ordered_and_unique(fred_client):
    registry = build_registry(fred_client)
    assert [d.name for d in registry] == ["search", "series"]
    assert registry[0].input_schema is SEARCH_SCHEMA
    assert registry[1].input_schema is SERIES_SCHEMA


# ============================================================================
# Argument models
# ============================================================================

def test_search_arguments_from_camel_case():
    args = SearchArguments.from_arguments({
        "searchText": "unemployment",
        "limit": 10,
        "orderBy": "popularity",
        "tagNames": ["usa", "monthly"],
        "ignored": "extra keys are dropped",
    })
    assert args.search_text == "unemployment"
    assert args.limit == 10
    assert args.order_by == "popularity"
    assert args.tag_names == ("usa", "monthly")
    assert args.exclude_tag_names is None


def test_null_is_the_same_as_absent():
    args = SeriesArguments.from_arguments({"seriesId": "GDP", "startDate": None})
    assert args.start_date is None


@pytest.mark.parametrize("arguments, message", [
    ({}, "Missing required argument: searchText"),
    ({"searchText": 42}, "Argument 'searchText' must be a string"),
    ({"searchText": "x", "limit": "10"}, "Argument 'limit' must be a number"),
    ({"searchText": "x", "limit": True}, "Argument 'limit' must be a number"),
    ({"searchText": "x", "tagNames": "usa"}, "Argument 'tagNames' must be an array of strings"),
])
def test_search_arguments_rejected(arguments, message):
    with pytest.raises(InvalidArgumentsError, match=message):
        SearchArguments.from_arguments(arguments)


def test_enum_values_are_not_validated_locally():
    """FRED is authoritative for enums; we pass them through."""
    args = SeriesArguments.from_arguments({"seriesId": "GDP", "frequency": "hourly"})
    assert build_series_query(args)[-1] == ("frequency", "hourly")


# ============================================================================
# Query building
# ============================================================================

@pytest.mark.parametrize("value, expected", [
    (10, "10"),
    (10.0, "10"),
    (2.5, "2.5"),
    (0, "0"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_search_query_minimal():
    assert build_search_query(SearchArguments(search_text="GDP")) == [("search_text", "GDP")]


def test_search_query_full_mapping():
    args = SearchArguments.from_arguments({
        "searchText": "rate",
        "limit": 25,
        "orderBy": "popularity",
        "sortOrder": "desc",
        "filterVariable": "frequency",
        "filterValue": "Monthly",
        "tagNames": ["usa", "nsa"],
        "excludeTagNames": ["discontinued"],
    })
    assert build_search_query(args) == [
        ("search_text", "rate"),
        ("limit", "25"),
        ("order_by", "popularity"),
        ("sort_order", "desc"),
        ("filter_variable", "frequency"),
        ("filter_value", "Monthly"),
        ("tag_names", "usa;nsa"),
        ("exclude_tag_names", "discontinued"),
    ]


def test_series_query_full_mapping():
    args = SeriesArguments.from_arguments({
        "seriesId": "UNRATE",
        "startDate": "2020-01-01",
        "endDate": "2021-01-01",
        "sortOrder": "asc",
        "limit": 100,
        "offset": 5,
        "frequency": "q",
        "aggregationMethod": "avg",
        "outputType": 2,
        "vintageDates": ["2020-06-01", "2020-07-01"],
    })
    assert build_series_query(args) == [
        ("series_id", "UNRATE"),
        ("observation_start", "2020-01-01"),
        ("observation_end", "2021-01-01"),
        ("sort_order", "asc"),
        ("limit", "100"),
        ("offset", "5"),
        ("frequency", "q"),
        ("aggregation_method", "avg"),
        ("output_type", "2"),
        ("vintage_dates", "2020-06-01,2020-07-01"),
    ]


def test_zero_is_present_not_omitted():
    args = SeriesArguments.from_arguments({"seriesId": "GDP", "limit": 0, "offset": 0})
    assert build_series_query(args) == [
        ("series_id", "GDP"),
        ("limit", "0"),
        ("offset", "0"),
    ]


def test_empty_exclude_list_is_present():
    args = SearchArguments.from_arguments({"searchText": "x", "excludeTagNames": []})
    assert build_search_query(args) == [("search_text", "x"), ("exclude_tag_names", "")]


# ============================================================================
# Handlers
# ============================================================================

@pytest.mark.asyncio
async def test_search_handler_projects_seriess(fred_client, fake_fred):
    fake_fred.json_body = {"count": 1, "seriess": [{"id": "GDP"}]}
    search = build_registry(fred_client)[0]

    assert await search.handler({"searchText": "GDP"}) == [{"id": "GDP"}]
    assert fake_fred.last_request.url.path == "/fred/series/search"


@pytest.mark.asyncio
async def test_series_handler_projects_observations(fred_client, fake_fred):
    observations = [{"date": "2024-01-01", "value": "3.7"}]
    fake_fred.json_body = {"units": "lin", "observations": observations}
    series = build_registry(fred_client)[1]

    assert await series.handler({"seriesId": "UNRATE"}) == observations
    assert fake_fred.last_request.url.path == "/fred/series/observations"
    assert fake_fred.last_params[0] == ("series_id", "UNRATE")


@pytest.mark.asyncio
async def test_series_handler_missing_field_is_none(fred_client, fake_fred):
    fake_fred.json_body = {}
    series = build_registry(fred_client)[1]
    assert await series.handler({"seriesId": "UNRATE"}) is None
