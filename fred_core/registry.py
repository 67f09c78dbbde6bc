# =============================================================================
# fred_core/registry.py  —  The Tool Registry
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the two FRED tools.  For each one it provides:
#     1. a JSON schema (what the agent may send)
#     2. a pure query builder (arguments → ordered query parameters)
#     3. an async handler (one GET, then one field of the response)
#
# COMPATIBILITY SURFACE:
#   Tool names, schema property names and enum values are what MCP clients
#   (and the prompts written against them) depend on.  They must stay
#   exactly as they are: camelCase properties, "search" and "series".
#
# OMISSION RULE:
#   An argument that is absent (or null) is left out of the query entirely,
#   so FRED's own defaults apply.  Anything else is sent, including 0 and
#   an empty tag list (which becomes "tag_names=").
#
# PASSTHROUGH RULE:
#   The handler returns body.get("seriess") / body.get("observations") as-is.
#   If FRED ever omits the field, the tool returns None, not a synthetic [].
# =============================================================================

from typing import Any, Mapping, Optional, Sequence

from fred_core.fred_client import FredClient, QueryParameters
from fred_core.models import Number, SearchArguments, SeriesArguments, ToolDescriptor

SEARCH_ORDER_BY = [
    "searchrank", "series_id", "title", "units", "frequency", "seasonal_adjustment",
    "realtime_start", "realtime_end", "last_updated", "observation_start",
    "observation_end", "popularity",
]
SORT_ORDERS = ["asc", "desc"]
FREQUENCIES = ["d", "w", "bw", "m", "q", "sa", "a"]
AGGREGATION_METHODS = ["avg", "sum", "eop"]
OUTPUT_TYPES = [1, 2, 3, 4]


# =============================================================================
# Schemas
# =============================================================================
SEARCH_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "searchText": {"type": "string", "description": "Search text for FRED series"},
        "limit": {"type": "number", "description": "Maximum number of results to return (default: 1000)"},
        "orderBy": {
            "type": "string",
            "enum": SEARCH_ORDER_BY,
            "description": "Order results by this property",
        },
        "sortOrder": {
            "type": "string",
            "enum": SORT_ORDERS,
            "description": "Sort order (default: asc)",
        },
        "filterVariable": {"type": "string", "description": "Variable to filter results by"},
        "filterValue": {"type": "string", "description": "Value of filter variable"},
        "tagNames": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Series tags to include",
        },
        "excludeTagNames": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Series tags to exclude",
        },
    },
    "required": ["searchText"],
}

SERIES_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "seriesId": {"type": "string", "description": "FRED series ID"},
        "startDate": {"type": "string", "description": "Start date in YYYY-MM-DD format"},
        "endDate": {"type": "string", "description": "End date in YYYY-MM-DD format"},
        "sortOrder": {
            "type": "string",
            "enum": SORT_ORDERS,
            "description": "Sort order (default: asc)",
        },
        "limit": {"type": "number", "description": "Maximum number of results to return"},
        "offset": {"type": "number", "description": "Number of results to skip"},
        "frequency": {
            "type": "string",
            "enum": FREQUENCIES,
            "description": (
                "Frequency of observations (d=daily, w=weekly, bw=biweekly, m=monthly, "
                "q=quarterly, sa=semiannual, a=annual)"
            ),
        },
        "aggregationMethod": {
            "type": "string",
            "enum": AGGREGATION_METHODS,
            "description": (
                "Aggregation method for frequency conversion "
                "(avg=average, sum=sum, eop=end of period)"
            ),
        },
        "outputType": {
            "type": "number",
            "enum": OUTPUT_TYPES,
            "description": (
                "1=observations by real-time period, 2=observations by vintage date, "
                "3=vintage dates, 4=initial release plus current value"
            ),
        },
        "vintageDates": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Vintage dates in YYYY-MM-DD format",
        },
    },
    "required": ["seriesId"],
}


# =============================================================================
# Query building
# =============================================================================
def format_number(value: Number) -> str:
    """Decimal string for a numeric argument; 10.0 is sent as "10"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _append(params: QueryParameters, key: str, value: Optional[str]) -> None:
    if value is not None:
        params.append((key, value))


def _append_number(params: QueryParameters, key: str, value: Optional[Number]) -> None:
    if value is not None:
        params.append((key, format_number(value)))


def _append_joined(
    params: QueryParameters, key: str, values: Optional[Sequence[str]], separator: str
) -> None:
    # An empty list is still "present": it is sent as an empty value.
    if values is not None:
        params.append((key, separator.join(values)))


def build_search_query(args: SearchArguments) -> QueryParameters:
    """Query parameters for /series/search, in a stable order."""
    params: QueryParameters = [("search_text", args.search_text)]
    _append_number(params, "limit", args.limit)
    _append(params, "order_by", args.order_by)
    _append(params, "sort_order", args.sort_order)
    _append(params, "filter_variable", args.filter_variable)
    _append(params, "filter_value", args.filter_value)
    _append_joined(params, "tag_names", args.tag_names, ";")
    _append_joined(params, "exclude_tag_names", args.exclude_tag_names, ";")
    return params


def build_series_query(args: SeriesArguments) -> QueryParameters:
    """Query parameters for /series/observations, in a stable order."""
    params: QueryParameters = [("series_id", args.series_id)]
    _append(params, "observation_start", args.start_date)
    _append(params, "observation_end", args.end_date)
    _append(params, "sort_order", args.sort_order)
    _append_number(params, "limit", args.limit)
    _append_number(params, "offset", args.offset)
    _append(params, "frequency", args.frequency)
    _append(params, "aggregation_method", args.aggregation_method)
    _append_number(params, "output_type", args.output_type)
    _append_joined(params, "vintage_dates", args.vintage_dates, ",")
    return params


# =============================================================================
# Registry construction
# =============================================================================
def build_registry(client: FredClient) -> tuple[ToolDescriptor, ...]:
    """Create the ordered, immutable set of FRED tools bound to `client`.

    Called once at startup.  The client carries the API key, so the handlers
    never look at the environment themselves.
    """

    async def search(arguments: Mapping[str, Any]) -> Any:
        args = SearchArguments.from_arguments(arguments)
        body = await client.get_json("series/search", build_search_query(args))
        return body.get("seriess")

    async def series(arguments: Mapping[str, Any]) -> Any:
        args = SeriesArguments.from_arguments(arguments)
        body = await client.get_json("series/observations", build_series_query(args))
        return body.get("observations")

    return (
        ToolDescriptor(
            name="search",
            description="Search for FRED data series with advanced filtering options",
            input_schema=SEARCH_SCHEMA,
            handler=search,
        ),
        ToolDescriptor(
            name="series",
            description="Get observations for a specific FRED data series with advanced options",
            input_schema=SERIES_SCHEMA,
            handler=series,
        ),
    )
