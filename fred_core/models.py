# =============================================================================
# fred_core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Three groups of dataclasses live here:
#
#   1. ToolDescriptor — the static record for one tool: its name, its
#      description, its JSON schema, and the async handler that runs it.
#
#   2. SearchArguments / SeriesArguments — the explicit shape of each tool's
#      arguments.  The caller sends an untyped JSON object; from_arguments()
#      checks it BEFORE any query is built.  Only the shape is checked.
#      Enum values pass through untouched because FRED validates them itself.
#
#   3. TextContent / ToolResponse — the envelope every tool call returns,
#      success or failure.
#
# All of them are frozen: once the registry is built at startup nothing in
# it changes, and nothing carries state from one call to the next.
# =============================================================================

import copy
import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from fred_core.errors import InvalidArgumentsError

Number = Union[int, float]
ToolHandler = Callable[[Mapping[str, Any]], Awaitable[Any]]


# -----------------------------------------------------------------------------
# ToolDescriptor
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """One entry in the tool registry: the contract plus the handler."""

    name: str                              # Stable identifier ("search", "series")
    description: str                       # Read by the LLM to pick the tool
    input_schema: dict[str, Any]           # JSON schema, compatibility surface
    handler: ToolHandler = field(repr=False, compare=False)

    def to_listing(self) -> dict[str, Any]:
        """The public view of the tool: everything except the handler."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


# -----------------------------------------------------------------------------
# Argument validation helpers
# -----------------------------------------------------------------------------
# JSON null and a missing key mean the same thing: leave the parameter out.
# -----------------------------------------------------------------------------
def _required_string(arguments: Mapping[str, Any], key: str) -> str:
    value = arguments.get(key)
    if value is None:
        raise InvalidArgumentsError(f"Missing required argument: {key}")
    if not isinstance(value, str):
        raise InvalidArgumentsError(f"Argument '{key}' must be a string")
    return value


def _optional_string(arguments: Mapping[str, Any], key: str) -> Optional[str]:
    value = arguments.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidArgumentsError(f"Argument '{key}' must be a string")
    return value


def _optional_number(arguments: Mapping[str, Any], key: str) -> Optional[Number]:
    value = arguments.get(key)
    # bool is an int subclass; True is not a limit.
    if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
        raise InvalidArgumentsError(f"Argument '{key}' must be a number")
    return value


def _optional_string_list(arguments: Mapping[str, Any], key: str) -> Optional[tuple[str, ...]]:
    value = arguments.get(key)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise InvalidArgumentsError(f"Argument '{key}' must be an array of strings")
    return tuple(str(item) for item in value)


# -----------------------------------------------------------------------------
# SearchArguments — arguments of the "search" tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchArguments:
    """Validated arguments for a FRED series search."""

    search_text: str
    limit: Optional[Number] = None
    order_by: Optional[str] = None
    sort_order: Optional[str] = None
    filter_variable: Optional[str] = None
    filter_value: Optional[str] = None
    tag_names: Optional[tuple[str, ...]] = None
    exclude_tag_names: Optional[tuple[str, ...]] = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> "SearchArguments":
        return cls(
            search_text=_required_string(arguments, "searchText"),
            limit=_optional_number(arguments, "limit"),
            order_by=_optional_string(arguments, "orderBy"),
            sort_order=_optional_string(arguments, "sortOrder"),
            filter_variable=_optional_string(arguments, "filterVariable"),
            filter_value=_optional_string(arguments, "filterValue"),
            tag_names=_optional_string_list(arguments, "tagNames"),
            exclude_tag_names=_optional_string_list(arguments, "excludeTagNames"),
        )


# -----------------------------------------------------------------------------
# SeriesArguments — arguments of the "series" tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SeriesArguments:
    """Validated arguments for a FRED series observations request."""

    series_id: str
    start_date: Optional[str] = None       # YYYY-MM-DD
    end_date: Optional[str] = None         # YYYY-MM-DD
    sort_order: Optional[str] = None
    limit: Optional[Number] = None
    offset: Optional[Number] = None
    frequency: Optional[str] = None
    aggregation_method: Optional[str] = None
    output_type: Optional[Number] = None
    vintage_dates: Optional[tuple[str, ...]] = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> "SeriesArguments":
        return cls(
            series_id=_required_string(arguments, "seriesId"),
            start_date=_optional_string(arguments, "startDate"),
            end_date=_optional_string(arguments, "endDate"),
            sort_order=_optional_string(arguments, "sortOrder"),
            limit=_optional_number(arguments, "limit"),
            offset=_optional_number(arguments, "offset"),
            frequency=_optional_string(arguments, "frequency"),
            aggregation_method=_optional_string(arguments, "aggregationMethod"),
            output_type=_optional_number(arguments, "outputType"),
            vintage_dates=_optional_string_list(arguments, "vintageDates"),
        )


# -----------------------------------------------------------------------------
# TextContent / ToolResponse — the envelope
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextContent:
    """A single text block inside a tool response."""

    text: str
    type: str = "text"

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResponse:
    """The uniform result of a tool call.

    Failures are ordinary values here, not exceptions: the caller always
    gets a ToolResponse back and checks is_error.
    """

    content: tuple[TextContent, ...]
    is_error: bool = False

    @classmethod
    def success(cls, value: Any) -> "ToolResponse":
        # None (a missing upstream field) serializes as "null", never "[]".
        text = json.dumps(value, indent=2, ensure_ascii=False)
        return cls(content=(TextContent(text),))

    @classmethod
    def failure(cls, message: str) -> "ToolResponse":
        return cls(content=(TextContent(message),), is_error=True)

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"content": [block.to_dict() for block in self.content]}
        if self.is_error:
            result["isError"] = True
        return result
