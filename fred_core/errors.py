# =============================================================================
# fred_core/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every failure the server knows about is a FredError.  Handlers RAISE these;
# the dispatcher (fred_tools/dispatcher.py) is the single place that turns
# them into a failure envelope for the caller.  The one exception is
# ConfigurationError, which is raised before the server starts and stops it.
# =============================================================================


class FredError(Exception):
    """Base class for all FRED server errors."""


class ConfigurationError(FredError):
    """A required startup setting (the API key) is missing."""


class UnknownToolError(FredError):
    """The requested tool name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(FredError):
    """Tool arguments have the wrong shape (missing required field, bad type)."""


class UpstreamError(FredError):
    """FRED answered with a non-success HTTP status.

    str() is the status text alone (e.g. "Internal Server Error"); the
    dispatcher adds the "FRED API error: " prefix.
    """

    def __init__(self, status_code: int, status_text: str) -> None:
        super().__init__(status_text)
        self.status_code = status_code
        self.status_text = status_text


class TransportError(FredError):
    """FRED could not be reached (DNS, refused connection, timeout)."""
