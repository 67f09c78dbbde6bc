# =============================================================================
# fred_core/config.py  —  Startup Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the server's settings ONCE, at process start, into a frozen
#   Settings object.  After that nothing re-reads os.environ: the API key
#   is passed by reference into the FredClient, and the handlers only
#   ever see the client.
#
# VARIABLES:
#   FRED_API_KEY       (required)  Your key from fred.stlouisfed.org
#   FRED_API_BASE_URL  (optional)  Override the API root (e.g. a proxy)
#   FRED_LOG_LEVEL     (optional)  DEBUG / INFO / WARNING ... (default INFO)
#
#   A .env file in the working directory is honoured via python-dotenv,
#   the same way the demo agent picks up OPENROUTER_API_KEY.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from fred_core.errors import ConfigurationError

FRED_API_BASE = "https://api.stlouisfed.org/fred"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, fixed at startup."""

    api_key: str
    base_url: str = FRED_API_BASE
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Explicit variables to read instead of os.environ.  When
            given, no .env file is loaded (tests pass a plain dict).

    Raises:
        ConfigurationError: FRED_API_KEY is missing or blank.  This is
            fatal: the server must not start without a key.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = (environ.get("FRED_API_KEY") or "").strip()
    if not api_key:
        raise ConfigurationError("FRED_API_KEY environment variable is required")

    base_url = (environ.get("FRED_API_BASE_URL") or "").strip().rstrip("/") or FRED_API_BASE
    log_level = (environ.get("FRED_LOG_LEVEL") or "").strip().upper() or "INFO"

    return Settings(api_key=api_key, base_url=base_url, log_level=log_level)
