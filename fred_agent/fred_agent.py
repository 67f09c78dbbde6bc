# =============================================================================
# fred_agent/fred_agent.py  —  Google ADK Agent wired to the FRED MCP server
# =============================================================================
#
# MCP CONNECTION:
#   The agent starts the FRED server as a subprocess and talks to it over
#   stdin/stdout.  ADK lists the server's tools at startup and offers them
#   to the model with their JSON schemas unchanged.
#
#   The subprocess only inherits a minimal environment (PATH, HOME, ...)
#   from the MCP SDK, so the FRED_* variables are forwarded explicitly.
#
# MODEL:
#   Any LiteLLM model string works.  The default routes GPT-4o through
#   OpenRouter (needs OPENROUTER_API_KEY); override with FRED_AGENT_MODEL.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from fred_agent.prompt import get_fred_analyst_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"
_FORWARDED_ENV = ("FRED_API_KEY", "FRED_API_BASE_URL", "FRED_LOG_LEVEL")


def build_server_params() -> StdioServerParameters:
    """How to launch the FRED server: `uv run python -m fred_tools.mcp_server`.

    uv makes the subprocess use the project's .venv, so fastmcp and httpx
    are importable even when the agent itself was started differently.
    """
    env = {key: os.environ[key] for key in _FORWARDED_ENV if os.environ.get(key)}
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "fred_tools.mcp_server"],
        env=env,
    )


def create_agent() -> Agent:
    """Create the FRED data assistant agent."""
    return Agent(
        name="fred_data_assistant",
        model=LiteLlm(model=os.environ.get("FRED_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_fred_analyst_prompt(),
        tools=[MCPToolset(connection_params=build_server_params())],
    )
