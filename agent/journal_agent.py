# =============================================================================
# agent/journal_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that keeps the user's travel journal.
#
#   ┌──────────────────────────────────────────────────────────────────┐
#   │                       Google ADK Agent                           │
#   │   System prompt ──▶ LLM (via LiteLlm) ──▶ MCPToolset (stdio)     │
#   └──────────────────────────────────────────────────────────────────┘
#                                                      │
#                                                      ▼
#                                          ┌─────────────────────┐
#                                          │  FastMCP Server     │
#                                          │  (tools/mcp_server) │
#                                          └─────────────────────┘
#                                                      │
#                                                      ▼
#                                          ┌─────────────────────┐
#                                          │  core/ TravelStore  │
#                                          │  + autosave file    │
#                                          └─────────────────────┘
#
# CONFIGURATION (environment, usually via .env):
#   TRAVEL_TRACKER_MODEL        LiteLlm model string
#                               (default "openrouter/openai/gpt-4o")
#   OPENROUTER_API_KEY          read by LiteLlm for openrouter/* models
#   TRAVEL_TRACKER_MCP_COMMAND  launcher for the tool server (default "uv")
#   TRAVEL_TRACKER_DATA_PATH    passed through to the tool server
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess and talks to it over
#   stdin/stdout.  The server is started as a module from the project root
#   so that `core` is importable.
# =============================================================================

import os
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_travel_journal_prompt

MODEL_ENV = "TRAVEL_TRACKER_MODEL"
MCP_COMMAND_ENV = "TRAVEL_TRACKER_MCP_COMMAND"
DEFAULT_MODEL = "openrouter/openai/gpt-4o"
DEFAULT_MCP_COMMAND = "uv"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def mcp_server_params(command: Optional[str] = None) -> StdioServerParameters:
    """How ADK launches tools/mcp_server.py.

    With "uv" the server runs as `uv run python -m tools.mcp_server` so it
    uses the project's .venv; any other command is treated as a Python
    interpreter and run as `<command> -m tools.mcp_server`.
    """
    command = command or os.environ.get(MCP_COMMAND_ENV) or DEFAULT_MCP_COMMAND
    if os.path.basename(command) == "uv":
        args = ["run", "python", "-m", "tools.mcp_server"]
    else:
        args = ["-m", "tools.mcp_server"]
    return StdioServerParameters(command=command, args=args, cwd=PROJECT_ROOT)


def create_agent(model: Optional[str] = None) -> Agent:
    """Create the travel journal agent.

    Args:
        model: LiteLlm model string; defaults to TRAVEL_TRACKER_MODEL or
               "openrouter/openai/gpt-4o".

    Returns:
        A configured Google ADK Agent instance.
    """
    model = model or os.environ.get(MODEL_ENV) or DEFAULT_MODEL

    mcp_tools = MCPToolset(connection_params=mcp_server_params())

    return Agent(
        name="travel_journal",
        model=LiteLlm(model=model),
        instruction=get_travel_journal_prompt(),
        tools=[mcp_tools],
    )
