# =============================================================================
# agent/capital_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent that answers capital, population, and temperature
#   questions.  The agent has no lookup logic of its own; it has:
#     - a model (Gemini by default, or any LiteLLM model string)
#     - an instruction (agent/prompt.py)
#     - the four tools (tools/functions.py)
#
# TOOL TRANSPORT (CAPITAL_AGENT_TOOL_TRANSPORT):
#   inprocess (default)
#       The tool functions are handed to ADK directly.  ADK reads their
#       signatures and docstrings to build the declarations the model sees.
#   mcp
#       ADK starts tools/mcp_server.py as a subprocess and discovers the
#       same tools over MCP (stdio transport).
#
# MODEL CHOICE (CAPITAL_AGENT_MODEL):
#   "gemini-2.5-flash"            -> native Gemini, needs GOOGLE_API_KEY
#   "openrouter/openai/gpt-4o"    -> LiteLlm, reads the provider's key
#                                    (OPENROUTER_API_KEY) from the environment
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import AGENT_DESCRIPTION, AGENT_INSTRUCTION
from core.config import AgentSettings
from tools.functions import TOOL_FUNCTIONS

AGENT_NAME = "capital_agent"


def create_agent(settings: Optional[AgentSettings] = None) -> Agent:
    """Create and configure the capital agent.

    Args:
        settings: Model and transport choice; read from the environment
            when omitted.

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = settings or AgentSettings.from_env()

    model = LiteLlm(model=settings.model) if settings.uses_litellm else settings.model

    return Agent(
        name=AGENT_NAME,
        model=model,
        description=AGENT_DESCRIPTION,
        instruction=AGENT_INSTRUCTION,
        tools=_build_tools(settings),
    )


def _build_tools(settings: AgentSettings) -> list:
    if settings.tool_transport == "mcp":
        # Run the server with this interpreter from the project root so it
        # sees the same environment and can import core/ and tools/.
        project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        return [
            MCPToolset(
                connection_params=StdioServerParameters(
                    command=sys.executable,
                    args=["-m", "tools.mcp_server"],
                    cwd=project_root,
                ),
            )
        ]
    return list(TOOL_FUNCTIONS)
