from __future__ import annotations

import pytest

from agent.capital_agent import AGENT_NAME, create_agent
from agent.prompt import AGENT_DESCRIPTION, AGENT_INSTRUCTION
from core.config import AgentSettings
from tools.functions import TOOL_FUNCTIONS


def test_create_agent_in_process_tools() -> None:
    agent = create_agent(AgentSettings())

    assert agent.name == AGENT_NAME == "capital_agent"
    assert agent.model == "gemini-2.5-flash"
    assert agent.description == AGENT_DESCRIPTION
    assert agent.instruction == AGENT_INSTRUCTION
    assert list(agent.tools) == TOOL_FUNCTIONS


def test_create_agent_with_litellm_model() -> None:
    from google.adk.models.lite_llm import LiteLlm

    agent = create_agent(AgentSettings(model="openrouter/openai/gpt-4o"))

    assert isinstance(agent.model, LiteLlm)
    assert agent.model.model == "openrouter/openai/gpt-4o"


def test_create_agent_with_mcp_transport() -> None:
    from google.adk.tools.mcp_tool import MCPToolset

    agent = create_agent(AgentSettings(tool_transport="mcp"))

    assert len(agent.tools) == 1
    assert isinstance(agent.tools[0], MCPToolset)


def test_create_agent_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAPITAL_AGENT_MODEL", "gemini-2.0-flash")

    assert create_agent().model == "gemini-2.0-flash"


def test_instruction_mentions_every_tool() -> None:
    for fn in TOOL_FUNCTIONS:
        assert fn.__name__ in AGENT_INSTRUCTION
