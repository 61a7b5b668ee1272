# =============================================================================
# main.py  -  Entry Point for the Capital Agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads .env and reads the settings (core/config.py)
#   2. Builds the tool registry and the Google ADK agent
#   3. Sets up an interactive session
#   4. Sends each question to the agent and streams its response,
#      printing every tool call as it happens
#
# Any configuration problem (bad setting, missing API key, duplicate tool
# name) is reported here and the program exits with status 1 before the
# first question is asked.
#
# GOOGLE ADK CONCEPTS USED:
#   - Runner: Manages the agent's execution lifecycle
#   - SessionService: Tracks conversation state across turns
#   - Content/Part: ADK's message format
#   - Event stream: Real-time updates as the agent thinks and acts
# =============================================================================

import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables from .env (GOOGLE_API_KEY, etc.) before anything
# reads them.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.capital_agent import AGENT_NAME, create_agent
from core.catalog import build_registry
from core.config import AgentSettings, WeatherSettings
from core.errors import ToolRegistryError
from tools.functions import configure

logger = logging.getLogger("capital_agent")

USER_ID = "demo_user"


def _check_api_key(settings: AgentSettings) -> None:
    """Fail early when the native Gemini model has no credentials."""
    if settings.uses_litellm:
        return
    if os.environ.get("GOOGLE_GENAI_USE_VERTEXAI", "").lower() in ("1", "true"):
        return
    if not os.environ.get("GOOGLE_API_KEY"):
        raise ValueError(
            f"GOOGLE_API_KEY is not set; it is required for model {settings.model!r}"
        )


def bootstrap():
    """Read settings, install the tool registry, and build the agent."""
    agent_settings = AgentSettings.from_env()
    logging.basicConfig(
        level=agent_settings.log_level,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    _check_api_key(agent_settings)

    configure(build_registry(WeatherSettings.from_env()))
    agent = create_agent(agent_settings)
    logger.info(
        "Agent %s ready (model=%s, tools=%s)",
        agent.name, agent_settings.model, agent_settings.tool_transport,
    )
    return agent


async def run_agent(agent) -> None:
    """Run the capital agent interactively until the user quits."""

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=AGENT_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=AGENT_NAME,
        user_id=USER_ID,
    )

    print("=" * 70)
    print("  CAPITAL AGENT")
    print("  Capitals, populations and current temperatures")
    print("=" * 70)
    print("\n💬 Ask about France, Japan, Canada or Portugal.")
    print("   (Type 'quit' to exit)\n")

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")
                    if getattr(part, "text", None):
                        final_response = part.text

        if final_response:
            print(f"\n🤖 Agent: {final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")


def main() -> int:
    try:
        agent = bootstrap()
    except (ValueError, ToolRegistryError) as e:
        logging.basicConfig(stream=sys.stderr)
        logger.error("Startup failed: %s", e)
        return 1

    asyncio.run(run_agent(agent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
