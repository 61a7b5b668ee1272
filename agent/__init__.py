# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
#   capital_agent.py  create_agent(): model + instruction + tools
#   prompt.py         the agent's description and instruction
#
# ADK's own launchers (`adk run agent`, `adk web .`) look for a module-level
# `root_agent`.  It is built on first access, so importing this package
# does not read the environment or construct a model.
# =============================================================================


def __getattr__(name):
    if name == "root_agent":
        from agent.capital_agent import create_agent

        root_agent = create_agent()
        globals()["root_agent"] = root_agent
        return root_agent
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
