# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the capital agent: the
# knowledge tables, the lookup and weather tools, and the tool registry.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  The only outbound call is the weather tool's HTTP GET, and
#   that goes through an opener the caller can replace.
# =============================================================================
