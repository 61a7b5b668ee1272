# =============================================================================
# core/errors.py  -  Tool Registry Exceptions
# =============================================================================
#
# These signal wiring mistakes: a tool registered twice, a call to a tool
# that does not exist, arguments that do not fit a tool's input model.
#
# Tool-level failures such as an unknown country or a weather API outage are
# never raised.  They come back as tool results.
# =============================================================================


class ToolRegistryError(Exception):
    """Base exception for tool registry errors."""


class DuplicateToolError(ToolRegistryError):
    """Raised when a tool name is registered a second time.

    Attributes:
        tool_name: The name that was already taken.
    """

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Tool '{tool_name}' is already registered")


class UnknownToolError(ToolRegistryError):
    """Raised when dispatching to a name with no registered tool.

    Attributes:
        tool_name: The requested name.
        available: Names that are registered, in registration order.
    """

    def __init__(self, tool_name: str, available: list[str]) -> None:
        self.tool_name = tool_name
        self.available = available
        super().__init__(
            f"Unknown tool '{tool_name}' (available: {', '.join(available) or 'none'})"
        )


class InvalidToolArgumentsError(ToolRegistryError):
    """Raised when call arguments fail to decode or validate.

    Attributes:
        tool_name: The tool being called.
        original: The underlying decode or validation exception.
    """

    def __init__(self, tool_name: str, original: Exception) -> None:
        self.tool_name = tool_name
        self.original = original
        super().__init__(f"Invalid arguments for tool '{tool_name}': {original}")
