# =============================================================================
# core/registry.py  -  Tool Registry & Dispatch
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Keeps the name -> tool mapping the agent runtime works from.  A tool is
#   described by a ToolDescriptor:
#
#     name          unique identifier the model calls ("get_capital_city")
#     description   what the model reads to decide WHEN to call it
#     input_model   pydantic model describing the arguments
#     handler       the plain Python function that does the work
#
# THE DISPATCH PATH:
#   dispatch(name, raw_args)
#     1. find the descriptor           -> UnknownToolError if missing
#     2. decode raw_args (dict or JSON) and validate against input_model
#                                      -> InvalidToolArgumentsError if bad
#     3. call handler(**validated_fields) and return its result untouched
#
#   The registry has no retry or timeout policy of its own.  Once the
#   catalog is built nothing registers further tools, so concurrent
#   dispatches only ever read from it.
# =============================================================================

import json
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Union

from pydantic import BaseModel, ValidationError

from core.errors import DuplicateToolError, InvalidToolArgumentsError, UnknownToolError
from core.models import ToolResult


RawArgs = Union[Mapping[str, Any], str, bytes, None]


@dataclass(frozen=True)
class ToolDescriptor:
    """Everything the agent runtime needs to advertise and call one tool."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[..., ToolResult]

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool's arguments, generated from input_model."""
        return self.input_model.model_json_schema()

    def to_schema(self) -> dict[str, Any]:
        """The {name, description, input_schema} dict sent to the model."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


class ToolRegistry:
    """Ordered, name-keyed collection of ToolDescriptors."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> ToolDescriptor:
        """Add a tool.

        Raises:
            DuplicateToolError: If a tool with the same name exists.
        """
        if descriptor.name in self._tools:
            raise DuplicateToolError(descriptor.name)
        self._tools[descriptor.name] = descriptor
        return descriptor

    def get(self, name: str) -> ToolDescriptor:
        """Look a tool up by name.

        Raises:
            UnknownToolError: If no tool has that name.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name, self.names()) from None

    def dispatch(self, name: str, raw_args: RawArgs = None) -> ToolResult:
        """Validate raw_args for the named tool and invoke its handler.

        Args:
            name: Tool name as issued by the model.
            raw_args: Arguments as a mapping, a JSON object string, or None
                for tools that take no arguments.

        Returns:
            The handler's result, unchanged.

        Raises:
            UnknownToolError: If the tool is not registered.
            InvalidToolArgumentsError: If raw_args cannot be decoded or fail
                validation against the tool's input model.
        """
        descriptor = self.get(name)
        args = _decode(descriptor.name, raw_args)

        try:
            validated = descriptor.input_model.model_validate(args)
        except ValidationError as e:
            raise InvalidToolArgumentsError(descriptor.name, e) from e

        return descriptor.handler(**validated.model_dump())

    def names(self) -> list[str]:
        return list(self._tools)

    def schemas(self) -> list[dict[str, Any]]:
        """Tool schemas in registration order, ready to advertise to a model."""
        return [d.to_schema() for d in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolRegistry({', '.join(self._tools)})"


def _decode(tool_name: str, raw_args: RawArgs) -> dict[str, Any]:
    if raw_args is None:
        return {}
    if isinstance(raw_args, (str, bytes)):
        if not raw_args.strip():
            return {}
        try:
            decoded = json.loads(raw_args)
        except ValueError as e:
            raise InvalidToolArgumentsError(tool_name, e) from e
        if not isinstance(decoded, dict):
            raise InvalidToolArgumentsError(
                tool_name, TypeError(f"expected a JSON object, got {type(decoded).__name__}")
            )
        return decoded
    if isinstance(raw_args, Mapping):
        return dict(raw_args)
    raise InvalidToolArgumentsError(
        tool_name, TypeError(f"expected a mapping or JSON string, got {type(raw_args).__name__}")
    )
