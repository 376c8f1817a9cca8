"""Tool catalog: parameter specs, tool definitions and the name-keyed registry.

Each ``ToolDefinition`` is the single source of truth for a tool: the JSON schema
published by ``tools/list`` is derived from its ``ParameterSpec`` tuple, and the
dispatcher validates incoming arguments against the same tuple.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from wcc_mcp.errors import DuplicateToolError, UnknownToolError

if TYPE_CHECKING:
    from wcc_mcp.client.webcenter import WebCenterContentClient

PARAMETER_TYPES = ("string", "number", "boolean", "object")


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()

ToolHandler = Callable[["WebCenterContentClient", dict[str, Any]], Any]


@dataclass(frozen=True)
class ParameterSpec:
    """One field of a tool's parameter object."""

    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    default: Any = NO_DEFAULT

    def __post_init__(self) -> None:
        if self.type not in PARAMETER_TYPES:
            raise ValueError(f"Unsupported parameter type for {self.name}: {self.type}")

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.has_default:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True)
class ToolDefinition:
    """A named remote operation with its parameter schema and handler."""

    name: str
    description: str
    handler: ToolHandler = field(compare=False, repr=False)
    parameters: tuple[ParameterSpec, ...] = ()
    title: str | None = None
    read_only: bool = True
    destructive: bool = False
    idempotent: bool = True

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for param in self.parameters:
            if param.name in seen:
                raise ValueError(f"Duplicate parameter {param.name} in tool {self.name}")
            seen.add(param.name)

    @property
    def required_fields(self) -> list[str]:
        return [param.name for param in self.parameters if param.required]

    def input_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {param.name: param.to_schema() for param in self.parameters},
        }
        required = self.required_fields
        if required:
            schema["required"] = required
        return schema

    def annotations(self) -> dict[str, Any]:
        return {
            "title": self.title or self.name,
            "readOnlyHint": self.read_only,
            "destructiveHint": self.destructive,
            "idempotentHint": self.idempotent,
            "openWorldHint": True,
        }

    def to_wire(self) -> dict[str, Any]:
        """Dictionary shape published by ``tools/list``."""
        return {
            "name": self.name,
            "title": self.title or self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
            "annotations": self.annotations(),
        }


class ToolRegistry:
    """Immutable-after-startup catalog of tool definitions, in registration order."""

    def __init__(self, definitions: Iterable[ToolDefinition] = ()) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ToolDefinition) -> None:
        if definition.name in self._tools:
            raise DuplicateToolError(definition.name)
        self._tools[definition.name] = definition

    def list_tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def get_schema(self, name: str) -> tuple[ParameterSpec, ...]:
        definition = self._tools.get(name)
        if definition is None:
            raise UnknownToolError(name)
        return definition.parameters

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
