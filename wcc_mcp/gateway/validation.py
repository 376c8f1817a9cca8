"""Argument validation for tool invocations."""

from __future__ import annotations

import copy
import math
from collections.abc import Mapping
from typing import Any

from wcc_mcp.errors import InvalidArgumentError, MissingArgumentError
from wcc_mcp.gateway.registry import ParameterSpec, ToolDefinition


def _check_type(param: ParameterSpec, value: Any) -> Any:
    if param.type == "string":
        if not isinstance(value, str):
            raise InvalidArgumentError(param.name, "expected string")
        return value
    if param.type == "number":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArgumentError(param.name, "expected number")
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidArgumentError(param.name, "expected number")
        # JSON clients often send 10.0 for 10; keep query strings clean
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value
    if param.type == "boolean":
        if not isinstance(value, bool):
            raise InvalidArgumentError(param.name, "expected boolean")
        return value
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(param.name, "expected object")
    return dict(value)


def bind_arguments(definition: ToolDefinition, arguments: Any) -> dict[str, Any]:
    """Validate ``arguments`` against the tool's parameters and apply defaults.

    Fails fast: the first missing required field (in declaration order) or the
    first ill-typed value raises. ``None`` counts as absent. Unknown keys are
    dropped. Optional fields without a default are bound to ``None``.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentError("arguments", "expected object")

    bound: dict[str, Any] = {}
    for param in definition.parameters:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                raise MissingArgumentError(param.name)
            bound[param.name] = copy.deepcopy(param.default) if param.has_default else None
            continue
        bound[param.name] = _check_type(param, value)
    return bound
