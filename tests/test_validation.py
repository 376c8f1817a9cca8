"""Tests for argument binding against parameter specs."""

import pytest

from wcc_mcp.errors import InvalidArgumentError, MissingArgumentError
from wcc_mcp.gateway.registry import ParameterSpec, ToolDefinition
from wcc_mcp.gateway.validation import bind_arguments


def _tool(*parameters: ParameterSpec) -> ToolDefinition:
    return ToolDefinition("t", "test tool", lambda client, args: args, parameters=parameters)


class TestBindArguments:
    def test_defaults_applied_for_absent_fields(self) -> None:
        tool = _tool(
            ParameterSpec("query", "string", required=True),
            ParameterSpec("limit", "number", default=10),
            ParameterSpec("orderBy", "string"),
        )
        assert bind_arguments(tool, {"query": "*"}) == {
            "query": "*",
            "limit": 10,
            "orderBy": None,
        }

    def test_null_optional_gets_default(self) -> None:
        tool = _tool(ParameterSpec("limit", "number", default=20))
        assert bind_arguments(tool, {"limit": None}) == {"limit": 20}

    def test_none_arguments_treated_as_empty(self) -> None:
        tool = _tool(ParameterSpec("limit", "number", default=20))
        assert bind_arguments(tool, None) == {"limit": 20}

    def test_first_missing_required_raises(self) -> None:
        tool = _tool(
            ParameterSpec("a", required=True),
            ParameterSpec("b", required=True),
        )
        with pytest.raises(MissingArgumentError) as excinfo:
            bind_arguments(tool, {})
        assert excinfo.value.field_name == "a"
        assert excinfo.value.code == "MISSING_ARGUMENT"

    def test_integral_float_normalized(self) -> None:
        tool = _tool(ParameterSpec("limit", "number"))
        bound = bind_arguments(tool, {"limit": 10.0})
        assert bound["limit"] == 10
        assert isinstance(bound["limit"], int)

    def test_fractional_float_kept(self) -> None:
        tool = _tool(ParameterSpec("ratio", "number"))
        assert bind_arguments(tool, {"ratio": 0.5}) == {"ratio": 0.5}

    @pytest.mark.parametrize(
        ("param", "value", "reason"),
        [
            (ParameterSpec("s", "string"), 5, "expected string"),
            (ParameterSpec("n", "number"), True, "expected number"),
            (ParameterSpec("n", "number"), "3", "expected number"),
            (ParameterSpec("n", "number"), float("nan"), "expected number"),
            (ParameterSpec("n", "number"), float("inf"), "expected number"),
            (ParameterSpec("n", "number"), float("-inf"), "expected number"),
            (ParameterSpec("b", "boolean"), "yes", "expected boolean"),
            (ParameterSpec("o", "object"), ["a"], "expected object"),
        ],
    )
    def test_type_mismatch(self, param: ParameterSpec, value: object, reason: str) -> None:
        with pytest.raises(InvalidArgumentError, match=reason):
            bind_arguments(_tool(param), {param.name: value})

    def test_object_copied_to_dict(self) -> None:
        tool = _tool(ParameterSpec("metadata", "object", required=True))
        original = {"dDocTitle": "Report"}
        bound = bind_arguments(tool, {"metadata": original})
        assert bound["metadata"] == original

    def test_boolean_accepted(self) -> None:
        tool = _tool(ParameterSpec("flag", "boolean"))
        assert bind_arguments(tool, {"flag": False}) == {"flag": False}

    def test_unknown_keys_dropped(self) -> None:
        tool = _tool(ParameterSpec("a"))
        assert bind_arguments(tool, {"a": "x", "z": 1}) == {"a": "x"}

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid argument arguments"):
            bind_arguments(_tool(), "dDocName=DOC1")
