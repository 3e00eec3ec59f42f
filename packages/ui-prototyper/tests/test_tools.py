"""Tests for ui_prototyper.tools."""

from __future__ import annotations

import pytest

from ui_prototyper.errors import InvalidRequestError
from ui_prototyper.layout import (
    combine_horizontal,
    create_box,
    create_table_row,
    create_table_separator,
    wrap_frame,
)
from ui_prototyper.tools import (
    call_tool,
    create_all_tools,
    create_layout_tools,
    validate_tool_arguments,
)


class TestToolDefinitions:
    def test_names(self) -> None:
        assert [t.name for t in create_layout_tools()] == [
            "batch_render",
            "pad_text",
            "truncate_text",
            "create_box",
            "create_table_row",
            "create_table_separator",
            "combine_horizontal",
            "wrap_frame",
        ]

    def test_every_tool_is_executable(self) -> None:
        for tool in create_all_tools().values():
            assert tool.execute is not None
            assert tool.parameters["type"] == "object"
            assert tool.description


class TestValidateToolArguments:
    def test_valid(self) -> None:
        schema = create_all_tools()["pad_text"].parameters
        assert validate_tool_arguments(schema, {"text": "a", "width": 3}) == []

    def test_missing_required(self) -> None:
        schema = create_all_tools()["pad_text"].parameters
        errors = validate_tool_arguments(schema, {"text": "a"})
        assert len(errors) == 1
        assert "width" in errors[0]

    def test_reports_every_error(self) -> None:
        schema = create_all_tools()["pad_text"].parameters
        errors = validate_tool_arguments(schema, {"text": 1, "width": "wide", "align": "justify"})
        assert len(errors) == 3
        assert [e.split(":")[0] for e in errors] == ["align", "text", "width"]

    def test_invalid_schema(self) -> None:
        errors = validate_tool_arguments({"type": "nonsense"}, {})
        assert errors[0].startswith("Invalid schema:")

    def test_wrong_type_reports_path(self) -> None:
        schema = create_all_tools()["create_table_row"].parameters
        errors = validate_tool_arguments(schema, {"columns": ["a"], "widths": ["wide"]})
        assert errors[0].startswith("widths.0:")


class TestCallTool:
    def test_pad_text(self) -> None:
        assert call_tool("pad_text", {"text": "Test", "width": 10, "align": "center"}) == "   Test   "

    def test_whole_float_integers(self) -> None:
        assert call_tool("pad_text", {"text": "a", "width": 4.0}) == "a   "
        assert call_tool("create_table_separator", {"widths": [2.0]}) == "├────┤"
        assert call_tool("create_table_row", {"columns": ["a"], "widths": [1.0]}) == "│ a │"
        assert call_tool("combine_horizontal", {"boxes": ["a", "b"], "gap": 1.0}) == "a b"
        assert call_tool("create_box", {"title": "T", "lines": [], "width": 8.0}) == create_box("T", [], 8)
        assert call_tool("truncate_text", {"text": "abc", "width": 2.0}) == "ab"
        assert call_tool("wrap_frame", {"content": "x", "width": 6.0}) == wrap_frame("x", 6)

    def test_truncate_text(self) -> None:
        assert call_tool("truncate_text", {"text": "가나다", "width": 5}) == "가나"

    def test_create_box(self) -> None:
        assert call_tool("create_box", {"title": "T", "lines": ["x"]}) == create_box("T", ["x"], 40)

    def test_table_tools(self) -> None:
        assert call_tool("create_table_row", {"columns": ["a", "b"], "widths": [2, 3]}) == create_table_row(
            ["a", "b"], [2, 3]
        )
        assert call_tool("create_table_separator", {"widths": [4, 4], "style": "top"}) == create_table_separator(
            [4, 4], "top"
        )

    def test_combine_horizontal(self) -> None:
        assert call_tool("combine_horizontal", {"boxes": ["a", "b\nc"], "gap": 1}) == combine_horizontal(
            ["a", "b\nc"], 1
        )

    def test_wrap_frame(self) -> None:
        assert call_tool("wrap_frame", {"content": "x", "width": 10, "title": "T"}) == wrap_frame("x", 10, "T")

    def test_wrap_frame_default_width(self) -> None:
        assert call_tool("wrap_frame", {"content": "x"}) == wrap_frame("x", 80)

    def test_batch_render_all_results(self) -> None:
        output = call_tool(
            "batch_render",
            {"components": [{"type": "raw", "text": "a"}, {"type": "raw", "text": "b"}]},
        )
        assert output == "[0]\na\n\n[1]\nb"

    def test_batch_render_return_index(self) -> None:
        output = call_tool(
            "batch_render",
            {
                "components": [
                    {"type": "box", "title": "A", "lines": ["1"], "width": 10},
                    {"type": "wrap_frame", "contentIndex": 0, "width": 10, "title": "Outer"},
                ],
                "returnIndex": 1,
            },
        )
        assert output == wrap_frame(create_box("A", ["1"], 10), 10, "Outer")

    def test_batch_render_strict(self) -> None:
        with pytest.raises(InvalidRequestError):
            call_tool(
                "batch_render",
                {"components": [{"type": "combine_horizontal", "items": [4]}], "strict": True},
            )

    def test_batch_render_unknown_component(self) -> None:
        with pytest.raises(InvalidRequestError):
            call_tool("batch_render", {"components": [{"type": "gauge"}]})

    def test_unknown_tool(self) -> None:
        with pytest.raises(InvalidRequestError, match="Unknown tool"):
            call_tool("create_ui_prototype", {})

    def test_invalid_arguments(self) -> None:
        with pytest.raises(InvalidRequestError) as exc_info:
            call_tool("wrap_frame", {"width": 10})
        assert exc_info.value.errors
