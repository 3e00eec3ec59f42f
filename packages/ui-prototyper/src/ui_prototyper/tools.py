"""Tool definitions exposing the layout primitives to a command dispatcher.

Each tool carries a JSON Schema for its arguments and a synchronous
``execute`` callable returning the rendered text. :func:`call_tool` validates
arguments before dispatching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import jsonschema

from ui_prototyper.batch import batch_render, render_batch_output
from ui_prototyper.components import COMPONENT_TYPES, parse_batch_request
from ui_prototyper.errors import InvalidRequestError
from ui_prototyper.layout import (
    ALIGNMENTS,
    DEFAULT_BOX_WIDTH,
    DEFAULT_GAP,
    SEPARATOR_GLYPHS,
    combine_horizontal,
    create_box,
    create_table_row,
    create_table_separator,
    pad_text,
    truncate_by_width,
    wrap_frame,
)

DEFAULT_FRAME_WIDTH = 80

_STRING_LIST = {"type": "array", "items": {"type": "string"}}
_INT_LIST = {"type": "array", "items": {"type": "integer"}}


@dataclass
class ToolDefinition:
    """A named operation with a JSON Schema for its arguments."""

    name: str
    description: str
    parameters: dict[str, Any]  # JSON Schema
    label: str = ""
    execute: Callable[[dict[str, Any]], str] | None = None


# --- Argument validation ---


def validate_tool_arguments(schema: dict[str, Any], arguments: dict[str, Any]) -> list[str]:
    """Check *arguments* against *schema*.

    Returns every violation as ``"<path>: <message>"``, ordered by path (empty
    if valid).
    """
    validator_cls = jsonschema.validators.validator_for(schema)
    try:
        validator_cls.check_schema(schema)
    except jsonschema.SchemaError as e:
        return [f"Invalid schema: {e.message}"]

    errors = sorted(
        validator_cls(schema).iter_errors(arguments),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    return [f"{_error_path(e)}: {e.message}" for e in errors]


def _error_path(error: jsonschema.ValidationError) -> str:
    return ".".join(str(p) for p in error.absolute_path) or "(root)"


# --- Executors ---
#
# JSON Schema "integer" admits whole floats such as 4.0; executors convert to int.


def _int_list(values: list[Any]) -> list[int]:
    return [int(v) for v in values]


def _execute_batch_render(args: dict[str, Any]) -> str:
    request = parse_batch_request(
        {"components": args["components"], "returnIndex": args.get("returnIndex")}
    )
    results = batch_render(request.components, strict=args.get("strict", False))
    return render_batch_output(results, request.return_index)


def _execute_pad_text(args: dict[str, Any]) -> str:
    return pad_text(args["text"], int(args["width"]), args.get("align", "left"))


def _execute_truncate_text(args: dict[str, Any]) -> str:
    return truncate_by_width(args["text"], int(args["width"]))


def _execute_create_box(args: dict[str, Any]) -> str:
    return create_box(args["title"], args["lines"], int(args.get("width", DEFAULT_BOX_WIDTH)))


def _execute_create_table_row(args: dict[str, Any]) -> str:
    return create_table_row(args["columns"], _int_list(args["widths"]))


def _execute_create_table_separator(args: dict[str, Any]) -> str:
    return create_table_separator(_int_list(args["widths"]), args.get("style", "middle"))


def _execute_combine_horizontal(args: dict[str, Any]) -> str:
    return combine_horizontal(args["boxes"], int(args.get("gap", DEFAULT_GAP)))


def _execute_wrap_frame(args: dict[str, Any]) -> str:
    return wrap_frame(args["content"], int(args.get("width", DEFAULT_FRAME_WIDTH)), args.get("title"))


# --- Definitions ---


def create_layout_tools() -> list[ToolDefinition]:
    """Create the full set of layout tools."""
    return [
        ToolDefinition(
            name="batch_render",
            description=(
                "Render several components in one call. combine_horizontal.items and "
                "wrap_frame.contentIndex refer to earlier results by index (from 0). "
                "Returns every result labelled [i], or only the result at returnIndex."
            ),
            parameters={
                "type": "object",
                "properties": {
                    "components": {
                        "type": "array",
                        "description": "Components to render, in order.",
                        "items": {
                            "type": "object",
                            "properties": {"type": {"type": "string", "enum": list(COMPONENT_TYPES)}},
                            "required": ["type"],
                        },
                    },
                    "returnIndex": {"type": "integer", "description": "Return only this result."},
                    "strict": {
                        "type": "boolean",
                        "description": "Fail on out-of-range references instead of rendering them empty.",
                    },
                },
                "required": ["components"],
            },
            label="Batch render",
            execute=_execute_batch_render,
        ),
        ToolDefinition(
            name="pad_text",
            description=(
                "Pad text to a visual width. Wide characters (CJK, emoji) count as two columns. "
                'Example: pad_text("Test", 10, "center") -> "   Test   ".'
            ),
            parameters={
                "type": "object",
                "properties": {
                    "text": {"type": "string", "description": "Text to pad."},
                    "width": {"type": "integer", "description": "Target visual width."},
                    "align": {"type": "string", "enum": list(ALIGNMENTS), "description": "Default: left."},
                },
                "required": ["text", "width"],
            },
            label="Pad",
            execute=_execute_pad_text,
        ),
        ToolDefinition(
            name="truncate_text",
            description="Cut text to at most the given visual width without splitting a character.",
            parameters={
                "type": "object",
                "properties": {
                    "text": {"type": "string", "description": "Text to truncate."},
                    "width": {"type": "integer", "description": "Maximum visual width."},
                },
                "required": ["text", "width"],
            },
            label="Truncate",
            execute=_execute_truncate_text,
        ),
        ToolDefinition(
            name="create_box",
            description="Draw a titled box with every row aligned to the same width.",
            parameters={
                "type": "object",
                "properties": {
                    "title": {"type": "string", "description": "Box title."},
                    "lines": {**_STRING_LIST, "description": "Content rows."},
                    "width": {"type": "integer", "description": f"Total width (default {DEFAULT_BOX_WIDTH})."},
                },
                "required": ["title", "lines"],
            },
            label="Box",
            execute=_execute_create_box,
        ),
        ToolDefinition(
            name="create_table_row",
            description="Render a table row with each column padded to its width.",
            parameters={
                "type": "object",
                "properties": {
                    "columns": {**_STRING_LIST, "description": "Cell values."},
                    "widths": {**_INT_LIST, "description": "Column widths."},
                },
                "required": ["columns", "widths"],
            },
            label="Table row",
            execute=_execute_create_table_row,
        ),
        ToolDefinition(
            name="create_table_separator",
            description="Render a table rule: top ┌┬┐, middle ├┼┤ or bottom └┴┘.",
            parameters={
                "type": "object",
                "properties": {
                    "widths": {**_INT_LIST, "description": "Column widths."},
                    "style": {"type": "string", "enum": list(SEPARATOR_GLYPHS), "description": "Default: middle."},
                },
                "required": ["widths"],
            },
            label="Table separator",
            execute=_execute_create_table_separator,
        ),
        ToolDefinition(
            name="combine_horizontal",
            description="Place text blocks side by side; shorter blocks get blank rows.",
            parameters={
                "type": "object",
                "properties": {
                    "boxes": {**_STRING_LIST, "description": "Blocks to combine."},
                    "gap": {"type": "integer", "description": f"Spaces between blocks (default {DEFAULT_GAP})."},
                },
                "required": ["boxes"],
            },
            label="Combine",
            execute=_execute_combine_horizontal,
        ),
        ToolDefinition(
            name="wrap_frame",
            description="Wrap content in an outer frame that grows to fit the content.",
            parameters={
                "type": "object",
                "properties": {
                    "content": {"type": "string", "description": "Content to frame."},
                    "width": {
                        "type": "integer",
                        "description": f"Minimum frame width (default {DEFAULT_FRAME_WIDTH}).",
                    },
                    "title": {"type": "string", "description": "Optional frame title."},
                },
                "required": ["content"],
            },
            label="Frame",
            execute=_execute_wrap_frame,
        ),
    ]


def create_all_tools() -> dict[str, ToolDefinition]:
    """Create all tools as a dictionary keyed by name."""
    return {t.name: t for t in create_layout_tools()}


def call_tool(name: str, arguments: dict[str, Any] | None = None) -> str:
    """Validate *arguments* and run the tool called *name*."""
    tool = create_all_tools().get(name)
    if tool is None or tool.execute is None:
        raise InvalidRequestError(f"Unknown tool: {name}", [f"Unknown tool: {name}"])

    args = arguments or {}
    errors = validate_tool_arguments(tool.parameters, args)
    if errors:
        raise InvalidRequestError(f"Invalid arguments for {name}", errors)
    return tool.execute(args)
