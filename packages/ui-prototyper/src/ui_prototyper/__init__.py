"""ui-prototyper: column-exact box, table and frame rendering for terminals."""

# Batch evaluation
from ui_prototyper.batch import batch_render, render_batch_output, render_component

# Components
from ui_prototyper.components import (
    BatchRequest,
    BoxComponent,
    CombineHorizontalComponent,
    PadTextComponent,
    RawComponent,
    TableRowComponent,
    TableSeparatorComponent,
    UIComponent,
    WrapFrameComponent,
    parse_batch_request,
    parse_components,
)

# Correction table
from ui_prototyper.corrections import (
    DEFAULT_EMOJI_CORRECTIONS,
    CorrectionTable,
    get_correction_table,
    load_correction_table,
)

# Errors
from ui_prototyper.errors import InvalidReferenceError, InvalidRequestError, LayoutError

# Layout primitives
from ui_prototyper.layout import (
    combine_horizontal,
    create_box,
    create_table_row,
    create_table_separator,
    pad_text,
    truncate_by_width,
    wrap_frame,
)

# Tools
from ui_prototyper.tools import ToolDefinition, call_tool, create_all_tools, create_layout_tools

# Width measurement
from ui_prototyper.width import (
    WidthModel,
    base_width,
    cluster_width,
    get_width_model,
    segment_clusters,
    visual_width,
)

__all__ = [
    # Batch
    "batch_render",
    "render_batch_output",
    "render_component",
    # Components
    "BatchRequest",
    "BoxComponent",
    "CombineHorizontalComponent",
    "PadTextComponent",
    "RawComponent",
    "TableRowComponent",
    "TableSeparatorComponent",
    "UIComponent",
    "WrapFrameComponent",
    "parse_batch_request",
    "parse_components",
    # Corrections
    "DEFAULT_EMOJI_CORRECTIONS",
    "CorrectionTable",
    "get_correction_table",
    "load_correction_table",
    # Errors
    "InvalidReferenceError",
    "InvalidRequestError",
    "LayoutError",
    # Layout
    "combine_horizontal",
    "create_box",
    "create_table_row",
    "create_table_separator",
    "pad_text",
    "truncate_by_width",
    "wrap_frame",
    # Tools
    "ToolDefinition",
    "call_tool",
    "create_all_tools",
    "create_layout_tools",
    # Width
    "WidthModel",
    "base_width",
    "cluster_width",
    "get_width_model",
    "segment_clusters",
    "visual_width",
]
