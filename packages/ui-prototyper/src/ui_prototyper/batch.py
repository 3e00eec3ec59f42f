"""Batch rendering: evaluate a list of components in one pass.

Components are evaluated in order and each result is appended to a result
list. ``combine_horizontal`` and ``wrap_frame`` refer to earlier results by
index, which lets a single request build nested layouts (boxes combined into
a row, the row wrapped in a frame, ...). Since a component only sees the
results produced before it, references can only point backward.

By default a reference outside the produced range renders as an empty
string, so one bad index degrades a single element instead of failing the
batch. Pass ``strict=True`` to raise :class:`InvalidReferenceError` instead.
"""

from __future__ import annotations

import logging
from typing import Any

from ui_prototyper.components import (
    BoxComponent,
    CombineHorizontalComponent,
    PadTextComponent,
    RawComponent,
    TableRowComponent,
    TableSeparatorComponent,
    UIComponent,
    WrapFrameComponent,
    parse_components,
)
from ui_prototyper.errors import InvalidReferenceError, InvalidRequestError
from ui_prototyper.layout import (
    combine_horizontal,
    create_box,
    create_table_row,
    create_table_separator,
    pad_text,
    wrap_frame,
)
from ui_prototyper.width import WidthModel, get_width_model

logger = logging.getLogger(__name__)


def _resolve(results: list[str], index: int, strict: bool) -> str:
    if 0 <= index < len(results):
        return results[index]
    if strict:
        raise InvalidReferenceError(index, len(results))
    logger.debug("Reference %d out of range (%d results), using empty string", index, len(results))
    return ""


def render_component(
    component: UIComponent,
    results: list[str],
    *,
    strict: bool = False,
    model: WidthModel | None = None,
) -> str:
    """Render one component against the results produced so far."""
    m = model if model is not None else get_width_model()

    match component:
        case PadTextComponent():
            return pad_text(component.text, component.width, component.align, model=m)
        case BoxComponent():
            return create_box(component.title, component.lines, component.width, model=m)
        case TableRowComponent():
            return create_table_row(component.columns, component.widths, model=m)
        case TableSeparatorComponent():
            return create_table_separator(component.widths, component.style)
        case CombineHorizontalComponent():
            blocks = [_resolve(results, idx, strict) for idx in component.items]
            return combine_horizontal(blocks, component.gap, model=m)
        case WrapFrameComponent():
            content = _resolve(results, component.content_index, strict)
            return wrap_frame(content, component.width, component.title, model=m)
        case RawComponent():
            return component.text
        case _:
            raise InvalidRequestError(f"Unknown component: {type(component).__name__}")


def batch_render(
    components: list[UIComponent] | list[dict[str, Any]],
    *,
    strict: bool = False,
    model: WidthModel | None = None,
) -> list[str]:
    """Render *components* in order and return one string per component.

    Raw dicts are validated first; an unknown ``type`` raises
    :class:`InvalidRequestError` before anything is rendered.
    """
    parsed = parse_components(list(components))
    m = model if model is not None else get_width_model()

    results: list[str] = []
    for component in parsed:
        results.append(render_component(component, results, strict=strict, model=m))
    return results


def render_batch_output(results: list[str], return_index: int | None = None) -> str:
    """Format batch results for display.

    Returns the single result at *return_index* when it exists, otherwise every
    result labelled with its index (``[0]``, ``[1]``, ...) separated by blank
    lines.
    """
    if return_index is not None and 0 <= return_index < len(results):
        return results[return_index]
    return "\n\n".join(f"[{i}]\n{result}" for i, result in enumerate(results))
