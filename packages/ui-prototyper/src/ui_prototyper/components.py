"""Batch render instructions.

Seven component kinds, discriminated by ``type``. Fields are snake_case with
camelCase aliases so that requests written as ``{"contentIndex": 0}`` and
``{"content_index": 0}`` both validate.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ui_prototyper.errors import InvalidRequestError
from ui_prototyper.layout import DEFAULT_BOX_WIDTH, DEFAULT_GAP, Align, SeparatorStyle


class PadTextComponent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["pad_text"] = "pad_text"
    text: str
    width: int
    align: Align = "left"


class BoxComponent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["box"] = "box"
    title: str
    lines: list[str] = Field(default_factory=list)
    width: int = DEFAULT_BOX_WIDTH


class TableRowComponent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["table_row"] = "table_row"
    columns: list[str]
    widths: list[int]


class TableSeparatorComponent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["table_separator"] = "table_separator"
    widths: list[int]
    style: SeparatorStyle = "middle"


class CombineHorizontalComponent(BaseModel):
    """Join earlier results side by side. ``items`` are result indices."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["combine_horizontal"] = "combine_horizontal"
    items: list[int]
    gap: int = DEFAULT_GAP


class WrapFrameComponent(BaseModel):
    """Frame an earlier result. ``content_index`` is a result index."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["wrap_frame"] = "wrap_frame"
    content_index: int = Field(alias="contentIndex")
    width: int
    title: str | None = None


class RawComponent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["raw"] = "raw"
    text: str


UIComponent = Annotated[
    Union[
        PadTextComponent,
        BoxComponent,
        TableRowComponent,
        TableSeparatorComponent,
        CombineHorizontalComponent,
        WrapFrameComponent,
        RawComponent,
    ],
    Field(discriminator="type"),
]

COMPONENT_TYPES: tuple[str, ...] = (
    "pad_text",
    "box",
    "table_row",
    "table_separator",
    "combine_horizontal",
    "wrap_frame",
    "raw",
)


class BatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    components: list[UIComponent]
    return_index: int | None = Field(default=None, alias="returnIndex")


_components_adapter: TypeAdapter[list[UIComponent]] = TypeAdapter(list[UIComponent])


def _format_errors(e: ValidationError) -> list[str]:
    messages: list[str] = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "(root)"
        messages.append(f"{loc}: {err['msg']}")
    return messages


def parse_components(data: list[Any]) -> list[UIComponent]:
    """Validate raw component dicts (model instances pass through)."""
    try:
        return _components_adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidRequestError("Invalid component list", _format_errors(e)) from e


def parse_batch_request(data: Any) -> BatchRequest:
    """Validate a batch request. A bare list is taken as the component list."""
    if isinstance(data, list):
        data = {"components": data}
    try:
        return BatchRequest.model_validate(data)
    except ValidationError as e:
        raise InvalidRequestError("Invalid batch request", _format_errors(e)) from e
