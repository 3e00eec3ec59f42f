"""Column-exact layout primitives: padding, truncation, boxes, tables, frames.

Every primitive measures through a :class:`~ui_prototyper.width.WidthModel`
(the process-wide one unless *model* is given), so borders line up as long as
the model agrees with the terminal. Implausible widths never raise: padding
and dash runs are clamped at zero, and boxes and frames grow until every row
has the same width.
"""

from __future__ import annotations

from typing import Literal

from ui_prototyper.width import WidthModel, get_width_model, segment_clusters

Align = Literal["left", "right", "center"]
SeparatorStyle = Literal["top", "middle", "bottom"]

ALIGNMENTS: tuple[str, ...] = ("left", "right", "center")

DEFAULT_BOX_WIDTH = 40
DEFAULT_COLUMN_WIDTH = 10
DEFAULT_GAP = 2

H_LINE = "─"
V_LINE = "│"

# (left, junction, right) per separator style
SEPARATOR_GLYPHS: dict[str, tuple[str, str, str]] = {
    "top": ("┌", "┬", "┐"),
    "middle": ("├", "┼", "┤"),
    "bottom": ("└", "┴", "┘"),
}

# Border glyphs plus their inner spaces: "│ " + ... + " │"
_BORDER_OVERHEAD = 4


def _model(model: WidthModel | None) -> WidthModel:
    return model if model is not None else get_width_model()


def _place(prefix: str, text: str, end: int, m: WidthModel, *, trim_prefix: bool = True) -> str:
    """Return *prefix* + *text* filled with spaces to exactly *end* columns.

    *text* is cut to the room left after *prefix*. A lone U+FE0F at the start
    of *text* joins the last character of *prefix* into one cluster, so the
    join is measured as a whole. Any excess comes out of trailing spaces of
    *prefix* when *trim_prefix* is set, otherwise off the end of *text*.
    """
    text = truncate_by_width(text, end - m.width(prefix), model=m)
    body = prefix + text
    w = m.width(body)
    while w > end:
        if trim_prefix and prefix.endswith(" "):
            prefix = prefix[:-1]
        elif text:
            text = "".join(segment_clusters(text)[:-1])
        else:
            break
        body = prefix + text
        w = m.width(body)
    return body + " " * max(0, end - w)


# ---------------------------------------------------------------------------
# Truncation and padding
# ---------------------------------------------------------------------------


def truncate_by_width(text: str, max_width: int, *, model: WidthModel | None = None) -> str:
    """Return the longest prefix of whole clusters that fits in *max_width* columns."""
    if not text or max_width < 0:
        return ""
    m = _model(model)

    parts: list[str] = []
    cols = 0
    for cluster in segment_clusters(text):
        w = m.cluster_width(cluster)
        if cols + w > max_width:
            break
        parts.append(cluster)
        cols += w
    return "".join(parts)


def pad_text(
    text: str,
    target_width: int,
    align: Align = "left",
    *,
    model: WidthModel | None = None,
) -> str:
    """Pad *text* with spaces to exactly *target_width* columns.

    Text wider than the target is truncated first; when a two-column cluster
    straddles the boundary the leftover column is filled with a space.
    """
    if align not in ALIGNMENTS:
        raise ValueError(f"Unknown alignment: {align!r}")
    m = _model(model)
    target_width = max(target_width, 0)

    padding = target_width - m.width(text)
    if padding <= 0 or align == "left":
        left = 0
    elif align == "right":
        left = padding
    else:
        left = padding // 2
    return _place(" " * left, text, target_width, m)


# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------


def _title_head(title: str) -> str:
    return f"┌{H_LINE} {title} "


def _title_min_width(title: str, m: WidthModel) -> int:
    return m.width(_title_head(title)) + 1


def _title_border(title: str, width: int, m: WidthModel) -> str:
    head = _title_head(title)
    return head + H_LINE * max(0, width - 1 - m.width(head)) + "┐"


def _plain_border(left: str, right: str, width: int) -> str:
    return left + H_LINE * max(0, width - 2) + right


def _row_width(line: str, m: WidthModel) -> int:
    # Width of *line* as it sits after the "│ " of a content row
    return m.width(" " + line) - 1


def _content_row(line: str, inner_width: int, m: WidthModel) -> str:
    return V_LINE + _place(" ", line, inner_width + 1, m, trim_prefix=False) + f" {V_LINE}"


def create_box(
    title: str,
    lines: list[str],
    width: int = DEFAULT_BOX_WIDTH,
    *,
    model: WidthModel | None = None,
) -> str:
    """Draw a titled card::

        ┌─ Title ──────┐
        │ content      │
        └──────────────┘

    Content lines are padded (or truncated) to ``width - 4``. If *width* is
    too small for the title or the borders, the box widens so that all rows
    stay the same width.
    """
    m = _model(model)
    width = max(width, _title_min_width(title, m), _BORDER_OVERHEAD)
    inner_width = width - _BORDER_OVERHEAD

    rows = [_title_border(title, width, m)]
    rows.extend(_content_row(line, inner_width, m) for line in lines)
    rows.append(_plain_border("└", "┘", width))
    return "\n".join(rows)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def create_table_row(
    columns: list[str],
    widths: list[int],
    *,
    model: WidthModel | None = None,
) -> str:
    """Render ``│ a │ b │`` with each column left-padded to its width.

    Columns beyond the end of *widths* use :data:`DEFAULT_COLUMN_WIDTH`.
    Negative widths count as zero.
    """
    m = _model(model)
    cells = []
    for i, col in enumerate(columns):
        w = widths[i] if i < len(widths) else DEFAULT_COLUMN_WIDTH
        cells.append(_place(" ", col, max(w, 0) + 1, m, trim_prefix=False))
    return V_LINE + f" {V_LINE}".join(cells) + f" {V_LINE}"


def create_table_separator(widths: list[int], style: SeparatorStyle = "middle") -> str:
    """Render a horizontal rule matching :func:`create_table_row` columns."""
    try:
        left, junction, right = SEPARATOR_GLYPHS[style]
    except KeyError:
        raise ValueError(f"Unknown separator style: {style!r}") from None
    segments = [H_LINE * (max(w, 0) + 2) for w in widths]
    return left + junction.join(segments) + right


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def _trimmed_lines(block: str) -> list[str]:
    return [line.rstrip() for line in block.split("\n")]


def combine_horizontal(
    blocks: list[str],
    gap: int = DEFAULT_GAP,
    *,
    model: WidthModel | None = None,
) -> str:
    """Place multi-line *blocks* side by side, separated by *gap* spaces.

    Each block is padded to its own widest line; shorter blocks are extended
    with blank rows so the result is rectangular.
    """
    m = _model(model)
    block_lines = [_trimmed_lines(block) for block in blocks]
    if not block_lines:
        return ""

    row_count = max(len(lines) for lines in block_lines)
    block_widths = [max((m.width(line) for line in lines), default=0) for lines in block_lines]
    gap = max(0, gap)

    rows: list[str] = []
    for i in range(row_count):
        row = ""
        end = 0
        for j, lines in enumerate(block_lines):
            if j:
                row += " " * gap
                end += gap
            end += block_widths[j]
            row = _place(row, lines[i] if i < len(lines) else "", end, m)
        rows.append(row)
    return "\n".join(rows)


def wrap_frame(
    content: str,
    width: int,
    title: str | None = None,
    *,
    model: WidthModel | None = None,
) -> str:
    """Surround *content* with a border, optionally titled.

    The frame is at least *width* columns wide and grows to fit the widest
    content line, so content is never cut.
    """
    m = _model(model)
    lines = _trimmed_lines(content)
    content_width = max((_row_width(line, m) for line in lines), default=0)

    width = max(width, content_width + _BORDER_OVERHEAD)
    if title:
        width = max(width, _title_min_width(title, m))
    inner_width = width - _BORDER_OVERHEAD

    rows = [_title_border(title, width, m) if title else _plain_border("┌", "┐", width)]
    rows.extend(_content_row(line, inner_width, m) for line in lines)
    rows.append(_plain_border("└", "┘", width))
    return "\n".join(rows)
