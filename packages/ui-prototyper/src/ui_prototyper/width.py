"""Visual width measurement: cluster segmentation plus per-cluster corrections.

``wcwidth`` measures code points in isolation and under-counts emoji that are
composed from several of them (the gear emoji is ``U+2699 U+FE0F``; a keycap adds
``U+20E3``). Text is therefore segmented into clusters first and each
cluster is measured as a unit:

* the base width is the sum of ``wcwidth`` over its code points;
* the correction table adds a per-cluster delta;
* multi-codepoint clusters absent from the table get +1.
"""

from __future__ import annotations

import wcwidth as _wcwidth

from ui_prototyper.corrections import CorrectionTable, get_correction_table

VARIATION_SELECTOR_16 = "\ufe0f"
COMBINING_KEYCAP = "\u20e3"

# Delta for an uncatalogued VS16 / keycap cluster
DEFAULT_SEQUENCE_CORRECTION = 1

_BOX_DRAWING_START = 0x2500
_BOX_DRAWING_END = 0x257F


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def segment_clusters(text: str) -> list[str]:
    """Split *text* into width clusters.

    Recognized shapes, matched greedily left to right:

    1. a single code point;
    2. a code point followed by U+FE0F;
    3. a code point followed by U+FE0F and U+20E3.

    A selector or keycap mark with no base in front of it is its own
    single-codepoint cluster. ``"".join(segment_clusters(s)) == s`` always.
    """
    clusters: list[str] = []
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]
        if ch not in (VARIATION_SELECTOR_16, COMBINING_KEYCAP) and i + 1 < n and text[i + 1] == VARIATION_SELECTOR_16:
            if i + 2 < n and text[i + 2] == COMBINING_KEYCAP:
                clusters.append(text[i : i + 3])
                i += 3
            else:
                clusters.append(text[i : i + 2])
                i += 2
            continue
        clusters.append(ch)
        i += 1
    return clusters


# ---------------------------------------------------------------------------
# Base width
# ---------------------------------------------------------------------------


def _codepoint_width(ch: str) -> int:
    cp = ord(ch)
    # Box-drawing glyphs are single-column by convention (they are East Asian
    # Ambiguous, which some tables widen)
    if _BOX_DRAWING_START <= cp <= _BOX_DRAWING_END:
        return 1
    w = _wcwidth.wcwidth(ch)
    return max(w, 0)


def base_width(cluster: str) -> int:
    """Uncorrected width of *cluster*: ``wcwidth`` summed over its code points."""
    return sum(_codepoint_width(ch) for ch in cluster)


# ---------------------------------------------------------------------------
# WidthModel
# ---------------------------------------------------------------------------


class WidthModel:
    """Measure text against a fixed correction table."""

    __slots__ = ("table", "_ascii_exact")

    def __init__(self, table: CorrectionTable | None = None) -> None:
        self.table = table if table is not None else CorrectionTable.default()
        # Printable ASCII is one column per character unless the table says otherwise
        self._ascii_exact = not any(key.isascii() for key in self.table)

    def correction(self, cluster: str) -> int:
        delta = self.table.get(cluster)
        if delta is not None:
            return delta
        if len(cluster) > 1:
            return DEFAULT_SEQUENCE_CORRECTION
        return 0

    def cluster_width(self, cluster: str) -> int:
        if not cluster:
            return 0
        return max(base_width(cluster) + self.correction(cluster), 0)

    def width(self, text: str) -> int:
        if not text:
            return 0
        if self._ascii_exact and text.isascii() and text.isprintable():
            return len(text)
        return sum(self.cluster_width(c) for c in segment_clusters(text))

    def measure(self, text: str) -> list[tuple[str, int]]:
        """Return ``(cluster, width)`` pairs for *text*."""
        return [(c, self.cluster_width(c)) for c in segment_clusters(text)]


_width_model: WidthModel | None = None


def get_width_model() -> WidthModel:
    """Return the process-wide model built over :func:`get_correction_table`."""
    global _width_model
    if _width_model is None:
        _width_model = WidthModel(get_correction_table())
    return _width_model


def visual_width(text: str) -> int:
    """Visible column width of *text* under the process-wide model."""
    return get_width_model().width(text)


def cluster_width(cluster: str) -> int:
    """Column width of a single cluster under the process-wide model."""
    return get_width_model().cluster_width(cluster)
