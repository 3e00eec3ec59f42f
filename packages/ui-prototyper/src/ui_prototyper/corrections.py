"""Per-cluster column corrections layered over the base width function.

The table maps an exact grapheme cluster to the number of columns that must be
added to what ``wcwidth`` reports for it. It is loaded once per process from
the first readable correction file, falling back to a built-in table that
covers the clusters most terminals are known to disagree on.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from ui_prototyper.config import config_search_paths, read_correction_config

logger = logging.getLogger(__name__)

_VS16 = "\ufe0f"
_KEYCAP = "\u20e3"


def _build_default_corrections() -> dict[str, int]:
    table: dict[str, int] = {}

    # Keycaps: base + VS16 + U+20E3
    for base in "0123456789#*":
        table[base + _VS16 + _KEYCAP] = 1

    # Symbols with emoji presentation selector
    for base in (
        "⚙",  # gear
        "✏",  # pencil
        "✒",  # black nib
        "❤",  # heavy black heart
        "☀",  # sun
        "☁",  # cloud
        "☂",  # umbrella
        "❄",  # snowflake
        "☃",  # snowman
        "✴",  # eight pointed star
        "❇",  # sparkle
        "⁉",  # exclamation question mark
        "‼",  # double exclamation mark
        "ℹ",  # information source
        "✉",  # envelope
        "☎",  # telephone
        "⏱",  # stopwatch
        "⏲",  # timer clock
        "⌨",  # keyboard
    ):
        table[base + _VS16] = 1

    # Bare symbols measured as one column but drawn as two
    for glyph in (
        "⚡",  # high voltage
        "⭐",  # star
        "⚪",  # white circle
        "⚫",  # black circle
    ):
        table[glyph] = 1

    # Geometric arrows, wide in several terminals
    for glyph in "▲▼◀▶△▽":
        table[glyph] = 1

    # Won sign
    table["₩"] = 1

    return table


DEFAULT_EMOJI_CORRECTIONS: Mapping[str, int] = MappingProxyType(_build_default_corrections())

DEFAULT_SOURCE = "default"


class CorrectionTable(Mapping[str, int]):
    """Read-only cluster -> column delta mapping with the source it came from."""

    __slots__ = ("_entries", "source")

    def __init__(self, entries: Mapping[str, int], source: str = DEFAULT_SOURCE) -> None:
        self._entries: Mapping[str, int] = MappingProxyType(dict(entries))
        self.source = source

    def __getitem__(self, cluster: str) -> int:
        return self._entries[cluster]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CorrectionTable(source={self.source!r}, entries={len(self._entries)})"

    @classmethod
    def default(cls) -> CorrectionTable:
        return cls(DEFAULT_EMOJI_CORRECTIONS, DEFAULT_SOURCE)


def load_correction_table(
    paths: Iterable[str | os.PathLike[str]] | None = None,
) -> CorrectionTable:
    """Load the first readable correction file from *paths*.

    *paths* defaults to :func:`config_search_paths` (global before local).
    Missing, unreadable or malformed files are skipped; when nothing loads
    the built-in table is returned. This function never raises.
    """
    candidates = list(paths) if paths is not None else config_search_paths()

    for candidate in candidates:
        path = Path(candidate)
        try:
            if not path.is_file():
                continue
            config = read_correction_config(path)
        except (OSError, ValueError, ValidationError) as e:
            logger.debug("Skipping correction file %s: %s", path, e)
            continue
        logger.debug("Loaded %d corrections from %s", len(config.corrections), path)
        return CorrectionTable(config.corrections, str(path))

    logger.debug("No correction file found, using built-in table")
    return CorrectionTable.default()


# Process-wide table, loaded on first use
_correction_table: CorrectionTable | None = None


def get_correction_table() -> CorrectionTable:
    global _correction_table
    if _correction_table is None:
        _correction_table = load_correction_table()
    return _correction_table
