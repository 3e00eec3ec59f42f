"""Correction file locations and schema.

The calibration tooling writes ``emoji-config.json`` either to the user's
config directory (``~/.config/ui-prototyper``) or to the project directory.
The user-level file takes precedence over the project-level one.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILE_NAME = "emoji-config.json"
CONFIG_DIR_ENV = "UI_PROTOTYPER_CONFIG_DIR"


class CorrectionConfig(BaseModel):
    """On-disk correction record.

    Only ``corrections`` is consumed here. The metadata fields belong to the
    calibration tooling and are carried through untouched, including any keys
    not listed below.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    corrections: dict[str, int] = Field(default_factory=dict)
    timestamp: str | None = None
    terminal: str | None = None
    scope: str | None = None
    summary: dict[str, Any] | None = None


def get_global_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".config" / "ui-prototyper"


def get_global_config_path() -> Path:
    return get_global_config_dir() / CONFIG_FILE_NAME


def get_local_config_path(cwd: str | os.PathLike[str] | None = None) -> Path:
    return Path(cwd if cwd is not None else os.getcwd()) / CONFIG_FILE_NAME


def config_search_paths(cwd: str | os.PathLike[str] | None = None) -> list[Path]:
    """Return correction file candidates in priority order (global, then local)."""
    return [get_global_config_path(), get_local_config_path(cwd)]


def read_correction_config(path: str | os.PathLike[str]) -> CorrectionConfig:
    """Read and validate a single correction file.

    Raises ``OSError`` when the file cannot be read, ``ValueError`` when it is
    not JSON and ``pydantic.ValidationError`` when the record is malformed.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return CorrectionConfig.model_validate(data)
