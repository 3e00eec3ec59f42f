"""Tests for ui_prototyper.corrections and ui_prototyper.config."""

from __future__ import annotations

import json

import pytest

from ui_prototyper import corrections
from ui_prototyper.config import (
    CONFIG_FILE_NAME,
    CorrectionConfig,
    config_search_paths,
    read_correction_config,
)
from ui_prototyper.corrections import (
    DEFAULT_EMOJI_CORRECTIONS,
    DEFAULT_SOURCE,
    CorrectionTable,
    get_correction_table,
    load_correction_table,
)


def _write_config(path, corrections_map, **extra):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"corrections": corrections_map, **extra}), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Built-in table
# ---------------------------------------------------------------------------


class TestDefaultCorrections:
    def test_covers_keycaps(self) -> None:
        for base in "0123456789#*":
            assert DEFAULT_EMOJI_CORRECTIONS[base + "\ufe0f\u20e3"] == 1

    def test_covers_selector_symbols(self) -> None:
        assert DEFAULT_EMOJI_CORRECTIONS["⚙\ufe0f"] == 1
        assert DEFAULT_EMOJI_CORRECTIONS["❤\ufe0f"] == 1

    def test_covers_arrows_and_currency(self) -> None:
        for glyph in "▲▼◀▶△▽₩":
            assert DEFAULT_EMOJI_CORRECTIONS[glyph] == 1

    def test_size(self) -> None:
        assert len(DEFAULT_EMOJI_CORRECTIONS) == 42

    def test_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_EMOJI_CORRECTIONS["x"] = 1  # type: ignore[index]


class TestCorrectionTable:
    def test_default_source(self) -> None:
        table = CorrectionTable.default()
        assert table.source == DEFAULT_SOURCE
        assert len(table) == len(DEFAULT_EMOJI_CORRECTIONS)

    def test_get_missing_returns_none(self) -> None:
        assert CorrectionTable({}).get("a") is None

    def test_copy_is_isolated_from_input(self) -> None:
        entries = {"a": 1}
        table = CorrectionTable(entries)
        entries["a"] = 5
        assert table["a"] == 1

    def test_not_mutable(self) -> None:
        table = CorrectionTable({"a": 1})
        with pytest.raises(TypeError):
            table["a"] = 2  # type: ignore[index]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadCorrectionTable:
    def test_no_files_uses_default(self, tmp_path) -> None:
        table = load_correction_table([tmp_path / "missing.json"])
        assert table.source == DEFAULT_SOURCE
        assert dict(table) == dict(DEFAULT_EMOJI_CORRECTIONS)

    def test_first_readable_file_wins(self, tmp_path) -> None:
        global_path = _write_config(tmp_path / "global" / CONFIG_FILE_NAME, {"a": 1})
        local_path = _write_config(tmp_path / "local" / CONFIG_FILE_NAME, {"b": 2})
        table = load_correction_table([global_path, local_path])
        assert table.source == str(global_path)
        assert dict(table) == {"a": 1}

    def test_falls_through_missing_global(self, tmp_path) -> None:
        local_path = _write_config(tmp_path / "local" / CONFIG_FILE_NAME, {"b": 2})
        table = load_correction_table([tmp_path / "nope.json", local_path])
        assert dict(table) == {"b": 2}

    def test_falls_through_invalid_json(self, tmp_path) -> None:
        broken = tmp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        local_path = _write_config(tmp_path / "local" / CONFIG_FILE_NAME, {"b": 2})
        table = load_correction_table([broken, local_path])
        assert table.source == str(local_path)

    def test_falls_through_malformed_record(self, tmp_path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"corrections": {"a": "wide"}}), encoding="utf-8")
        table = load_correction_table([bad])
        assert table.source == DEFAULT_SOURCE

    def test_directory_in_place_of_file_is_skipped(self, tmp_path) -> None:
        (tmp_path / CONFIG_FILE_NAME).mkdir()
        table = load_correction_table([tmp_path / CONFIG_FILE_NAME])
        assert table.source == DEFAULT_SOURCE

    def test_default_search_order_prefers_global(self, tmp_path, monkeypatch) -> None:
        config_dir = tmp_path / "user"
        project = tmp_path / "project"
        monkeypatch.setenv("UI_PROTOTYPER_CONFIG_DIR", str(config_dir))
        monkeypatch.chdir(_write_config(project / CONFIG_FILE_NAME, {"b": 2}).parent)
        _write_config(config_dir / CONFIG_FILE_NAME, {"a": 1})
        assert dict(load_correction_table()) == {"a": 1}

    def test_default_search_uses_local_when_no_global(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("UI_PROTOTYPER_CONFIG_DIR", str(tmp_path / "user"))
        project = tmp_path / "project"
        monkeypatch.chdir(_write_config(project / CONFIG_FILE_NAME, {"b": 2}).parent)
        assert dict(load_correction_table()) == {"b": 2}


class TestGetCorrectionTable:
    def test_loads_once(self, monkeypatch) -> None:
        monkeypatch.setattr(corrections, "_correction_table", None)
        first = get_correction_table()
        assert get_correction_table() is first


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    def test_search_paths_order(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("UI_PROTOTYPER_CONFIG_DIR", str(tmp_path / "user"))
        paths = config_search_paths(tmp_path / "project")
        assert paths == [
            tmp_path / "user" / CONFIG_FILE_NAME,
            tmp_path / "project" / CONFIG_FILE_NAME,
        ]

    def test_default_global_dir(self, monkeypatch) -> None:
        monkeypatch.delenv("UI_PROTOTYPER_CONFIG_DIR", raising=False)
        global_path = config_search_paths()[0]
        assert global_path.parent.name == "ui-prototyper"
        assert global_path.parent.parent.name == ".config"

    def test_metadata_passes_through(self, tmp_path) -> None:
        path = _write_config(
            tmp_path / CONFIG_FILE_NAME,
            {"⚙\ufe0f": 1},
            timestamp="2026-01-01T00:00:00Z",
            terminal="xterm-256color",
            summary={"total": 1, "needsCorrection": 1},
            emojis={"⚙\ufe0f": {"actualWidth": 2}},
        )
        config = read_correction_config(path)
        assert config.corrections == {"⚙\ufe0f": 1}
        assert config.terminal == "xterm-256color"
        assert config.summary == {"total": 1, "needsCorrection": 1}
        assert config.model_extra == {"emojis": {"⚙\ufe0f": {"actualWidth": 2}}}

    def test_empty_record(self) -> None:
        assert CorrectionConfig.model_validate({}).corrections == {}
