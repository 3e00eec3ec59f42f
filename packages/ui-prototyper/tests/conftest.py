import pytest

from ui_prototyper import corrections, width
from ui_prototyper.corrections import CorrectionTable
from ui_prototyper.width import WidthModel


@pytest.fixture(autouse=True)
def builtin_width_model(monkeypatch, tmp_path):
    """Pin the process-wide model to the built-in table, ignoring user config."""
    monkeypatch.setenv("UI_PROTOTYPER_CONFIG_DIR", str(tmp_path / "config"))
    table = CorrectionTable.default()
    model = WidthModel(table)
    monkeypatch.setattr(corrections, "_correction_table", table)
    monkeypatch.setattr(width, "_width_model", model)
    return model
