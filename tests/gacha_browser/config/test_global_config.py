import json
from pathlib import Path

import pytest

from gacha_browser.config.loader import DATA_SOURCE_ENV, load_global_config
from gacha_browser.core.exceptions import ConfigError
from gacha_browser.core.table_parser import DEFAULT_LOCATION_COLUMNS


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv(DATA_SOURCE_ENV, raising=False)


def _write_config(root: Path, raw: dict) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(raw), encoding="utf-8")
    return root


def test_load_global_config_resolves_relative_source(tmp_path):
    root = _write_config(
        tmp_path / "config",
        {
            "ui_title": "Test Browser",
            "data_source": "data/gachadata.csv",
            "location_column": "gachapon",
            "location_label": "Gachapon",
            "request_timeout": 5,
        },
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "Test Browser"
    assert cfg.data_source == str((root / "data" / "gachadata.csv").resolve())
    assert cfg.location_columns == ("gachapon",)
    assert cfg.location_label == "Gachapon"
    assert cfg.request_timeout == 5.0


def test_defaults_and_url_source(tmp_path):
    root = _write_config(tmp_path, {"data_source": "https://example.org/gachadata.csv"})

    cfg = load_global_config(root)

    assert cfg.data_source == "https://example.org/gachadata.csv"
    assert cfg.ui_title == "Gacha Browser"
    assert cfg.location_columns == DEFAULT_LOCATION_COLUMNS
    assert cfg.location_label == "Location"


def test_env_var_overrides_data_source(tmp_path, monkeypatch):
    root = _write_config(tmp_path, {"data_source": "data/gachadata.csv"})
    monkeypatch.setenv(DATA_SOURCE_ENV, "/srv/drops.tsv")

    assert load_global_config(root).data_source == str(Path("/srv/drops.tsv"))


def test_missing_global_json(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"data_source": 42},
        {"data_source": "a.csv", "location_column": []},
        {"data_source": "a.csv", "request_timeout": "soon"},
        {"data_source": "a.csv", "request_timeout": 0},
    ],
)
def test_invalid_values_raise_config_error(tmp_path, raw):
    root = _write_config(tmp_path, raw)

    with pytest.raises(ConfigError):
        load_global_config(root)


def test_shipped_config_loads():
    root = Path(__file__).resolve().parents[3] / "config"

    cfg = load_global_config(root)

    assert Path(cfg.data_source).is_file()
