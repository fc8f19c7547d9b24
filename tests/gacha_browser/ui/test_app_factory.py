import json

from gacha_browser.config.loader import DATA_SOURCE_ENV
from gacha_browser.ui.dash_app import create_dash_app


def test_create_dash_app_from_config_dir(tmp_path, monkeypatch):
    monkeypatch.delenv(DATA_SOURCE_ENV, raising=False)
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "gachadata.csv").write_text(
        "Name\tgachapon\tPercent\nSword\tTownA\t1%\n", encoding="utf-8"
    )
    (tmp_path / "global.json").write_text(
        json.dumps({"ui_title": "Test Browser", "data_source": "data/gachadata.csv"}),
        encoding="utf-8",
    )

    app = create_dash_app(tmp_path)

    assert app.title == "Test Browser"
    assert app.layout is not None
