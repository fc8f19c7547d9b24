from __future__ import annotations

import pytest
import requests

from gacha_browser.core.dataset_loader import is_url, load_dataset
from gacha_browser.core.exceptions import HeaderMismatch, LoadError

TABLE = "Name\tgachapon\tPercent\n龍之劍\t弓箭手村\t0.5%\nCafé Voucher\tKerning City\t15%\n"


class _FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


def test_load_from_file_decodes_utf8(tmp_path):
    path = tmp_path / "gachadata.csv"
    path.write_bytes(TABLE.encode("utf-8"))

    ds = load_dataset(path, location_label="Gachapon")

    assert [r.name for r in ds] == ["龍之劍", "Café Voucher"]
    assert ds.locations == {"弓箭手村", "Kerning City"}
    assert ds.source == str(path)
    assert ds.location_label == "Gachapon"


def test_byte_order_mark_is_dropped(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes(TABLE.encode("utf-8-sig"))

    assert len(load_dataset(path)) == 2


def test_missing_file_is_load_error(tmp_path):
    with pytest.raises(LoadError) as exc_info:
        load_dataset(tmp_path / "nope.csv")

    assert exc_info.value.reason == "file not found"


def test_invalid_utf8_is_load_error(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes("Name\tgachapon\tPercent\nCafé\tX\t1%\n".encode("latin-1"))

    with pytest.raises(LoadError):
        load_dataset(path)


def test_header_mismatch_propagates(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("Item\tLocation\tPercent\nSword\tTownA\t1%\n", encoding="utf-8")

    with pytest.raises(HeaderMismatch):
        load_dataset(path)


def test_load_from_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse(TABLE.encode("utf-8"))

    monkeypatch.setattr(requests, "get", fake_get)

    ds = load_dataset("https://example.org/gachadata.csv", timeout=3.0)

    assert len(ds) == 2
    assert calls == [("https://example.org/gachadata.csv", 3.0)]


def test_http_error_is_load_error(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: _FakeResponse(b"", status_code=404))

    with pytest.raises(LoadError) as exc_info:
        load_dataset("http://example.org/missing.csv")

    assert "404" in exc_info.value.reason


def test_unreachable_url_is_load_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", fake_get)

    with pytest.raises(LoadError):
        load_dataset("http://example.invalid/gachadata.csv")


def test_is_url():
    assert is_url("https://example.org/a.csv")
    assert is_url("http://example.org/a.csv")
    assert not is_url("data/gachadata.csv")
    assert not is_url("/abs/path.csv")
