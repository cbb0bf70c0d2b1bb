"""Tests for the offline region download flow."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

from bitebrain.flows import offline as offline_flow
from bitebrain.offline import OfflineMapError, OfflineMapService, TileCoord
from bitebrain.store import DataStore

WORLD = {"north": 85.0, "south": -85.0, "east": 179.0, "west": -179.0}


def _fake_download(failing: set[str] | None = None):  # type: ignore[no-untyped-def]
    calls: list[str] = []

    def download(coord: TileCoord, token: str, url_template: str) -> bytes:
        calls.append(coord.key)
        if failing and coord.key in failing:
            raise requests.ConnectionError(f"tile {coord.key} unreachable")
        return coord.key.encode()

    download.calls = calls  # type: ignore[attr-defined]
    return download


class TestDownloadRegionFlow:
    """Region downloads against a temporary store."""

    def test_downloads_every_tile(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        ds = DataStore(tmp_path)
        fake = _fake_download()
        monkeypatch.setattr(offline_flow, "store", ds)
        monkeypatch.setattr(offline_flow, "download_tile", fake)

        result = offline_flow.download_region(
            region_id="world", name="World", min_zoom=1, max_zoom=1, token="t", **WORLD
        )

        assert result["total"] == 4
        assert result["downloaded"] == 4
        assert result["failed"] == 0
        assert fake.calls == ["1/0/0", "1/0/1", "1/1/0", "1/1/1"]
        assert result["region"]["tiles"] == fake.calls
        assert result["region"]["size_bytes"] == sum(len(k) for k in fake.calls)

        service = OfflineMapService(ds)
        assert service.get_tile(TileCoord(x=1, y=0, z=1)) == b"1/1/0"
        region = service.get_region("world")
        assert region is not None
        assert region.name == "World"

    def test_failed_tiles_are_skipped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(offline_flow, "store", DataStore(tmp_path))
        monkeypatch.setattr(offline_flow, "download_tile", _fake_download({"1/0/1"}))

        result = offline_flow.download_region(
            region_id="world", name="World", min_zoom=1, max_zoom=1, token="t", **WORLD
        )

        assert result["downloaded"] == 3
        assert result["failed"] == 1
        assert "1/0/1" not in result["region"]["tiles"]
        assert not (tmp_path / "tiles" / "1" / "0" / "1.webp").exists()

    def test_progress_callback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(offline_flow, "store", DataStore(tmp_path))
        monkeypatch.setattr(offline_flow, "download_tile", _fake_download())
        progress: list[tuple[int, int, str]] = []

        offline_flow.download_region(
            region_id="world",
            name="World",
            min_zoom=0,
            max_zoom=1,
            token="t",
            on_progress=lambda done, total, key: progress.append((done, total, key)),
            **WORLD,
        )

        assert progress[0] == (1, 5, "0/0/0")
        assert progress[-1] == (5, 5, "1/1/1")

    def test_requires_token(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(offline_flow, "store", DataStore(tmp_path))

        with pytest.raises(OfflineMapError, match="token"):
            offline_flow.download_region(
                region_id="world", name="World", min_zoom=1, max_zoom=1, **WORLD
            )
        assert not (tmp_path / "regions" / "world.json").exists()

    def test_invalid_bounds(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(offline_flow, "store", DataStore(tmp_path))

        with pytest.raises(ValueError, match="north"):
            offline_flow.download_region(
                region_id="bad",
                name="Bad",
                north=10.0,
                south=20.0,
                east=5.0,
                west=0.0,
                min_zoom=1,
                max_zoom=1,
                token="t",
            )
