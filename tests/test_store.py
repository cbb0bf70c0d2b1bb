"""Tests for the DataStore module."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from bitebrain.store import DataStore


class TestDataStoreInit:
    """Test DataStore initialization."""

    def test_creates_tier_paths(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.base == tmp_path
        assert store.regions == tmp_path / "regions"
        assert store.tiles == tmp_path / "tiles"
        assert store.derived == tmp_path / "derived"


class TestDataStoreWrite:
    """Test writing data with metadata envelopes."""

    def test_write_creates_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        path = store.write(Path("derived/outlook.json"), {"season": "spring"}, source="test")
        assert path.exists()

    def test_write_envelope_format(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        valid = datetime(2026, 3, 1, tzinfo=UTC)
        store.write(Path("derived/outlook.json"), {"temp": 20}, source="outlook", valid_until=valid)

        data = json.loads((tmp_path / "derived" / "outlook.json").read_text())
        assert data["meta"]["source"] == "outlook"
        assert "fetched_at" in data["meta"]
        assert data["meta"]["valid_until"] == valid.isoformat()
        assert data["data"] == {"temp": 20}

    def test_write_extra_params(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(
            Path("derived/test.json"),
            {},
            source="test",
            location={"lat": 39.8, "lon": -98.6},
        )
        data = json.loads((tmp_path / "derived" / "test.json").read_text())
        assert data["meta"]["location"] == {"lat": 39.8, "lon": -98.6}

    def test_write_no_valid_until(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/output.json"), {}, source="test")
        data = json.loads((tmp_path / "derived" / "output.json").read_text())
        assert "valid_until" not in data["meta"]

    def test_write_list_payload(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/list.json"), [1, 2, 3], source="test")
        assert store.read(Path("derived/list.json")) == [1, 2, 3]


class TestDataStoreRead:
    """Test reading data from the store."""

    def test_read_returns_data_payload(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("regions/home.json"), {"key": "value"}, source="test")
        assert store.read(Path("regions/home.json")) == {"key": "value"}

    def test_read_missing_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read(Path("nonexistent.json")) is None

    def test_read_raw_returns_full_envelope(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("regions/home.json"), {"key": "value"}, source="test")
        result = store.read_raw(Path("regions/home.json"))
        assert result is not None
        assert result["data"] == {"key": "value"}
        assert result["meta"]["source"] == "test"

    def test_read_raw_missing_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read_raw(Path("nonexistent.json")) is None


class TestDataStoreBytes:
    """Test binary blobs with sidecar metadata."""

    def test_write_bytes_creates_sidecar(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        result = store.write_bytes(Path("tiles/10/5/7.webp"), b"tile", source="mapbox", z=10)

        assert result.read_bytes() == b"tile"
        sidecar = result.with_suffix(".webp.meta.json")
        meta = json.loads(sidecar.read_text())["meta"]
        assert meta["source"] == "mapbox"
        assert meta["size_bytes"] == 4
        assert meta["z"] == 10

    def test_read_bytes(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write_bytes(Path("tiles/1/0/0.webp"), b"\x00\x01", source="test")
        assert store.read_bytes(Path("tiles/1/0/0.webp")) == b"\x00\x01"

    def test_read_bytes_missing(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read_bytes(Path("tiles/1/0/0.webp")) is None

    def test_is_fresh_via_sidecar(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        future = datetime.now(UTC) + timedelta(days=30)
        store.write_bytes(Path("tiles/2/1/1.webp"), b"x", source="test", valid_until=future)
        assert store.is_fresh(Path("tiles/2/1/1.webp")) is True

    def test_read_meta_from_sidecar(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write_bytes(Path("tiles/2/1/1.webp"), b"abc", source="test")
        assert store.read_meta(Path("tiles/2/1/1.webp"))["size_bytes"] == 3

    def test_read_meta_missing(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read_meta(Path("tiles/9/9/9.webp")) == {}


class TestDataStoreDeleteAndList:
    """Test deleting and listing stored files."""

    def test_delete_removes_file_and_sidecar(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        path = store.write_bytes(Path("tiles/3/2/1.webp"), b"x", source="test")

        assert store.delete(Path("tiles/3/2/1.webp")) is True
        assert not path.exists()
        assert not path.with_suffix(".webp.meta.json").exists()

    def test_delete_missing_returns_false(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.delete(Path("regions/none.json")) is False

    def test_list_files_skips_sidecars(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write_bytes(Path("tiles/3/2/1.webp"), b"x", source="test")
        store.write_bytes(Path("tiles/3/2/2.webp"), b"y", source="test")

        assert store.list_files(Path("tiles")) == [
            Path("tiles/3/2/1.webp"),
            Path("tiles/3/2/2.webp"),
        ]

    def test_list_files_with_pattern(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("regions/a.json"), {}, source="test")
        store.write(Path("regions/b.json"), {}, source="test")
        store.write_bytes(Path("regions/notes.txt"), b"", source="test")

        assert store.list_files(Path("regions"), "*.json") == [
            Path("regions/a.json"),
            Path("regions/b.json"),
        ]

    def test_list_files_missing_tier(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.list_files(Path("tiles")) == []


class TestDataStoreIsFresh:
    """Test freshness checking."""

    def test_missing_file_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.is_fresh(Path("nonexistent.json")) is False

    def test_expired_file_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        past = datetime.now(UTC) - timedelta(hours=1)
        store.write(Path("derived/test.json"), {}, source="test", valid_until=past)
        assert store.is_fresh(Path("derived/test.json")) is False

    def test_future_valid_until_is_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        future = datetime.now(UTC) + timedelta(hours=6)
        store.write(Path("derived/test.json"), {}, source="test", valid_until=future)
        assert store.is_fresh(Path("derived/test.json")) is True

    def test_no_valid_until_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/test.json"), {}, source="test")
        assert store.is_fresh(Path("derived/test.json")) is False


class TestDataStorePathSafety:
    """Paths must stay inside the base directory."""

    def test_parent_traversal_rejected(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        with pytest.raises(ValueError, match="escapes"):
            store.write(Path("../outside.json"), {}, source="test")

    def test_absolute_outside_rejected(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        with pytest.raises(ValueError, match="escapes"):
            store.read(tmp_path / "elsewhere.json")

    def test_file_path_missing(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.file_path(Path("tiles/missing.webp")) is None
