"""Offline map storage: fetch tiles over HTTP and keep regions in the store.

Tiles live in the ``tiles/`` tier keyed by ``z/x/y`` and are shared between
regions. A region is a JSON manifest in ``regions/`` listing its tile keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bitebrain.offline.tiles import (
    DEFAULT_TILE_URL_TEMPLATE,
    Bounds,
    TileCoord,
    ZoomRange,
    tile_url,
)
from bitebrain.services.http import session as default_session

if TYPE_CHECKING:
    import requests

    from bitebrain.store import DataStore

logger = logging.getLogger(__name__)

#: Storage budget reported as available; the file store has no hard quota.
AVAILABLE_STORAGE_BYTES = 50 * 1024 * 1024
TILE_EXTENSION = ".webp"
TILE_SOURCE = "mapbox.satellite"


class OfflineMapError(RuntimeError):
    """Raised when tiles cannot be fetched (e.g. no access token configured)."""


@dataclass
class OfflineRegion:
    id: str
    name: str
    bounds: Bounds
    zoom_levels: ZoomRange
    tiles: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    size_bytes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "bounds": {
                "north": self.bounds.north,
                "south": self.bounds.south,
                "east": self.bounds.east,
                "west": self.bounds.west,
            },
            "zoom_levels": {"min": self.zoom_levels.min, "max": self.zoom_levels.max},
            "tiles": list(self.tiles),
            "created_at": self.created_at.isoformat(),
            "size_bytes": self.size_bytes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OfflineRegion:
        return cls(
            id=data["id"],
            name=data["name"],
            bounds=Bounds(**data["bounds"]),
            zoom_levels=ZoomRange(**data["zoom_levels"]),
            tiles=list(data.get("tiles", [])),
            created_at=datetime.fromisoformat(data["created_at"]),
            size_bytes=int(data.get("size_bytes", 0)),
        )


@dataclass(frozen=True)
class StorageUsage:
    used: int
    available: int


class OfflineMapService:
    """Download tiles and persist offline regions in a ``DataStore``."""

    def __init__(
        self,
        store: DataStore,
        token: str | None = None,
        session: requests.Session | None = None,
        url_template: str = DEFAULT_TILE_URL_TEMPLATE,
    ) -> None:
        self.store = store
        self.token = token
        self.session = session or default_session
        self.url_template = url_template

    def set_token(self, token: str) -> None:
        self.token = token

    # -- tiles ---------------------------------------------------------------

    @staticmethod
    def tile_path(coord: TileCoord) -> Path:
        return Path("tiles") / f"{coord.key}{TILE_EXTENSION}"

    def fetch_tile(self, coord: TileCoord) -> bytes:
        """Download one tile.

        Raises:
            OfflineMapError: No access token is configured.
            requests.HTTPError: The tile server answered with an error status.
        """
        if not self.token:
            msg = "Map tile access token not set"
            raise OfflineMapError(msg)

        resp = self.session.get(tile_url(coord, self.token, self.url_template))
        resp.raise_for_status()
        return resp.content

    def save_tile(self, coord: TileCoord, content: bytes) -> Path:
        return self.store.write_bytes(
            self.tile_path(coord),
            content,
            source=TILE_SOURCE,
            x=coord.x,
            y=coord.y,
            z=coord.z,
        )

    def get_tile(self, coord: TileCoord) -> bytes | None:
        return self.store.read_bytes(self.tile_path(coord))

    # -- regions -------------------------------------------------------------

    @staticmethod
    def region_path(region_id: str) -> Path:
        return Path("regions") / f"{region_id}.json"

    def save_region(self, region: OfflineRegion) -> Path:
        return self.store.write(
            self.region_path(region.id),
            region.to_dict(),
            source="bitebrain.offline",
            tile_count=len(region.tiles),
        )

    def get_region(self, region_id: str) -> OfflineRegion | None:
        data = self.store.read(self.region_path(region_id))
        if data is None:
            return None
        return OfflineRegion.from_dict(data)

    def list_regions(self) -> list[OfflineRegion]:
        regions: list[OfflineRegion] = []
        for path in self.store.list_files(Path("regions"), "*.json"):
            data = self.store.read(path)
            if data is not None:
                regions.append(OfflineRegion.from_dict(data))
        return regions

    def delete_region(self, region_id: str) -> bool:
        """Remove a region and any of its tiles no other region still uses.

        Returns False if the region did not exist.
        """
        region = self.get_region(region_id)
        if region is None:
            return False

        self.store.delete(self.region_path(region_id))
        still_used = {key for other in self.list_regions() for key in other.tiles}
        removed = 0
        for key in region.tiles:
            if key in still_used:
                continue
            if self.store.delete(self.tile_path(TileCoord.from_key(key))):
                removed += 1
        logger.info("Deleted region %s (%d tiles removed)", region_id, removed)
        return True

    def storage_usage(self) -> StorageUsage:
        """Bytes used by stored tiles, against a fixed 50 MiB budget."""
        used = 0
        for path in self.store.list_files(Path("tiles")):
            full = self.store.file_path(path)
            if full is not None:
                used += full.stat().st_size
        return StorageUsage(used=used, available=AVAILABLE_STORAGE_BYTES)
