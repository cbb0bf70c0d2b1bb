"""
Prefect flow for downloading an offline map region.

Computes the tiles covering a bounding box, fetches each one in a retried
task, stores it, and writes the region manifest. Tiles that still fail after
retries are logged and left out of the region.

Run locally:
    BITEBRAIN_MAPBOX_TOKEN=... bitebrain offline --name "Home lake" 40.1 39.9 -98.4 -98.7
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import requests
from prefect import flow, task

from bitebrain.config import get_settings
from bitebrain.offline import (
    DEFAULT_TILE_URL_TEMPLATE,
    Bounds,
    OfflineMapError,
    OfflineMapService,
    OfflineRegion,
    TileCoord,
    ZoomRange,
    tiles_in_bounds,
)
from bitebrain.store import DataStore

logger = logging.getLogger(__name__)

# Data store with tiered directories
store = DataStore(get_settings().data_dir)

#: Receives (completed, total, tile key) after each stored tile.
ProgressCallback = Callable[[int, int, str], None]


def _service(token: str | None, url_template: str) -> OfflineMapService:
    return OfflineMapService(store, token=token, url_template=url_template)


@task(name="download-tile", retries=2, retry_delay_seconds=5)
def download_tile(
    coord: TileCoord, token: str, url_template: str = DEFAULT_TILE_URL_TEMPLATE
) -> bytes:
    """Fetch a single tile from the tile server."""
    return _service(token, url_template).fetch_tile(coord)


@flow(name="download-region", log_prints=True)
def download_region(
    region_id: str,
    name: str,
    north: float,
    south: float,
    east: float,
    west: float,
    min_zoom: int,
    max_zoom: int,
    token: str | None = None,
    url_template: str = DEFAULT_TILE_URL_TEMPLATE,
    on_progress: ProgressCallback | None = None,
) -> dict[str, Any]:
    """
    Download every tile of a region and save its manifest.

    Raises:
        OfflineMapError: No tile access token was given.
    """
    if not token:
        msg = "Map tile access token not set"
        raise OfflineMapError(msg)

    bounds = Bounds(north=north, south=south, east=east, west=west)
    zoom_levels = ZoomRange(min=min_zoom, max=max_zoom)
    tiles = tiles_in_bounds(bounds, zoom_levels)
    service = _service(token, url_template)
    region = OfflineRegion(id=region_id, name=name, bounds=bounds, zoom_levels=zoom_levels)

    total = len(tiles)
    print(f"Downloading {total} tiles for region '{name}' (z{min_zoom}-{max_zoom})...")
    failed = 0
    for coord in tiles:
        try:
            content = download_tile(coord, token, url_template)
        except (requests.RequestException, OfflineMapError) as exc:
            failed += 1
            logger.warning("Failed to download tile %s: %s", coord.key, exc)
            continue

        service.save_tile(coord, content)
        region.tiles.append(coord.key)
        region.size_bytes += len(content)
        if on_progress is not None:
            on_progress(len(region.tiles), total, coord.key)

    path = service.save_region(region)
    print(f"Saved region {region_id}: {len(region.tiles)}/{total} tiles to {path}")
    return {
        "region": region.to_dict(),
        "total": total,
        "downloaded": len(region.tiles),
        "failed": failed,
    }
