"""Offline map regions.

- tiles: XYZ tile math (``lat_lng_to_tile``, ``tiles_in_bounds``, ``tile_url``)
- service: ``OfflineMapService`` for fetching tiles and storing regions

The download loop itself is a Prefect flow, see ``flows/offline.py``.
"""

from bitebrain.offline.service import (
    AVAILABLE_STORAGE_BYTES,
    OfflineMapError,
    OfflineMapService,
    OfflineRegion,
    StorageUsage,
)
from bitebrain.offline.tiles import (
    DEFAULT_TILE_URL_TEMPLATE,
    Bounds,
    TileCoord,
    ZoomRange,
    lat_lng_to_tile,
    tile_url,
    tiles_in_bounds,
)

__all__ = [
    "AVAILABLE_STORAGE_BYTES",
    "DEFAULT_TILE_URL_TEMPLATE",
    "Bounds",
    "OfflineMapError",
    "OfflineMapService",
    "OfflineRegion",
    "StorageUsage",
    "TileCoord",
    "ZoomRange",
    "lat_lng_to_tile",
    "tile_url",
    "tiles_in_bounds",
]
