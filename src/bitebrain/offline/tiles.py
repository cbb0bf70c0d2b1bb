"""Slippy-map tile math for offline region planning.

Web Mercator XYZ tiles: at zoom ``z`` the world is ``2**z`` tiles across, with
(0, 0) at the north-west corner.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_TILE_URL_TEMPLATE = (
    "https://api.mapbox.com/v4/mapbox.satellite/{z}/{x}/{y}@2x.webp?access_token={token}"
)

# Web Mercator is square between these latitudes.
MAX_MERCATOR_LAT = 85.05112878


@dataclass(frozen=True)
class TileCoord:
    x: int
    y: int
    z: int

    @property
    def key(self) -> str:
        """Storage key, ``z/x/y``."""
        return f"{self.z}/{self.x}/{self.y}"

    @classmethod
    def from_key(cls, key: str) -> TileCoord:
        z, x, y = (int(part) for part in key.split("/"))
        return cls(x=x, y=y, z=z)


@dataclass(frozen=True)
class Bounds:
    """Geographic bounding box in decimal degrees."""

    north: float
    south: float
    east: float
    west: float

    def __post_init__(self) -> None:
        if self.north < self.south:
            msg = f"north ({self.north}) must be >= south ({self.south})"
            raise ValueError(msg)
        if self.east < self.west:
            msg = f"east ({self.east}) must be >= west ({self.west})"
            raise ValueError(msg)


@dataclass(frozen=True)
class ZoomRange:
    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min < 0 or self.max < self.min:
            msg = f"Invalid zoom range: {self.min}..{self.max}"
            raise ValueError(msg)

    def levels(self) -> range:
        return range(self.min, self.max + 1)


def lat_lng_to_tile(lat: float, lng: float, zoom: int) -> tuple[int, int]:
    """Tile (x, y) containing a coordinate at ``zoom``.

    Latitude is clamped to the Mercator limit and indices to
    ``[0, 2**zoom - 1]``, so the poles and the antimeridian stay on the map.
    """
    n = 2**zoom
    lat_rad = math.radians(max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, lat)))
    x = math.floor((lng + 180) / 360 * n)
    y = math.floor((1 - math.log(math.tan(lat_rad) + 1 / math.cos(lat_rad)) / math.pi) / 2 * n)
    return min(max(x, 0), n - 1), min(max(y, 0), n - 1)


def tiles_in_bounds(bounds: Bounds, zoom_range: ZoomRange) -> list[TileCoord]:
    """Every tile covering ``bounds`` for each zoom level, ordered by z, x, y."""
    tiles: list[TileCoord] = []
    for z in zoom_range.levels():
        min_x, min_y = lat_lng_to_tile(bounds.north, bounds.west, z)
        max_x, max_y = lat_lng_to_tile(bounds.south, bounds.east, z)
        for x in range(min_x, max_x + 1):
            for y in range(min_y, max_y + 1):
                tiles.append(TileCoord(x=x, y=y, z=z))
    return tiles


def tile_url(coord: TileCoord, token: str, template: str = DEFAULT_TILE_URL_TEMPLATE) -> str:
    return template.format(z=coord.z, x=coord.x, y=coord.y, token=token)
