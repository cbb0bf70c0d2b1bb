"""Tiered data store with freshness-aware caching.

Manages read/write of data files organized into tiers:
  - regions/: Offline map region manifests (one JSON file per region)
  - tiles/: Downloaded map tiles, stored as ``tiles/{z}/{x}/{y}.webp``
  - derived/: Computed outputs such as the weekly outlook

Every JSON file is wrapped in a metadata envelope with ``valid_until`` so
flows can skip work whose output is still fresh.

Binary files (map tiles) use a sidecar ``.meta.json`` pattern via
``write_bytes()``: the data file stays in its native format and freshness
metadata lives alongside it.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

META_SUFFIX = ".meta.json"


def _build_meta(source: str, valid_until: datetime | None, params: dict[str, Any]) -> dict[str, Any]:
    meta: dict[str, Any] = {
        "source": source,
        "fetched_at": datetime.now(UTC).isoformat(),
    }
    if valid_until is not None:
        meta["valid_until"] = valid_until.isoformat()
    if params:
        meta.update(params)
    return meta


class DataStore:
    """Manages read/write of cached data files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.regions = base_dir / "regions"
        self.tiles = base_dir / "tiles"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``derived/outlook.json``).
            data: Payload to store under the ``data`` key.
            source: Data source identifier (e.g. ``"bitebrain.flows.outlook"``).
            valid_until: Expiry timestamp. None means never fresh.
            **params: Extra metadata fields (location, query params, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        envelope = {"meta": _build_meta(source, valid_until, params), "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def write_bytes(
        self,
        path: Path,
        content: bytes,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Store a binary blob with sidecar metadata.

        Returns:
            Absolute path of the stored file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)
        full.write_bytes(content)

        meta = _build_meta(source, valid_until, params)
        meta["size_bytes"] = len(content)
        with self._sidecar(full).open("w") as f:
            json.dump({"meta": meta}, f, indent=2)

        return full

    def read_bytes(self, path: Path) -> bytes | None:
        full = self._resolve(path)
        if not full.exists():
            return None
        return full.read_bytes()

    def delete(self, path: Path) -> bool:
        """Remove a file and its sidecar. Returns False if it didn't exist."""
        full = self._resolve(path)
        sidecar = self._sidecar(full)
        if sidecar.exists():
            sidecar.unlink()
        if not full.exists():
            return False
        full.unlink()
        return True

    def list_files(self, tier: Path, pattern: str = "*") -> list[Path]:
        """Data files under ``tier`` (recursively) relative to base, sorted.

        Sidecar metadata files are never listed.
        """
        root = self._resolve(tier)
        if not root.exists():
            return []
        return sorted(
            p.relative_to(self.base)
            for p in root.rglob(pattern)
            if p.is_file() and not p.name.endswith(META_SUFFIX)
        )

    def file_path(self, path: Path) -> Path | None:
        """Return the absolute path of a stored file, or None if missing."""
        full = self._resolve(path)
        return full if full.exists() else None

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    @staticmethod
    def _sidecar(full: Path) -> Path:
        return full.with_suffix(full.suffix + META_SUFFIX)

    def _read_meta(self, full: Path) -> dict[str, Any]:
        """Read metadata from either a JSON envelope or a sidecar .meta.json."""
        sidecar = self._sidecar(full)
        if sidecar.exists():
            with sidecar.open() as f:
                result: dict[str, Any] = json.load(f)
            return result.get("meta", {})

        # Fall back to embedded metadata in JSON files
        if full.suffix == ".json" and full.exists():
            with full.open() as f:
                envelope: dict[str, Any] = json.load(f)
            return envelope.get("meta", {})

        return {}

    def read_meta(self, path: Path) -> dict[str, Any]:
        """Metadata for a stored file (empty dict if it has none)."""
        return self._read_meta(self._resolve(path))

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Works with both JSON envelopes and sidecar .meta.json files.
        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        full = self._resolve(path)
        if not full.exists():
            return False

        meta = self._read_meta(full)
        valid_until = meta.get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry
