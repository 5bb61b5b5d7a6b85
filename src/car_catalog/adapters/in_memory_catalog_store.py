from __future__ import annotations

import threading
import time
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from car_catalog.domain.car import CarRecord, normalize_brand_key
from car_catalog.domain.errors import LoadError
from car_catalog.ports.catalog_store import CatalogSnapshot, CatalogStore


class InMemoryCatalogStore(CatalogStore):
    """
    Process-lifetime catalog held in memory.

    - Brands keep insertion order, records keep load then append order
    - Appends are serialized by a lock and publish a fresh snapshot
      (copy-on-append), so readers holding a snapshot never see a torn write
    - Nothing is persisted
    """

    def __init__(self, buckets: Mapping[str, Sequence[CarRecord]] | None = None) -> None:
        self._lock = threading.Lock()
        self._last_id = 0
        self._snapshot = CatalogSnapshot.empty()
        if buckets:
            self._snapshot = _freeze(
                {normalize_brand_key(brand): tuple(records) for brand, records in buckets.items()}
            )

    @classmethod
    def from_sources(cls, sources: Iterable[tuple[str, Any]]) -> InMemoryCatalogStore:
        """
        Build a store from ``(brand, records)`` sources.

        All sources are validated before the store is created, so a bad source
        never leaves a partially initialized catalog behind.

        Raises:
            LoadError: If a source is not a list of record objects, or two
                sources share a brand key
        """
        buckets: dict[str, tuple[CarRecord, ...]] = {}
        for brand, records in sources:
            key = normalize_brand_key(brand)
            if key in buckets:
                # e.g. CarToyota.json and Cartoyota.json on a case-sensitive filesystem
                raise LoadError(f"Brand '{key}' is defined by more than one source", brand=key)
            if not isinstance(records, (list, tuple)):
                raise LoadError(
                    f"Source for brand '{key}' must be a list of records, "
                    f"got {type(records).__name__}",
                    brand=key,
                )
            for position, record in enumerate(records):
                if not isinstance(record, dict):
                    raise LoadError(
                        f"Record #{position} of brand '{key}' is not an object",
                        brand=key,
                    )
            buckets[key] = tuple(records)
        return cls(buckets)

    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    def append(self, brand: str, record: CarRecord) -> CarRecord:
        key = normalize_brand_key(brand)
        stored = dict(record)
        with self._lock:
            buckets = dict(self._snapshot.buckets)
            buckets[key] = buckets.get(key, ()) + (stored,)
            self._snapshot = _freeze(buckets)
        return stored

    def next_id(self) -> int:
        with self._lock:
            # Millisecond clock, bumped when two calls land in the same tick
            self._last_id = max(int(time.time() * 1000), self._last_id + 1)
            return self._last_id


def _freeze(buckets: dict[str, tuple[CarRecord, ...]]) -> CatalogSnapshot:
    return CatalogSnapshot(buckets=MappingProxyType(buckets))
