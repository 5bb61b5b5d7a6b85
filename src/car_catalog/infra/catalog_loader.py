"""Load brand inventories from JSON files on disk.

Each brand lives in its own ``<prefix><Brand>.json`` file holding a JSON array
of car objects. The brand key is the file stem with the prefix stripped,
trimmed and lowercased (``CarToyota.json`` -> ``toyota``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from car_catalog.adapters.in_memory_catalog_store import InMemoryCatalogStore
from car_catalog.domain.car import normalize_brand_key
from car_catalog.domain.errors import LoadError
from car_catalog.infra import strict_json
from car_catalog.infra.config import catalog_data_dir, catalog_file_prefix

logger = logging.getLogger(__name__)


def brand_key_from_path(path: Path, prefix: str) -> str:
    stem = path.stem
    if stem.startswith(prefix):
        stem = stem[len(prefix) :]
    return normalize_brand_key(stem)


def read_brand_sources(data_dir: Path, prefix: str) -> list[tuple[str, Any]]:
    """
    Read every brand file in ``data_dir``.

    Files are visited in sorted name order so brand order is stable.

    Raises:
        LoadError: If the directory is missing, or a file is unreadable
            or not standard JSON (NaN and Infinity are rejected)
    """
    if not data_dir.is_dir():
        raise LoadError(f"Catalog data directory not found: {data_dir}", path=str(data_dir))

    sources: list[tuple[str, Any]] = []
    for path in sorted(data_dir.glob(f"{prefix}*.json")):
        brand = brand_key_from_path(path, prefix)
        try:
            content = strict_json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise LoadError(f"Could not read {path.name}: {exc}", path=str(path)) from exc

        sources.append((brand, content))
        logger.info("Data loaded for brand", extra={"brand": brand, "file": path.name})

    return sources


def load_catalog(
    data_dir: Path | None = None,
    prefix: str | None = None,
) -> InMemoryCatalogStore:
    """
    Build the catalog store from the configured data directory.

    Args:
        data_dir: Directory to scan (defaults to CATALOG_DATA_DIR)
        prefix: Brand file prefix (defaults to CATALOG_FILE_PREFIX)

    Returns:
        A fully initialized in-memory store

    Raises:
        LoadError: If any source cannot be read or is not a list of records
    """
    data_dir = data_dir if data_dir is not None else catalog_data_dir()
    prefix = prefix if prefix is not None else catalog_file_prefix()

    store = InMemoryCatalogStore.from_sources(read_brand_sources(data_dir, prefix))

    snapshot = store.snapshot()
    logger.info(
        "All car data loaded into memory",
        extra={
            "brands": snapshot.brands(),
            "total_cars": sum(len(records) for records in snapshot.buckets.values()),
        },
    )
    return store
