from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from car_catalog.domain.car import CarRecord, normalize_brand_key


@dataclass(frozen=True)
class CatalogSnapshot:
    """
    Immutable view of the catalog captured at a single point in time.

    Brands keep insertion order; records keep load order then append order.
    """

    buckets: Mapping[str, tuple[CarRecord, ...]]

    def brands(self) -> list[str]:
        return list(self.buckets)

    def records_for(self, brand: str) -> tuple[CarRecord, ...] | None:
        return self.buckets.get(normalize_brand_key(brand))

    def all_records(self) -> Iterator[CarRecord]:
        for records in self.buckets.values():
            yield from records

    @classmethod
    def empty(cls) -> CatalogSnapshot:
        return cls(buckets=MappingProxyType({}))


class CatalogStore(ABC):
    """
    Port for the brand → cars catalog.

    Contract:
        - Brand keys are normalized (trimmed, lowercased) on every call
        - Reads go through snapshot(); a snapshot never observes a partial append
        - append() performs no id uniqueness check
    """

    @abstractmethod
    def snapshot(self) -> CatalogSnapshot:
        """Return the current immutable view of the catalog."""
        ...

    @abstractmethod
    def append(self, brand: str, record: CarRecord) -> CarRecord:
        """
        Append a record to a brand bucket, creating the bucket when missing.

        Returns:
            The stored record
        """
        ...

    @abstractmethod
    def next_id(self) -> int:
        """Synthesize an id for a new record, increasing within this store."""
        ...

    def brands(self) -> list[str]:
        return self.snapshot().brands()

    def records_for(self, brand: str) -> tuple[CarRecord, ...] | None:
        return self.snapshot().records_for(brand)

    def all_records(self) -> Iterator[CarRecord]:
        return self.snapshot().all_records()
