from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.car import Paging, PagedResult, paginate
from car_catalog.ports.catalog_store import CatalogStore


@dataclass(frozen=True, slots=True)
class ListAllCarsRequest:
    paging: Paging
    pagination_enabled: bool = True


class ListAllCars:
    """
    List every car across all brands.

    Order is brand insertion order, then record order within each brand.
    With pagination disabled the whole catalog is returned and no page
    metadata is produced.
    """

    def __init__(self, catalog_store: CatalogStore) -> None:
        self._store = catalog_store

    def execute(self, request: ListAllCarsRequest) -> PagedResult:
        cars = list(self._store.snapshot().all_records())

        if not request.pagination_enabled:
            return PagedResult(results=cars, total=len(cars))

        return paginate(cars, request.paging)
