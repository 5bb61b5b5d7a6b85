from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.car import Paging, PagedResult, SearchFilters, paginate
from car_catalog.ports.catalog_store import CatalogStore


@dataclass(frozen=True, slots=True)
class SearchCarCatalogRequest:
    filters: SearchFilters
    paging: Paging


class SearchCarCatalog:
    """
    Search the whole catalog with optional filters and pagination.

    - Filters use AND semantics over every brand
    - Paging is applied AFTER filtering
    - total on the result counts matches before paging
    """

    def __init__(self, catalog_store: CatalogStore) -> None:
        self._store = catalog_store

    def execute(self, request: SearchCarCatalogRequest) -> PagedResult:
        """
        Execute catalog search.

        Args:
            request: Search parameters (filters and paging)

        Returns:
            Paged result over the matching cars
        """
        snapshot = self._store.snapshot()
        matches = [car for car in snapshot.all_records() if request.filters.matches(car)]

        return paginate(matches, request.paging)
