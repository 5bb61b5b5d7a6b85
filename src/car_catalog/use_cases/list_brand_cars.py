from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.car import CarRecord, normalize_brand_key
from car_catalog.domain.errors import BrandNotFoundError
from car_catalog.ports.catalog_store import CatalogStore


@dataclass(frozen=True, slots=True)
class ListBrandCarsRequest:
    brand: str


@dataclass(frozen=True, slots=True)
class ListBrandCarsResponse:
    brand: str
    cars: list[CarRecord]


class ListBrandCars:
    """
    Return the full bucket of a single brand.

    Unlike ListAllCars this path is not paginated.
    """

    def __init__(self, catalog_store: CatalogStore) -> None:
        self._store = catalog_store

    def execute(self, request: ListBrandCarsRequest) -> ListBrandCarsResponse:
        """
        Raises:
            BrandNotFoundError: If no bucket exists for the brand
        """
        records = self._store.snapshot().records_for(request.brand)

        if records is None:
            raise BrandNotFoundError(request.brand)

        return ListBrandCarsResponse(
            brand=normalize_brand_key(request.brand),
            cars=list(records),
        )
