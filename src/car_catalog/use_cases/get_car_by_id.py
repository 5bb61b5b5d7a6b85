"""Get car by brand and ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.car import CarRecord, record_id_matches
from car_catalog.domain.errors import BrandNotFoundError, CarNotFoundError
from car_catalog.ports.catalog_store import CatalogStore


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car of a brand by ID."""

    brand: str
    car_id: str


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: CarRecord


class GetCarById:
    """
    Use case for retrieving a single car by brand and ID.

    Responsibilities:
    - Resolve the brand bucket (BrandNotFoundError if missing)
    - Scan the bucket in order and return the first car whose id matches
      on its string form (CarNotFoundError if none does)
    """

    def __init__(self, catalog_store: CatalogStore) -> None:
        """
        Initialize use case with dependencies.

        Args:
            catalog_store: Store holding the catalog
        """
        self._store = catalog_store

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Args:
            request: Request containing brand and car_id

        Returns:
            GetCarByIdResponse with the car

        Raises:
            BrandNotFoundError: If the brand does not exist
            CarNotFoundError: If the brand holds no car with the given id
        """
        records = self._store.snapshot().records_for(request.brand)

        if records is None:
            raise BrandNotFoundError(request.brand)

        for record in records:
            if record_id_matches(record, request.car_id):
                return GetCarByIdResponse(car=record)

        raise CarNotFoundError(brand=request.brand, car_id=request.car_id)
