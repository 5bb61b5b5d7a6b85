"""Add a car to the in-memory catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from car_catalog.domain.car import CarRecord, normalize_brand_key, parse_int, parse_number
from car_catalog.domain.errors import ValidationError
from car_catalog.ports.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "model", "price", "brand")


@dataclass(frozen=True, slots=True)
class AddCarRequest:
    """Raw car fields as sent by the client; unknown fields pass through."""

    fields: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class AddCarResponse:
    brand: str
    car: CarRecord


class AddCar:
    """
    Validate and append a new car.

    Rules:
    - title, model, price and brand are required (absent, null or blank counts
      as missing)
    - model must be an integer and price a finite number
    - id is synthesized by the store; it overrides any id sent by the client
    - The catalog is only touched once every check has passed

    Added cars live in memory for the lifetime of the process.
    """

    def __init__(self, catalog_store: CatalogStore) -> None:
        self._store = catalog_store

    def execute(self, request: AddCarRequest) -> AddCarResponse:
        """
        Raises:
            ValidationError: If required fields are missing or model/price
                are not numeric
        """
        fields = request.fields

        missing = [name for name in REQUIRED_FIELDS if _is_blank(fields.get(name))]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}.",
                errors=[
                    {"field": name, "message": "Field is required", "code": "MISSING_FIELD"}
                    for name in missing
                ],
            )

        errors = []

        model = parse_int(fields["model"])
        if model is None:
            errors.append(
                {
                    "field": "model",
                    "message": f"Must be an integer: {fields['model']}",
                    "code": "INVALID_INTEGER",
                }
            )

        price = parse_number(fields["price"])
        if price is None:
            errors.append(
                {
                    "field": "price",
                    "message": f"Must be a number: {fields['price']}",
                    "code": "INVALID_NUMBER",
                }
            )

        if not isinstance(fields["brand"], str):
            errors.append(
                {"field": "brand", "message": "Must be a string", "code": "INVALID_STRING"}
            )

        if errors:
            raise ValidationError(errors=errors)

        car: CarRecord = {
            **fields,
            "id": self._store.next_id(),
            "model": model,
            "price": price,
        }
        brand = normalize_brand_key(fields["brand"])
        stored = self._store.append(brand, car)

        logger.info("Car added to memory", extra={"brand": brand, "car_id": stored["id"]})

        return AddCarResponse(brand=brand, car=stored)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
