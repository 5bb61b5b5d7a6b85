"""Test suite for GetCarById use case."""

from __future__ import annotations

import pytest

from car_catalog.adapters.in_memory_catalog_store import InMemoryCatalogStore
from car_catalog.domain.errors import BrandNotFoundError, CarNotFoundError
from car_catalog.use_cases.get_car_by_id import (
    GetCarById,
    GetCarByIdRequest,
    GetCarByIdResponse,
)


@pytest.fixture()
def store() -> InMemoryCatalogStore:
    return InMemoryCatalogStore.from_sources(
        [
            (
                "toyota",
                [
                    {"id": 1, "title": "Corolla"},
                    {"id": 2, "title": "Camry"},
                    {"id": 2, "title": "Camry duplicate"},
                    {"title": "No id"},
                ],
            ),
            ("bmw", [{"id": "bmw-001", "title": "Serie 3"}]),
            ("honda", [{"id": 1, "title": "Civic"}]),
        ]
    )


@pytest.fixture()
def use_case(store: InMemoryCatalogStore) -> GetCarById:
    return GetCarById(catalog_store=store)


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_numeric_id_matches_string_request(use_case: GetCarById) -> None:
    result = use_case.execute(GetCarByIdRequest(brand="toyota", car_id="1"))

    assert isinstance(result, GetCarByIdResponse)
    assert result.car == {"id": 1, "title": "Corolla"}


def test_string_id(use_case: GetCarById) -> None:
    result = use_case.execute(GetCarByIdRequest(brand="BMW", car_id="bmw-001"))

    assert result.car["title"] == "Serie 3"


def test_same_id_in_other_brand_is_not_confused(use_case: GetCarById) -> None:
    result = use_case.execute(GetCarByIdRequest(brand="honda", car_id="1"))

    assert result.car["title"] == "Civic"


def test_first_match_wins_on_duplicate_ids(use_case: GetCarById) -> None:
    result = use_case.execute(GetCarByIdRequest(brand="toyota", car_id="2"))

    assert result.car["title"] == "Camry"


def test_repeated_lookups_return_identical_records(use_case: GetCarById) -> None:
    first = use_case.execute(GetCarByIdRequest(brand="toyota", car_id="2"))
    second = use_case.execute(GetCarByIdRequest(brand="toyota", car_id="2"))

    assert first == second


# ==============================================================================
# Not Found Error Tests
# ==============================================================================


def test_unknown_brand_raises_brand_not_found(use_case: GetCarById) -> None:
    with pytest.raises(BrandNotFoundError) as exc_info:
        use_case.execute(GetCarByIdRequest(brand="lada", car_id="1"))

    assert exc_info.value.context["identifier"] == "lada"


def test_unknown_id_raises_car_not_found(use_case: GetCarById) -> None:
    with pytest.raises(CarNotFoundError) as exc_info:
        use_case.execute(GetCarByIdRequest(brand="toyota", car_id="99"))

    error = exc_info.value
    assert error.message == "Car with id '99' not found in brand 'toyota'."
    assert error.context["brand"] == "toyota"


def test_record_without_id_is_never_returned(use_case: GetCarById) -> None:
    with pytest.raises(CarNotFoundError):
        use_case.execute(GetCarByIdRequest(brand="toyota", car_id="None"))
