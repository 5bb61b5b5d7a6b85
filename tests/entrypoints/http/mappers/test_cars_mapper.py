"""
Test suite for CarsMapper.

Covers:
- Raw query values → use case requests (permissive paging, pagination flag)
- Use case results → response DTOs (camelCase info, optional page fields)
"""

from __future__ import annotations

import pytest

from car_catalog.domain.car import PageInfo, PagedResult, Paging
from car_catalog.entrypoints.http.mappers.cars_mapper import CarsMapper
from car_catalog.use_cases.add_car import AddCarResponse
from car_catalog.use_cases.get_car_by_id import GetCarByIdResponse
from car_catalog.use_cases.list_brand_cars import ListBrandCarsResponse

CARS = [{"id": 1, "title": "Corolla"}, {"id": 2, "title": "Camry"}]


# ==============================================================================
# Requests
# ==============================================================================


@pytest.mark.parametrize(
    ("pagination", "enabled"),
    [(None, True), ("true", True), ("False", True), ("0", True), ("false", False)],
)
def test_only_literal_false_disables_pagination(pagination: str | None, enabled: bool) -> None:
    request = CarsMapper.to_list_all_request(pagination=pagination, page=None, limit=None)

    assert request.pagination_enabled is enabled


def test_list_all_request_coerces_paging() -> None:
    request = CarsMapper.to_list_all_request(pagination=None, page="2", limit="nope")

    assert request.paging == Paging(page=2, limit=20)


def test_search_request_keeps_raw_filters() -> None:
    request = CarsMapper.to_search_request(
        title="corolla", model="2020", color=None, max_price="25000", page="0", limit="5"
    )

    assert request.filters.title == "corolla"
    assert request.filters.model == "2020"
    assert request.filters.color is None
    assert request.filters.max_price == "25000"
    assert request.paging == Paging(page=1, limit=5)


def test_add_car_request_copies_payload() -> None:
    payload = {"title": "Yaris", "brand": "toyota"}

    request = CarsMapper.to_add_car_request(payload)
    payload["title"] = "Changed"

    assert request.fields["title"] == "Yaris"


# ==============================================================================
# Responses
# ==============================================================================


def test_paginated_list_response() -> None:
    result = PagedResult(
        results=CARS, total=42, page_info=PageInfo(total_pages=3, current_page=1, on_page=2)
    )

    dto = CarsMapper.to_cars_list_response(result)

    assert dto.model_dump(by_alias=True) == {
        "info": {"totalCars": 42, "totalPages": 3, "currentPage": 1, "carsOnPage": 2},
        "results": CARS,
    }


def test_unpaginated_list_response_has_only_total() -> None:
    dto = CarsMapper.to_cars_list_response(PagedResult(results=CARS, total=2))

    assert dto.model_dump(by_alias=True)["info"] == {"totalCars": 2}


def test_brand_response() -> None:
    dto = CarsMapper.to_brand_response(ListBrandCarsResponse(brand="toyota", cars=CARS))

    assert dto.model_dump(by_alias=True) == {"info": {"totalCars": 2}, "results": CARS}


def test_search_response() -> None:
    result = PagedResult(
        results=CARS[:1], total=2, page_info=PageInfo(total_pages=2, current_page=2, on_page=1)
    )

    dto = CarsMapper.to_search_response(result)

    assert dto.model_dump(by_alias=True)["info"] == {
        "totalCarsFound": 2,
        "totalPages": 2,
        "currentPage": 2,
        "carsOnPage": 1,
    }


def test_search_response_requires_page_info() -> None:
    with pytest.raises(RuntimeError, match="paginated"):
        CarsMapper.to_search_response(PagedResult(results=[], total=0))


def test_car_detail_response() -> None:
    dto = CarsMapper.to_car_detail_response(GetCarByIdResponse(car=CARS[0]))

    assert dto.model_dump() == {"success": True, "message": "Car found.", "car": CARS[0]}


def test_add_car_response() -> None:
    dto = CarsMapper.to_add_car_response(AddCarResponse(brand="toyota", car=CARS[0]))

    assert dto.model_dump() == {
        "message": "Car added successfully (in-memory only)",
        "car": CARS[0],
    }
