from __future__ import annotations

from typing import Any

from car_catalog.domain.car import Paging, PagedResult, SearchFilters
from car_catalog.entrypoints.http.dtos.cars import (
    AddCarResponseDTO,
    CarDetailResponseDTO,
    CarsInfoDTO,
    CarsListResponseDTO,
    SearchInfoDTO,
    SearchResponseDTO,
)
from car_catalog.use_cases.add_car import AddCarRequest, AddCarResponse
from car_catalog.use_cases.get_car_by_id import GetCarByIdResponse
from car_catalog.use_cases.list_all_cars import ListAllCarsRequest
from car_catalog.use_cases.list_brand_cars import ListBrandCarsResponse
from car_catalog.use_cases.search_car_catalog import SearchCarCatalogRequest

ADD_CAR_MESSAGE = "Car added successfully (in-memory only)"
CAR_FOUND_MESSAGE = "Car found."


class CarsMapper:
    """Maps between raw HTTP parameters, use case requests and response DTOs."""

    @staticmethod
    def to_list_all_request(
        pagination: str | None, page: str | None, limit: str | None
    ) -> ListAllCarsRequest:
        """
        Builds the list-all request from raw query values.

        Only the literal string "false" disables pagination. page/limit are
        coerced permissively (invalid values fall back to the defaults).
        """
        return ListAllCarsRequest(
            paging=Paging.coerce(page=page, limit=limit),
            pagination_enabled=pagination != "false",
        )

    @staticmethod
    def to_search_request(
        title: str | None,
        model: str | None,
        color: str | None,
        max_price: str | None,
        page: str | None,
        limit: str | None,
    ) -> SearchCarCatalogRequest:
        return SearchCarCatalogRequest(
            filters=SearchFilters(title=title, model=model, color=color, max_price=max_price),
            paging=Paging.coerce(page=page, limit=limit),
        )

    @staticmethod
    def to_add_car_request(payload: dict[str, Any]) -> AddCarRequest:
        return AddCarRequest(fields=dict(payload))

    @staticmethod
    def to_cars_list_response(result: PagedResult) -> CarsListResponseDTO:
        """
        Converts a listing result to the {info, results} envelope.

        Page metadata is included only when the result was paginated.
        """
        page_info = result.page_info
        if page_info is None:
            info = CarsInfoDTO(total_cars=result.total)
        else:
            info = CarsInfoDTO(
                total_cars=result.total,
                total_pages=page_info.total_pages,
                current_page=page_info.current_page,
                cars_on_page=page_info.on_page,
            )
        return CarsListResponseDTO(info=info, results=result.results)

    @staticmethod
    def to_brand_response(result: ListBrandCarsResponse) -> CarsListResponseDTO:
        return CarsListResponseDTO(
            info=CarsInfoDTO(total_cars=len(result.cars)),
            results=result.cars,
        )

    @staticmethod
    def to_search_response(result: PagedResult) -> SearchResponseDTO:
        page_info = result.page_info
        if page_info is None:
            raise RuntimeError("Search results must be paginated")

        return SearchResponseDTO(
            info=SearchInfoDTO(
                total_cars_found=result.total,
                total_pages=page_info.total_pages,
                current_page=page_info.current_page,
                cars_on_page=page_info.on_page,
            ),
            results=result.results,
        )

    @staticmethod
    def to_car_detail_response(result: GetCarByIdResponse) -> CarDetailResponseDTO:
        return CarDetailResponseDTO(success=True, message=CAR_FOUND_MESSAGE, car=result.car)

    @staticmethod
    def to_add_car_response(result: AddCarResponse) -> AddCarResponseDTO:
        return AddCarResponseDTO(message=ADD_CAR_MESSAGE, car=result.car)
