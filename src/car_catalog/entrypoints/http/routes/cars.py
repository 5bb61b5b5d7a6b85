from typing import Any

from fastapi import APIRouter, Depends, Query, Request, status

from car_catalog.domain.errors import ValidationError
from car_catalog.entrypoints.http.dependencies import (
    get_add_car_use_case,
    get_get_car_by_id_use_case,
    get_list_all_cars_use_case,
    get_list_brand_cars_use_case,
    get_search_catalog_use_case,
)
from car_catalog.entrypoints.http.dtos.cars import (
    AddCarResponseDTO,
    CarDetailResponseDTO,
    CarsListResponseDTO,
    SearchResponseDTO,
)
from car_catalog.entrypoints.http.error_responses import ErrorResponse
from car_catalog.entrypoints.http.mappers.cars_mapper import CarsMapper
from car_catalog.infra import strict_json
from car_catalog.use_cases.add_car import AddCar
from car_catalog.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from car_catalog.use_cases.list_all_cars import ListAllCars
from car_catalog.use_cases.list_brand_cars import ListBrandCars, ListBrandCarsRequest
from car_catalog.use_cases.search_car_catalog import SearchCarCatalog


router = APIRouter(tags=["Cars"])

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"description": "Brand or car not found", "model": ErrorResponse},
}


# Fixed paths are registered before /{brand_name} so they are never
# captured as brand names.
@router.get(
    "/all",
    response_model=CarsListResponseDTO,
    summary="List all cars",
    description="""
    List every car across all brands.

    ## Pagination
    - Enabled by default; pass `pagination=false` to get the whole catalog
    - Default page: 1, default limit: 20
    - Invalid or non-positive page/limit values fall back to the defaults
    - Pages past the end return an empty `results` list
    """,
)
def list_all_cars(
    pagination: str | None = Query(default=None, description="'false' disables pagination"),
    page: str | None = Query(default=None, examples=["1"]),
    limit: str | None = Query(default=None, examples=["20"]),
    use_case: ListAllCars = Depends(get_list_all_cars_use_case),
) -> CarsListResponseDTO:
    request = CarsMapper.to_list_all_request(pagination=pagination, page=page, limit=limit)

    result = use_case.execute(request)

    return CarsMapper.to_cars_list_response(result)


@router.get(
    "/search",
    response_model=SearchResponseDTO,
    summary="Search cars",
    description="""
    Search every brand with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - title/color: case-insensitive substring match
    - model: exact integer match (a non-integer value matches nothing)
    - maxPrice: price <= maxPrice (a non-numeric value matches nothing)

    ## Example
    ```
    GET /api/cars/search?title=corolla&maxPrice=25000&page=1&limit=10
    ```
    """,
)
def search_cars(
    title: str | None = Query(default=None, examples=["corolla"]),
    model: str | None = Query(default=None, examples=["2020"]),
    color: str | None = Query(default=None, examples=["red"]),
    max_price: str | None = Query(default=None, alias="maxPrice", examples=["25000"]),
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
) -> SearchResponseDTO:
    """Search cars endpoint following parse → execute → map → return pattern."""
    request = CarsMapper.to_search_request(
        title=title,
        model=model,
        color=color,
        max_price=max_price,
        page=page,
        limit=limit,
    )

    result = use_case.execute(request)

    return CarsMapper.to_search_response(result)


FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

CAR_BODY_EXAMPLE = {"title": "Yaris", "model": 2023, "price": 18500, "brand": "Toyota"}
CAR_BODY_SCHEMA = {"type": "object", "additionalProperties": True, "example": CAR_BODY_EXAMPLE}


async def read_car_payload(request: Request) -> dict[str, Any]:
    """
    Reads the add-car body as a JSON object or an HTML form.

    Form values arrive as strings; model and price are coerced by the use case.

    Raises:
        ValidationError: If the body is missing, is not standard JSON, or is
            not a JSON object
    """
    if request.headers.get("content-type", "").startswith(FORM_CONTENT_TYPE):
        form = await request.form()
        return {key: value for key, value in form.items()}

    try:
        payload = strict_json.loads(await request.body())
    except ValueError as exc:
        raise ValidationError(
            "Request body must be a JSON object",
            errors=[{"field": "body", "message": str(exc), "code": "INVALID_JSON"}],
        ) from exc

    if not isinstance(payload, dict):
        raise ValidationError(
            "Request body must be a JSON object",
            errors=[{"field": "body", "message": "Expected an object", "code": "INVALID_JSON"}],
        )

    return payload


@router.post(
    "",
    response_model=AddCarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a car (in-memory only)",
    description="""
    Add a car to a brand. The car is kept in memory and lost on restart.

    ## Required fields
    - title, model (integer), price (number), brand

    Send the fields as a JSON object or as an `application/x-www-form-urlencoded`
    form. Any other field is stored as sent. The `id` is generated by the server.
    """,
    responses={400: {"description": "Missing or invalid fields", "model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": CAR_BODY_SCHEMA},
                FORM_CONTENT_TYPE: {"schema": CAR_BODY_SCHEMA},
            },
        }
    },
)
def add_car(
    payload: dict[str, Any] = Depends(read_car_payload),
    use_case: AddCar = Depends(get_add_car_use_case),
) -> AddCarResponseDTO:
    request = CarsMapper.to_add_car_request(payload)

    result = use_case.execute(request)

    return CarsMapper.to_add_car_response(result)


@router.get(
    "/{brand_name}",
    response_model=CarsListResponseDTO,
    summary="List cars of a brand",
    description="Return every car of a brand (case-insensitive). This listing is not paginated.",
    responses=NOT_FOUND_RESPONSE,
)
def list_brand_cars(
    brand_name: str,
    use_case: ListBrandCars = Depends(get_list_brand_cars_use_case),
) -> CarsListResponseDTO:
    result = use_case.execute(ListBrandCarsRequest(brand=brand_name))

    return CarsMapper.to_brand_response(result)


@router.get(
    "/{brand_name}/{car_id}",
    response_model=CarDetailResponseDTO,
    summary="Get a car of a brand by id",
    responses=NOT_FOUND_RESPONSE,
)
def get_car_by_id(
    brand_name: str,
    car_id: str,
    use_case: GetCarById = Depends(get_get_car_by_id_use_case),
) -> CarDetailResponseDTO:
    result = use_case.execute(GetCarByIdRequest(brand=brand_name, car_id=car_id))

    return CarsMapper.to_car_detail_response(result)
