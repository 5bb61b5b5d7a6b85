from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class CarsInfoDTO(BaseModel):
    """Count metadata for a car listing.

    Page fields are only present when the listing is paginated.
    """

    total_cars: int = Field(alias="totalCars", description="Number of cars in the listing")
    total_pages: int | None = Field(default=None, alias="totalPages")
    current_page: int | None = Field(default=None, alias="currentPage")
    cars_on_page: int | None = Field(default=None, alias="carsOnPage")

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_missing_page_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}


class CarsListResponseDTO(BaseModel):
    info: CarsInfoDTO
    results: list[dict[str, Any]]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "info": {"totalCars": 42, "totalPages": 3, "currentPage": 1, "carsOnPage": 20},
                "results": [
                    {"id": 1, "title": "Corolla", "model": 2020, "color": "red", "price": 20000}
                ],
            }
        }
    )


class SearchInfoDTO(BaseModel):
    total_cars_found: int = Field(
        alias="totalCarsFound", description="Matches before pagination"
    )
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    cars_on_page: int = Field(alias="carsOnPage")

    model_config = ConfigDict(populate_by_name=True)


class SearchResponseDTO(BaseModel):
    info: SearchInfoDTO
    results: list[dict[str, Any]]


class CarDetailResponseDTO(BaseModel):
    success: bool
    message: str
    car: dict[str, Any]


class AddCarResponseDTO(BaseModel):
    message: str
    car: dict[str, Any]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Car added successfully (in-memory only)",
                "car": {
                    "id": 1767225600000,
                    "title": "Yaris",
                    "model": 2023,
                    "price": 18500.0,
                    "brand": "toyota",
                },
            }
        }
    )
