"""Error body models, used to document error responses in OpenAPI."""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One rejected field of a request."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"field": "price", "message": "Field is required", "code": "MISSING_FIELD"}
        }
    )


class ErrorResponse(BaseModel):
    """Body of every non-2xx response.

    ``errors`` is only present for validation failures.
    """

    message: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"message": "Brand 'lada' not found.", "code": "NOT_FOUND"},
                {
                    "message": "Missing required fields: price.",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "price", "message": "Field is required", "code": "MISSING_FIELD"}
                    ],
                },
            ]
        }
    )
