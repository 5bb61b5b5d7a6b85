"""Catalog errors.

Raised by the loader and the use cases; the HTTP layer turns them into
status codes and ``{"message", "code"}`` bodies.
"""

from typing import Any


class DomainError(Exception):
    """Root of every catalog error.

    ``error_code`` is the stable machine-readable code sent to clients,
    ``context`` carries structured details for logs.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message, "code": self.error_code}
        payload.update(self.context)
        return payload


class LoadError(DomainError):
    """Catalog data could not be loaded at startup.

    Fatal: the process must not start serving after this error.
    """

    error_code: str = "LOAD_ERROR"


class ValidationError(DomainError):
    """Client input was rejected (HTTP 400).

    Args:
        message: Summary shown to the client. Defaults depend on whether
            field errors are given.
        errors: Per-field problems, e.g.
            ``[{"field": "price", "message": "Field is required", "code": "MISSING_FIELD"}]``
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[dict[str, str]] | None = errors or None
        default = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default, **context)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    """A brand or car does not exist (HTTP 404)."""

    error_code: str = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        message: str | None = None,
        **context: Any,
    ) -> None:
        if message is None:
            subject = f"{resource} '{identifier}'" if identifier else resource
            message = f"{subject} not found."

        super().__init__(message, resource=resource, identifier=identifier, **context)


class BrandNotFoundError(NotFoundError):
    """No bucket exists for the requested brand key."""

    def __init__(self, brand: str) -> None:
        super().__init__(resource="Brand", identifier=brand)


class CarNotFoundError(NotFoundError):
    """Brand exists but holds no car with the requested id."""

    def __init__(self, brand: str, car_id: str) -> None:
        super().__init__(
            resource="Car",
            identifier=car_id,
            message=f"Car with id '{car_id}' not found in brand '{brand}'.",
            brand=brand,
        )
