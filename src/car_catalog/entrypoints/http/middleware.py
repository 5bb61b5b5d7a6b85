"""HTTP middleware: CORS, security headers and access logging."""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Resource-Policy": "same-origin",
}

CallNext = Callable[[Request], Awaitable[Response]]


async def add_security_headers(request: Request, call_next: CallNext) -> Response:
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


def add_error_headers(request: Request, response: Response) -> Response:
    """Headers for responses built outside the middleware stack.

    Starlette renders unhandled-exception responses in its outermost
    middleware, so neither the security headers nor CORS reach them.
    """
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)

    origin = request.headers.get("origin")
    allowed = getattr(request.app.state, "cors_origins", [])
    if origin and "*" in allowed:
        response.headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin in allowed:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Vary"] = "Origin"
    return response


async def log_requests(request: Request, call_next: CallNext) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - started) * 1000

    logger.info(
        "%s %s %s %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 1),
        },
    )
    return response


def register_middleware(app: FastAPI, cors_origins: list[str]) -> None:
    """Register middleware on the app.

    Starlette runs the last registered middleware first, so CORS wraps
    the security headers which wrap access logging.
    """
    app.state.cors_origins = list(cors_origins)
    app.middleware("http")(log_requests)
    app.middleware("http")(add_security_headers)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
