from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["health"])

WELCOME_HTML = (
    "<h1>Car API is ready and running!</h1>"
    "<p>Try endpoints like /api/cars/all</p>"
)


@router.get("/", response_class=HTMLResponse, summary="Welcome page")
def welcome() -> str:
    return WELCOME_HTML


@router.get("/health", summary="Health check")
def health() -> dict[str, str]:
    return {"status": "ok"}
