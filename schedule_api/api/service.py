# schedule_api/api/service.py

from fastapi import APIRouter, Request

from schedule_api.api.schedule import utc_now
from schedule_api.core.config import settings
from schedule_api.models.schedule import HealthResponse, IndexResponse

router = APIRouter(tags=["service"])

ENDPOINTS = [
    "/api/schedule/numerator",
    "/api/schedule/denominator",
    "/api/groups",
    "/api/health",
]


@router.get("/api/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        cors="enabled",
        env=settings.app_env,
        timestamp=utc_now(),
        headers={
            name: ", ".join(request.headers.getlist(name))
            for name in request.headers.keys()
        },
    )


@router.get("/", response_model=IndexResponse)
def index() -> IndexResponse:
    return IndexResponse(message="MADI Tutor Schedule API", endpoints=ENDPOINTS)
