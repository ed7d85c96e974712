"""Health check and index endpoints."""

import time

from fastapi import APIRouter, Request

from routes.schema import HealthResponse, RootResponse, Uptime

router = APIRouter()


def get_uptime_seconds(request: Request) -> float:
    started_at = getattr(request.app.state, "started_at", None)
    if started_at is None:
        return 0.0
    return time.monotonic() - started_at


@router.get("/", response_model=RootResponse)
async def root():
    return RootResponse()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    return HealthResponse(uptime=Uptime(seconds=get_uptime_seconds(request)))
