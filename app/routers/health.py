# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# /health answers as long as the process is up.
# /health/ready also loads the catalog and touches the database, and answers
# 503 when either fails so a load balancer can hold traffic back.
# =============================================================================

from datetime import datetime
from typing import Callable

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from app.config import settings
from core.services.catalog_service import CatalogService
from lib.supabase_client import SupabaseClient

router = APIRouter()

API_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    status: str
    environment: str
    catalog_source: str
    version: str
    timestamp: str


class ReadinessResponse(BaseModel):
    status: str
    checks: dict[str, str]
    timestamp: str


def _ping_database() -> str:
    SupabaseClient.get_client().table("services").select("id").limit(1).execute()
    return "healthy"


def _load_catalog() -> str:
    return f"healthy ({len(CatalogService.list_services())} services)"


READINESS_CHECKS: dict[str, Callable[[], str]] = {
    "database": _ping_database,
    "catalog": _load_catalog,
}


def _run_check(check: Callable[[], str]) -> str:
    try:
        return check()
    except Exception as e:
        return f"unhealthy: {str(e)[:50]}"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        catalog_source=settings.CATALOG_SOURCE,
        version=API_VERSION,
        timestamp=datetime.utcnow().isoformat(),
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(response: Response):
    """
    Check that the catalog loads and the database answers.

    Returns 200 "ready" when every check passes, otherwise 503 "degraded"
    with the failing checks marked unhealthy.
    """
    checks = {name: _run_check(check) for name, check in READINESS_CHECKS.items()}
    ready = all(result.startswith("healthy") for result in checks.values())

    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        status="ready" if ready else "degraded",
        checks=checks,
        timestamp=datetime.utcnow().isoformat(),
    )
