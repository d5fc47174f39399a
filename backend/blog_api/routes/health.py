"""
Blog API - Welcome & Health Check Routes
==========================================

What:  GET / answers with a welcome message; GET /health probes the database.
Who:   Humans poking the service, Docker health checks, load balancers.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging

from fastapi import APIRouter, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from blog_api import __version__
from blog_api.schemas.blog import HealthResponse, WelcomeResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/", response_model=WelcomeResponse, summary="Welcome message")
async def welcome() -> WelcomeResponse:
    return WelcomeResponse()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    """
    Check database connectivity with SELECT 1.

    The check uses its own pooled connection rather than a request
    session, so it never participates in a blog transaction.
    """
    from blog_api.database import engine

    db_status = "connected"
    overall = "healthy"
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(status=overall, version=__version__, database=db_status)
