"""
Health endpoint.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from sqlalchemy import text

from fotocrm.db.session import is_using_sqlite_fallback
from fotocrm.dependencies import AppSettings, DbSession

router = APIRouter()


@router.get("/health")
async def health_check(db: DbSession, settings: AppSettings):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok"} when service is healthy
        {"status": "degraded", "issues": [...]} when the configuration store is unreachable
    """
    issues = []

    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        issues.append(f"Database: {str(e)}")

    if issues:
        return {
            "status": "degraded",
            "issues": issues,
        }

    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "database": "sqlite (dev fallback)" if is_using_sqlite_fallback() else "postgresql",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
