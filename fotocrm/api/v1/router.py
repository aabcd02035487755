"""
API v1 Router - Aggregates all v1 endpoints.
Base Path: /api/v1
"""

from fastapi import APIRouter

from fotocrm.api.v1 import catalog, configurations, health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(catalog.router, tags=["catalog"])
api_router.include_router(configurations.router, prefix="/configurations", tags=["configurations"])
