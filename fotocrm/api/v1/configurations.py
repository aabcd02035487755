"""
Configuration endpoints - save and load shared bucket snapshots.
"""

from fastapi import APIRouter

from fotocrm.dependencies import DbSession
from fotocrm.schemas.configuration import (
    LoadConfigurationResponse,
    SaveConfigurationRequest,
    SaveConfigurationResponse,
)
from fotocrm.schemas.error import ErrorResponse
from fotocrm.services.configuration_service import ConfigurationService

router = APIRouter()


@router.post(
    "/save",
    response_model=SaveConfigurationResponse,
    responses={400: {"model": ErrorResponse}},
)
async def save_configuration(body: SaveConfigurationRequest, db: DbSession):
    """
    Save the configurator buckets.

    With a `code`, the snapshot under that code is overwritten (or created).
    Without one, a new share code is minted and returned.
    """
    service = ConfigurationService(db)
    code = await service.save(body.buckets, body.code)
    return SaveConfigurationResponse(code=code)


@router.get(
    "/load/{code}",
    response_model=LoadConfigurationResponse,
    responses={404: {"model": ErrorResponse}},
)
async def load_configuration(code: str, db: DbSession):
    """Get the bucket snapshot saved under a share code."""
    service = ConfigurationService(db)
    collection = await service.load(code)
    return LoadConfigurationResponse(code=code, buckets=collection.buckets)
