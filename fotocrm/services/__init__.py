"""
Business logic services for FotoCRM.
Services handle core operations separate from API endpoints.
"""

from fotocrm.services.catalog_service import CatalogRepository, CatalogService
from fotocrm.services.configuration_service import (
    ConfigurationService,
    generate_share_code,
)

__all__ = [
    "CatalogRepository",
    "CatalogService",
    "ConfigurationService",
    "generate_share_code",
]
