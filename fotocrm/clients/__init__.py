"""HTTP clients used by the browser and the configurator session."""

from fotocrm.clients.http import ApiClient, CatalogClient, RemoteConfigurationClient

__all__ = [
    "ApiClient",
    "CatalogClient",
    "RemoteConfigurationClient",
]
