"""
Async HTTP clients for the catalog provider and the remote configuration store.

Both clients accept an injected ``httpx.AsyncClient`` (tests pass one bound
to the ASGI app); otherwise a short-lived client is opened per call.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from fotocrm.config import get_settings
from fotocrm.core.exceptions import ConfigurationNotFoundException, RemoteStoreException
from fotocrm.schemas.catalog import Photo, PhotoListResponse, TagGroup, TagGroupListResponse
from fotocrm.schemas.configuration import (
    BucketCollection,
    LoadConfigurationResponse,
    SaveConfigurationResponse,
)

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Extract the API error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"


class ApiClient:
    """Shared request plumbing for the FotoCRM HTTP API."""

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REMOTE_TIMEOUT
        self._client = client

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(method, self._url(path), timeout=self.timeout, **kwargs)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, self._url(path), **kwargs)


class CatalogClient(ApiClient):
    """
    Read-only access to the taxonomy and the photo catalog.

    Fetch failures never propagate: the catalog degrades to empty lists so
    that rendering is never blocked.
    """

    async def fetch_tag_groups(self, lang: str | None = None) -> list[TagGroup]:
        params = {"lang": lang} if lang else None
        try:
            response = await self._request("GET", "tags", params=params)
            response.raise_for_status()
            return TagGroupListResponse.model_validate(response.json()).tag_groups
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"Taxonomy fetch failed, using empty taxonomy: {e}")
            return []

    async def fetch_photos(self) -> list[Photo]:
        try:
            response = await self._request("GET", "photos")
            response.raise_for_status()
            return PhotoListResponse.model_validate(response.json()).photos
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"Photo catalog fetch failed, using empty catalog: {e}")
            return []


class RemoteConfigurationClient(ApiClient):
    """Save and load bucket snapshots under a share code."""

    async def save(self, buckets: BucketCollection, code: str | None = None) -> str:
        """
        Store a snapshot remotely.

        Args:
            buckets: Snapshot to store
            code: Share code currently held; overwritten in place when given

        Returns:
            The share code of the stored snapshot

        Raises:
            RemoteStoreException: If the store is unreachable or rejects the request
        """
        payload: dict[str, Any] = {
            "buckets": [bucket.model_dump(by_alias=True) for bucket in buckets.buckets],
        }
        if code:
            payload["code"] = code

        try:
            response = await self._request("POST", "configurations/save", json=payload)
        except httpx.HTTPError as e:
            raise RemoteStoreException(
                message=f"Could not reach the configuration store: {str(e)}",
            )

        if response.is_error:
            raise RemoteStoreException(
                message=f"Failed to save configuration: {_error_message(response)}",
                details={"status_code": response.status_code},
            )

        try:
            return SaveConfigurationResponse.model_validate(response.json()).code
        except (ValueError, ValidationError) as e:
            raise RemoteStoreException(message=f"Malformed save response: {str(e)}")

    async def load(self, code: str) -> BucketCollection:
        """
        Retrieve a previously saved snapshot.

        Raises:
            ConfigurationNotFoundException: If nothing is stored under the code
            RemoteStoreException: If the store is unreachable or the payload is invalid
        """
        try:
            response = await self._request("GET", f"configurations/load/{quote(code, safe='')}")
        except httpx.HTTPError as e:
            raise RemoteStoreException(
                message=f"Could not reach the configuration store: {str(e)}",
            )

        if response.status_code == 404:
            raise ConfigurationNotFoundException(code)
        if response.is_error:
            raise RemoteStoreException(
                message=f"Failed to load configuration: {_error_message(response)}",
                details={"status_code": response.status_code},
            )

        try:
            loaded = LoadConfigurationResponse.model_validate(response.json())
            return BucketCollection(buckets=loaded.buckets)
        except (ValueError, ValidationError) as e:
            raise RemoteStoreException(message=f"Malformed configuration payload: {str(e)}")
