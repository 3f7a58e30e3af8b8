#!/usr/bin/env python3
# src/gcp_monitored_resource/metadata.py
"""
HTTP metadata server client.

Usage:
    from gcp_monitored_resource.metadata import HttpMetadataProvider

    provider = HttpMetadataProvider()
    response = await provider.instance("id")
"""

import logging

import httpx

from .base import MetadataProvider
from .config import ResolverSettings
from .constants import (
    METADATA_BASE_PATH,
    METADATA_FLAVOR_HEADER,
    METADATA_FLAVOR_VALUE,
    METADATA_INSTANCE_PATH,
)
from .errors import MetadataServerError
from .types import MetadataResponse

logger = logging.getLogger(__name__)


class HttpMetadataProvider(MetadataProvider):
    """Reads instance attributes from the GCE metadata server over HTTP."""

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the provider.

        Args:
            settings: Host and timeout to use; read from the environment when omitted
            transport: Optional httpx transport, mainly for tests
        """
        self.settings = settings or ResolverSettings.from_env()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f"http://{self.settings.metadata_host}{METADATA_BASE_PATH}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={METADATA_FLAVOR_HEADER: METADATA_FLAVOR_VALUE},
            timeout=self.settings.metadata_timeout,
            transport=self._transport,
        )

    async def instance(self, path: str) -> MetadataResponse:
        """Fetch ``instance/<path>`` from the metadata server.

        Raises:
            MetadataServerError: on transport errors, non-2xx replies, or a
                reply that did not come from a Google metadata server.
        """
        url = f"/{METADATA_INSTANCE_PATH}/{path.lstrip('/')}"
        logger.debug(f"Requesting metadata {url} from {self.settings.metadata_host}")

        async with self._client() as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise MetadataServerError(
                    f"Metadata server returned {e.response.status_code} for {path}",
                    path=path,
                    status_code=e.response.status_code,
                ) from e
            except httpx.HTTPError as e:
                raise MetadataServerError(
                    f"Metadata server request for {path} failed: {e}",
                    path=path,
                    suggestion="Are you running on Google Cloud? Set GCE_METADATA_HOST to override the host",
                ) from e

        if response.headers.get(METADATA_FLAVOR_HEADER) != METADATA_FLAVOR_VALUE:
            raise MetadataServerError(
                f"Invalid response from metadata server for {path}: missing {METADATA_FLAVOR_HEADER} header",
                path=path,
                status_code=response.status_code,
            )

        return MetadataResponse(data=response.text)

    async def is_available(self) -> bool:
        """Probe the metadata server root; never raises."""
        async with self._client() as client:
            try:
                response = await client.get("/")
            except httpx.HTTPError as e:
                logger.debug(f"Metadata server not reachable: {e}")
                return False

        available = response.headers.get(METADATA_FLAVOR_HEADER) == METADATA_FLAVOR_VALUE
        logger.debug(f"Metadata server available: {available}")
        return available
