"""
XL Deploy API client.

Unified client for the XL Deploy REST API (metadata, repository).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from xldc.api.config import DEFAULT_HEADERS, DEFAULT_TIMEOUT, SERVER_INFO_PATH
from xldc.logging import get_logger

if TYPE_CHECKING:
    from xldc.api.services.metadata import MetadataService
    from xldc.api.services.repository import RepositoryService
    from xldc.models.config import ConnectionProfile

logger = get_logger(__name__)


class XLDeployClient:
    """
    Unified XL Deploy API client.

    One ``httpx.Client`` bound to a resolved ConnectionProfile, shared by
    lazily created services.

    Example:
        >>> with XLDeployClient(profile) as xld:
        ...     if xld.connected():
        ...         ci = xld.repository.get_ci("Infrastructure/dev/host1")
    """

    def __init__(
        self,
        profile: ConnectionProfile,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            profile: Resolved connection profile
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self._profile = profile
        self._client = httpx.Client(
            base_url=profile.base_url,
            auth=(profile.user, profile.password),
            headers=DEFAULT_HEADERS,
            timeout=timeout,
            transport=transport,
        )

        self._metadata_service: MetadataService | None = None
        self._repository_service: RepositoryService | None = None

    @property
    def metadata(self) -> MetadataService:
        """Access the metadata API."""
        if self._metadata_service is None:
            from xldc.api.services.metadata import MetadataService

            self._metadata_service = MetadataService(self._client)
        return self._metadata_service

    @property
    def repository(self) -> RepositoryService:
        """Access the repository API."""
        if self._repository_service is None:
            from xldc.api.services.repository import RepositoryService

            self._repository_service = RepositoryService(self._client)
        return self._repository_service

    @property
    def base_url(self) -> str:
        """Get the server base URL."""
        return self._profile.base_url

    def connected(self) -> bool:
        """
        Probe the server.

        Returns:
            True if the server info endpoint answered successfully
        """
        try:
            response = self._client.get(SERVER_INFO_PATH)
        except httpx.HTTPError as e:
            logger.debug(f"Connectivity probe to {self.base_url} failed: {e}")
            return False
        if not response.is_success:
            logger.debug(
                f"Connectivity probe to {self.base_url} returned {response.status_code}"
            )
            return False
        return True

    def __enter__(self) -> XLDeployClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __repr__(self) -> str:
        return f"<XLDeployClient base_url={self.base_url!r}>"


__all__ = ["XLDeployClient"]
