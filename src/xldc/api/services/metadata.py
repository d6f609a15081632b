"""
Metadata service for the XL Deploy API.

Provides type descriptors, orchestrators and permissions.
"""

from __future__ import annotations

from typing import Any

from xldc.api.config import (
    METADATA_ORCHESTRATORS_PATH,
    METADATA_PERMISSIONS_PATH,
    METADATA_TYPE_PATH,
    type_path,
)
from xldc.api.services.base import BaseService
from xldc.models.metadata import TypeDescriptor
from xldc.models.result import Collection, Single


class MetadataService(BaseService):
    """
    Read-only access to server metadata.

    Example:
        >>> with XLDeployClient(profile) as xld:
        ...     types = xld.metadata.list_types()
        ...     host = xld.metadata.get_type("overthere.SshHost")
    """

    def list_types(self) -> Collection[TypeDescriptor]:
        """
        List every type known to the server.

        Returns:
            Collection of TypeDescriptor in server order
        """
        data = self._get(METADATA_TYPE_PATH) or []
        return Collection([TypeDescriptor.model_validate(item) for item in data])

    def get_type(self, type_name: str) -> Single[TypeDescriptor]:
        """
        Get the descriptor of one type.

        Args:
            type_name: Fully qualified type name, e.g. ``udm.Environment``
        """
        return Single(TypeDescriptor.model_validate(self._get(type_path(type_name))))

    def get_orchestrators(self) -> Collection[Any]:
        """List the names of available orchestrators."""
        return Collection(list(self._get(METADATA_ORCHESTRATORS_PATH) or []))

    def get_permissions(self) -> Collection[Any]:
        """List permission definitions."""
        return Collection(list(self._get(METADATA_PERMISSIONS_PATH) or []))
