"""
XL Deploy API client.

Usage:
    >>> from xldc.api import XLDeployClient
    >>>
    >>> with XLDeployClient(profile) as xld:
    ...     types = xld.metadata.list_types()
    ...     ci = xld.repository.get_ci("Environments/dev")
"""

from __future__ import annotations

from xldc.api.client import XLDeployClient
from xldc.api.services import MetadataService, RepositoryService

__all__ = [
    "XLDeployClient",
    "MetadataService",
    "RepositoryService",
]
