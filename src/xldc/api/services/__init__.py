"""
XL Deploy API services.
"""

from __future__ import annotations

from xldc.api.services.base import BaseService
from xldc.api.services.metadata import MetadataService
from xldc.api.services.repository import RepositoryService

__all__ = [
    "BaseService",
    "MetadataService",
    "RepositoryService",
]
