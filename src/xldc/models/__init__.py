"""
xldc models.
"""

from __future__ import annotations

from xldc.models.config import ConnectionProfile, scheme_for
from xldc.models.metadata import PropertyDescriptor, TypeDescriptor
from xldc.models.repository import ConfigurationItem
from xldc.models.result import Collection, Single

__all__ = [
    "ConnectionProfile",
    "scheme_for",
    "PropertyDescriptor",
    "TypeDescriptor",
    "ConfigurationItem",
    "Single",
    "Collection",
]
