"""
xldc: command-line client for XL Deploy.

Usage:
    >>> from xldc import XLDeployClient, CLIOptions, load_settings, resolve_profile
    >>>
    >>> profile = resolve_profile(CLIOptions(host="xld.local", port=4516), load_settings())
    >>> with XLDeployClient(profile) as xld:
    ...     print(xld.connected())
"""

from __future__ import annotations

__version__ = "0.1.0"

from xldc.api.client import XLDeployClient
from xldc.config import CLIOptions, XLDCSettings, load_settings, resolve_profile
from xldc.exceptions import (
    ConfigurationError,
    ConnectivityError,
    RemoteCallError,
    SerializationError,
    UsageError,
    XLDCError,
)
from xldc.models import (
    Collection,
    ConfigurationItem,
    ConnectionProfile,
    PropertyDescriptor,
    Single,
    TypeDescriptor,
)

__all__ = [
    "__version__",
    "XLDeployClient",
    "CLIOptions",
    "XLDCSettings",
    "load_settings",
    "resolve_profile",
    "XLDCError",
    "ConfigurationError",
    "ConnectivityError",
    "RemoteCallError",
    "SerializationError",
    "UsageError",
    "Collection",
    "ConfigurationItem",
    "ConnectionProfile",
    "PropertyDescriptor",
    "Single",
    "TypeDescriptor",
]
