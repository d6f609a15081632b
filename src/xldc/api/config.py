"""
XL Deploy API configuration.

Provides REST paths and request defaults.
"""

from __future__ import annotations

from urllib.parse import quote

# REST root below the server context path
API_ROOT = "/deployit"

SERVER_INFO_PATH = f"{API_ROOT}/server/info"
METADATA_TYPE_PATH = f"{API_ROOT}/metadata/type"
METADATA_ORCHESTRATORS_PATH = f"{API_ROOT}/metadata/orchestrators"
METADATA_PERMISSIONS_PATH = f"{API_ROOT}/metadata/permissions"
REPOSITORY_CI_PATH = f"{API_ROOT}/repository/ci"

DEFAULT_TIMEOUT = 30.0  # seconds

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def ci_path(ci_id: str) -> str:
    """
    Get the repository path for a CI id.

    CI ids are slash separated (``Infrastructure/dev/host1``); each segment
    is quoted, the separators are kept.

    Example:
        >>> ci_path("Infrastructure/dev host")
        '/deployit/repository/ci/Infrastructure/dev%20host'
    """
    return f"{REPOSITORY_CI_PATH}/{quote(ci_id.strip('/'), safe='/')}"


def type_path(type_name: str) -> str:
    """Get the metadata path for a single type."""
    return f"{METADATA_TYPE_PATH}/{quote(type_name, safe='')}"


__all__ = [
    "API_ROOT",
    "SERVER_INFO_PATH",
    "METADATA_TYPE_PATH",
    "METADATA_ORCHESTRATORS_PATH",
    "METADATA_PERMISSIONS_PATH",
    "REPOSITORY_CI_PATH",
    "DEFAULT_TIMEOUT",
    "DEFAULT_HEADERS",
    "ci_path",
    "type_path",
]
