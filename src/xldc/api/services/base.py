"""
Base class for XL Deploy API services.
"""

from __future__ import annotations

from typing import Any

import httpx

from xldc.logging import get_logger

logger = get_logger(__name__)


class BaseService:
    """
    Shared request handling for API services.

    Services share the client's ``httpx.Client``. Non-success responses
    raise ``httpx.HTTPStatusError`` carrying the status code and the body
    the server sent back.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def _request(
        self,
        method: str,
        url: str,
        json: Any = None,
    ) -> Any:
        logger.debug(f"{method} {url}")
        response = self._client.request(method, url, json=json)
        if not response.is_success:
            try:
                error_body = response.json()
            except ValueError:
                error_body = response.text
            msg = f"{response.status_code}: {error_body}"
            raise httpx.HTTPStatusError(
                msg, request=response.request, response=response
            )
        logger.debug(f"{method} {url} -> {response.status_code}")
        if not response.content:
            return None
        return response.json()

    def _get(self, url: str) -> Any:
        return self._request("GET", url)

    def _post(self, url: str, data: Any) -> Any:
        return self._request("POST", url, json=data)

    def _put(self, url: str, data: Any) -> Any:
        return self._request("PUT", url, json=data)
