"""
Connection profile model.

The profile is resolved once per invocation and never changes afterwards.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def scheme_for(ssl: bool) -> Literal["http", "https"]:
    """Derive the URL scheme from the SSL flag."""
    return "https" if ssl else "http"


class ConnectionProfile(BaseModel):
    """Everything needed to talk to one XL Deploy server."""

    model_config = ConfigDict(frozen=True)

    user: str = Field(min_length=1)
    password: str = Field(min_length=1)
    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    context_path: str = "/"
    scheme: Literal["http", "https"] = "http"

    @property
    def base_url(self) -> str:
        """Server root URL including the context path, without trailing slash."""
        context = "/" + self.context_path.strip("/")
        return f"{self.scheme}://{self.host}:{self.port}{context}".rstrip("/")

    def __repr__(self) -> str:
        return f"<ConnectionProfile user={self.user!r} url={self.base_url!r}>"
