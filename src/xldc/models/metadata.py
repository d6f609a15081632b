"""
Type metadata models.

Descriptors are parsed from the metadata endpoints. Fields the server sends
that are not modelled here are kept, so a full dump shows them unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PropertyDescriptor(BaseModel):
    """One property of a CI type."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    required: bool = False
    default: Any = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


class TypeDescriptor(BaseModel):
    """Schema of a CI type."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str
    description: str | None = None
    properties: list[PropertyDescriptor] = Field(default_factory=list)

    def condensed(self) -> dict[str, str | None]:
        """Name and description only, as the server sent them."""
        return {"type": self.type, "description": self.description}
