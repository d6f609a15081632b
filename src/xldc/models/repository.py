"""
Configuration item model.

On the wire a CI is a flat object: ``id`` and ``type`` next to its
properties. The model keeps properties in their own mapping; ``from_wire``
reads the flat form and dumping writes it back.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_serializer

RESERVED_KEYS = ("id", "type")


class ConfigurationItem(BaseModel):
    """A typed record in the XL Deploy repository."""

    id: str
    type: str
    properties: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_wire(cls, data: Any) -> ConfigurationItem:
        """
        Parse a CI as the repository sends it.

        Every key other than ``id`` and ``type`` is a property, including
        one that happens to be called ``properties``.

        Raises:
            ValueError: If data is not an object or lacks id/type
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a configuration item object, got {type(data).__name__}")
        properties = {k: v for k, v in data.items() if k not in RESERVED_KEYS}
        return cls(id=data.get("id"), type=data.get("type"), properties=properties)

    @model_serializer
    def _flatten(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, **self.properties}

    @property
    def name(self) -> str:
        """Last segment of the CI id."""
        return self.id.rstrip("/").rsplit("/", 1)[-1]
