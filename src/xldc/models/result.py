"""
Tagged results.

Remote calls and template synthesis say explicitly whether they produced one
value or an ordered list of values; the renderer dispatches on the variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Single(Generic[T]):
    """Exactly one value."""

    value: T


@dataclass(frozen=True)
class Collection(Generic[T]):
    """An ordered list of values."""

    values: list[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)
