"""
Output rendering.

Results are serialized as JSON with two-space indentation and either printed
to standard output or written to a file with a trailing newline.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from xldc.exceptions import SerializationError
from xldc.logging import get_logger
from xldc.models.metadata import TypeDescriptor
from xldc.models.result import Collection, Single

logger = get_logger(__name__)

INDENT = 2


def to_data(value: Any) -> Any:
    """
    Convert a result to JSON-compatible data.

    Single and Collection unwrap to their value and to a list. Models dump
    with the field names the server used; fields it never sent stay out.
    """
    if isinstance(value, Single):
        return to_data(value.value)
    if isinstance(value, Collection):
        return [to_data(v) for v in value.values]
    if isinstance(value, BaseModel):
        try:
            return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
        except PydanticSerializationError as e:
            raise SerializationError(f"Cannot serialize {type(value).__name__}: {e}", cause=e) from e
    if isinstance(value, dict):
        return {k: to_data(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_data(v) for v in value]
    return value


def condense(result: Single[TypeDescriptor] | Collection[TypeDescriptor]) -> Any:
    """Project type descriptors to their name and description."""
    if isinstance(result, Single):
        return result.value.condensed()
    return [descriptor.condensed() for descriptor in result.values]


def serialize(data: Any) -> str:
    """
    Serialize data as indented JSON.

    Raises:
        SerializationError: If the data is not JSON serializable
    """
    try:
        return json.dumps(to_data(data), indent=INDENT, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot serialize output: {e}", cause=e) from e


def write_file(text: str, out: str | Path) -> Path:
    """Write text to a file, ending with exactly one newline."""
    path = Path(out)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text.rstrip("\n") + "\n", encoding="utf-8")
    except OSError as e:
        raise SerializationError(f"Cannot write output file {path}: {e}", cause=e) from e
    logger.info(f"Output written to {path}")
    return path


def emit(result: Any, out: str | Path | None = None, condensed: bool = False) -> str:
    """
    Render a result to stdout or to a file.

    Args:
        result: Single, Collection, model or plain data
        out: Output file; stdout when not set
        condensed: Reduce type descriptors to name and description

    Returns:
        The rendered text
    """
    if condensed:
        result = condense(result)
    text = serialize(result)
    if out:
        write_file(text, out)
    else:
        click.echo(text)
    return text


__all__ = ["to_data", "condense", "serialize", "write_file", "emit"]
