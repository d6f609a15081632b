"""
CI templates.

A template is a skeleton CI derived from a type descriptor: the required
properties (with their defaults where the type defines one) and, on request,
the optional ones. Filled-in templates can be fed back to
``repository create --in``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import yaml

from xldc.exceptions import RemoteCallError, UsageError
from xldc.logging import get_logger
from xldc.models.metadata import TypeDescriptor
from xldc.models.repository import ConfigurationItem
from xldc.models.result import Collection, Single

if TYPE_CHECKING:
    from xldc.api.services.metadata import MetadataService

logger = get_logger(__name__)

REQUIRED_MARKER = "required"
OPTIONAL_MARKER = "very optional"


def synthesize(descriptor: TypeDescriptor, include_optional: bool = False) -> dict[str, Any]:
    """
    Build the template for one type.

    Args:
        descriptor: Type to derive the template from
        include_optional: Also list optional properties

    Returns:
        ``{"name": "", "type": <type>, <property>: <default or marker>, ...}``
    """
    template: dict[str, Any] = {"name": "", "type": descriptor.type}
    for prop in descriptor.properties:
        if prop.required:
            template[prop.name] = prop.default if prop.has_default else REQUIRED_MARKER
        elif include_optional:
            template[prop.name] = OPTIONAL_MARKER
    return template


def build_templates(
    metadata: MetadataService,
    type_names: list[str] | tuple[str, ...],
    include_optional: bool = False,
    command_path: str = "xldc metadata template",
) -> Single[dict[str, Any]] | Collection[dict[str, Any]]:
    """
    Fetch each type and build its template, in input order.

    Raises:
        UsageError: If no type name is given
        RemoteCallError: If a type cannot be fetched
    """
    if not type_names:
        raise UsageError(command_path, "requires at least one type name")

    templates = []
    for name in type_names:
        try:
            descriptor = metadata.get_type(name).value
        except (httpx.HTTPError, ValueError) as e:
            raise RemoteCallError(
                command_path, "retrieving metadata for", name, cause=e
            ) from e
        logger.debug(f"Building template for {descriptor.type}")
        templates.append(synthesize(descriptor, include_optional))

    if len(templates) == 1:
        return Single(templates[0])
    return Collection(templates)


def load_ci_file(path: str | Path, command_path: str) -> dict[str, Any]:
    """
    Read a CI document, e.g. a filled-in template.

    JSON and YAML are both accepted. ``name`` is dropped, unfilled optional
    markers are dropped, unfilled required markers are an error.

    Returns:
        Flat mapping with ``id``/``type`` (when present) and properties

    Raises:
        UsageError: If the file is unreadable or still has required markers
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise UsageError(command_path, f"cannot read input file {path}: {e}") from e
    if not isinstance(data, dict):
        raise UsageError(command_path, f"input file {path} does not contain an object")

    document: dict[str, Any] = {}
    for key, value in data.items():
        if key == "name" or value == OPTIONAL_MARKER:
            continue
        if value == REQUIRED_MARKER:
            raise UsageError(command_path, f"property {key} in {path} is still set to '{REQUIRED_MARKER}'")
        document[key] = value
    return document


def split_properties(values: list[str] | tuple[str, ...], command_path: str) -> dict[str, str]:
    """
    Parse ``key=value`` pairs.

    Each argument may hold several comma separated pairs. Values may
    contain ``=``.

    Example:
        >>> split_properties(["address=10.0.0.1,os=UNIX", "port=22"], "xldc")
        {'address': '10.0.0.1', 'os': 'UNIX', 'port': '22'}
    """
    properties: dict[str, str] = {}
    for value in values:
        for pair in value.split(","):
            if not pair.strip():
                continue
            key, sep, val = pair.partition("=")
            if not sep or not key.strip():
                raise UsageError(command_path, f"invalid property '{pair}', expected key=value")
            properties[key.strip()] = val
    return properties


def build_ci(
    ci_id: str | None,
    ci_type: str | None,
    properties: dict[str, Any],
    command_path: str,
    document: dict[str, Any] | None = None,
) -> ConfigurationItem:
    """
    Assemble a CI from flags, property pairs and an optional input document.

    Flags win over the document; property pairs win over document
    properties.

    Raises:
        UsageError: If id or type is missing
    """
    document = dict(document or {})
    ci_id = ci_id or document.pop("id", None)
    ci_type = ci_type or document.pop("type", None)
    document.pop("id", None)
    document.pop("type", None)
    if not ci_id:
        raise UsageError(command_path, "requires --id")
    if not ci_type:
        raise UsageError(command_path, "requires --type")
    return ConfigurationItem(id=ci_id, type=ci_type, properties={**document, **properties})


__all__ = [
    "REQUIRED_MARKER",
    "OPTIONAL_MARKER",
    "synthesize",
    "build_templates",
    "load_ci_file",
    "split_properties",
    "build_ci",
]
