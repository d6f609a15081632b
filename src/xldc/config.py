"""
Configuration for xldc.

Connection settings come from three layers, highest priority first:

1. command-line flags
2. ``XLDC_*`` environment variables, then the ``xldc.yaml`` config file
3. empty defaults

The result is one immutable ConnectionProfile per invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from xldc.exceptions import ConfigurationError
from xldc.logging import get_logger
from xldc.models.config import ConnectionProfile, scheme_for

logger = get_logger(__name__)

ENV_PREFIX = "XLDC_"
DEFAULT_CONFIG_NAMES = ("xldc.yaml", "xldc.yml")
DEFAULT_CONTEXT = "/"


@dataclass(frozen=True)
class CLIOptions:
    """Global flags of one invocation. ``None`` means not given."""

    config: str | None = None
    verbose: bool = False
    username: str | None = None
    password: str | None = None
    host: str | None = None
    port: int | None = None
    context: str | None = None
    ssl: bool | None = None
    out: str | None = None


class XLDCSettings(BaseSettings):
    """
    Connection settings from the environment and the config file.

    Environment variables use the ``XLDC_`` prefix (``XLDC_HOST``,
    ``XLDC_PORT``, ...) and take precedence over the file. Bare names such
    as ``HOST`` or ``USERNAME`` are not read; shells commonly set those.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        yaml_file=None,
    )

    username: str = ""
    password: str = ""
    host: str = ""
    port: int = 0
    context: str = ""
    ssl: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )


def find_config_file(config_file: str | Path | None = None) -> Path | None:
    """
    Locate the config file.

    Args:
        config_file: Explicit path from ``--config``

    Returns:
        Path of an existing file, or None
    """
    if config_file:
        path = Path(config_file)
        if path.is_file():
            return path
        logger.warning(f"Config {path} not found")
        return None

    for name in DEFAULT_CONFIG_NAMES:
        path = Path.cwd() / name
        if path.is_file():
            return path
    logger.info(f"Config {DEFAULT_CONFIG_NAMES[0]} not found in {Path.cwd()}")
    return None


def load_settings(config_file: str | Path | None = None) -> XLDCSettings:
    """
    Load settings from the environment and the config file.

    Raises:
        ConfigurationError: If a value cannot be parsed
    """
    path = find_config_file(config_file)

    class _FileSettings(XLDCSettings):
        model_config = SettingsConfigDict(yaml_file=path)

    try:
        settings = _FileSettings()
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0]) if e.errors() else "config"
        raise ConfigurationError(field, f"Invalid configuration value for {field}: {e}") from e
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError("config", f"Cannot read config file {path}: {e}") from e

    if path is not None:
        logger.info(f"Using config file: {path}")
    return settings


def resolve_profile(options: CLIOptions, settings: XLDCSettings) -> ConnectionProfile:
    """
    Merge flags over settings and validate the result.

    Required fields are checked in order (username, password, host, port);
    the first missing one raises.

    Raises:
        ConfigurationError: If a required field is missing or invalid
    """
    username = options.username or settings.username
    password = options.password or settings.password
    host = options.host or settings.host
    port = options.port or settings.port
    context = options.context or settings.context
    ssl = options.ssl if options.ssl is not None else settings.ssl

    if not username:
        raise ConfigurationError("username")
    if not password:
        raise ConfigurationError("password")
    if not host:
        raise ConfigurationError("host")
    if not port:
        raise ConfigurationError("port")
    if not context:
        logger.warning(f"No context set, using {DEFAULT_CONTEXT}")
        context = DEFAULT_CONTEXT

    try:
        return ConnectionProfile(
            user=username,
            password=password,
            host=host,
            port=port,
            context_path=context,
            scheme=scheme_for(ssl),
        )
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        raise ConfigurationError(field, f"Invalid value for {field}: {e}") from e


__all__ = [
    "CLIOptions",
    "XLDCSettings",
    "find_config_file",
    "load_settings",
    "resolve_profile",
    "ENV_PREFIX",
]
