"""
xldc command-line interface.

Usage:
    xldc verify
    xldc metadata type udm.Environment --long
    xldc metadata template overthere.SshHost --optional --out host.json
    xldc repository get Infrastructure/dev/host1
    xldc repository create --id Environments/dev --type udm.Environment
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
import httpx
from rich.console import Console
from rich.markup import escape

from xldc import __version__
from xldc.api.client import XLDeployClient
from xldc.config import CLIOptions, load_settings, resolve_profile
from xldc.exceptions import ConnectivityError, RemoteCallError, UsageError, XLDCError
from xldc.logging import get_logger, setup_logging
from xldc.models.metadata import TypeDescriptor
from xldc.models.repository import ConfigurationItem
from xldc.models.result import Collection, Single
from xldc.render import emit
from xldc.templates import build_ci, build_templates, load_ci_file, split_properties

err_console = Console(stderr=True)

logger = get_logger(__name__)


class XLDCGroup(click.Group):
    """Root group: turns every XLDCError into a diagnostic and exit code 1."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except XLDCError as e:
            logger.debug("Fatal error", exc_info=e)
            err_console.print(f"[red]Error:[/red] {escape(e.message)}", soft_wrap=True)
            raise SystemExit(1) from e


def get_options(ctx: click.Context) -> CLIOptions:
    """Get the global options of this invocation."""
    return ctx.find_root().obj


def open_client(options: CLIOptions) -> XLDeployClient:
    """
    Resolve the connection profile and verify the server is reachable.

    Raises:
        ConfigurationError: If a required setting is missing
        ConnectivityError: If the server cannot be reached
    """
    settings = load_settings(options.config)
    profile = resolve_profile(options, settings)
    client = XLDeployClient(profile)
    if not client.connected():
        client.close()
        raise ConnectivityError(profile.base_url)
    logger.info("Connection to XL-Deploy verified")
    return client


@contextmanager
def remote_call(command_path: str, action: str, identifier: str | None = None) -> Iterator[None]:
    """Convert HTTP and payload errors into RemoteCallError."""
    try:
        yield
    except (httpx.HTTPError, ValueError) as e:
        raise RemoteCallError(command_path, action, identifier, cause=e) from e


@click.group(name="xldc", cls=XLDCGroup)
@click.option("--config", "config", type=click.Path(dir_okay=False), help="Config file (default is $PWD/xldc.yaml)")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Verbose output")
@click.option("--username", help="Username for the connection")
@click.option("--password", help="Password for the connection")
@click.option("--host", help="Hostname of the XL Deploy server")
@click.option("--port", type=int, help="Port where XL Deploy is running")
@click.option("--context", help="Context root where XL Deploy is running")
@click.option("--ssl/--no-ssl", default=None, help="Use SSL")
@click.option("--out", type=click.Path(dir_okay=False), help="Write output to this file")
@click.version_option(version=__version__, prog_name="xldc")
@click.pass_context
def main(
    ctx: click.Context,
    config: str | None,
    verbose: bool,
    username: str | None,
    password: str | None,
    host: str | None,
    port: int | None,
    context: str | None,
    ssl: bool | None,
    out: str | None,
) -> None:
    """XL Deploy command-line interface."""
    setup_logging(verbose)
    ctx.obj = CLIOptions(
        config=config,
        verbose=verbose,
        username=username,
        password=password,
        host=host,
        port=port,
        context=context,
        ssl=ssl,
        out=out,
    )


# =============================================================================
# Verify Command
# =============================================================================


@main.command()
@click.pass_context
def verify(ctx: click.Context) -> None:
    """Verify the connection to XL Deploy."""
    options = get_options(ctx)
    with open_client(options):
        if not options.verbose:
            click.echo("Connection to XL-Deploy verified")


# =============================================================================
# Metadata Commands
# =============================================================================


@main.group()
def metadata() -> None:
    """Display metadata from XL Deploy."""
    pass


def _get_type_metadata(
    xld: XLDeployClient, type_name: str | None, command_path: str
) -> Single[TypeDescriptor] | Collection[TypeDescriptor]:
    if type_name is None:
        with remote_call(command_path, "retrieving metadata"):
            return xld.metadata.list_types()
    with remote_call(command_path, "retrieving metadata for", type_name):
        return xld.metadata.get_type(type_name)


@metadata.command("type")
@click.argument("type_name", required=False)
@click.option("--long", "long_", is_flag=True, default=False, help="Show full type definitions")
@click.option("--out", type=click.Path(dir_okay=False), help="Write output to this file")
@click.pass_context
def metadata_type(ctx: click.Context, type_name: str | None, long_: bool, out: str | None) -> None:
    """Display metadata for all types or a single type.

    Only names and descriptions are shown unless --long is given.
    """
    options = get_options(ctx)
    with open_client(options) as xld:
        result = _get_type_metadata(xld, type_name, ctx.command_path)
    emit(result, out or options.out, condensed=not long_)


@metadata.command("template")
@click.argument("type_names", nargs=-1)
@click.option("--optional", "include_optional", is_flag=True, default=False, help="Include optional properties")
@click.option("--out", type=click.Path(dir_okay=False), help="Write output to this file")
@click.pass_context
def metadata_template(
    ctx: click.Context,
    type_names: tuple[str, ...],
    include_optional: bool,
    out: str | None,
) -> None:
    """Generate CI templates for one or more types.

    Required properties are listed with their default or "required";
    with --optional, optional properties are listed as "very optional".

    Examples:

        xldc metadata template overthere.SshHost

        xldc metadata template udm.Environment udm.Dictionary --out templates.json
    """
    if not type_names:
        raise UsageError(ctx.command_path, "requires at least one type name")
    options = get_options(ctx)
    with open_client(options) as xld:
        result = build_templates(xld.metadata, type_names, include_optional, ctx.command_path)
    emit(result, out or options.out)


@metadata.command("orchestrators")
@click.option("--out", type=click.Path(dir_okay=False), help="Write output to this file")
@click.pass_context
def metadata_orchestrators(ctx: click.Context, out: str | None) -> None:
    """Display the available orchestrators."""
    options = get_options(ctx)
    with open_client(options) as xld:
        with remote_call(ctx.command_path, "retrieving metadata"):
            result = xld.metadata.get_orchestrators()
    emit(result, out or options.out)


@metadata.command("permissions")
@click.option("--out", type=click.Path(dir_okay=False), help="Write output to this file")
@click.pass_context
def metadata_permissions(ctx: click.Context, out: str | None) -> None:
    """Display permission metadata."""
    options = get_options(ctx)
    with open_client(options) as xld:
        with remote_call(ctx.command_path, "retrieving metadata"):
            result = xld.metadata.get_permissions()
    emit(result, out or options.out)


# =============================================================================
# Repository Commands
# =============================================================================


@main.group()
def repository() -> None:
    """Read and write configuration items in the XL Deploy repository."""
    pass


def _read_ids(path: str, command_path: str) -> list[str]:
    """Read CI ids from a file, one per line; blank lines and # comments are skipped."""
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise UsageError(command_path, f"cannot read input file {path}: {e}") from e
    return [line.strip() for line in lines if line.strip() and not line.strip().startswith("#")]


def _get_cis(
    xld: XLDeployClient, ci_ids: list[str], command_path: str
) -> Single[ConfigurationItem] | Collection[ConfigurationItem]:
    items = []
    for ci_id in ci_ids:
        with remote_call(command_path, "retrieving configuration item", ci_id):
            items.append(xld.repository.get_ci(ci_id).value)
    if len(items) == 1:
        return Single(items[0])
    return Collection(items)


def _create_ci(
    xld: XLDeployClient, ci: ConfigurationItem, command_path: str
) -> Single[ConfigurationItem]:
    with remote_call(command_path, "creating configuration item", ci.id):
        return xld.repository.create_ci(ci)


def _update_ci(
    xld: XLDeployClient, ci: ConfigurationItem, merge: bool, command_path: str
) -> Single[ConfigurationItem]:
    if merge:
        with remote_call(command_path, "retrieving configuration item", ci.id):
            existing = xld.repository.get_ci(ci.id).value
        ci = ConfigurationItem(
            id=ci.id,
            type=ci.type,
            properties={**existing.properties, **ci.properties},
        )
        logger.debug(f"Merged {len(existing.properties)} existing properties into {ci.id}")
    with remote_call(command_path, "updating configuration item", ci.id):
        return xld.repository.update_ci(ci)


def _ci_from_arguments(
    ci_id: str | None,
    ci_type: str | None,
    props: tuple[str, ...],
    in_file: str | None,
    command_path: str,
) -> ConfigurationItem:
    document = load_ci_file(in_file, command_path) if in_file else None
    properties = split_properties(props, command_path)
    return build_ci(ci_id, ci_type, properties, command_path, document)


@repository.command("get")
@click.argument("ci_id", required=False)
@click.option("--in", "in_file", type=click.Path(dir_okay=False), help="File with CI ids, one per line")
@click.option("--out", type=click.Path(dir_okay=False), help="Write output to this file")
@click.pass_context
def repository_get(ctx: click.Context, ci_id: str | None, in_file: str | None, out: str | None) -> None:
    """Get a CI from the repository."""
    ci_ids = [ci_id] if ci_id else []
    if in_file:
        ci_ids.extend(_read_ids(in_file, ctx.command_path))
    if not ci_ids:
        raise UsageError(ctx.command_path, "requires one argument")
    options = get_options(ctx)
    with open_client(options) as xld:
        result = _get_cis(xld, ci_ids, ctx.command_path)
    emit(result, out or options.out)


@repository.command("create")
@click.argument("props", nargs=-1)
@click.option("--id", "-i", "ci_id", help="CI id")
@click.option("--type", "-t", "ci_type", help="CI type")
@click.option("--in", "in_file", type=click.Path(dir_okay=False), help="JSON/YAML file with the CI, e.g. a template")
@click.option("--out", type=click.Path(dir_okay=False), help="Write output to this file")
@click.pass_context
def repository_create(
    ctx: click.Context,
    props: tuple[str, ...],
    ci_id: str | None,
    ci_type: str | None,
    in_file: str | None,
    out: str | None,
) -> None:
    """Create a CI in the repository.

    PROPS are comma separated key=value pairs.

    Examples:

        xldc repository create --id Infrastructure/host1 --type overthere.SshHost os=UNIX,address=10.0.0.1
    """
    ci = _ci_from_arguments(ci_id, ci_type, props, in_file, ctx.command_path)
    options = get_options(ctx)
    with open_client(options) as xld:
        result = _create_ci(xld, ci, ctx.command_path)
    emit(result, out or options.out)


@repository.command("update")
@click.argument("props", nargs=-1)
@click.option("--id", "-i", "ci_id", help="CI id")
@click.option("--type", "-t", "ci_type", help="CI type")
@click.option("--merge", "-m", is_flag=True, default=False, help="Merge the update with the existing CI")
@click.option("--in", "in_file", type=click.Path(dir_okay=False), help="JSON/YAML file with the CI")
@click.option("--out", type=click.Path(dir_okay=False), help="Write output to this file")
@click.pass_context
def repository_update(
    ctx: click.Context,
    props: tuple[str, ...],
    ci_id: str | None,
    ci_type: str | None,
    merge: bool,
    in_file: str | None,
    out: str | None,
) -> None:
    """Update an existing CI in the repository.

    Without --merge the CI is replaced by the given properties.
    """
    ci = _ci_from_arguments(ci_id, ci_type, props, in_file, ctx.command_path)
    options = get_options(ctx)
    with open_client(options) as xld:
        result = _update_ci(xld, ci, merge, ctx.command_path)
    emit(result, out or options.out)


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    main()
