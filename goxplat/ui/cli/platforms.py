"""
CLI commands for platform lookups.

Thin wrappers over ``goxplat.core.services.platform_ops`` and
``goxplat.core.services.platform_select``.
"""

from __future__ import annotations

import json

import click

from goxplat.core.models.platform import Platform


def _resolve_go_version(ctx: click.Context, go_version: str | None) -> str:
    """Go version from the flag, else config/env, else latest."""
    if go_version is not None:
        return go_version
    settings = ctx.obj.get("settings") if ctx.obj else None
    if settings is not None and settings.go_version:
        return settings.go_version
    return ""


def _echo_platforms(platforms: tuple[Platform, ...], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps([p.to_dict() for p in platforms], indent=2))
        return
    for p in platforms:
        click.echo(f"{p}\t(default: {str(p.default).lower()})")


_GO_VERSION_OPTION = click.option(
    "--go-version",
    "-g",
    default=None,
    help="Go version as printed by 'go version', e.g. go1.16 (default: latest).",
)


@click.group()
def platforms() -> None:
    """Platforms — list, select, parse."""


@platforms.command("list")
@_GO_VERSION_OPTION
@click.option("--defaults-only", is_flag=True, help="Only list default platforms.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_platforms(
    ctx: click.Context,
    go_version: str | None,
    defaults_only: bool,
    as_json: bool,
) -> None:
    """List the OS/arch pairs a Go version can build for."""
    from goxplat.core.services.platform_ops import (
        default_platforms,
        resolve_release,
        supported_platforms,
    )

    version = _resolve_go_version(ctx, go_version)
    result = default_platforms(version) if defaults_only else supported_platforms(version)

    if not as_json and not (ctx.obj or {}).get("quiet", False):
        click.secho(
            f"📦 Supported OS/Arch combinations for {version or 'latest'} "
            f"(go{resolve_release(version)} table):",
            fg="cyan",
            bold=True,
        )
        click.echo(
            "   Default platforms are built when no OS/Arch is requested;\n"
            "   the others must be asked for explicitly.\n"
        )

    _echo_platforms(result, as_json)


@platforms.command("select")
@_GO_VERSION_OPTION
@click.option("--os", "os_filters", multiple=True, help="OS to build (prefix '!' to exclude).")
@click.option("--arch", "arch_filters", multiple=True, help="Arch to build (prefix '!' to exclude).")
@click.option(
    "--osarch",
    "osarch_filters",
    multiple=True,
    help="os/arch pair to build (prefix '!' to exclude).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def select(
    ctx: click.Context,
    go_version: str | None,
    os_filters: tuple[str, ...],
    arch_filters: tuple[str, ...],
    osarch_filters: tuple[str, ...],
    as_json: bool,
) -> None:
    """Show the platforms a cross-compile run would build."""
    from goxplat.core.services.platform_ops import supported_platforms
    from goxplat.core.services.platform_select import select_platforms

    settings = ctx.obj.get("settings") if ctx.obj else None
    if settings is not None and not (os_filters or arch_filters or osarch_filters):
        os_filters = tuple(settings.os)
        arch_filters = tuple(settings.arch)
        osarch_filters = tuple(settings.osarch)

    version = _resolve_go_version(ctx, go_version)
    result = select_platforms(
        supported_platforms(version),
        os_filters=os_filters,
        arch_filters=arch_filters,
        osarch_filters=osarch_filters,
    )

    if not result and not as_json:
        click.secho("⚠️  No platforms match the given filters", fg="yellow")
        return

    _echo_platforms(result, as_json)


@platforms.command("parse")
@click.argument("os_name", metavar="OS")
@click.argument("arch")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def parse(os_name: str, arch: str, as_json: bool) -> None:
    """Show how an OS/arch pair is interpreted."""
    from goxplat.core.models.platform import platform_from_string

    platform = platform_from_string(os_name, arch)

    if as_json:
        click.echo(json.dumps(platform.to_dict(), indent=2))
        return

    click.echo(f"{platform}")
    click.echo(f"   os:          {platform.os}")
    click.echo(f"   arch:        {platform.arch}")
    click.echo(f"   arm version: {platform.arm_version or '-'}")
