"""
goxplat — CLI entrypoint.

Usage:
    python -m goxplat.main --help
    python -m goxplat.main versions
    python -m goxplat.main platforms list --go-version go1.16
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from goxplat import __version__
from goxplat.core.config.loader import ConfigError, load_settings
from goxplat.core.observability.logging_config import configure_cli_logging


@click.group()
@click.version_option(version=__version__, prog_name="goxplat")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to goxplat.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """goxplat — Go cross-compilation platform lookup."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    try:
        settings = load_settings(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
    ctx.obj["settings"] = settings

    # ── Logging setup (once, at process start) ──────────────────
    configure_cli_logging(
        debug=debug,
        verbose=verbose,
        quiet=quiet,
        config_level=settings.log_level,
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def versions(as_json: bool) -> None:
    """Show the Go version ranges and their platform counts."""
    from goxplat.core.data.platforms import LATEST_RELEASE
    from goxplat.core.services.platform_ops import resolution_table

    table = resolution_table()

    if as_json:
        click.echo(json.dumps({
            "latest": LATEST_RELEASE,
            "ranges": [entry.to_dict() for entry in table],
        }, indent=2))
        return

    click.secho("📋 Known Go releases:", fg="cyan", bold=True)
    for entry in table:
        click.echo(f"   {entry.constraint:<16} → go{entry.release:<6} {len(entry.platforms):>3} platforms")
    click.echo(f"   anything else    → go{LATEST_RELEASE} (latest)")


# ── Register sub-command groups from goxplat/ui/cli/ ──────────────

from goxplat.ui.cli.platforms import platforms  # noqa: E402

cli.add_command(platforms)


if __name__ == "__main__":
    cli()
