"""
CLI commands for emitter settings.

Thin wrappers over ``equatable_gen.core.config.loader``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


@click.group()
def config() -> None:
    """Settings — inspect the effective equatable.yml."""


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Show the effective settings and where they came from."""
    from equatable_gen.core.config.loader import ConfigError, find_settings_file, load_settings

    config_path: Path | None = ctx.obj.get("config_path") or find_settings_file()

    try:
        settings = load_settings(config_path, search=False)
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
            return
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    source = str(config_path) if config_path else None

    if as_json:
        click.echo(json.dumps({"source": source, **settings.model_dump()}, indent=2))
        return

    click.secho("⚙️  Settings", fg="cyan", bold=True)
    click.echo(f"   Source:       {source or '(defaults)'}")
    click.echo(f"   Indent width: {settings.indent_width}")
    click.echo(f"   Access level: {settings.access_level}")
