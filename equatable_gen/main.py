"""
equatable-gen — CLI entrypoint.

Usage:
    python -m equatable_gen.main --help
    python -m equatable_gen.main emit myapp.models:Point
    python -m equatable_gen.main fields Point x y
    python -m equatable_gen.main demo
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from equatable_gen import __version__
from equatable_gen.core.observability.logging_config import setup_from_cli

if TYPE_CHECKING:
    from equatable_gen.core.use_cases.emit import EmitResult


@click.group()
@click.version_option(version=__version__, prog_name="equatable-gen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to equatable.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """equatable-gen — emit Swift Equatable conformances from Python values."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_from_cli(debug=debug, verbose=verbose, quiet=quiet)


def _print_result(result: EmitResult, as_json: bool) -> None:
    """Echo an EmitResult: generated code, JSON, or a red error."""
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    click.echo(result.source.content)


@cli.command()
@click.argument("target")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--app-dir",
    default=".",
    show_default=True,
    help="Directory prepended to the import path before resolving TARGET.",
)
@click.pass_context
def emit(ctx: click.Context, target: str, as_json: bool, app_dir: str) -> None:
    """Generate Equatable code for TARGET (``module:attribute``)."""
    from equatable_gen.core.use_cases.emit import run_emit

    app_path = str(Path(app_dir).resolve())
    if app_path not in sys.path:
        sys.path.insert(0, app_path)

    result = run_emit(target, config_path=ctx.obj.get("config_path"))
    _print_result(result, as_json)


@cli.command()
@click.argument("type_name")
@click.argument("field_names", nargs=-1)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def fields(
    ctx: click.Context,
    type_name: str,
    field_names: tuple[str, ...],
    as_json: bool,
) -> None:
    """Generate Equatable code for TYPE_NAME comparing FIELD_NAMES in order."""
    from equatable_gen.core.use_cases.emit import run_emit_fields

    result = run_emit_fields(type_name, field_names, config_path=ctx.obj.get("config_path"))
    _print_result(result, as_json)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def demo(ctx: click.Context, as_json: bool) -> None:
    """Generate Equatable code for the bundled Person example."""
    from equatable_gen.core.use_cases.emit import run_emit

    result = run_emit("equatable_gen.demo:Person", config_path=ctx.obj.get("config_path"))
    _print_result(result, as_json)


# ── Register sub-command groups from equatable_gen/ui/cli/ ─────────

from equatable_gen.ui.cli.config import config

cli.add_command(config)


if __name__ == "__main__":
    cli()
