"""
constgen — CLI entrypoint.

Usage:
    constgen --help
    constgen generate all
    constgen generate tags --project path/to/UnityProject
    constgen preview layers
    constgen config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from constgen import __version__
from constgen.core.observability.logging_config import resolve_level, setup_from_env


@click.group()
@click.version_option(version=__version__, prog_name="constgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to constgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """constgen — generate C# constants from Unity project settings."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def domains(ctx: click.Context, as_json: bool) -> None:
    """List generated domains and their output files."""
    from constgen.core.config.loader import ConfigError, load_settings
    from constgen.core.models.settings import CLASS_NAMES, DOMAIN_LABELS, DOMAINS

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([
            {
                "domain": d,
                "label": DOMAIN_LABELS[d],
                "class_name": CLASS_NAMES[d],
                "path": settings.output_path(d),
            }
            for d in DOMAINS
        ], indent=2))
        return

    click.secho("\n📋 Domains (generation order)", fg="cyan", bold=True)
    for d in DOMAINS:
        click.echo(f"   • {d.replace('_', '-'):<20} {CLASS_NAMES[d]:<22} → {settings.output_path(d)}")
    click.echo()


@cli.group()
def config() -> None:
    """Generator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate constgen.yml configuration."""
    from constgen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.settings is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   Config:    {result.config_path}")
        click.echo(f"   Output:    {result.settings.assets_dir}/{result.settings.output.base_dir}")
        click.echo(f"   Namespace: {result.settings.output.namespace or '(none)'}")
        click.echo(f"   Hash:      {result.settings.hash_algorithm}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


# ── Register sub-command groups from constgen/ui/cli/ ─────────────

from constgen.ui.cli.generate import generate, preview  # noqa: E402

cli.add_command(generate)
cli.add_command(preview)


if __name__ == "__main__":
    cli()
