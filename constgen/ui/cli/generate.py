"""
CLI commands for constant generation.

Thin wrappers over ``constgen.core.use_cases.generate``.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path

import click

from constgen.core.models.settings import DOMAIN_LABELS, DOMAINS


def _source_options(func: Callable) -> Callable:
    """Options shared by every command that reads a project."""
    func = click.option(
        "--fixture",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read project data from a YAML fixture instead of a Unity project.",
    )(func)
    func = click.option(
        "--project",
        "project_dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Unity project root (default: config file dir, else cwd).",
    )(func)
    return func


def _run(ctx: click.Context, domains: list[str] | None, project_dir: Path | None,
         fixture: Path | None, dry_run: bool, as_json: bool) -> None:
    from constgen.core.use_cases.generate import run_generate

    report = run_generate(
        domains=domains,
        config_path=ctx.obj.get("config_path"),
        project_dir=project_dir,
        fixture=fixture,
        dry_run=dry_run,
    )

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        if report.status != "ok":
            sys.exit(1)
        return

    if report.error:
        click.secho(f"❌ {report.error}", fg="red")
        sys.exit(1)

    quiet = ctx.obj.get("quiet", False)
    mode_label = "[dry-run] " if dry_run else ""

    if not quiet:
        click.secho(f"\n⚙️  {mode_label}Generating script constants", fg="cyan", bold=True)
        click.echo(f"   Project:  {report.project_root}")
        click.echo(f"   Source:   {report.provider}")
        click.echo()

    for domain in report.domains:
        if domain.ok:
            if quiet:
                continue
            groups = f", {domain.groups} group(s)" if domain.groups else ""
            click.secho(f"   ✓ {domain.label:<24}", fg="green", nl=False)
            click.echo(f"{domain.constants} constant(s){groups}  → {domain.path}")
        else:
            click.secho(f"   ✗ {domain.label:<24}", fg="red", nl=False)
            click.echo(f"{domain.error_type}: {domain.error}")

    status_color = {"ok": "green", "partial": "yellow", "failed": "red"}.get(report.status, "white")
    if not quiet:
        click.echo()
        click.secho(
            f"   Result: {report.succeeded}/{report.total} succeeded",
            fg=status_color,
            bold=True,
        )
        click.echo()

    if report.failed:
        sys.exit(1)


@click.group()
def generate() -> None:
    """Generate C# constant classes from project settings."""


@generate.command("all")
@_source_options
@click.option("--dry-run", is_flag=True, help="Render but don't write files.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate_all_cmd(
    ctx: click.Context,
    project_dir: Path | None,
    fixture: Path | None,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Generate every domain: scenes, tags, layers, sorting layers,
    input axes, mixer parameters, animator parameters.
    """
    _run(ctx, None, project_dir, fixture, dry_run, as_json)


def _domain_command(domain: str) -> click.Command:
    @_source_options
    @click.option("--dry-run", is_flag=True, help="Render but don't write the file.")
    @click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
    @click.pass_context
    def command(
        ctx: click.Context,
        project_dir: Path | None,
        fixture: Path | None,
        dry_run: bool,
        as_json: bool,
    ) -> None:
        _run(ctx, [domain], project_dir, fixture, dry_run, as_json)

    command.__doc__ = f"Generate {DOMAIN_LABELS[domain]} constants."
    return click.command(domain.replace("_", "-"))(command)


for _domain in DOMAINS:
    generate.add_command(_domain_command(_domain))


@click.command()
@click.argument("domain", type=click.Choice([d.replace("_", "-") for d in DOMAINS]))
@_source_options
@click.pass_context
def preview(ctx: click.Context, domain: str, project_dir: Path | None, fixture: Path | None) -> None:
    """Print the file one domain would generate, without writing it."""
    from constgen.core.config.loader import ConfigError, load_settings
    from constgen.core.errors import GenerationError
    from constgen.core.use_cases.generate import (
        build_provider,
        preview_domain,
        resolve_project_root,
    )

    config_path = ctx.obj.get("config_path")
    try:
        settings = load_settings(config_path)
        project_root = resolve_project_root(config_path, project_dir)
        provider = build_provider(project_root, settings, fixture)
    except (ConfigError, GenerationError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    result = preview_domain(domain.replace("-", "_"), settings, provider, project_root)
    if not result.ok:
        click.secho(f"❌ {result.error_type}: {result.error}", fg="red")
        sys.exit(1)

    click.echo(result.content, nl=False)
