"""
mockgen — CLI entrypoint.

Usage:
    python -m mockgen.main --help
    python -m mockgen.main generate
    python -m mockgen.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from mockgen.core.observability.logging_config import setup_logging

from mockgen import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mockgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to mockgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """mockgen — generate mock action classes from a config tree."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("MOCKGEN_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("MOCKGEN_LOG_FILE"),
        log_file_level=os.environ.get("MOCKGEN_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Input config tree (default: ./old-config).",
)
@click.option(
    "--output",
    "-o",
    "output_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output config tree (default: ./new-config).",
)
@click.option(
    "--layout",
    type=click.Choice(["nested", "flat"]),
    default=None,
    help="Unit layout: one folder per symbol, or one per API folder.",
)
@click.option("--dry-run", is_flag=True, help="Show what would be generated, write nothing.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    input_root: Path | None,
    output_root: Path | None,
    layout: str | None,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Generate class files for every generator in the config tree.

    Examples:

        mockgen generate

        mockgen generate -i old-config -o new-config --layout flat

        mockgen generate --dry-run
    """
    from mockgen.core.use_cases.generate import run_generate

    result = run_generate(
        config_path=ctx.obj.get("config_path"),
        input_root=input_root,
        output_root=output_root,
        layout=layout,
        dry_run=dry_run,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    config = result.config
    assert config is not None
    quiet = ctx.obj.get("quiet", False)

    if not quiet:
        mode_label = "[dry-run] " if dry_run else ""
        click.secho(f"\n⚙️  {mode_label}{config.input} → {config.output}", fg="cyan", bold=True)
        click.echo(f"   Layout: {config.layout}")
        click.echo()

        for unit in result.units:
            click.secho("   ✓ ", fg="green", nl=False)
            click.echo(f"{unit.class_name}  → {unit.folder}")

        if result.units:
            click.echo()

    verb = "would be generated" if dry_run else "generated"
    click.secho(
        f"   {result.unit_count} class file(s) {verb}.",
        fg="green" if result.units else "yellow",
        bold=True,
    )
    click.echo()


@cli.group()
def config() -> None:
    """Generator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate mockgen.yml configuration."""
    from mockgen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Input:  {result.config.input}")
        click.echo(f"   Output: {result.config.output}")
        click.echo(f"   Layout: {result.config.layout}")
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


if __name__ == "__main__":
    cli()
