"""
RapidCrawl setup wizard — CLI entrypoint.

Usage:
    rapidcrawl-setup                 # same as `rapidcrawl-setup run`
    rapidcrawl-setup run --defaults
    rapidcrawl-setup check
    python -m rapidcrawl_setup --help
"""

from __future__ import annotations

import contextlib
import json
import sys
from pathlib import Path

import click

from rapidcrawl_setup import __version__
from rapidcrawl_setup.core.observability.logging_config import resolve_level, setup_logging
from rapidcrawl_setup.ui import console


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rapidcrawl-setup")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to rapidcrawl-setup.yml (default: ./rapidcrawl-setup.yml if present).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Interactive setup wizard for the RapidCrawl Python SDK."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(level=resolve_level(debug=debug, verbose=verbose, quiet=quiet), quiet_third_party=not debug)

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


def _load_settings(ctx: click.Context, **overrides):
    """Load settings or exit 1 with the configuration error."""
    from rapidcrawl_setup.core.config.loader import ConfigError, load_settings

    try:
        return load_settings(ctx.obj.get("config_path"), overrides=overrides)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


def _human_output(as_json: bool) -> contextlib.AbstractContextManager:
    """With --json, stdout carries only the report; everything else goes to stderr."""
    if as_json:
        return contextlib.redirect_stdout(sys.stderr)
    return contextlib.nullcontext()


@cli.command()
@click.option("--package", "package", default=None, help="Package to install (default: rapid-crawl).")
@click.option("--defaults", "use_defaults", is_flag=True, help="Accept every default without prompting.")
@click.option("--dry-run", is_flag=True, help="Show commands without executing them.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Print the setup report as JSON.")
@click.pass_context
def run(ctx: click.Context, package: str | None, use_defaults: bool, dry_run: bool, as_json: bool) -> None:
    """Run the interactive setup wizard."""
    from rapidcrawl_setup.core.use_cases.setup import run_setup

    settings = _load_settings(ctx, package=package)

    with _human_output(as_json):
        console.banner(f"{settings.display_name} Setup Wizard")
        console.echo(
            f"Welcome to {settings.display_name} Setup! This wizard will help you get started.\n",
            "bright",
        )

        result = run_setup(settings, use_defaults=use_defaults, dry_run=dry_run, cwd=Path.cwd())

        if result.report.completed:
            _print_next_steps(result)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))

    sys.exit(result.exit_code)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Check for a usable Python interpreter and pip without installing anything."""
    from rapidcrawl_setup.core.use_cases.setup import run_check

    settings = _load_settings(ctx)
    with _human_output(as_json):
        result = run_check(settings, cwd=Path.cwd())

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif result.report.completed:
        click.secho(f"\n✅ Ready to install {settings.package}", fg="green", bold=True)
    else:
        click.secho(f"\n❌ Not ready to install {settings.package}", fg="red", bold=True)

    sys.exit(result.exit_code)


def _print_next_steps(result) -> None:
    settings = result.settings

    console.echo("\n🎉 Setup completed successfully!", "done")

    console.echo("\n📚 Next steps:", "warning")
    console.echo(f"   1. Review the documentation: {settings.docs_url}", "command")
    console.echo("   2. Check out the examples in the README", "command")
    console.echo(f"   3. Start building with {settings.display_name}!", "command")

    console.echo("\n💡 Quick commands:", "warning")
    if result.environment is not None:
        console.echo(f"   Activate venv: {result.environment.activation_instruction}", "command")
    sdk_check = f"from {settings.import_name} import {settings.display_name}App; print({settings.display_name}App)"
    console.echo(f'   Python SDK: python -c "{sdk_check}"', "command")
    console.echo(f"   CLI tool: {settings.import_name} --help", "command")


if __name__ == "__main__":
    cli()
