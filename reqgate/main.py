"""
reqgate — CLI entrypoint.

Usage:
    python -m reqgate.main --help
    python -m reqgate.main check apply app --pull pull.yml --repo-dir .
    python -m reqgate.main config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from reqgate import __version__
from reqgate.core.observability.logging_config import resolve_level, setup_logging

# Exit codes for `check`
EXIT_ALLOWED = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


@click.group()
@click.version_option(version=__version__, prog_name="reqgate")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to requirements.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Gate plan, apply and import on pull request requirements."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(level=resolve_level(debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@click.argument("command", type=click.Choice(["plan", "apply", "import"]))
@click.argument("project")
@click.option(
    "--pull",
    "pull_path",
    type=click.Path(exists=False),
    required=True,
    help="Pull request snapshot (YAML or JSON).",
)
@click.option(
    "--repo-dir",
    type=click.Path(exists=False),
    default=".",
    help="Checked-out working directory of the pull request.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(
    ctx: click.Context,
    command: str,
    project: str,
    pull_path: str,
    repo_dir: str,
    as_json: bool,
) -> None:
    """Check whether COMMAND may run against PROJECT."""
    from reqgate.adapters.vcs.git import GitWorkingDir
    from reqgate.core.config.loader import ConfigError, build_context, load_config, load_snapshot
    from reqgate.core.models.requirement import CommandName
    from reqgate.core.use_cases.check import check_command
    from reqgate.core.validator import DefaultCommandRequirementHandler

    try:
        config = load_config(ctx.obj.get("config_path"))
        snapshot = load_snapshot(Path(pull_path))
        project_ctx = build_context(config, project, snapshot)
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"allowed": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(EXIT_ERROR)

    handler = DefaultCommandRequirementHandler(
        GitWorkingDir(checkout_merge=config.checkout_merge),
        strict_dependencies=config.strict_dependencies,
    )
    result = check_command(CommandName(command), project_ctx, repo_dir, handler)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif result.error:
        click.secho(f"❌ Cannot check requirements: {result.error}", fg="red")
    elif result.reason:
        click.secho(f"🚫 {result.reason}", fg="yellow")
    elif not ctx.obj.get("quiet"):
        click.secho(f"✅ {command} allowed for {project}", fg="green")

    if result.error:
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_ALLOWED if result.allowed else EXIT_REJECTED)


@cli.group()
def config() -> None:
    """Requirements configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate requirements.yml configuration."""
    from reqgate.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Projects: {len(result.config.projects)}")
        click.echo(f"   Policy check: {'on' if result.config.policy_check else 'off'}")
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


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
