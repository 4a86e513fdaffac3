"""
Command-line interface for the Keystone deployment preflight.

Runs the deployment-readiness checks, prints the report and exits with
0 when the deployment may proceed, 1 otherwise.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigLoader, PreflightConfig
from .exceptions import ConfigError, ReportWriteError
from .logging_config import get_logger, setup_logging
from .output import print_header, print_report, write_json_report
from .preflight import PreflightChecker, build_checks

console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


# ============================================================
# Main CLI Group
# ============================================================

@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="keystone-preflight")
@click.pass_context
def cli(ctx):
    """
    Keystone Deployment Preflight

    Verifies tools, authentication, cloud resources and local
    configuration before a deployment. Runs all checks when no
    command is given.
    """
    ctx.ensure_object(dict)
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


def _load_config(
    config_file: Optional[str],
    env_file: Optional[str],
    **overrides,
) -> PreflightConfig:
    """Load configuration or exit with an error message."""
    try:
        return ConfigLoader(config_file=config_file, env_file=env_file).load(overrides)
    except ConfigError as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)


def run_preflight(config: PreflightConfig, out: Optional[Console] = None) -> int:
    """
    Run all checks, print the report and write the JSON artifact if enabled.

    Args:
        config: Preflight configuration
        out: Console for the report (default: stdout console)

    Returns:
        Process exit code: 0 if ready to deploy, 1 otherwise
    """
    out = out or console
    now = datetime.now(timezone.utc)

    print_header(out, config.environment, now.isoformat(timespec="seconds"))

    report = PreflightChecker(config).run_all(now=now)
    print_report(report, out)

    if config.json_output:
        try:
            path = write_json_report(report, config.report_dir)
        except ReportWriteError as e:
            # The verdict stands even if the artifact cannot be written
            err_console.print(f"[red]Error:[/red] {e}")
        else:
            out.print(f"\n📄 Report saved to: {path}", soft_wrap=True)

    logger.info(report.summary())
    return 0 if report.can_deploy else 1


# ============================================================
# RUN Command
# ============================================================

@cli.command()
@click.option("--environment", "-e", type=str, default=None, help="Environment label (or set APP_ENV)")
@click.option("--project-id", "-p", type=str, default=None, help="GCP project ID (or set GCP_PROJECT_ID)")
@click.option(
    "--json/--no-json",
    "json_output",
    default=None,
    help="Write a JSON report file (or set PREFLIGHT_JSON=true)",
)
@click.option(
    "--report-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the JSON report (or set PREFLIGHT_REPORT_DIR)",
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with preflight settings",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Dotenv file to read settings from (environment takes precedence)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def run(
    environment: Optional[str],
    project_id: Optional[str],
    json_output: Optional[bool],
    report_dir: Optional[str],
    config_file: Optional[str],
    env_file: Optional[str],
    verbose: bool,
):
    """Run all deployment checks."""
    setup_logging(level=logging.DEBUG if verbose else None)

    config = _load_config(
        config_file,
        env_file,
        environment=environment,
        project_id=project_id,
        json_output=json_output,
        report_dir=report_dir,
    )

    sys.exit(run_preflight(config))


# ============================================================
# LIST Command
# ============================================================

@cli.command("list")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with preflight settings",
)
def list_checks(config_file: Optional[str]):
    """List the registered checks in run order."""
    config = _load_config(config_file, None)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Check", no_wrap=True)
    table.add_column("Required")
    table.add_column("Description")

    for i, check in enumerate(build_checks(config), 1):
        required = "[red]required[/red]" if check.required else "[yellow]optional[/yellow]"
        table.add_row(str(i), check.name, required, check.description)

    console.print(table)


# ============================================================
# Entry Point
# ============================================================

def main():
    cli()


if __name__ == "__main__":
    main()
