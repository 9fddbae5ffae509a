# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#                            ᚷᛃᚨᛚᛚᚨᚱᚺᛟᚱᚾ • GJALLARHORN
#                      The Horn That Calls Every Command
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#   Command line entry point. Commands resolve profiles and regions for a
#   deployment context and print the result; persisting the context itself
#   is left to the context store that consumes it.
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import click
from rich.markup import escape
from rich.table import Table

from awsctx import cli_utils
from awsctx.aws_utils import AwsFiles, DEFAULT_PROFILE, get_aws_profiles
from awsctx.cli_utils import (
    ExitCode, OUTPUT_FORMATS, exit_code_for,
    set_console_theme, configure_logging, print_error, print_version_info,
)
from awsctx.context import ContextCreateHelper, ContextParams
from awsctx.errors import CanceledError, ContextError

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version and exit')
@click.option('--verbose', '-v', is_flag=True, help='Log debug information to stderr')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.option(
    '--credentials-file',
    type=click.Path(dir_okay=False),
    default=None,
    help='Shared credentials file (default: $AWS_SHARED_CREDENTIALS_FILE or ~/.aws/credentials)'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False),
    default=None,
    help='Shared config file (default: $AWS_CONFIG_FILE or ~/.aws/config)'
)
@click.pass_context
def main(ctx, version, verbose, no_color, credentials_file, config_file):
    """
    AWSCTX - AWS profiles and regions for deployment contexts

    \b
    Quick Start:
      awsctx create staging                    # Pick or create a profile, then a region
      awsctx create prod --profile prod        # Use an existing profile
      awsctx profiles                          # List configured profiles
    """
    set_console_theme(no_color=no_color)
    configure_logging(verbose=verbose)

    if version:
        print_version_info()
        ctx.exit(0)

    ctx.obj = AwsFiles.from_environment(credentials_file, config_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
def version():
    """Show detailed version and system information."""
    print_version_info()


@main.command()
@click.argument('name')
@click.option('--profile', default=None, help='Existing AWS profile to use (skips profile selection)')
@click.option('--region', default=None, help='AWS region to use (skips region prompt and leaves ~/.aws/config untouched)')
@click.option('--description', default='', help='Free-text description of the context')
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS), default='table', help='Output format')
@click.pass_obj
def create(files: AwsFiles, name: str, profile: Optional[str], region: Optional[str], description: str, output_format: str) -> None:
    """
    Resolve the AWS profile and region for a new context.
    
    Missing values are asked for interactively. New profiles can be created
    on the fly; their keys are appended to the shared credentials file.
    
    Example:
        awsctx create staging --description "Staging cluster"
        awsctx create prod --profile prod --region eu-west-1 --format json
    """
    logger.info("Creating context %s: profile=%s, region=%s", name, profile, region)
    params = ContextParams(name=name, description=description, profile=profile, region=region)

    try:
        ecs_ctx, descr = ContextCreateHelper(files=files).create_context_data(params)
    except CanceledError:
        logger.debug("Context creation canceled by user")
        cli_utils.err_console.print("[dim]Canceled.[/dim]")
        sys.exit(ExitCode.CANCELED)
    except ContextError as e:
        logger.debug("Context creation failed: %s", e, exc_info=True)
        print_error(str(e))
        sys.exit(exit_code_for(e))
    except Exception as e:
        logger.error("Create command failed: %s", e, exc_info=True)
        print_error(str(e))
        raise click.Abort()

    if output_format == 'json':
        click.echo(json.dumps({'name': name, 'description': descr, **ecs_ctx.to_dict()}, indent=2))
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Context", style="green")
    table.add_column("Profile", style="cyan")
    table.add_column("Region", style="yellow")
    table.add_column("Description", style="dim")
    table.add_row(escape(name), escape(ecs_ctx.profile or DEFAULT_PROFILE), escape(ecs_ctx.region), escape(descr))

    cli_utils.console.print()
    cli_utils.console.print(f"[green]✓[/green] Context [bold]{escape(name)}[/bold] resolved")
    cli_utils.console.print(table)


@main.command()
@click.pass_obj
def profiles(files: AwsFiles) -> None:
    """
    List AWS profiles from the shared credentials and config files.
    
    Shows each profile's configured region and whether static keys are
    stored for it.
    
    Example:
        awsctx profiles
    """
    try:
        profiles_list = get_aws_profiles(files)
    except ContextError as e:
        print_error(str(e))
        sys.exit(exit_code_for(e))

    if not profiles_list:
        cli_utils.console.print("[yellow]⚠️  No AWS profiles found[/yellow]")
        cli_utils.console.print("\n[dim]Create one with:[/dim]")
        cli_utils.console.print("  awsctx create <context-name>")
        return

    cli_utils.console.print(f"\n[bold cyan]📋 Available AWS Profiles:[/bold cyan] [dim]({len(profiles_list)} found)[/dim]\n")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Profile", style="green")
    table.add_column("Region", style="yellow")
    table.add_column("Credentials", style="dim")

    for profile in profiles_list:
        region = escape(profile['region']) if profile['region'] else '[dim]not configured[/dim]'
        stored = "✓ stored" if profile['credentials'] else ""
        table.add_row(escape(profile['name']), region, stored)

    cli_utils.console.print(table)
    cli_utils.console.print()


if __name__ == '__main__':
    main()
