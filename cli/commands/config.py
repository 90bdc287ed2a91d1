#!/usr/bin/env python3
"""
Configuration Management Commands for the CNFT CLI

Commands for inspecting the merged configuration and where it came from.
"""

import sys
from typing import Optional

import click

from cli.config import ENV_PREFIX
from cli.context import CLIContext, pass_context, handle_cli_error


@click.group()
@pass_context
def config(ctx: CLIContext):
    """
    Configuration management commands.

    Settings are merged from defaults, the first config file found and
    environment variables prefixed with CNFT_.
    """
    ctx.logger.debug("Config command group invoked")


@config.command('show')
@click.option('--key', help='Specific configuration key to show (dot notation)')
@click.option('--sources', is_flag=True, help='Show configuration sources')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'yaml']),
              help='Override output format')
@pass_context
@handle_cli_error
def show_config(ctx: CLIContext, key: Optional[str], sources: bool,
                output_format: Optional[str]):
    """
    Display current configuration settings.

    Examples:
        cnft config show
        cnft config show --key parser.max_metadata_bytes
        cnft config show --sources
    """
    if sources:
        click.echo("Configuration Sources (in order of precedence):")
        for i, source in enumerate(ctx.config.get_sources(), 1):
            click.echo(f"   {i}. {source}")
        return

    if key:
        value = ctx.config.get(key)
        if value is None:
            click.echo(f"Configuration key not found: {key}", err=True)
            sys.exit(1)

        if isinstance(value, dict) or output_format:
            ctx.output({key: value}, output_format or 'yaml')
        else:
            click.echo(f"{key}: {value}")
        return

    ctx.output(ctx.config.load(), output_format or 'yaml')


@config.command('check')
@pass_context
@handle_cli_error
def check_config(ctx: CLIContext):
    """
    Check that the parser settings are valid.

    Exits with status 1 and the offending setting when they are not.
    """
    parser_config = ctx.config.parser_config()
    click.echo("Configuration is valid")
    for name, value in parser_config.to_dict().items():
        click.echo(f"   parser.{name}: {value}  (env {ENV_PREFIX}PARSER_{name.upper()})")


def register_commands(cli_app):
    """Register config commands with the main CLI application."""
    cli_app.add_command(config)
