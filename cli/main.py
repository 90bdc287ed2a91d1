#!/usr/bin/env python3
"""
CNFT Metadata - Command Line Interface

Validate CIP-25 Cardano NFT metadata documents and inspect the
configuration the validator runs with.
"""

from typing import Optional

import click

from cli.context import CLIContext, pass_context, handle_cli_error


@click.group(context_settings={'help_option_names': ['-h', '--help']},
             invoke_without_command=True)
@click.option('--config-file', '-c',
              help='Path to configuration file')
@click.option('--output-format', '-o',
              type=click.Choice(['table', 'json', 'yaml']),
              help='Output format')
@click.option('--verbose', '-v',
              count=True,
              help='Increase verbosity (-v for INFO, -vv for DEBUG)')
@click.option('--version',
              is_flag=True,
              help='Show version information')
@pass_context
@handle_cli_error
def cli(ctx: CLIContext, config_file: Optional[str], output_format: Optional[str],
        verbose: int, version: bool):
    """
    CIP-25 Cardano NFT metadata validator

    Examples:
        cnft validate metadata.json
        cat metadata.json | cnft -o json validate -
        cnft config show --sources
    """
    if version:
        from cli import __version__
        click.echo(f"CNFT CLI v{__version__}")
        raise click.exceptions.Exit(0)

    ctx.config_file = config_file
    ctx.output_format = output_format
    ctx.verbose = verbose

    ctx.setup_logging()
    ctx.load_config()

    click_ctx = click.get_current_context()
    if click_ctx.invoked_subcommand is None:
        click.echo(click_ctx.get_help())
        return

    ctx.logger.debug("CLI initialized with context")


def register_commands():
    """Register all command modules with the main CLI."""
    from cli.commands import config, validate

    config.register_commands(cli)
    validate.register_commands(cli)


register_commands()


def main():
    cli(prog_name='cnft')


if __name__ == '__main__':
    main()
