#!/usr/bin/env python3
"""
Metadata Validation Commands for the CNFT CLI

Reads a CIP-25 document from a file or stdin and reports the parsed
policy and assets, or the first validation error.
"""

import sys
from typing import Optional

import click

from cli.context import CLIContext, pass_context, handle_cli_error
from cnft.config import NftTypeMode
from cnft.parser import CNFTParser


@click.command('validate')
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--max-size', type=click.IntRange(min=1),
              help='Maximum encoded metadata size in bytes')
@click.option('--legacy-nft-type', is_flag=True,
              help='Tag every asset as ipfs, as older consumers expect')
@pass_context
@handle_cli_error
def validate(ctx: CLIContext, source, max_size: Optional[int], legacy_nft_type: bool):
    """
    Validate a CIP-25 metadata document.

    SOURCE is a JSON file, or - for stdin. Exits with status 1 when the
    document is invalid.

    Examples:
        cnft validate metadata.json
        cnft -o json validate --max-size 8192 metadata.json
    """
    config = ctx.config.parser_config(
        max_metadata_bytes=max_size,
        nft_type_mode=NftTypeMode.LEGACY if legacy_nft_type else None
    )
    ctx.logger.debug(f"Parser configuration: {config.to_dict()}")

    raw = source.read()
    result = CNFTParser(config).parse(raw)

    click.echo(ctx.formatter().format_result(result))

    if not result.is_valid:
        sys.exit(1)


def register_commands(cli_app):
    """Register validation commands with the main CLI application."""
    cli_app.add_command(validate)
