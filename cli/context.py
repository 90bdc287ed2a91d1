#!/usr/bin/env python3
"""
Shared CLI context for the CNFT command line interface.
"""

import sys
import logging
import functools
import traceback
from typing import Any, Optional

import click

from cli.config import ConfigurationManager
from cli.output import OutputFormatter


class CLIContext:
    """Global CLI context for sharing state across commands."""

    def __init__(self):
        self.config_file: Optional[str] = None
        self.output_format: Optional[str] = None
        self.verbose: int = 0
        self.config: Optional[ConfigurationManager] = None
        self.logger: logging.Logger = logging.getLogger('cnft-cli')

    def setup_logging(self):
        """Configure logging based on verbosity level."""
        log_levels = {
            0: logging.WARNING,
            1: logging.INFO,
            2: logging.DEBUG
        }

        level = log_levels.get(min(self.verbose, 2), logging.DEBUG)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        self.logger.setLevel(level)
        self.logger.handlers = [handler]

        # parser logs are INFO and below; only route them when asked for
        if self.verbose > 0:
            library_logger = logging.getLogger('cnft')
            library_logger.setLevel(level)
            library_logger.handlers = [handler]

    def load_config(self):
        """Load configuration from the given file or the search paths."""
        self.config = ConfigurationManager(self.config_file)
        self.config.load()
        self.logger.info(f"Loaded configuration from {', '.join(self.config.get_sources())}")

    def get_config(self, key: str, default: Any = None) -> Any:
        """Get configuration value with fallback to default."""
        if self.config is None:
            return default
        return self.config.get(key, default)

    def formatter(self, format_override: Optional[str] = None) -> OutputFormatter:
        format_type = format_override or self.output_format or self.get_config('cli.output_format', 'table')
        return OutputFormatter(format_type, color_output=self.get_config('cli.color_output', True))

    def output(self, data: Any, format_override: Optional[str] = None):
        """Output data in specified format."""
        click.echo(self.formatter(format_override).format(data))


# Global context instance
pass_context = click.make_pass_decorator(CLIContext, ensure=True)


def handle_cli_error(func):
    """Decorator to handle CLI errors gracefully."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo("\nOperation cancelled by user.", err=True)
            sys.exit(130)
        except (click.exceptions.Exit, click.ClickException):
            raise
        except Exception as e:
            ctx = click.get_current_context(silent=True)
            cli_ctx = ctx.find_object(CLIContext) if ctx else None

            click.echo(f"Error: {e}", err=True)
            if cli_ctx and cli_ctx.verbose >= 2:
                # Show full traceback in debug mode
                click.echo(traceback.format_exc(), err=True)
            else:
                click.echo("Use -vv for detailed error information.", err=True)

            sys.exit(1)

    return wrapper
