#!/usr/bin/env python3
"""
Configuration Management Module for the CNFT CLI

Handles hierarchical configuration loading (defaults, config file,
environment variables) and builds the parser configuration from it.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List, Union

import yaml

from cnft.config import ParserConfig, DEFAULT_MAX_METADATA_BYTES, DEFAULT_METADATUM_LABEL, DEFAULT_MAX_CHUNK_LENGTH
from cnft.exceptions import ConfigurationError


# Configuration file locations in order of precedence (highest to lowest)
CONFIG_SEARCH_PATHS = [
    Path.cwd() / '.cnft.yml',                # Project-specific YAML
    Path.cwd() / '.cnft.json',               # Project-specific JSON
    Path.home() / '.cnft' / 'config.yml',    # User global YAML
    Path.home() / '.cnft' / 'config.json',   # User global JSON
]

# Environment variable prefix
ENV_PREFIX = 'CNFT_'

# Default configuration values
DEFAULT_CONFIG = {
    # Parser limits
    'parser': {
        'max_metadata_bytes': DEFAULT_MAX_METADATA_BYTES,
        'metadatum_label': DEFAULT_METADATUM_LABEL,
        'max_chunk_length': DEFAULT_MAX_CHUNK_LENGTH,
        'nft_type_mode': 'classified'  # classified, legacy
    },

    # CLI behavior
    'cli': {
        'output_format': 'table',  # table, json, yaml
        'color_output': True
    }
}

# Sections whose keys may themselves contain underscores
_SECTIONS = tuple(DEFAULT_CONFIG.keys())


class ConfigurationManager:
    """Manages hierarchical configuration with environment variable support."""

    def __init__(self, config_file: Optional[str] = None,
                 environ: Optional[Dict[str, str]] = None,
                 search_paths: Optional[List[Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Explicit configuration file path
            environ: Environment mapping (defaults to os.environ)
            search_paths: Config file locations searched when no file is given
        """
        self.logger = logging.getLogger('cnft-cli.config')
        self.config_file = config_file
        self.environ = os.environ if environ is None else environ
        self.search_paths = CONFIG_SEARCH_PATHS if search_paths is None else search_paths
        self._config_cache = None
        self._config_sources = []

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from all sources in hierarchical order.

        Returns:
            Merged configuration dictionary

        Raises:
            ConfigurationError: If an explicit config file is missing or unreadable
        """
        if self._config_cache is not None:
            return self._config_cache

        configs = [DEFAULT_CONFIG]
        self._config_sources = ["defaults"]

        if self.config_file:
            path = Path(self.config_file)
            if not path.exists():
                raise ConfigurationError(f"Config file not found: {path}")
            configs.append(self._load_config_file(path))
            self._config_sources.append(f"file:{path}")
        else:
            for config_path in self.search_paths:
                if config_path.exists():
                    configs.append(self._load_config_file(config_path))
                    self._config_sources.append(f"file:{config_path}")
                    self.logger.debug(f"Loaded config from {config_path}")
                    break  # Use first found config file

        env_config = self._load_environment_variables()
        if env_config:
            configs.append(env_config)
            self._config_sources.append("environment")

        # later sources override earlier ones
        self._config_cache = self._deep_merge(*configs)
        return self._config_cache

    def _load_config_file(self, path: Path) -> Dict[str, Any]:
        """Load configuration from a YAML or JSON file."""
        try:
            with open(path, 'r') as f:
                if path.suffix in ['.yml', '.yaml']:
                    data = yaml.safe_load(f)
                elif path.suffix == '.json':
                    data = json.load(f)
                else:
                    raise ConfigurationError(f"Unknown config file format: {path}")
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load config from {path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")
        return data

    def _load_environment_variables(self) -> Dict[str, Any]:
        """
        Load configuration from environment variables.

        CNFT_PARSER_MAX_METADATA_BYTES=8192 -> {'parser': {'max_metadata_bytes': 8192}}
        """
        env_config = {}

        for key, value in self.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue

            config_key = key[len(ENV_PREFIX):].lower()
            section, sep, option = config_key.partition('_')
            if not sep or section not in _SECTIONS:
                self.logger.debug(f"Ignoring unknown environment setting {key}")
                continue

            env_config.setdefault(section, {})[option] = self._parse_env_value(value)

        return env_config

    def _parse_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Parse environment variable value to appropriate type."""
        if value.lower() in ['true', 'yes']:
            return True
        elif value.lower() in ['false', 'no']:
            return False

        try:
            if '.' in value:
                return float(value)
            else:
                return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(self, *dicts: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge multiple dictionaries."""
        result = {}

        for dictionary in dicts:
            for key, value in dictionary.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = self._deep_merge(result[key], value)
                elif isinstance(value, dict):
                    result[key] = self._deep_merge(value)
                else:
                    result[key] = value

        return result

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        Args:
            key_path: Dot-separated path (e.g., 'parser.max_metadata_bytes')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current = self.load()

        for key in key_path.split('.'):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current

    def get_sources(self) -> List[str]:
        """Get list of configuration sources that were loaded."""
        self.load()
        return self._config_sources

    def parser_config(self, **overrides: Any) -> ParserConfig:
        """
        Build the parser configuration.

        Args:
            overrides: Values that win over every configuration source

        Raises:
            ConfigurationError: If any parser setting is invalid
        """
        settings = dict(self.get('parser', {}))
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return ParserConfig.from_dict(settings)

    def reset(self):
        """Reset configuration cache."""
        self._config_cache = None
        self._config_sources = []
