#!/usr/bin/env python3
"""
Output Formatting Module for the CNFT CLI

Renders validation results and configuration as tables, JSON or YAML.
"""

import json
import sys
from typing import Any, Dict, List, Optional

import yaml
from tabulate import tabulate

from cnft.metadata import Metadata


class OutputFormatter:
    """Universal output formatter for CLI results."""

    def __init__(self, format_type: str = 'table',
                 color_output: bool = True):
        """
        Initialize output formatter.

        Args:
            format_type: Output format (table, json, yaml)
            color_output: Enable colored output
        """
        self.format_type = format_type
        self.color_output = color_output and sys.stdout.isatty()

    def format(self, data: Any, headers: Optional[List[str]] = None) -> str:
        """
        Format data according to specified format type.

        Args:
            data: Data to format
            headers: Optional headers for table format

        Returns:
            Formatted string output
        """
        if self.format_type == 'json':
            return self.format_json(data)
        elif self.format_type == 'yaml':
            return self.format_yaml(data)
        else:
            return self.format_table(data, headers)

    def format_json(self, data: Any) -> str:
        """Format data as JSON."""
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)

    def format_yaml(self, data: Any) -> str:
        """Format data as YAML."""
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True).rstrip()

    def format_table(self, data: Any, headers: Optional[List[str]] = None) -> str:
        """Format data as a table."""
        if isinstance(data, dict):
            return self._format_dict_table(data)
        elif isinstance(data, list):
            return self._format_list_table(data, headers)
        else:
            return str(data)

    def format_result(self, result: Metadata) -> str:
        """Format a validation result."""
        if self.format_type != 'table':
            return self.format(result.to_dict())

        if result.error is not None:
            status = self._colorize('INVALID', 'error')
            return self._format_dict_table({
                'status': status,
                'error_type': result.error.type.value,
                'message': result.error.message
            })

        data = result.data
        summary = self._format_dict_table({
            'status': self._colorize('VALID', 'success'),
            'policy_id': data.policy_id,
            'assets': len(data.assets)
        })
        rows = [
            {
                'asset': asset.asset_name,
                'name': asset.name,
                'type': asset.nft_type.value,
                'mediaType': asset.media_type,
                'files': len(asset.files) if asset.files is not None else 0,
                'other': len(asset.other)
            }
            for asset in data.assets
        ]
        return summary + '\n\n' + self._format_list_table(rows)

    def _format_dict_table(self, data: Dict[str, Any]) -> str:
        """Format dictionary as a key-value table."""
        table_data = [[self._colorize(str(k), 'key'), self._format_value(v)]
                      for k, v in data.items()]
        return tabulate(table_data, tablefmt='plain', disable_numparse=True)

    def _format_list_table(self, data: List[Any], headers: Optional[List[str]] = None) -> str:
        """Format list as a table."""
        if not data:
            return "No data available"

        if isinstance(data[0], dict):
            if headers is None:
                headers = list(data[0].keys())

            table_data = [[self._format_value(item.get(h, '')) for h in headers] for item in data]
            colored_headers = [self._colorize(h, 'header') for h in headers]
            return tabulate(table_data, headers=colored_headers, tablefmt='simple', disable_numparse=True)

        return '\n'.join(str(item) for item in data)

    def _format_value(self, value: Any) -> str:
        """Format individual value for display."""
        if value is None:
            return self._colorize('null', 'null')
        elif isinstance(value, bool):
            return 'true' if value else 'false'
        elif isinstance(value, dict):
            return f"<{len(value)} items>"
        elif isinstance(value, list):
            return f"[{len(value)} items]"
        else:
            val_str = str(value)
            if len(val_str) > 64:
                val_str = val_str[:61] + '...'
            return val_str

    def _colorize(self, text: str, color_type: str) -> str:
        """Add color to text if color output is enabled."""
        if not self.color_output:
            return text

        # ANSI color codes
        colors = {
            'header': '\033[1;34m',  # Bold blue
            'key': '\033[1;36m',     # Bold cyan
            'null': '\033[90m',      # Gray
            'error': '\033[1;31m',   # Bold red
            'success': '\033[1;32m', # Bold green
        }
        return f"{colors.get(color_type, '')}{text}\033[0m"
