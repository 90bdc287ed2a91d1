"""
CNFT CLI Package

Command line interface for the CIP-25 metadata validator.
"""

from cnft import __version__

__all__ = ['__version__']
