"""
CNFT CLI Commands Package

Command modules for the CNFT metadata CLI.
"""

__all__ = ['validate', 'config']
