"""
Cardano NFT Metadata - Exceptions

This module defines custom exceptions for CIP-25 metadata parsing.
"""


class CNFTError(Exception):
    """Base exception for all CNFT metadata errors."""
    pass


class ConfigurationError(CNFTError):
    """Raised when parser configuration values are invalid."""
    pass


class MetadataValidationError(CNFTError):
    """
    Raised by a pipeline stage when a document fails validation.

    Carries the MetadataError that ends up in the result envelope.
    """

    def __init__(self, error):
        self.error = error
        super().__init__(error.message)

    @property
    def kind(self):
        return self.error.type
