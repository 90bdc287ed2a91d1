"""
Cardano NFT Metadata - CIP-25 Validation

This package validates Cardano Native Token metadata documents against
CIP-25 and parses them into typed policy and asset records.
"""

from .config import ParserConfig, NftTypeMode

from .exceptions import (
    CNFTError,
    ConfigurationError,
    MetadataValidationError
)

from .metadata import (
    Metadata,
    MetadataError,
    MetadataErrors,
    CnftData,
    Asset,
    FileMetadata,
    NftTypes,
    RESERVED_ASSET_KEYS
)

from .parser import CNFTParser, parse_cnft

__version__ = "1.0.0"

__all__ = [
    # Parsing
    "CNFTParser",
    "parse_cnft",
    "ParserConfig",
    "NftTypeMode",

    # Result model
    "Metadata",
    "MetadataError",
    "MetadataErrors",
    "CnftData",
    "Asset",
    "FileMetadata",
    "NftTypes",
    "RESERVED_ASSET_KEYS",

    # Exceptions
    "CNFTError",
    "ConfigurationError",
    "MetadataValidationError"
]
