"""
Cardano NFT Metadata - Parser Configuration

Tunable limits for the CIP-25 parsing pipeline.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict

from .exceptions import ConfigurationError


# 16 kB; approximates the transaction metadata limit
DEFAULT_MAX_METADATA_BYTES = 16 * 1024
DEFAULT_METADATUM_LABEL = "721"
DEFAULT_MAX_CHUNK_LENGTH = 64


class NftTypeMode(str, Enum):
    """How the nftType of a parsed asset is reported."""
    CLASSIFIED = "classified"  # computed from the image field
    LEGACY = "legacy"          # every asset tagged ipfs


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for CNFTParser."""

    max_metadata_bytes: int = DEFAULT_MAX_METADATA_BYTES
    metadatum_label: str = DEFAULT_METADATUM_LABEL
    max_chunk_length: int = DEFAULT_MAX_CHUNK_LENGTH
    nft_type_mode: NftTypeMode = NftTypeMode.CLASSIFIED

    def __post_init__(self):
        """Validate configuration values."""
        for field_name in ("max_metadata_bytes", "max_chunk_length"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{field_name} must be a positive integer: {value!r}")

        # labels are numeric; YAML and env values arrive as ints
        if isinstance(self.metadatum_label, int) and not isinstance(self.metadatum_label, bool):
            object.__setattr__(self, "metadatum_label", str(self.metadatum_label))

        if not isinstance(self.metadatum_label, str) or not self.metadatum_label:
            raise ConfigurationError(f"metadatum_label must be a non-empty string: {self.metadatum_label!r}")

        try:
            object.__setattr__(self, "nft_type_mode", NftTypeMode(self.nft_type_mode))
        except ValueError:
            raise ConfigurationError(f"Unknown nft_type_mode: {self.nft_type_mode!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParserConfig':
        """Create a ParserConfig from a mapping, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["nft_type_mode"] = self.nft_type_mode.value
        return result
