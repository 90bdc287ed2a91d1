"""
Cardano NFT Metadata - Data Model

Typed representation of a validated CIP-25 document: the result envelope,
the error taxonomy, and the policy/asset/file records built by the parser.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Any, Union


# Asset-level keys with a dedicated field; everything else lands in `other`
RESERVED_ASSET_KEYS = ("name", "image", "mediaType", "description", "files")

# image or src: a single URL string, or string chunks stored on chain
Source = Union[str, List[str]]


class MetadataErrors(str, Enum):
    """Kinds of metadata validation failure."""
    JSON = "json"
    CIP25 = "cip25"


class NftTypes(str, Enum):
    """Where an NFT's image lives."""
    OFFCHAIN = "offchain"
    ONCHAIN = "onchain"
    IPFS = "ipfs"


@dataclass(frozen=True)
class MetadataError:
    """A terminal validation failure."""

    type: MetadataErrors
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "message": self.message}


@dataclass
class FileMetadata:
    """Entry of an asset's `files` array."""

    name: str
    src: Source
    media_type: Optional[str] = None
    other: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the CIP-25 wire format."""
        result = {"name": self.name}
        # chunked sources always need the key, even when null
        if self.media_type is not None or isinstance(self.src, list):
            result["mediaType"] = self.media_type
        result["src"] = self.src
        result.update(self.other)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileMetadata':
        other = {k: v for k, v in data.items() if k not in ("name", "src", "mediaType")}
        return cls(
            name=data["name"],
            src=data["src"],
            media_type=data.get("mediaType"),
            other=other
        )


@dataclass
class Asset:
    """One validated NFT under a policy."""

    asset_name: str
    name: Any
    image: Source
    nft_type: NftTypes = NftTypes.OFFCHAIN
    media_type: Optional[Any] = None
    description: Optional[Any] = None
    files: Optional[List[FileMetadata]] = None
    other: Dict[str, Any] = field(default_factory=dict)

    def to_metadatum(self) -> Dict[str, Any]:
        """
        Rebuild the asset's field mapping as it appears under the policy.

        Returns:
            Mapping with reserved keys first, then extension fields
        """
        result = {"name": self.name, "image": self.image}
        if self.media_type is not None:
            result["mediaType"] = self.media_type
        if self.description is not None:
            result["description"] = self.description
        if self.files is not None:
            result["files"] = [f.to_dict() for f in self.files]
        result.update(self.other)
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for JSON serialization."""
        return {
            "assetName": self.asset_name,
            "name": self.name,
            "image": self.image,
            "mediaType": self.media_type,
            "description": self.description,
            "files": [f.to_dict() for f in self.files] if self.files is not None else None,
            "other": self.other,
            "nftType": self.nft_type.value,
        }


@dataclass
class CnftData:
    """A policy and its validated assets."""

    policy_id: str
    assets: List[Asset] = field(default_factory=list)

    def get_asset(self, asset_name: str) -> Optional[Asset]:
        """Get asset by its name under the policy."""
        for asset in self.assets:
            if asset.asset_name == asset_name:
                return asset
        return None

    def to_metadata(self, label: str = "721") -> Dict[str, Any]:
        """Reassemble the CIP-25 document the data was parsed from."""
        return {
            label: {
                self.policy_id: {
                    asset.asset_name: asset.to_metadatum() for asset in self.assets
                }
            }
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "policyId": self.policy_id,
            "assets": [asset.to_dict() for asset in self.assets],
        }


@dataclass(frozen=True)
class Metadata:
    """Result envelope: parsed data or the first error, never both."""

    data: Optional[CnftData] = None
    error: Optional[MetadataError] = None

    def __post_init__(self):
        if self.data is not None and self.error is not None:
            raise ValueError("Metadata cannot carry both data and an error")

    @property
    def is_valid(self) -> bool:
        return self.data is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.data.to_dict() if self.data is not None else None,
            "error": self.error.to_dict() if self.error is not None else None,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
