"""
Cardano NFT Metadata - CIP-25 Parser

This module validates a raw JSON document against CIP-25 and builds the
typed policy/asset representation. Validation runs as a fixed sequence of
stages:

1. decode the JSON text
2. guard the encoded size
3. require the 721 metadatum label
4. resolve the single policy id
5. validate every asset (image, name, files)
6. assemble the result

Each stage raises MetadataValidationError on failure. The first failure is
returned in the Metadata envelope and no later stage runs. A bad asset
rejects the whole document; there are no partial results.
"""

import json
import logging
from typing import Any, List, Optional, Tuple

from .config import NftTypeMode, ParserConfig
from .exceptions import MetadataValidationError
from .json_value import encoded_size, expect_array, expect_object, fail, has_value
from .metadata import (
    RESERVED_ASSET_KEYS,
    Asset,
    CnftData,
    FileMetadata,
    Metadata,
    MetadataErrors,
    NftTypes,
    Source,
)
from .uri import classify_url, is_valid_url


logger = logging.getLogger(__name__)


class _NonStandardConstant(ValueError):
    """NaN or Infinity in the input; strict JSON has neither."""


def _reject_constant(name: str):
    raise _NonStandardConstant(f"Unexpected token {name} in JSON")


# CPython refuses longer int conversions by default
MAX_INT_DIGITS = 4300


def _parse_int(literal: str):
    """Decode an integer literal; oversized ones overflow to float infinity."""
    if len(literal.lstrip("-")) <= MAX_INT_DIGITS:
        return int(literal)
    return float(literal)


class CNFTParser:
    """
    CIP-25 metadata parser.

    Stateless between calls; one instance may be shared freely.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

    def parse(self, json_str: str) -> Metadata:
        """
        Validate and parse a CIP-25 document.

        Args:
            json_str: Raw JSON text

        Returns:
            Metadata holding either CnftData or the first MetadataError

        Raises:
            TypeError, RecursionError, UnicodeDecodeError: Decoder faults
                that are not JSON syntax errors propagate unchanged
        """
        try:
            data = self._run_pipeline(json_str)
        except MetadataValidationError as e:
            logger.debug(f"Rejected metadata ({e.kind.value}): {e.error.message}")
            return Metadata(error=e.error)

        logger.info(f"Parsed policy {data.policy_id} with {len(data.assets)} asset(s)")
        return Metadata(data=data)

    def _run_pipeline(self, json_str: str) -> CnftData:
        document = self.decode(json_str)
        self.check_size(document)
        metadatum = self.find_metadatum(document)
        policy_id, policy = self.find_policy(metadatum)
        assets = self.find_assets(policy)
        return CnftData(policy_id=policy_id, assets=assets)

    # Stages

    def decode(self, json_str: str) -> Any:
        """Decode raw text; null and blank documents count as empty."""
        if isinstance(json_str, (str, bytes, bytearray)) and not json_str.strip():
            raise fail(MetadataErrors.JSON, "Empty json")

        try:
            document = json.loads(
                json_str,
                parse_constant=_reject_constant,
                parse_int=_parse_int
            )
        except (json.JSONDecodeError, _NonStandardConstant) as e:
            raise fail(MetadataErrors.JSON, str(e))

        if document is None:
            raise fail(MetadataErrors.JSON, "Empty json")
        return document

    def check_size(self, document: Any) -> None:
        limit = self.config.max_metadata_bytes
        size = encoded_size(document)
        if size > limit:
            logger.debug(f"Metadata is {size} bytes, limit {limit}")
            raise fail(MetadataErrors.CIP25, f"Metadata too large over {limit / 1024:g}kB")

    def find_metadatum(self, document: Any) -> Any:
        """Return the value under the 721 label."""
        label = self.config.metadatum_label
        # arrays never hold the label
        if isinstance(document, list):
            raise fail(MetadataErrors.CIP25, f"Missing {label} metadatum tag")
        document = expect_object(document, "Metadata must be a JSON object", MetadataErrors.JSON)
        if label not in document:
            raise fail(MetadataErrors.CIP25, f"Missing {label} metadatum tag")
        return document[label]

    def find_policy(self, metadatum: Any) -> Tuple[str, Any]:
        """Resolve the single policy id and its asset mapping."""
        policies = expect_object(
            metadatum,
            f"{self.config.metadatum_label} metadatum must map policy ids to assets"
        )
        if len(policies) > 1:
            raise fail(MetadataErrors.CIP25, "Multiple policies defined")
        if len(policies) < 1:
            raise fail(MetadataErrors.CIP25, "No policy defined")

        policy_id, policy = next(iter(policies.items()))
        return policy_id, policy

    def find_assets(self, policy: Any) -> List[Asset]:
        policy = expect_object(policy, "Policy must map asset names to metadata")

        assets = [self.parse_asset(asset_name, fields) for asset_name, fields in policy.items()]
        if not assets:
            raise fail(MetadataErrors.CIP25, "No assets defined")
        return assets

    # Asset validation

    def parse_asset(self, asset_name: str, fields: Any) -> Asset:
        """Validate one asset entry and build its record."""
        fields = expect_object(fields, "Asset metadata must be a map")

        if not has_value(fields, "image"):
            raise fail(MetadataErrors.CIP25, "CIP 25 requires an image tag")
        if not has_value(fields, "name"):
            raise fail(MetadataErrors.CIP25, "CIP 25 requires a name tag")

        other = {k: v for k, v in fields.items() if k not in RESERVED_ASSET_KEYS}

        image = fields["image"]
        nft_type = self.classify_image(image)

        files = None
        if "files" in fields:
            files = self.parse_files(fields["files"])

        if self.config.nft_type_mode is NftTypeMode.LEGACY:
            nft_type = NftTypes.IPFS

        return Asset(
            asset_name=asset_name,
            name=fields["name"],
            image=image,
            nft_type=nft_type,
            media_type=fields.get("mediaType"),
            description=fields.get("description"),
            files=files,
            other=other
        )

    def classify_image(self, image: Source) -> NftTypes:
        """
        Work out where an image lives.

        Chunk arrays are on-chain data; strings must be URLs.
        """
        if isinstance(image, list):
            max_length = self.config.max_chunk_length
            for chunk in image:
                if not isinstance(chunk, str) or len(chunk) > max_length:
                    raise fail(
                        MetadataErrors.CIP25,
                        f"image array elements must be {max_length} characters or less"
                    )
            return NftTypes.ONCHAIN

        if is_valid_url(image):
            return classify_url(image)

        raise fail(MetadataErrors.CIP25, "Invalid image url or data")

    def parse_files(self, files: Any) -> List[FileMetadata]:
        files = expect_array(files, "Files must be an array")
        return [self.parse_file(entry) for entry in files]

    def parse_file(self, entry: Any) -> FileMetadata:
        entry = expect_object(entry, "Files entries must be maps")

        # enforced even though CIP-25 only recommends it
        if "name" not in entry:
            raise fail(MetadataErrors.CIP25, "It's recommended to include a name tag")
        if "src" not in entry:
            raise fail(MetadataErrors.CIP25, "Files require a src tag")

        if isinstance(entry["src"], list):
            if "mediaType" not in entry:
                raise fail(MetadataErrors.CIP25, "Files require a mediaType (that define mime type)")
        elif not is_valid_url(entry["src"]):
            raise fail(MetadataErrors.CIP25, "Files src must be a valid url")

        return FileMetadata.from_dict(entry)


def parse_cnft(json_str: str, config: Optional[ParserConfig] = None) -> Metadata:
    """
    Validate a CIP-25 document.

    Args:
        json_str: Raw JSON text
        config: Optional parser configuration

    Returns:
        Metadata envelope with data or error
    """
    return CNFTParser(config).parse(json_str)
