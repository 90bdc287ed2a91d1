"""
Pytest configuration and fixtures for CNFT tests.
"""

import json

import pytest

from cnft import CNFTParser, ParserConfig


POLICY_ID = "d5e6bf0500378d4f0da4e8dde6becec7621cd8cbf5cbb9b87013d4cc"
SECOND_POLICY_ID = "a0028f350aaabe0545fdcb56b039bfb08e4bb4d8c4d7c3c7d481c235"


@pytest.fixture
def policy_id():
    return POLICY_ID


@pytest.fixture
def spacebud_asset():
    """A typical off-chain asset with extension fields."""
    return {
        "name": "SpaceBud #1507",
        "image": "https://spacebudz.io/images/1507.png",
        "mediaType": "image/png",
        "description": "A rare space bud",
        "type": "Alien",
        "traits": ["Star Suit", "Chestplate"]
    }


@pytest.fixture
def ipfs_asset():
    return {
        "name": "Clay #42",
        "image": "ipfs://QmRhTTbUrPYEw3mJGGhQqQST9k86v1DPBiTTWJGKDJsVFw",
        "mediaType": "image/png",
        "files": [
            {
                "name": "Clay #42 animation",
                "mediaType": "video/mp4",
                "src": "ipfs://QmPn6SzWwQm4jBy8RaGR8xMA1YkHA4mG2bL3hFEd7rMkEo"
            }
        ]
    }


@pytest.fixture
def onchain_asset():
    """An asset whose image is stored in 64-character chunks."""
    return {
        "name": "OnChain Pixel",
        "image": [
            "data:image/svg+xml;base64,PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5v",
            "cmcvMjAwMC9zdmciIHZpZXdCb3g9IjAgMCAxIDEiPjwvc3ZnPg=="
        ],
        "mediaType": "image/svg+xml",
        "files": [
            {
                "name": "Pixel source",
                "mediaType": "image/svg+xml",
                "src": [
                    "data:image/svg+xml;base64,PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5v",
                    "cmcvMjAwMC9zdmciIHZpZXdCb3g9IjAgMCAxIDEiPjwvc3ZnPg=="
                ]
            }
        ]
    }


@pytest.fixture
def make_document(policy_id):
    """Factory building a CIP-25 document from asset mappings."""
    def _make(assets, policy=None, extra=None):
        document = {"721": {policy or policy_id: assets}}
        if extra:
            document.update(extra)
        return document
    return _make


@pytest.fixture
def make_json(make_document):
    """Factory building raw CIP-25 JSON text from asset mappings."""
    def _make(assets, **kwargs):
        return json.dumps(make_document(assets, **kwargs))
    return _make


@pytest.fixture
def valid_json(make_json, spacebud_asset):
    return make_json({"SpaceBud1507": spacebud_asset})


@pytest.fixture
def parser():
    return CNFTParser()


@pytest.fixture
def legacy_parser():
    return CNFTParser(ParserConfig(nft_type_mode="legacy"))


# Test markers for different test categories
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file paths."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
