"""
Integration tests for the CNFT command line interface.
"""

import json
import os

import pytest
import yaml
from click.testing import CliRunner

from cli import __version__
from cli.main import cli
from conftest import POLICY_ID


@pytest.fixture
def runner(monkeypatch):
    """CLI runner that never picks up config files or CNFT_ variables."""
    monkeypatch.setattr("cli.config.CONFIG_SEARCH_PATHS", [])
    for name in list(os.environ):
        if name.startswith("CNFT_"):
            monkeypatch.delenv(name)
    return CliRunner()


@pytest.fixture
def metadata_file(tmp_path, valid_json):
    path = tmp_path / "metadata.json"
    path.write_text(valid_json, encoding="utf-8")
    return path


class TestValidateCommand:
    """Test `cnft validate`."""

    def test_valid_file_table(self, runner, metadata_file):
        result = runner.invoke(cli, ["validate", str(metadata_file)])

        assert result.exit_code == 0
        assert "VALID" in result.stdout
        assert POLICY_ID in result.stdout
        assert "SpaceBud1507" in result.stdout
        assert "offchain" in result.stdout

    def test_valid_file_json(self, runner, metadata_file):
        result = runner.invoke(cli, ["-o", "json", "validate", str(metadata_file)])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["error"] is None
        assert payload["data"]["policyId"] == POLICY_ID
        assert payload["data"]["assets"][0]["other"] == {
            "type": "Alien",
            "traits": ["Star Suit", "Chestplate"]
        }

    def test_valid_file_yaml(self, runner, metadata_file):
        result = runner.invoke(cli, ["-o", "yaml", "validate", str(metadata_file)])

        assert result.exit_code == 0
        payload = yaml.safe_load(result.stdout)
        assert payload["data"]["assets"][0]["assetName"] == "SpaceBud1507"

    def test_stdin(self, runner, valid_json):
        result = runner.invoke(cli, ["-o", "json", "validate", "-"], input=valid_json)

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["policyId"] == POLICY_ID

    def test_invalid_document(self, runner):
        result = runner.invoke(cli, ["validate", "-"], input='{"721": {}}')

        assert result.exit_code == 1
        assert "INVALID" in result.stdout
        assert "No policy defined" in result.stdout

    def test_invalid_document_json(self, runner):
        result = runner.invoke(cli, ["-o", "json", "validate", "-"], input="null")

        assert result.exit_code == 1
        assert json.loads(result.stdout) == {
            "data": None,
            "error": {"type": "json", "message": "Empty json"}
        }

    def test_max_size_option(self, runner, metadata_file):
        result = runner.invoke(cli, ["-o", "json", "validate", "--max-size", "100", str(metadata_file)])

        assert result.exit_code == 1
        error = json.loads(result.stdout)["error"]
        assert error["type"] == "cip25"
        assert error["message"].startswith("Metadata too large over")

    def test_legacy_nft_type_option(self, runner, metadata_file):
        result = runner.invoke(cli, ["-o", "json", "validate", "--legacy-nft-type", str(metadata_file)])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["assets"][0]["nftType"] == "ipfs"

    def test_config_file_applies(self, runner, metadata_file, tmp_path):
        config_path = tmp_path / "cnft.yml"
        config_path.write_text(yaml.safe_dump({
            "parser": {"nft_type_mode": "legacy"},
            "cli": {"output_format": "json"}
        }))

        result = runner.invoke(cli, ["-c", str(config_path), "validate", str(metadata_file)])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["assets"][0]["nftType"] == "ipfs"

    def test_environment_applies(self, runner, metadata_file):
        result = runner.invoke(
            cli, ["-o", "json", "validate", str(metadata_file)],
            env={"CNFT_PARSER_MAX_METADATA_BYTES": "64"}
        )

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"]["type"] == "cip25"

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 2

    def test_bad_config_reported(self, runner, metadata_file, tmp_path):
        config_path = tmp_path / "cnft.yml"
        config_path.write_text(yaml.safe_dump({"parser": {"max_metadata_bytes": 0}}))

        result = runner.invoke(cli, ["-c", str(config_path), "validate", str(metadata_file)])

        assert result.exit_code == 1
        assert "Error: max_metadata_bytes must be a positive integer" in result.output


class TestConfigCommands:
    """Test `cnft config`."""

    def test_show_key(self, runner):
        result = runner.invoke(cli, ["config", "show", "--key", "parser.max_metadata_bytes"])

        assert result.exit_code == 0
        assert "parser.max_metadata_bytes: 16384" in result.stdout

    def test_show_section(self, runner):
        result = runner.invoke(cli, ["config", "show", "--key", "parser", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["parser"]["metadatum_label"] == "721"

    def test_show_missing_key(self, runner):
        result = runner.invoke(cli, ["config", "show", "--key", "parser.nothing"])

        assert result.exit_code == 1

    def test_show_full(self, runner):
        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["parser"]["max_chunk_length"] == 64

    def test_show_sources(self, runner, tmp_path):
        config_path = tmp_path / "cnft.json"
        config_path.write_text("{}")

        result = runner.invoke(cli, ["-c", str(config_path), "config", "show", "--sources"])

        assert result.exit_code == 0
        assert "1. defaults" in result.stdout
        assert f"2. file:{config_path}" in result.stdout

    def test_check_valid(self, runner):
        result = runner.invoke(cli, ["config", "check"])

        assert result.exit_code == 0
        assert "Configuration is valid" in result.stdout
        assert "CNFT_PARSER_MAX_METADATA_BYTES" in result.stdout

    def test_check_invalid(self, runner):
        result = runner.invoke(cli, ["config", "check"], env={"CNFT_PARSER_NFT_TYPE_MODE": "sometimes"})

        assert result.exit_code == 1
        assert "Unknown nft_type_mode" in result.output

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["-c", str(tmp_path / "absent.yml"), "config", "show"])

        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestGlobalOptions:
    """Test top-level CLI options."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert f"CNFT CLI v{__version__}" in result.stdout

    def test_help_without_command(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "validate" in result.stdout
