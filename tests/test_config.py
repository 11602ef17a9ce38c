"""
Tests for selfupgrade.config module.

Tests configuration loading including:
- Reading the upgrade section of a YAML file
- Defaults for missing sections and fields
- Error handling for invalid files and fields
"""

from __future__ import annotations

import pytest

from selfupgrade.config import UpgradeConfig, load_upgrade_config
from selfupgrade.exceptions import ConfigError


class TestLoadUpgradeConfig:
    """Tests for load_upgrade_config."""

    def test_full_section(self, create_yaml_file):
        path = create_yaml_file(
            "app.yaml",
            {"upgrade": {"allow_prerelease": True, "asset_pattern": r"linux-amd64"}},
        )

        config = load_upgrade_config(path)

        assert config == UpgradeConfig(
            allow_prerelease=True, asset_pattern="linux-amd64"
        )

    def test_missing_section_uses_defaults(self, create_yaml_file):
        """Test that unrelated application settings are ignored."""
        path = create_yaml_file("app.yaml", {"listen": "127.0.0.1:8384"})

        assert load_upgrade_config(path) == UpgradeConfig()

    def test_missing_fields_use_defaults(self, create_yaml_file):
        path = create_yaml_file("app.yaml", {"upgrade": {}})

        config = load_upgrade_config(path)

        assert config.allow_prerelease is False
        assert config.asset_pattern is None

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_upgrade_config(tmp_path / "nonexistent.yaml")

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigError, match="empty"):
            load_upgrade_config(path)

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("upgrade: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigError, match="Error parsing YAML") as excinfo:
            load_upgrade_config(path)
        assert excinfo.value.__cause__ is not None

    def test_non_mapping_document_raises(self, create_yaml_file):
        path = create_yaml_file("list.yaml", ["upgrade"])

        with pytest.raises(ConfigError, match="mapping"):
            load_upgrade_config(path)

    def test_non_mapping_section_raises(self, create_yaml_file):
        path = create_yaml_file("app.yaml", {"upgrade": "yes"})

        with pytest.raises(ConfigError, match="'upgrade' must be a mapping"):
            load_upgrade_config(path)

    def test_allow_prerelease_must_be_bool(self, create_yaml_file):
        path = create_yaml_file("app.yaml", {"upgrade": {"allow_prerelease": "no"}})

        with pytest.raises(ConfigError, match="allow_prerelease"):
            load_upgrade_config(path)

    def test_asset_pattern_must_be_string(self, create_yaml_file):
        path = create_yaml_file("app.yaml", {"upgrade": {"asset_pattern": 42}})

        with pytest.raises(ConfigError, match="asset_pattern"):
            load_upgrade_config(path)

    def test_asset_pattern_must_compile(self, create_yaml_file):
        path = create_yaml_file("app.yaml", {"upgrade": {"asset_pattern": "(["}})

        with pytest.raises(ConfigError, match="Invalid 'upgrade.asset_pattern'"):
            load_upgrade_config(path)

    def test_config_is_immutable(self):
        with pytest.raises(AttributeError):
            UpgradeConfig().allow_prerelease = True  # type: ignore
