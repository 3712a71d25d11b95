"""Tests for the Config class."""

import tomllib

import pytest

from mediatitle.config import Config, ConfigError, get_config_path
from mediatitle.constants import DEFAULT_FORMAT_NAME


class TestConfigDefaults:
    """Test default settings."""

    def test_default_path(self):
        assert get_config_path().name == "config.toml"
        assert get_config_path().parent.name == ".mediatitle"

    def test_defaults(self, config):
        assert config.get_format_name() == DEFAULT_FORMAT_NAME
        assert config.get_custom_format() == ""
        assert config.get_sanitize() is True
        assert config.get_translation_file() == ""
        assert not config.is_dirty()

    def test_default_config_not_shared(self, config_path, tmp_path):
        """Test that changing one instance does not change the class defaults."""
        config = Config(config_path)
        config.set_custom_format("[program_name]")
        assert Config.DEFAULT_CONFIG["naming"]["custom_format"] == ""
        assert Config(tmp_path / "other.toml").get_custom_format() == ""


class TestConfigSettings:
    """Test setters and the dirty flag."""

    def test_setters_mark_dirty(self, config):
        config.set_format_name("builtin_2")
        assert config.is_dirty()
        assert config.get_format_name() == "builtin_2"

    def test_all_settings(self, config, tmp_path):
        config.set_custom_format("{u([program_name])}")
        config.set_sanitize(False)
        config.set_translation_file(tmp_path / "de.toml")
        assert config.get_custom_format() == "{u([program_name])}"
        assert config.get_sanitize() is False
        assert config.get_translation_file() == str(tmp_path / "de.toml")


class TestConfigPersistence:
    """Test saving and loading TOML files."""

    def test_save_and_load(self, config_path):
        config = Config(config_path)
        config.set_format_name("custom")
        config.set_custom_format("[program_name] ([season])")
        assert config.save()
        assert not config.is_dirty()

        loaded = Config(config_path)
        assert loaded.get_format_name() == "custom"
        assert loaded.get_custom_format() == "[program_name] ([season])"
        assert not loaded.is_dirty()

    def test_saved_file_is_toml(self, config_path):
        config = Config(config_path)
        config.set_sanitize(False)
        config.save()
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        assert data["naming"]["sanitize"] is False
        assert data["translation"]["file"] == ""

    def test_save_skips_clean_config(self, config_path):
        config = Config(config_path)
        assert config.save()
        assert not config_path.exists()

    def test_force_save(self, config_path):
        config = Config(config_path)
        assert config.save(force=True)
        assert config_path.exists()

    def test_save_creates_directory(self, tmp_path):
        config = Config(tmp_path / "nested" / "dir" / "config.toml")
        assert config.save(force=True)
        assert (tmp_path / "nested" / "dir" / "config.toml").exists()

    def test_partial_file_keeps_defaults(self, config_path):
        config_path.write_text('[naming]\nformat = "builtin_2"\n', encoding="utf-8")
        config = Config(config_path)
        assert config.get_format_name() == "builtin_2"
        assert config.get_sanitize() is True
        assert config.get_translation_file() == ""

    def test_load_missing_file(self, config):
        assert config.load() is False

    def test_invalid_file(self, config_path):
        config_path.write_text("naming = [unclosed", encoding="utf-8")
        config = Config(config_path)
        assert config.load() is False
        assert config.get_format_name() == DEFAULT_FORMAT_NAME

    def test_invalid_file_strict(self, config_path):
        config_path.write_text("naming = [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError):
            Config(config_path, strict=True)

    def test_missing_file_strict(self, config_path):
        """Test that a config file that does not exist yet is not an error."""
        config = Config(config_path, strict=True)
        assert config.get_format_name() == DEFAULT_FORMAT_NAME
