"""Configuration management for mediatitle.

Handles saving and loading user preferences: the active title format, the
custom format string, file name sanitizing and the translation file.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w

from .constants import DEFAULT_FORMAT_NAME

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.mediatitle on all platforms)
    """
    return Path.home() / ".mediatitle"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class ConfigError(Exception):
    """The configuration file cannot be read or written."""


class Config:
    """Configuration manager for naming settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "naming": {
            # Name of the active title format: builtin_1, builtin_2 or custom
            "format": DEFAULT_FORMAT_NAME,
            # Source of the "custom" format; ignored when empty
            "custom_format": "",
            # Remove characters that are not allowed in file names
            "sanitize": True,
        },
        "translation": {
            # TOML file with translated strings for {:tr(...)}
            "file": "",
        },
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None, strict: bool = False):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use instead of ~/.mediatitle/config.toml
            strict: Raise ConfigError when an existing file cannot be loaded
        """
        self.config_path = Path(config_path) if config_path is not None else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        if not self.load() and strict and self.config_path.exists():
            raise ConfigError(f"Cannot load config file {self.config_path}")

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
            # Merge with defaults (in case new keys were added)
            self._merge_config(self.data, loaded_data)
            self._dirty = False
            logger.debug(f"Loaded config from {self.config_path}")
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Error loading config {self.config_path}: {e}")
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            logger.debug(f"Saved config to {self.config_path}")
            return True
        except OSError as e:
            logger.error(f"Error saving config {self.config_path}: {e}")
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Naming settings
    def get_format_name(self) -> str:
        """Get the name of the active title format."""
        return self.data["naming"].get("format", DEFAULT_FORMAT_NAME)

    def set_format_name(self, name: str) -> None:
        self.data["naming"]["format"] = name
        self._dirty = True

    def get_custom_format(self) -> str:
        """Get the custom title format string (empty if there is none)."""
        return self.data["naming"].get("custom_format", "")

    def set_custom_format(self, format_str: str) -> None:
        self.data["naming"]["custom_format"] = format_str
        self._dirty = True

    def get_sanitize(self) -> bool:
        return bool(self.data["naming"].get("sanitize", True))

    def set_sanitize(self, sanitize: bool) -> None:
        self.data["naming"]["sanitize"] = bool(sanitize)
        self._dirty = True

    # Translation settings
    def get_translation_file(self) -> str:
        return self.data.get("translation", {}).get("file", "")

    def set_translation_file(self, path: Union[str, Path]) -> None:
        """Set the translation file (empty string to use the default strings)."""
        if "translation" not in self.data:
            self.data["translation"] = {}
        self.data["translation"]["file"] = str(path)
        self._dirty = True
