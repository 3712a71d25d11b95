"""Translated strings for the {:tr(...)} title format function.

A translation is a flat table of names to strings.  Strings may contain
``%{param}`` placeholders that are filled from the name/value pairs passed to
``get_single``:

    >>> translation = Translation({"episodes": "%{count} episodes"})
    >>> translation.get_single("episodes", "count", "3")
    '3 episodes'
"""

import logging
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Union

from .constants import DEFAULT_TRANSLATIONS

logger = logging.getLogger(__name__)

_placeholder = re.compile(r"%%|%\{([^}]*)\}")


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested TOML tables into dotted names."""
    flat = {}
    for key, value in data.items():
        name = prefix + key
        if isinstance(value, dict):
            flat.update(_flatten(value, name + "."))
        else:
            flat[name] = str(value)
    return flat


class Translation(Mapping):
    """An immutable table of translated strings."""

    def __init__(self, strings=None):
        self._strings = MappingProxyType(dict(strings or {}))

    @classmethod
    def default(cls) -> "Translation":
        """Return the strings used by the built-in title formats."""
        return cls(DEFAULT_TRANSLATIONS)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Translation":
        """Load a translation from a TOML file.

        Nested tables are flattened, so ``[words] season = "Staffel"`` is
        available as ``words.season``.

        Raises:
            OSError: If the file cannot be read
            tomllib.TOMLDecodeError: If the file is not valid TOML
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)
        strings = _flatten(data)
        logger.debug("Loaded %d translated string(s) from %s", len(strings), path)
        return cls(strings)

    def merged(self, other: Mapping) -> "Translation":
        """Return a new translation where strings from other take precedence."""
        strings = dict(self._strings)
        strings.update(other)
        return Translation(strings)

    def __getitem__(self, name):
        return self._strings[name]

    def __iter__(self):
        return iter(self._strings)

    def __len__(self):
        return len(self._strings)

    def get_single(self, name: str, *params: str) -> str:
        """Return a translated string with its placeholders filled in.

        Args:
            name: Name of the string; returned as-is if it is not translated
            *params: Alternating placeholder names and values

        Raises:
            ValueError: If a placeholder name has no value
        """
        if len(params) % 2:
            raise ValueError(f"Translation parameters must be name/value pairs, got {len(params)}")
        string = self._strings.get(name)
        if string is None:
            return name
        values = dict(zip(params[::2], params[1::2]))

        def substitute(match):
            if match.group(0) == "%%":
                return "%"
            param = match.group(1)
            return str(values[param]) if param in values else match.group(0)

        return _placeholder.sub(substitute, string)

    def __repr__(self):
        return f"Translation({len(self)} strings)"


def load_translation(config=None) -> Translation:
    """Return the configured translation, on top of the default strings.

    A translation file that cannot be read is logged and ignored.
    """
    translation = Translation.default()
    path = config.get_translation_file() if config is not None else ""
    if not path:
        return translation
    try:
        return translation.merged(Translation.load(path))
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Could not load translation file {path}: {e}")
        return translation
