"""Named title formats.

Formats are compiled when they are registered, so a format that is in the
registry can always be evaluated.  The registry is created with the two
built-in formats:

    builtin_1: Program name - 02x05 - Episode name
    builtin_2: Program.Name.S02E05.Episode.Name

and ``load_formats`` adds the user's custom format, if there is a valid one.
"""

import logging
from typing import Dict, Iterator, List, Optional

from . import titleformat
from .constants import BUILTIN_FORMAT_1, BUILTIN_FORMAT_2, CUSTOM_FORMAT, DEFAULT_FORMAT_NAME
from .titleformat import CompiledFormat, TitleformatError

logger = logging.getLogger(__name__)


def _builtin_1_source() -> str:
    season = (
        "{?is([season])|{tl({:tr('word_season')})} [season]|{f('%02d', [season])}"
        "{?o({?([split])}, {?!([episode])})|. {l({:tr('word_season')})}|}}"
    )
    episode = (
        "{?is([episode])|{tl({:tr('word_episode')})} [episode]|{f('%02d', [episode])}"
        "{?o({?([split])}, {?!([season])})|. {l({:tr('word_episode')})}|}}"
    )
    return (
        "{tl([program_name])}"
        + "{?a({?o({?is([season])}, {?>([season], 0)})}, {?o({?is([episode])}, {?>([episode], 0)})})"
        + "| - " + season + "{?([split])| - |x}" + episode
        + "|{?!([season])"
        + "|{?o({?is([episode])}, {?>([episode], 0)})| - " + episode + "|}"
        + "|{?o({?is([season])}, {?>([season], 0)})| - " + season + "|}}}"
        + "{?([episode_name])| - [episode_name]|}"
    )


def _builtin_2_source() -> str:
    season = "{?is([season])|[season]|{f('%02d', [season])}}"
    episode = "{?is([episode])|[episode]|{f('%02d', [episode])}}"
    has_season = "{?o({?is([season])}, {?>([season], 0)})}"
    has_episode = "{?o({?is([episode])}, {?>([episode], 0)})}"
    has_number = "{?o(" + has_season + ", " + has_episode + ")"
    return (
        "{r({t([program_name])}, ' ', '.')}"
        + has_number + "|.|}"
        + "{?o({?is([season])}, {?>([season], 0)})|S" + season + "|}"
        + "{?o({?is([episode])}, {?>([episode], 0)})|E" + episode + "|}"
        + "{?([episode_name])|" + has_number + "|.|_}{r({t([episode_name])}, ' ', '.')}|}"
    )


BUILTIN_SOURCES: Dict[str, str] = {
    BUILTIN_FORMAT_1: _builtin_1_source(),
    BUILTIN_FORMAT_2: _builtin_2_source(),
}


class NamedTitleFormat:
    """A compiled title format registered under a name."""

    __slots__ = ("name", "compiled", "builtin")

    def __init__(self, name: str, compiled: CompiledFormat, builtin: bool = False):
        self.name = name
        self.compiled = compiled
        self.builtin = builtin

    @property
    def source(self) -> str:
        return self.compiled.source

    def evaluate(self, variables=None, **kwargs) -> str:
        return self.compiled.evaluate(variables, **kwargs)

    def __repr__(self):
        return f"NamedTitleFormat({self.name!r}, {self.source!r})"


class TitleFormats:
    """An ordered registry of named title formats.

    Args:
        registry: FunctionRegistry used to compile the formats
        builtins: Register the built-in formats
    """

    def __init__(self, registry=None, builtins: bool = True):
        self._registry = registry
        self._formats: Dict[str, NamedTitleFormat] = {}
        if builtins:
            for name, source in BUILTIN_SOURCES.items():
                self._formats[name] = NamedTitleFormat(
                    name, titleformat.compile(source, registry), builtin=True
                )

    def register(self, name: str, source: str) -> NamedTitleFormat:
        """Compile a format and register it, replacing any format of that name.

        Raises:
            ValueError: If the name is empty or belongs to a built-in format
            ParseError: If the format does not compile
        """
        if not name:
            raise ValueError("Format name cannot be empty")
        existing = self._formats.get(name)
        if existing is not None and existing.builtin:
            raise ValueError(f"Cannot replace built-in format {name!r}")
        named = NamedTitleFormat(name, titleformat.compile(source, self._registry))
        self._formats[name] = named
        logger.debug(f"Registered title format {name!r}")
        return named

    def unregister(self, name: str) -> None:
        """Remove a format.

        Raises:
            KeyError: If there is no format of that name
            ValueError: If the format is a built-in format
        """
        named = self._formats[name]
        if named.builtin:
            raise ValueError(f"Cannot remove built-in format {name!r}")
        del self._formats[name]

    def get(self, name: str) -> Optional[NamedTitleFormat]:
        return self._formats.get(name)

    def default(self) -> NamedTitleFormat:
        """Return the default format (the first one if builtins are off)."""
        named = self._formats.get(DEFAULT_FORMAT_NAME)
        if named is None:
            if not self._formats:
                raise LookupError("No title formats are registered")
            named = next(iter(self._formats.values()))
        return named

    def resolve(self, name: Optional[str]) -> NamedTitleFormat:
        """Return the named format, falling back to the default format."""
        named = self._formats.get(name) if name else None
        if named is None:
            if name:
                logger.warning(f"Unknown title format {name!r}, using the default format")
            named = self.default()
        return named

    def names(self) -> List[str]:
        return list(self._formats)

    def __contains__(self, name):
        return name in self._formats

    def __iter__(self) -> Iterator[NamedTitleFormat]:
        return iter(list(self._formats.values()))

    def __len__(self):
        return len(self._formats)

    def __repr__(self):
        return "TitleFormats({})".format(", ".join(repr(name) for name in self._formats))


def load_formats(config=None, registry=None) -> TitleFormats:
    """Build the format registry, adding the configured custom format.

    A custom format that does not compile is logged and skipped.
    """
    formats = TitleFormats(registry)
    source = config.get_custom_format() if config is not None else ""
    if source:
        try:
            formats.register(CUSTOM_FORMAT, source)
        except TitleformatError as e:
            logger.warning(f"Ignoring invalid custom title format {source!r}: {e}")
    return formats
