"""Rendering media titles with a title format."""

import enum
import logging
from typing import Optional, Union

from . import constants, titleformat, utils
from .formats import TitleFormats
from .titleformat import CompiledFormat
from .translation import Translation

logger = logging.getLogger(__name__)


def media_title(
    program_name: str,
    season: Optional[Union[int, str]] = None,
    episode: Optional[Union[int, str]] = None,
    episode_name: Optional[str] = None,
    split: bool = False,
    *,
    can_convert_season: bool = True,
    can_convert_episode: bool = True,
    title_format=None,
    translation=None,
    sanitize: bool = True,
) -> str:
    """Render the title of a program, e.g. "Show - 02x05 - Pilot".

    Args:
        program_name: Name of the program; must not be blank
        season: Season number or name; negative numbers mean "no season"
        episode: Episode number or name; negative numbers mean "no episode"
        episode_name: Name of the episode
        split: Whether season and episode are written as separate parts
        can_convert_season: Convert an integer-like season string to a number
        can_convert_episode: Convert an integer-like episode string to a number
        title_format: CompiledFormat, NamedTitleFormat or format string
            (defaults to the default built-in format)
        translation: Translation for {:tr(...)} (defaults to the built-in strings)
        sanitize: Remove characters that are not allowed in file names

    Returns:
        The rendered title

    Raises:
        ValueError: If the program name is blank
        ParseError: If title_format is a string that does not compile
        EvaluationError: If the format cannot be evaluated
    """
    if program_name is None or not str(program_name).strip():
        raise ValueError("Program name cannot be blank")

    variables = {
        constants.PROGRAM_NAME: str(program_name),
        constants.SEASON: utils.int_or_string(season, can_convert_season),
        constants.EPISODE: utils.int_or_string(episode, can_convert_episode),
        constants.EPISODE_NAME: episode_name,
        constants.TRANSLATION: translation if translation is not None else Translation.default(),
    }
    if split:
        variables[constants.SPLIT] = True

    title = _compiled(title_format).evaluate(variables)
    if sanitize:
        title = utils.sanitize_filename(title)
    logger.debug(f"Rendered media title {title!r}")
    return title


def _compiled(title_format) -> CompiledFormat:
    if title_format is None:
        return TitleFormats().default().compiled
    if isinstance(title_format, str):
        return titleformat.compile(title_format)
    return getattr(title_format, "compiled", title_format)


class PreviewMask(enum.IntFlag):
    """Selects which sample values are bound when previewing a format."""

    NONE = 0
    PROGRAM_NAME = 1
    SEASON = 2
    EPISODE = 4
    EPISODE_NAME = 8
    SPLIT = 16
    ALL = PROGRAM_NAME | SEASON | EPISODE | EPISODE_NAME | SPLIT


def preview(title_format, mask: PreviewMask = PreviewMask.ALL, translation=None) -> str:
    """Render a format with sample values, as shown when choosing a format.

    Values that are not selected by the mask are left unbound.  The result is
    not sanitized.
    """
    mask = PreviewMask(mask)
    variables = {
        constants.TRANSLATION: translation if translation is not None else Translation.default(),
    }
    if mask & PreviewMask.PROGRAM_NAME:
        variables[constants.PROGRAM_NAME] = constants.PREVIEW_PROGRAM_NAME
    if mask & PreviewMask.SEASON:
        variables[constants.SEASON] = constants.PREVIEW_SEASON
    if mask & PreviewMask.EPISODE:
        variables[constants.EPISODE] = constants.PREVIEW_EPISODE
    if mask & PreviewMask.EPISODE_NAME:
        variables[constants.EPISODE_NAME] = constants.PREVIEW_EPISODE_NAME
    if mask & PreviewMask.SPLIT:
        variables[constants.SPLIT] = True
    return _compiled(title_format).evaluate(variables)
