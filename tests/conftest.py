"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mediatitle import titleformat  # noqa: E402
from mediatitle.config import Config  # noqa: E402
from mediatitle.translation import Translation  # noqa: E402


@pytest.fixture
def render():
    """Compile and evaluate a format in one call."""

    def _render(format_string, variables=None, **kwargs):
        return titleformat.compile(format_string).evaluate(variables, **kwargs)

    return _render


@pytest.fixture
def episode_variables():
    """Variables for a typical episode."""
    return {
        "program_name": "Program name",
        "season": 2,
        "episode": 5,
        "episode_name": "Episode name",
        "translation": Translation.default(),
    }


@pytest.fixture
def config_path(tmp_path):
    """Path to a config file in a temporary directory (not created)."""
    return tmp_path / "config.toml"


@pytest.fixture
def config(config_path):
    """A Config that reads and writes a temporary file."""
    return Config(config_path)


@pytest.fixture
def translation_file(tmp_path):
    """A TOML translation file with a nested table."""
    path = tmp_path / "cs.toml"
    path.write_text(
        'word_season = "série"\n'
        'word_episode = "epizoda"\n'
        "\n"
        "[greeting]\n"
        'hello = "Ahoj %{name}"\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove root handlers so each test configures logging from scratch."""
    yield
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.root.setLevel(logging.WARNING)
