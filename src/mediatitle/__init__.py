"""mediatitle.

A small, typed title format language for naming downloaded media, e.g.
"Program name - 02x05 - Episode name", with a command-line interface for
rendering, validating and inspecting formats.

Main modules:
    titleformat: Format string compiler and evaluator
    cli: Command-line interface (mediatitle command)

Core modules:
    naming: Media titles and format previews
    formats: Named title formats (builtin_1, builtin_2, custom)
    translation: Translated strings for {:tr(...)}
    config: Configuration management
    constants: Variable names and defaults
    utils: Utility functions
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("mediatitle")
except PackageNotFoundError:
    # Package not installed, read directly from pyproject.toml
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

__all__ = [
    # Sub-packages
    "cli",
    "titleformat",
    # Core modules
    "config",
    "constants",
    "formats",
    "naming",
    "translation",
    "utils",
]
