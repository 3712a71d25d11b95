"""Tests for the CLI module."""

import json
import logging
from argparse import Namespace
from unittest.mock import patch

import pytest

from mediatitle import __version__
from mediatitle.cli import main
from mediatitle.cli.commands import cmd_inspect
from mediatitle.cli.utils import ExitCode, infer_value, parse_assignments, setup_logging
from mediatitle.titleformat import VariableType


def run_cli(*argv):
    """Run the CLI, returning the exit code (0 when main returns normally)."""
    with patch("sys.argv", ["mediatitle", *argv]):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def run_json(capsys, *argv):
    code = run_cli(*argv, "--json")
    return code, json.loads(capsys.readouterr().out)


def test_version_output(capsys):
    """Test that --version flag displays version correctly."""
    with pytest.raises(SystemExit) as exc_info:
        with patch("sys.argv", ["mediatitle", "--version"]):
            main()

    assert exc_info.value.code == 0
    captured = capsys.readouterr()
    assert __version__ in captured.out


def test_help_output(capsys):
    """Test that --help flag lists the commands."""
    with pytest.raises(SystemExit) as exc_info:
        with patch("sys.argv", ["mediatitle", "--help"]):
            main()

    assert exc_info.value.code == 0
    captured = capsys.readouterr()
    for command in ("render", "title", "validate", "inspect", "formats"):
        assert command in captured.out


def test_no_command_shows_help(capsys):
    """Test that running without a command shows help."""
    assert run_cli() == 1
    assert "render" in capsys.readouterr().out


def test_title_help(capsys):
    """Test that title command help lists its options."""
    assert run_cli("title", "--help") == 0
    out = capsys.readouterr().out
    assert "program_name" in out
    assert "--season" in out
    assert "--no-sanitize" in out


class TestRender:
    def test_render(self, capsys):
        assert run_cli("render", "{u([s])}", "-V", "s=abc") == 0
        assert capsys.readouterr().out.strip() == "ABC"

    def test_arithmetic(self, capsys):
        assert run_cli("render", "{f('%d', {+([a],[b])})}", "-V", "a=2", "-V", "b=3") == 0
        assert capsys.readouterr().out.strip() == "5"

    def test_string_variables(self, capsys):
        source = "{?is([n])|string|other}"
        assert run_cli("render", source, "-S", "n=5") == 0
        assert capsys.readouterr().out.strip() == "string"
        assert run_cli("render", source, "-V", "n=5") == 0
        assert capsys.readouterr().out.strip() == "other"

    def test_default_translation(self, capsys):
        assert run_cli("render", "{:tr('word_season')}") == 0
        assert capsys.readouterr().out.strip() == "season"

    def test_json(self, capsys):
        code, data = run_json(capsys, "render", "[a]-[b]", "-V", "a=1", "-S", "b=x")
        assert code == ExitCode.SUCCESS
        assert data == {
            "status": "success",
            "format": "[a]-[b]",
            "result": "1-x",
            "variables": {"a": "1", "b": "x"},
        }

    def test_bad_assignment(self, capsys):
        code, data = run_json(capsys, "render", "[a]", "-V", "novalue")
        assert code == ExitCode.INVALID_INPUT
        assert data["error"] == "invalid_input"

    def test_parse_error(self, capsys):
        code, data = run_json(capsys, "render", "ab{nope()}")
        assert code == ExitCode.INVALID_INPUT
        assert data["error"] == "parse_error"
        assert data["position"] == 2

    def test_evaluation_error(self, capsys):
        code, data = run_json(capsys, "render", "{+('a', 1)}")
        assert code == ExitCode.DATA_ERROR
        assert data["status"] == "error"
        assert data["error"] == "evaluation_error"

    def test_evaluation_error_text(self, capsys):
        assert run_cli("render", "{/(1, 0)}") == ExitCode.DATA_ERROR
        assert "Evaluation error" in capsys.readouterr().out


class TestTitle:
    def test_title(self, capsys, config_path):
        args = ["title", "Program name", "-s", "2", "-e", "5", "-n", "Episode name"]
        assert run_cli(*args, "-c", str(config_path)) == 0
        assert capsys.readouterr().out.strip() == "Program name - 02x05 - Episode name"

    def test_named_format(self, capsys, config_path):
        code, data = run_json(
            capsys, "title", "Program name", "-s", "2", "-e", "5", "-f", "builtin_2",
            "-c", str(config_path),
        )  # fmt: skip
        assert code == ExitCode.SUCCESS
        assert data["title"] == "Program.Name.S02E05"
        assert data["format_name"] == "builtin_2"
        assert data["sanitized"] is True

    def test_split(self, capsys, config_path):
        assert run_cli("title", "Show", "-s", "1", "-e", "2", "--split", "-c", str(config_path)) == 0
        assert capsys.readouterr().out.strip() == "Show - 01. season - 02. episode"

    def test_configured_custom_format(self, capsys, config_path):
        config_path.write_text(
            '[naming]\nformat = "custom"\ncustom_format = "[program_name]: [season]?"\n',
            encoding="utf-8",
        )
        code, data = run_json(capsys, "title", "Show", "-s", "3", "-c", str(config_path))
        assert code == ExitCode.SUCCESS
        assert data["title"] == "Show 3"
        assert data["format_name"] == "custom"

    def test_no_sanitize(self, capsys, config_path):
        code, data = run_json(
            capsys, "title", "What?", "-f", "builtin_1", "--no-sanitize", "-c", str(config_path)
        )
        assert data["title"] == "What?"
        assert data["sanitized"] is False

    def test_unknown_format_falls_back(self, capsys, config_path):
        code, data = run_json(capsys, "title", "Show", "-f", "nope", "-c", str(config_path))
        assert code == ExitCode.SUCCESS
        assert data["format_name"] == "builtin_1"

    def test_blank_program_name(self, capsys, config_path):
        code, data = run_json(capsys, "title", "  ", "-c", str(config_path))
        assert code == ExitCode.INVALID_INPUT
        assert data["error"] == "invalid_input"

    def test_invalid_config(self, capsys, config_path):
        config_path.write_text("naming = [unclosed", encoding="utf-8")
        code, data = run_json(capsys, "title", "Show", "-c", str(config_path))
        assert code == ExitCode.CONFIG_ERROR
        assert data["error"] == "invalid_config"


class TestValidate:
    def test_valid(self, capsys):
        assert run_cli("validate", "{?([season])|S[season]|}") == 0
        assert "Valid format" in capsys.readouterr().out

    def test_valid_json(self, capsys):
        code, data = run_json(capsys, "validate", "{ u ( [a] ) } x")
        assert code == ExitCode.SUCCESS
        assert data["status"] == "valid"
        assert data["parts"] == 2
        assert data["normalized"] == "{u([a])} x"

    def test_invalid(self, capsys):
        assert run_cli("validate", "[abc") == ExitCode.INVALID_INPUT
        out = capsys.readouterr().out
        assert "Invalid format" in out
        assert "position 4" in out

    def test_invalid_json(self, capsys):
        code, data = run_json(capsys, "validate", "{u('a', 'b')}")
        assert code == ExitCode.INVALID_INPUT
        assert data["status"] == "invalid"
        assert data["position"] == 0


class TestInspect:
    def test_tree(self, capsys):
        assert run_cli("inspect", "x{?([s])|{u([s])}|}") == 0
        out = capsys.readouterr().out
        assert "function ?" in out
        assert "variable s" in out
        assert "then" in out

    def test_raw(self, capsys):
        assert run_cli("inspect", "{u([s])}", "--raw") == 0
        out = capsys.readouterr().out
        assert "Function('u', [" in out
        assert "VariableRef('s')" in out

    def test_parse_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cmd_inspect(Namespace(format="{nope()}", raw=False))
        assert exc_info.value.code == ExitCode.INVALID_INPUT


class TestFormats:
    def test_list(self, capsys, config_path):
        code, data = run_json(capsys, "formats", "-c", str(config_path))
        assert code == ExitCode.SUCCESS
        assert data["active"] == "builtin_1"
        names = [info["name"] for info in data["formats"]]
        assert names == ["builtin_1", "builtin_2"]
        assert data["formats"][1]["preview"] == "Program.Name.S02E05.Episode.Name"

    def test_mask(self, capsys, config_path):
        code, data = run_json(capsys, "formats", "--mask", "15", "-c", str(config_path))
        assert data["formats"][0]["preview"] == "Program name - 02x05 - Episode name"

    def test_custom_format_listed(self, capsys, config_path):
        config_path.write_text(
            '[naming]\nformat = "custom"\ncustom_format = "[program_name]!"\n', encoding="utf-8"
        )
        code, data = run_json(capsys, "formats", "-c", str(config_path))
        assert data["active"] == "custom"
        custom = data["formats"][-1]
        assert custom == {
            "name": "custom",
            "source": "[program_name]!",
            "builtin": False,
            "active": True,
            "preview": "Program name!",
        }

    def test_invalid_mask(self, capsys, config_path):
        code, data = run_json(capsys, "formats", "--mask", "99", "-c", str(config_path))
        assert code == ExitCode.INVALID_INPUT

    def test_table(self, capsys, config_path):
        assert run_cli("formats", "-c", str(config_path)) == 0
        out = capsys.readouterr().out
        assert "Title Formats" in out
        assert "* active format" in out


class TestUtils:
    def test_infer_value(self):
        assert infer_value("12") == 12
        assert infer_value("1.5") == 1.5
        assert infer_value("true") is True
        assert infer_value("false") is False
        assert infer_value("abc") == "abc"
        assert infer_value("") == ""

    def test_parse_assignments(self):
        variables = parse_assignments(["a=1", "b = x=y", "c="])
        assert variables["a"].type is VariableType.INTEGER
        assert variables["b"].value == " x=y"
        assert variables["c"].value == ""

    def test_parse_assignments_as_strings(self):
        variables = parse_assignments(["a=1"], infer=False)
        assert variables["a"].type is VariableType.STRING

    @pytest.mark.parametrize("assignment", ["novalue", "=1", " =1"])
    def test_invalid_assignments(self, assignment):
        with pytest.raises(ValueError):
            parse_assignments([assignment])


def test_setup_logging_debug():
    """Test logging setup with debug level."""
    # Reset logging to avoid interference from previous tests
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_warning():
    """Test logging setup with warning level."""
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_invalid_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        setup_logging("loud")
