#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the tidyconf command line."""

import json

import pytest
from utils import write_config

from tidyconf.cli import EXIT_FILE_ERROR, EXIT_SUCCESS, EXIT_WARNINGS, create_parser, main
from tidyconf.constants import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _wide_console(monkeypatch):
    """Give rich enough columns to render tables without truncation."""
    monkeypatch.setenv("COLUMNS", "200")


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentParser:
    """Tests for the argument parser."""

    def test_subcommand_required(self):
        """Test that a subcommand must be given."""
        assert main([]) == 2

    def test_version(self, capsys):
        """Test the version flag."""
        assert main(["--version"]) == 0
        assert "tidyconf" in capsys.readouterr().out

    def test_global_flags(self):
        """Test parsing the logging flags."""
        args = create_parser().parse_args(["--log-level", "DEBUG", "--trace", "list"])
        assert args.log_level == "DEBUG"
        assert args.trace
        assert args.command == "list"

    def test_flag_choices(self):
        """Test that level and show format choices are enforced."""
        parser = create_parser()
        assert parser.parse_args(["show", "--format", "native"]).format == "native"
        with pytest.raises(SystemExit):
            parser.parse_args(["--log-level", "LOUD", "list"])
        with pytest.raises(SystemExit):
            parser.parse_args(["show", "--format", "xml"])


@pytest.mark.unit
@pytest.mark.cli
class TestListCommand:
    """Tests for ``tidyconf list``."""

    def test_lists_settable_options(self, capsys):
        """Test that settable options are listed and internal ones are not."""
        assert main(["list"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "tidyconf options (97)" in out
        assert "indent-spaces" in out
        assert "doctype-mode" not in out

    def test_category_filter(self, capsys):
        """Test listing one category."""
        assert main(["list", "--category", "encoding"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "char-encoding" in out
        assert "indent-spaces" not in out


@pytest.mark.unit
@pytest.mark.cli
class TestShowCommand:
    """Tests for ``tidyconf show``."""

    def test_table(self, capsys, sample_config_file):
        """Test showing non-default values as a table."""
        assert main(["show", str(sample_config_file)]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "wrap" in out
        assert "72" in out
        assert "tab-size" not in out

    def test_table_all(self, capsys, sample_config_file):
        """Test that --all includes default values."""
        assert main(["show", str(sample_config_file), "--all"]) == EXIT_SUCCESS
        assert "tab-size" in capsys.readouterr().out

    def test_doctype_keyword_shown(self, capsys, temp_dir):
        """Test that a doctype keyword is listed by its label."""
        path = write_config(temp_dir, "doctype: strict\n")
        assert main(["show", str(path)]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "doctype" in out
        assert "strict" in out

    def test_doctype_identifier_shown(self, capsys, temp_dir):
        """Test that a user doctype is listed as its quoted identifier."""
        path = write_config(temp_dir, 'doctype: "-//ACME//DTD HTML 3.14159//EN"\n')
        assert main(["show", str(path)]) == EXIT_SUCCESS
        assert '"-//ACME//DTD HTML 3.14159//EN"' in capsys.readouterr().out

    def test_native(self, capsys, sample_config_file):
        """Test showing values in the native format."""
        assert main(["show", str(sample_config_file), "--format", "native"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "wrap: 72\n" in out
        assert "indent: auto\n" in out
        assert "new-blocklevel-tags: foo, bar, baz\n" in out

    def test_environment_config(self, capsys, temp_dir, monkeypatch):
        """Test that the environment variable names the configuration."""
        path = temp_dir / "env.json"
        path.write_text(json.dumps({"tab-size": 3}), encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert main(["show", "--format", "native"]) == EXIT_SUCCESS
        assert "tab-size: 3\n" in capsys.readouterr().out

    def test_missing_file(self, capsys, temp_dir):
        """Test that a missing configuration is a file error."""
        assert main(["show", str(temp_dir / "absent.tidyrc")]) == EXIT_FILE_ERROR
        assert "Error" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestCheckCommand:
    """Tests for ``tidyconf check``."""

    def test_clean(self, capsys, sample_config_file):
        """Test a file without problems."""
        assert main(["check", str(sample_config_file)]) == EXIT_SUCCESS
        assert "OK" in capsys.readouterr().out

    def test_warnings(self, capsys, temp_dir):
        """Test that recorded diagnostics give exit status 1."""
        path = write_config(temp_dir, "frobnicate: 1\nwrap: lots\n")
        assert main(["check", str(path)]) == EXIT_WARNINGS
        out = capsys.readouterr().out
        assert "unknown option: frobnicate" in out
        assert "2 problem(s)" in out

    def test_unreadable(self, temp_dir):
        """Test that a missing file gives exit status 2."""
        assert main(["check", str(temp_dir / "absent.tidyrc")]) == EXIT_FILE_ERROR

    def test_encoding_flag(self, capsys, temp_dir):
        """Test checking a file in a declared encoding."""
        path = write_config(temp_dir, "alt-text: café\n", encoding="utf-8")
        assert main(["check", str(path), "--encoding", "utf8"]) == EXIT_SUCCESS

    def test_unknown_encoding(self, sample_config_file):
        """Test that an unknown file encoding gives exit status 2."""
        assert main(["check", str(sample_config_file), "--encoding", "klingon"]) == EXIT_FILE_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestConvertCommand:
    """Tests for ``tidyconf convert``."""

    def test_yaml_to_native(self, temp_dir):
        """Test converting a YAML configuration to the native format."""
        source = temp_dir / ".tidyconf.yaml"
        source.write_text("indent: auto\nquiet: true\nnew-inline-tags: [cfif, cfelse]\n", encoding="utf-8")
        out = temp_dir / ".tidyrc"
        assert main(["convert", str(source), "--out", str(out)]) == EXIT_SUCCESS
        text = out.read_text(encoding="utf-8")
        assert "indent: auto\n" in text
        assert "quiet: yes\n" in text
        assert "new-inline-tags: cfif, cfelse\n" in text

    def test_unwritable_destination(self, temp_dir, sample_config_file):
        """Test that an unwritable destination gives exit status 2."""
        assert main(["convert", str(sample_config_file), "--out", str(temp_dir)]) == EXIT_FILE_ERROR
