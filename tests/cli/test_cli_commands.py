"""Tests for custom_cli.cli: end-to-end command tests via CliRunner."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from custom_cli.cli.app import app

runner = CliRunner()


# ─── print-text ──────────────────────────────────────────────────────────


class TestPrintText:
    def test_prints_text_with_newline(self):
        result = runner.invoke(app, ["print-text", "hello"])
        assert result.exit_code == 0
        assert result.stdout == "hello\n"

    def test_no_argument_prints_empty_line(self):
        result = runner.invoke(app, ["print-text"])
        assert result.exit_code == 0
        assert result.stdout == "\n"

    def test_text_with_spaces(self):
        result = runner.invoke(app, ["print-text", "hello   world"])
        assert result.stdout == "hello   world\n"

    def test_echo_alias(self):
        result = runner.invoke(app, ["echo", "hello"])
        assert result.exit_code == 0
        assert result.stdout == "hello\n"

    def test_ansi_escapes_are_printed_verbatim(self):
        result = runner.invoke(app, ["print-text", "\x1b[31mred\x1b[0m"])
        assert result.exit_code == 0
        assert result.stdout == "\x1b[31mred\x1b[0m\n"


# ─── display-file ────────────────────────────────────────────────────────


class TestDisplayFile:
    def test_plain_contents(self, write_file):
        path = write_file("hello file!")
        result = runner.invoke(app, ["display-file", str(path)])
        assert result.exit_code == 0
        assert result.stdout == "hello file!\n"

    def test_show_ends_number_all_zero_based(self, write_file):
        path = write_file("hello file!")
        result = runner.invoke(
            app,
            ["display-file", str(path), "--show-ends", "--number-all", "--numbering", "zero-based"],
        )
        assert result.exit_code == 0
        assert result.stdout == "     0  hello file!$\n"

    def test_show_ends_number_all_default_one_based(self, write_file):
        path = write_file("hello file!")
        result = runner.invoke(app, ["display-file", str(path), "--show-ends", "--number-all"])
        assert result.stdout == "     1  hello file!$\n"

    def test_numbering_from_environment(self, write_file, monkeypatch):
        monkeypatch.setenv("CUSTOM_CLI_NUMBERING", "zero-based")
        path = write_file("hello file!")
        result = runner.invoke(app, ["display-file", str(path), "-n"])
        assert result.stdout == "     0  hello file!\n"

    def test_number_all_counts_blank_lines(self, write_file):
        path = write_file("a\n\nb\n")
        result = runner.invoke(app, ["display-file", str(path), "-n"])
        assert result.stdout == "     1  a\n     2  \n     3  b\n"

    def test_number_nonblank_skips_blank_lines(self, write_file):
        path = write_file("\nsecond\n")
        result = runner.invoke(app, ["display-file", str(path), "--number-nonblank"])
        assert result.exit_code == 0
        assert result.stdout == "\n     1  second\n"

    def test_number_nonblank_whitespace_only_line_is_blank(self, write_file):
        path = write_file("one\n   \ntwo\n")
        result = runner.invoke(app, ["display-file", str(path), "-b"])
        assert result.stdout == "     1  one\n   \n     2  two\n"

    def test_show_tabs(self, write_file):
        path = write_file("a\tb\t\tc\n")
        result = runner.invoke(app, ["display-file", str(path), "--show-tabs"])
        assert result.stdout == "a^Ib^I^Ic\n"

    def test_tabs_kept_without_show_tabs(self, write_file):
        path = write_file("a\tb\n")
        result = runner.invoke(app, ["display-file", str(path)])
        assert result.stdout == "a\tb\n"

    def test_all_short_flags_combined(self, write_file):
        path = write_file("first\tline\n\nthird\n")
        result = runner.invoke(app, ["display-file", str(path), "-s", "-n", "-b", "-T"])
        assert result.exit_code == 0
        assert result.stdout == "     1  first^Iline$\n$\n     2  third$\n"

    @pytest.mark.parametrize("flag", ["-s", "-e", "--show-ends"])
    def test_show_ends_spellings(self, write_file, flag):
        path = write_file("x\n")
        result = runner.invoke(app, ["display-file", str(path), flag])
        assert result.stdout == "x$\n"

    def test_number_long_alias(self, write_file):
        path = write_file("x\n")
        result = runner.invoke(app, ["display-file", str(path), "--number"])
        assert result.stdout == "     1  x\n"

    def test_reads_stdin(self):
        result = runner.invoke(app, ["display-file", "-", "-n"], input="x\ny\n")
        assert result.exit_code == 0
        assert result.stdout == "     1  x\n     2  y\n"

    def test_cat_alias(self, write_file):
        path = write_file("hello file!")
        result = runner.invoke(app, ["cat", str(path), "-s"])
        assert result.stdout == "hello file!$\n"

    def test_lone_carriage_return_is_not_a_line_break(self, write_file):
        path = write_file(b"a\rb\n")
        result = runner.invoke(app, ["display-file", str(path), "-n"])
        assert result.stdout == "     1  a\rb\n"

    def test_stdin_honours_configured_encoding(self, monkeypatch):
        monkeypatch.setenv("CUSTOM_CLI_ENCODING", "latin-1")
        result = runner.invoke(app, ["display-file", "-"], input="caf\xe9\n".encode("latin-1"))
        assert result.exit_code == 0
        assert result.stdout == "caf\xe9\n"


# ─── Error handling ──────────────────────────────────────────────────────


class TestDisplayFileErrors:
    def test_missing_file_reports_and_fails(self, tmp_path):
        missing = tmp_path / "nope.txt"
        result = runner.invoke(app, ["display-file", str(missing)])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "FILE_OPEN_FAILED" in result.stderr

    def test_missing_file_silent_when_reporting_disabled(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CUSTOM_CLI_REPORT_OPEN_ERRORS", "false")
        result = runner.invoke(app, ["display-file", str(tmp_path / "nope.txt")])
        assert result.exit_code == 0
        assert result.stdout == ""
        assert result.stderr == ""

    def test_no_path_fails_to_open(self):
        result = runner.invoke(app, ["display-file"])
        assert result.exit_code == 1
        assert result.stdout == ""

    def test_unknown_flag_is_usage_error(self, write_file):
        path = write_file("x")
        result = runner.invoke(app, ["display-file", str(path), "--bogus"])
        assert result.exit_code == 2
        assert result.stdout == ""

    def test_unknown_subcommand_is_usage_error(self):
        result = runner.invoke(app, ["frobnicate"])
        assert result.exit_code == 2

    def test_invalid_numbering_is_usage_error(self, write_file):
        path = write_file("x")
        result = runner.invoke(app, ["display-file", str(path), "--numbering", "roman"])
        assert result.exit_code == 2

    def test_invalid_settings_exit_nonzero(self, monkeypatch):
        monkeypatch.setenv("CUSTOM_CLI_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["print-text", "hi"])
        assert result.exit_code == 1
        assert "Configuration error" in result.stderr

    def test_unknown_encoding_is_configuration_error(self, write_file, monkeypatch):
        monkeypatch.setenv("CUSTOM_CLI_ENCODING", "bogus")
        result = runner.invoke(app, ["display-file", str(write_file("x"))])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Configuration error" in result.stderr
        assert "Traceback" not in result.stderr

    def test_undecodable_input_with_strict_handler(self, write_file, monkeypatch):
        monkeypatch.setenv("CUSTOM_CLI_ENCODING_ERRORS", "strict")
        monkeypatch.setenv("CUSTOM_CLI_REPORT_OPEN_ERRORS", "false")
        result = runner.invoke(app, ["display-file", str(write_file(b"\xff\n"))])
        assert result.exit_code == 1
        assert "FILE_READ_FAILED" in result.stderr


# ─── Root options and config ─────────────────────────────────────────────


class TestRootOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.stdout.startswith("custom-cli ")

    def test_log_level_option(self):
        result = runner.invoke(app, ["--log-level", "error", "print-text", "hi"])
        assert result.exit_code == 0
        assert result.stdout == "hi\n"


class TestConfigCLI:
    def test_config_show_env(self):
        result = runner.invoke(app, ["config", "show", "--format", "env"])
        assert result.exit_code == 0
        assert "CUSTOM_CLI_NUMBERING=one-based" in result.stdout
        assert "CUSTOM_CLI_REPORT_OPEN_ERRORS=True" in result.stdout

    def test_config_show_json(self, monkeypatch):
        monkeypatch.setenv("CUSTOM_CLI_ENCODING", "latin-1")
        result = runner.invoke(app, ["config", "show", "--format", "json"])
        assert result.exit_code == 0
        assert '"encoding": "latin-1"' in result.stdout

    def test_config_show_table(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "numbering" in result.stdout

    def test_config_show_unknown_format(self):
        result = runner.invoke(app, ["config", "show", "--format", "yaml"])
        assert result.exit_code == 2
