"""Command-line interface tests via click's CliRunner."""

import pytest
from click.testing import CliRunner

from monkey import __version__
from monkey.cli.main import cli
from monkey.config import config


@pytest.fixture(autouse=True)
def reset_debug_flag(monkeypatch):
    monkeypatch.setattr(config, "enable_debug_logs", False)


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_tokens_table(runner, tmp_path):
    source = tmp_path / "program.mk"
    source.write_text("let five = 5;\n")

    result = runner.invoke(cli, ["tokens", str(source)])

    assert result.exit_code == 0, result.output
    assert "Tokens" in result.output
    for text in ("LET", "IDENT", "five", "ASSIGN", "INT", "SEMICOLON"):
        assert text in result.output
    assert "EOF" not in result.output


def test_tokens_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["tokens", str(tmp_path / "missing.mk")])
    assert result.exit_code == 2


def test_check_clean_file(runner, tmp_path):
    source = tmp_path / "ok.mk"
    source.write_text("if (x != 10) { return true; }")

    result = runner.invoke(cli, ["check", str(source)])

    assert result.exit_code == 0, result.output
    assert "No illegal tokens found" in result.output


def test_check_reports_illegal_characters(runner, tmp_path):
    source = tmp_path / "bad.mk"
    source.write_text("let x = 5 @ 3 # 1;")

    result = runner.invoke(cli, ["check", str(source)])

    assert result.exit_code == 1
    assert "Illegal characters found" in result.output
    assert "'@'" in result.output
    assert "'#'" in result.output


def test_debug_flag_enables_debug_logs(runner, tmp_path):
    source = tmp_path / "ok.mk"
    source.write_text("x")

    result = runner.invoke(cli, ["--debug", "check", str(source)])

    assert result.exit_code == 0, result.output
    assert config.enable_debug_logs is True


def test_repl_command_exits_on_quit(runner):
    result = runner.invoke(cli, ["repl"], input="let x = 1;\nquit\n")

    assert result.exit_code == 0, result.output
    assert "Token(type=LET, literal='let')" in result.output
    assert "Token(type=INT, literal='1')" in result.output


def test_tokens_rejects_non_utf8_file(runner, tmp_path):
    source = tmp_path / "latin1.mk"
    source.write_bytes(b"let caf\xe9 = 1;")

    result = runner.invoke(cli, ["tokens", str(source)])

    assert result.exit_code == 1
    assert "not valid UTF-8 text" in result.output


def test_check_rejects_non_utf8_file(runner, tmp_path):
    source = tmp_path / "latin1.mk"
    source.write_bytes(b"\xff\xfe")

    result = runner.invoke(cli, ["check", str(source)])

    assert result.exit_code == 1
    assert "not valid UTF-8 text" in result.output


def test_python_dash_m_entry_point(monkeypatch, capsys):
    import runpy
    import sys

    monkeypatch.setattr(sys, "argv", ["monkey", "--version"])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("monkey", run_name="__main__")

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out
