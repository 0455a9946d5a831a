"""CLI tests through click's CliRunner."""

import json

import pytest
from click.testing import CliRunner

from cb.cli.main import cli


@pytest.fixture
def runner(monkeypatch, tmp_path):
    for key in ("CB_PROMPT", "CB_LOG_LEVEL", "CB_STRICT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def write_source(tmp_path, text, name="main.cb"):
    path = tmp_path / name
    path.write_bytes(text.encode("latin-1"))
    return str(path)


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_repl_prints_tokens(runner):
    result = runner.invoke(cli, ["repl", "--prompt", ">>"], input="let x = 1;\n")
    assert result.exit_code == 0
    assert "{Type:LET Literal:let}" in result.output
    assert "{Type:INT Literal:1}" in result.output


def test_repl_uses_configured_prompt(runner, tmp_path):
    (tmp_path / "cb.json").write_text(json.dumps({"prompt": "cb$ "}))
    result = runner.invoke(cli, ["repl"], input="x\n")
    assert result.exit_code == 0
    assert "cb$ {Type:IDENT Literal:x}" in result.output


def test_tokens_table(runner, tmp_path):
    path = write_source(tmp_path, "fn add(a, b) { a + b; }")
    result = runner.invoke(cli, ["tokens", path])
    assert result.exit_code == 0
    assert "FUNCTION" in result.output
    assert "add" in result.output


def test_tokens_strict_fails_on_illegal(runner, tmp_path):
    path = write_source(tmp_path, "let x = @;")
    result = runner.invoke(cli, ["tokens", path], env={"CB_STRICT": "true"})
    assert result.exit_code == 1
    assert "offset 8" in result.output
    assert "Tokens" not in result.output


def test_check_clean_file(runner, tmp_path):
    path = write_source(tmp_path, "let five = 5;")
    result = runner.invoke(cli, ["check", path])
    assert result.exit_code == 0
    assert "No illegal characters" in result.output


def test_check_reports_illegal_characters(runner, tmp_path):
    path = write_source(tmp_path, "let x = 5 @ 3;")
    result = runner.invoke(cli, ["check", path])
    assert result.exit_code == 1
    assert "offset 10" in result.output
    assert "'@'" in result.output


def test_bad_config_file_exits(runner, tmp_path):
    (tmp_path / "cb.json").write_text("[]")
    result = runner.invoke(cli, ["check", write_source(tmp_path, "x")])
    assert result.exit_code == 1
    assert "Config error" in result.output


def test_tokens_strict_passes_clean_file(runner, tmp_path):
    path = write_source(tmp_path, "let x = 1;")
    result = runner.invoke(cli, ["tokens", path], env={"CB_STRICT": "true"})
    assert result.exit_code == 0
    assert "LET" in result.output


def test_check_reports_byte_offsets(runner, tmp_path):
    path = tmp_path / "utf8.cb"
    path.write_bytes("é x".encode("utf-8"))
    result = runner.invoke(cli, ["check", str(path)])
    assert result.exit_code == 1
    assert "offset 0" in result.output
    assert "offset 1" in result.output
