#!filepath: tests/test_cli.py
import pyarrow.parquet as pq
import pytest
from typer.testing import CliRunner

from nglog.cli import app

runner = CliRunner()


@pytest.fixture
def world_file(tmp_path, example_log_path, encode_world):
    p = tmp_path / "world.log"
    p.write_bytes(encode_world(example_log_path.read_bytes(), 0x11))
    return p


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "v0.1.0" in result.output


def test_decode_local_to_stdout(example_log_path):
    result = runner.invoke(app, ["decode", str(example_log_path)])

    assert result.exit_code == 0
    assert result.output == example_log_path.read_text(encoding="utf-8")


def test_decode_world_to_file(tmp_path, world_file, example_log_path):
    out = tmp_path / "out" / "local.log"
    result = runner.invoke(app, ["decode", str(world_file), "--world", "-o", str(out)])

    assert result.exit_code == 0
    assert out.read_bytes() == example_log_path.read_bytes()


def test_decode_malformed(tmp_path):
    p = tmp_path / "bad.log"
    p.write_bytes(b"1.0\tA\nbad\n")

    result = runner.invoke(app, ["decode", str(p)])

    assert result.exit_code == 1
    assert "MalformedInput" in result.output


def test_decode_odd_world(tmp_path):
    p = tmp_path / "odd.log"
    p.write_bytes(b"\x00\x01\x02")

    result = runner.invoke(app, ["decode", str(p), "--world"])

    assert result.exit_code == 1
    assert "non-even length" in result.output


def test_missing_file(tmp_path):
    result = runner.invoke(app, ["decode", str(tmp_path / "nope.log")])
    assert result.exit_code == 2


def test_show(example_log_path):
    result = runner.invoke(app, ["show", str(example_log_path), "--limit", "3"])

    assert result.exit_code == 0
    assert "Log_Standard" in result.output
    assert "game_start" not in result.output


def test_export(tmp_path, world_file):
    out = tmp_path / "log.parquet"
    result = runner.invoke(app, ["export", str(world_file), str(out), "--world"])

    assert result.exit_code == 0
    assert pq.read_table(out).num_rows == 10


def test_show_keeps_bracketed_fields(tmp_path):
    # 玩家名里的 [TAG] / 孤立的 [/b] 不能被当成 rich markup
    p = tmp_path / "clan.log"
    p.write_bytes(b"1.0\tplayer\tConnect\t[TAG]Ripper\t[/b]\n")

    result = runner.invoke(app, ["show", str(p)])

    assert result.exit_code == 0
    assert "[TAG]Ripper" in result.output
    assert "[/b]" in result.output


def test_missing_file_name_with_brackets(tmp_path):
    result = runner.invoke(app, ["decode", str(tmp_path / "[missing].log")])

    assert result.exit_code == 2
    # 长路径可能被 rich 折行
    assert "[missing].log" in result.output.replace("\n", "")
