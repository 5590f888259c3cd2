"""End-to-end CLI tests executed directly via :func:`pybitset.cli.main`."""

import json
from pathlib import Path

import pytest

from pybitset import Bitset, cli


def test_cli_show_text(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show", "3,1", "32"]) == 0
    out = capfd.readouterr().out
    assert out == "Bitset([1, 3, 32])\nlen=3 word=0x80000005\n"


def test_cli_show_json_from_file(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "elements.txt"
    source.write_text("2\n4\n")
    assert cli.main(["show", f"@{source}", "--format", "json"]) == 0
    payload = json.loads(capfd.readouterr().out)
    assert payload == {"elements": [2, 4], "len": 2, "word": 10}


def test_cli_eval_set_operation(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["eval", "difference", "1,2,3,4,8,9,32", "2,3,4,6,9", "--format", "json"]) == 0
    payload = json.loads(capfd.readouterr().out)
    assert payload["elements"] == [1, 8, 32]


def test_cli_eval_relation(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["eval", "isdisjoint", "1,2,3", "5,7,15"]) == 0
    assert capfd.readouterr().out == "True\n"
    assert cli.main(["eval", "issubset", "1,2,3", "1,2", "--format", "json"]) == 0
    assert json.loads(capfd.readouterr().out) == {"result": False}


def test_cli_encode_decode_roundtrip(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    for version in ("0", "1", "2"):
        assert cli.main(["encode", "1,9,32", "--payload-version", version]) == 0
        hex_payload = capfd.readouterr().out.strip()
        assert Bitset.reconstruct(bytes.fromhex(hex_payload)) == Bitset([1, 9, 32])

        out_path = tmp_path / f"decoded{version}.json"
        assert cli.main(["decode", hex_payload, "--format", "json", "--out", str(out_path)]) == 0
        assert json.loads(out_path.read_text())["elements"] == [1, 9, 32]


def test_cli_reports_errors(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show", "1,33"]) == 2
    assert "error" in capfd.readouterr().err
    assert cli.main(["decode", "zz"]) == 2
    assert "not valid hex" in capfd.readouterr().err
    assert cli.main(["decode", "425309"]) == 2
    assert "unknown payload version" in capfd.readouterr().err


def test_cli_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.main([])


def test_cli_every_subcommand_has_a_handler() -> None:
    parser = cli._build_parser()
    subparsers = next(
        action for action in parser._actions if action.dest == "command"
    )
    assert set(subparsers.choices) == set(cli._COMMANDS)
