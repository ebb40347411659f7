import io
import json
import sys
from types import SimpleNamespace
from knode.cli import main
from knode.models.socket import SocketKind
from _builders import document, flags, instance


def _sample():
    sock = bytes([flags(SocketKind.INCOMING_SWITCH, switch=True), 0xF7, 0])
    return document(nodes=["lib/a"], instances=[instance(3, 0, b"gate", sockets=[sock])])


def test_dump_json(tmp_path, capsys):
    p = tmp_path / "a.knode"
    p.write_bytes(_sample())
    assert main([str(p)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["version"] == 1
    assert out["nodes"] == ["lib/a"]
    inst = out["instances"][0]
    assert inst["name"] == "gate"
    assert inst["builtin_type"] is None
    assert inst["sockets"][0]["value"] == "true"
    assert inst["sockets"][0]["builtin_value_type"] == "builtin-type:truth"


def test_dump_single_line(tmp_path, capsys):
    p = tmp_path / "a.knode"
    p.write_bytes(_sample())
    assert main([str(p), "--indent", "0"]) == 0
    assert capsys.readouterr().out.count("\n") == 1


def test_parse_error_exits_nonzero(tmp_path, capsys):
    p = tmp_path / "bad.knode"
    p.write_bytes(b"kronarknode\x07")
    assert main([str(p)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error while reading version number" in captured.err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.knode")]) == 1
    assert "could not read" in capsys.readouterr().err


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=io.BytesIO(_sample())))
    assert main(["-"]) == 0
    assert json.loads(capsys.readouterr().out)["instances"][0]["key"] == 3


def test_closed_stdin(monkeypatch, capsys):
    closed = io.BytesIO(_sample())
    closed.close()
    monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=closed))
    assert main(["-"]) == 1
    assert "could not read input" in capsys.readouterr().err
