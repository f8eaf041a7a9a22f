import sys
import threading

import pytest

import argsx
from argsx import const, context
from argsx.context import Argsx
from argsx.errors import MissingValueError


def test_scenario_int():
    x = Argsx(["prog", "--int.value", "123", "--int.empty", "--int.equals=987"])
    assert x.fetch("int.value").integer() == 123
    with pytest.raises(MissingValueError):
        x.fetch("int.empty").integer()
    assert x.fetch("int.equals").integer() == 987


def test_scenario_string():
    x = Argsx(
        [
            "prog",
            "--string.value",
            "string value",
            "--string.must",
            "--string.slice",
            "A,B,C,D",
            "--string.slice.delimiter",
            "E-F-G-H",
            "--string.slice.empty",
        ]
    )
    assert x.fetch("string.value").string() == "string value"
    assert x.fetch("string.must").mustString() == ""
    assert x.fetch("string.slice").stringSlice() == ["A", "B", "C", "D"]
    assert x.fetch("string.slice.delimiter").stringSlice(delimiter="-") == ["E", "F", "G", "H"]
    with pytest.raises(MissingValueError):
        x.fetch("string.slice.empty").stringSlice()
    assert x.fetch("string.slice.default").stringSlice(default=["Z", "Y"]) == ["Z", "Y"]


def test_bare_flag_is_true():
    assert Argsx(["prog", "--flag"]).fetch("flag").boolean() is True


def test_absent_flag():
    x = Argsx(["prog"])
    v = x.fetch("nope")
    assert v.key == "nope"
    assert not v.present
    assert not x.has("nope")
    with pytest.raises(MissingValueError) as e:
        v.integer()
    assert e.value.key == "nope"
    assert v.integer(1234) == 1234


def test_fetch_ignores_dashes():
    x = Argsx(["prog", "--name", "foo"])
    assert x.fetch("--name").string() == "foo"
    assert x.fetch("-name").string() == "foo"
    assert x.has("--name")


def test_fetch_value_fields():
    v = Argsx(["prog", "-n=1"]).fetch("n")
    assert v.key == "n"
    assert v.rawKey == "-n"
    assert v.payload == "1"


def test_keys_and_table():
    x = Argsx(["prog", "--a", "1", "--b"])
    assert x.keys() == ["a", "b"]
    table = x.table()
    table.clear()
    assert x.keys() == ["a", "b"]


def test_args_are_copied():
    args = ["prog", "--a", "1"]
    x = Argsx(args)
    args.append("--b")
    assert not x.has("b")
    assert x.args == ["prog", "--a", "1"]


def test_parsed_once(monkeypatch):
    calls = []

    def parseArgs(args):
        calls.append(args)
        return {}

    monkeypatch.setattr(context, "parseArgs", parseArgs)
    x = Argsx(["prog", "--a"])
    x.fetch("a")
    x.fetch("b")
    x.keys()
    assert len(calls) == 1


def test_set_args_invalidates():
    x = Argsx(["prog", "--a", "1"])
    assert x.fetch("a").integer() == 1
    x.setArgs(["prog", "--a", "2", "--b"])
    assert x.fetch("a").integer() == 2
    assert x.has("b")


def test_set_args_drops_table():
    x = Argsx(["prog", "--a", "1"])
    assert x.has("a")
    x.setArgs(["prog", "--a", "1"])
    assert x._table is None
    assert x.has("a")


def test_readers_never_see_reset_table():
    args = ["prog", "--a", "1"]
    x = Argsx(args)
    stop = threading.Event()
    misses = []

    def writer():
        while not stop.is_set():
            x.setArgs(args)

    def reader():
        for _ in range(2000):
            if not x.has("a"):
                misses.append(True)

    w = threading.Thread(target=writer)
    readers = [threading.Thread(target=reader) for _ in range(4)]
    w.start()
    for t in readers:
        t.start()
    for t in readers:
        t.join(30)
    stop.set()
    w.join(5)

    assert misses == []


def test_concurrent_first_fetch(monkeypatch):
    calls = []
    started = threading.Event()
    release = threading.Event()
    real = context.parseArgs

    def parseArgs(args):
        calls.append(args)
        started.set()
        release.wait(5)
        return real(args)

    monkeypatch.setattr(context, "parseArgs", parseArgs)
    x = Argsx(["prog", "--n", "7"])
    results = []

    def worker():
        results.append(x.fetch("n").integer())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    started.wait(5)
    release.set()
    for t in threads:
        t.join(5)

    assert len(calls) == 1
    assert results == [7] * 8


def test_process_args(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["app", "--a", "1"])
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    assert context.processArgs() == ["app", "--a", "1"]

    monkeypatch.setenv(const.EXTRA_ARGS_ENV, "--b 2")
    assert context.processArgs() == ["app", "--b", "2", "--a", "1"]


def test_default_instance(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["app", "--port", "8080"])
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    argsx.setArgs(None)
    assert argsx.fetch("port").integer() == 8080
    assert argsx.default() is argsx.default()

    argsx.setArgs(["app", "--port", "9090"])
    assert argsx.fetch("port").integer() == 9090
    argsx.setArgs(None)


# --- Main ------------------------------------------------------------------- #


def test_main_inspect(capsys):
    assert argsx.main(["--name", "foo", "orphan", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "2 flag(s)" in out
    assert "name" in out
    assert "foo" in out
    assert "(empty)" in out


def test_main_version(capsys):
    assert argsx.main(["--version"]) == 0
    assert const.VERSION_STR in capsys.readouterr().out
