"""Tests for the arplookup command line."""

import importlib
import json

import pytest
from click.testing import CliRunner
from rich.console import Console

from arplookup.cli import main
from arplookup.neighbors import core
from arplookup.neighbors.errors import SourceUnavailableError

from conftest import FakeSource, MIXED_TABLE


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def table_source(monkeypatch):
    def install(payload):
        source = FakeSource(payload)
        monkeypatch.setattr(core, "default_source", lambda config=None: source)
        return source
    return install


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "arplookup" in result.output


class TestLookupCommand:
    def test_found(self, runner, table_source):
        table_source(MIXED_TABLE)
        result = runner.invoke(main, ["neighbors", "lookup", "192.168.1.1"])
        assert result.exit_code == 0
        assert result.output.strip() == "00:11:22:33:44:55"

    def test_found_json(self, runner, table_source):
        table_source(MIXED_TABLE)
        result = runner.invoke(main, ["neighbors", "lookup", "fe80::1", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"ip": "fe80::1", "lladdr": "66:77:88:99:aa:bb"}

    def test_unresolved(self, runner, table_source):
        table_source(MIXED_TABLE)
        result = runner.invoke(main, ["neighbors", "lookup", "192.168.1.20"])
        assert result.exit_code == 1
        assert "No neighbor found" in result.output

    def test_invalid_ip(self, runner, table_source):
        source = table_source(MIXED_TABLE)
        result = runner.invoke(main, ["neighbors", "lookup", "999.1.1.1"])
        assert result.exit_code == 2
        assert source.calls == 0

    def test_source_failure(self, runner, table_source):
        table_source(SourceUnavailableError("ip exited with status 1", returncode=1))
        result = runner.invoke(main, ["neighbors", "lookup", "192.168.1.1"])
        assert result.exit_code == 2
        assert "io" in result.output

    def test_decode_failure(self, runner, table_source):
        table_source(b"[{]")
        result = runner.invoke(main, ["neighbors", "lookup", "192.168.1.1"])
        assert result.exit_code == 2
        assert "decode" in result.output


class TestTableCommand:
    def test_resolved_json(self, runner, table_source):
        table_source(MIXED_TABLE)
        result = runner.invoke(main, ["neighbors", "table", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "192.168.1.1": "00:11:22:33:44:55",
            "fe80::1": "66:77:88:99:aa:bb",
            "192.168.1.30": "de:ad:be:ef:00:01",
        }

    def test_all_json_with_device(self, runner, table_source):
        table_source(MIXED_TABLE)
        result = runner.invoke(main, ["neighbors", "table", "--all", "--device", "eth0", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [e["dst"] for e in data] == ["192.168.1.1", "192.168.1.20"]
        assert data[1]["lladdr"] is None
        assert data[1]["state"] == ["FAILED"]

    def test_rich_table(self, runner, table_source):
        table_source(MIXED_TABLE)
        result = runner.invoke(main, ["neighbors", "table"])
        assert result.exit_code == 0
        assert "00:11:22:33:44:55" in result.output
        assert "192.168.1.20" not in result.output
        assert "Total: 3" in result.output

    def test_empty(self, runner, table_source):
        table_source([])
        result = runner.invoke(main, ["neighbors", "table"])
        assert result.exit_code == 0
        assert "No neighbors found" in result.output

    def test_unsupported_platform(self, runner, monkeypatch):
        monkeypatch.setattr(importlib.import_module("arplookup.neighbors.source").sys, "platform", "darwin")
        result = runner.invoke(main, ["neighbors", "table"])
        assert result.exit_code == 2
        assert "unsupported" in result.output


class TestCheckCommand:
    def test_ok(self, runner, monkeypatch):
        monkeypatch.setattr(importlib.import_module("arplookup.neighbors.source").sys, "platform", "linux")
        monkeypatch.setattr(importlib.import_module("arplookup.neighbors.config").shutil, "which", lambda name: "/usr/sbin/ip")
        result = runner.invoke(main, ["neighbors", "--ip-command", "/usr/sbin/ip", "check"])
        assert result.exit_code == 0
        assert "/usr/sbin/ip --json neighbor" in result.output

    def test_missing_command(self, runner, monkeypatch):
        monkeypatch.setattr(importlib.import_module("arplookup.neighbors.source").sys, "platform", "linux")
        monkeypatch.setattr(importlib.import_module("arplookup.neighbors.config").shutil, "which", lambda name: None)
        result = runner.invoke(main, ["neighbors", "check"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unsupported(self, runner, monkeypatch):
        monkeypatch.setattr(importlib.import_module("arplookup.neighbors.source").sys, "platform", "darwin")
        result = runner.invoke(main, ["neighbors", "check"])
        assert result.exit_code == 1


def test_fail_helper_never_returns():
    from typing import NoReturn, get_type_hints

    from arplookup.neighbors.cli import _fail

    assert get_type_hints(_fail)["return"] is NoReturn
    with pytest.raises(SystemExit) as exc_info:
        _fail(Console(), SourceUnavailableError("ip exited with status 1"))
    assert exc_info.value.code == 2
