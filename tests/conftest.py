"""Shared fixtures for arplookup tests."""

import json

import pytest


class FakeSource:
    """In-memory neighbor table source."""

    def __init__(self, payload):
        if isinstance(payload, (list, dict)):
            payload = json.dumps(payload).encode()
        self.payload = payload
        self.calls = 0

    def fetch(self) -> bytes:
        self.calls += 1
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


@pytest.fixture
def fake_source():
    return FakeSource


REACHABLE_TABLE = [
    {"dst": "192.0.2.5", "dev": "eth0", "lladdr": "AA:BB:CC:DD:EE:FF", "state": ["REACHABLE"]},
]

INCOMPLETE_TABLE = [
    {"dst": "192.0.2.9", "dev": "eth0", "state": ["INCOMPLETE"]},
]

MIXED_TABLE = [
    {"dst": "192.168.1.1", "dev": "eth0", "lladdr": "00:11:22:33:44:55", "router": True, "state": ["REACHABLE"]},
    {"dst": "192.168.1.20", "dev": "eth0", "state": ["FAILED"]},
    {"dst": "fe80::1", "dev": "wlan0", "lladdr": "66:77:88:99:AA:BB", "state": ["STALE"]},
    {"dst": "192.168.1.30", "dev": "wlan0", "lladdr": "de:ad:be:ef:00:01", "state": ["DELAY"]},
]
