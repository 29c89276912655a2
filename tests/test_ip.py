import socket
from types import SimpleNamespace

import psutil
import pytest

from statline.ip import ipv4, ipv6


@pytest.fixture
def fake_interfaces(monkeypatch):
    table = {
        "eth0": [
            SimpleNamespace(family=psutil.AF_LINK, address="00:00:5e:00:53:00"),
            SimpleNamespace(family=socket.AF_INET6, address="2001:db8::1"),
            SimpleNamespace(family=socket.AF_INET, address="192.0.2.10"),
            SimpleNamespace(family=socket.AF_INET, address="192.0.2.11"),
        ],
        "lo": [SimpleNamespace(family=socket.AF_INET, address="127.0.0.1")],
    }
    monkeypatch.setattr(psutil, "net_if_addrs", lambda: table)
    return table


def test_ipv4_first_match(fake_interfaces):
    assert ipv4("eth0") == "192.0.2.10"


def test_ipv6(fake_interfaces):
    assert ipv6("eth0") == "2001:db8::1"


def test_family_absent(fake_interfaces):
    assert ipv6("lo") is None


def test_unknown_interface(fake_interfaces):
    assert ipv4("wlan9") is None


def test_enumeration_failure(monkeypatch):
    def fail():
        raise OSError("boom")

    monkeypatch.setattr(psutil, "net_if_addrs", fail)
    assert ipv4("eth0") is None