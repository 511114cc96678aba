import socket
import struct

import pytest

from kynetctl import interfaces
from kynetctl.interfaces import (
    DeviceStats,
    InterfaceError,
    broadcast_address,
    ip_address,
    mac_address,
    mtu,
    netmask,
    parse_device_stats,
    read_device_stats,
)

SAMPLE = """\
Inter-|   Receive                                                |  Transmit
 face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed
    lo:    5000      50    0    0    0     0          0         0     5000      50    0    0    0     0       0          0
  eth0: 1234567    8901   11   12   13     0          0         0   765432    2109   21   22   23     0       0          0
 wlan0:111222 333 4 5 6 0 0 0 777888 999 7 8 9 0 0 0
"""


def _fake_ioctl(responses):
    def ioctl(fd, request, arg):
        payload = responses[request]
        return bytes(arg[:16]) + payload.ljust(len(arg) - 16, b"\0")
    return ioctl


def _sockaddr_in(address):
    return struct.pack("=HH", socket.AF_INET, 0) + socket.inet_aton(address)


def test_parse_device_stats_picks_named_device():
    stats = parse_device_stats(SAMPLE, "eth0")
    assert stats.bytes() == (1234567, 765432)
    assert stats.packets() == (8901, 2109)
    assert stats.errors() == (11, 21)
    assert stats.drops() == (12, 22)
    assert stats.fifo() == (13, 23)


def test_parse_device_stats_without_space_after_colon():
    stats = parse_device_stats(SAMPLE, "wlan0")
    assert stats.bytes() == (111222, 777888)
    assert stats.fifo() == (6, 9)


def test_parse_device_stats_matches_whole_name():
    with pytest.raises(InterfaceError):
        parse_device_stats(SAMPLE, "eth")


def test_parse_device_stats_malformed_line():
    with pytest.raises(InterfaceError):
        parse_device_stats("header\n eth0: 1 2 3\n", "eth0")


def test_read_device_stats_from_file(tmp_path):
    path = tmp_path / "dev"
    path.write_text(SAMPLE)
    stats = read_device_stats("lo", str(path))
    assert stats == DeviceStats(5000, 50, 0, 0, 0, 5000, 50, 0, 0, 0)


def test_read_device_stats_missing_file(tmp_path):
    with pytest.raises(InterfaceError):
        read_device_stats("lo", str(tmp_path / "absent"))


def test_addresses_decoded_from_ifreq(monkeypatch):
    monkeypatch.setattr(
        interfaces.fcntl,
        "ioctl",
        _fake_ioctl(
            {
                interfaces.SIOCGIFADDR: _sockaddr_in("192.168.68.160"),
                interfaces.SIOCGIFBRDADDR: _sockaddr_in("192.168.255.255"),
                interfaces.SIOCGIFNETMASK: _sockaddr_in("255.255.0.0"),
            }
        ),
    )
    assert ip_address("eth0") == "192.168.68.160"
    assert broadcast_address("eth0") == "192.168.255.255"
    assert netmask("eth0") == "255.255.0.0"


def test_mac_address_format(monkeypatch):
    hw = bytes([0x02, 0x00, 0x5E, 0x0A, 0xBC, 0x01])
    payload = struct.pack("=H", 1) + hw
    monkeypatch.setattr(
        interfaces.fcntl, "ioctl", _fake_ioctl({interfaces.SIOCGIFHWADDR: payload})
    )
    assert mac_address("eth0") == "2:0:5e:a:bc:1"


def test_mtu_decoded(monkeypatch):
    monkeypatch.setattr(
        interfaces.fcntl,
        "ioctl",
        _fake_ioctl({interfaces.SIOCGIFMTU: struct.pack("i", 1500)}),
    )
    assert mtu("eth0") == 1500


def test_ioctl_failure_becomes_interface_error(monkeypatch):
    def failing(fd, request, arg):
        raise OSError(19, "No such device")

    monkeypatch.setattr(interfaces.fcntl, "ioctl", failing)
    with pytest.raises(InterfaceError):
        ip_address("eth0")


@pytest.mark.parametrize("name", ["", "a" * 16, "bad\0name"])
def test_invalid_names_rejected(name):
    with pytest.raises(InterfaceError):
        mtu(name)


def test_unknown_interface_raises():
    with pytest.raises(InterfaceError):
        ip_address("nosuchif0")


def test_loopback_mtu_is_positive():
    assert mtu("lo") > 0