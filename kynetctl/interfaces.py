"""Querying network interfaces: addresses, MTU and traffic counters."""

from __future__ import annotations

import array
import fcntl
import socket
import struct
from dataclasses import dataclass

SIOCGIFCONF = 0x8912
SIOCGIFADDR = 0x8915
SIOCGIFBRDADDR = 0x8919
SIOCGIFNETMASK = 0x891B
SIOCGIFHWADDR = 0x8927
SIOCGIFMTU = 0x8921

PROC_NET_DEV = "/proc/net/dev"

_IFNAMSIZ = 16
_IFCONF_BUFFER = 1024
_IFREQ_SIZE = 40 if struct.calcsize("P") == 8 else 32


class InterfaceError(OSError):
    """Raised when an interface cannot be queried."""


def _encode_name(if_name: str) -> bytes:
    raw = if_name.encode()
    if not raw or len(raw) >= _IFNAMSIZ or b"\0" in raw:
        raise InterfaceError(f"invalid interface name: {if_name!r}")
    return raw


def _ifreq_ioctl(if_name: str, request: int) -> bytes:
    """Issue an interface ioctl and return the filled ``struct ifreq``."""
    ifreq = struct.pack(f"{_IFNAMSIZ}s", _encode_name(if_name)).ljust(_IFREQ_SIZE, b"\0")
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            return fcntl.ioctl(sock.fileno(), request, ifreq)
    except OSError as exc:
        raise InterfaceError(f"cannot query interface {if_name!r}: {exc}") from exc


def interface_names() -> list[str]:
    """Return the names of the interfaces that have an IPv4 configuration."""
    buffer = array.array("B", bytes(_IFCONF_BUFFER))
    address, _ = buffer.buffer_info()
    ifconf = struct.pack("iL", _IFCONF_BUFFER, address)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            result = fcntl.ioctl(sock.fileno(), SIOCGIFCONF, ifconf)
    except OSError as exc:
        raise InterfaceError(f"cannot list interfaces: {exc}") from exc
    length = struct.unpack("iL", result)[0]
    data = buffer.tobytes()[:length]
    return [
        data[offset:offset + _IFNAMSIZ].split(b"\0", 1)[0].decode()
        for offset in range(0, length - _IFREQ_SIZE + 1, _IFREQ_SIZE)
    ]


def _ipv4_from_ifreq(ifreq: bytes) -> str:
    # sockaddr_in: family (2), port (2), address (4)
    return socket.inet_ntoa(ifreq[_IFNAMSIZ + 4:_IFNAMSIZ + 8])


def ip_address(if_name: str) -> str:
    """Return the IPv4 address of an interface in dotted notation."""
    return _ipv4_from_ifreq(_ifreq_ioctl(if_name, SIOCGIFADDR))


def broadcast_address(if_name: str) -> str:
    """Return the IPv4 broadcast address of an interface."""
    return _ipv4_from_ifreq(_ifreq_ioctl(if_name, SIOCGIFBRDADDR))


def netmask(if_name: str) -> str:
    """Return the IPv4 subnet mask of an interface."""
    return _ipv4_from_ifreq(_ifreq_ioctl(if_name, SIOCGIFNETMASK))


def mac_address(if_name: str) -> str:
    """Return the hardware address, each byte in unpadded lower-case hex."""
    ifreq = _ifreq_ioctl(if_name, SIOCGIFHWADDR)
    # sockaddr: family (2), then sa_data holding the six address bytes
    hw = ifreq[_IFNAMSIZ + 2:_IFNAMSIZ + 8]
    return ":".join(f"{octet:x}" for octet in hw)


def mtu(if_name: str) -> int:
    """Return the MTU of an interface."""
    ifreq = _ifreq_ioctl(if_name, SIOCGIFMTU)
    return struct.unpack_from("i", ifreq, _IFNAMSIZ)[0]


@dataclass(frozen=True)
class DeviceStats:
    """Traffic counters of one interface, as reported by the kernel."""

    rx_bytes: int
    rx_packets: int
    rx_errors: int
    rx_drops: int
    rx_fifo: int
    tx_bytes: int
    tx_packets: int
    tx_errors: int
    tx_drops: int
    tx_fifo: int

    def bytes(self) -> tuple[int, int]:
        """Received and transmitted bytes."""
        return self.rx_bytes, self.tx_bytes

    def packets(self) -> tuple[int, int]:
        """Received and transmitted packets."""
        return self.rx_packets, self.tx_packets

    def errors(self) -> tuple[int, int]:
        """Erroneous packets received and transmitted."""
        return self.rx_errors, self.tx_errors

    def drops(self) -> tuple[int, int]:
        """Dropped packets received and transmitted."""
        return self.rx_drops, self.tx_drops

    def fifo(self) -> tuple[int, int]:
        """FIFO overruns on receive and transmit."""
        return self.rx_fifo, self.tx_fifo


def parse_device_stats(text: str, if_name: str) -> DeviceStats:
    """Extract one interface's counters from ``/proc/net/dev`` content."""
    for line in text.splitlines():
        name, sep, counters = line.partition(":")
        if not sep or name.strip() != if_name:
            continue
        fields = counters.split()
        if len(fields) < 13:
            raise InterfaceError(f"malformed statistics line: {line!r}")
        try:
            values = [int(field) for field in fields[:13]]
        except ValueError as exc:
            raise InterfaceError(f"malformed statistics line: {line!r}") from exc
        return DeviceStats(
            rx_bytes=values[0],
            rx_packets=values[1],
            rx_errors=values[2],
            rx_drops=values[3],
            rx_fifo=values[4],
            tx_bytes=values[8],
            tx_packets=values[9],
            tx_errors=values[10],
            tx_drops=values[11],
            tx_fifo=values[12],
        )
    raise InterfaceError(f"no statistics for device {if_name!r}")


def read_device_stats(if_name: str, path: str = PROC_NET_DEV) -> DeviceStats:
    """Read an interface's traffic counters from ``path``."""
    try:
        with open(path, encoding="ascii", errors="replace") as stream:
            text = stream.read()
    except OSError as exc:
        raise InterfaceError(f"cannot read {path}: {exc}") from exc
    return parse_device_stats(text, if_name)