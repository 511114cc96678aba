"""Parsers for the tabular output of ``nmcli``."""

from __future__ import annotations

import re
from dataclasses import dataclass

_COLUMN_GAP = re.compile(r"\s{2,}")
_INFRA = re.compile(r"\s+Infra\s+")
_RATE_UNIT = "Mbit/s"


@dataclass(frozen=True)
class Connection:
    """A saved network connection profile."""

    name: str
    type: str


@dataclass(frozen=True)
class ActiveConnection:
    """A connection that is currently active on a device."""

    name: str
    type: str
    device: str


@dataclass(frozen=True)
class WifiNetwork:
    """A wireless network seen in a scan."""

    ssid: str
    signal: int
    security: str


def _data_lines(text: str):
    """Yield the non-blank lines after the header line."""
    lines = text.splitlines()
    for line in lines[1:]:
        if line.strip():
            yield line


def _columns(line: str, minimum: int) -> list[str]:
    fields = _COLUMN_GAP.split(line.strip())
    if len(fields) < minimum:
        raise ValueError(f"malformed nmcli line: {line!r}")
    return fields


def parse_connections(text: str) -> list[Connection]:
    """Parse ``nmcli connection show`` output (NAME, UUID, TYPE, DEVICE)."""
    connections = []
    for line in _data_lines(text):
        name, _uuid, conn_type, *_ = _columns(line, 3)
        connections.append(Connection(name=name, type=conn_type.split()[0]))
    return connections


def parse_active_connections(text: str) -> list[ActiveConnection]:
    """Parse ``nmcli connection show --active`` output."""
    active = []
    for line in _data_lines(text):
        name, _uuid, conn_type, device, *_ = _columns(line, 4)
        active.append(
            ActiveConnection(
                name=name,
                type=conn_type.split()[0],
                device=device.split()[0],
            )
        )
    return active


def _parse_wifi_line(line: str) -> WifiNetwork | None:
    mode = _INFRA.search(line)
    if mode is None:
        return None
    ssid = re.sub(r"^\s*\*?\s*", "", line[: mode.start()]).rstrip()

    rate_at = line.find(_RATE_UNIT, mode.end())
    if rate_at < 0:
        raise ValueError(f"malformed nmcli wifi line: {line!r}")
    rest = line[rate_at + len(_RATE_UNIT):].split()
    if len(rest) < 3:
        raise ValueError(f"malformed nmcli wifi line: {line!r}")
    try:
        signal = int(rest[0])
    except ValueError as exc:
        raise ValueError(f"bad signal value in line: {line!r}") from exc
    security = " ".join(rest[2:])
    return WifiNetwork(ssid=ssid, signal=signal, security=security)


def parse_wifi_list(text: str) -> list[WifiNetwork]:
    """Parse ``nmcli device wifi`` output.

    Only infrastructure-mode networks are reported; other rows are ignored.
    """
    networks = []
    for line in _data_lines(text):
        network = _parse_wifi_line(line)
        if network is not None:
            networks.append(network)
    return networks