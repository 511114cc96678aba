# kynetctl

A small Linux library for working with network information. It can turn
`nmcli` table output into data, ask the kernel about interfaces, read traffic
counters, and time a "connecting" spinner.

## Installing

```
pip install .
```

## Modules

### `kynetctl.parsing`

Parsers for the text that `nmcli` prints. Each one skips the header line and
blank lines.

- `parse_connections(text)` reads `nmcli connection show` output and returns
  a list of `Connection(name, type)`.
- `parse_active_connections(text)` reads `nmcli connection show --active`
  output and returns a list of `ActiveConnection(name, type, device)`.
- `parse_wifi_list(text)` reads `nmcli device wifi` output and returns a list
  of `WifiNetwork(ssid, signal, security)`. Only infrastructure-mode rows are
  returned, and the leading `*` that marks the network in use is removed
  from the SSID.

When a line does not have the expected columns, these functions raise
`ValueError`.

### `kynetctl.interfaces`

These functions query interfaces through socket ioctls. They raise
`InterfaceError`, a subclass of `OSError`, when the name is not valid or the
query fails.

- `interface_names()` returns the names of the interfaces that have an IPv4
  configuration.
- `ip_address(if_name)`, `broadcast_address(if_name)` and `netmask(if_name)`
  each return an IPv4 address in dotted notation.
- `mac_address(if_name)` returns the hardware address, with each byte written
  in lower-case hex without padding, for example `2:0:5e:a:b:c`.
- `mtu(if_name)` returns the MTU as an integer.

Traffic counters come from `/proc/net/dev`:

- `read_device_stats(if_name, path="/proc/net/dev")` reads the file and
  parses it.
- `parse_device_stats(text, if_name)` parses text that you have already read.

Both return a `DeviceStats`. It has `rx_*` and `tx_*` fields for bytes,
packets, errors, drops and FIFO overruns. Its methods `bytes()`, `packets()`,
`errors()`, `drops()` and `fifo()` each return a `(received, transmitted)`
pair. If the device is not listed, or its line is malformed, they raise
`InterfaceError`.

### `kynetctl.loading`

`LoadingAnimation(on_timeout)` steps through a sequence of twelve frames. The
frames are named `:/res/s/conning-b/1.png` to `12.png`.

- `start()` resets it to the first frame and sets `running` to true.
- `stop()` sets `running` to false.
- `frame_path()` returns the frame that the next step will show. It raises
  `RuntimeError` if the animation has never been started.
- `step()` moves on one frame and returns the path of the frame shown. It
  also adds 60 ms to `elapsed_ms`. Once 40 seconds have built up,
  `on_timeout` is called on every further step.

The caller has to call `step()` every `interval_ms` (60) milliseconds. The
class has no timer of its own.

## Example

```python
import subprocess

from kynetctl.interfaces import read_device_stats
from kynetctl.parsing import parse_wifi_list

output = subprocess.run(
    ["nmcli", "device", "wifi"], capture_output=True, text=True, check=True
).stdout
for net in parse_wifi_list(output):
    print(net.ssid, net.signal, net.security)

rx, tx = read_device_stats("eth0").bytes()
```

## What it does not do

- It does not run `nmcli`. You have to run `nmcli` yourself and pass its
  output to the parsers.
- It cannot change NetworkManager state. It does not create, delete or modify
  connections. It does not bring connections up or down, and it cannot
  switch networking or Wi-Fi on or off.
- It has no command-line program and no graphical interface.
  `LoadingAnimation` only works out which frame comes next. It does not draw
  anything.

## Running the tests

```
pip install .[test]
pytest
```