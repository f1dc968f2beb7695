# aurionkit

Pure-Python building blocks modelled on a small hobby operating system's
desktop. Every piece is plain, deterministic Python with no dependencies,
so it can be used in tools, simulations and tests without real hardware.

## What is inside

### Input and networking

- `aurionkit.mouse`: `Mouse` assembles 3-byte PS/2 packets into a cursor
  position and left/right button state. Call `reset(width, height)` to
  enable it and centre the cursor, then `feed(byte)` or
  `feed_bytes(data)`; the cursor is clamped to the bounds, which
  `set_bounds(width, height)` changes.
- `aurionkit.netif`: `NetworkInterface` holds a device's driver hooks
  (`send_packet`, `recv_packet`), its IP configuration and TX/RX counters.
  `send`, `receive`, `set_ip` and `set_link` operate on it; failures raise
  `NetifError`. `InterfaceRegistry` holds up to four interfaces, the first
  registered being the default, and `poll(handler)` passes one received
  frame from the default interface to `handler`.
- `aurionkit.dhcp`: `DhcpClient.build_discover(mac)` builds a broadcast
  Ethernet/IP/UDP frame carrying a DHCPDISCOVER; `discover(iface)` sends
  it; `process(iface, packet)` accepts an OFFER for the client's
  transaction and configures the interface (netmask 255.255.255.0 and DNS
  8.8.8.8 when the offer gives none). `ip_checksum(header)` computes the
  IP header checksum. Bad input raises `DhcpError`. No REQUEST is sent:
  the offered address is taken as is.
- `aurionkit.firmware`: the two built-in WiFi firmware blobs
  (`FirmwareId`, `FirmwareBlob`), looked up with `get(fw_id)`;
  `load_to_device(fw_id, device)` only selects the blob and does not
  write to the device. Unknown ids raise `FirmwareError`.

### Desktop applications

Each application is a state machine that takes input events (keys,
mouse samples in client coordinates, ticks):

- `notepad.Notepad`: text editing, Save/Discard against a mapping of
  paths to contents, a Save-As dialog and a Copy/Paste/Select All context
  menu sharing a `Clipboard`.
- `calculator.Calculator`: a four-function calculator (`press`,
  `handle_mouse`), with `format_number` and `parse_display`.
- `paint.Paint`: a 36x28 canvas with a 16-colour palette, brush sizes 1-3
  and `clear`.
- `snake.Snake`: the snake game on a 20x20 grid (`handle_key`, `tick`,
  `reset`, `rand`).
- `filebrowser.FileBrowser`: lists the direct children of a directory in a
  flat table of `FileEntry` paths and navigates it (`scan`, `go_up`,
  `open_entry`, `handle_key`, `handle_click` with double-click detection).
- `infoapps`: the text of the Clock and System Info windows
  (`format_time`, `format_date`, `sysinfo_lines`).

## Example

```python
from aurionkit.calculator import Calculator
from aurionkit.dhcp import DhcpClient
from aurionkit.netif import NetworkInterface

calc = Calculator()
for button in "12+30=":
    calc.press(button)
print(calc.display)  # 42

sent = []
iface = NetworkInterface(
    name="eth0",
    mac_addr=bytes.fromhex("020000000001"),
    send_packet=lambda iface, data: sent.append(data) or 0,
)
DhcpClient().discover(iface)
print(len(sent[0]), iface.tx_packets)  # 594 1
```

## What it does not do

The package holds state and logic only. It draws nothing: there is no
framebuffer, font or image decoding, and the applications expose their
state rather than rendering windows. It talks to no hardware and opens no
sockets; network interfaces send and receive through the functions you
give them. Files live in whatever mapping or table you pass in.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```