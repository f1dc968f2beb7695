"""Network interface abstraction: counters, IP configuration and a registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

MAX_INTERFACES = 4
RX_BUFFER_SIZE = 2048


class NetifError(Exception):
    """Raised when an interface operation fails."""


SendFn = Callable[["NetworkInterface", bytes], int]
RecvFn = Callable[["NetworkInterface", int], bytes]


@dataclass
class NetworkInterface:
    """A network device with its driver hooks, addressing and statistics.

    ``send_packet`` returns a non-negative value on success and a negative
    one on failure. ``recv_packet`` returns the received frame (empty when
    nothing is waiting) and may raise :class:`NetifError`.
    """

    name: str = ""
    mac_addr: bytes = bytes(6)
    link_up: bool = False
    ip_addr: int = 0
    netmask: int = 0
    gateway: int = 0
    dns_server: int = 0
    tx_packets: int = 0
    rx_packets: int = 0
    tx_bytes: int = 0
    rx_bytes: int = 0
    tx_errors: int = 0
    rx_errors: int = 0
    send_packet: Optional[SendFn] = field(default=None, repr=False)
    recv_packet: Optional[RecvFn] = field(default=None, repr=False)

    def send(self, data: bytes) -> int:
        """Send one frame through the driver and update the TX counters."""
        if not data:
            raise NetifError("nothing to send")
        if self.send_packet is None:
            raise NetifError(f"interface {self.name!r} has no send function")
        try:
            result = self.send_packet(self, bytes(data))
        except NetifError:
            self.tx_errors += 1
            raise
        if result < 0:
            self.tx_errors += 1
            raise NetifError(f"driver failed to send ({result})")
        self.tx_packets += 1
        self.tx_bytes += len(data)
        return result

    def receive(self, max_len: int) -> bytes:
        """Fetch one frame of at most ``max_len`` bytes; empty if none is waiting."""
        if max_len <= 0:
            raise NetifError("receive buffer length must be positive")
        if self.recv_packet is None:
            return b""
        try:
            data = self.recv_packet(self, max_len)
        except NetifError:
            self.rx_errors += 1
            raise
        data = bytes(data[:max_len])
        if data:
            self.rx_packets += 1
            self.rx_bytes += len(data)
        return data

    def set_ip(self, ip: int, netmask: int, gateway: int, dns: int) -> None:
        """Store the IP configuration (host byte order)."""
        self.ip_addr = ip
        self.netmask = netmask
        self.gateway = gateway
        self.dns_server = dns

    def set_link(self, up: bool) -> None:
        """Mark the link as up or down."""
        self.link_up = bool(up)


class InterfaceRegistry:
    """Holds up to four interfaces; the first registered is the default."""

    def __init__(self) -> None:
        self._interfaces: list[NetworkInterface] = []

    @property
    def interfaces(self) -> tuple[NetworkInterface, ...]:
        return tuple(self._interfaces)

    @property
    def default(self) -> Optional[NetworkInterface]:
        return self._interfaces[0] if self._interfaces else None

    def __len__(self) -> int:
        return len(self._interfaces)

    def register(self, iface: NetworkInterface) -> NetworkInterface:
        """Add an interface; raises when the registry is full."""
        if iface is None:
            raise NetifError("no interface given")
        if len(self._interfaces) >= MAX_INTERFACES:
            raise NetifError(f"at most {MAX_INTERFACES} interfaces can be registered")
        self._interfaces.append(iface)
        return iface

    def poll(self, handler: Callable[[bytes], object]) -> int:
        """Receive one frame from the default interface and pass it to ``handler``.

        Returns the length of the frame handled, or 0 when nothing arrived.
        """
        iface = self.default
        if iface is None:
            return 0
        data = iface.receive(RX_BUFFER_SIZE)
        if data:
            handler(data)
        return len(data)