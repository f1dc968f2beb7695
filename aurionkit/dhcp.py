"""Minimal DHCP client: builds DISCOVER frames and accepts OFFERs."""

from __future__ import annotations

import struct
from typing import Optional

from aurionkit.netif import NetworkInterface

DHCP_DISCOVER = 1
DHCP_OFFER = 2
DHCP_REQUEST = 3
DHCP_ACK = 5

OPT_PAD = 0
OPT_SUBNET = 1
OPT_ROUTER = 3
OPT_DNS = 6
OPT_REQ_IP = 50
OPT_MSG_TYPE = 53
OPT_SERVER_ID = 54
OPT_END = 255

DHCP_MAGIC = 0x63825363
CLIENT_PORT = 68
SERVER_PORT = 67
IP_PROTO_UDP = 17

ETH_HEADER_LEN = 14
IP_HEADER_LEN = 20
UDP_HEADER_LEN = 8
OPTIONS_OFFSET = 240
OPTIONS_LEN = 312
DHCP_PACKET_LEN = OPTIONS_OFFSET + OPTIONS_LEN
DHCP_MIN_SIZE = 240

DEFAULT_XID = 0x12345678
DEFAULT_NETMASK = 0x00FFFFFF
DEFAULT_DNS = 0x08080808


class DhcpError(Exception):
    """Raised for invalid DHCP input."""


def ip_checksum(header: bytes) -> int:
    """The one's-complement checksum of an IP header, as a 16-bit integer."""
    data = bytes(header)
    if len(data) % 2:
        data += b"\x00"
    total = sum(word for (word,) in struct.iter_unpack(">H", data))
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF


def _be32(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 4].ljust(4, b"\x00"), "big")


class DhcpClient:
    """Client state: the transaction id and what the server last offered.

    Addresses are kept in host order, i.e. the integer whose big-endian
    bytes are the dotted-quad address.
    """

    def __init__(self, xid: int = DEFAULT_XID) -> None:
        self.xid = xid
        self.offered_ip = 0
        self.server_ip = 0

    def build_discover(self, mac: bytes) -> bytes:
        """A broadcast Ethernet/IP/UDP frame carrying a DHCPDISCOVER."""
        mac = bytes(mac)
        if len(mac) != 6:
            raise DhcpError("a MAC address is six bytes")

        dhcp = bytearray(DHCP_PACKET_LEN)
        dhcp[0] = 1  # BOOTREQUEST
        dhcp[1] = 1  # Ethernet
        dhcp[2] = 6
        # The transaction id goes out in host (little-endian) order and is
        # compared the same way on reply.
        struct.pack_into("<I", dhcp, 4, self.xid & 0xFFFFFFFF)
        struct.pack_into(">H", dhcp, 10, 0x8000)  # broadcast flag
        dhcp[28:34] = mac
        struct.pack_into(">I", dhcp, 236, DHCP_MAGIC)
        dhcp[OPTIONS_OFFSET:OPTIONS_OFFSET + 4] = bytes(
            (OPT_MSG_TYPE, 1, DHCP_DISCOVER, OPT_END)
        )

        udp_len = UDP_HEADER_LEN + len(dhcp)
        udp = struct.pack(">HHHH", CLIENT_PORT, SERVER_PORT, udp_len, 0)

        ip = bytearray(
            struct.pack(
                ">BBHHHBBHII",
                0x45,
                0,
                IP_HEADER_LEN + udp_len,
                0x1234,
                0,
                64,
                IP_PROTO_UDP,
                0,
                0,
                0xFFFFFFFF,
            )
        )
        struct.pack_into(">H", ip, 10, ip_checksum(ip))

        eth = b"\xff" * 6 + mac + b"\x08\x00"
        return eth + bytes(ip) + udp + bytes(dhcp)

    def discover(self, iface: Optional[NetworkInterface]) -> int:
        """Broadcast a DISCOVER through ``iface``; returns the driver's result."""
        if iface is None:
            raise DhcpError("no interface given")
        return iface.send(self.build_discover(iface.mac_addr))

    def process(self, iface: Optional[NetworkInterface], packet: bytes) -> bool:
        """Handle a DHCP payload; True when an OFFER configured the interface.

        Replies for another transaction, and messages other than OFFER,
        are ignored and return False.
        """
        if iface is None:
            raise DhcpError("no interface given")
        if packet is None or len(packet) < DHCP_MIN_SIZE:
            raise DhcpError(f"DHCP packet shorter than {DHCP_MIN_SIZE} bytes")
        packet = bytes(packet)

        (xid,) = struct.unpack_from("<I", packet, 4)
        if xid != self.xid:
            return False

        msg_type = 0
        subnet = router = dns = 0
        opts = packet[OPTIONS_OFFSET:OPTIONS_OFFSET + OPTIONS_LEN]
        i = 0
        while i < len(opts) and opts[i] != OPT_END:
            opt = opts[i]
            i += 1
            if opt == OPT_PAD:
                continue
            if i >= len(opts):
                break
            opt_len = opts[i]
            i += 1
            if opt == OPT_MSG_TYPE:
                msg_type = opts[i] if i < len(opts) else 0
            elif opt == OPT_SERVER_ID:
                self.server_ip = _be32(opts, i)
            elif opt == OPT_SUBNET:
                subnet = _be32(opts, i)
            elif opt == OPT_ROUTER:
                router = _be32(opts, i)
            elif opt == OPT_DNS:
                dns = _be32(opts, i)
            i += opt_len

        if msg_type != DHCP_OFFER:
            return False

        self.offered_ip = _be32(packet, 16)
        iface.set_ip(
            self.offered_ip,
            subnet or DEFAULT_NETMASK,
            router,
            dns or DEFAULT_DNS,
        )
        return True