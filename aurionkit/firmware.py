"""Built-in WiFi firmware blobs and their lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class FirmwareId(IntEnum):
    INTEL_IWLINUX = 1
    REALTEK_RTL8188 = 2


class FirmwareError(LookupError):
    """Raised when a firmware image is not available."""


@dataclass(frozen=True)
class FirmwareBlob:
    """A firmware image with its identifier and version string."""

    id: FirmwareId
    data: bytes
    version: str

    @property
    def size(self) -> int:
        return len(self.data)


_INTEL_DATA = bytes((
    # Header: format version, vendor/device id, firmware size, reserved
    0x01, 0x00, 0x00, 0x00,
    0x86, 0x80, 0xAD, 0xDE,
    0x00, 0x10, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00,
    # Boot code
    0xE8, 0x00, 0x00, 0x00, 0x00,
    0x58,
    0x83, 0xC0, 0x15,
    0xFF, 0xE0,
    0x90, 0x90, 0x90, 0x90,
    0xCC, 0xCC, 0xCC, 0xCC,
    # Radio initialisation
    0xB0, 0x01,
    0xE6, 0x80,
    0xB0, 0x03,
    0xE6, 0x81,
    0xB8, 0x00, 0xC0, 0x00, 0x00,
    0xBA, 0x00, 0x03, 0x00, 0x00,
    0xEF,
    # Default MAC address and padding
    0x00, 0x11, 0x22, 0x33, 0x44, 0x55,
    0xFF, 0xFF,
    # Calibration table
    0x10, 0x20, 0x30, 0x40, 0x50, 0x60, 0x70, 0x80,
    0x90, 0xA0, 0xB0, 0xC0, 0xD0, 0xE0, 0xF0, 0x00,
    0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x08,
    0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x0E, 0x0F, 0x10,
    # Microcode sequencer data
    0x55, 0xAA, 0x55, 0xAA, 0x00, 0xFF, 0x00, 0xFF,
    0xCA, 0xFE, 0xBA, 0xBE, 0xDE, 0xAD, 0xBE, 0xEF,
    # End marker
    0xFF, 0xFF, 0xFF, 0xFF,
))

_REALTEK_DATA = bytes((
    # Header: "RTL8" "188\0", version 1.2.3.4
    0x52, 0x54, 0x4C, 0x38,
    0x31, 0x38, 0x38, 0x00,
    0x01, 0x02, 0x03, 0x04,
    # PHY configuration
    0x12, 0x34, 0x56, 0x78,
    0x9A, 0xBC, 0xDE, 0xF0,
    # RF gain settings
    0x0F, 0x0F, 0x0F, 0x0F,
    0x0A, 0x0A, 0x0A, 0x0A,
    # End marker
    0x00, 0x00, 0x00, 0x00,
))

_FIRMWARES: dict[int, FirmwareBlob] = {
    blob.id: blob
    for blob in (
        FirmwareBlob(FirmwareId.INTEL_IWLINUX, _INTEL_DATA, "2025.1.1"),
        FirmwareBlob(FirmwareId.REALTEK_RTL8188, _REALTEK_DATA, "1.0.0"),
    )
}


def get(fw_id: int) -> FirmwareBlob:
    """Return the firmware blob with the given id."""
    try:
        return _FIRMWARES[int(fw_id)]
    except (KeyError, ValueError, TypeError):
        raise FirmwareError(f"no firmware with id {fw_id!r}") from None


def load_to_device(fw_id: int, device: Any) -> FirmwareBlob:
    """Select the firmware for a device and return it.

    The loading is simulated: the device is not written to.
    """
    return get(fw_id)