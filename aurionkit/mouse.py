"""PS/2 mouse packet decoder with cursor tracking and clamping."""

from __future__ import annotations

from typing import Iterable

DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 200


def _cdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _signed8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


class Mouse:
    """Assembles 3-byte PS/2 packets into cursor position and button state."""

    def __init__(self, divisor: int = 1) -> None:
        if divisor <= 0:
            raise ValueError("divisor must be positive")
        self.x = 160
        self.y = 100
        self.left = False
        self.right = False
        self.initialized = False
        self.limit_w = DEFAULT_WIDTH
        self.limit_h = DEFAULT_HEIGHT
        self.divisor = divisor
        self._accum_x = 0
        self._accum_y = 0
        self._packet: list[int] = []

    def reset(self, width: int, height: int) -> None:
        """Enable the mouse for a screen of the given size and centre the cursor."""
        if width <= 0:
            width = DEFAULT_WIDTH
        if height <= 0:
            height = DEFAULT_HEIGHT
        self.initialized = True
        self.limit_w = width
        self.limit_h = height
        self.x = width // 2
        self.y = height // 2
        self._accum_x = 0
        self._accum_y = 0

    def feed(self, byte: int) -> bool:
        """Consume one byte from the device; True when it completed a packet."""
        if not self.initialized:
            return False
        byte &= 0xFF
        if not self._packet:
            if byte & 0x08:
                self._packet.append(byte)
            return False
        self._packet.append(byte)
        if len(self._packet) < 3:
            return False
        status, raw_dx, raw_dy = self._packet
        self._packet = []
        self._apply(status, _signed8(raw_dx), _signed8(raw_dy))
        return True

    def feed_bytes(self, data: Iterable[int]) -> int:
        """Consume a stream of bytes; returns the number of completed packets."""
        return sum(1 for b in data if self.feed(b))

    def _apply(self, status: int, dx: int, dy: int) -> None:
        if status & 0x40:
            dx = 0
        if status & 0x80:
            dy = 0
        self.left = bool(status & 0x01)
        self.right = bool(status & 0x02)

        self._accum_x += dx
        self._accum_y += dy
        self.x += _cdiv(self._accum_x, self.divisor)
        self.y -= _cdiv(self._accum_y, self.divisor)
        self._accum_x -= _cdiv(self._accum_x, self.divisor) * self.divisor
        self._accum_y -= _cdiv(self._accum_y, self.divisor) * self.divisor

        self.x = max(0, min(self.x, self.limit_w - 1))
        self.y = max(0, min(self.y, self.limit_h - 1))

    def set_bounds(self, width: int, height: int) -> None:
        """Change the screen limits, pulling the cursor inside them."""
        self.limit_w = width
        self.limit_h = height
        if self.x >= width:
            self.x = width - 1
        if self.y >= height:
            self.y = height - 1