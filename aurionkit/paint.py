"""Pixel-art paint program: a palette, three brush sizes and a clearable canvas."""

from __future__ import annotations

CANVAS_W = 36
CANVAS_H = 28
PIXEL_SIZE = 12
CANVAS_LEFT = 10
CANVAS_TOP = 38

WHITE = 0xFFFFFFFF
BLACK = 0xFF000000

PALETTE = (
    0xFF000000, 0xFFFFFFFF, 0xFFFF0000, 0xFF00CC00,
    0xFF0000FF, 0xFFFFFF00, 0xFFFF00FF, 0xFF00FFFF,
    0xFF808080, 0xFFC0C0C0, 0xFF800000, 0xFF008000,
    0xFF000080, 0xFF808000, 0xFF800080, 0xFFFF8800,
)

PALETTE_LEFT = 10
PALETTE_STEP = 26
SWATCH_SIZE = 24
PALETTE_ROW = (4, 32)

BRUSH_SIZES = (1, 2, 3)
BRUSH_OFFSET = 44
BRUSH_STEP = 16
BRUSH_BUTTON = 14
BRUSH_ROW = (6, 20)

CLEAR_ROW = (24, 36)


class Paint:
    """Canvas state of one paint window; ``canvas[y][x]`` holds ARGB colours."""

    def __init__(self) -> None:
        self.canvas: list[list[int]] = []
        self.current_color = BLACK
        self.brush_size = 1
        self.clear()

    def clear(self) -> None:
        """Paint the whole canvas white."""
        self.canvas = [[WHITE] * CANVAS_W for _ in range(CANVAS_H)]

    def _pick_palette(self, lx: int) -> bool:
        for i, color in enumerate(PALETTE):
            px = PALETTE_LEFT + i * PALETTE_STEP
            if px <= lx < px + SWATCH_SIZE:
                self.current_color = color
                return True
        return False

    def _pick_brush(self, lx: int, ly: int, client_w: int) -> bool:
        base = client_w - 90 + BRUSH_OFFSET
        for size in BRUSH_SIZES:
            bx = base + (size - 1) * BRUSH_STEP
            if bx <= lx < bx + BRUSH_BUTTON and BRUSH_ROW[0] <= ly < BRUSH_ROW[1]:
                self.brush_size = size
                return True
        return False

    def _stamp(self, cx: int, cy: int) -> None:
        size = max(self.brush_size, 1)
        for by in range(cy, cy + size):
            for bx in range(cx, cx + size):
                if 0 <= bx < CANVAS_W and 0 <= by < CANVAS_H:
                    self.canvas[by][bx] = self.current_color

    def handle_mouse(self, lx: int, ly: int, left: bool, client_w: int) -> None:
        """Process a mouse sample in client coordinates; only a held left button acts."""
        if not left:
            return

        if PALETTE_ROW[0] <= ly < PALETTE_ROW[1]:
            if self._pick_palette(lx) or self._pick_brush(lx, ly, client_w):
                return

        if client_w - 90 <= lx < client_w - 50 and CLEAR_ROW[0] <= ly < CLEAR_ROW[1]:
            self.clear()
            return

        if lx >= CANVAS_LEFT and ly >= CANVAS_TOP:
            cx = (lx - CANVAS_LEFT) // PIXEL_SIZE
            cy = (ly - CANVAS_TOP) // PIXEL_SIZE
            self._stamp(cx, cy)