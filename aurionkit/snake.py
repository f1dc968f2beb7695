"""Snake game logic on a 20x20 grid with a linear congruential food placer."""

from __future__ import annotations

from typing import Union

GRID_SIZE = 20
CELL_SIZE = 16
MAX_LENGTH = GRID_SIZE * GRID_SIZE
MOVE_INTERVAL = 8
FOOD_SCORE = 10

KEY_UP = 0x48
KEY_DOWN = 0x50
KEY_LEFT = 0x4B
KEY_RIGHT = 0x4D
KEY_ENTER_SCAN = 0x1C

Key = Union[int, str]
Pos = tuple[int, int]


class Snake:
    """State of one game: body (head first), heading, food, score and RNG seed."""

    def __init__(self, seed: int = 0, now: int = 0) -> None:
        self.seed = seed & 0xFFFFFFFF
        self.body: list[Pos] = []
        self.dx = 1
        self.dy = 0
        self.food: Pos = (0, 0)
        self.score = 0
        self.game_over = False
        self.last_move_ticks = 0
        self._clock = now
        self.reset(now)

    @property
    def length(self) -> int:
        return len(self.body)

    def rand(self) -> int:
        """Next pseudo-random number in 0..32767."""
        self.seed = (self.seed * 1103515245 + 12345) & 0xFFFFFFFF
        return (self.seed // 65536) % 32768

    def _place_food(self) -> None:
        x = self.rand() % GRID_SIZE
        y = self.rand() % GRID_SIZE
        self.food = (x, y)

    def reset(self, now: int) -> None:
        """Start a new game with a three-segment snake heading right."""
        mid = GRID_SIZE // 2
        self.body = [(mid, mid), (mid - 1, mid), (mid - 2, mid)]
        self.dx, self.dy = 1, 0
        self.score = 0
        self.game_over = False
        self.last_move_ticks = now
        self._clock = now
        self._place_food()

    def handle_key(self, key: Key) -> None:
        """Turn with arrows or WASD; R or Enter restarts after game over."""
        code = ord(key) if isinstance(key, str) else key
        if self.game_over:
            if code in (ord("r"), ord("R"), KEY_ENTER_SCAN):
                self.reset(self._clock)
            return
        if code in (KEY_UP, ord("w"), ord("W")) and self.dy != 1:
            self.dx, self.dy = 0, -1
        elif code in (KEY_DOWN, ord("s"), ord("S")) and self.dy != -1:
            self.dx, self.dy = 0, 1
        elif code in (KEY_LEFT, ord("a"), ord("A")) and self.dx != 1:
            self.dx, self.dy = -1, 0
        elif code in (KEY_RIGHT, ord("d"), ord("D")) and self.dx != -1:
            self.dx, self.dy = 1, 0

    def tick(self, now: int) -> bool:
        """Advance the game to time ``now``; True when the snake moved."""
        self._clock = now
        if self.game_over:
            return False
        if ((now - self.last_move_ticks) & 0xFFFFFFFF) <= MOVE_INTERVAL:
            return False
        self.last_move_ticks = now

        hx, hy = self.body[0]
        nxt = (hx + self.dx, hy + self.dy)
        if not (0 <= nxt[0] < GRID_SIZE and 0 <= nxt[1] < GRID_SIZE) or nxt in self.body:
            self.game_over = True
            return False

        eating = nxt == self.food
        self.body.insert(0, nxt)
        if eating and len(self.body) - 1 < MAX_LENGTH - 1:
            pass
        else:
            self.body.pop()
        if eating:
            self.score += FOOD_SCORE
            self._place_food()
        return True