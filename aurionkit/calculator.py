"""Four-function calculator driven by button presses."""

from __future__ import annotations

from typing import Optional

BUTTONS = "789/456*123-0.=+"
OPERATORS = "+-*/"
CLEAR = "C"
DISPLAY_MAX = 30
ERROR_TEXT = "Err"
LIMIT = 999999999.0

GRID_LEFT = 10
GRID_TOP = 60
GRID_STEP = 50
BUTTON_SIZE = 45
CLEAR_RECT = (10, 260, 95, 45)


def format_number(value: float) -> str:
    """Render a value with up to four decimals, trailing zeros stripped.

    Magnitudes above 999999999 render as "Err".
    """
    negative = value < 0
    if negative:
        value = -value
    if value > LIMIT:
        return ERROR_TEXT
    int_part = int(value)
    frac = value - float(int_part)
    out = ("-" if negative else "") + str(int_part)
    if frac > 0.00001:
        digits = []
        for _ in range(4):
            frac *= 10.0
            digit = int(frac)
            digits.append(str(digit))
            frac -= digit
        out += "." + "".join(digits)
        out = out.rstrip("0") if len(out) > 1 else out
        if out.endswith("."):
            out = out[:-1]
    return out


def parse_display(text: str) -> float:
    """Read a display string; characters other than digits and '.' are skipped."""
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    whole = 0.0
    frac = 0.0
    frac_div = 10.0
    in_frac = False
    for ch in text:
        if ch == ".":
            in_frac = True
        elif "0" <= ch <= "9":
            digit = ord(ch) - ord("0")
            if in_frac:
                frac += digit / frac_div
                frac_div *= 10.0
            else:
                whole = whole * 10.0 + digit
    whole += frac
    return -whole if negative else whole


class Calculator:
    """Display, pending operator and stored operand of a calculator."""

    def __init__(self) -> None:
        self.display = "0"
        self.value = 0.0
        self.stored = 0.0
        self.op: Optional[str] = None
        self.new_input = True
        self._prev_left = False

    def _clear(self) -> None:
        self.display = "0"
        self.value = 0.0
        self.stored = 0.0
        self.op = None
        self.new_input = True

    def _evaluate(self) -> None:
        if self.op is None:
            return
        rhs = parse_display(self.display)
        if self.op == "+":
            result = self.stored + rhs
        elif self.op == "-":
            result = self.stored - rhs
        elif self.op == "*":
            result = self.stored * rhs
        else:
            if rhs == 0.0:
                self.display = ERROR_TEXT
                self.op = None
                self.new_input = True
                return
            result = self.stored / rhs
        self.value = result
        self.display = format_number(result)
        self.op = None
        self.new_input = True

    def press(self, button: str) -> None:
        """Apply one button: a digit, '.', '=', an operator or 'C'."""
        if button.isdigit() and len(button) == 1:
            if self.new_input:
                self.display = button
                self.new_input = False
            elif len(self.display) < DISPLAY_MAX:
                self.display += button
        elif button == ".":
            if "." not in self.display and not self.new_input:
                if len(self.display) < DISPLAY_MAX:
                    self.display += "."
        elif button == "=":
            self._evaluate()
        elif button in OPERATORS and len(button) == 1:
            self.stored = parse_display(self.display)
            self.op = button
            self.new_input = True
        elif button == CLEAR:
            self._clear()
        else:
            raise ValueError(f"unknown calculator button {button!r}")

    def handle_mouse(self, lx: int, ly: int, left: bool) -> Optional[str]:
        """Process a mouse sample; returns the button pressed, if any."""
        is_click = left and not self._prev_left
        self._prev_left = left
        if not is_click:
            return None
        for i, button in enumerate(BUTTONS):
            bx = GRID_LEFT + (i % 4) * GRID_STEP
            by = GRID_TOP + (i // 4) * GRID_STEP
            if bx <= lx < bx + BUTTON_SIZE and by <= ly < by + BUTTON_SIZE:
                self.press(button)
                return button
        cx, cy, cw, ch = CLEAR_RECT
        if cx <= lx < cx + cw and cy <= ly < cy + ch:
            self.press(CLEAR)
            return CLEAR
        return None