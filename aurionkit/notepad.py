"""Notepad editor state: text editing, Save/Discard, Save-As and a context menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, MutableMapping, Optional

MAX_CHARS = 2048
MAX_TEXT = MAX_CHARS - 1
TOOLBAR_H = 34
LINE_H = 16
CHAR_W = 8
TEXT_LEFT = 8
TEXT_TOP = TOOLBAR_H + 6
FILENAME_MAX = 64
SAVEAS_MAX = 63
CLIPBOARD_MAX = 511

KEY_BACKSPACE = 8
KEY_ENTER = 13
KEY_NEWLINE = 10
KEY_ESC = 27
SCAN_BACKSPACE = 0x0E

SAVE_BUTTON = (8, 78)
DISCARD_BUTTON = (86, 166)
BUTTON_TOP, BUTTON_BOTTOM = 6, 28

MENU_W = 140
MENU_ROW_H = 24
MENU_PAD = 3
MENU_ITEMS = ("Copy", "Paste", "Select All")
MENU_H = len(MENU_ITEMS) * MENU_ROW_H + MENU_PAD * 2

DIALOG_W = 380
DIALOG_H = 130

Storage = MutableMapping[str, str]


def _centre(outer: int, inner: int) -> int:
    return int((outer - inner) / 2)


@dataclass
class Clipboard:
    """Text shared between applications."""

    text: str = ""


class Notepad:
    """Editing state of one notepad window.

    ``storage`` maps full paths to file contents; ``clipboard`` is shared
    with other applications.
    """

    def __init__(
        self,
        storage: Optional[Storage] = None,
        clipboard: Optional[Clipboard] = None,
    ) -> None:
        self.storage: Storage = storage if storage is not None else {}
        self.clipboard = clipboard if clipboard is not None else Clipboard()
        self.text = ""
        self.cursor_pos = 0
        self.filename = ""
        self.modified = False
        self.save_hover = False
        self.discard_hover = False
        self.saveas_open = False
        self.saveas_input = ""
        self.ctx_open = False
        self.ctx_x = 0
        self.ctx_y = 0
        self.ctx_hover = -1
        self.sel_start = -1
        self.sel_end = -1
        self._prev_left = False
        self._prev_right = False

    @classmethod
    def open(
        cls,
        storage: Optional[Storage] = None,
        clipboard: Optional[Clipboard] = None,
        filepath: Optional[str] = None,
    ) -> "Notepad":
        """Create a notepad, loading ``filepath`` from storage when given."""
        pad = cls(storage, clipboard)
        if filepath:
            pad.filename = filepath[: FILENAME_MAX - 1]
            pad._load()
        return pad

    @property
    def text_len(self) -> int:
        return len(self.text)

    def _load(self) -> None:
        content = self.storage.get(self.filename) or ""
        self.text = content[:MAX_TEXT]
        self.cursor_pos = len(self.text)
        self.modified = False

    def save(self) -> bool:
        """Write the text to its file; an untitled document opens Save-As instead.

        Returns True when the text was written.
        """
        if not self.filename:
            self.saveas_open = True
            self.saveas_input = ""
            return False
        self.storage[self.filename] = self.text
        self.modified = False
        return True

    def discard(self) -> None:
        """Drop the changes: reload from storage, or clear an untitled document."""
        if not self.filename:
            self.text = ""
            self.cursor_pos = 0
            self.modified = False
            return
        self._load()

    def _saveas_commit(self) -> None:
        if not self.saveas_input:
            return
        self.filename = self.saveas_input[: FILENAME_MAX - 1]
        self.saveas_open = False
        self.storage[self.filename] = self.text
        self.modified = False

    def _insert(self, chars: str) -> None:
        room = MAX_TEXT - len(self.text)
        chars = chars[: max(room, 0)]
        self.text = self.text[: self.cursor_pos] + chars + self.text[self.cursor_pos:]
        self.cursor_pos += len(chars)

    def _cells(self, max_x: int) -> Iterator[tuple[int, int]]:
        """Top-left corner of each caret position, from 0 to the end of the text."""
        px, py = TEXT_LEFT, TEXT_TOP
        yield px, py
        for c in self.text:
            if c == "\n":
                px, py = TEXT_LEFT, py + LINE_H
            else:
                if px + CHAR_W > max_x:
                    px, py = TEXT_LEFT, py + LINE_H
                px += CHAR_W
            yield px, py

    def pos_from_pixel(self, lx: int, ly: int, max_x: int) -> int:
        """Character index under a client-area point; the text end when past it."""
        for i, (px, py) in enumerate(self._cells(max_x)):
            if py <= ly < py + LINE_H and px <= lx < px + CHAR_W:
                return i
        return len(self.text)

    def handle_key(self, key: int) -> None:
        """Apply a key: low byte is the ASCII code, high byte the scan code."""
        ascii_code = key & 0xFF
        scan = (key >> 8) & 0xFF
        is_backspace = ascii_code == KEY_BACKSPACE or scan == SCAN_BACKSPACE

        if self.saveas_open:
            if ascii_code == KEY_ESC:
                self.saveas_open = False
            elif ascii_code == KEY_ENTER:
                self._saveas_commit()
            elif is_backspace and self.saveas_input:
                self.saveas_input = self.saveas_input[:-1]
            elif 32 <= ascii_code < 127 and len(self.saveas_input) < SAVEAS_MAX:
                self.saveas_input += chr(ascii_code)
            return

        if is_backspace:
            if self.cursor_pos > 0:
                self.text = self.text[: self.cursor_pos - 1] + self.text[self.cursor_pos:]
                self.cursor_pos -= 1
                self.modified = True
            return

        if ascii_code in (KEY_ENTER, KEY_NEWLINE):
            if len(self.text) < MAX_TEXT:
                self._insert("\n")
                self.modified = True
            return

        if 32 <= ascii_code < 127 and len(self.text) < MAX_TEXT:
            self._insert(chr(ascii_code))
            self.modified = True

    def _context_action(self) -> None:
        if self.ctx_hover == 0:
            start = self.sel_start if self.sel_start >= 0 else 0
            has_sel = self.sel_start >= 0 and self.sel_end > self.sel_start
            end = self.sel_end if has_sel else len(self.text)
            count = min(max(end - start, 0), CLIPBOARD_MAX)
            self.clipboard.text = self.text[start:start + count]
        elif self.ctx_hover == 1:
            self._insert(self.clipboard.text)
            self.modified = True
        elif self.ctx_hover == 2:
            self.sel_start = 0
            self.sel_end = len(self.text)

    def handle_mouse(
        self,
        lx: int,
        ly: int,
        left: bool,
        right: bool,
        client_w: int,
        client_h: int,
    ) -> None:
        """Process a mouse sample in client coordinates."""
        is_click = left and not self._prev_left
        is_rclick = right and not self._prev_right
        self._prev_left = left
        self._prev_right = right
        max_x = client_w - CHAR_W

        if self.saveas_open:
            if not is_click:
                return
            dx = _centre(client_w, DIALOG_W)
            dy = _centre(client_h, DIALOG_H)
            in_row = dy + 90 <= ly < dy + 114
            if in_row and dx + DIALOG_W - 170 <= lx < dx + DIALOG_W - 100:
                self._saveas_commit()
            if in_row and dx + DIALOG_W - 90 <= lx < dx + DIALOG_W - 14:
                self.saveas_open = False
            return

        if is_rclick:
            self.ctx_open = True
            self.ctx_x = lx
            self.ctx_y = ly
            self.ctx_hover = -1
            return

        if self.ctx_open:
            self.ctx_hover = -1
            top = self.ctx_y + MENU_PAD
            if (
                self.ctx_x <= lx < self.ctx_x + MENU_W
                and top <= ly < top + len(MENU_ITEMS) * MENU_ROW_H
            ):
                self.ctx_hover = (ly - top) // MENU_ROW_H
            if is_click:
                self._context_action()
                self.ctx_open = False
            return

        in_buttons = BUTTON_TOP <= ly < BUTTON_BOTTOM
        self.save_hover = in_buttons and SAVE_BUTTON[0] <= lx < SAVE_BUTTON[1]
        self.discard_hover = in_buttons and DISCARD_BUTTON[0] <= lx < DISCARD_BUTTON[1]

        if not is_click:
            if left and self.sel_start >= 0:
                self.sel_end = self.pos_from_pixel(lx, ly, max_x)
            return

        if self.save_hover:
            self.save()
            return
        if self.discard_hover:
            self.discard()
            return

        if ly >= TOOLBAR_H:
            pos = self.pos_from_pixel(lx, ly, max_x)
            self.cursor_pos = pos
            self.sel_start = pos
            self.sel_end = pos