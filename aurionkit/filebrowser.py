"""File browser state: lists one directory of a flat path table and navigates it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

MAX_ENTRIES = 40
NAME_MAX = 32
PATH_MAX = 128
SEPARATOR = "\\"
ROOT_LEN = 3  # "C:\"

ROW_H = 18
LIST_TOP = 40
DOUBLE_CLICK_TICKS = 40

SCAN_UP = 0x48
SCAN_DOWN = 0x50
KEY_ENTER = 13
KEY_BACKSPACE = 8


@dataclass(frozen=True)
class FileEntry:
    """A filesystem entry: a full path in the table, a bare name in a listing."""

    name: str
    size: int = 0
    is_dir: bool = False


class FileBrowser:
    """Directory view over ``table``, a live sequence of entries with full paths.

    ``opener`` is called with the full path of a file that is opened.
    """

    def __init__(
        self,
        table: Sequence[FileEntry],
        path: str,
        opener: Optional[Callable[[str], object]] = None,
    ) -> None:
        self.table = table
        self.opener = opener
        path = path[: PATH_MAX - 1]
        if path and not path.endswith(SEPARATOR):
            path += SEPARATOR
        self.path = path
        self.entries: list[FileEntry] = []
        self.scroll = 0
        self.selected = 0
        self._prev_left = False
        self._last_click_tick = 0
        self._last_click_idx = -1
        self.scan()

    @property
    def has_up(self) -> bool:
        """True when the view is below the root and shows a "[..]" row."""
        return len(self.path) > ROOT_LEN

    def scan(self) -> None:
        """Rebuild the listing from the direct children of the current path."""
        self.entries = []
        self.scroll = 0
        self.selected = 0
        for item in self.table:
            if len(self.entries) >= MAX_ENTRIES:
                break
            if not item.name.startswith(self.path):
                continue
            rest = item.name[len(self.path):]
            if not rest or SEPARATOR in rest:
                continue
            self.entries.append(
                FileEntry(rest[: NAME_MAX - 1], item.size, item.is_dir)
            )

    def go_up(self) -> bool:
        """Move to the parent directory; False when already at the root."""
        if not self.has_up:
            return False
        i = len(self.path) - 2
        while i > 2 and self.path[i] != SEPARATOR:
            i -= 1
        self.path = self.path[: i + 1]
        self.scan()
        return True

    def open_entry(self, idx: int) -> Optional[str]:
        """Enter a directory, or open a file and return its full path."""
        if not 0 <= idx < len(self.entries):
            return None
        entry = self.entries[idx]
        if entry.is_dir:
            if len(self.path) + len(entry.name) + 2 < PATH_MAX:
                self.path += entry.name + SEPARATOR
            self.scan()
            return None
        full_path = (self.path + entry.name)[: PATH_MAX - 1]
        if self.opener is not None:
            self.opener(full_path)
        return full_path

    def handle_key(self, key: int) -> Optional[str]:
        """Arrows move the selection, Enter opens, Backspace goes up.

        Returns the path of a file opened by Enter.
        """
        scan = (key >> 8) & 0xFF
        ascii_code = key & 0xFF
        if scan == SCAN_UP and self.selected > 0:
            self.selected -= 1
        if scan == SCAN_DOWN and self.selected < len(self.entries) - 1:
            self.selected += 1
        opened = None
        if ascii_code == KEY_ENTER:
            opened = self.open_entry(self.selected)
        if ascii_code == KEY_BACKSPACE:
            self.go_up()
        return opened

    def handle_click(self, ly: int, left: bool, now: int) -> Optional[str]:
        """Process a left-button sample at client row ``ly`` and tick ``now``.

        A click selects a row; a second click on it within 40 ticks opens it.
        Returns the path of a file so opened.
        """
        is_click = left and not self._prev_left
        self._prev_left = left
        if not is_click:
            return None

        start_y = LIST_TOP
        if self.has_up:
            if LIST_TOP <= ly < LIST_TOP + ROW_H:
                self.go_up()
                self._last_click_idx = -1
                return None
            start_y += ROW_H

        if ly < start_y:
            return None
        idx = self.scroll + (ly - start_y) // ROW_H
        if not 0 <= idx < len(self.entries):
            return None

        elapsed = (now - self._last_click_tick) & 0xFFFFFFFF
        is_double = idx == self._last_click_idx and elapsed < DOUBLE_CLICK_TICKS
        self.selected = idx
        if is_double:
            self._last_click_idx = -1
            return self.open_entry(idx)
        self._last_click_tick = now
        self._last_click_idx = idx
        return None