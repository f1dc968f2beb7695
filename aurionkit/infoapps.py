"""Text shown by the Clock and System Info windows."""

from __future__ import annotations

CLOCK_HOUR_OFFSET = 1
LINE_MAX = 63
MB = 1024 * 1024

TITLE = "Aurion OS v1.0 Beta"
SUBTITLE = "32-bit x86 Operating System"


def format_time(hour: int, minute: int, second: int) -> str:
    """The clock's "HH:MM:SS" text; the hour read is shown one hour ahead."""
    hour = (hour + CLOCK_HOUR_OFFSET) % 24
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def format_date(day: int, month: int, year: int) -> str:
    """The clock's "YYYY-MM-DD" text."""
    return f"{year:04d}-{month:02d}-{day:02d}"


def sysinfo_lines(free_bytes: int, used_bytes: int, width: int, height: int) -> list[str]:
    """The lines of the System Info window, top to bottom."""
    lines = [
        TITLE,
        SUBTITLE,
        f"Free: {free_bytes} bytes ({free_bytes // MB} MB)",
        f"Used: {used_bytes} bytes ({used_bytes // MB} MB)",
        f"Resolution: {width}x{height}",
    ]
    return [line[:LINE_MAX] for line in lines]