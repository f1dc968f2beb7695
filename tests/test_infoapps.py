from aurionkit.infoapps import format_date, format_time, sysinfo_lines


def test_time_shows_hour_ahead_and_wraps():
    assert format_time(23, 5, 9) == "00:05:09"


def test_time_has_fixed_shape():
    text = format_time(10, 30, 45)
    assert len(text) == 8
    assert text[2] == ":" and text[5] == ":"
    assert text[3:] == "30:45"


def test_date_format():
    assert format_date(7, 3, 2025) == "2025-03-07"


def test_sysinfo_lines_content():
    lines = sysinfo_lines(2 * 1024 * 1024, 512, 1024, 768)
    assert lines[0] == "Aurion OS v1.0 Beta"
    assert lines[1] == "32-bit x86 Operating System"
    assert lines[2] == "Free: 2097152 bytes (2 MB)"
    assert lines[3].startswith("Used: 512 bytes")
    assert lines[4] == "Resolution: 1024x768"


def test_sysinfo_lines_bounded():
    lines = sysinfo_lines(10 ** 40, 10 ** 40, 1, 1)
    assert all(len(line) <= 63 for line in lines)