import pytest

from aurionkit.filebrowser import MAX_ENTRIES, FileBrowser, FileEntry


def _table():
    return [
        FileEntry("C:\\docs", 0, True),
        FileEntry("C:\\readme.txt", 12, False),
        FileEntry("C:\\docs\\a.txt", 5, False),
        FileEntry("C:\\docs\\deep", 0, True),
        FileEntry("C:\\docs\\deep\\b.txt", 7, False),
        FileEntry("D:\\other.txt", 3, False),
    ]


def test_trailing_separator_added():
    fb = FileBrowser(_table(), "C:")
    assert fb.path.endswith("\\")


def test_scan_lists_direct_children_only():
    fb = FileBrowser(_table(), "C:\\")
    assert [e.name for e in fb.entries] == ["docs", "readme.txt"]
    assert fb.entries[0].is_dir
    assert fb.entries[1].size == 12


def test_open_directory_then_go_up():
    fb = FileBrowser(_table(), "C:\\")
    assert fb.open_entry(0) is None
    assert fb.path == "C:\\docs\\"
    assert [e.name for e in fb.entries] == ["a.txt", "deep"]
    assert fb.go_up()
    assert fb.path == "C:\\"
    assert not fb.go_up()


def test_open_file_calls_opener():
    opened = []
    fb = FileBrowser(_table(), "C:\\docs", opened.append)
    result = fb.open_entry(0)
    assert result == "C:\\docs\\a.txt"
    assert opened == ["C:\\docs\\a.txt"]


def test_open_out_of_range_is_ignored():
    fb = FileBrowser(_table(), "C:\\")
    assert fb.open_entry(5) is None
    assert fb.path == "C:\\"


def test_entry_limit_and_name_truncation():
    table = [FileEntry(f"C:\\f{i}", i) for i in range(MAX_ENTRIES + 5)]
    table.insert(0, FileEntry("C:\\" + "x" * 50))
    fb = FileBrowser(table, "C:\\")
    assert len(fb.entries) == MAX_ENTRIES
    assert fb.entries[0].name == "x" * 31


def test_keys_move_selection_and_enter_opens():
    fb = FileBrowser(_table(), "C:\\")
    fb.handle_key(0x48 << 8)
    assert fb.selected == 0
    fb.handle_key(0x50 << 8)
    assert fb.selected == 1
    fb.handle_key(0x50 << 8)
    assert fb.selected == 1
    assert fb.handle_key(13) == "C:\\readme.txt"


def test_backspace_goes_up():
    fb = FileBrowser(_table(), "C:\\docs\\deep")
    fb.handle_key(8)
    assert fb.path == "C:\\docs\\"


def test_double_click_opens_file():
    opened = []
    fb = FileBrowser(_table(), "C:\\", opened.append)
    assert fb.handle_click(60, True, 100) is None
    assert fb.selected == 1
    fb.handle_click(60, False, 105)
    assert fb.handle_click(60, True, 110) == "C:\\readme.txt"
    assert opened == ["C:\\readme.txt"]


def test_slow_second_click_does_not_open():
    fb = FileBrowser(_table(), "C:\\")
    fb.handle_click(60, True, 100)
    fb.handle_click(60, False, 101)
    assert fb.handle_click(60, True, 200) is None
    assert fb.selected == 1


def test_held_button_is_not_a_new_click():
    fb = FileBrowser(_table(), "C:\\")
    fb.handle_click(40, True, 0)
    fb.handle_click(60, True, 1)
    assert fb.selected == 0


def test_up_row_click_goes_to_parent():
    fb = FileBrowser(_table(), "C:\\docs")
    assert fb.has_up
    fb.handle_click(45, True, 0)
    assert fb.path == "C:\\"


@pytest.mark.parametrize("ly", [10, 400])
def test_clicks_outside_rows_change_nothing(ly):
    fb = FileBrowser(_table(), "C:\\")
    assert fb.handle_click(ly, True, 0) is None
    assert fb.selected == 0