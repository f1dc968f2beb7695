import pytest

from aurionkit.mouse import Mouse


@pytest.fixture
def mouse():
    m = Mouse()
    m.reset(640, 480)
    return m


def test_reset_centres_cursor(mouse):
    assert (mouse.x, mouse.y) == (640 // 2, 480 // 2)
    assert mouse.initialized


def test_reset_with_bad_size_uses_defaults():
    m = Mouse()
    m.reset(0, -5)
    assert (m.limit_w, m.limit_h) == (320, 200)
    assert (m.x, m.y) == (160, 100)


def test_feed_ignored_before_reset():
    m = Mouse()
    assert m.feed_bytes([0x09, 5, 5]) == 0
    assert (m.x, m.y) == (160, 100)
    assert m.left is False


def test_packet_moves_cursor_and_sets_buttons(mouse):
    x0, y0 = mouse.x, mouse.y
    assert mouse.feed(0x09) is False
    assert mouse.feed(5) is False
    assert mouse.feed(3) is True
    assert mouse.x - x0 == 5
    assert y0 - mouse.y == 3
    assert mouse.left is True
    assert mouse.right is False


def test_negative_deltas(mouse):
    x0, y0 = mouse.x, mouse.y
    mouse.feed_bytes([0x0A, 0xFB, 0xFE])
    assert x0 - mouse.x == 5
    assert mouse.y - y0 == 2
    assert mouse.right is True
    assert mouse.left is False


def test_sync_byte_without_bit3_is_dropped(mouse):
    x0 = mouse.x
    assert mouse.feed_bytes([0x01, 0x09, 4, 0]) == 1
    assert mouse.x - x0 == 4


def test_overflow_bits_zero_the_delta(mouse):
    x0, y0 = mouse.x, mouse.y
    mouse.feed_bytes([0x08 | 0x40 | 0x80, 50, 50])
    assert (mouse.x, mouse.y) == (x0, y0)


def test_cursor_clamped_to_screen(mouse):
    for _ in range(20):
        mouse.feed_bytes([0x08, 0x7F, 0x7F])
    assert mouse.x == mouse.limit_w - 1
    assert mouse.y == 0
    for _ in range(20):
        mouse.feed_bytes([0x08, 0x80, 0x80])
    assert mouse.x == 0
    assert mouse.y == mouse.limit_h - 1


def test_feed_bytes_counts_packets(mouse):
    assert mouse.feed_bytes([0x08, 1, 1] * 3) == 3


def test_set_bounds_pulls_cursor_inside(mouse):
    mouse.set_bounds(100, 50)
    assert (mouse.x, mouse.y) == (99, 49)
    assert (mouse.limit_w, mouse.limit_h) == (100, 50)


def test_set_bounds_keeps_cursor_already_inside(mouse):
    x0, y0 = mouse.x, mouse.y
    mouse.set_bounds(1024, 768)
    assert (mouse.x, mouse.y) == (x0, y0)


def test_divisor_accumulates_fractions():
    m = Mouse(divisor=2)
    m.reset(640, 480)
    x0 = m.x
    m.feed_bytes([0x08, 1, 0])
    assert m.x == x0
    m.feed_bytes([0x08, 1, 0])
    assert m.x == x0 + 1


def test_invalid_divisor_rejected():
    with pytest.raises(ValueError):
        Mouse(divisor=0)