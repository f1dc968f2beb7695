import pytest

from aurionkit.calculator import Calculator, format_number, parse_display


def press_all(calc, buttons):
    for b in buttons:
        calc.press(b)


def test_initial_display():
    calc = Calculator()
    assert calc.display == "0"
    assert calc.new_input


def test_digits_append():
    calc = Calculator()
    press_all(calc, "123")
    assert calc.display == "123"


def test_addition():
    calc = Calculator()
    press_all(calc, "12+3=")
    assert calc.display == "15"
    assert calc.value == parse_display("12") + parse_display("3")
    assert calc.op is None


def test_result_matches_formatter():
    calc = Calculator()
    press_all(calc, "7/2=")
    assert calc.display == format_number(7 / 2)


def test_division_by_zero():
    calc = Calculator()
    press_all(calc, "5/0=")
    assert calc.display == "Err"
    assert calc.op is None
    assert calc.new_input


def test_equals_without_operator_is_noop():
    calc = Calculator()
    press_all(calc, "42=")
    assert calc.display == "42"


def test_single_decimal_point():
    calc = Calculator()
    press_all(calc, "1..5")
    assert calc.display == "1.5"


def test_decimal_ignored_on_fresh_input():
    calc = Calculator()
    calc.press(".")
    assert calc.display == "0"


def test_display_length_cap():
    calc = Calculator()
    press_all(calc, "1" * 40)
    assert len(calc.display) == 30


def test_clear_resets():
    calc = Calculator()
    press_all(calc, "9*")
    calc.press("C")
    assert calc.display == "0"
    assert calc.op is None
    assert calc.stored == 0.0


def test_unknown_button():
    with pytest.raises(ValueError):
        Calculator().press("x")


@pytest.mark.parametrize("value,text", [(42.0, "42"), (2.5, "2.5"), (-3.0, "-3"), (0.0, "0")])
def test_format_number(value, text):
    assert format_number(value) == text


def test_format_number_overflow():
    assert format_number(1e10) == "Err"
    assert format_number(-1e10) == "Err"


def test_format_number_tiny_fraction_dropped():
    assert format_number(0.000001) == "0"


@pytest.mark.parametrize("value", [1.25, 100.0, -7.5, 0.5])
def test_round_trip(value):
    assert parse_display(format_number(value)) == value


def test_parse_display():
    assert parse_display("-12.5") == -12.5
    assert parse_display("Err") == 0.0


def test_mouse_click_presses_button_once():
    calc = Calculator()
    assert calc.handle_mouse(12, 62, True) == "7"
    assert calc.handle_mouse(12, 62, True) is None
    assert calc.display == "7"
    calc.handle_mouse(12, 62, False)
    calc.handle_mouse(12, 62, True)
    assert calc.display == "77"


def test_mouse_clear_button():
    calc = Calculator()
    calc.handle_mouse(12, 62, True)
    calc.handle_mouse(0, 0, False)
    assert calc.handle_mouse(20, 270, True) == "C"
    assert calc.display == "0"


def test_mouse_outside_buttons():
    calc = Calculator()
    assert calc.handle_mouse(0, 0, True) is None
    assert calc.display == "0"