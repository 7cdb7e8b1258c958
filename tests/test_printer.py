import pytest

from fogl.dual import Dual
from fogl.printer import (
    Alignment,
    Printer,
    align,
    display_len,
    repeat,
    uni_special,
    uni_strlen,
)
from fogl.quat import Quat


def test_uni_special():
    assert uni_special(0x80)
    assert not uni_special(0x79)


def test_display_len_skips_colour_codes():
    assert display_len("\x1b[38;5;190mA\x1b[0m") == 1


def test_uni_strlen_counts_characters():
    assert uni_strlen("h\u00e9llo") == 5
    assert uni_strlen(b"h\xc3\xa9") == 2


def test_repeat():
    assert repeat(3, "x") == "xxx"
    assert repeat(0) == ""
    assert repeat(-2, "_") == ""


@pytest.mark.parametrize(
    "value, direction, precision, expected",
    [
        ("Left-aligned", Alignment.LEFT, 3, "Left-aligned_____________"),
        ("Centered", Alignment.CENTER, 3, "________Centered_________"),
        (1.234567901234, Alignment.CENTER, 3, "__________1.235__________"),
        (1.234567901234, Alignment.CENTER, 8, "_______1.23456790________"),
        ("Right-aligned", Alignment.RIGHT, 3, "____________Right-aligned"),
    ],
)
def test_align_cases(value, direction, precision, expected):
    result = align(value, 25, direction, "_", precision)
    assert result == expected
    assert len(result) == 25


def test_align_truncates():
    assert align("abcdef", 3) == "abc"


def test_align_dual():
    assert align(Dual(Quat(0, 1)), 14, Alignment.CENTER) == " " * 6 + "i" + " " * 7


def test_transpose_table():
    printer = Printer(4)
    printer.push_table([1.0, 2.0, 0.0, 0.0], 2, 2, ["", ""])
    assert printer.lines == [
        ".--------.--------.",
        "| 1.000  | 2.000  |",
        "| 0.000  | 0.000  |",
        "'--------'--------'",
    ]
    assert str(printer).count("\r\n") == 4


def _system_printer():
    printer = Printer(4)
    printer.push_labels(["Title", "Row title", "Row title", ""]).level()
    printer.push_table(
        range(8), 2, 4, ["Col 1", "Col 2", "Col 3", "Col 4"]
    ).level()
    return printer


def test_labelled_table():
    printer = _system_printer()
    assert printer.lines[0] == "  Title  .-Col 1--.-Col 2--.-Col 3--.-Col 4--."
    assert printer.lines[1] == "Row title|   0    |   1    |   2    |   3    |"
    assert printer.lines[2] == "Row title|   4    |   5    |   6    |   7    |"
    assert printer.lines[3] == "         '--------'--------'--------'--------'"


def test_insert_printer_and_level():
    small = _system_printer()
    wide = Printer(6)
    wide.insert_printer(2, small).level()
    assert wide.lines[2:] == small.lines
    assert wide.lines[0] == " " * len(small.lines[0])
    low, high = wide.min_max()
    assert low == high == len(small.lines[0])


def test_table_taller_than_canvas_is_ignored():
    printer = Printer(2)
    printer.push_table(range(8), 4, 2, [])
    assert printer.lines == ["", ""]


def test_push_chars_stops_when_exhausted():
    printer = Printer(3)
    printer.push_chars("ab")
    assert printer.lines == ["a", "b", ""]
    assert printer.min_max() == (0, 1)


def test_insert_outside_rows_is_ignored():
    printer = Printer(2)
    printer.insert(5, "x").insert(-1, "y").insert(1, "z")
    assert printer.lines == ["", "z"]


def test_clear():
    printer = _system_printer().clear()
    assert printer.lines == ["", "", "", ""]
    assert str(printer) == "\r\n" * 4


def test_negative_height_rejected():
    with pytest.raises(ValueError):
        Printer(-1)