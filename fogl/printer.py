"""Fixed-height text canvases for aligned labels and boxed tables."""

from __future__ import annotations

from enum import Enum

BORDER_NW = "."
BORDER_N = "-"
BORDER_NE = "."
BORDER_W = "|"
SPACE = " "
BORDER_E = "|"
BORDER_SW = "'"
BORDER_S = "-"
BORDER_SE = "'"
DIVIDER_N = BORDER_NE
DIVIDER_C = "|"
DIVIDER_S = BORDER_SE
PADDING_NW = BORDER_N
PADDING_W = SPACE
PADDING_SW = BORDER_S
PADDING_NE = BORDER_N
PADDING_E = SPACE
PADDING_SE = BORDER_S

_ESCAPE = 0x1B


class Alignment(Enum):
    """Where a value sits inside its padded field."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def _as_bytes(word) -> bytes:
    return word.encode("utf-8") if isinstance(word, str) else bytes(word)


def uni_special(byte):
    """True if the byte value is a UTF-8 continuation byte."""
    return (byte & 0xC0) == 0x80


def uni_strlen(word):
    """Number of characters in a UTF-8 text, given as str or bytes."""
    return sum(1 for byte in _as_bytes(word) if not uni_special(byte))


def display_len(word):
    """Number of visible characters, skipping ESC [ ... m colour sequences."""
    length = 0
    escape = bracket = False
    for byte in _as_bytes(word):
        if uni_special(byte):
            continue
        if bracket:
            if byte == ord("m"):
                bracket = escape = False
        elif escape:
            if byte == ord("["):
                bracket = True
        elif byte == _ESCAPE:
            escape = True
        else:
            length += 1
    return length


def repeat(count, char=" "):
    """The character repeated count times; empty when count is not positive."""
    return char * max(count, 0)


def _format(value, precision) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:.{precision}f}"
    return str(value)


def align(value, width, direction=Alignment.LEFT, filler=SPACE, precision=3):
    """Render value padded with filler to width, or truncated if too long.

    Floats are written in fixed notation with the given precision.
    """
    word = _format(value, precision)
    diff = width - uni_strlen(word)
    if diff < 0:
        return word[:width]
    rhalf = diff // 2
    lhalf = diff - rhalf
    lhs = repeat(lhalf, filler)
    rhs = repeat(rhalf, filler)
    if direction is Alignment.LEFT:
        return word + lhs + rhs
    if direction is Alignment.RIGHT:
        return rhs + lhs + word
    return rhs + word + lhs


class Printer:
    """A canvas of a fixed number of text lines grown from left to right."""

    def __init__(self, height):
        if height < 0:
            raise ValueError(f"height must not be negative, got {height}")
        self.lines = [""] * height

    @property
    def height(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return "".join(line + "\r\n" for line in self.lines)

    def clear(self) -> Printer:
        """Empty every line."""
        self.lines = [""] * self.height
        return self

    def min_max(self):
        """The shortest and longest line lengths."""
        lengths = [len(line) for line in self.lines]
        return min(lengths, default=0), max(lengths, default=0)

    def level(self) -> Printer:
        """Pad every line with spaces to the length of the longest."""
        longest = self.min_max()[1]
        self.lines = [line + repeat(longest - len(line)) for line in self.lines]
        return self

    def insert(self, row, text) -> Printer:
        """Append text to one line; rows outside the canvas are ignored."""
        if 0 <= row < self.height:
            self.lines[row] += text
        return self

    def insert_printer(self, offset, other) -> Printer:
        """Append the lines of another printer starting at the given row."""
        for row, line in enumerate(other.lines):
            self.insert(row + offset, line)
        return self

    def push_chars(self, chars) -> Printer:
        """Append one character to each line from the top, while any remain."""
        for row, char in zip(range(self.height), chars):
            self.lines[row] += char
        return self

    def push_labels(self, labels) -> Printer:
        """Append labels one per line, centred to the widest label."""
        labels = list(labels)
        widest = max((len(label) for label in labels), default=0)
        for row, label in zip(range(self.height), labels):
            self.lines[row] += align(label, widest, Alignment.CENTER)
        return self

    def push_table(self, data, rows, cols, labels, width=None) -> Printer:
        """Append a boxed table of row-major data with column labels on top.

        The table takes rows + 2 lines; nothing is drawn if rows exceeds
        the height of the canvas.
        """
        if rows > self.height:
            return self
        if cols < 1:
            raise ValueError(f"a table needs at least one column, got {cols}")
        data = list(data)
        if len(data) < rows * cols:
            raise ValueError(
                f"expected {rows * cols} cells, got {len(data)}"
            )
        labels = list(labels)
        if width is None:
            width = 8 * cols + 1
        cellspace = width - 3 * cols - 1
        cellspan, cellrem = divmod(cellspace, cols)

        outer_w = BORDER_NW + repeat(rows, BORDER_W) + BORDER_SW
        inner_w = PADDING_NW + repeat(rows, PADDING_W) + PADDING_SW
        divider = DIVIDER_N + repeat(rows, DIVIDER_C) + DIVIDER_S
        inner_e = PADDING_NE + repeat(rows, PADDING_E) + PADDING_SE
        outer_e = BORDER_NE + repeat(rows, BORDER_E) + BORDER_SE

        self.push_chars(outer_w)
        for col in range(cols):
            if col:
                self.push_chars(divider)
            self.push_chars(inner_w)
            span = cellspan + (0 if col < cellrem else 1)
            label = labels[col] if col < len(labels) else ""
            self.insert(0, align(label, span, Alignment.CENTER, BORDER_N))
            for row in range(rows):
                cell = data[row * cols + col]
                self.insert(row + 1, align(cell, span, Alignment.CENTER, SPACE))
            self.insert(rows + 1, align("", span, Alignment.LEFT, BORDER_S))
            self.push_chars(inner_e)
            self.level()
        self.push_chars(outer_e)
        return self.level()