"""A cell buffer with colours and the widgets the application draws into it."""

from __future__ import annotations

from dataclasses import dataclass

from stickui.layout import Rect


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.GRAY = Color(192, 192, 192)


@dataclass(frozen=True)
class Style:
    """Foreground and background colours; None leaves a colour as it was."""

    fg: Color | None = None
    bg: Color | None = None


@dataclass
class Cell:
    symbol: str = " "
    fg: Color | None = None
    bg: Color | None = None

    def set_style(self, style: Style) -> None:
        self.fg = style.fg or self.fg
        self.bg = style.bg or self.bg


class Buffer:
    """A grid of cells covering an area of the screen."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._rows = [[Cell() for _ in range(area.width)] for _ in range(area.height)]

    def get(self, x: int, y: int) -> Cell:
        a = self.area
        if not (a.x <= x < a.right() and a.y <= y < a.bottom()):
            raise IndexError(f"position ({x}, {y}) is outside the buffer")
        return self._rows[y - a.y][x - a.x]

    def _write(self, x: int, y: int, text: str, style: Style, limit: int) -> int:
        self.get(x, y)
        written = text[: max(min(limit, self.area.right() - x), 0)]
        for offset, char in enumerate(written):
            cell = self.get(x + offset, y)
            cell.symbol = char
            cell.set_style(style)
        return len(written)

    def set_string(self, x: int, y: int, text: str, style: Style = Style()) -> int:
        """Write text from (x, y), clipped at the right edge; return the next x."""
        return x + self._write(x, y, text, style, len(text))

    def row_text(self, y: int) -> str:
        if not self.area.y <= y < self.area.bottom():
            raise IndexError(f"row {y} is outside the buffer")
        return "".join(cell.symbol for cell in self._rows[y - self.area.y])

    def fill(self, area: Rect, style: Style) -> None:
        """Apply a style to every cell of the area that lies in the buffer."""
        for y in range(max(area.y, self.area.y), min(area.bottom(), self.area.bottom())):
            for x in range(max(area.x, self.area.x), min(area.right(), self.area.right())):
                self.get(x, y).set_style(style)


def _inset(area: Rect, left: int = 0, top: int = 0) -> Rect:
    left, top = min(left, area.width), min(top, area.height)
    return Rect(area.x + left, area.y + top, area.width - left, area.height - top)


def render_tabs(
    titles,
    selected: int,
    area: Rect,
    buffer: Buffer,
    highlight_style: Style = Style(),
    block_style: Style = Style(),
    divider: str = " ",
    left_padding: int = 0,
) -> None:
    """Draw a row of tab titles, the selected one in the highlight style."""
    buffer.fill(area, block_style)
    inner = _inset(area, left=left_padding)
    if inner.width == 0 or inner.height == 0:
        return
    titles = list(titles)
    x, right = inner.x, inner.right()
    for index, title in enumerate(titles):
        if x >= right:
            break
        written = buffer._write(x, inner.y, title, Style(), right - x)
        if index == selected:
            buffer.fill(Rect(x, inner.y, written, 1), highlight_style)
        x += written
        if index < len(titles) - 1 and x < right:
            x += buffer._write(x, inner.y, divider, Style(), right - x)


def render_paragraph(
    text: str,
    area: Rect,
    buffer: Buffer,
    padding_left: int = 0,
    padding_top: int = 0,
) -> None:
    """Draw text line by line inside the padded area, clipped to it."""
    inner = _inset(area, left=padding_left, top=padding_top)
    if inner.width == 0:
        return
    for y, line in zip(range(inner.y, inner.bottom()), text.split("\n")):
        buffer._write(inner.x, y, line, Style(), inner.width)