"""Screen rectangles and the header/main/footer split of the screen."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def bottom(self) -> int:
        return self.y + self.height

    def right(self) -> int:
        return self.x + self.width


@dataclass(frozen=True)
class AppLayout:
    header: Rect = field(default_factory=Rect)
    main: Rect = field(default_factory=Rect)
    footer: Rect = field(default_factory=Rect)

    @classmethod
    def split(cls, area: Rect) -> AppLayout:
        """Give at most one row each to header and footer, the rest to main."""
        header_h = min(1, area.height)
        footer_h = min(1, area.height - header_h)
        header = Rect(area.x, area.y, area.width, header_h)
        main = Rect(area.x, header.bottom(), area.width, area.height - header_h - footer_h)
        footer = Rect(area.x, main.bottom(), area.width, footer_h)
        return cls(header, main, footer)