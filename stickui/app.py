"""The application: tab bar, main area and footer, driven by button events."""

from __future__ import annotations

import asyncio
import enum
from typing import Callable, Optional

from stickui import events
from stickui.layout import AppLayout, Rect
from stickui.render import Buffer, Color, Style, render_paragraph, render_tabs

TAB_BACKGROUND = Color(10, 10, 10)


class SelectedTab(enum.Enum):
    TAB1 = "tab 1"
    TAB2 = "tab 2"
    TAB3 = "tab 3"
    TAB4 = "tab 4"

    @classmethod
    def titles(cls) -> list[str]:
        return [tab.title() for tab in cls]

    def title(self) -> str:
        return self.value

    def next(self) -> SelectedTab:
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]


class BufferTerminal:
    """Renders each frame into a fresh buffer, keeps it and hands it to flush."""

    def __init__(self, area: Rect, flush: Optional[Callable[[Buffer], None]] = None) -> None:
        self.area = area
        self._flush = flush
        self.buffer = Buffer(area)

    def draw(self, render: Callable[[Buffer], None]) -> Buffer:
        buffer = Buffer(self.area)
        render(buffer)
        self.buffer = buffer
        if self._flush is not None:
            self._flush(buffer)
        return buffer


class App:
    """Draws the screen and reacts to button events until asked to exit."""

    def __init__(
        self,
        sender: events.Publisher,
        receiver: events.Subscriber,
        poll_interval: Optional[float] = None,
        battery_level: int = 0,
    ) -> None:
        self._sender = sender
        self._receiver = receiver
        self._exit = False
        self.poll_interval = poll_interval
        self.layout = AppLayout.split(Rect())
        self.selected_tab = SelectedTab.TAB1
        self.battery_level = battery_level

    async def run(self, terminal: BufferTerminal) -> None:
        self.layout = AppLayout.split(terminal.area)
        while not self._exit:
            terminal.draw(self.draw)
            try:
                event = await asyncio.wait_for(
                    self._receiver.next_message(), self.poll_interval
                )
            except asyncio.TimeoutError:
                continue
            self.handle_event(event)

    def request_exit(self) -> None:
        self._exit = True

    def next_tab(self) -> None:
        self.selected_tab = self.selected_tab.next()

    def draw(self, buffer: Buffer) -> None:
        render_tabs(
            SelectedTab.titles(),
            list(SelectedTab).index(self.selected_tab),
            self.layout.header,
            buffer,
            highlight_style=Style(fg=Color.WHITE),
            block_style=Style(fg=Color.BLACK, bg=TAB_BACKGROUND),
            divider=" ",
            left_padding=1,
        )
        # The main block's top padding replaces its left padding.
        render_paragraph("hello", self.layout.main, buffer, padding_top=1)
        if buffer.area.width and buffer.area.height:
            y = max(self.layout.footer.bottom() - 1, 0)
            buffer.set_string(0, y, f"  b:{self.battery_level}%", Style(fg=Color.GRAY))

    def handle_event(self, event: events.Event) -> None:
        if event == events.Event.up(events.Button.C):
            self.next_tab()


def ms_to_red(ms: int) -> int:
    """Map a hold time to a red level: 0 -> 10, 3000 and up -> 255."""
    if ms < 0:
        raise ValueError("duration must not be negative")
    return 10 + min(ms, 3000) * 245 // 3000