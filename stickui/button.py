"""Edge detection for push buttons and publishing of their events."""

from __future__ import annotations

import logging
from typing import Callable

from stickui import events

log = logging.getLogger(__name__)


class Button:
    """A push button read through a function that is true while it is held."""

    def __init__(self, read: Callable[[], bool]) -> None:
        self._read = read
        self._prev_state = False
        self._just_pressed = False
        self._just_released = False
        self._changed = False

    def update(self) -> None:
        """Sample the input and record what changed since the last sample."""
        pressed = bool(self._read())
        self._just_pressed = pressed and not self._prev_state
        self._just_released = not pressed and self._prev_state
        self._changed = pressed != self._prev_state
        self._prev_state = pressed

    def just_pressed(self) -> bool:
        return self._just_pressed

    def just_released(self) -> bool:
        return self._just_released

    def changed(self) -> bool:
        return self._changed

    def is_pressed(self) -> bool:
        return bool(self._read())


class Buttons:
    """The device's three buttons, publishing a down or up event on each edge."""

    def __init__(
        self,
        sender: events.Publisher,
        a: Callable[[], bool],
        b: Callable[[], bool],
        c: Callable[[], bool],
    ) -> None:
        self._sender = sender
        self.a = Button(a)
        self.b = Button(b)
        self.c = Button(c)

    async def update(self) -> None:
        pairs = (
            (self.a, events.Button.A),
            (self.b, events.Button.B),
            (self.c, events.Button.C),
        )
        for button, _ in pairs:
            button.update()
        for button, name in pairs:
            if button.just_pressed():
                log.debug("Button %s pressed", name.value)
                await self._sender.publish(events.Event.down(name))
            if button.just_released():
                log.debug("Button %s released", name.value)
                await self._sender.publish(events.Event.up(name))