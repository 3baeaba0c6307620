"""Button events and the bounded publish/subscribe channel that carries them."""

from __future__ import annotations

import asyncio
import enum
from collections import deque
from dataclasses import dataclass

CAPACITY = 4
MAX_SUBSCRIBERS = 4
MAX_PUBLISHERS = 4


class Button(enum.Enum):
    A = "A"
    B = "B"
    C = "C"


class EventKind(enum.Enum):
    BUTTON_DOWN = "down"
    BUTTON_UP = "up"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    button: Button

    @classmethod
    def down(cls, button: Button) -> Event:
        return cls(EventKind.BUTTON_DOWN, button)

    @classmethod
    def up(cls, button: Button) -> Event:
        return cls(EventKind.BUTTON_UP, button)


class ChannelError(Exception):
    """Raised when a channel has no room for another publisher or subscriber."""


class EventChannel:
    """A bounded broadcast channel: every subscriber sees every later message."""

    def __init__(
        self,
        capacity: int = CAPACITY,
        max_subscribers: int = MAX_SUBSCRIBERS,
        max_publishers: int = MAX_PUBLISHERS,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.max_subscribers = max_subscribers
        self.max_publishers = max_publishers
        self._inboxes: list[deque[Event]] = []
        self._publishers = 0
        self._waiters: list[asyncio.Future] = []

    def publisher(self) -> Publisher:
        if self._publishers >= self.max_publishers:
            raise ChannelError("maximum number of publishers reached")
        self._publishers += 1
        return Publisher(self)

    def subscriber(self) -> Subscriber:
        if len(self._inboxes) >= self.max_subscribers:
            raise ChannelError("maximum number of subscribers reached")
        inbox: deque[Event] = deque()
        self._inboxes.append(inbox)
        return Subscriber(self, inbox)

    def _full(self) -> bool:
        return any(len(inbox) >= self.capacity for inbox in self._inboxes)

    def _push(self, event: Event, drop_oldest: bool) -> None:
        for inbox in self._inboxes:
            if drop_oldest and len(inbox) >= self.capacity:
                inbox.popleft()
            inbox.append(event)
        self._notify()

    def _notify(self) -> None:
        waiters, self._waiters = self._waiters, []
        for future in waiters:
            if not future.done():
                future.set_result(None)

    async def _wait(self) -> None:
        future = asyncio.get_running_loop().create_future()
        self._waiters.append(future)
        await future


class Publisher:
    def __init__(self, channel: EventChannel) -> None:
        self._channel = channel

    async def publish(self, event: Event) -> None:
        """Publish, waiting while a subscriber's backlog is full."""
        while self._channel._full():
            await self._channel._wait()
        self._channel._push(event, drop_oldest=False)

    def publish_immediate(self, event: Event) -> None:
        """Publish at once, dropping the oldest unread message where full."""
        self._channel._push(event, drop_oldest=True)


class Subscriber:
    def __init__(self, channel: EventChannel, inbox: deque[Event]) -> None:
        self._channel = channel
        self._inbox = inbox

    def try_next_message(self) -> Event | None:
        if not self._inbox:
            return None
        event = self._inbox.popleft()
        self._channel._notify()
        return event

    async def next_message(self) -> Event:
        while (event := self.try_next_message()) is None:
            await self._channel._wait()
        return event


def channel() -> EventChannel:
    return EventChannel()