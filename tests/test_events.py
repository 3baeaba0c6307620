import asyncio

import pytest

from stickui.events import (
    Button,
    ChannelError,
    Event,
    EventKind,
    channel,
)


def test_event_constructors():
    assert Event.down(Button.A) == Event(EventKind.BUTTON_DOWN, Button.A)
    assert Event.up(Button.C).kind is EventKind.BUTTON_UP
    assert Event.up(Button.C).button is Button.C


def test_publish_immediate_then_read():
    chan = channel()
    pub = chan.publisher()
    sub = chan.subscriber()
    pub.publish_immediate(Event.down(Button.B))
    assert sub.try_next_message() == Event.down(Button.B)
    assert sub.try_next_message() is None


def test_publisher_limit():
    chan = channel()
    for _ in range(4):
        chan.publisher()
    with pytest.raises(ChannelError):
        chan.publisher()


def test_subscriber_limit():
    chan = channel()
    for _ in range(4):
        chan.subscriber()
    with pytest.raises(ChannelError):
        chan.subscriber()


def test_every_subscriber_sees_every_message():
    chan = channel()
    pub = chan.publisher()
    first, second = chan.subscriber(), chan.subscriber()
    events = [Event.down(Button.A), Event.up(Button.A)]
    for event in events:
        pub.publish_immediate(event)
    assert [first.try_next_message() for _ in events] == events
    assert [second.try_next_message() for _ in events] == events


def test_messages_without_subscribers_are_dropped():
    chan = channel()
    pub = chan.publisher()
    pub.publish_immediate(Event.down(Button.A))
    sub = chan.subscriber()
    assert sub.try_next_message() is None
    pub.publish_immediate(Event.up(Button.A))
    assert sub.try_next_message() == Event.up(Button.A)


def test_immediate_publish_overwrites_oldest():
    chan = channel()
    pub = chan.publisher()
    sub = chan.subscriber()
    events = [Event.down(b) for b in Button] + [Event.up(b) for b in Button]
    for event in events:
        pub.publish_immediate(event)
    received = []
    while (event := sub.try_next_message()) is not None:
        received.append(event)
    assert received == events[-chan.capacity:]


@pytest.mark.asyncio
async def test_next_message_waits_for_publish():
    chan = channel()
    pub = chan.publisher()
    sub = chan.subscriber()
    task = asyncio.ensure_future(sub.next_message())
    await asyncio.sleep(0)
    assert not task.done()
    await pub.publish(Event.up(Button.C))
    assert await asyncio.wait_for(task, 1) == Event.up(Button.C)


@pytest.mark.asyncio
async def test_publish_waits_while_full():
    chan = channel()
    pub = chan.publisher()
    sub = chan.subscriber()
    for _ in range(chan.capacity):
        await pub.publish(Event.down(Button.A))
    blocked = asyncio.ensure_future(pub.publish(Event.up(Button.B)))
    await asyncio.sleep(0)
    assert not blocked.done()
    assert sub.try_next_message() == Event.down(Button.A)
    await asyncio.wait_for(blocked, 1)
    received = [await sub.next_message() for _ in range(chan.capacity)]
    assert received[-1] == Event.up(Button.B)