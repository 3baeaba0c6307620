import pytest

from stickui import events
from stickui.button import Button, Buttons


class Pin:
    def __init__(self):
        self.low = False

    def __call__(self):
        return self.low


def test_button_starts_released():
    pin = Pin()
    button = Button(pin)
    button.update()
    assert (button.just_pressed(), button.just_released(), button.changed()) == (
        False,
        False,
        False,
    )
    assert button.is_pressed() is False


def test_press_and_release_edges():
    pin = Pin()
    button = Button(pin)
    pin.low = True
    button.update()
    assert button.just_pressed() and button.changed()
    assert not button.just_released()
    button.update()
    assert not button.just_pressed() and not button.changed()
    assert button.is_pressed()
    pin.low = False
    button.update()
    assert button.just_released() and button.changed()
    assert not button.just_pressed()


def test_is_pressed_reads_live_input():
    pin = Pin()
    button = Button(pin)
    pin.low = True
    assert button.is_pressed() is True
    assert button.just_pressed() is False


@pytest.mark.asyncio
async def test_buttons_publish_edges():
    chan = events.channel()
    sub = chan.subscriber()
    a, b, c = Pin(), Pin(), Pin()
    buttons = Buttons(chan.publisher(), a, b, c)

    a.low = True
    c.low = True
    await buttons.update()
    assert sub.try_next_message() == events.Event.down(events.Button.A)
    assert sub.try_next_message() == events.Event.down(events.Button.C)
    assert sub.try_next_message() is None

    await buttons.update()
    assert sub.try_next_message() is None

    a.low = False
    b.low = True
    await buttons.update()
    assert sub.try_next_message() == events.Event.up(events.Button.A)
    assert sub.try_next_message() == events.Event.down(events.Button.B)
    assert buttons.c.is_pressed()