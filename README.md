# stickui

A small tabbed, terminal-style user interface for a 240×135 pixel handheld
screen that has three buttons (A, B and C). It comes with a desktop simulator
that shows the interface in a window.

The screen is split into three rows:

- a one-line header showing four tabs (`tab 1` … `tab 4`) on a dark
  background, with the selected tab's title in white;
- the main area, which shows the text `hello` one row below its top edge;
- a one-line footer showing the battery level (`  b:0%`).

Releasing button C moves to the next tab. After the last tab it goes back to
the first. Buttons A and B do nothing yet.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the simulator

```
stickui-sim
```

This opens a window scaled three times. Use `stickui-sim --scale N` to pick
another whole-number scale factor. The keys map to the buttons like this:

| Key | Button |
|-----|--------|
| 1   | A      |
| 2   | B      |
| 3   | C      |

Pressing a key publishes a button-down event. Releasing it publishes a
button-up event. Closing the window stops the simulator. Debug logging goes to
standard error.

## Using the library

### Events

`stickui.events` defines `Button` (`A`, `B`, `C`), `EventKind` and `Event`,
and a bounded broadcast `EventChannel`. By default the channel holds four
messages and allows four publishers and four subscribers. Asking for more
publishers or subscribers than that raises `ChannelError`.

```python
from stickui.events import Button, Event, channel

chan = channel()
pub = chan.publisher()
sub = chan.subscriber()

pub.publish_immediate(Event.up(Button.C))
print(sub.try_next_message())
```

- `Publisher.publish` is a coroutine. It waits while a subscriber's backlog
  is full.
- `Publisher.publish_immediate` never waits. Where a backlog is full, it drops
  the oldest unread message.
- `Subscriber.next_message` is a coroutine that waits for a message.
  `Subscriber.try_next_message` returns `None` when nothing is waiting.

### Layout and rendering

`stickui.layout.Rect` is a rectangle with `bottom()` and `right()`.
`AppLayout.split(area)` gives at most one row to the header, at most one row
to the footer, and the rest to the main area.

`stickui.render` provides `Color`, `Style`, `Cell` and `Buffer`, a grid of
cells with `set_string`, `get`, `row_text` and `fill`. It also provides two
widgets, `render_tabs` and `render_paragraph`.

### The application

`stickui.app.App` draws into a `Buffer` and reacts to events in
`handle_event`. `App.run(terminal)` is a coroutine that keeps drawing through
a `BufferTerminal` and handling events until `request_exit()` is called.

```python
from stickui.app import App, BufferTerminal, SelectedTab
from stickui.events import Button, Event, channel
from stickui.layout import Rect

chan = channel()
app = App(chan.publisher(), chan.subscriber())
app.handle_event(Event.up(Button.C))   # moves to the next tab
assert app.selected_tab is SelectedTab.TAB2
```

`stickui.app.ms_to_red(ms)` maps a hold time in milliseconds to a red level,
from 10 at 0 ms to 255 at 3000 ms and beyond.

### Buttons

`stickui.button.Button` wraps a function that returns true while the button is
held. Each `update()` records `just_pressed()`, `just_released()` and
`changed()`. `stickui.button.Buttons` holds three of these. Its coroutine
`update()` publishes a down or up event for every edge it sees.

## What it does not do

The package does not drive real device hardware. It has no display driver, no
GPIO button inputs and no battery measurement. The battery level shown in the
footer is the `battery_level` value given to `App`, which is 0 by default.
The only way to see the interface on screen is the pygame simulator.