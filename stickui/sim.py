"""A desktop window that shows the device screen and maps keys 1-3 to buttons."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from stickui import events  # noqa: E402
from stickui.app import App, BufferTerminal  # noqa: E402
from stickui.layout import Rect  # noqa: E402
from stickui.render import Buffer, Color  # noqa: E402

log = logging.getLogger(__name__)

CAPTION = "M5StickC PLUS2 Simulator. Buttons: 1=A 2=B 3=C"
DISPLAY_SIZE = (240, 135)
CELL_SIZE = (6, 13)

_KEYS = {
    pygame.K_1: events.Button.A,
    pygame.K_2: events.Button.B,
    pygame.K_3: events.Button.C,
}


def key_to_button(key: int) -> Optional[events.Button]:
    return _KEYS.get(key)


def _rgb(color: Color) -> tuple[int, int, int]:
    return color.r, color.g, color.b


class Simulator:
    """Paints buffers into a scaled window and publishes key presses as events."""

    def __init__(
        self,
        sender: events.Publisher,
        scale: int = 3,
        size: tuple[int, int] = DISPLAY_SIZE,
        cell_size: tuple[int, int] = CELL_SIZE,
    ) -> None:
        if scale < 1:
            raise ValueError("scale must be at least 1")
        self._sender = sender
        self.scale = scale
        self.cell_size = cell_size
        pygame.display.init()
        pygame.font.init()
        width, height = size
        self.window = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(CAPTION)
        self.surface = pygame.Surface(size)
        self._font = pygame.font.Font(None, cell_size[1] + 4)
        self.area = Rect(0, 0, width // cell_size[0], height // cell_size[1])

    def flush(self, buffer: Buffer) -> None:
        """Show the buffer, then publish events for the keys pressed meanwhile."""
        cell_w, cell_h = self.cell_size
        self.surface.fill(_rgb(Color.BLACK))
        area = buffer.area
        for row in range(area.height):
            for col in range(area.width):
                cell = buffer.get(area.x + col, area.y + row)
                rect = pygame.Rect(col * cell_w, row * cell_h, cell_w, cell_h)
                self.surface.fill(_rgb(cell.bg or Color.BLACK), rect)
                if cell.symbol.strip():
                    glyph = self._font.render(cell.symbol, True, _rgb(cell.fg or Color.WHITE))
                    self.surface.blit(glyph, rect.topleft)
        self.window.blit(pygame.transform.scale(self.surface, self.window.get_size()), (0, 0))
        pygame.display.flip()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise RuntimeError("simulator window closed")
            if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
                continue
            button = key_to_button(event.key)
            if button is None:
                continue
            if event.type == pygame.KEYDOWN:
                log.debug("Key %s pressed -> Button %s", event.key, button.value)
                self._sender.publish_immediate(events.Event.down(button))
            else:
                log.debug("Key %s released -> Button %s", event.key, button.value)
                self._sender.publish_immediate(events.Event.up(button))


async def _run(scale: int) -> None:
    ch = events.channel()
    simulator = Simulator(ch.publisher(), scale=scale)
    terminal = BufferTerminal(simulator.area, flush=simulator.flush)
    # The timeout keeps window events flowing while no button is pressed.
    app = App(ch.publisher(), ch.subscriber(), poll_interval=0.016)
    await app.run(terminal)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the device screen in a desktop window.")
    parser.add_argument("--scale", type=int, default=3, help="window scale factor")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        asyncio.run(_run(args.scale))
    except RuntimeError as exc:
        log.info("%s", exc)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())