"""Tabbed three-button handheld UI: event channel, layout, cell rendering, buttons and a pygame simulator."""

__version__ = "0.1.0"