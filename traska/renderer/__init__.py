"""Rendering subpackage.

Turns immutable ``GameState`` snapshots into pictures:

* :mod:`traska.renderer.image` draws a Pillow RGBA image (one colored tile
  per cell, legal targets outlined, fuel amounts printed, ship on top).
* :mod:`traska.renderer.text` prints a compact ASCII board for logs and
  terminals.
"""

from .image import DEFAULT_RESOLUTION, ImageRenderer, render
from .text import render_text

__all__ = ["DEFAULT_RESOLUTION", "ImageRenderer", "render", "render_text"]
