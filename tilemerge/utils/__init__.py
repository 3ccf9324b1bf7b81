# -*- coding: utf-8 -*-
"""
Presentation helpers: a Matplotlib window for drawing the game board.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
