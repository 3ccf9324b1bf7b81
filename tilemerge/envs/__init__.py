# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `TwentyFortyEight` class, which holds the game board and the score for playing the 2048 game.
"""

from .twentyfortyeight import TwentyFortyEight

__all__ = ["TwentyFortyEight"]
