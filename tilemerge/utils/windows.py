# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 game.

This module provides a Matplotlib window that draws the game board and the score, forwards key presses to a handler
and provides timers running on the window's event loop.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event, TimerBase
from numpy import ndarray


class WindowBoard:
    """
    A class for rendering and managing the 2048 game board using Matplotlib.

    Methods
    -------
    show_image(board: np.ndarray, score: int | None = None)
        Update the display with the current game board state.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    new_timer(interval: int)
        Create a timer running on the window's event loop.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
    }

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.title = title
        self.fig = plt.figure(figsize=(4, 4.4))
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Create one cell per tile.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.patch.set_facecolor("#BBADA0")
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.9, wspace=0.05, hspace=0.05)

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """Set the closed flag when the window is closed."""
        self.closed = True

    def show_image(self, board: ndarray, score: Optional[int] = None, status: str = ""):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        score : int, optional
            The current score, shown above the board.
        status : str, optional
            A short message shown next to the score (e.g. "AI", "Game over").
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, "#3C3A32"))
            text.set_color("#776E65" if value <= 4 else "#F9F6F2")

        header = f"Score: {score}" if score is not None else self.title
        self.fig.suptitle(f"{header}   {status}".rstrip(), fontweight="bold", color="#776E65")

        self.fig.canvas.draw_idle()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function called with the matplotlib ``KeyEvent`` whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def new_timer(self, interval: int) -> TimerBase:
        """Create a timer firing every ``interval`` milliseconds on the window's event loop."""
        return self.fig.canvas.new_timer(interval=interval)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the game window."""
        plt.close(self.fig)
        self.closed = True
