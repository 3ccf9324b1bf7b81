"""
Move directions for the 2048 grid engine and their parsing from names and integers.
"""

from enum import IntEnum
from numbers import Integral


class Direction(IntEnum):
    """
    The four moves of the game.

    Members are declared in evaluation order (up, down, left, right). The value of each member is the number of
    counter-clockwise quarter turns that brings the direction to the canonical merge-left orientation.
    """

    UP = 1
    DOWN = 3
    LEFT = 0
    RIGHT = 2

    @property
    def key(self) -> str:
        """Keyboard name of the direction, as reported by matplotlib key events."""
        return self.name.lower()


# ##: Accepted spellings for each direction (names, keyboard keys and browser key codes).
_ALIASES = {alias: direction for direction in Direction for alias in (direction.key, f'arrow{direction.key}')}


def as_direction(value: Direction | int | str) -> Direction:
    """
    Convert a direction-like value into a ``Direction``.

    Parameters
    ----------
    value : Direction | int | str
        A ``Direction``, its integer value, or a name such as ``"up"`` or ``"ArrowUp"`` (case-insensitive).

    Returns
    -------
    Direction
        The matching direction.

    Raises
    ------
    ValueError
        If the value does not name one of the four directions.
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        direction = _ALIASES.get(value.strip().lower())
        if direction is not None:
            return direction
    elif isinstance(value, Integral) and not isinstance(value, bool):
        try:
            return Direction(int(value))
        except ValueError:
            pass
    raise ValueError(f'Unknown direction: {value!r}')
