"""2048 game session: the owner of the authoritative grid and score."""

import logging

from numpy import ndarray
from numpy.random import default_rng

from tilemerge.core import (
    Direction,
    MoveResult,
    apply_move,
    as_direction,
    fill_cells,
    is_terminal,
    new_grid,
    spawn_random_tile,
)

logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game session.

    This class owns the game board and the score. Moves go through the grid engine; a new tile is added after each
    move that changes the board.
    """

    # ##: All Actions.
    ACTIONS = {direction.key: direction for direction in Direction}

    def __init__(self, size: int = 4, seed: int | None = None):
        """
        Initialize the 2048 game board.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        seed : int, optional
            Seed of the random generator used for tile spawning.
        """
        self.size = size
        self._generator = default_rng(seed)
        self._current_state: ndarray = new_grid(size)
        self._score = 0

        self.reset()

    @property
    def board(self) -> ndarray:
        """A copy of the current game board."""
        return self._current_state.copy()

    @property
    def score(self) -> int:
        """Sum of all merged tiles since the last reset."""
        return self._score

    @property
    def max_tile(self) -> int:
        """The highest tile on the board."""
        return int(self._current_state.max())

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is finished (no more moves possible), False otherwise.
        """
        return is_terminal(self._current_state)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Initialize an empty board and add two random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the tile generator before filling the board.

        Returns
        -------
        ndarray
            A copy of the new game board.

        Notes
        -----
        There's a 10% chance for each initial tile to be a 4.
        """
        if seed is not None:
            self._generator = default_rng(seed)
        self._current_state = fill_cells(new_grid(self.size), number_tile=2, generator=self._generator)
        self._score = 0
        return self.board

    def step(self, action: Direction | int | str) -> tuple[ndarray, MoveResult, bool]:
        """
        Apply the selected move to the board.

        Parameters
        ----------
        action : Direction | int | str
            The move to apply.

        Returns
        -------
        tuple[ndarray, MoveResult, bool]
            A tuple containing:
            - A copy of the updated game board (ndarray)
            - The result of the move (MoveResult)
            - Whether the game has finished after this move (bool)

        Raises
        ------
        ValueError
            If ``action`` is not one of the four directions.

        Notes
        -----
        A move that does not change the board leaves board and score untouched and spawns no tile.
        """
        direction = as_direction(action)
        result = apply_move(self._current_state, direction)
        if result.moved:
            self._score += result.score
            spawn_random_tile(self._current_state, generator=self._generator)
            logger.debug('Move %s accepted, +%d (score %d)', direction.key, result.score, self._score)
        else:
            logger.debug('Move %s rejected', direction.key)
        return self.board, result, self.is_finished

    def render(self) -> None:
        """
        Render the game board. This method prints the score and the current state of the game board to the console.
        """
        print(f'score: {self._score}')
        for row in self._current_state.tolist():
            print(' \t'.join(map(str, row)))
