"""
Core functionality for simulating the 2048 game, including board manipulation and game logic.

Every direction is reduced to a merge-left: the board is rotated so that the requested direction points left,
each row is compacted, and the board is rotated back.
"""

from dataclasses import dataclass

from numpy import argwhere, array_equal, count_nonzero, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.core.gamemove import Direction, as_direction

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator, used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single move.

    Attributes
    ----------
    moved : bool
        Whether at least one cell changed.
    score : int
        Sum of the tiles created by merges. Always 0 when ``moved`` is False.
    """

    moved: bool
    score: int = 0


def _check_grid(grid: ndarray) -> None:
    """Reject anything that is not a square two-dimensional array."""
    if not isinstance(grid, ndarray):
        raise TypeError(f'Expected a numpy array, got {type(grid).__name__}')
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError(f'Expected a square grid, got shape {grid.shape}')


def new_grid(size: int = 4) -> ndarray:
    """Return an empty ``size`` x ``size`` grid."""
    if size < 2:
        raise ValueError(f'Grid size must be at least 2, got {size}')
    return zeros((size, size), dtype=int64)


def merge_row(row: ndarray) -> tuple[int, ndarray]:
    """
    Slide a row to the left, merge adjacent equal values and compute the score.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one row of the game board.

    Returns
    -------
    score : int
        The total score obtained from merging.
    merged_row : ndarray
        The new row, padded on the right with zeros to its original length.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the row towards the end.
    - Each value can only be merged once per call.
    """
    non_zero = row[row != 0]
    result = zeros_like(row)

    # ##: Nothing to merge.
    if len(non_zero) <= 1:
        result[: len(non_zero)] = non_zero
        return 0, result

    score = 0
    position = 0
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result[position] = merged
            score += int(merged)
            i += 2
        else:
            result[position] = non_zero[i]
            i += 1
        position += 1

    return score, result


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, result[i] = merge_row(row)
        score += score_row

    return score, result


def rotate_clockwise(board: ndarray, turns: int = 1) -> ndarray:
    """Rotate the board by ``turns`` clockwise quarter turns. Four turns give back the original board."""
    return rot90(board, k=-turns)


def latent_state(state: ndarray, direction: Direction | int | str) -> tuple[ndarray, MoveResult]:
    """
    Compute the board after a move, without adding a new tile and without touching ``state``.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    direction : Direction | int | str
        The move to apply.

    Returns
    -------
    new_state : ndarray
        The board after the move.
    result : MoveResult
        Whether the move changed the board and the score it produced.
    """
    new_state = state.copy()
    result = apply_move(new_state, direction)
    return new_state, result


def apply_move(grid: ndarray, direction: Direction | int | str) -> MoveResult:
    """
    Apply a move to the grid, in place.

    Parameters
    ----------
    grid : ndarray
        The board to update. **Modified in-place** when the move changes it.
    direction : Direction | int | str
        The move to apply.

    Returns
    -------
    MoveResult
        Whether any cell changed, and the sum of the merged tiles.

    Raises
    ------
    ValueError
        If ``direction`` is not one of the four directions or the grid is not square.
    """
    direction = as_direction(direction)
    _check_grid(grid)

    # ##: Rotate so the move points left, compact rows, then rotate back.
    rotated = rot90(grid, k=direction)
    score, updated = slide_and_merge(rotated)
    if array_equal(rotated, updated):
        return MoveResult(moved=False)

    grid[...] = rot90(updated, k=-direction)
    return MoveResult(moved=True, score=score)


def has_empty_cell(grid: ndarray) -> bool:
    """Check whether any cell of the grid is empty."""
    return bool((grid == 0).any())


def count_empty_cells(grid: ndarray) -> int:
    """Count the empty cells of the grid."""
    return int(grid.size - count_nonzero(grid))


def is_terminal(grid: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if none of the four moves changes the board.

    Notes
    -----
    Every direction is simulated on its own copy of the grid, so the answer always agrees with the moves actually
    played.
    """
    return not legal_directions(grid)


def legal_directions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that change the given board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Not modified.

    Returns
    -------
    list[Direction]
        Legal directions, in evaluation order.
    """
    return [direction for direction in Direction if latent_state(state, direction)[1].moved]


def illegal_directions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the given board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Not modified.

    Returns
    -------
    list[Direction]
        Illegal directions, in evaluation order.
    """
    legal = legal_directions(state)
    return [direction for direction in Direction if direction not in legal]


def spawn_random_tile(grid: ndarray, generator: Generator | None = None) -> None:
    """
    Put a new tile on a random empty cell.

    Parameters
    ----------
    grid : ndarray
        The game board. **Modified in-place.**
    generator : Generator, optional
        Source of randomness. The module-level generator is used when omitted.

    Notes
    -----
    - The cell is chosen uniformly among the empty cells.
    - The new tile is a 2 with probability 0.9, a 4 otherwise.
    - Does nothing when the grid is full.
    """
    rng = generator if generator is not None else _GENERATOR

    empty_cells = argwhere(grid == 0)
    if len(empty_cells) == 0:
        return

    row, col = empty_cells[rng.integers(len(empty_cells))]
    grid[row, col] = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4


def fill_cells(state: ndarray, number_tile: int, generator: Generator | None = None) -> ndarray:
    """
    Fill empty cells with new tiles (2 or 4).

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    generator : Generator, optional
        Source of randomness. The module-level generator is used when omitted.

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    If there are fewer empty cells than requested, it fills all available cells.
    """
    for _ in range(number_tile):
        if not has_empty_cell(state):
            break
        spawn_random_tile(state, generator=generator)
    return state
