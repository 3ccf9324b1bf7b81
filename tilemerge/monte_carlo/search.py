# -*- coding: utf-8 -*-
"""
Random rollouts and static evaluation for ranking the moves of a 2048 grid.

A candidate move is scored by playing it, following it with a short sequence of uniformly random moves, and adding
a static evaluation of the board reached. Averaging many such rollouts gives the value of the move.
"""
from numpy import diff, maximum, ndarray
from numpy.random import Generator

from tilemerge.core import Direction, apply_move, count_empty_cells, has_empty_cell

# ##: Weights of the static evaluation.
EMPTY_CELL_WEIGHT = 10
MONOTONICITY_WEIGHT = 20

DIRECTIONS = tuple(Direction)


def monotonicity_score(grid: ndarray) -> int:
    """
    Measure how consistently rows and columns increase or decrease.

    Parameters
    ----------
    grid : ndarray
        The game board.

    Returns
    -------
    int
        For every row and every column, the larger of the number of strictly increasing and strictly decreasing
        adjacent pairs, summed over all lines.
    """
    score = 0
    for axis in (1, 0):
        steps = diff(grid, axis=axis)
        increasing = (steps > 0).sum(axis=axis)
        decreasing = (steps < 0).sum(axis=axis)
        score += int(maximum(increasing, decreasing).sum())
    return score


def static_evaluate(grid: ndarray) -> float:
    """
    Heuristic value of a board, higher is better.

    Parameters
    ----------
    grid : ndarray
        The game board.

    Returns
    -------
    float
        ``sum(cells) + 10 * empty cells + 20 * monotonicity``.
    """
    return float(
        grid.sum() + EMPTY_CELL_WEIGHT * count_empty_cells(grid) + MONOTONICITY_WEIGHT * monotonicity_score(grid)
    )


def simulate(state: ndarray, direction: Direction, max_depth: int, generator: Generator) -> float:
    """
    Perform one rollout starting with the given move.

    Parameters
    ----------
    state : ndarray
        The starting board. Not modified; the rollout runs on a copy.
    direction : Direction
        The candidate move played first.
    max_depth : int
        Maximum number of random moves after the candidate move.
    generator : Generator
        Source of randomness for the random moves.

    Returns
    -------
    float
        0 if the candidate move does not change the board. Otherwise the score gained along the rollout plus the
        static evaluation of the final board.

    Notes
    -----
    - The rollout stops on the first random move that does not change the board; it never retries.
    - The rollout stops when the board has no empty cell.
    - No tile is spawned during the rollout.
    """
    board = state.copy()

    result = apply_move(board, direction)
    if not result.moved:
        return 0.0
    score = result.score

    # ##: Random playout.
    depth = 0
    while depth < max_depth and has_empty_cell(board):
        result = apply_move(board, DIRECTIONS[generator.integers(len(DIRECTIONS))])
        if not result.moved:
            break
        score += result.score
        depth += 1

    return score + static_evaluate(board)


def evaluate_direction(
    state: ndarray, direction: Direction, rollouts: int, max_depth: int, generator: Generator
) -> float:
    """
    Average the result of ``rollouts`` independent simulations of a move.

    Parameters
    ----------
    state : ndarray
        The board to evaluate.
    direction : Direction
        The candidate move.
    rollouts : int
        Number of simulations.
    max_depth : int
        Maximum number of random moves per simulation.
    generator : Generator
        Source of randomness.

    Returns
    -------
    float
        The average simulation score.
    """
    total = 0.0
    for _ in range(rollouts):
        total += simulate(state, direction, max_depth=max_depth, generator=generator)
    return total / rollouts
