# -*- coding: utf-8 -*-
"""
Monte Carlo move selection for 2048.
"""
from __future__ import annotations

import logging

from numpy import ndarray
from numpy.random import Generator, default_rng

from tilemerge.addons.config import EvaluatorConfig
from tilemerge.core import Direction

from .search import evaluate_direction

logger = logging.getLogger(__name__)


class MonteCarloAgent:
    """
    An agent that ranks the four moves with random rollouts.

    Each direction is played on copies of the board and followed by short random playouts. The direction with the
    highest average outcome is chosen.

    Methods
    -------
    evaluate_directions(state: ndarray)
        Average rollout score of every direction.
    choose_action(state: ndarray)
        Choose the best direction for the given game state.
    """

    def __init__(
        self,
        rollouts: int = 100,
        max_depth: int = 10,
        seed: int | None = None,
        generator: Generator | None = None,
    ):
        """
        Initialize the Monte Carlo agent.

        Parameters
        ----------
        rollouts : int, optional
            The number of simulations for each direction (default is 100).
        max_depth : int, optional
            The maximum number of random moves after the candidate move (default is 10).
        seed : int, optional
            Seed of the agent's random generator. Ignored when ``generator`` is given.
        generator : Generator, optional
            Random generator to use for the rollouts.
        """
        config = EvaluatorConfig(rollouts=rollouts, max_depth=max_depth)
        self._rollouts = config.rollouts
        self._max_depth = config.max_depth
        self._generator = generator if generator is not None else default_rng(seed)

    @classmethod
    def from_config(cls, config: EvaluatorConfig, seed: int | None = None) -> MonteCarloAgent:
        """Build an agent from an ``EvaluatorConfig``."""
        return cls(rollouts=config.rollouts, max_depth=config.max_depth, seed=seed)

    @property
    def rollouts(self) -> int:
        return self._rollouts

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @classmethod
    def _best_action(cls, scores: dict[Direction, float]) -> Direction:
        """
        Choose the direction with the highest average score.

        Ties are broken in favour of the earliest direction (up, down, left, right), which is also the fallback
        when no direction can move.
        """
        best, best_score = Direction.UP, float('-inf')
        for direction in Direction:
            if scores[direction] > best_score:
                best, best_score = direction, scores[direction]
        return best

    def evaluate_directions(self, state: ndarray) -> dict[Direction, float]:
        """
        Average rollout score of each direction.

        Parameters
        ----------
        state : ndarray
            The current game state. Not modified.

        Returns
        -------
        dict[Direction, float]
            The average score of each direction; 0 for directions that do not move the board.
        """
        return {
            direction: evaluate_direction(
                state, direction, rollouts=self._rollouts, max_depth=self._max_depth, generator=self._generator
            )
            for direction in Direction
        }

    def choose_action(self, state: ndarray) -> Direction:
        """
        Choose the best direction using random rollouts.

        Parameters
        ----------
        state : ndarray
            The current game state.

        Returns
        -------
        Direction
            The chosen direction. On a terminal board every direction scores 0 and ``Direction.UP`` is returned, so
            callers should check ``is_terminal`` first.
        """
        scores = self.evaluate_directions(state)
        action = self._best_action(scores)
        logger.debug(
            'Rollout scores: %s -> %s',
            ', '.join(f'{direction.key}={score:.1f}' for direction, score in scores.items()),
            action.key,
        )
        return action
