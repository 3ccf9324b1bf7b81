"""
Tests for the evaluation script.
"""

from unittest import TestCase, main

from evaluate import evaluate, play_game
from tilemerge.envs import TwentyFortyEight
from tilemerge.monte_carlo import MonteCarloAgent


class TestEvaluate(TestCase):
    def test_play_game_limit(self):
        """play_game stops after the requested number of moves."""
        env = TwentyFortyEight(seed=0)
        moves = play_game(env, MonteCarloAgent(rollouts=1, max_depth=1, seed=0), max_moves=3)

        self.assertEqual(moves, 3)
        self.assertGreater(env.score + env.max_tile, 0)

    def test_evaluate_full_game(self):
        """A full game is played and its highest tile recorded."""
        result = evaluate(length=1, rollouts=1, max_depth=1, seed=0)

        self.assertEqual(sum(result.values()), 1)
        tile = next(iter(result))
        self.assertGreaterEqual(tile, 4)
        self.assertEqual(tile & (tile - 1), 0)


if __name__ == '__main__':
    main()
