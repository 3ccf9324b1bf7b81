# -*- coding: utf-8 -*-
"""
Evaluate the Monte Carlo move evaluator over full games.
"""
import logging
from collections import Counter
from typing import Dict, Optional

from tqdm import trange

from tilemerge.envs import TwentyFortyEight
from tilemerge.monte_carlo import MonteCarloAgent

logger = logging.getLogger(__name__)


def play_game(env: TwentyFortyEight, actor: MonteCarloAgent, max_moves: Optional[int] = None) -> int:
    """
    Play one game until no move is possible.

    Parameters
    ----------
    env : TwentyFortyEight
        The game environment, already reset.
    actor : MonteCarloAgent
        The agent choosing the moves.
    max_moves : int, optional
        Stop after this many moves.

    Returns
    -------
    int
        The number of moves played.
    """
    moves = 0
    while not env.is_finished and (max_moves is None or moves < max_moves):
        env.step(actor.choose_action(env.board))
        moves += 1
    return moves


def evaluate(
    length: int = 10, rollouts: int = 100, max_depth: int = 10, seed: Optional[int] = None
) -> Dict[int, int]:
    """
    Play several games with the Monte Carlo agent.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    rollouts : int, optional
        Simulations per direction (default is 100).
    max_depth : int, optional
        Random moves per simulation (default is 10).
    seed : int, optional
        Seed shared by the environment and the agent.

    Returns
    -------
    Dict[int, int]
        How many games ended with each highest tile.
    """
    env = TwentyFortyEight(seed=seed)
    actor = MonteCarloAgent(rollouts=rollouts, max_depth=max_depth, seed=seed)
    score = []

    with trange(length) as period:
        for num in period:
            env.reset()
            period.set_description(f"Evaluation: {num + 1}")

            # ##: Play a game.
            moves = play_game(env, actor)
            period.set_postfix(score=env.score, max=env.max_tile)
            logger.info("Game %d: score=%d max=%d moves=%d", num + 1, env.score, env.max_tile, moves)

            # ##: Save max cells.
            score.append(env.max_tile)

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--rollouts", type=int, default=100)
    parser.add_argument("--max-depth", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    result = evaluate(length=args.games, rollouts=args.rollouts, max_depth=args.max_depth, seed=args.seed)
    print(f"Monte Carlo evaluation ({args.games} games), highest tiles: {result}")
