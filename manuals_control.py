# -*- coding: utf-8 -*-
"""
Play 2048 Game

Arrow keys move the tiles, ``a`` toggles the AI player, ``backspace`` starts a new game and ``escape`` quits.
"""
import logging
from typing import Any

from tilemerge.addons import AutoplayConfig, EvaluatorConfig
from tilemerge.control import AutoPlayer
from tilemerge.envs import TwentyFortyEight
from tilemerge.monte_carlo import MonteCarloAgent
from tilemerge.utils import WindowBoard


def redraw(envs: TwentyFortyEight, window: WindowBoard, status: str = ""):
    """
    Redraw the game board.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    window: WindowBoard
        Class to draw the game board

    status: str
        Message shown next to the score
    """
    if envs.is_finished:
        status = "Game over"
    window.show_image(envs.board, score=envs.score, status=status)


def reset(envs: TwentyFortyEight, window: WindowBoard, player: AutoPlayer):
    """
    Stop the AI, reset and redraw the game board.
    """
    player.stop()
    with player.move_lock:
        envs.reset()
    redraw(envs, window)


def step(envs: TwentyFortyEight, window: WindowBoard, player: AutoPlayer, action: str):
    """
    Applied action into the game.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    window: WindowBoard
        Class to draw the game board

    player: AutoPlayer
        The AI scheduler, serializing manual and AI moves

    action: str
        Direction to apply
    """
    _, result, terminated = player.play(action)
    if result.moved:
        print(f"gained={result.score} score={envs.score}")

    redraw(envs, window)
    if terminated:
        print(f"Game over! Final score: {envs.score}")


def key_handler(envs: TwentyFortyEight, window: WindowBoard, player: AutoPlayer, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    window: WindowBoard
        Class to draw the game board

    player: AutoPlayer
        The AI scheduler

    event: Any
        event to handle
    """
    if event.key == "escape":
        player.stop()
        window.close()
        return None

    if event.key == "backspace":
        reset(envs, window, player)
        return None

    if event.key == "a":
        running = player.toggle()
        redraw(envs, window, status="AI" if running else "")
        return None

    if event.key in envs.ACTIONS and not envs.is_finished:
        step(envs, window, player, event.key)
        return None


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--rollouts", type=int, default=EvaluatorConfig.rollouts)
    parser.add_argument("--max-depth", type=int, default=EvaluatorConfig.max_depth)
    parser.add_argument("--interval", type=float, default=AutoplayConfig.interval)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    env = TwentyFortyEight(seed=args.seed)
    agent = MonteCarloAgent(rollouts=args.rollouts, max_depth=args.max_depth, seed=args.seed)
    window_board = WindowBoard(title="2048 Game", size=env.size)

    auto_player = AutoPlayer(
        env,
        agent,
        interval=args.interval,
        timer_factory=window_board.new_timer,
        on_step=lambda board, result: redraw(env, window_board, status="AI"),
        on_game_over=lambda score: print(f"Game over! Final score: {score}"),
    )
    window_board.register_key_handler(lambda event: key_handler(env, window_board, auto_player, event))

    redraw(env, window_board)

    # Blocking event loop
    window_board.show(block=True)
