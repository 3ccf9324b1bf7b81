"""
Paced automatic play.

``AutoPlayer`` asks a move evaluator for a direction at a fixed interval and applies it to a game session. Timers
follow the matplotlib ``TimerBase`` interface (``add_callback``, ``start``, ``stop``), so the same scheduler runs on a
background thread (``ThreadTimer``) or on a figure's event loop (``figure.canvas.new_timer``).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Protocol

from numpy import ndarray

from tilemerge.addons.config import AutoplayConfig
from tilemerge.core import Direction, MoveResult
from tilemerge.envs import TwentyFortyEight

logger = logging.getLogger(__name__)


class Timer(Protocol):
    """Subset of ``matplotlib.backend_bases.TimerBase`` used by the scheduler."""

    def add_callback(self, func: Callable, *args: Any, **kwargs: Any) -> Callable: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...


class Agent(Protocol):
    def choose_action(self, state: ndarray) -> Direction: ...


class ThreadTimer:
    """
    A repeating timer backed by a daemon thread.

    Parameters
    ----------
    interval : int
        Milliseconds between two calls of the callbacks.
    """

    def __init__(self, interval: int):
        self.interval = interval
        self.callbacks: list[tuple[Callable, tuple, dict]] = []
        self._thread: threading.Thread | None = None
        self._stopped: threading.Event | None = None

    def add_callback(self, func: Callable, *args: Any, **kwargs: Any) -> Callable:
        self.callbacks.append((func, args, kwargs))
        return func

    def start(self) -> None:
        if self._stopped is not None and not self._stopped.is_set():
            return

        # ##>: Each run gets its own event so a thread stopped from inside a callback cannot be revived.
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(self._stopped,), daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._stopped is None:
            return
        self._stopped.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def _run(self, stopped: threading.Event) -> None:
        while not stopped.wait(self.interval / 1000):
            for func, args, kwargs in list(self.callbacks):
                func(*args, **kwargs)


class AutoPlayer:
    """
    Scheduler playing evaluator moves on a game session.

    Parameters
    ----------
    env : TwentyFortyEight
        The game session to play.
    agent : Agent
        Any object with a ``choose_action(state) -> Direction`` method.
    interval : float, optional
        Seconds between two moves (default is 0.5).
    timer_factory : Callable[[int], Timer], optional
        Builds a timer from an interval in milliseconds. ``ThreadTimer`` by default.
    on_step : Callable[[ndarray, MoveResult], Any], optional
        Called after every AI move with the new board and the move result.
    on_game_over : Callable[[int], Any], optional
        Called with the final score when the game is over.

    Notes
    -----
    Ticks never overlap: a tick that fires while the previous one is still being applied is skipped. Every change of
    the session goes through ``move_lock``; drivers playing manual moves while the scheduler runs use ``play``, which
    waits for the tick in progress.
    """

    def __init__(
        self,
        env: TwentyFortyEight,
        agent: Agent,
        interval: float = 0.5,
        timer_factory: Callable[[int], Timer] | None = None,
        on_step: Callable[[ndarray, MoveResult], Any] | None = None,
        on_game_over: Callable[[int], Any] | None = None,
    ):
        self._env = env
        self._agent = agent
        self._config = AutoplayConfig(interval=interval)
        self._timer_factory = timer_factory if timer_factory is not None else ThreadTimer
        self._on_step = on_step
        self._on_game_over = on_game_over

        self._timer: Timer | None = None
        self._move_lock = threading.Lock()

    @property
    def interval(self) -> float:
        return self._config.interval

    @property
    def running(self) -> bool:
        """Whether AI moves are currently scheduled."""
        return self._timer is not None

    def start(self) -> None:
        """Start scheduling AI moves. Does nothing if already running."""
        if self.running:
            return
        timer = self._timer_factory(self._config.interval_ms)
        timer.add_callback(self.tick)
        self._timer = timer
        timer.start()
        logger.info('Autoplay started (every %.2fs)', self.interval)

    def stop(self) -> None:
        """Stop scheduling AI moves. A move already being applied completes."""
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.stop()
        logger.info('Autoplay stopped')

    @property
    def move_lock(self) -> threading.Lock:
        """Lock held while a move is applied to the session."""
        return self._move_lock

    def play(self, direction: Direction | int | str) -> tuple[ndarray, MoveResult, bool]:
        """
        Apply a manual move to the session, waiting for an AI move in progress.

        Parameters
        ----------
        direction : Direction | int | str
            The move to apply.

        Returns
        -------
        tuple[ndarray, MoveResult, bool]
            The session's ``step`` result.
        """
        with self._move_lock:
            board, result, done = self._env.step(direction)
            if done and self.running:
                self._game_over()
        return board, result, done

    def toggle(self) -> bool:
        """Start if stopped, stop if running. Returns the new running state."""
        if self.running:
            self.stop()
        else:
            self.start()
        return self.running

    def tick(self) -> None:
        """
        Play one AI move.

        Ignored when the scheduler is stopped or when the previous tick is still running. Stops the scheduler when the
        game is over, before or after the move.
        """
        # ##: Returns None: matplotlib timers drop callbacks returning 0 or False.
        if not self.running:
            return
        if not self._move_lock.acquire(blocking=False):
            logger.debug('Another move still running, tick skipped')
            return

        try:
            if self._env.is_finished:
                self._game_over()
                return

            direction = self._agent.choose_action(self._env.board)
            board, result, done = self._env.step(direction)
            if self._on_step is not None:
                self._on_step(board, result)
            if done:
                self._game_over()
        finally:
            self._move_lock.release()

    def _game_over(self) -> None:
        self.stop()
        logger.info('Game over, final score: %d', self._env.score)
        if self._on_game_over is not None:
            self._on_game_over(self._env.score)
