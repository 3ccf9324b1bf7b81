"""
Configuration for the move evaluator and the autoplay scheduler.
"""

from dataclasses import dataclass


@dataclass
class EvaluatorConfig:
    """
    Monte Carlo evaluator configuration.

    Attributes
    ----------
    rollouts : int
        Number of simulations run for each of the four directions.
    max_depth : int
        Maximum number of random moves played after the candidate move.
    """

    rollouts: int = 100
    max_depth: int = 10

    def __post_init__(self):
        if self.rollouts < 1:
            raise ValueError(f'rollouts must be >= 1, got {self.rollouts}')
        if self.max_depth < 0:
            raise ValueError(f'max_depth must be >= 0, got {self.max_depth}')


@dataclass
class AutoplayConfig:
    """
    Autoplay configuration.

    Attributes
    ----------
    interval : float
        Seconds between two AI moves.
    """

    interval: float = 0.5

    def __post_init__(self):
        if self.interval <= 0:
            raise ValueError(f'interval must be > 0, got {self.interval}')

    @property
    def interval_ms(self) -> int:
        """Interval in milliseconds, as expected by timers."""
        return max(1, int(round(self.interval * 1000)))
