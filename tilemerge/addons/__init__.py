"""
Configuration dataclasses for the move evaluator and the autoplay scheduler.
"""
from .config import AutoplayConfig, EvaluatorConfig

__all__ = ["AutoplayConfig", "EvaluatorConfig"]
