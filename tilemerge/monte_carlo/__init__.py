# -*- coding: utf-8 -*-
"""
Module containing the Monte Carlo move evaluator for Game 2048.
"""
from .actor import MonteCarloAgent
from .search import evaluate_direction, monotonicity_score, simulate, static_evaluate

__all__ = ["MonteCarloAgent", "evaluate_direction", "monotonicity_score", "simulate", "static_evaluate"]
