"""
2048 grid engine with a Monte Carlo move assistant.
"""

__version__ = "0.1.0"
