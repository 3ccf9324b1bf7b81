"""
Driver-side control of a game session: paced automatic play.
"""

from .autoplay import AutoPlayer, ThreadTimer

__all__ = ["AutoPlayer", "ThreadTimer"]
