"""
ShiftHub - Workplace shift leaderboard.

Retrieves workplace and shift collections from a remote API and ranks
workplaces by the number of shifts recorded against them.
"""

__version__ = "0.1.0"
