"""
Minesweeper agents module.

Provides agents that play N-dimensional Minesweeper:
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
