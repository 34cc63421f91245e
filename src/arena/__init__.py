"""
Arena module for running series of games between computer players.
"""
from .arena import Arena, RandomPlayer

__all__ = ['Arena', 'RandomPlayer']
