"""
Othello: rules engine, game session and arena.
"""
