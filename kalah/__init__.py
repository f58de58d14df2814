"""
Kalah - Rule engine for the two-player sowing game.

The engine owns every stone count and provides:
- Observable pits and stores with one level of undo
- The select -> commit / undo-once turn protocol
- Sowing, capture, and extra-turn arithmetic
- End-of-game detection
"""

__version__ = "0.1.0"
