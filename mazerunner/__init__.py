"""A pygame maze game: carved mazes, patrolling enemies, difficulty levels and a saved high score."""

__version__ = "0.1.0"