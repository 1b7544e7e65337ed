"""Terminal chess, a falling-block game and Breakout."""

__version__ = "0.1.0"