"""Texas hold'em poker against random computer opponents, with a curses interface."""

__version__ = "0.1.0"