"""Flowday - a daily mood journal of emojis, colors and songs."""

__version__ = "0.1.0"
