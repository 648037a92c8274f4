"""Backtracking solver for skyscraper puzzles of size 4 to 9."""

__version__ = "0.1.0"