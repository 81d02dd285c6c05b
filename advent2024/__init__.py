"""Advent of Code 2024 puzzle solutions and grid helpers."""

__version__ = "0.1.0"