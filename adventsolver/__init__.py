"""Solvers for Advent of Code 2024 and 2025 puzzles, one module per day."""

__version__ = "0.1.0"