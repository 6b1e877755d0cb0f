"""Jackpot — independent verification of provably fair jackpot rounds."""

__version__ = "0.1.0"
