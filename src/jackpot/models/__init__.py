"""Core data models for jackpot round verification."""

from jackpot.models.round import Bet, RoundRecord

__all__ = ["Bet", "RoundRecord"]
