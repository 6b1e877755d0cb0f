"""Verification engine — winner selection and round verification."""

from jackpot.engine.winner_selector import WinnerRange, select_winner, winner_ranges
from jackpot.engine.verifier import (
    CheckResult,
    RoundVerifier,
    VerificationReport,
    verify_round,
)

__all__ = [
    "WinnerRange",
    "select_winner",
    "winner_ranges",
    "CheckResult",
    "RoundVerifier",
    "VerificationReport",
    "verify_round",
]
