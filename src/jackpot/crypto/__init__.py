"""Cryptographic primitives — server commitment, client seed, round result."""

from jackpot.crypto.commitment import hash_string
from jackpot.crypto.client_seed import generate_client_seed, sort_bets
from jackpot.crypto.result import calculate_result

__all__ = ["hash_string", "generate_client_seed", "sort_bets", "calculate_result"]
