"""Client seed derivation from the round's bets.

The client seed is a SHA-256 digest over every bet in canonical order.
Bets are sorted by player address so that the seed depends only on the
set of bets, not on the order the operator lists them in. The same
ordering drives winner range assignment.
"""

from __future__ import annotations

import hashlib
from typing import Iterable

from jackpot.models.round import Bet


def sort_bets(bets: Iterable[Bet]) -> list[Bet]:
    """Return a new list of bets sorted ascending by player address.

    The sort is stable: bets sharing an address keep their input order.
    """
    return sorted(bets, key=lambda bet: bet.player_address)


def format_amount(amount: float) -> str:
    """Fixed-point amount with exactly three decimals, as fed to the hash."""
    return f"{amount:.3f}"


def generate_client_seed(bets: Iterable[Bet]) -> str:
    """Derive the client seed from a collection of bets.

    For each bet in canonical order the hash is fed the address, the
    formatted amount and the gift id, with no separators.
    """
    digest = hashlib.sha256()
    for bet in sort_bets(bets):
        digest.update(bet.player_address.encode("utf-8"))
        digest.update(format_amount(bet.amount).encode("utf-8"))
        digest.update(bet.gift_id.encode("utf-8"))
    return digest.hexdigest()
