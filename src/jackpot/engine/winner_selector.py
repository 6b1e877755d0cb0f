"""Winner selection — maps a round result onto weighted bet ranges.

Bets are laid out in canonical order (sorted by player address) across
[0, 100). Each bet owns a half-open interval whose width is its share
of the pot in percent. The bet whose interval contains the result wins.

If no interval claims the result (the result sits exactly on the top
boundary, floating-point drift leaves a sliver uncovered, or the pot is
zero) the last bet in canonical order wins. Whenever there is at least
one bet, exactly one bet wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from jackpot.crypto.client_seed import sort_bets
from jackpot.models.round import Bet


@dataclass(frozen=True)
class WinnerRange:
    """The interval one bet occupies on the [0, 100) line."""
    player_address: str
    range_start: float
    range_end: float
    percentage: float
    amount: float
    is_winner: bool

    def contains(self, result: float) -> bool:
        """Lower-inclusive, upper-exclusive membership."""
        return self.range_start <= result < self.range_end


def _layout(bets: Sequence[Bet]) -> list[tuple[Bet, float, float, float]]:
    """Lay sorted bets end to end. Returns (bet, start, end, percentage)."""
    # Plain left-to-right addition in canonical order; the builtin sum
    # compensates rounding on 3.12+ and can shift range edges.
    total = 0.0
    for bet in bets:
        total += bet.amount
    layout: list[tuple[Bet, float, float, float]] = []
    cursor = 0.0
    for bet in bets:
        percentage = (bet.amount / total) * 100.0 if total > 0 else 0.0
        end = cursor + percentage
        layout.append((bet, cursor, end, percentage))
        cursor = end
    return layout


def _winner_index(layout: Sequence[tuple[Bet, float, float, float]], result: float) -> int:
    for idx, (_, start, end, _) in enumerate(layout):
        if start <= result < end:
            return idx
    return len(layout) - 1


def winner_ranges(bets: Iterable[Bet], result: float) -> list[WinnerRange]:
    """Compute every bet's range and flag the one that wins at result."""
    layout = _layout(sort_bets(bets))
    if not layout:
        return []

    winner = _winner_index(layout, result)
    return [
        WinnerRange(
            player_address=bet.player_address,
            range_start=start,
            range_end=end,
            percentage=percentage,
            amount=bet.amount,
            is_winner=(idx == winner),
        )
        for idx, (bet, start, end, percentage) in enumerate(layout)
    ]


def select_winner(bets: Iterable[Bet], result: float) -> str:
    """Return the player address that wins at result.

    Returns an empty string when there are no bets.
    """
    layout = _layout(sort_bets(bets))
    if not layout:
        return ""
    bet = layout[_winner_index(layout, result)][0]
    return bet.player_address
