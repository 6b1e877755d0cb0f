"""Jackpot round audit record.

A round record is what the operator publishes after a round closes:
the revealed server seed, the commitments made before the round, every
bet that entered the pot, and the claimed outcome. The record is
immutable once loaded and is consumed whole by the verifier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from jackpot.errors import RecordFormatError


@dataclass(frozen=True)
class Bet:
    """A single entry in the pot.

    The same player_address may appear more than once; each entry is
    its own range in winner selection.
    """
    player_address: str
    amount: float
    gift_id: str

    @classmethod
    def from_dict(cls, data: Any) -> Bet:
        if not isinstance(data, dict):
            raise RecordFormatError(f"bet must be an object, got {type(data).__name__}")
        return cls(
            player_address=_str_field(data, "player_address"),
            amount=_float_field(data, "amount"),
            gift_id=_str_field(data, "gift_id"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_address": self.player_address,
            "amount": self.amount,
            "gift_id": self.gift_id,
        }


@dataclass(frozen=True)
class RoundRecord:
    """Published verification data for one jackpot round.

    server_hash is the commitment published before the round;
    server_seed is revealed after it. previous_hash chains the round to
    the one before it.
    """
    success: bool
    round_id: str
    round_number: int
    server_seed: str
    server_hash: str
    client_seed: str
    previous_hash: str
    bets: tuple[Bet, ...] = field(default_factory=tuple)
    result: float = 0.0
    winner_address: str = ""
    total_pot: float = 0.0
    error: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> RoundRecord:
        """Build a record from a decoded JSON object.

        Missing keys take the zero value of their type. Keys present
        with the wrong type raise RecordFormatError.
        """
        if not isinstance(data, dict):
            raise RecordFormatError(
                f"verification data must be a JSON object, got {type(data).__name__}"
            )

        raw_bets = data.get("bets")
        if raw_bets is None:
            raw_bets = []
        if not isinstance(raw_bets, list):
            raise RecordFormatError(f"bets must be a list, got {type(raw_bets).__name__}")

        success = data.get("success", False)
        if not isinstance(success, bool):
            raise RecordFormatError(f"success must be a boolean, got {success!r}")

        error = data.get("error")
        if error is not None and not isinstance(error, str):
            raise RecordFormatError(f"error must be a string, got {error!r}")

        bets: list[Bet] = []
        for idx, raw in enumerate(raw_bets):
            try:
                bets.append(Bet.from_dict(raw))
            except RecordFormatError as exc:
                raise RecordFormatError(f"bets[{idx}]: {exc}") from exc

        return cls(
            success=success,
            round_id=_str_field(data, "round_id"),
            round_number=_int_field(data, "round_number"),
            server_seed=_str_field(data, "server_seed"),
            server_hash=_str_field(data, "server_hash"),
            client_seed=_str_field(data, "client_seed"),
            previous_hash=_str_field(data, "previous_hash"),
            bets=tuple(bets),
            result=_float_field(data, "result"),
            winner_address=_str_field(data, "winner_address"),
            total_pot=_float_field(data, "total_pot"),
            error=error or None,
        )

    def bet_total(self) -> float:
        """Sum of all bet amounts, for comparison with total_pot."""
        total = 0.0
        for bet in self.bets:
            total += bet.amount
        return total

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "success": self.success,
            "round_id": self.round_id,
            "round_number": self.round_number,
            "server_seed": self.server_seed,
            "server_hash": self.server_hash,
            "client_seed": self.client_seed,
            "previous_hash": self.previous_hash,
            "bets": [bet.to_dict() for bet in self.bets],
            "result": self.result,
            "winner_address": self.winner_address,
            "total_pot": self.total_pot,
        }
        if self.error:
            data["error"] = self.error
        return data


def _str_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecordFormatError(f"{key} must be a string, got {value!r}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        # JSON \ud800-style escapes decode to lone surrogates.
        raise RecordFormatError(f"{key} is not valid UTF-8 text: {exc.reason}") from exc
    return value


def _int_field(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordFormatError(f"{key} must be an integer, got {value!r}")
    return value


def _float_field(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RecordFormatError(f"{key} must be a number, got {value!r}")
    return float(value)
