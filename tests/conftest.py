"""Shared fixtures: a self-consistent round record built from first principles."""

from __future__ import annotations

import hashlib
import hmac
import json
from pathlib import Path
from typing import Any

import pytest

SERVER_SEED = "abc123"
PREVIOUS_HASH = "f" * 64
ROUND_NUMBER = 42

BETS = [
    {"player_address": "addrB", "amount": 10.0, "gift_id": "g1"},
    {"player_address": "addrA", "amount": 20.0, "gift_id": "g2"},
]


def reference_client_seed(bets: list[dict[str, Any]]) -> str:
    h = hashlib.sha256()
    for bet in sorted(bets, key=lambda b: b["player_address"]):
        h.update(bet["player_address"].encode())
        h.update(("%.3f" % bet["amount"]).encode())
        h.update(bet["gift_id"].encode())
    return h.hexdigest()


def reference_result(server_seed: str, client_seed: str, round_number: int, previous_hash: str) -> float:
    msg = f"{server_seed}:{client_seed}:{round_number}:{previous_hash}".encode()
    tag = hmac.new(server_seed.encode(), msg, hashlib.sha256).digest()
    return (int(tag.hex(), 16) % 100001) / 1000.0


@pytest.fixture
def round_data() -> dict[str, Any]:
    client_seed = reference_client_seed(BETS)
    result = reference_result(SERVER_SEED, client_seed, ROUND_NUMBER, PREVIOUS_HASH)
    # addrA holds 20 of 30, so it owns [0, 66.666...)
    winner = "addrA" if result < 200.0 / 3.0 else "addrB"
    return {
        "success": True,
        "round_id": "round-0042",
        "round_number": ROUND_NUMBER,
        "server_seed": SERVER_SEED,
        "server_hash": hashlib.sha256(SERVER_SEED.encode()).hexdigest(),
        "client_seed": client_seed,
        "previous_hash": PREVIOUS_HASH,
        "bets": [dict(b) for b in BETS],
        "result": result,
        "winner_address": winner,
        "total_pot": 30.0,
    }


@pytest.fixture
def round_file(tmp_path: Path, round_data: dict[str, Any]) -> Path:
    path = tmp_path / "verification_data.json"
    path.write_text(json.dumps(round_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("JACKPOT_CURRENCY", "JACKPOT_LOG_LEVEL", "JACKPOT_NO_COLOR"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def reference() -> Any:
    """Independent reimplementation of the seed and result derivations."""
    class _Reference:
        client_seed = staticmethod(reference_client_seed)
        result = staticmethod(reference_result)
    return _Reference
