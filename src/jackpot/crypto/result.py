"""Round result calculation.

The result is HMAC-SHA256(key=server_seed, msg=combined) reduced to a
value in [0.000, 100.000] with three-decimal granularity, where
combined is "server_seed:client_seed:round_number:previous_hash".
"""

from __future__ import annotations

import hashlib
import hmac

RESULT_MODULUS = 100_001
RESULT_SCALE = 1000.0


def combined_message(
    server_seed: str,
    client_seed: str,
    round_number: int,
    previous_hash: str,
) -> str:
    """Join the result inputs with single colons, in canonical order."""
    return f"{server_seed}:{client_seed}:{round_number}:{previous_hash}"


def calculate_result(
    server_seed: str,
    client_seed: str,
    round_number: int,
    previous_hash: str,
) -> float:
    """Compute the round's random outcome.

    Deterministic: the same four inputs always give the same value.
    """
    message = combined_message(server_seed, client_seed, round_number, previous_hash)
    tag = hmac.new(
        server_seed.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    residue = int.from_bytes(tag, "big") % RESULT_MODULUS
    return residue / RESULT_SCALE
