"""Server seed commitment.

Before a round opens the operator publishes SHA-256(server_seed). The
seed itself is revealed only after the round closes, so anyone can
confirm it was fixed in advance.
"""

from __future__ import annotations

import hashlib


def hash_string(value: str) -> str:
    """Compute the SHA-256 hex digest of a UTF-8 string (64 lowercase chars)."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()
