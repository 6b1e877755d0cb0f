"""Round verifier — re-derives a jackpot round from its published record.

Four independent checks run against every record:
1. Server hash: SHA-256(server_seed) matches the pre-round commitment.
2. Client seed: the seed derived from the bets matches the claimed seed.
3. Result: the HMAC-derived result matches the claimed result to three
   decimal places.
4. Winner: the bet range containing the claimed result belongs to the
   claimed winner.

Every check runs even if an earlier one fails, so the report always
carries full diagnostics. The winner check uses the claimed result so
that a selection error is reported separately from a result error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from jackpot.crypto.client_seed import generate_client_seed
from jackpot.crypto.commitment import hash_string
from jackpot.crypto.result import calculate_result
from jackpot.engine.winner_selector import WinnerRange, select_winner, winner_ranges
from jackpot.models.round import RoundRecord

logger = logging.getLogger("jackpot.verifier")

CHECK_SERVER_HASH = "server_hash"
CHECK_CLIENT_SEED = "client_seed"
CHECK_RESULT = "result"
CHECK_WINNER = "winner"

CHECK_ORDER = (CHECK_SERVER_HASH, CHECK_CLIENT_SEED, CHECK_RESULT, CHECK_WINNER)


def format_result(value: float) -> str:
    """Three-decimal string form used to compare results."""
    return f"{value:.3f}"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one verification check.

    calculated is what the verifier derived; claimed is what the
    record states.
    """
    name: str
    passed: bool
    calculated: str
    claimed: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "calculated": self.calculated,
            "claimed": self.claimed,
        }


@dataclass(frozen=True)
class VerificationReport:
    """All check outcomes for one round plus the range diagnostics."""
    record: RoundRecord
    checks: tuple[CheckResult, ...]
    ranges: tuple[WinnerRange, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    def check(self, name: str) -> Optional[CheckResult]:
        for check in self.checks:
            if check.name == name:
                return check
        return None

    def failed_checks(self) -> list[str]:
        return [check.name for check in self.checks if not check.passed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "round_id": self.record.round_id,
            "round_number": self.record.round_number,
            "passed": self.passed,
            "checks": [check.to_dict() for check in self.checks],
            "ranges": [
                {
                    "player_address": r.player_address,
                    "range_start": r.range_start,
                    "range_end": r.range_end,
                    "percentage": r.percentage,
                    "amount": r.amount,
                    "is_winner": r.is_winner,
                }
                for r in self.ranges
            ],
        }


class RoundVerifier:
    """Runs the four fairness checks against a round record.

    Usage:
        verifier = RoundVerifier()
        report = verifier.verify(record)
        if not report.passed:
            print(report.failed_checks())
    """

    def verify(self, record: RoundRecord) -> VerificationReport:
        checks = (
            self.check_server_hash(record),
            self.check_client_seed(record),
            self.check_result(record),
            self.check_winner(record),
        )
        for check in checks:
            if check.passed:
                logger.debug("round %s: %s check passed", record.round_id, check.name)
            else:
                logger.warning(
                    "round %s: %s mismatch (calculated=%s claimed=%s)",
                    record.round_id, check.name, check.calculated, check.claimed,
                )

        report = VerificationReport(
            record=record,
            checks=checks,
            ranges=tuple(winner_ranges(record.bets, record.result)),
        )
        logger.info(
            "round %s verification %s",
            record.round_id, "passed" if report.passed else "failed",
        )
        return report

    def check_server_hash(self, record: RoundRecord) -> CheckResult:
        calculated = hash_string(record.server_seed)
        return CheckResult(
            name=CHECK_SERVER_HASH,
            passed=calculated == record.server_hash,
            calculated=calculated,
            claimed=record.server_hash,
        )

    def check_client_seed(self, record: RoundRecord) -> CheckResult:
        calculated = generate_client_seed(record.bets)
        return CheckResult(
            name=CHECK_CLIENT_SEED,
            passed=calculated == record.client_seed,
            calculated=calculated,
            claimed=record.client_seed,
        )

    def check_result(self, record: RoundRecord) -> CheckResult:
        calculated = format_result(calculate_result(
            record.server_seed,
            record.client_seed,
            record.round_number,
            record.previous_hash,
        ))
        claimed = format_result(record.result)
        return CheckResult(
            name=CHECK_RESULT,
            passed=calculated == claimed,
            calculated=calculated,
            claimed=claimed,
        )

    def check_winner(self, record: RoundRecord) -> CheckResult:
        calculated = select_winner(record.bets, record.result)
        return CheckResult(
            name=CHECK_WINNER,
            passed=calculated == record.winner_address,
            calculated=calculated,
            claimed=record.winner_address,
        )


def verify_round(record: RoundRecord) -> VerificationReport:
    """Verify a round record with a default RoundVerifier."""
    return RoundVerifier().verify(record)
