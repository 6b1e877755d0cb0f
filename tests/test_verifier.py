"""Tests for the round verifier — all four checks, separately and together."""

import hashlib

import pytest

from jackpot.engine.verifier import (
    CHECK_CLIENT_SEED,
    CHECK_ORDER,
    CHECK_RESULT,
    CHECK_SERVER_HASH,
    CHECK_WINNER,
    RoundVerifier,
    verify_round,
)
from jackpot.models.round import RoundRecord


def _record(data: dict, **overrides) -> RoundRecord:
    return RoundRecord.from_dict({**data, **overrides})


class TestValidRound:
    def test_all_checks_pass(self, round_data) -> None:
        report = verify_round(_record(round_data))
        assert report.passed
        assert report.failed_checks() == []
        assert tuple(c.name for c in report.checks) == CHECK_ORDER

    def test_ranges_attached(self, round_data) -> None:
        report = verify_round(_record(round_data))
        assert [r.player_address for r in report.ranges] == ["addrA", "addrB"]
        winners = [r.player_address for r in report.ranges if r.is_winner]
        assert winners == [round_data["winner_address"]]

    def test_repeatable(self, round_data) -> None:
        record = _record(round_data)
        first = verify_round(record)
        second = verify_round(record)
        assert first.checks == second.checks


class TestServerHashCheck:
    def test_scenario_abc123(self) -> None:
        record = RoundRecord.from_dict({
            "server_seed": "abc123",
            "server_hash": hashlib.sha256(b"abc123").hexdigest(),
        })
        assert RoundVerifier().check_server_hash(record).passed

    def test_mismatch_shows_both_values(self, round_data) -> None:
        record = _record(round_data, server_hash="0" * 64)
        check = RoundVerifier().check_server_hash(record)
        assert not check.passed
        assert check.calculated == hashlib.sha256(b"abc123").hexdigest()
        assert check.claimed == "0" * 64

    def test_failure_does_not_short_circuit(self, round_data) -> None:
        report = verify_round(_record(round_data, server_hash="0" * 64))
        assert not report.passed
        assert len(report.checks) == 4
        assert report.failed_checks() == [CHECK_SERVER_HASH]


class TestClientSeedCheck:
    def test_tampered_amount_fails(self, round_data) -> None:
        bets = [dict(b) for b in round_data["bets"]]
        bets[0]["amount"] = bets[0]["amount"] + 0.001
        report = verify_round(_record(round_data, bets=bets))
        assert CHECK_CLIENT_SEED in report.failed_checks()
        assert report.check(CHECK_RESULT).passed

    def test_claimed_seed_mismatch(self, round_data) -> None:
        report = verify_round(_record(round_data, client_seed="deadbeef"))
        check = report.check(CHECK_CLIENT_SEED)
        assert not check.passed
        assert check.claimed == "deadbeef"
        assert check.calculated == round_data["client_seed"]


class TestResultCheck:
    def test_three_decimal_tolerance(self, round_data) -> None:
        report = verify_round(_record(round_data, result=round_data["result"] + 0.0001))
        assert report.check(CHECK_RESULT).passed

    def test_mismatch(self, round_data) -> None:
        claimed = round(round_data["result"] + 0.5, 3) % 100
        report = verify_round(_record(round_data, result=claimed))
        check = report.check(CHECK_RESULT)
        assert not check.passed
        assert check.calculated == f"{round_data['result']:.3f}"
        assert check.claimed == f"{claimed:.3f}"


class TestWinnerCheck:
    def test_wrong_winner(self, round_data) -> None:
        other = "addrB" if round_data["winner_address"] == "addrA" else "addrA"
        report = verify_round(_record(round_data, winner_address=other))
        assert report.failed_checks() == [CHECK_WINNER]
        check = report.check(CHECK_WINNER)
        assert check.calculated == round_data["winner_address"]
        assert check.claimed == other

    @pytest.mark.parametrize("claimed_result, winner", [(50.0, "addrA"), (90.0, "addrB")])
    def test_uses_claimed_result(self, round_data, claimed_result: float, winner: str) -> None:
        record = _record(round_data, result=claimed_result, winner_address=winner)
        assert RoundVerifier().check_winner(record).passed

    def test_empty_bets(self, round_data) -> None:
        record = _record(round_data, bets=[], winner_address="")
        assert RoundVerifier().check_winner(record).passed
        assert verify_round(record).ranges == ()


class TestReport:
    def test_check_lookup_unknown(self, round_data) -> None:
        assert verify_round(_record(round_data)).check("nope") is None

    def test_to_dict(self, round_data) -> None:
        data = verify_round(_record(round_data)).to_dict()
        assert data["round_id"] == "round-0042"
        assert data["passed"] is True
        assert [c["name"] for c in data["checks"]] == list(CHECK_ORDER)
        assert len(data["ranges"]) == 2

    def test_mismatch_logged(self, round_data, caplog) -> None:
        with caplog.at_level("WARNING", logger="jackpot.verifier"):
            verify_round(_record(round_data, server_hash="0" * 64))
        assert "server_hash mismatch" in caplog.text
