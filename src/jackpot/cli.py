"""Jackpot CLI — command-line interface for round verification.

Usage:
    python -m jackpot.cli verify verification_data.json
    python -m jackpot.cli verify '{"success": true, "round_id": "...", ...}'
    python -m jackpot.cli verify verification_data.json --json
    python -m jackpot.cli hash <server_seed>
    python -m jackpot.cli client-seed verification_data.json
    python -m jackpot.cli ranges verification_data.json --result 42.5

Verification data is published by the operator for each closed round.

Exit codes: 0 passed, 1 verification failed, 2 bad input.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from jackpot.config import Settings, configure_logging, load_settings
from jackpot.crypto.client_seed import generate_client_seed
from jackpot.crypto.commitment import hash_string
from jackpot.engine.verifier import RoundVerifier
from jackpot.engine.winner_selector import winner_ranges
from jackpot.errors import JackpotError
from jackpot.loader import ensure_verifiable, load_record
from jackpot.report import make_console, render_ranges, render_report, report_json

logger = logging.getLogger("jackpot.cli")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INPUT_ERROR = 2


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = load_settings()
    overrides = {}
    if args.currency:
        overrides["currency"] = args.currency
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    if args.no_color:
        overrides["no_color"] = True
    return dataclasses.replace(settings, **overrides)


def cmd_verify(args: argparse.Namespace, settings: Settings) -> int:
    record = ensure_verifiable(load_record(args.source))
    report = RoundVerifier().verify(record)
    if args.json:
        print(report_json(report))
    else:
        render_report(report, make_console(settings), settings)
    return EXIT_OK if report.passed else EXIT_FAILED


def cmd_hash(args: argparse.Namespace, settings: Settings) -> int:
    print(hash_string(args.seed))
    return EXIT_OK


def cmd_client_seed(args: argparse.Namespace, settings: Settings) -> int:
    record = load_record(args.source)
    print(generate_client_seed(record.bets))
    return EXIT_OK


def cmd_ranges(args: argparse.Namespace, settings: Settings) -> int:
    record = load_record(args.source)
    result = record.result if args.result is None else args.result
    render_ranges(winner_ranges(record.bets, result), result, make_console(settings), settings)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jackpot-verify",
        description="Verify provably fair jackpot rounds",
    )
    parser.add_argument("--currency", help="Currency label for amounts (default: TON)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "debug", "info", "warning", "error"],
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    sub = parser.add_subparsers(dest="command")

    # verify
    p_verify = sub.add_parser("verify", help="Verify a round from its verification data")
    p_verify.add_argument("source", help="Path to a JSON file, or the JSON string itself")
    p_verify.add_argument("--json", action="store_true", help="Print the report as JSON")

    # hash
    p_hash = sub.add_parser("hash", help="Print the SHA-256 commitment of a server seed")
    p_hash.add_argument("seed", help="Server seed")

    # client-seed
    p_seed = sub.add_parser("client-seed", help="Derive the client seed from a round's bets")
    p_seed.add_argument("source", help="Path to a JSON file, or the JSON string itself")

    # ranges
    p_ranges = sub.add_parser("ranges", help="Show each bet's winning range")
    p_ranges.add_argument("source", help="Path to a JSON file, or the JSON string itself")
    p_ranges.add_argument(
        "--result", type=float, default=None,
        help="Result to place on the ranges (default: the record's claimed result)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    settings = _settings_from_args(args)
    configure_logging(settings.log_level)

    commands = {
        "verify": cmd_verify,
        "hash": cmd_hash,
        "client-seed": cmd_client_seed,
        "ranges": cmd_ranges,
    }

    handler = commands.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        return handler(args, settings)
    except JackpotError as exc:
        logger.debug("command %s aborted: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
