"""Exceptions raised by the input layer.

Verification mismatches are not errors: they are reported as failed
checks on a VerificationReport. Only problems that stop verification
from running at all are raised.
"""

from __future__ import annotations


class JackpotError(Exception):
    """Base class for all jackpot verifier errors."""


class RecordLoadError(JackpotError):
    """The verification record could not be read or decoded."""


class RecordFormatError(RecordLoadError):
    """The record decoded, but a field has the wrong shape."""


class RoundDataError(JackpotError):
    """The record reports that the operator could not produce round data."""
