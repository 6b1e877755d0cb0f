"""Runtime settings for the verifier CLI.

Values come from the process environment, after loading a .env file
from the working directory if one exists.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_CURRENCY = "TON"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Presentation and logging settings. None of these affect verification."""
    currency: str = DEFAULT_CURRENCY
    log_level: str = DEFAULT_LOG_LEVEL
    no_color: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        if env is None:
            env = os.environ
        return cls(
            currency=env.get("JACKPOT_CURRENCY") or DEFAULT_CURRENCY,
            log_level=(env.get("JACKPOT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            no_color=env.get("JACKPOT_NO_COLOR", "").strip().lower() in _TRUTHY,
        )


def load_settings() -> Settings:
    """Load .env (without overriding existing variables) and read settings."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings.from_env()


def configure_logging(level: str) -> logging.Logger:
    """Route log records to stderr and set the jackpot logger's level.

    The root handler is only installed if the host application has not
    configured logging already.
    """
    logging.basicConfig(format=_LOG_FORMAT, datefmt="%H:%M:%S")
    logger = logging.getLogger("jackpot")
    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.WARNING)
    return logger
