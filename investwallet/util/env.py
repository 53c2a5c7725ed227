from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

BINANCE_BASE = "https://api.binance.com"
DEFAULT_TIMEOUT_S = 5.0

ENV_BINANCE_BASE = "INVESTWALLET_BINANCE_BASE"
ENV_QUOTE_TIMEOUT = "INVESTWALLET_QUOTE_TIMEOUT"
ENV_LOG_LEVEL = "INVESTWALLET_LOG_LEVEL"


@dataclass(frozen=True)
class QuoteSettings:
    """Settings for the live quote source.

    Attributes:
        base_url: REST API root
        timeout_s: Per-request timeout in seconds
    """
    base_url: str = BINANCE_BASE
    timeout_s: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(cls) -> "QuoteSettings":
        """Build settings from INVESTWALLET_* environment variables.

        An unparsable or non-positive timeout falls back to the default.
        """
        base_url = os.environ.get(ENV_BINANCE_BASE) or BINANCE_BASE
        raw_timeout = os.environ.get(ENV_QUOTE_TIMEOUT)
        timeout_s = DEFAULT_TIMEOUT_S
        if raw_timeout:
            try:
                timeout_s = float(raw_timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid {ENV_QUOTE_TIMEOUT}={raw_timeout!r}")
            else:
                if timeout_s <= 0:
                    logger.warning(f"Ignoring non-positive {ENV_QUOTE_TIMEOUT}={raw_timeout!r}")
                    timeout_s = DEFAULT_TIMEOUT_S
        return cls(base_url=base_url.rstrip("/"), timeout_s=timeout_s)


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic root handler.

    The level defaults to INVESTWALLET_LOG_LEVEL, then WARNING.
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
