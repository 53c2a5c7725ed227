"""Environment-driven settings and logging setup."""

from investwallet.util.env import QuoteSettings, configure_logging

__all__ = ["QuoteSettings", "configure_logging"]
