# Area: Shared
"""
Shared utilities used by the game and the host.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    setup_logging_from_config,
    log_game_error,
    TerminalFormatter,
    JSONFormatter,
)

__all__ = [
    "setup_logging",
    "setup_logging_from_config",
    "log_game_error",
    "TerminalFormatter",
    "JSONFormatter",
]
