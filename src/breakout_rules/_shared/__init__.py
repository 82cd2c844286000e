# Area: Shared
"""
Shared utilities used by the session and the CLI.

This package contains:
- Logging configuration (terminal + JSON file)
- Quiet mode switches for direct HUD output
"""

from .logging_config import (
    setup_logging,
    log_and_terminate,
    log_error,
)
from .logging_formatters import (
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)

__all__ = [
    "setup_logging",
    "log_and_terminate",
    "log_error",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
]
