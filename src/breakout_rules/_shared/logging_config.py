# Area: Shared
"""
breakout_rules._shared.logging_config — Structured logging setup
================================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Provides error logging and termination functions for boundary errors.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from .logging_formatters import JSONFormatter, QuietFilter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import BreakoutRulesError

# Package logger
logger = logging.getLogger("breakout_rules")


def setup_logging(
    log_file_path: Optional[str] = "breakout_rules.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the JSON log file. None disables file logging.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("breakout_rules")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(QuietFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_error(error: "BreakoutRulesError") -> None:
    """
    Log a boundary error in the structured format.

    Parameters
    ----------
    error : BreakoutRulesError
        The error to log (ConfigurationError or EventRecordError).
    """
    error_block = error.format_error_log()

    # Print to terminal (bypassing logger for exact formatting)
    print(error_block, file=sys.stderr)

    logger.error(
        f"{error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )


def log_and_terminate(error: "BreakoutRulesError", exit_code: int = 1) -> None:
    """
    Log the error and terminate the process.

    Parameters
    ----------
    error : BreakoutRulesError
        The error to log.
    exit_code : int
        Exit code for the process. Defaults to 1.
    """
    log_error(error)
    logger.critical("Process terminated due to invalid input")
    sys.exit(exit_code)
