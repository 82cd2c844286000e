"""
breakout_rules.cli — Command-line interface
============================================

Replays a scripted sequence of events through a GameSession and prints
the HUD after every event. Useful for checking scoring and reset rules
without an engine attached.

Usage:
    python -m breakout_rules --events events.json
    python -m breakout_rules --events events.json --config config.json
    python -m breakout_rules --events events.json --quiet --summary-only

Event script format (JSON list):
    [{"type": "LAUNCH"}, {"type": "BLOCK_HIT", "key": 0}, {"type": "BALL_LOST"}]

Configuration overrides can also come from the environment or a .env
file (see breakout_rules.config).
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ._core.events import Event, parse_event
from ._shared.logging_config import log_and_terminate, setup_logging
from ._shared.logging_formatters import enable_quiet_mode
from .config import load_config
from .errors import BreakoutRulesError, EventRecordError
from .session import GameSession

logger = logging.getLogger("breakout_rules.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Breakout rules engine - replay an event script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m breakout_rules --events events.json
  python -m breakout_rules --events events.json --config config.json
  BREAKOUT_INITIAL_LIVES=5 python -m breakout_rules --events events.json
        """,
    )

    parser.add_argument(
        "--events",
        type=str,
        required=True,
        help="Path to a JSON list of event records",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to a .env file with BREAKOUT_* overrides",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write JSON logs to this file",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every applied event",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress terminal logs (HUD output is still printed)",
    )

    parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Print only the final JSON summary",
    )

    return parser.parse_args(argv)


def load_events(events_path: str) -> List[Event]:
    """
    Load and decode an event script.

    Raises:
        EventRecordError: If the file is unreadable or a record is malformed
    """
    path = Path(events_path)
    if not path.exists():
        raise EventRecordError(str(path), "event script not found")
    try:
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        raise EventRecordError(str(path), f"invalid JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise EventRecordError(str(path), f"cannot read event script: {e}") from e

    if not isinstance(records, list):
        raise EventRecordError(records, "event script must be a JSON list")

    events = []
    for index, record in enumerate(records):
        try:
            events.append(parse_event(record))
        except EventRecordError as e:
            raise EventRecordError(e.record, e.reason, index=index) from e
    return events


def build_summary(session: GameSession, events_applied: int) -> Dict[str, Any]:
    snapshot = session.hud_snapshot()
    return {
        "events_applied": events_applied,
        "resets": session.reset_count,
        "lives": snapshot["lives"],
        "score": snapshot["score"],
        "bonus_multiplier": snapshot["bonus_multiplier"],
        "current_streak": snapshot["current_streak"],
        "ball_active": snapshot["ball_active"],
        "blocks_remaining": snapshot["blocks_remaining"],
    }


def replay(
    session: GameSession,
    events: List[Event],
    echo: bool = True,
) -> Dict[str, Any]:
    """Dispatch every event, running the frame check after each one."""
    for index, event in enumerate(events, start=1):
        session.dispatch(event)
        session.on_frame()
        if echo:
            print(f"[{index:>4}] " + " | ".join(session.hud_lines()))
    return build_summary(session, len(events))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(
        log_file_path=args.log_file,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    if args.quiet:
        enable_quiet_mode()

    try:
        config = load_config(args.config, env_file=args.env_file)
        events = load_events(args.events)
    except BreakoutRulesError as e:
        log_and_terminate(e)

    logger.info("Replaying %d events", len(events))
    session = GameSession(config=config)
    summary = replay(session, events, echo=not args.summary_only)
    print(json.dumps(summary, indent=2))
    return 0

