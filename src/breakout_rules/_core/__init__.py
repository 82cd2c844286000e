# Area: Core
"""
Rules engine core: state snapshots, events, scoring and layout.

The state machine and snapshot builder depend on the package config and
are imported from their modules directly:

    from breakout_rules._core.state_machine import GameStateMachine
    from breakout_rules._core.snapshot import build_hud_snapshot
"""

from .enums import EventKind, ClearPolicy
from .state import Block, GameState
from .events import (
    Event,
    Launch,
    BallLost,
    BlockHit,
    AllBlocksCleared,
    ResetGame,
    parse_event,
    event_to_record,
)
from .layout import build_canonical_layout
from .scoring import register_hit, streak_threshold

__all__ = [
    "EventKind",
    "ClearPolicy",
    "Block",
    "GameState",
    "Event",
    "Launch",
    "BallLost",
    "BlockHit",
    "AllBlocksCleared",
    "ResetGame",
    "parse_event",
    "event_to_record",
    "build_canonical_layout",
    "register_hit",
    "streak_threshold",
]
