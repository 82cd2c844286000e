"""
breakout_rules — Brick-Breaker Rules Engine
============================================

Authoritative game-state rules for a brick-breaking arcade game:
lives, score, combo bonus and the remaining blocks. Rendering, physics
and input stay with the host engine, which drives the rules through
discrete events.

Quick Start (stateless):
    from breakout_rules import GameStateMachine, BlockHit, Launch
    machine = GameStateMachine()
    state = machine.initial_state()
    state = machine.apply(state, Launch())
    state = machine.apply(state, BlockHit(key=0))

Engine integration (session owns the snapshot):
    from breakout_rules import GameSession
    session = GameSession()
    session.on_pointer_down()
    session.on_block_hit(0)
    hud = session.hud_snapshot()

Type Definitions
----------------
    from breakout_rules import HudSnapshot, BlockView
"""

from .errors import (
    BreakoutRulesError,
    ConfigurationError,
    EventRecordError,
)
from .config import GameConfig, load_config, validate_config
from ._core.enums import EventKind, ClearPolicy
from ._core.state import Block, GameState
from ._core.events import (
    Event,
    Launch,
    BallLost,
    BlockHit,
    AllBlocksCleared,
    ResetGame,
    parse_event,
    event_to_record,
)
from ._core.state_machine import GameStateMachine
from ._core.snapshot import build_hud_snapshot, format_hud_lines
from ._shared.logging_config import setup_logging
from .session import GameSession
from .types import BlockView, HudSnapshot

__all__ = [
    # Main classes
    "GameStateMachine",
    "GameSession",
    "GameConfig",
    "load_config",
    "validate_config",
    # State
    "GameState",
    "Block",
    # Events
    "Event",
    "EventKind",
    "ClearPolicy",
    "Launch",
    "BallLost",
    "BlockHit",
    "AllBlocksCleared",
    "ResetGame",
    "parse_event",
    "event_to_record",
    # Snapshots
    "build_hud_snapshot",
    "format_hud_lines",
    "HudSnapshot",
    "BlockView",
    # Errors
    "BreakoutRulesError",
    "ConfigurationError",
    "EventRecordError",
    # Logging
    "setup_logging",
]
__version__ = "1.0.0"
