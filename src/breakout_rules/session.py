"""
breakout_rules.session — Game session
======================================

The GameSession is what an engine adapter instantiates and drives.
It owns the current GameState snapshot, turns engine callbacks into
events, and applies the game-over check after each transition.

Usage
-----
    from breakout_rules import GameSession

    session = GameSession()
    session.on_pointer_down()          # launch
    session.on_block_hit(12)           # collision callback
    session.on_ball_out_of_bounds()    # bottom boundary callback
    session.on_frame()                 # once per render frame

    if session.consume_reset():
        ...  # put ball and paddle back at the start pose
"""

from __future__ import annotations
import logging
from typing import List, Optional

from ._core.events import (
    AllBlocksCleared,
    BallLost,
    BlockHit,
    Event,
    Launch,
    ResetGame,
    event_to_record,
)
from ._core.snapshot import build_hud_snapshot, format_hud_lines
from ._core.state import GameState
from ._core.state_machine import GameStateMachine
from .config import GameConfig
from .types import HudSnapshot

logger = logging.getLogger("breakout_rules.session")


class GameSession:
    """
    Owner of the current snapshot for one running game.

    Events must be dispatched from a single logical sequence (the
    engine's update thread); the session does no locking.

    Pass either ``config`` or a prebuilt ``machine``, not both; the
    machine carries its own config.

    Attributes:
        machine: The rules engine applying transitions
        reset_count: Number of resets (game over or round won) so far
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        machine: Optional[GameStateMachine] = None,
    ):
        if config is not None and machine is not None:
            raise ValueError("pass either config or machine, not both")
        self.machine = machine if machine is not None else GameStateMachine(config)
        self._state = self.machine.initial_state()
        self.reset_count = 0
        self._reset_pending = False

    @property
    def config(self) -> GameConfig:
        return self.machine.config

    @property
    def state(self) -> GameState:
        return self._state

    # ── Dispatch ─────────────────────────────────────────────

    def dispatch(self, event: Event) -> GameState:
        """
        Apply an event, then the game-over check.

        Args:
            event: The event to apply

        Returns:
            The new current state
        """
        previous = self._state
        self._state = self.machine.apply(previous, event)
        if self._state is not previous:
            description = _describe(event)
            logger.debug("Event %s applied", description, extra={"event": description})
        reason = _reset_reason(previous, event)
        if reason:
            self._mark_reset(reason)

        if self._state.is_game_over():
            logger.info(
                "Game over with score %d, resetting",
                self._state.score,
                extra={"score": self._state.score},
            )
            self._state = self.machine.apply(self._state, ResetGame())
            self._mark_reset("game_over")
        return self._state

    def dispatch_all(self, events: List[Event]) -> GameState:
        for event in events:
            self.dispatch(event)
        return self._state

    def reset(self) -> GameState:
        """Start a new game from the initial state."""
        return self.dispatch(ResetGame())

    # ── Engine hooks ─────────────────────────────────────────

    def on_pointer_down(self) -> GameState:
        """Launch the ball if it is resting on the paddle."""
        if self._state.ball_active:
            return self._state
        return self.dispatch(Launch())

    def on_ball_out_of_bounds(self) -> GameState:
        return self.dispatch(BallLost())

    def on_block_hit(self, key: int) -> GameState:
        return self.dispatch(BlockHit(key=key))

    def on_frame(self) -> GameState:
        """Per-frame check: restart the board once every block is gone."""
        if self._state.is_round_won():
            logger.info(
                "All blocks cleared with score %d",
                self._state.score,
                extra={"score": self._state.score},
            )
            return self.dispatch(AllBlocksCleared())
        return self._state

    # ── Reset signalling ─────────────────────────────────────

    def consume_reset(self) -> bool:
        """
        Return True once after each reset.

        The adapter uses this to move the ball and paddle back to their
        start pose.
        """
        pending, self._reset_pending = self._reset_pending, False
        return pending

    def _mark_reset(self, reason: str) -> None:
        self.reset_count += 1
        self._reset_pending = True
        logger.info(
            "Reset #%d (%s)",
            self.reset_count,
            reason,
            extra={"reset_reason": reason, "reset_count": self.reset_count},
        )

    # ── Snapshots ────────────────────────────────────────────

    def hud_snapshot(self) -> HudSnapshot:
        return build_hud_snapshot(self._state, self.config)

    def hud_lines(self) -> List[str]:
        return format_hud_lines(self._state, self.config.lives_label)


def _reset_reason(previous: GameState, event: Event) -> Optional[str]:
    """Name the reset ``event`` causes when applied to ``previous``, if any."""
    if isinstance(event, ResetGame):
        return "requested"
    if isinstance(event, AllBlocksCleared) and not previous.blocks:
        return "round_won"
    if isinstance(event, BallLost) and not previous.ball_active and previous.lives <= 0:
        return "lives_exhausted"
    return None


def _describe(event: Event) -> str:
    record = event_to_record(event)
    if "key" in record:
        return f"{record['type']}(key={record['key']})"
    return record["type"]
