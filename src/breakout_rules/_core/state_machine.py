# Area: Core
"""
breakout_rules._core.state_machine — Game State Machine
=======================================================

Implements the transition table of the rules engine. Every event coming
from the engine adapter produces a brand-new GameState; the previous
snapshot is left untouched.

The transition function is total: unknown events and stale or duplicate
events (a hit on a block that is already gone, a clear signal while
blocks remain) return the input state unchanged.
"""

from dataclasses import replace
from typing import Any, Callable, Dict, Optional

from .enums import ClearPolicy, EventKind
from .events import Event
from .layout import build_canonical_layout
from .scoring import register_hit, reset_streak
from .state import GameState, is_block_key
from ..config import GameConfig


# Handlers per event kind: {kind: method name on GameStateMachine}
TRANSITIONS: Dict[EventKind, str] = {
    EventKind.LAUNCH: "_on_launch",
    EventKind.BALL_LOST: "_on_ball_lost",
    EventKind.BLOCK_HIT: "_on_block_hit",
    EventKind.ALL_BLOCKS_CLEARED: "_on_all_blocks_cleared",
    EventKind.RESET_GAME: "_on_reset_game",
}


class GameStateMachine:
    """
    Rules engine for one game.

    Owns the static configuration and turns (state, event) pairs into
    new states. Holds no mutable game state itself; the caller keeps
    the current snapshot.

    Attributes:
        config: The configuration used for layout, scoring and resets
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config if config is not None else GameConfig()
        self._initial = GameState(
            ball_active=False,
            lives=self.config.initial_lives,
            score=0,
            bonus_multiplier=1,
            current_streak=0,
            last_streak_mark=0,
            blocks=build_canonical_layout(self.config),
        )

    def initial_state(self) -> GameState:
        """Return the canonical starting state."""
        return self._initial

    def can_apply(self, event: Any) -> bool:
        """
        Check if an event kind has a handler.

        Args:
            event: The event to check

        Returns:
            True if apply() would dispatch it, False if it is ignored
        """
        kind = getattr(event, "kind", None)
        return isinstance(kind, EventKind) and kind in TRANSITIONS

    def apply(self, state: GameState, event: Event) -> GameState:
        """
        Compute the state that follows ``event``.

        Args:
            state: The current snapshot
            event: The event raised by the engine adapter

        Returns:
            The next snapshot, or ``state`` itself when the event is a no-op
        """
        if not self.can_apply(event):
            return state
        method_name = TRANSITIONS[event.kind]
        handler: Callable[[GameState, Event], GameState] = getattr(self, method_name)
        return handler(state, event)

    # ── Transitions ──────────────────────────────────────────

    def _on_launch(self, state: GameState, event: Event) -> GameState:
        # the adapter only launches a resting ball; no guard here
        return replace(state, ball_active=True)

    def _on_ball_lost(self, state: GameState, event: Event) -> GameState:
        """
        Two-phase loss handling.

        The adapter may report the same loss on consecutive evaluation
        cycles before the ball is repositioned. ``ball_active`` latches
        the first report: it only deactivates the ball. The next report
        costs a life and drops the combo.
        """
        if state.ball_active:
            return replace(state, ball_active=False)
        if state.lives <= 0:
            return self._initial
        return reset_streak(replace(state, lives=state.lives - 1))

    def _on_block_hit(self, state: GameState, event: Event) -> GameState:
        key = getattr(event, "key", None)
        if not is_block_key(key) or not state.has_block(key):
            return state
        return register_hit(
            state.without_block(key),
            self.config.default_block_score,
            self.config.bonus_streak_floor,
        )

    def _on_all_blocks_cleared(self, state: GameState, event: Event) -> GameState:
        if state.blocks:
            return state
        if self.config.clear_policy is ClearPolicy.ENDLESS:
            return replace(state, ball_active=False, blocks=self._initial.blocks)
        return self._initial

    def _on_reset_game(self, state: GameState, event: Event) -> GameState:
        return self._initial
