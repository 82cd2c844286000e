# Area: Core
"""
breakout_rules._core.state — Game state snapshot
=================================================

Immutable snapshot of everything the rules engine knows about a game:
ball status, lives, score, combo bonus and the remaining blocks.

A new snapshot is produced for every event; nothing in here is ever
mutated in place.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Tuple


def is_block_key(key: Any) -> bool:
    """True for a plain int; bool is an int subclass but never a block key."""
    return isinstance(key, int) and not isinstance(key, bool)


@dataclass(frozen=True)
class Block:
    """One destructible grid cell."""
    key: int        # row-major index, unique for the block's lifetime
    x: float
    y: float
    frame: str      # sprite frame name, shared by the whole row


@dataclass(frozen=True)
class GameState:
    """
    Full state of one game.

    Attributes:
        ball_active: True once the ball is launched and not yet lost
        lives: Remaining attempts
        score: Cumulative points
        bonus_multiplier: Factor applied to every block score
        current_streak: Consecutive hits since the last ball loss
        last_streak_mark: Streak length at the last multiplier increase
        blocks: Remaining blocks in layout order
    """
    ball_active: bool = False
    lives: int = 3
    score: int = 0
    bonus_multiplier: int = 1
    current_streak: int = 0
    last_streak_mark: int = 0
    blocks: Tuple[Block, ...] = field(default_factory=tuple)

    # ── Block helpers ────────────────────────────────────────

    @property
    def block_keys(self) -> FrozenSet[int]:
        return frozenset(block.key for block in self.blocks)

    @property
    def blocks_remaining(self) -> int:
        return len(self.blocks)

    def has_block(self, key: int) -> bool:
        return any(block.key == key for block in self.blocks)

    def without_block(self, key: int) -> GameState:
        """Return a copy with the block carrying ``key`` removed."""
        return replace(
            self, blocks=tuple(b for b in self.blocks if b.key != key)
        )

    def is_game_over(self) -> bool:
        return self.lives <= 0

    def is_round_won(self) -> bool:
        return not self.blocks
