# Area: Core
"""
breakout_rules._core.snapshot — HUD snapshot builder
=====================================================

Builds the read-only, serializable projection of a GameState that the
engine adapter renders each frame.
"""

from typing import List, Optional

from .state import Block, GameState
from ..config import GameConfig
from ..types import BlockView, HudSnapshot


def build_hud_snapshot(
    state: GameState, config: Optional[GameConfig] = None
) -> HudSnapshot:
    """Build the HUD fields and block placements for one frame."""
    config = config if config is not None else GameConfig()
    return {
        "lives": state.lives,
        "score": state.score,
        "bonus_multiplier": state.bonus_multiplier,
        "current_streak": state.current_streak,
        "ball_active": state.ball_active,
        "blocks_remaining": state.blocks_remaining,
        "blocks": [_block_view(block, config) for block in state.blocks],
    }


def _block_view(block: Block, config: GameConfig) -> BlockView:
    origin_x, origin_y = config.layout_origin
    return {
        "key": block.key,
        "x": block.x,
        "y": block.y,
        "frame": block.frame,
        "screen_x": block.x + origin_x,
        "screen_y": block.y + origin_y,
    }


def format_hud_lines(state: GameState, lives_label: str = "VIE") -> List[str]:
    """HUD captions in on-screen order."""
    return [
        f"SCORE: {state.score}",
        f"BONUS: x{state.bonus_multiplier}",
        f"SEQUENCE: {state.current_streak}",
        f"{lives_label}: {state.lives}",
    ]
