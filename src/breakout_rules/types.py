"""
breakout_rules.types — TypedDict schemas for snapshot dictionaries
==================================================================

Documents the exact structure of the read-only dictionaries an engine
adapter receives each frame. All types are exported from the main
package:

    from breakout_rules import HudSnapshot, BlockView

Use __annotations__ to inspect fields:

    >>> BlockView.__annotations__
    {'key': int, 'x': float, 'y': float, 'frame': str, 'screen_x': float, 'screen_y': float}
"""

from typing import List, TypedDict


class BlockView(TypedDict):
    """Placement data for one block sprite.

    Fields
    ------
    key : int
        Block identity; pass it back in BLOCK_HIT.
    x, y : float
        Logical grid position.
    frame : str
        Sprite frame name, e.g. "blue1".
    screen_x, screen_y : float
        Grid position shifted by the configured layout origin.
    """
    key: int
    x: float
    y: float
    frame: str
    screen_x: float
    screen_y: float


class HudSnapshot(TypedDict):
    """Everything the adapter needs to render one frame.

    Fields
    ------
    lives : int
    score : int
    bonus_multiplier : int
    current_streak : int
    ball_active : bool
        False means the ball should stay snapped to the paddle.
    blocks_remaining : int
    blocks : List[BlockView]
    """
    lives: int
    score: int
    bonus_multiplier: int
    current_streak: int
    ball_active: bool
    blocks_remaining: int
    blocks: List[BlockView]
