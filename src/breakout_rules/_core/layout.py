# Area: Core
"""
breakout_rules._core.layout — Canonical block layout
=====================================================

Builds the fixed starting grid that every full reset restores.
"""

from __future__ import annotations
from typing import Tuple, TYPE_CHECKING

from .state import Block

if TYPE_CHECKING:
    from ..config import GameConfig


def block_key(row: int, column: int, columns: int) -> int:
    """Row-major linear index of a grid cell."""
    return row * columns + column


def build_canonical_layout(config: "GameConfig") -> Tuple[Block, ...]:
    """
    Build the starting grid of ``rows x columns`` blocks.

    Every block in a row shares the row's sprite frame. Blocks are
    returned in row-major order, so ``blocks[i].key == i``.
    """
    blocks = []
    for row in range(config.rows):
        frame = config.block_frames[row]
        for column in range(config.columns):
            blocks.append(Block(
                key=block_key(row, column, config.columns),
                x=column * config.column_width,
                y=row * config.row_spacing,
                frame=frame,
            ))
    return tuple(blocks)
