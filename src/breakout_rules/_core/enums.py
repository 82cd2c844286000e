# Area: Core
"""
breakout_rules._core.enums — Rules Engine Enums
================================================

Defines the event kinds understood by the game state machine and the
policy applied when the last block of a round is destroyed.
"""

from enum import Enum


class EventKind(Enum):
    """
    Kinds of events that drive the game state machine.

    Events are raised by the engine adapter:
    - LAUNCH: pointer pressed while the ball rests on the paddle
    - BALL_LOST: ball crossed the bottom boundary of the world
    - BLOCK_HIT: ball collided with the block sprite carrying a key
    - ALL_BLOCKS_CLEARED: frame check found no blocks left
    - RESET_GAME: adapter observed lives <= 0 after a transition
    """
    LAUNCH = "LAUNCH"
    BALL_LOST = "BALL_LOST"
    BLOCK_HIT = "BLOCK_HIT"
    ALL_BLOCKS_CLEARED = "ALL_BLOCKS_CLEARED"
    RESET_GAME = "RESET_GAME"


class ClearPolicy(Enum):
    """
    What happens when the round is won.

    FULL_RESET -> back to the initial state (lives, score and bonus included)
    ENDLESS    -> only the block layout is rebuilt, the run continues
    """
    FULL_RESET = "full_reset"
    ENDLESS = "endless"
